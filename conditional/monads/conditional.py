"""Conditional: an optional value that resolves predicates to verdicts."""

from __future__ import annotations

from abc import ABC, abstractmethod
from dataclasses import dataclass
from typing import Any, Callable, Generic, Iterator, Optional, TypeVar

from conditional.monads.maybe import Maybe, Some, Nothing
from conditional.utils.error_manager import NoSuchElementError, require_non_none
from conditional.utils.logging_utils import setup_logger

logger = setup_logger(__name__)

T = TypeVar('T')
U = TypeVar('U')

# Marks an omitted exception_supplier, so an explicit None can be rejected
_DEFAULT_ERROR: Any = object()


class Conditional(ABC, Generic[T]):
    """
    Zero-or-one value queried through predicates.

    Like an optional container, but the terminal operations answer True or
    False instead of handing the value out. Present and Empty are the two
    variants; both are immutable and compare structurally.

    Every callable argument is required: passing None raises
    InvalidArgumentError before anything else happens, on both variants.
    Callables are never invoked on the Empty variant except the ones that
    exist for that case (``or_`` supplier, ``or_else_get`` supplier,
    ``if_present_or_else`` empty action, ``or_else_raise`` exception supplier).
    """

    @staticmethod
    def empty() -> Conditional[Any]:
        """Create an empty Conditional."""
        return Empty()

    @staticmethod
    def of(value: Optional[T]) -> Conditional[T]:
        """Wrap a value; None becomes empty."""
        return Present(value) if value is not None else Empty()

    @staticmethod
    def of_optional(maybe: Maybe[T]) -> Conditional[T]:
        """Convert a Maybe. The Maybe itself must not be None."""
        require_non_none(maybe, "maybe")
        return Conditional.of(maybe.to_optional())

    # Queries

    @abstractmethod
    def is_present(self) -> bool:
        """Check if this holds a value."""

    def is_empty(self) -> bool:
        """Check if this holds no value."""
        return not self.is_present()

    def non_null(self) -> bool:
        return self.is_present()

    def is_null(self) -> bool:
        return self.is_empty()

    def has(self) -> bool:
        return self.is_present()

    def has_no(self) -> bool:
        return self.is_empty()

    @abstractmethod
    def test(self, predicate: Callable[[T], Any]) -> bool:
        """
        Apply the predicate to the value.

        Raises:
            NoSuchElementError: if empty
        """

    # Side effects

    @abstractmethod
    def if_present(self, predicate: Callable[[T], Any], action: Callable[[bool], Any]) -> None:
        """Pass the predicate verdict to ``action`` if a value is held."""

    def if_has(self, predicate: Callable[[T], Any], action: Callable[[bool], Any]) -> None:
        self.if_present(predicate, action)

    @abstractmethod
    def if_present_or_else(
        self,
        predicate: Callable[[T], Any],
        action: Callable[[bool], Any],
        empty_action: Callable[[], Any],
    ) -> None:
        """Pass the predicate verdict to ``action``, or run ``empty_action``."""

    def if_has_or_else(
        self,
        predicate: Callable[[T], Any],
        action: Callable[[bool], Any],
        empty_action: Callable[[], Any],
    ) -> None:
        self.if_present_or_else(predicate, action, empty_action)

    # Transformations

    @abstractmethod
    def filter(self, predicate: Callable[[T], Any]) -> Conditional[T]:
        """Keep the value only if the predicate holds."""

    @abstractmethod
    def evaluate(self, evaluator: Callable[[Conditional[T]], Any]) -> Conditional[T]:
        """
        Like ``filter``, but the evaluator receives this Conditional.

        This lets a check be written with the wrapper's own vocabulary, e.g.
        ``c.evaluate(lambda c: c.map(get_name).or_else_false(is_valid))``.
        """

    @abstractmethod
    def map(self, mapper: Callable[[T], Optional[U]]) -> Conditional[U]:
        """Transform the value; a None result becomes empty."""

    @abstractmethod
    def flat_map(self, mapper: Callable[[T], Conditional[U]]) -> Conditional[U]:
        """Transform the value into another Conditional (monadic bind)."""

    def flat_map_optional(self, mapper: Callable[[T], Maybe[U]]) -> Conditional[U]:
        """Transform the value into a Maybe and convert it."""
        require_non_none(mapper, "mapper")
        return self.flat_map(
            lambda value: Conditional.of_optional(require_non_none(mapper(value), "mapper result"))
        )

    @abstractmethod
    def or_(self, supplier: Callable[[], Conditional[T]]) -> Conditional[T]:
        """Return this if present, else the supplied Conditional."""

    # Boolean resolution

    @abstractmethod
    def or_else(self, predicate: Callable[[T], Any], other: bool) -> bool:
        """Predicate verdict if present, else ``other``."""

    def or_else_true(self, predicate: Callable[[T], Any]) -> bool:
        return self.or_else(predicate, True)

    def or_else_false(self, predicate: Callable[[T], Any]) -> bool:
        return self.or_else(predicate, False)

    @abstractmethod
    def or_else_get(self, predicate: Callable[[T], Any], supplier: Callable[[], Optional[bool]]) -> bool:
        """Predicate verdict if present, else the supplier's (non-None) result."""

    @abstractmethod
    def or_else_raise(
        self,
        predicate: Callable[[T], Any],
        exception_supplier: Callable[[], BaseException] = _DEFAULT_ERROR,
    ) -> bool:
        """
        Predicate verdict if present, else raise.

        Args:
            predicate: Applied to the value
            exception_supplier: Builds the exception raised when empty.
                Omitted means NoSuchElementError; an explicit None is rejected.
        """

    # Escape hatches

    @abstractmethod
    def optional(self) -> Maybe[T]:
        """Convert to a Maybe."""

    @abstractmethod
    def stream(self) -> Iterator[T]:
        """Single-pass iterator over zero or one element."""

    def __iter__(self) -> Iterator[T]:
        return self.stream()


@dataclass(frozen=True)
class Present(Conditional[T]):
    """Variant holding a value."""
    value: T

    def __post_init__(self):
        require_non_none(self.value, "value")

    def is_present(self) -> bool:
        return True

    def test(self, predicate: Callable[[T], Any]) -> bool:
        require_non_none(predicate, "predicate")
        return bool(predicate(self.value))

    def if_present(self, predicate: Callable[[T], Any], action: Callable[[bool], Any]) -> None:
        require_non_none(predicate, "predicate")
        require_non_none(action, "action")
        action(bool(predicate(self.value)))

    def if_present_or_else(
        self,
        predicate: Callable[[T], Any],
        action: Callable[[bool], Any],
        empty_action: Callable[[], Any],
    ) -> None:
        require_non_none(predicate, "predicate")
        require_non_none(action, "action")
        require_non_none(empty_action, "empty_action")
        action(bool(predicate(self.value)))

    def filter(self, predicate: Callable[[T], Any]) -> Conditional[T]:
        require_non_none(predicate, "predicate")
        return self if predicate(self.value) else Empty()

    def evaluate(self, evaluator: Callable[[Conditional[T]], Any]) -> Conditional[T]:
        require_non_none(evaluator, "evaluator")
        return self if evaluator(self) else Empty()

    def map(self, mapper: Callable[[T], Optional[U]]) -> Conditional[U]:
        require_non_none(mapper, "mapper")
        return Conditional.of(mapper(self.value))

    def flat_map(self, mapper: Callable[[T], Conditional[U]]) -> Conditional[U]:
        require_non_none(mapper, "mapper")
        return require_non_none(mapper(self.value), "mapper result")

    def or_(self, supplier: Callable[[], Conditional[T]]) -> Conditional[T]:
        require_non_none(supplier, "supplier")
        return self

    def or_else(self, predicate: Callable[[T], Any], other: bool) -> bool:
        require_non_none(predicate, "predicate")
        return bool(predicate(self.value))

    def or_else_get(self, predicate: Callable[[T], Any], supplier: Callable[[], Optional[bool]]) -> bool:
        require_non_none(predicate, "predicate")
        require_non_none(supplier, "supplier")
        return bool(predicate(self.value))

    def or_else_raise(
        self,
        predicate: Callable[[T], Any],
        exception_supplier: Callable[[], BaseException] = _DEFAULT_ERROR,
    ) -> bool:
        require_non_none(predicate, "predicate")
        require_non_none(exception_supplier, "exception_supplier")
        return bool(predicate(self.value))

    def optional(self) -> Maybe[T]:
        return Some(self.value)

    def stream(self) -> Iterator[T]:
        return iter((self.value,))

    def __hash__(self):
        return hash(self.value)

    def __str__(self):
        return f"Conditional[{self.value}]"


@dataclass(frozen=True)
class Empty(Conditional[T]):
    """Variant holding no value."""

    def is_present(self) -> bool:
        return False

    def test(self, predicate: Callable[[T], Any]) -> bool:
        require_non_none(predicate, "predicate")
        raise NoSuchElementError()

    def if_present(self, predicate: Callable[[T], Any], action: Callable[[bool], Any]) -> None:
        require_non_none(predicate, "predicate")
        require_non_none(action, "action")

    def if_present_or_else(
        self,
        predicate: Callable[[T], Any],
        action: Callable[[bool], Any],
        empty_action: Callable[[], Any],
    ) -> None:
        require_non_none(predicate, "predicate")
        require_non_none(action, "action")
        require_non_none(empty_action, "empty_action")
        empty_action()

    def filter(self, predicate: Callable[[T], Any]) -> Conditional[T]:
        require_non_none(predicate, "predicate")
        return self

    def evaluate(self, evaluator: Callable[[Conditional[T]], Any]) -> Conditional[T]:
        require_non_none(evaluator, "evaluator")
        return self

    def map(self, mapper: Callable[[T], Optional[U]]) -> Conditional[U]:
        require_non_none(mapper, "mapper")
        return Empty()

    def flat_map(self, mapper: Callable[[T], Conditional[U]]) -> Conditional[U]:
        require_non_none(mapper, "mapper")
        return Empty()

    def or_(self, supplier: Callable[[], Conditional[T]]) -> Conditional[T]:
        require_non_none(supplier, "supplier")
        return require_non_none(supplier(), "supplier result")

    def or_else(self, predicate: Callable[[T], Any], other: bool) -> bool:
        require_non_none(predicate, "predicate")
        return bool(other)

    def or_else_get(self, predicate: Callable[[T], Any], supplier: Callable[[], Optional[bool]]) -> bool:
        require_non_none(predicate, "predicate")
        require_non_none(supplier, "supplier")
        return bool(require_non_none(supplier(), "supplier result"))

    def or_else_raise(
        self,
        predicate: Callable[[T], Any],
        exception_supplier: Callable[[], BaseException] = _DEFAULT_ERROR,
    ) -> bool:
        require_non_none(predicate, "predicate")
        require_non_none(exception_supplier, "exception_supplier")
        if exception_supplier is _DEFAULT_ERROR:
            raise NoSuchElementError()
        exception = require_non_none(exception_supplier(), "exception_supplier result")
        logger.debug(f"or_else_raise() called on an empty Conditional, raising {type(exception).__name__}")
        raise exception

    def optional(self) -> Maybe[T]:
        return Nothing()

    def stream(self) -> Iterator[T]:
        return iter(())

    def __eq__(self, other):
        return isinstance(other, Empty)

    def __hash__(self):
        return 0

    def __str__(self):
        return "Conditional.empty"


def of(value: Optional[T]) -> Conditional[T]:
    """Wrap a value; None becomes empty."""
    return Conditional.of(value)


def empty() -> Conditional[Any]:
    """Create an empty Conditional."""
    return Conditional.empty()


def of_optional(maybe: Maybe[T]) -> Conditional[T]:
    """Convert a Maybe to a Conditional."""
    return Conditional.of_optional(maybe)
