"""Maybe container used at the optional-value interop boundary."""

from __future__ import annotations

from abc import ABC, abstractmethod
from dataclasses import dataclass
from typing import Any, Callable, Generic, Iterator, Optional, TypeVar

T = TypeVar('T')
U = TypeVar('U')


class Maybe(ABC, Generic[T]):
    """
    A value that might be present (Some) or absent (Nothing).

    Conditional converts from and to this type in ``of_optional``,
    ``flat_map_optional`` and ``optional``.
    """

    @abstractmethod
    def is_some(self) -> bool:
        """Check if this contains a value."""

    @abstractmethod
    def is_nothing(self) -> bool:
        """Check if this is empty."""

    @abstractmethod
    def map(self, f: Callable[[T], U]) -> Maybe[U]:
        """Transform the value if present."""

    @abstractmethod
    def filter(self, predicate: Callable[[T], bool]) -> Maybe[T]:
        """Keep the value only if the predicate holds."""

    @abstractmethod
    def get_or_else(self, default: T) -> T:
        """Get the value or a default."""

    @abstractmethod
    def to_optional(self) -> Optional[T]:
        """Convert to a plain value-or-None."""

    def __iter__(self) -> Iterator[T]:
        if self.is_some():
            yield self.to_optional()  # type: ignore


@dataclass(frozen=True)
class Some(Maybe[T]):
    """Some variant containing a value."""
    value: T

    def is_some(self) -> bool:
        return True

    def is_nothing(self) -> bool:
        return False

    def map(self, f: Callable[[T], U]) -> Maybe[U]:
        return from_optional(f(self.value))

    def filter(self, predicate: Callable[[T], bool]) -> Maybe[T]:
        return self if predicate(self.value) else Nothing()

    def get_or_else(self, default: T) -> T:
        return self.value

    def to_optional(self) -> Optional[T]:
        return self.value


@dataclass(frozen=True)
class Nothing(Maybe[T]):
    """Nothing variant representing absence of value."""

    def is_some(self) -> bool:
        return False

    def is_nothing(self) -> bool:
        return True

    def map(self, f: Callable[[T], U]) -> Maybe[U]:
        return Nothing()

    def filter(self, predicate: Callable[[T], bool]) -> Maybe[T]:
        return self

    def get_or_else(self, default: T) -> T:
        return default

    def to_optional(self) -> Optional[T]:
        return None

    def __eq__(self, other):
        return isinstance(other, Nothing)

    def __hash__(self):
        return hash(None)


def some(value: T) -> Some[T]:
    """Create a Some value."""
    return Some(value)


def nothing() -> Nothing[Any]:
    """Create a Nothing value."""
    return Nothing()


def from_optional(opt: Optional[T]) -> Maybe[T]:
    """Convert a value-or-None to Maybe."""
    return Some(opt) if opt is not None else Nothing()
