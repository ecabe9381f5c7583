"""
conditional: an optional-value wrapper that resolves predicates to verdicts.

``Conditional.of(user).map(get_email).or_else_false(is_valid)`` answers
True or False without a chain of None checks.
"""

__version__ = "0.1.0"

from conditional.monads import (
    Conditional,
    Present,
    Empty,
    of,
    empty,
    of_optional,
    Maybe,
    Some,
    Nothing,
    some,
    nothing,
    from_optional,
)
from conditional.utils.error_manager import (
    ErrorCode,
    ConditionalError,
    InvalidArgumentError,
    NoSuchElementError,
)

__all__ = [
    "Conditional",
    "Present",
    "Empty",
    "of",
    "empty",
    "of_optional",
    "Maybe",
    "Some",
    "Nothing",
    "some",
    "nothing",
    "from_optional",
    "ErrorCode",
    "ConditionalError",
    "InvalidArgumentError",
    "NoSuchElementError",
]
