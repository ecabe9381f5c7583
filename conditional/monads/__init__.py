"""Wrapper types for predicate-oriented optional values."""

from .conditional import Conditional, Present, Empty, of, empty, of_optional
from .maybe import Maybe, Some, Nothing, some, nothing, from_optional

__all__ = [
    # Conditional wrapper
    'Conditional', 'Present', 'Empty', 'of', 'empty', 'of_optional',
    # Maybe container
    'Maybe', 'Some', 'Nothing', 'some', 'nothing', 'from_optional',
]
