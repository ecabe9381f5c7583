"""
Error management for the conditional package.

This module provides the standardized error classes and error codes raised by
the wrapper types.
"""

from enum import Enum
from typing import Any, Optional

from conditional.utils.logging_utils import setup_logger

# Configure module logger
logger = setup_logger("conditional.errors")


class ErrorCode(Enum):
    """Standard error codes for the conditional package."""

    INVALID_ARGUMENT = "INVALID_ARGUMENT"  # Required argument or callback result was None
    NO_SUCH_ELEMENT = "NO_SUCH_ELEMENT"  # Value requested from an empty wrapper


class ConditionalError(Exception):
    """
    Base exception class for the conditional package.

    Carries a plain message and an error code; the string form is
    ``"<CODE>: <message>"``.
    """

    default_code = ErrorCode.INVALID_ARGUMENT

    def __init__(self, message: str, code: Optional[ErrorCode] = None):
        self.message = message
        self.code = code or self.default_code
        super().__init__(f"{self.code.value}: {message}")
        logger.debug(f"{type(self).__name__} raised: {self}")


class InvalidArgumentError(ConditionalError, ValueError):
    """A required argument (or a required callback result) was None."""

    default_code = ErrorCode.INVALID_ARGUMENT


class NoSuchElementError(ConditionalError, LookupError):
    """A value was required but the wrapper is empty."""

    default_code = ErrorCode.NO_SUCH_ELEMENT

    def __init__(self, message: str = "no value"):
        super().__init__(message, ErrorCode.NO_SUCH_ELEMENT)


def require_non_none(value: Any, name: str) -> Any:
    """
    Return ``value`` unchanged, raising InvalidArgumentError if it is None.

    Args:
        value: The argument to check
        name: Argument name used in the error message

    Returns:
        The value itself
    """
    if value is None:
        raise InvalidArgumentError(f"{name} must not be None")
    return value
