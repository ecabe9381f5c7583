"""
Utilities module for the conditional package.

This package provides the configuration, logging and error plumbing used by
the wrapper types.
"""

from conditional.utils.config import get_debug_mode
from conditional.utils.error_manager import (
    ErrorCode,
    ConditionalError,
    InvalidArgumentError,
    NoSuchElementError,
    require_non_none,
)
from conditional.utils.logging_utils import setup_logger

__all__ = [
    "get_debug_mode",
    "setup_logger",
    "ErrorCode",
    "ConditionalError",
    "InvalidArgumentError",
    "NoSuchElementError",
    "require_non_none",
]
