"""
Logging utilities for the conditional package.

The package is a library, so loggers get a NullHandler and never configure
output themselves; applications decide where records go.
"""

import logging
from typing import Optional

from conditional.utils.config import get_debug_mode


def setup_logger(logger_name: str, debug_mode: Optional[bool] = None) -> logging.Logger:
    """
    Set up a package logger.

    Args:
        logger_name: Name of the logger
        debug_mode: Whether to enable debug mode (overrides config if provided)

    Returns:
        logging.Logger: Configured logger instance
    """
    # Get debug mode from config if not explicitly provided
    if debug_mode is None:
        debug_mode = get_debug_mode(logger_name)

    logger = logging.getLogger(logger_name)
    logger.setLevel(logging.DEBUG if debug_mode else logging.WARNING)

    if not any(isinstance(h, logging.NullHandler) for h in logger.handlers):
        logger.addHandler(logging.NullHandler())

    return logger
