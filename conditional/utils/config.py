"""
Configuration module for the conditional package.

This module provides centralized debug settings for the package's loggers.
Settings come from environment variables with per-module overrides.
"""

import os

_TRUTHY = ["true", "1", "yes"]

# Default debug mode setting - can be overridden by environment variable
DEFAULT_DEBUG_MODE = os.environ.get("CONDITIONAL_DEBUG", "false").lower() in _TRUTHY

# Per-module debug settings - these allow fine-grained control
# Defaults to DEFAULT_DEBUG_MODE if not specified
MODULE_DEBUG_SETTINGS = {
    "conditional": DEFAULT_DEBUG_MODE,
    "errors": DEFAULT_DEBUG_MODE,
}


def get_debug_mode(module_name: str) -> bool:
    """
    Get the debug mode setting for a specific module.

    Args:
        module_name: Name of the module, either a short key such as
            "errors" or a dotted logger name such as "conditional.errors"

    Returns:
        bool: Whether debug mode is enabled for this module
    """
    key = module_name.rsplit(".", 1)[-1]

    # First check if there's a specific environment variable for this module
    env_var = f"CONDITIONAL_DEBUG_{key.upper()}"
    if env_var in os.environ:
        return os.environ[env_var].lower() in _TRUTHY

    # Then check if there's a setting in MODULE_DEBUG_SETTINGS
    if key in MODULE_DEBUG_SETTINGS:
        return MODULE_DEBUG_SETTINGS[key]

    # Fall back to default debug mode
    return DEFAULT_DEBUG_MODE
