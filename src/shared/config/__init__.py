"""Configuration management module.

This module provides:
- Environment-based configuration with validation
- Action input settings read from INPUT_* variables
"""

from .settings import (
    DEFAULT_WAITER_DELAY,
    DEFAULT_WAITER_MAX_ATTEMPTS,
    AWSSettings,
    LogFormat,
    LogLevel,
    Settings,
    StabilityWaiterSettings,
)

__all__ = [
    # Main settings
    "Settings",
    # Enums
    "LogLevel",
    "LogFormat",
    # Component settings
    "AWSSettings",
    # Service-specific settings
    "StabilityWaiterSettings",
    # Waiter defaults
    "DEFAULT_WAITER_DELAY",
    "DEFAULT_WAITER_MAX_ATTEMPTS",
]
