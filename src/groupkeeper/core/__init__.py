"""Core Groupkeeper utilities.

This module exports core utilities for use throughout the application.
"""

from groupkeeper.core.config import Settings, get_settings
from groupkeeper.core.exceptions import (
    DuplicateNameError,
    GroupDirectoryError,
    NotFoundError,
    StoreError,
    ValidationError,
)
from groupkeeper.core.logging import (
    LoggingContext,
    clear_context,
    configure_logging,
    get_logger,
)

__all__ = [
    "Settings",
    "get_settings",
    "configure_logging",
    "get_logger",
    "LoggingContext",
    "clear_context",
    "GroupDirectoryError",
    "ValidationError",
    "DuplicateNameError",
    "NotFoundError",
    "StoreError",
]
