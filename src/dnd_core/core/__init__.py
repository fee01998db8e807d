"""Core module providing configuration, logging, constants and exceptions.

Exports:
    Exceptions:
        DndCoreError: Base exception for all library errors.
        ConfigurationError: Configuration-related errors.
        ValidationError: Input validation errors.
        OutOfRangeError: Bounded value constructed outside its domain.
        UnknownNameError: Unknown ability or skill name.

    Configuration:
        Settings: Library settings class.
        get_settings: Get the settings singleton.
        clear_settings_cache: Force settings reload.

    Logging:
        configure_logging: Set up structured logging.
        configure_logging_from_settings: Set up logging from Settings.
        get_logger: Get a configured logger instance.
        bind_context: Add context to log entries.
        clear_context: Clear logging context.
"""

from __future__ import annotations

from dnd_core.core.config import (
    Settings,
    clear_settings_cache,
    get_settings,
)
from dnd_core.core.exceptions import (
    ConfigurationError,
    DndCoreError,
    OutOfRangeError,
    UnknownNameError,
    ValidationError,
)
from dnd_core.core.logging import (
    bind_context,
    clear_context,
    configure_logging,
    configure_logging_from_settings,
    get_logger,
)


__all__ = [
    # Exceptions
    "DndCoreError",
    "ConfigurationError",
    "ValidationError",
    "OutOfRangeError",
    "UnknownNameError",
    # Configuration
    "Settings",
    "get_settings",
    "clear_settings_cache",
    # Logging
    "configure_logging",
    "configure_logging_from_settings",
    "get_logger",
    "bind_context",
    "clear_context",
]
