"""Configuration management for dnd_core.

Settings are loaded with pydantic-settings from environment variables and an
optional ``.env`` file. They only control how the library's log output is
rendered; rules mechanics never read configuration.

Example:
    >>> from dnd_core.core.config import get_settings
    >>> settings = get_settings()
    >>> settings.log_level
    'INFO'

Environment Variables:
    DND_CORE_DEBUG: Enable debug mode (forces DEBUG log level)
    DND_CORE_LOG_LEVEL: Logging level (DEBUG, INFO, WARNING, ERROR, CRITICAL)
    DND_CORE_JSON_LOGS: Render logs as JSON
    DND_CORE_LOG_FILE: Optional log file path
"""

from __future__ import annotations

from functools import lru_cache
from pathlib import Path
from typing import Literal

from pydantic import Field, model_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from dnd_core.core.exceptions import ConfigurationError


class Settings(BaseSettings):
    """Library settings.

    Attributes:
        debug: Enable debug mode.
        log_level: Logging level.
        json_logs: Render logs as JSON instead of colored console output.
        log_file: Optional path of a log file.
    """

    model_config = SettingsConfigDict(
        env_prefix="DND_CORE_",
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    debug: bool = Field(
        default=False,
        description="Enable debug mode",
    )
    log_level: Literal["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"] = Field(
        default="INFO",
        description="Logging level",
    )
    json_logs: bool = Field(
        default=False,
        description="Render logs as JSON",
    )
    log_file: Path | None = Field(
        default=None,
        description="Optional log file path",
    )

    @model_validator(mode="after")
    def validate_log_file(self) -> "Settings":
        """Ensure the log file, if set, does not point at a directory.

        Raises:
            ConfigurationError: If log_file is an existing directory.
        """
        if self.log_file is not None and self.log_file.is_dir():
            raise ConfigurationError(
                f"log_file ({self.log_file}) is a directory",
                config_key="log_file",
            )
        return self


@lru_cache(maxsize=1)
def get_settings() -> Settings:
    """Get the cached settings singleton.

    Returns:
        The Settings instance.

    Raises:
        ConfigurationError: If configuration is invalid.
    """
    try:
        return Settings()
    except ConfigurationError:
        raise
    except Exception as exc:
        raise ConfigurationError(
            f"Failed to load settings: {exc}",
            details={"original_error": str(exc)},
        ) from exc


def clear_settings_cache() -> None:
    """Clear the settings cache, forcing a reload on next access."""
    get_settings.cache_clear()


__all__ = [
    "Settings",
    "get_settings",
    "clear_settings_cache",
]
