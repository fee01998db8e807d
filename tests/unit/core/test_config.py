"""Tests for configuration management."""

from __future__ import annotations

from pathlib import Path

import pytest

from dnd_core.core.config import (
    Settings,
    clear_settings_cache,
    get_settings,
)
from dnd_core.core.exceptions import ConfigurationError


class TestSettings:
    """Tests for Settings configuration."""

    def test_default_settings(self, tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
        """Test default settings initialization."""
        monkeypatch.chdir(tmp_path)

        settings = Settings()

        assert settings.debug is False
        assert settings.log_level == "INFO"
        assert settings.json_logs is False
        assert settings.log_file is None

    def test_env_vars(
        self,
        tmp_path: Path,
        monkeypatch: pytest.MonkeyPatch,
        mock_env_vars: dict[str, str],
    ) -> None:
        """Test settings are read from DND_CORE_ environment variables."""
        monkeypatch.chdir(tmp_path)

        settings = Settings()

        assert settings.debug is True
        assert settings.log_level == "DEBUG"
        assert settings.json_logs is True

    def test_fields_are_logging_only(self) -> None:
        """Settings carry only what configure_logging_from_settings reads."""
        assert set(Settings.model_fields) == {"debug", "log_level", "json_logs", "log_file"}

    def test_log_file_directory_rejected(self, tmp_path: Path) -> None:
        """Test that a directory is not accepted as log file."""
        with pytest.raises(ConfigurationError) as exc_info:
            Settings(log_file=tmp_path)

        assert exc_info.value.details["config_key"] == "log_file"


class TestGetSettings:
    """Tests for get_settings singleton function."""

    def test_returns_settings_instance(self, tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
        """Test that get_settings returns a Settings instance."""
        monkeypatch.chdir(tmp_path)
        clear_settings_cache()

        assert isinstance(get_settings(), Settings)

    def test_caching(self, tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
        """Test that settings are cached."""
        monkeypatch.chdir(tmp_path)
        clear_settings_cache()

        settings1 = get_settings()
        settings2 = get_settings()

        assert settings1 is settings2

    def test_cache_clear(self, tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
        """Test that cache can be cleared."""
        monkeypatch.chdir(tmp_path)
        clear_settings_cache()

        settings1 = get_settings()
        clear_settings_cache()
        settings2 = get_settings()

        assert settings1 is not settings2

    def test_invalid_env_wrapped(self, tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
        """Test that invalid environment values raise ConfigurationError."""
        monkeypatch.setenv("DND_CORE_LOG_LEVEL", "LOUD")
        monkeypatch.chdir(tmp_path)
        clear_settings_cache()

        with pytest.raises(ConfigurationError) as exc_info:
            get_settings()

        assert "original_error" in exc_info.value.details
