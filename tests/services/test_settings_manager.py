"""Unit tests for SettingsManager."""

import os
import tempfile
from pathlib import Path

import pytest

from quick_translate.services import SettingsManager


@pytest.fixture
def temp_env_dir():
    """Provide a temporary directory for .env files."""
    with tempfile.TemporaryDirectory() as tmpdir:
        yield Path(tmpdir)


@pytest.fixture
def clean_env():
    """Remove settings variables from the environment before and after test."""
    names = ("GEMINI_API_KEY", "GEMINI_MODEL", "LOG_LEVEL")
    old_values = {name: os.environ.pop(name, None) for name in names}
    yield
    for name, value in old_values.items():
        if value is not None:
            os.environ[name] = value
        else:
            os.environ.pop(name, None)


@pytest.fixture
def settings(temp_env_dir, clean_env):
    """Provide a SettingsManager with a test .env file."""
    env_file = temp_env_dir / ".env"
    env_file.write_text("GEMINI_API_KEY=\n")
    return SettingsManager(project_root=temp_env_dir)


class TestSettingsManagerAPIKey:
    """Tests for API key management from .env file."""

    def test_get_api_key_returns_none_when_empty(self, settings):
        """API key should be None when .env has empty value."""
        assert settings.get_gemini_api_key() is None

    def test_get_api_key_loaded_from_env_file(self, temp_env_dir, clean_env):
        """API key should be read from .env file."""
        (temp_env_dir / ".env").write_text("GEMINI_API_KEY=test-key-123\n")

        settings = SettingsManager(project_root=temp_env_dir)
        assert settings.get_gemini_api_key() == "test-key-123"

    def test_process_environment_wins_over_env_file(self, temp_env_dir, clean_env):
        """Existing environment variables are not overridden on first load."""
        (temp_env_dir / ".env").write_text("GEMINI_API_KEY=file-key\n")
        os.environ["GEMINI_API_KEY"] = "process-key"

        settings = SettingsManager(project_root=temp_env_dir)
        assert settings.get_gemini_api_key() == "process-key"

    def test_get_api_key_strips_whitespace(self, temp_env_dir, clean_env):
        """API key should strip leading/trailing whitespace."""
        os.environ["GEMINI_API_KEY"] = "  test-key  "

        settings = SettingsManager(project_root=temp_env_dir)
        assert settings.get_gemini_api_key() == "test-key"

    def test_get_api_key_returns_none_for_whitespace_only(self, temp_env_dir, clean_env):
        """API key should return None for whitespace-only value."""
        os.environ["GEMINI_API_KEY"] = "   "

        settings = SettingsManager(project_root=temp_env_dir)
        assert settings.get_gemini_api_key() is None

    def test_reload_env_updates_api_key(self, temp_env_dir, clean_env):
        """reload_env should pick up changes to .env file."""
        env_file = temp_env_dir / ".env"
        env_file.write_text("GEMINI_API_KEY=old-key\n")

        settings = SettingsManager(project_root=temp_env_dir)
        assert settings.get_gemini_api_key() == "old-key"

        env_file.write_text("GEMINI_API_KEY=new-key\n")
        settings.reload_env()
        assert settings.get_gemini_api_key() == "new-key"

    def test_missing_env_file_returns_none(self, temp_env_dir, clean_env):
        """SettingsManager should handle missing .env file gracefully."""
        settings = SettingsManager(project_root=temp_env_dir)
        assert settings.get_gemini_api_key() is None


class TestSettingsManagerOptions:
    """Tests for model name and log level settings."""

    def test_model_name_defaults(self, settings):
        assert settings.get_model_name() == "gemini-2.0-flash"

    def test_model_name_from_env_file(self, temp_env_dir, clean_env):
        (temp_env_dir / ".env").write_text("GEMINI_MODEL=gemini-2.5-pro\n")

        settings = SettingsManager(project_root=temp_env_dir)
        assert settings.get_model_name() == "gemini-2.5-pro"

    def test_log_level_defaults_to_info(self, settings):
        assert settings.get_log_level() == "INFO"

    def test_log_level_is_upper_cased(self, temp_env_dir, clean_env):
        os.environ["LOG_LEVEL"] = "debug"

        settings = SettingsManager(project_root=temp_env_dir)
        assert settings.get_log_level() == "DEBUG"
