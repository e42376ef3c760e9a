"""
Unit tests for configuration module.
"""
import os
from unittest.mock import patch

import pytest

from src.core import ApiFormat, Settings, get_settings


class TestSettings:
    """Tests for Settings class."""

    def test_default_values(self, clean_environment):
        """Test that default values are set correctly."""
        settings = Settings(_env_file=None)

        assert settings.app_name == "DeckSmith"
        assert settings.host == "0.0.0.0"
        assert settings.port == 6767
        assert settings.debug is False
        assert settings.megallm_model == "claude-opus-4-5-20251101"
        assert settings.megallm_api_url == "https://api.anthropic.com/v1/messages"
        assert settings.request_timeout_seconds == 120
        assert settings.rate_limit_requests == 10
        assert settings.rate_limit_period_seconds == 60

    def test_port_validation(self):
        """Test that port validation works."""
        with pytest.raises(ValueError):
            Settings(port=0)  # Below minimum

        with pytest.raises(ValueError):
            Settings(port=70000)  # Above maximum

        settings = Settings(port=8080)
        assert settings.port == 8080

    @patch.dict(os.environ, {
        "MEGALLM_API_KEY": "env-key",
        "MEGALLM_MODEL": "gpt-4o",
        "MEGALLM_API_URL": "https://ai.megallm.io/v1/chat/completions",
        "PORT": "9000",
    })
    def test_environment_overrides(self):
        """Test that every setting can be overridden from the environment."""
        settings = Settings()

        assert settings.megallm_api_key == "env-key"
        assert settings.megallm_model == "gpt-4o"
        assert settings.megallm_api_url == "https://ai.megallm.io/v1/chat/completions"
        assert settings.port == 9000
        assert settings.is_configured is True

    def test_missing_key_is_unconfigured(self, clean_environment):
        """Test that no key means the service is unconfigured."""
        settings = Settings(_env_file=None)

        assert settings.megallm_api_key is None
        assert settings.is_configured is False

    def test_blank_key_is_unconfigured(self):
        """Test that a whitespace-only key counts as missing."""
        settings = Settings(megallm_api_key="   ")

        assert settings.megallm_api_key is None
        assert settings.is_configured is False

    def test_api_format_anthropic(self):
        """Test format detection for the Anthropic host."""
        settings = Settings(megallm_api_url="https://api.anthropic.com/v1/messages")
        assert settings.api_format == ApiFormat.ANTHROPIC

    def test_api_format_openai(self):
        """Test format detection for any other host."""
        settings = Settings(megallm_api_url="https://ai.megallm.io/v1/chat/completions")
        assert settings.api_format == ApiFormat.OPENAI

    def test_env_file_settings(self):
        """Test that .env loading is configured through model_config."""
        assert Settings.model_config["env_file"] == ".env"
        assert Settings.model_config["env_file_encoding"] == "utf-8"
        assert Settings.model_config["extra"] == "ignore"

    def test_reads_env_file(self, clean_environment, tmp_path):
        """Test that values are read from an env file, case-insensitively."""
        env_file = tmp_path / ".env"
        env_file.write_text("megallm_model=from-file\nUNRELATED_SETTING=1\n", encoding="utf-8")

        settings = Settings(_env_file=env_file)

        assert settings.megallm_model == "from-file"


class TestGetSettings:
    """Tests for get_settings function."""

    def test_returns_settings_instance(self):
        """Test that get_settings returns a Settings instance."""
        settings = get_settings()
        assert isinstance(settings, Settings)

    def test_cached_instance(self):
        """Test that get_settings returns the same cached instance."""
        settings1 = get_settings()
        settings2 = get_settings()
        assert settings1 is settings2
