import pytest
from pydantic import ValidationError
from prediction_webhooks.config.settings import Settings, get_settings


class TestSettings:
    """Test cases for Settings"""

    def test_default_log_level(self, monkeypatch):
        """Test log level defaults to INFO"""
        monkeypatch.delenv("PREDICTION_WEBHOOKS_LOG_LEVEL", raising=False)
        assert Settings().log_level == "INFO"

    def test_log_level_from_env(self, monkeypatch):
        """Test log level is read from the prefixed env var and upper-cased"""
        monkeypatch.setenv("PREDICTION_WEBHOOKS_LOG_LEVEL", "debug")
        assert Settings().log_level == "DEBUG"

    def test_invalid_log_level(self, monkeypatch):
        """Test an unknown log level fails validation"""
        monkeypatch.setenv("PREDICTION_WEBHOOKS_LOG_LEVEL", "LOUD")
        with pytest.raises(ValidationError) as exc_info:
            Settings()

        assert "Invalid log level" in str(exc_info.value)

    def test_get_settings_is_cached(self):
        """Test get_settings returns the same instance"""
        assert get_settings() is get_settings()
