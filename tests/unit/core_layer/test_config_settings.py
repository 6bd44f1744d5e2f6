"""
Unit Tests for Configuration Settings

Tests the settings loading, validation, and default values.
"""

from unittest.mock import patch

import pytest
from pydantic import ValidationError

from kvcache.core.config.settings import Settings, get_settings, reload_settings


@pytest.mark.unit
class TestSettingsInitialization:
    """Test Settings class initialization and validation."""

    def test_settings_has_required_attribute_groups(self):
        settings = Settings()

        assert hasattr(settings, "app")
        assert hasattr(settings, "redis")
        assert hasattr(settings, "logging")

    def test_app_name_default(self):
        """Test the namespace has a usable default."""
        with patch.dict("os.environ", {}, clear=True):
            settings = Settings(_env_file=None)

        assert settings.app.APP_NAME == "kvcache"

    def test_redis_settings_have_valid_defaults(self):
        with patch.dict("os.environ", {}, clear=True):
            settings = Settings(_env_file=None)

        assert settings.redis.REDIS_HOST == "localhost"
        assert settings.redis.REDIS_PORT == 6379
        assert settings.redis.REDIS_DB == 0
        assert settings.redis.REDIS_PASSWORD is None
        assert settings.redis.REDIS_MAX_CONNECTIONS > 0


@pytest.mark.unit
class TestSettingsEnvironment:
    """Test environment variable loading."""

    def test_app_name_from_environment(self):
        with patch.dict("os.environ", {"APP_NAME": "shop"}):
            settings = Settings(_env_file=None)

        assert settings.app.APP_NAME == "shop"

    def test_redis_port_from_environment(self):
        with patch.dict("os.environ", {"REDIS_PORT": "6380"}):
            settings = Settings(_env_file=None)

        assert settings.redis.REDIS_PORT == 6380

    def test_log_level_is_upper_cased(self):
        with patch.dict("os.environ", {"LOG_LEVEL": "debug"}):
            settings = Settings(_env_file=None)

        assert settings.logging.LOG_LEVEL == "DEBUG"


@pytest.mark.unit
class TestSettingsValidation:
    """Test fail-fast validation."""

    def test_invalid_log_level(self):
        with pytest.raises(ValidationError):
            Settings(_env_file=None, LOG_LEVEL="LOUD")

    def test_empty_app_name(self):
        with pytest.raises(ValidationError):
            Settings(_env_file=None, APP_NAME="  ")

    def test_invalid_port_type(self):
        with pytest.raises(ValidationError):
            Settings(_env_file=None, REDIS_PORT="abc")


@pytest.mark.unit
class TestSettingsSingleton:
    """Test get_settings / reload_settings."""

    def test_get_settings_is_singleton(self):
        assert get_settings() is get_settings()

    def test_reload_settings_replaces_instance(self):
        first = get_settings()
        with patch.dict("os.environ", {"APP_NAME": "reloaded"}):
            second = reload_settings()

        try:
            assert second is not first
            assert second.app.APP_NAME == "reloaded"
            assert get_settings() is second
        finally:
            reload_settings()
