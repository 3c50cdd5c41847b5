"""
Unit tests for typetags settings.

Tests verify:
- Defaults load correctly
- TYPETAGS_* env vars override defaults
- Log level validation works
- Cached getters honour clear_settings_cache()
"""

import os
from unittest.mock import patch

import pytest
from pydantic import ValidationError

from typetags.config.settings import (
    LoggingSettings,
    TypeTagSettings,
    clear_settings_cache,
    get_logging_settings,
    get_typetag_settings,
)


class TestTypeTagSettings:
    def test_defaults(self):
        settings = TypeTagSettings()
        assert settings.permissive_descriptors is False
        assert settings.warn_on_collisions is True

    def test_env_overrides(self):
        env = {
            "TYPETAGS_PERMISSIVE_DESCRIPTORS": "true",
            "TYPETAGS_WARN_ON_COLLISIONS": "0",
        }
        with patch.dict(os.environ, env, clear=False):
            settings = TypeTagSettings()
        assert settings.permissive_descriptors is True
        assert settings.warn_on_collisions is False

    def test_cached_until_cleared(self):
        first = get_typetag_settings()
        assert get_typetag_settings() is first

        with patch.dict(os.environ, {"TYPETAGS_PERMISSIVE_DESCRIPTORS": "true"}):
            assert get_typetag_settings().permissive_descriptors is False
            clear_settings_cache()
            assert get_typetag_settings().permissive_descriptors is True


class TestLoggingSettings:
    def test_default_level(self):
        """Default log level keeps the library quiet."""
        assert LoggingSettings().level == "WARNING"

    def test_default_format(self):
        settings = LoggingSettings()
        assert "%(asctime)s" in settings.format
        assert "%(levelname)" in settings.format

    def test_level_env_override_is_normalised(self):
        with patch.dict(os.environ, {"TYPETAGS_LOG_LEVEL": "debug"}):
            assert LoggingSettings().level == "DEBUG"

    def test_invalid_level_rejected(self):
        with pytest.raises(ValidationError):
            LoggingSettings(level="chatty")

    def test_getter_is_cached(self):
        assert get_logging_settings() is get_logging_settings()


class TestInvalidTypeTagSettings:
    def test_direct_construction_still_validates(self):
        with patch.dict(os.environ, {"TYPETAGS_WARN_ON_COLLISIONS": "loudly"}):
            with pytest.raises(ValidationError):
                TypeTagSettings()

    def test_getter_falls_back_to_defaults(self):
        env = {
            "TYPETAGS_PERMISSIVE_DESCRIPTORS": "maybe",
            "TYPETAGS_WARN_ON_COLLISIONS": "false",
        }
        with patch.dict(os.environ, env):
            settings = get_typetag_settings()

        assert settings.permissive_descriptors is False
        assert settings.warn_on_collisions is True
        assert get_typetag_settings() is settings
