"""
typetags Settings Manager - Runtime configuration management.

Settings are read from environment variables (and a .env file, loaded at
package import) through pydantic-settings.
"""

from functools import lru_cache

from pydantic import Field, ValidationError, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from typetags.logging import get_logger

logger = get_logger(__name__)


class TypeTagSettings(BaseSettings):
    """Type inspection behaviour.

    Environment variables:
        TYPETAGS_PERMISSIVE_DESCRIPTORS: When true, is_a() compares a value
            against the tag of an unrecognised descriptor instead of
            reporting no match. Default: false
        TYPETAGS_WARN_ON_COLLISIONS: Log a warning at import when two
            categories share a tag. Default: true
    """

    permissive_descriptors: bool = Field(
        default=False,
        description="Fall back to tagging unrecognised is_a() descriptors",
    )
    warn_on_collisions: bool = Field(
        default=True,
        description="Warn when the type-tag table contains duplicate tags",
    )

    model_config = SettingsConfigDict(env_prefix="TYPETAGS_")


class LoggingSettings(BaseSettings):
    """Logging Settings."""

    level: str = Field(default="WARNING", description="Console logging level")
    format: str = Field(
        default="%(asctime)s | %(levelname)-8s | %(name)s | %(message)s",
        description="Console log format",
    )

    model_config = SettingsConfigDict(env_prefix="TYPETAGS_LOG_")

    @field_validator("level")
    @classmethod
    def valid_log_level(cls, v: str) -> str:
        """Validate that the logging level is valid."""
        valid_levels = ["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"]
        upper_v = v.upper()
        if upper_v not in valid_levels:
            raise ValueError(
                f"Invalid logging level: {v}. Must be one of {valid_levels}"
            )
        return upper_v


# Cache settings to avoid repeated env access on every predicate call
@lru_cache
def get_typetag_settings() -> TypeTagSettings:
    """
    Get type inspection settings with caching.

    Predicates read these on every call and must never raise, so invalid
    TYPETAGS_* values are reported once and replaced by the defaults.
    """
    try:
        return TypeTagSettings()
    except ValidationError as e:
        logger.warning(f"Ignoring invalid TYPETAGS_* settings, using defaults: {e}")
        return TypeTagSettings.model_construct()


@lru_cache
def get_logging_settings() -> LoggingSettings:
    """Get logging settings with caching."""
    return LoggingSettings()


# Clear settings cache (for testing)
def clear_settings_cache() -> None:
    """Clear settings cache."""
    get_typetag_settings.cache_clear()
    get_logging_settings.cache_clear()


__all__ = [
    "TypeTagSettings",
    "LoggingSettings",
    "get_typetag_settings",
    "get_logging_settings",
    "clear_settings_cache",
]
