"""
typetags Configuration Package - runtime settings with environment overrides.
"""

from .settings import (
    LoggingSettings,
    TypeTagSettings,
    clear_settings_cache,
    get_logging_settings,
    get_typetag_settings,
)

__all__ = [
    "TypeTagSettings",
    "LoggingSettings",
    "get_typetag_settings",
    "get_logging_settings",
    "clear_settings_cache",
]
