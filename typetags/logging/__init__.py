"""
Logging system for typetags.

Library modules obtain loggers through get_logger(); handlers are only
attached when an application calls configure_logging().
"""

from typetags.logging.config import (
    configure_logging,
    get_logger,
    is_debug_mode,
    set_debug_mode,
)
from typetags.logging.helpers import log_entry_exit

__all__ = [
    # Configuration
    "configure_logging",
    "get_logger",
    "set_debug_mode",
    "is_debug_mode",
    # Helper methods
    "log_entry_exit",
]
