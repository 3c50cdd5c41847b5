"""
Logging configuration for typetags.

The package never installs handlers on its own. Applications (and the CLI)
call configure_logging() to get console output, and optionally a rotating
log file.
"""

import logging
import logging.handlers
import sys
from pathlib import Path
from typing import Optional, Union

# Global debug flag
_DEBUG_MODE = False

# Name of the package-level logger every module logger hangs off
ROOT_LOGGER_NAME = "typetags"

_DEFAULT_FORMAT = "%(asctime)s | %(levelname)-8s | %(name)s | %(module)s.%(funcName)s:%(lineno)d | %(message)s"

_CONSOLE_FORMAT = "%(asctime)s | %(levelname)-8s | %(name)s | %(message)s"

_LOG_COLORS = {
    "DEBUG": "\033[94m",  # Blue
    "INFO": "\033[92m",  # Green
    "WARNING": "\033[93m",  # Yellow
    "ERROR": "\033[91m",  # Red
    "CRITICAL": "\033[91m\033[1m",  # Bold Red
    "RESET": "\033[0m",
}


class ColorFormatter(logging.Formatter):
    """Formatter that colours the level name for console output."""

    def format(self, record):
        levelname = record.levelname
        if levelname not in _LOG_COLORS:
            return super().format(record)

        # Handlers share records, so restore the plain name afterwards
        record.levelname = f"{_LOG_COLORS[levelname]}{levelname}{_LOG_COLORS['RESET']}"
        try:
            return super().format(record)
        finally:
            record.levelname = levelname


def get_logger(name: str) -> logging.Logger:
    """
    Get a logger with the specified name.

    Args:
        name: Logger name, typically __name__ of the calling module

    Returns:
        A logger instance
    """
    return logging.getLogger(name)


def set_debug_mode(enabled: bool) -> None:
    """
    Set the global debug mode flag.

    Args:
        enabled: True to enable debug mode, False to disable
    """
    global _DEBUG_MODE
    if _DEBUG_MODE == enabled:
        return
    _DEBUG_MODE = enabled

    package_logger = logging.getLogger(ROOT_LOGGER_NAME)
    if enabled:
        package_logger.setLevel(logging.DEBUG)
        package_logger.debug("Debug mode enabled")
    else:
        package_logger.setLevel(logging.NOTSET)


def is_debug_mode() -> bool:
    """Check if debug mode is currently enabled."""
    return _DEBUG_MODE


def configure_logging(
    log_dir: Optional[Union[str, Path]] = None,
    console_level: Optional[Union[int, str]] = None,
    file_level: int = logging.DEBUG,
    max_file_size_mb: int = 10,
    backup_count: int = 5,
    log_format: Optional[str] = None,
) -> logging.Logger:
    """
    Attach console (and optionally file) handlers to the typetags logger.

    Args:
        log_dir: Directory to store log files; no file handler when omitted
        console_level: Level for console output, defaults to LoggingSettings.level
        file_level: Logging level for file output
        max_file_size_mb: Maximum size of each log file in MB before rotation
        backup_count: Number of backup log files to keep
        log_format: Console format, defaults to LoggingSettings.format

    Returns:
        The configured package logger
    """
    from typetags.config.settings import get_logging_settings

    settings = get_logging_settings()
    if console_level is None:
        console_level = settings.level
    if isinstance(console_level, str):
        console_level = logging.getLevelName(console_level.upper())

    package_logger = logging.getLogger(ROOT_LOGGER_NAME)
    package_logger.setLevel(logging.DEBUG if is_debug_mode() else console_level)

    # Clear any existing handlers to avoid duplicates if reconfigured
    for handler in package_logger.handlers[:]:
        package_logger.removeHandler(handler)
        handler.close()

    console_handler = logging.StreamHandler(sys.stderr)
    console_handler.setLevel(logging.DEBUG if is_debug_mode() else console_level)
    console_handler.setFormatter(ColorFormatter(log_format or settings.format))
    package_logger.addHandler(console_handler)

    if log_dir:
        log_path = Path(log_dir)
        log_path.mkdir(exist_ok=True, parents=True)

        file_handler = logging.handlers.RotatingFileHandler(
            filename=log_path / "typetags.log",
            maxBytes=max_file_size_mb * 1024 * 1024,
            backupCount=backup_count,
        )
        file_handler.setLevel(file_level)
        file_handler.setFormatter(logging.Formatter(_DEFAULT_FORMAT))
        package_logger.addHandler(file_handler)
        package_logger.setLevel(min(package_logger.level, file_level))

    package_logger.debug(
        f"typetags logging initialized (console: {logging.getLevelName(console_level)}, "
        f"files: {log_dir or 'disabled'})"
    )
    return package_logger
