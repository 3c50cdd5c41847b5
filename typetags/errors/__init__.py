"""
Error handling for typetags.

This module exposes the exception hierarchy and the error code registry.
"""

from typetags.errors.error_codes import ErrorCodes
from typetags.errors.exceptions import (
    ConfigurationError,
    InvalidArgumentError,
    NamespaceUnavailableError,
    TypeTagsError,
    ValidationError,
)

__all__ = [
    # Base exception
    "TypeTagsError",
    # Exception hierarchy
    "ValidationError",
    "InvalidArgumentError",
    "ConfigurationError",
    "NamespaceUnavailableError",
    # Error codes
    "ErrorCodes",
]
