"""
Exception hierarchy for the typetags package.

Predicates and tag lookups never raise; the classes below cover the few
operations that can fail, namely injecting the library into a destination
and resolving a namespace to install into.
"""

from typing import Any, Optional


class TypeTagsError(Exception):
    """
    Base exception class for all typetags errors.

    Attributes:
        message: Human-readable error message
        error_code: Optional error code for reference and documentation
        details: Optional dictionary with additional error details
        suggestion: Optional suggestion text for how to fix the error
    """

    def __init__(
        self,
        message: str,
        error_code: Optional[str] = None,
        details: Optional[dict[str, Any]] = None,
        suggestion: Optional[str] = None,
    ) -> None:
        self.message = message
        self.error_code = error_code
        self.details = details or {}
        self.suggestion = suggestion
        super().__init__(message)

    def to_dict(self) -> dict[str, Any]:
        """
        Serialize error to dictionary for CLI JSON output.

        Returns:
            Dictionary with all error information
        """
        return {
            "message": self.message,
            "error_code": self.error_code,
            "details": self.details,
            "suggestion": self.suggestion,
        }

    def __str__(self) -> str:
        if self.error_code:
            return f"[{self.error_code}] {self.message}"
        return self.message


# --- Validation Errors ---


class ValidationError(TypeTagsError):
    """
    Base class for errors caused by arguments passed to a public operation.

    The fix typically requires **changing the call** rather than the
    environment.
    """

    pass


class InvalidArgumentError(ValidationError):
    """
    Exception raised when an argument cannot be used at all.

    Examples:
        Missing destination:
            >>> raise InvalidArgumentError(
            ...     message="Cannot locate destination scope to install to.",
            ...     error_code="INPUT-MissingDestination",
            ...     details={"destination": None},
            ... )
    """

    pass


# --- Configuration Errors ---


class ConfigurationError(TypeTagsError):
    """
    Base class for errors related to the hosting environment or settings.
    """

    pass


class NamespaceUnavailableError(ConfigurationError):
    """Exception raised when a namespace to install into cannot be found."""

    pass
