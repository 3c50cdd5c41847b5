"""Tests for the typetags exception hierarchy."""

from typetags.errors import (
    ConfigurationError,
    ErrorCodes,
    InvalidArgumentError,
    NamespaceUnavailableError,
    TypeTagsError,
    ValidationError,
)


class TestExceptionHierarchy:
    def test_invalid_argument_error(self):
        error = InvalidArgumentError(
            message="Cannot locate destination scope to install to.",
            error_code=ErrorCodes.INPUT_MISSING_DESTINATION,
            details={"destination": "None"},
        )

        assert isinstance(error, ValidationError)
        assert isinstance(error, TypeTagsError)
        assert error.details["destination"] == "None"
        assert str(error) == "[INPUT-MissingDestination] Cannot locate destination scope to install to."

    def test_namespace_unavailable_error(self):
        error = NamespaceUnavailableError("Missing namespace!")

        assert isinstance(error, ConfigurationError)
        assert error.details == {}
        assert error.error_code is None
        assert str(error) == "Missing namespace!"

    def test_to_dict(self):
        error = TypeTagsError(
            message="boom",
            error_code="INPUT-Test",
            details={"a": 1},
            suggestion="try again",
        )

        assert error.to_dict() == {
            "message": "boom",
            "error_code": "INPUT-Test",
            "details": {"a": 1},
            "suggestion": "try again",
        }

    def test_error_codes_follow_pattern(self):
        codes = [value for name, value in vars(ErrorCodes).items() if name.isupper()]
        assert codes
        for code in codes:
            category, _, name = code.partition("-")
            assert category.isupper() and name
