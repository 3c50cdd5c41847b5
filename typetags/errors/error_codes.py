"""
Central registry of error codes for the typetags package.

Error codes follow the pattern: CATEGORY-ErrorName

Categories:
- INPUT: Invalid arguments handed to public operations
- NAMESPACE: Failures resolving a namespace to install into

Usage:
    from typetags.errors.error_codes import ErrorCodes

    raise InvalidArgumentError(
        message="Cannot locate destination scope to install to.",
        error_code=ErrorCodes.INPUT_MISSING_DESTINATION,
    )
"""


class ErrorCodes:
    """Central registry of error codes for consistent error handling."""

    # Input errors
    INPUT_MISSING_DESTINATION = "INPUT-MissingDestination"
    INPUT_READ_ONLY_DESTINATION = "INPUT-ReadOnlyDestination"

    # Namespace errors
    NAMESPACE_UNAVAILABLE = "NAMESPACE-Unavailable"
