"""
typetags - runtime type inspection through canonical type tags.

Example usage:
    >>> import typetags
    >>> typetags.is_a("NUMBER", 5)
    True
    >>> typetags.tag_of([1, 2, 3])
    '[object list]'
    >>> namespace = {}
    >>> _ = typetags.inject(namespace)
    >>> namespace["is_string"]("text")
    True
"""

from dotenv import load_dotenv

# Load environment variables from .env file before settings are read
load_dotenv()

from typetags.core import (  # noqa: E402
    LIBRARY,
    TYPE_TAGS,
    TYPE_TAGS_ACCURACY,
    TYPE_TAGS_BACKREF,
    TYPE_TAGS_QUESTIONABLE,
    UNDEFINED,
    TypeName,
    inject,
    install,
    is_a,
    is_array,
    is_boolean,
    is_error,
    is_function,
    is_null,
    is_number,
    is_object,
    is_regexp,
    is_string,
    is_undefined,
    tag_of,
)
from typetags.errors import InvalidArgumentError, NamespaceUnavailableError  # noqa: E402
from typetags.version import __version__  # noqa: E402

__all__ = [
    "TYPE_TAGS",
    "TYPE_TAGS_BACKREF",
    "TYPE_TAGS_ACCURACY",
    "TYPE_TAGS_QUESTIONABLE",
    "UNDEFINED",
    "TypeName",
    "LIBRARY",
    "tag_of",
    "is_a",
    "is_undefined",
    "is_function",
    "is_boolean",
    "is_object",
    "is_regexp",
    "is_string",
    "is_number",
    "is_array",
    "is_error",
    "is_null",
    "inject",
    "install",
    "InvalidArgumentError",
    "NamespaceUnavailableError",
    "__version__",
]
