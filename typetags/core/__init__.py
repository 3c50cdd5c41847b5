"""
Core type inspection: tag table, back-references, self-check, predicates
and namespace injection.
"""

from typetags.core.accuracy import (
    TYPE_TAGS_ACCURACY,
    TYPE_TAGS_QUESTIONABLE,
    TYPE_TAGS_REPORT,
    AccuracyReport,
    check_accuracy,
)
from typetags.core.backref import TYPE_TAGS_BACKREF, BackReferenceTable, descriptor_key
from typetags.core.injector import LIBRARY, inject, install
from typetags.core.predicates import (
    PREDICATES,
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
)
from typetags.core.surface import ExposedSurface
from typetags.core.tags import (
    CATEGORY_CONSTRUCTORS,
    TYPE_TAGS,
    UNDEFINED,
    TypeName,
    UndefinedType,
    default_instance,
    tag_of,
)

__all__ = [
    # Tag table
    "TYPE_TAGS",
    "TypeName",
    "CATEGORY_CONSTRUCTORS",
    "UNDEFINED",
    "UndefinedType",
    "default_instance",
    "tag_of",
    # Back-references
    "TYPE_TAGS_BACKREF",
    "BackReferenceTable",
    "descriptor_key",
    # Self-check
    "TYPE_TAGS_ACCURACY",
    "TYPE_TAGS_QUESTIONABLE",
    "TYPE_TAGS_REPORT",
    "AccuracyReport",
    "check_accuracy",
    # Predicates
    "PREDICATES",
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
    # Injection
    "ExposedSurface",
    "LIBRARY",
    "inject",
    "install",
]
