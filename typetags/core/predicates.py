"""
Type predicates.

Each ``is_*`` predicate compares the canonical tag of its argument with the
type-tag table entry for one category. There is no coercion and no
``isinstance`` check: ``is_number(True)`` and ``is_number(1.5)`` are both
False because ``bool`` and ``float`` report their own tags.
"""

from types import MappingProxyType
from typing import Any, Union

from typetags.config.settings import get_typetag_settings
from typetags.core.backref import TYPE_TAGS_BACKREF
from typetags.core.tags import TYPE_TAGS, TypeName, tag_of

# Marks the single-argument form of is_a()
_MISSING = object()


def is_a(descriptor: Any, value: Any = _MISSING) -> Union[str, bool]:
    """
    Generic type test.

    Called with one argument, returns the canonical tag of that argument.

    Called with two, returns True when the tag of ``value`` matches
    ``descriptor`` read as, in order:

    1. a literal tag string (``"[object int]"``)
    2. a type-name key (``"NUMBER"``)
    3. a constructor or sentinel (``int``, ``None``, ``UNDEFINED``)

    A descriptor that is none of these matches nothing, unless the
    ``permissive_descriptors`` setting is on, in which case the value is
    compared with the tag of the descriptor itself.

    Args:
        descriptor: Tag string, type-name key, or constructor
        value: Object to test

    Returns:
        The tag string in the one-argument form, otherwise a bool
    """
    if value is _MISSING:
        return tag_of(descriptor)

    value_tag = tag_of(value)
    if isinstance(descriptor, str):
        if value_tag == descriptor:
            return True
        if value_tag == TYPE_TAGS.get(descriptor):
            return True

    if get_typetag_settings().permissive_descriptors:
        return value_tag == TYPE_TAGS_BACKREF.matching_type(descriptor)
    return value_tag == TYPE_TAGS_BACKREF.lookup(descriptor)


def is_undefined(value: Any) -> bool:
    """
    Test whether a value is the UNDEFINED sentinel.

    Not the most direct way to check (``value is UNDEFINED`` is), but it
    follows suit with the other predicates.
    """
    return tag_of(value) == TYPE_TAGS[TypeName.UNDEFINED]


def is_function(value: Any) -> bool:
    """
    Test whether a value is a plain Python function or lambda.

    Builtins such as ``len``, bound methods and classes report other tags.
    """
    return tag_of(value) == TYPE_TAGS[TypeName.FUNCTION]


def is_boolean(value: Any) -> bool:
    return tag_of(value) == TYPE_TAGS[TypeName.BOOLEAN]


def is_object(value: Any) -> bool:
    """Test whether a value is a plain dict."""
    return tag_of(value) == TYPE_TAGS[TypeName.OBJECT]


def is_regexp(value: Any) -> bool:
    """Test whether a value is a compiled regular expression."""
    return tag_of(value) == TYPE_TAGS[TypeName.REGEXP]


def is_string(value: Any) -> bool:
    return tag_of(value) == TYPE_TAGS[TypeName.STRING]


def is_number(value: Any) -> bool:
    """
    Test whether a value is an int.

    Args:
        value: Any object to be tested

    Returns:
        True for ``int`` instances only; bool and float are excluded
    """
    return tag_of(value) == TYPE_TAGS[TypeName.NUMBER]


def is_array(value: Any) -> bool:
    """Test whether a value is a list. Tuples are not arrays."""
    return tag_of(value) == TYPE_TAGS[TypeName.ARRAY]


def is_error(value: Any) -> bool:
    """
    Test whether a value is a bare Exception instance.

    Subclasses such as ValueError report their own tag.
    """
    return tag_of(value) == TYPE_TAGS[TypeName.ERROR]


def is_null(value: Any) -> bool:
    """
    Test whether a value is None.

    UNDEFINED is not null.
    """
    return tag_of(value) == TYPE_TAGS[TypeName.NULL]


# Category key -> predicate, in table order
PREDICATES = MappingProxyType(
    {
        TypeName.UNDEFINED: is_undefined,
        TypeName.FUNCTION: is_function,
        TypeName.BOOLEAN: is_boolean,
        TypeName.OBJECT: is_object,
        TypeName.REGEXP: is_regexp,
        TypeName.STRING: is_string,
        TypeName.NUMBER: is_number,
        TypeName.ARRAY: is_array,
        TypeName.ERROR: is_error,
        TypeName.NULL: is_null,
    }
)
