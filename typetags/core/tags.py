"""
Canonical type tags and the type-tag table.

A canonical tag is the string ``"[object <name>]"`` built from a value's exact
type. Builtins use their bare name (``"[object int]"``); every other class is
qualified by its module (``"[object re.Pattern]"``), so a third-party class
named ``list`` does not pass for a list. Subclasses get their own tag and
``bool`` is not tagged as ``int``.

The table below is computed from freshly constructed instances rather than
written out by hand, so it always reflects what the running interpreter
reports.
"""

import re
import types
from types import MappingProxyType
from typing import Any, Mapping


class UndefinedType:
    """Type of the ``UNDEFINED`` sentinel: a value that was never supplied.

    ``None`` is a real value in Python, so "absent" needs its own singleton
    to keep the NULL and UNDEFINED categories apart.
    """

    __slots__ = ()
    _instance = None

    def __new__(cls) -> "UndefinedType":
        if cls._instance is None:
            cls._instance = super().__new__(cls)
        return cls._instance

    def __repr__(self) -> str:
        return "undefined"

    def __bool__(self) -> bool:
        return False

    def __reduce__(self):
        return (UndefinedType, ())


UNDEFINED = UndefinedType()


def tag_of(value: Any) -> str:
    """
    Compute the canonical tag of any value.

    Args:
        value: Any object, including None and UNDEFINED

    Returns:
        The tag string, e.g. ``"[object int]"`` for ``5``
    """
    value_type = type(value)
    if value_type.__module__ == "builtins":
        return f"[object {value_type.__qualname__}]"
    return f"[object {value_type.__module__}.{value_type.__qualname__}]"


class TypeName:
    """The fixed set of type-name keys, in table order."""

    UNDEFINED = "UNDEFINED"
    FUNCTION = "FUNCTION"
    BOOLEAN = "BOOLEAN"
    OBJECT = "OBJECT"
    REGEXP = "REGEXP"
    STRING = "STRING"
    NUMBER = "NUMBER"
    ARRAY = "ARRAY"
    ERROR = "ERROR"
    NULL = "NULL"

    ALL = (
        UNDEFINED,
        FUNCTION,
        BOOLEAN,
        OBJECT,
        REGEXP,
        STRING,
        NUMBER,
        ARRAY,
        ERROR,
        NULL,
    )


# Constructor (or sentinel) standing for each category
CATEGORY_CONSTRUCTORS: Mapping[str, Any] = MappingProxyType(
    {
        TypeName.UNDEFINED: UNDEFINED,
        TypeName.FUNCTION: types.FunctionType,
        TypeName.BOOLEAN: bool,
        TypeName.OBJECT: dict,
        TypeName.REGEXP: re.Pattern,
        TypeName.STRING: str,
        TypeName.NUMBER: int,
        TypeName.ARRAY: list,
        TypeName.ERROR: Exception,
        TypeName.NULL: None,
    }
)


def default_instance(name: str) -> Any:
    """
    Build a fresh default instance of a category.

    NULL and UNDEFINED have no constructor; their sentinels stand in.

    Raises:
        KeyError: If ``name`` is not one of TypeName.ALL
    """
    factories = {
        TypeName.UNDEFINED: lambda: UNDEFINED,
        TypeName.FUNCTION: lambda: (lambda: None),
        TypeName.BOOLEAN: bool,
        TypeName.OBJECT: dict,
        TypeName.REGEXP: lambda: re.compile(""),
        TypeName.STRING: str,
        TypeName.NUMBER: int,
        TypeName.ARRAY: list,
        TypeName.ERROR: Exception,
        TypeName.NULL: lambda: None,
    }
    return factories[name]()


TYPE_TAGS: Mapping[str, str] = MappingProxyType(
    {name: tag_of(default_instance(name)) for name in TypeName.ALL}
)
