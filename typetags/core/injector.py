"""
Namespace injection.

Nothing is installed anywhere implicitly. Applications opt in by calling
inject() with the container that should receive the library members, or
install() to resolve a loaded module by name first.
"""

import sys
from collections.abc import MutableMapping
from typing import Any, Callable, List, Optional, Tuple

from typetags.core.accuracy import TYPE_TAGS_ACCURACY, TYPE_TAGS_QUESTIONABLE
from typetags.core.backref import TYPE_TAGS_BACKREF
from typetags.core.predicates import (
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
from typetags.core.tags import TYPE_TAGS, UNDEFINED, tag_of
from typetags.errors import ErrorCodes, InvalidArgumentError, NamespaceUnavailableError
from typetags.logging import get_logger, log_entry_exit

logger = get_logger(__name__)

# Marks a member the destination did not have before injection
_ABSENT = object()


def _rollback(
    written: List[Tuple[str, Any]],
    assign: Callable[[str, Any], None],
    remove: Callable[[str], None],
) -> None:
    """Restore the members overwritten by a failed inject(), newest first."""
    for name, previous in reversed(written):
        try:
            if previous is _ABSENT:
                remove(name)
            else:
                assign(name, previous)
        except (AttributeError, TypeError, KeyError) as e:
            logger.warning(f"Could not roll back member '{name}' after failed injection: {e}")


def inject(destination: Any) -> ExposedSurface:
    """
    Copy every exposed member onto ``destination``.

    Mutable mappings (``globals()``, a dict) receive members by item
    assignment, any other object by setattr. Existing members with the
    same names are overwritten. Injection is all or nothing: if the
    destination rejects a member, the members already written are rolled
    back before the error is raised.

    Args:
        destination: Container to install into

    Returns:
        The library's exposed surface, for chaining

    Raises:
        InvalidArgumentError: If destination is None/UNDEFINED, or refuses
            an assignment
    """
    if destination is None or destination is UNDEFINED:
        raise InvalidArgumentError(
            message="Cannot locate destination scope to install to.",
            error_code=ErrorCodes.INPUT_MISSING_DESTINATION,
            details={"destination": repr(destination)},
            suggestion="Pass a dict, module or object to receive the members",
        )

    if isinstance(destination, MutableMapping):
        assign = destination.__setitem__
        remove = destination.__delitem__

        def read(name: str) -> Any:
            return destination.get(name, _ABSENT)

    else:

        def assign(name: str, member: Any) -> None:
            setattr(destination, name, member)

        def remove(name: str) -> None:
            delattr(destination, name)

        def read(name: str) -> Any:
            return getattr(destination, name, _ABSENT)

    written = []
    for name, member in LIBRARY.items():
        previous = read(name)
        try:
            assign(name, member)
        except (AttributeError, TypeError) as e:
            _rollback(written, assign, remove)
            raise InvalidArgumentError(
                message=f"Destination of type {type(destination).__name__} rejected member '{name}'",
                error_code=ErrorCodes.INPUT_READ_ONLY_DESTINATION,
                details={"destination_type": type(destination).__name__, "member": name},
                suggestion="Use a mutable mapping or an object that accepts new attributes",
            ) from e
        written.append((name, previous))

    logger.debug(
        f"Injected {len(LIBRARY)} typetags members into {type(destination).__name__}"
    )
    return LIBRARY


@log_entry_exit(log_args=True)
def install(target: Optional[Any] = None) -> ExposedSurface:
    """
    Explicitly register the library with a host container.

    Args:
        target: None to just obtain the surface, the name of an already
            imported module, or any container accepted by inject()

    Returns:
        The library's exposed surface

    Raises:
        NamespaceUnavailableError: If a module name is given that is not loaded
        InvalidArgumentError: If inject() rejects the container
    """
    if target is None:
        return LIBRARY

    if isinstance(target, str):
        module = sys.modules.get(target)
        if module is None:
            raise NamespaceUnavailableError(
                message=f"Missing namespace: module '{target}' is not loaded",
                error_code=ErrorCodes.NAMESPACE_UNAVAILABLE,
                details={"module": target},
                suggestion=f"Import '{target}' before installing typetags into it",
            )
        target = module

    return inject(target)


LIBRARY = ExposedSurface(
    {
        "TYPE_TAGS": TYPE_TAGS,
        "TYPE_TAGS_BACKREF": TYPE_TAGS_BACKREF,
        "TYPE_TAGS_ACCURACY": TYPE_TAGS_ACCURACY,
        "TYPE_TAGS_QUESTIONABLE": TYPE_TAGS_QUESTIONABLE,
        "UNDEFINED": UNDEFINED,
        "tag_of": tag_of,
        "is_a": is_a,
        "is_undefined": is_undefined,
        "is_function": is_function,
        "is_boolean": is_boolean,
        "is_object": is_object,
        "is_regexp": is_regexp,
        "is_string": is_string,
        "is_number": is_number,
        "is_array": is_array,
        "is_error": is_error,
        "is_null": is_null,
        "inject": inject,
    }
)
