"""
Constructor back-reference table.

Maps the constructor (or sentinel) of each category to its canonical tag,
so callers can ask about ``int`` without building an ``int`` first.
Entries are indexed by a stable identifier for the category rather than by
object identity.
"""

from collections.abc import Sequence
from types import MappingProxyType
from typing import Any, Iterable, Optional, Tuple

from typetags.core.tags import CATEGORY_CONSTRUCTORS, TYPE_TAGS, UNDEFINED, tag_of


def descriptor_key(descriptor: Any) -> Optional[str]:
    """
    Stable identifier for a constructor or sentinel.

    Returns:
        ``"<module>.<qualname>"`` for classes, ``"None"`` or ``"UNDEFINED"``
        for the sentinels, and None for anything else
    """
    if descriptor is None:
        return "None"
    if descriptor is UNDEFINED:
        return "UNDEFINED"
    if isinstance(descriptor, type):
        return f"{descriptor.__module__}.{descriptor.__qualname__}"
    return None


class BackReferenceTable(Sequence):
    """Ordered, immutable ``(constructor_or_sentinel, tag)`` pairs."""

    __slots__ = ("_pairs", "_index")

    def __init__(self, pairs: Iterable[Tuple[Any, str]]) -> None:
        self._pairs = tuple((descriptor, tag) for descriptor, tag in pairs)

        index = {}
        for descriptor, tag in self._pairs:
            key = descriptor_key(descriptor)
            if key is None:
                raise TypeError(
                    f"Back-reference entries must be classes, None or UNDEFINED, got {descriptor!r}"
                )
            # First entry wins, like a linear scan would
            index.setdefault(key, tag)
        self._index = MappingProxyType(index)

    def __getitem__(self, position):
        return self._pairs[position]

    def __len__(self) -> int:
        return len(self._pairs)

    def __repr__(self) -> str:
        return f"BackReferenceTable({list(self._pairs)!r})"

    def lookup(self, descriptor: Any) -> Optional[str]:
        """Tag paired with ``descriptor``, or None if it is not in the table."""
        key = descriptor_key(descriptor)
        if key is None:
            return None
        return self._index.get(key)

    def matching_type(self, descriptor: Any) -> str:
        """
        Tag paired with ``descriptor``, falling back to tagging the
        descriptor itself (usually ``"[object type]"``).
        """
        tag = self.lookup(descriptor)
        if tag is None:
            return tag_of(descriptor)
        return tag


TYPE_TAGS_BACKREF = BackReferenceTable(
    (CATEGORY_CONSTRUCTORS[name], tag) for name, tag in TYPE_TAGS.items()
)
