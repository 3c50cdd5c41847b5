"""
Read-only view of the members the library exposes.
"""

from collections.abc import Mapping
from typing import Any, Iterator


class ExposedSurface(Mapping):
    """
    Immutable mapping of member name to member.

    Members can be read by key (``surface["is_string"]``) or as attributes
    (``surface.is_string``). Any attempt to assign raises AttributeError.
    """

    __slots__ = ("_members",)

    def __init__(self, members: Mapping[str, Any]) -> None:
        object.__setattr__(self, "_members", dict(members))

    def __getitem__(self, name: str) -> Any:
        return self._members[name]

    def __iter__(self) -> Iterator[str]:
        return iter(self._members)

    def __len__(self) -> int:
        return len(self._members)

    def __getattr__(self, name: str) -> Any:
        # Private names are never members; also guards copy/pickle before _members is set
        if name.startswith("_"):
            raise AttributeError(name)
        try:
            return self._members[name]
        except KeyError:
            raise AttributeError(f"typetags has no member '{name}'") from None

    def __setattr__(self, name: str, value: Any) -> None:
        raise AttributeError("ExposedSurface is read-only")

    def __delattr__(self, name: str) -> None:
        raise AttributeError("ExposedSurface is read-only")

    def __dir__(self):
        return sorted(set(super().__dir__()) | set(self._members))

    def __repr__(self) -> str:
        return f"ExposedSurface({', '.join(self._members)})"
