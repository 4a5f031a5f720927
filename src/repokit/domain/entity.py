"""Entity — identity-bearing object (id)."""
from __future__ import annotations

from typing import Any, Generic, TypeVar

ID = TypeVar("ID")


class Entity(Generic[ID]):
    """Entity: equality by id."""

    def __init__(self, id: ID) -> None:
        self.id = id

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Entity):
            return False
        return self.id == other.id

    def __hash__(self) -> int:
        return hash(self.id)

    def __repr__(self) -> str:
        return f"{type(self).__name__}(id={self.id!r})"


def entity_id(obj: Any) -> Any:
    """Id of any stored object: its `id` attribute, or None when it has none."""
    return getattr(obj, "id", None)
