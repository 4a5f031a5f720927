"""In-memory repository: id-keyed, insertion-ordered store."""
from __future__ import annotations

import asyncio
import logging
from typing import Any, Generic, Optional, TypeVar

from repokit.domain.entity import entity_id
from repokit.domain.errors import RepositoryError, ValidationError
from repokit.domain.repository import Repository

logger = logging.getLogger(__name__)

T = TypeVar("T")
ID = TypeVar("ID")


class InMemoryRepository(Repository[T, ID], Generic[T, ID]):
    """
    Repository kept in a dict keyed by entity id.
    New entities are appended; saving an existing id replaces it at its position.
    Ids that cannot be dict keys (unhashable) are never stored, so lookup finds
    nothing and delete is a no-op for them.
    Mutations run under an asyncio.Lock. The base blocks never await, so the lock
    only matters to subclasses that await inside a mutation (e.g. write-through).
    Data is lost when the process exits.
    """

    def __init__(self, entity_type: type[T] | None = None) -> None:
        self._entity_type = entity_type
        self._store: dict[Any, T] = {}
        self._lock = asyncio.Lock()

    async def find_by_id(self, id: ID) -> Optional[T]:
        try:
            return self._store.get(id)
        except TypeError:
            return None

    async def find_all(self) -> list[T]:
        return list(self._store.values())

    async def save(self, entity: T) -> T:
        self.validate_entity(entity)
        key = entity_id(entity)
        async with self._lock:
            try:
                replaced = key in self._store
                self._store[key] = entity
            except Exception as e:
                logger.exception("Failed to save %s with id %r", type(entity).__name__, key)
                raise RepositoryError("Failed to save entity", e) from e
        logger.debug("%s %s id=%r", "Replaced" if replaced else "Added", type(entity).__name__, key)
        return entity

    async def delete(self, id: ID) -> None:
        if id is None:
            raise ValidationError("Entity ID cannot be None")
        async with self._lock:
            try:
                removed = self._store.pop(id, None)
            except TypeError:
                return
        if removed is not None:
            logger.debug("Deleted %s id=%r", type(removed).__name__, id)

    async def count(self) -> int:
        return len(self._store)

    async def clear(self) -> None:
        async with self._lock:
            self._store.clear()

    def validate_entity(self, entity: Any) -> None:
        """Raise ValidationError if entity or its id is missing, or it is of the wrong type."""
        if entity is None:
            raise ValidationError("Entity cannot be None")
        if self._entity_type is not None and not isinstance(entity, self._entity_type):
            raise ValidationError(
                f"Expected {self._entity_type.__name__}, got {type(entity).__name__}"
            )
        if entity_id(entity) is None:
            raise ValidationError("Entity ID cannot be None")
