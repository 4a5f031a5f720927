"""Repository — interface for async entity persistence."""
from abc import ABC, abstractmethod
from typing import Generic, Optional, TypeVar

T = TypeVar("T")
ID = TypeVar("ID")


class Repository(ABC, Generic[T, ID]):
    """Repository interface: find by id, find all, save (upsert), delete by id."""

    @abstractmethod
    async def find_by_id(self, id: ID) -> Optional[T]:
        ...

    @abstractmethod
    async def find_all(self) -> list[T]:
        """Snapshot of stored entities in insertion order."""
        ...

    @abstractmethod
    async def save(self, entity: T) -> T:
        """Insert, or replace the entity with the same id in place."""
        ...

    @abstractmethod
    async def delete(self, id: ID) -> None:
        """Remove the entity with this id; unknown ids are a no-op."""
        ...

    async def exists(self, id: ID) -> bool:
        return await self.find_by_id(id) is not None

    async def count(self) -> int:
        return len(await self.find_all())
