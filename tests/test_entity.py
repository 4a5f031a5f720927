"""Tests for Entity identity semantics and the abstract Repository helpers."""
import pytest

from entities import Order, Product
from repokit.domain import Entity, Repository, entity_id


class TestEntity:
    def test_equal_by_id(self):
        assert Product("p1", "apple") == Product("p1", "renamed", 5)

    def test_different_ids_not_equal(self):
        assert Product("p1", "apple") != Product("p2", "apple")

    def test_not_equal_to_non_entity(self):
        assert Product("p1", "apple") != "p1"

    def test_hash_follows_id(self):
        assert len({Product("p1", "a"), Product("p1", "b"), Product("p2", "c")}) == 2

    def test_repr(self):
        assert repr(Entity(7)) == "Entity(id=7)"


class TestEntityId:
    def test_entity(self):
        assert entity_id(Product("p1", "apple")) == "p1"

    def test_dataclass(self):
        assert entity_id(Order("o1", "alice", 1)) == "o1"

    def test_missing_attribute(self):
        assert entity_id(object()) is None


class ListRepository(Repository[Product, str]):
    """Minimal subclass implementing only the abstract operations."""

    def __init__(self):
        self.items: list[Product] = []

    async def find_by_id(self, id):
        return next((p for p in self.items if p.id == id), None)

    async def find_all(self):
        return list(self.items)

    async def save(self, entity):
        self.items.append(entity)
        return entity

    async def delete(self, id):
        self.items = [p for p in self.items if p.id != id]


class TestRepositoryInterface:
    def test_cannot_instantiate_abstract(self):
        with pytest.raises(TypeError):
            Repository()

    @pytest.mark.asyncio
    async def test_exists_and_count_from_abstract_operations(self):
        repo = ListRepository()
        await repo.save(Product("p1", "apple"))
        await repo.save(Product("p2", "pear"))

        assert await repo.exists("p1") is True
        assert await repo.exists("zzz") is False
        assert await repo.count() == 2
