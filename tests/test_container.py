"""Tests for the DI container."""
from __future__ import annotations

import pytest

from entities import Product
from repokit.core import Container
from repokit.domain import Repository
from repokit.infrastructure import InMemoryRepository


class IProductRepository(Repository[Product, str]):
    pass


class ProductRepositoryImpl(InMemoryRepository[Product, str], IProductRepository):
    def __init__(self) -> None:
        super().__init__(Product)


class Catalog:
    def __init__(self, products: IProductRepository) -> None:
        self.products = products


class TestContainer:
    def test_resolve_unknown_raises(self):
        with pytest.raises(KeyError):
            Container().resolve("missing")

    def test_register_instance(self):
        c = Container()
        repo = InMemoryRepository()
        c.register_instance("products", repo)
        assert c.resolve("products") is repo
        assert c.has("products")

    def test_singleton_factory_called_once(self):
        c = Container()
        calls = []
        c.register("repo", lambda: calls.append(1) or InMemoryRepository())
        assert c.resolve("repo") is c.resolve("repo")
        assert calls == [1]

    def test_transient_factory(self):
        c = Container()
        c.register("repo", InMemoryRepository, singleton=False)
        assert c.resolve("repo") is not c.resolve("repo")

    def test_register_class_resolves_dependencies(self):
        c = Container()
        c.register_class(ProductRepositoryImpl)
        c.register(IProductRepository, lambda: c.resolve(ProductRepositoryImpl))
        c.register_class(Catalog)

        catalog = c.resolve(Catalog)
        assert catalog.products is c.resolve(IProductRepository)
        assert isinstance(catalog.products, ProductRepositoryImpl)

    def test_register_class_skips_defaulted_unknowns(self):
        c = Container()
        c.register_class(InMemoryRepository)
        assert isinstance(c.resolve(InMemoryRepository), InMemoryRepository)
