"""
Pytest configuration and shared fixtures.
"""
from __future__ import annotations

import pytest

from entities import Order, Product
from repokit.infrastructure import InMemoryRepository


@pytest.fixture
def products() -> InMemoryRepository[Product, str]:
    """Fresh, empty product repository."""
    return InMemoryRepository(Product)


@pytest.fixture
def orders() -> InMemoryRepository[Order, str]:
    """Fresh, empty untyped repository holding dataclass orders."""
    return InMemoryRepository()
