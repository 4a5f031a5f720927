"""Entity types shared by the tests."""
from __future__ import annotations

from dataclasses import dataclass

from repokit.domain import Entity


class Product(Entity[str]):
    """Entity with identity equality."""

    def __init__(self, id: str, name: str, price_cents: int = 0) -> None:
        super().__init__(id)
        self.name = name
        self.price_cents = price_cents


@dataclass
class Order:
    """Plain dataclass: equality by all fields, stored by its id attribute."""

    id: str
    customer_id: str
    total_cents: int
