"""Repository implementations."""
from repokit.infrastructure.memory import InMemoryRepository

__all__ = ["InMemoryRepository"]
