"""Domain layer base classes: Entity, Repository and repository errors."""
from repokit.domain.entity import Entity, entity_id
from repokit.domain.errors import RepositoryError, ValidationError
from repokit.domain.repository import Repository

__all__ = [
    "Entity",
    "entity_id",
    "Repository",
    "RepositoryError",
    "ValidationError",
]
