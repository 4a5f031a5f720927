"""
repokit — async repositories for DDD-style applications.
Entities live behind a Repository; repositories are bound and exposed via app.register(module).
"""
from repokit.core import Application, Container, Module, HttpModule, Config, Settings, load_config_from_env
from repokit.ddd import RepositoryModule
from repokit.domain import Entity, Repository, RepositoryError, ValidationError
from repokit.infrastructure import InMemoryRepository

__all__ = [
    "Application",
    "Container",
    "Module",
    "HttpModule",
    "Config",
    "Settings",
    "load_config_from_env",
    "RepositoryModule",
    "Entity",
    "Repository",
    "RepositoryError",
    "ValidationError",
    "InMemoryRepository",
]
