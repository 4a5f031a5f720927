"""Minimal DI container: bind repository interfaces (or any key) to factories and resolve them."""
from __future__ import annotations

import inspect
import sys
from typing import Any, Callable, TypeVar

T = TypeVar("T")

Key = type[Any] | str


def _resolve_annotation(ann: str, cls: type[Any]) -> Any:
    """Resolve a string annotation (from __future__ annotations) to the actual class."""
    mod = sys.modules.get(cls.__module__)
    if mod is not None and hasattr(mod, ann):
        return getattr(mod, ann)
    return ann


def _instantiate_with_container(container: Container, cls: type[T]) -> T:
    """Create an instance of cls, resolving annotated __init__ parameters from the container."""
    sig = inspect.signature(cls)
    kwargs: dict[str, Any] = {}
    for name, param in sig.parameters.items():
        if param.annotation is inspect.Parameter.empty:
            continue
        ann = param.annotation
        if isinstance(ann, str):
            ann = _resolve_annotation(ann, cls)
        if not container.has(ann) and param.default is not inspect.Parameter.empty:
            continue
        kwargs[name] = container.resolve(ann)
    return cls(**kwargs)


class Container:
    """
    Register by type (or string key) and resolve via factory.
    A repository implementation can be registered under its abstract interface.
    """

    def __init__(self) -> None:
        self._registry: dict[Key, Callable[[], Any]] = {}
        self._singletons: dict[Key, Any] = {}
        self._singleton_keys: set[Key] = set()

    def register(self, key: Key, factory: Callable[[], T], singleton: bool = True) -> None:
        """Register a factory for a type or string key."""
        self._registry[key] = factory
        self._singletons.pop(key, None)
        if singleton:
            self._singleton_keys.add(key)
        else:
            self._singleton_keys.discard(key)

    def register_instance(self, key: Key, instance: T) -> None:
        """Register a ready-made instance."""
        self._registry[key] = lambda: instance
        self._singletons[key] = instance
        self._singleton_keys.add(key)

    def register_class(self, cls: type[T], singleton: bool = True) -> None:
        """Register a class: on resolve an instance is created with dependencies from the container."""
        self.register(key=cls, factory=lambda: _instantiate_with_container(self, cls), singleton=singleton)

    def has(self, key: Key) -> bool:
        return key in self._registry

    def resolve(self, key: Key) -> Any:
        """Resolve an instance by type or key."""
        if key not in self._registry:
            raise KeyError(f"No registration for {key}")
        if key in self._singletons:
            return self._singletons[key]
        instance = self._registry[key]()
        if key in self._singleton_keys:
            self._singletons[key] = instance
        return instance
