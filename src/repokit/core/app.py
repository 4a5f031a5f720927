"""Application — composed from modules via app.register(module). Served as a Starlette ASGI app."""
from __future__ import annotations

import logging
from typing import Any

from starlette.applications import Starlette
from starlette.routing import Route

from repokit.core.config import Config
from repokit.core.container import Container
from repokit.core.module import Module

logger = logging.getLogger(__name__)


class Application:
    """
    Application. Composed from modules via register(module).
    Modules bind repositories into the container and add HTTP routes;
    asgi() builds the Starlette app from those routes.
    """

    def __init__(self, config: Any = None) -> None:
        self._modules: list[Module] = []
        self._container = Container()
        self._routes: list[Route] = []
        self._config = config
        if config is not None:
            self._container.register_instance(type(config), config)
            self._container.register_instance("config", config)
            if isinstance(config, Config):
                self._container.register_instance(Config, config)

    def register(self, module: Module) -> Application:
        """Register a module (RepositoryModule, HttpModule, etc.). Returns self for chaining."""
        module.register_into(self)
        self._modules.append(module)
        logger.debug("Registered module %s", getattr(module, "name", type(module).__name__))
        return self

    def add_route(self, path: str, endpoint: Any, methods: list[str] | None = None) -> None:
        """Add an HTTP route."""
        if methods is None:
            methods = ["GET"]
        self._routes.append(Route(path, endpoint, methods=methods))

    @property
    def routes(self) -> list[Route]:
        return list(self._routes)

    @property
    def container(self) -> Container:
        """DI container: registration and resolution of dependencies."""
        return self._container

    def asgi(self) -> Starlette:
        """Build the ASGI app (Starlette) serving every registered route."""
        debug = bool(getattr(self._config, "debug", False))
        return Starlette(debug=debug, routes=list(self._routes))
