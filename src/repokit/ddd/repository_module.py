"""
RepositoryModule — one object per entity collection.
Binds repository interfaces to implementations and optionally exposes CRUD over HTTP.
"""
from __future__ import annotations

import dataclasses
import logging
from typing import Any, Callable, Type

from starlette.requests import Request
from starlette.responses import JSONResponse, Response

from repokit.core.app import Application
from repokit.core.container import Container
from repokit.core.module import Module
from repokit.domain import Repository, RepositoryError, ValidationError

logger = logging.getLogger(__name__)


def entity_to_dict(entity: Any) -> dict[str, Any]:
    """Serialize an entity: to_dict() if defined, dataclass fields, else public attributes."""
    if hasattr(entity, "to_dict"):
        return entity.to_dict()
    if dataclasses.is_dataclass(entity) and not isinstance(entity, type):
        return dataclasses.asdict(entity)
    return {k: v for k, v in vars(entity).items() if not k.startswith("_")}


def _error(message: str, status_code: int) -> JSONResponse:
    return JSONResponse({"ok": False, "error": message}, status_code=status_code)


def _repository_error(e: RepositoryError) -> JSONResponse:
    """ValidationError -> 422, any other RepositoryError -> 500."""
    if isinstance(e, ValidationError):
        return _error(e.message, 422)
    logger.error("Repository operation failed: %s", e.message)
    return _error(e.message, 500)


class _BadRequest(Exception):
    pass


class RepositoryModule(Module):
    """
    Repositories for one context.
    .repository() .instance() .expose()
    Register via app.register(module).
    """

    def __init__(self, name: str, prefix: str | None = None) -> None:
        self.name = name
        self.prefix = prefix or f"/{name}"
        self._repositories: list[tuple[Type[Repository[Any, Any]], Type[Any]]] = []
        self._instances: list[tuple[Type[Repository[Any, Any]], Repository[Any, Any]]] = []
        self._exposed: dict[str, tuple[Type[Repository[Any, Any]], Type[Any], Callable[[str], Any]]] = {}

    def repository(self, interface: Type[Repository[Any, Any]], impl: Type[Any]) -> RepositoryModule:
        self._repositories.append((interface, impl))
        return self

    def instance(self, interface: Type[Repository[Any, Any]], repo: Repository[Any, Any]) -> RepositoryModule:
        """Bind a ready-made repository (e.g. a pre-filled InMemoryRepository)."""
        self._instances.append((interface, repo))
        return self

    def expose(
        self,
        interface: Type[Repository[Any, Any]],
        entity_type: Type[Any],
        id_type: Callable[[str], Any] = str,
        path: str = "",
    ) -> RepositoryModule:
        """
        Publish CRUD endpoints for the repository bound to interface at {prefix}{path}.
        Each exposed repository needs its own path; reusing one raises ValueError.
        """
        if path and not path.startswith("/"):
            path = f"/{path}"
        path = path.rstrip("/")
        if path in self._exposed:
            mount = self.prefix.rstrip("/") + path or "/"
            raise ValueError(f"RepositoryModule {self.name!r}: {mount!r} is already exposed")
        self._exposed[path] = (interface, entity_type, id_type)
        return self

    def register_into(self, app: Application) -> None:
        container = app.container

        # Repositories: interface -> implementation
        for iface, impl in self._repositories:
            container.register_class(impl)
            if iface is not impl:
                container.register(iface, lambda c=container, i=impl: c.resolve(i))

        for iface, repo in self._instances:
            container.register_instance(iface, repo)

        # Longer paths first so "{prefix}/{id}" never shadows "{prefix}/<path>".
        for path in sorted(self._exposed, key=len, reverse=True):
            iface, entity_type, id_type = self._exposed[path]
            base = self.prefix.rstrip("/") + path
            app.add_route(base or "/", self._make_list_endpoint(iface, container), methods=["GET"])
            app.add_route(
                base or "/", self._make_save_endpoint(iface, entity_type, id_type, container), methods=["POST"]
            )
            item = f"{base}/{{id}}"
            app.add_route(item, self._make_get_endpoint(iface, id_type, container), methods=["GET"])
            app.add_route(
                item, self._make_save_endpoint(iface, entity_type, id_type, container), methods=["PUT"]
            )
            app.add_route(item, self._make_delete_endpoint(iface, id_type, container), methods=["DELETE"])

    def _make_list_endpoint(self, iface: Type[Any], container: Container) -> Callable:
        async def endpoint(request: Request) -> Response:
            repo = container.resolve(iface)
            try:
                entities = await repo.find_all()
            except RepositoryError as e:
                return _repository_error(e)
            return JSONResponse([entity_to_dict(e) for e in entities])

        return endpoint

    def _make_get_endpoint(self, iface: Type[Any], id_type: Callable[[str], Any], container: Container) -> Callable:
        async def endpoint(request: Request) -> Response:
            try:
                id = self._path_id(request, id_type)
            except _BadRequest as e:
                return _error(str(e), 400)
            repo = container.resolve(iface)
            try:
                entity = await repo.find_by_id(id)
            except RepositoryError as e:
                return _repository_error(e)
            if entity is None:
                return _error(f"{self.name} {id!r} not found", 404)
            return JSONResponse(entity_to_dict(entity))

        return endpoint

    def _make_save_endpoint(
        self, iface: Type[Any], entity_type: Type[Any], id_type: Callable[[str], Any], container: Container
    ) -> Callable:
        async def endpoint(request: Request) -> Response:
            try:
                body = await self._body(request)
                if "id" in request.path_params:
                    body["id"] = self._path_id(request, id_type)
                entity = entity_type(**body)
            except _BadRequest as e:
                return _error(str(e), 400)
            except (TypeError, ValueError) as e:
                return _error(f"Invalid {entity_type.__name__}: {e}", 400)
            repo = container.resolve(iface)
            try:
                saved = await repo.save(entity)
            except RepositoryError as e:
                return _repository_error(e)
            return JSONResponse(entity_to_dict(saved))

        return endpoint

    def _make_delete_endpoint(
        self, iface: Type[Any], id_type: Callable[[str], Any], container: Container
    ) -> Callable:
        async def endpoint(request: Request) -> Response:
            try:
                id = self._path_id(request, id_type)
            except _BadRequest as e:
                return _error(str(e), 400)
            repo = container.resolve(iface)
            try:
                await repo.delete(id)
            except RepositoryError as e:
                return _repository_error(e)
            return Response(status_code=204)

        return endpoint

    @staticmethod
    def _path_id(request: Request, id_type: Callable[[str], Any]) -> Any:
        raw = request.path_params["id"]
        try:
            return id_type(raw)
        except (TypeError, ValueError):
            raise _BadRequest(f"Invalid id: {raw!r}")

    @staticmethod
    async def _body(request: Request) -> dict[str, Any]:
        try:
            body = await request.json()
        except ValueError:
            raise _BadRequest("Request body must be JSON")
        if not isinstance(body, dict):
            raise _BadRequest("Request body must be a JSON object")
        return body
