"""
Factory producing one self-contained store per RESTful resource.
"""

from typing import Any, Awaitable, Callable, Dict, List, Mapping, Optional, Type

import pydantic

from .config import StoreSettings, get_settings
from .errors import ValidationError
from .logging import get_logger
from .models import (
    CommandPayload,
    CreateCommand,
    DeleteCommand,
    FindCommand,
    LoadCommand,
    UpdateCommand,
)
from .queries import ResourceQueries
from .stores import StoreState
from .sync import SyncController
from .transport import HttpTransport, Transport


def group_key_for(*parts: Any) -> str:
    """Compose a grouping key from parent scopes, e.g. category and page -> ``"13-2"``."""
    if not parts:
        raise ValidationError("At least one key part is required")
    return "-".join(str(part) for part in parts)


class ResourceStore:
    """Store module for one endpoint: state, named commands and named queries."""

    def __init__(
        self,
        endpoint: str,
        transport: Transport,
        default_group_key: str = "default",
    ):
        self.endpoint = endpoint
        self.default_group_key = default_group_key
        self._state = StoreState()
        self.controller = SyncController(self._state, transport, default_group_key)
        self.queries = ResourceQueries(self._state, default_group_key)
        self.logger = get_logger("resource_store.builder")

        self.commands: Dict[str, Callable[[Dict[str, Any]], Awaitable[Any]]] = {
            "LOAD": self._load,
            "FIND": self._find,
            "CREATE": self._create,
            "UPDATE": self._update,
            "DELETE": self._delete,
        }
        self.query_handlers: Dict[str, Callable[..., Any]] = {
            "list": self.queries.list,
        }

    @property
    def state(self) -> Dict[str, Any]:
        """Copies of ``entities`` and ``lists``."""
        return self._state.snapshot()

    @property
    def transport(self) -> Transport:
        return self.controller.transport

    async def dispatch(self, command: str, payload: Optional[Mapping[str, Any]] = None) -> Any:
        """Run a named command after validating its payload."""
        handler = self.commands.get(command)
        if handler is None:
            raise ValidationError(
                f"Unknown command {command!r}",
                details={"endpoint": self.endpoint, "commands": list(self.commands)}
            )
        return await handler(dict(payload or {}))

    def query(self, name: str, *args: Any, **kwargs: Any) -> Any:
        """Run a named read-only query."""
        handler = self.query_handlers.get(name)
        if handler is None:
            raise ValidationError(
                f"Unknown query {name!r}",
                details={"endpoint": self.endpoint, "queries": list(self.query_handlers)}
            )
        return handler(*args, **kwargs)

    # Typed entry points

    async def load(self, group_key: Optional[str] = None, query_params: Optional[Mapping[str, Any]] = None,
                   use_cache: bool = True) -> List[Optional[Dict[str, Any]]]:
        return await self.controller.load(group_key, query_params, use_cache)

    async def find(self, id: Any, refresh: bool = False) -> Dict[str, Any]:
        return await self.controller.find(id, refresh)

    async def create(self, payload: Mapping[str, Any], group_key: Optional[str] = None) -> Dict[str, Any]:
        return await self.controller.create(payload, group_key)

    async def update(self, id: Any, payload: Mapping[str, Any]) -> Dict[str, Any]:
        return await self.controller.update(id, payload)

    async def delete(self, id: Any, group_key: Optional[str] = None) -> None:
        await self.controller.delete(id, group_key)

    def list(self, group_key: Optional[str] = None) -> List[Dict[str, Any]]:
        return self.queries.list(group_key)

    # Command handlers

    def _validate(self, model: Type[CommandPayload], payload: Dict[str, Any]) -> Any:
        try:
            return model.model_validate(payload)
        except pydantic.ValidationError as exc:
            self.logger.warning("Invalid command payload", endpoint=self.endpoint, command=model.__name__)
            raise ValidationError(
                f"Invalid {model.__name__} payload",
                details={"errors": exc.errors(include_url=False)}
            ) from exc

    async def _load(self, payload: Dict[str, Any]) -> Any:
        cmd = self._validate(LoadCommand, payload)
        return await self.controller.load(cmd.group_key, cmd.query_params, cmd.use_cache)

    async def _find(self, payload: Dict[str, Any]) -> Any:
        cmd = self._validate(FindCommand, payload)
        return await self.controller.find(cmd.id, cmd.refresh)

    async def _create(self, payload: Dict[str, Any]) -> Any:
        cmd = self._validate(CreateCommand, payload)
        return await self.controller.create(cmd.payload, cmd.group_key)

    async def _update(self, payload: Dict[str, Any]) -> Any:
        cmd = self._validate(UpdateCommand, payload)
        return await self.controller.update(cmd.id, cmd.payload)

    async def _delete(self, payload: Dict[str, Any]) -> None:
        cmd = self._validate(DeleteCommand, payload)
        await self.controller.delete(cmd.id, cmd.group_key)


def build_resource_store(
    endpoint: str,
    transport: Optional[Transport] = None,
    settings: Optional[StoreSettings] = None,
) -> ResourceStore:
    """Build an independent store for ``endpoint``.

    Without an explicit transport, an :class:`HttpTransport` for the endpoint
    is created from ``settings``.
    """
    settings = settings or get_settings()
    if transport is None:
        transport = HttpTransport(endpoint, settings)
    return ResourceStore(endpoint, transport, settings.default_group_key)


class StoreRegistry:
    """Namespaced collection of resource stores, one per registered name."""

    def __init__(self, settings: Optional[StoreSettings] = None):
        self.settings = settings or get_settings()
        self._stores: Dict[str, ResourceStore] = {}
        self.logger = get_logger("resource_store.registry")

    def register(self, name: str, endpoint: str, transport: Optional[Transport] = None) -> ResourceStore:
        if name in self._stores:
            raise ValidationError(f"Store {name!r} is already registered", details={"name": name})
        store = build_resource_store(endpoint, transport, self.settings)
        self._stores[name] = store
        self.logger.info("Registered resource store", name=name, endpoint=endpoint)
        return store

    def get(self, name: str) -> ResourceStore:
        try:
            return self._stores[name]
        except KeyError:
            raise ValidationError(f"No store registered as {name!r}", details={"name": name}) from None

    def names(self) -> List[str]:
        return list(self._stores)

    def __contains__(self, name: str) -> bool:
        return name in self._stores
