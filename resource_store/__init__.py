"""
Client-side caching for RESTful resources.

One store is built per endpoint and owns:

- an entity store: identifier -> latest server-confirmed entity
- a list index: grouping key -> ordered ids of a cached collection view
- a sync controller: LOAD/FIND/CREATE/UPDATE/DELETE keeping both consistent
- queries: read-only materialization of cached collections

Supporting modules:

- config: settings via pydantic-settings
- logging: structured logging via structlog
- errors: exception types and error responses
- transport: transport protocol and the httpx-backed HTTP transport
"""

from .builder import ResourceStore, StoreRegistry, build_resource_store, group_key_for
from .errors import (
    EntityNotFoundError,
    MissingListError,
    ResourceStoreException,
    TransportError,
    ValidationError,
)
from .transport import HttpTransport, Transport

__all__ = [
    "EntityNotFoundError",
    "HttpTransport",
    "MissingListError",
    "ResourceStore",
    "ResourceStoreException",
    "StoreRegistry",
    "Transport",
    "TransportError",
    "ValidationError",
    "build_resource_store",
    "group_key_for",
]
