from typing import Any, Dict, Hashable, List, Mapping, Optional, Protocol

Entity = Dict[str, Any]


class Transport(Protocol):
    """The five raw network operations a resource store relies on.

    Implementations return parsed entities and raise on any failure; the
    store never catches what they raise.
    """

    async def list(self, params: Optional[Mapping[str, Any]] = None) -> List[Entity]: ...

    async def fetch_one(self, id: Hashable) -> Entity: ...

    async def create(self, payload: Mapping[str, Any]) -> Entity: ...

    async def update(self, id: Hashable, payload: Mapping[str, Any]) -> Entity: ...

    async def delete(self, id: Hashable) -> None: ...


def entity_endpoint(endpoint: str, id: Hashable) -> str:
    """Address one entity of ``endpoint``.

    ``templates?category_id=13`` becomes ``templates/7?category_id=13``;
    an endpoint without a query string gets ``/7`` appended.
    """
    if "?" in endpoint:
        return endpoint.replace("?", f"/{id}?", 1)
    return f"{endpoint}/{id}"
