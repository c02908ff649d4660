"""
Sync controller keeping the entity store and list index consistent.

Every operation awaits the transport at most once and performs all of its
store writes after that await, so a transport failure leaves both maps as
they were. Overlapping calls are not coordinated: the last one to resolve
wins, and identical in-flight requests are not merged.
"""

from typing import Any, Hashable, List, Mapping, Optional

from .errors import ValidationError
from .logging import get_logger
from .stores import Entity, StoreState, entity_id
from .transport import Transport


class SyncController:
    """The LOAD/FIND/CREATE/UPDATE/DELETE operations of one resource."""

    def __init__(self, state: StoreState, transport: Transport, default_group_key: str = "default"):
        self.state = state
        self.transport = transport
        self.default_group_key = default_group_key
        self.logger = get_logger("resource_store.sync")

    def resolve_group_key(self, group_key: Optional[str]) -> str:
        return group_key or self.default_group_key

    async def load(
        self,
        group_key: Optional[str] = None,
        query_params: Optional[Mapping[str, Any]] = None,
        use_cache: bool = True,
    ) -> List[Optional[Entity]]:
        """Return a collection, from the list index when cached.

        A cache hit maps ids through the entity store as they stand; ids
        whose entity is gone come back as ``None``.
        """
        key = self.resolve_group_key(group_key)
        ids = self.state.lists.get(key)
        if use_cache and ids is not None:
            self.logger.debug("List cache hit", group_key=key, size=len(ids))
            return [self.state.entities.get(id) for id in ids]

        self.logger.debug("List cache miss", group_key=key, use_cache=use_cache)
        items = await self.transport.list(query_params)

        new_ids = [entity_id(item) for item in items]
        self.state.entities.set_all(items)
        if use_cache:
            self.state.lists.set(key, new_ids)
        self.logger.debug("List loaded", group_key=key, size=len(items), cached=use_cache)
        return items

    async def find(self, id: Hashable, refresh: bool = False) -> Entity:
        """Return one entity, from the entity store unless ``refresh`` is set."""
        cached = self.state.entities.get(id)
        if cached is not None and not refresh:
            self.logger.debug("Entity cache hit", id=id)
            return cached

        item = await self.transport.fetch_one(id)
        self.state.entities.set_one(item)
        self.logger.debug("Entity fetched", id=id, refresh=refresh)
        return item

    async def create(self, payload: Mapping[str, Any], group_key: Optional[str] = None) -> Entity:
        """Create an entity and append it to the group's list if one is cached."""
        key = self.resolve_group_key(group_key)
        item = await self.transport.create(payload)

        new_id = entity_id(item)
        self.state.entities.set_one(item)
        if self.state.lists.has(key):
            self.state.lists.append(key, new_id)
        self.logger.debug("Entity created", id=new_id, group_key=key, indexed=self.state.lists.has(key))
        return item

    async def update(self, id: Hashable, payload: Mapping[str, Any]) -> Entity:
        """Replace an entity with the server's result; lists are untouched."""
        item = await self.transport.update(id, payload)

        returned_id = entity_id(item)
        if str(returned_id) != str(id):
            self.logger.error("Updated entity id mismatch", id=id, returned_id=returned_id)
            raise ValidationError(
                "Update returned a different entity",
                details={"id": id, "returned_id": returned_id}
            )
        self.state.entities.put(id, item)
        self.logger.debug("Entity updated", id=id)
        return item

    async def delete(self, id: Hashable, group_key: Optional[str] = None) -> None:
        """Delete an entity and drop it from the group's list if one is cached."""
        key = self.resolve_group_key(group_key)
        await self.transport.delete(id)

        self.state.entities.remove(id)
        if self.state.lists.has(key):
            self.state.lists.remove_value(key, id)
        self.logger.debug("Entity deleted", id=id, group_key=key)
