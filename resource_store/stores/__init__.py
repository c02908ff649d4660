"""
In-memory state owned by one resource store.
"""

from dataclasses import dataclass, field
from typing import Any, Dict

from .entity_store import Entity, EntityStore, entity_id
from .list_index import ListIndex


@dataclass
class StoreState:
    """The entity map and list index of a single resource, always used as a pair."""
    entities: EntityStore = field(default_factory=EntityStore)
    lists: ListIndex = field(default_factory=ListIndex)

    def snapshot(self) -> Dict[str, Any]:
        return {
            "entities": self.entities.snapshot(),
            "lists": self.lists.snapshot(),
        }


__all__ = ["Entity", "EntityStore", "ListIndex", "StoreState", "entity_id"]
