"""
Identifier-keyed entity store.
"""

from typing import Any, Dict, Hashable, Iterable, List, Optional

from ..errors import ValidationError

Entity = Dict[str, Any]


def entity_id(item: Entity) -> Hashable:
    """Return the identifier of an entity, rejecting records without one."""
    try:
        return item["id"]
    except (KeyError, TypeError):
        raise ValidationError(
            "Entity has no 'id' field",
            details={"entity": repr(item)[:200]}
        ) from None


class EntityStore:
    """Single source of truth mapping identifier to the latest server-confirmed entity."""

    def __init__(self):
        self._items: Dict[Hashable, Entity] = {}

    def get(self, id: Hashable) -> Optional[Entity]:
        return self._items.get(id)

    def set_all(self, items: Iterable[Entity]) -> None:
        """Store each item under its own id, replacing any previous value."""
        # Resolve every id first so a malformed item leaves the store untouched
        keyed = [(entity_id(item), item) for item in items]
        for key, item in keyed:
            self._items[key] = item

    def set_one(self, item: Entity) -> None:
        self.set_all([item])

    def put(self, id: Hashable, item: Entity) -> None:
        """Store ``item`` under an explicit id, replacing any previous value."""
        self._items[id] = item

    def remove(self, id: Hashable) -> None:
        self._items.pop(id, None)

    def ids(self) -> List[Hashable]:
        return list(self._items)

    def snapshot(self) -> Dict[Hashable, Entity]:
        return dict(self._items)

    def clear(self) -> None:
        self._items.clear()

    def __contains__(self, id: Hashable) -> bool:
        return id in self._items

    def __len__(self) -> int:
        return len(self._items)
