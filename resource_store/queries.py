import math
from typing import Any, List, Optional, Tuple

from .stores import Entity, StoreState


def id_order(value: Any) -> Tuple[int, float, str]:
    """Sort key comparing ids by numeric value when they parse as numbers.

    ``"9"`` sorts before ``"10"`` and ints mix freely with numeric strings;
    anything non-numeric sorts after all numbers, as text.
    """
    if not isinstance(value, bool):
        try:
            number = float(value)
        except (TypeError, ValueError):
            pass
        else:
            if not math.isnan(number):
                return (0, number, "")
    return (1, 0.0, str(value))


def list_entities(state: StoreState, group_key: str) -> List[Entity]:
    """Materialize a cached collection, ordered by ascending id value.

    The list index keeps server/append order, but this view always sorts
    by id. Ids with no entity behind them are dropped from the view rather
    than kept as trailing empty slots.
    """
    ids = state.lists.get(group_key)
    if ids is None:
        return []
    items = [state.entities.get(id) for id in ids]
    return sorted((item for item in items if item is not None), key=lambda item: id_order(item["id"]))


class ResourceQueries:
    """Read-only views over one resource's state."""

    def __init__(self, state: StoreState, default_group_key: str = "default"):
        self.state = state
        self.default_group_key = default_group_key

    def list(self, group_key: Optional[str] = None) -> List[Entity]:
        return list_entities(self.state, group_key or self.default_group_key)
