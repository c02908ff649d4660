"""
Grouping key to ordered identifier sequences.
"""

from typing import Dict, Hashable, Iterable, List, Optional

from ..errors import MissingListError


class ListIndex:
    """Cached collection membership, one ordered id sequence per grouping key.

    ``append`` and ``remove_value`` require the sequence to exist already;
    only ``set`` establishes one.
    """

    def __init__(self):
        self._lists: Dict[str, List[Hashable]] = {}

    def get(self, key: str) -> Optional[List[Hashable]]:
        return self._lists.get(key)

    def has(self, key: str) -> bool:
        return key in self._lists

    def set(self, key: str, ids: Iterable[Hashable]) -> None:
        self._lists[key] = list(ids)

    def append(self, key: str, id: Hashable) -> None:
        self._require(key).append(id)

    def remove_value(self, key: str, id: Hashable) -> None:
        """Remove the first occurrence of ``id``; absent ids are ignored."""
        ids = self._require(key)
        if id in ids:
            ids.remove(id)

    def keys(self) -> List[str]:
        return list(self._lists)

    def snapshot(self) -> Dict[str, List[Hashable]]:
        return {key: list(ids) for key, ids in self._lists.items()}

    def clear(self) -> None:
        self._lists.clear()

    def _require(self, key: str) -> List[Hashable]:
        ids = self._lists.get(key)
        if ids is None:
            raise MissingListError(key)
        return ids
