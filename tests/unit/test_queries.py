"""
Unit tests for the list query.
"""

from resource_store.queries import ResourceQueries, list_entities
from resource_store.stores import StoreState


class TestListQuery:
    """Test cases for list materialization."""

    def test_missing_list_is_empty(self):
        """An unknown group key yields an empty list."""
        state = StoreState()
        state.entities.set_one({"id": 1})

        assert list_entities(state, "g") == []

    def test_sorted_by_id_regardless_of_storage_order(self):
        """Stored order [5, 1, 3] is presented as [1, 3, 5].

        The id sort discards server ordering (relevance, recency). Kept as
        current behavior; confirm with product before relying on server order.
        """
        state = StoreState()
        state.entities.set_all([{"id": 5}, {"id": 1}, {"id": 3}])
        state.lists.set("g", [5, 1, 3])

        result = list_entities(state, "g")

        assert [item["id"] for item in result] == [1, 3, 5]
        assert state.lists.get("g") == [5, 1, 3]

    def test_numeric_string_ids_sort_by_value(self):
        """Id "9" comes before "10"."""
        state = StoreState()
        state.entities.set_all([{"id": "10"}, {"id": "9"}, {"id": "2"}])
        state.lists.set("g", ["10", "9", "2"])

        assert [item["id"] for item in list_entities(state, "g")] == ["2", "9", "10"]

    def test_mixed_int_and_string_ids(self):
        """Ints and numeric strings compare by value without raising."""
        state = StoreState()
        state.entities.set_all([{"id": "2"}, {"id": 1}, {"id": 3}])
        state.lists.set("g", ["2", 3, 1])

        assert [item["id"] for item in list_entities(state, "g")] == [1, "2", 3]

    def test_non_numeric_ids_sort_as_text_after_numbers(self):
        """Opaque ids come after numeric ones, in text order."""
        state = StoreState()
        state.entities.set_all([{"id": "b"}, {"id": "a"}, {"id": 7}])
        state.lists.set("g", ["b", 7, "a"])

        assert [item["id"] for item in list_entities(state, "g")] == [7, "a", "b"]

    def test_holes_are_skipped(self):
        """Ids without an entity do not appear in the view."""
        state = StoreState()
        state.entities.set_all([{"id": 1}, {"id": 4}])
        state.lists.set("g", [4, 3, 1])

        assert list_entities(state, "g") == [{"id": 1}, {"id": 4}]

    def test_resource_queries_default_key(self):
        """Omitting the key reads the default sequence only."""
        state = StoreState()
        state.entities.set_all([{"id": 1}, {"id": 2}])
        state.lists.set("default", [2])
        state.lists.set("other", [1])
        queries = ResourceQueries(state)

        assert queries.list() == [{"id": 2}]
        assert queries.list("other") == [{"id": 1}]
