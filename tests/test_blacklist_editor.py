"""
Tests for the blacklist editor helpers.
"""
from product_selector.data.models.filters import CategoryStatus
from product_selector.ui.components.blacklist_editor import filter_categories, pending_updates

CATEGORIES = [
    CategoryStatus("HomeKitchen", False),
    CategoryStatus("KitchenDining", True),
    CategoryStatus("Tablecloths", False),
]


class TestFilterCategories:
    """Tests for editor search."""

    def test_empty_term_keeps_all(self):
        assert filter_categories(CATEGORIES, "") == CATEGORIES

    def test_raw_search_term(self):
        result = filter_categories(CATEGORIES, "Kitchen & ")

        assert [c.id for c in result] == ["HomeKitchen", "KitchenDining"]

    def test_case_insensitive(self):
        assert [c.id for c in filter_categories(CATEGORIES, "table")] == ["Tablecloths"]


class TestPendingUpdates:
    """Tests for collecting changed flags."""

    def test_only_changed_flags(self):
        edits = {"HomeKitchen": True, "KitchenDining": True, "Tablecloths": False}

        assert pending_updates(CATEGORIES, edits) == [CategoryStatus("HomeKitchen", True)]

    def test_unknown_ids_ignored(self):
        assert pending_updates(CATEGORIES, {"Mugs": True}) == []
