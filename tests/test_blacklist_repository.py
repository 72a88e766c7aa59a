"""
Tests for the blacklist repository.
"""
import pytest

from product_selector.data.models.filters import CategoryStatus
from product_selector.data.repositories.blacklist_repository import BlacklistRepository


class TestFailOpen:
    """Tests for the unconfigured and unreachable store policy."""

    @pytest.fixture(params=["missing", "unconfigured", "offline"])
    def repository(self, request, make_connector):
        if request.param == "missing":
            return BlacklistRepository(None)
        if request.param == "unconfigured":
            return BlacklistRepository(make_connector({"Tablecloths": True}, configured=False))
        return BlacklistRepository(make_connector({"Tablecloths": True}, fail=True))

    def test_get_status_is_false(self, repository):
        assert repository.get_status("Tablecloths") is False

    def test_batch_has_no_true_flags(self, repository):
        assert not any(repository.get_batch_status(["Tablecloths", "Napkins"]).values())

    def test_writes_fail(self, repository):
        assert repository.set_status("Tablecloths", False) is False

    def test_listings_are_empty(self, repository):
        assert repository.list_all_blacklisted() == []
        assert repository.list_all_with_status() == []

    def test_connection_test_fails(self, repository):
        assert repository.test_connection() is False


class TestGetStatus:
    """Tests for single lookups."""

    def test_lookup_uses_normalized_key(self, connector):
        connector.flags["Tablecloths"] = True
        repository = BlacklistRepository(connector)

        assert repository.get_status("Table cloths") is True
        assert connector.lookups == ["Tablecloths"]

    def test_absent_entry_is_false(self, connector):
        assert BlacklistRepository(connector).get_status("Napkins") is False

    def test_only_boolean_true_counts(self, connector):
        connector.flags.update({"Napkins": "true", "Mugs": 1})
        repository = BlacklistRepository(connector)

        assert repository.get_status("Napkins") is False
        assert repository.get_status("Mugs") is False

    def test_empty_category_skips_lookup(self, connector):
        assert BlacklistRepository(connector).get_status(" & ") is False
        assert connector.queries == []


class TestGetBatchStatus:
    """Tests for batch lookups."""

    def test_keys_by_raw_and_normalized(self, connector):
        connector.flags.update({"Tablecloths": True, "KitchenDining": False})
        repository = BlacklistRepository(connector)

        result = repository.get_batch_status(["Table cloths", "Kitchen & Dining", "Tablecloths"])

        assert result == {
            "Tablecloths": True,
            "Table cloths": True,
            "KitchenDining": False,
            "Kitchen & Dining": False,
        }

    def test_one_lookup_per_normalized_name(self, connector):
        repository = BlacklistRepository(connector, max_workers=4)

        repository.get_batch_status(["Table cloths", "Tablecloths", "Table cloths", "", None, "Mugs"])

        assert sorted(connector.lookups) == ["Mugs", "Tablecloths"]

    def test_empty_input(self, connector):
        assert BlacklistRepository(connector).get_batch_status([]) == {}
        assert connector.queries == []


class TestSetStatus:
    """Tests for writes."""

    def test_upserts_normalized_key(self, connector):
        repository = BlacklistRepository(connector)

        assert repository.set_status("Table cloths", True) is True
        assert connector.flags == {"Tablecloths": True}

        assert repository.set_status("Tablecloths", False) is True
        assert connector.flags == {"Tablecloths": False}

    def test_empty_key_is_rejected(self, connector):
        assert BlacklistRepository(connector).set_status("", True) is False
        assert connector.queries == []

    def test_batch_update_counts(self, connector):
        repository = BlacklistRepository(connector)
        updates = [CategoryStatus("Mugs", True), CategoryStatus("", True), CategoryStatus("Napkins", False)]

        result = repository.set_batch_status(updates)

        assert (result.success, result.failed) == (2, 1)
        assert result.errors == [""]
        assert connector.flags == {"Mugs": True, "Napkins": False}

    def test_batch_update_when_offline(self, make_connector):
        repository = BlacklistRepository(make_connector(fail=True))

        result = repository.set_batch_status([CategoryStatus("Mugs", True), CategoryStatus("Napkins", True)])

        assert (result.success, result.failed) == (0, 2)
        assert result.errors == ["Mugs", "Napkins"]

    def test_batch_update_unconfigured(self):
        result = BlacklistRepository(None).set_batch_status([CategoryStatus("Mugs", True)])

        assert (result.success, result.failed) == (0, 1)


class TestListing:
    """Tests for listing operations."""

    def test_list_all_blacklisted(self, connector):
        connector.flags.update({"Mugs": True, "Napkins": False, "Tablecloths": True})

        assert sorted(BlacklistRepository(connector).list_all_blacklisted()) == ["Mugs", "Tablecloths"]

    def test_list_all_with_status_sorted(self, connector):
        connector.flags.update({"Tablecloths": True, "Mugs": False, "KitchenDining": True})

        result = BlacklistRepository(connector).list_all_with_status()

        assert result == [
            CategoryStatus("KitchenDining", True),
            CategoryStatus("Mugs", False),
            CategoryStatus("Tablecloths", True),
        ]

    def test_get_all_matches_listing(self, connector):
        connector.flags.update({"Mugs": True})
        repository = BlacklistRepository(connector)

        assert repository.get_all() == repository.list_all_with_status()


class TestAdministration:
    """Tests for connection probing and table setup."""

    def test_connection_probe(self, connector):
        assert BlacklistRepository(connector).test_connection() is True
        assert connector.lookups == ["test"]

    def test_ensure_table(self, connector):
        assert BlacklistRepository(connector).ensure_table() is True
        assert "CREATE TABLE IF NOT EXISTS" in connector.queries[0][0]
