"""
Tests for the Snowflake connector and query binding.
"""
from unittest.mock import MagicMock

import pandas as pd
import pytest

from product_selector.data.connectors.snowflake_connector import (
    SnowflakeConnector,
    bind_params,
    format_sql_value,
)
from product_selector.exceptions import StoreUnavailable


class TestFormatSqlValue:
    """Tests for SQL literal rendering."""

    def test_literals(self):
        assert format_sql_value(None) == "NULL"
        assert format_sql_value(True) == "TRUE"
        assert format_sql_value(False) == "FALSE"
        assert format_sql_value(3) == "3"
        assert format_sql_value("Mugs") == "'Mugs'"

    def test_quotes_are_escaped(self):
        assert format_sql_value("O'Brien") == "'O''Brien'"
        assert format_sql_value("a\\b") == "'a\\\\b'"


class TestBindParams:
    """Tests for placeholder binding."""

    def test_binds_named_placeholders(self):
        query = "SELECT * FROM T WHERE ID = :category_id AND FLAG = :is_exclude"

        bound = bind_params(query, {"category_id": "Mugs", "is_exclude": True})

        assert bound == "SELECT * FROM T WHERE ID = 'Mugs' AND FLAG = TRUE"

    def test_prefix_names_do_not_collide(self):
        bound = bind_params("SELECT :id, :id_two", {"id": 1, "id_two": 2})

        assert bound == "SELECT 1, 2"

    def test_bound_values_are_not_rescanned(self):
        bound = bind_params("SELECT :a, :b", {"a": ":b", "b": "x"})

        assert bound == "SELECT ':b', 'x'"

    def test_casts_and_unknown_names_untouched(self):
        assert bind_params("SELECT 1::int, :other", {"int": 5}) == "SELECT 1::int, :other"

    def test_no_params(self):
        assert bind_params("SELECT :a", None) == "SELECT :a"


class TestSnowflakeConnector:
    """Tests for connection handling."""

    def test_unconfigured(self):
        connector = SnowflakeConnector(config={})

        assert connector.is_configured() is False
        with pytest.raises(StoreUnavailable):
            connector.connect()

    def test_execute_query_uses_session(self):
        connector = SnowflakeConnector(config={"account": "acct", "user": "me"})
        session = MagicMock()
        session.sql.return_value.to_pandas.return_value = pd.DataFrame({"CATEGORY_ID": ["Mugs"]})
        connector.session = session

        df = connector.execute_query("SELECT * FROM T WHERE ID = :category_id", {"category_id": "Mugs"})

        session.sql.assert_called_once_with("SELECT * FROM T WHERE ID = 'Mugs'")
        assert df["CATEGORY_ID"].tolist() == ["Mugs"]

    def test_context_manager_closes_session(self):
        connector = SnowflakeConnector(config={"account": "acct", "user": "me"})
        session = MagicMock()
        connector.session = session

        with connector:
            pass

        session.close.assert_called_once()
        assert connector.session is None
