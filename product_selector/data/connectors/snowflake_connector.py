"""
Snowflake store connector implementation.
"""
import re
import threading
import pandas as pd
from typing import Dict, Any, Optional
from product_selector.data.connectors.base_connector import BaseConnector
from product_selector.config.store_config import SNOWFLAKE_CONFIG, is_store_configured
from product_selector.exceptions import StoreUnavailable
from product_selector.utils.logging_config import get_logger

# Set up logging
logger = get_logger(__name__)

_PLACEHOLDER = re.compile(r"(?<!:):(\w+)")


def format_sql_value(value: Any) -> str:
    """
    Render a Python value as a Snowflake SQL literal.

    Args:
        value (Any): The value to render

    Returns:
        str: The SQL literal
    """
    if value is None:
        return "NULL"
    if isinstance(value, bool):
        return "TRUE" if value else "FALSE"
    if isinstance(value, (int, float)):
        return str(value)
    escaped = str(value).replace("\\", "\\\\").replace("'", "''")
    return f"'{escaped}'"


def bind_params(query: str, params: Optional[Dict[str, Any]]) -> str:
    """
    Replace :name placeholders in a query with SQL literals.

    Placeholders are matched in a single pass, so bound values are never
    re-scanned and names that are not parameters (e.g. ::casts) are left alone.

    Args:
        query (str): Query with :name placeholders
        params (Optional[Dict[str, Any]]): Values to bind

    Returns:
        str: The bound query
    """
    if not params:
        return query

    return _PLACEHOLDER.sub(
        lambda m: format_sql_value(params[m.group(1)]) if m.group(1) in params else m.group(0),
        query
    )


class SnowflakeConnector(BaseConnector):
    """
    Connector for Snowflake.
    """

    def __init__(self, config: Optional[Dict[str, Any]] = None):
        """
        Initialize the Snowflake connector.

        Args:
            config (Optional[Dict[str, Any]]): Snowflake connection configuration.
                                              If None, uses the environment via store_config.py
        """
        self.config = config if config is not None else SNOWFLAKE_CONFIG
        self.session = None
        self._lock = threading.Lock()

    def is_configured(self) -> bool:
        return is_store_configured(self.config)

    def connect(self):
        """
        Establish a connection to Snowflake.

        Returns:
            Session: The Snowflake session object

        Raises:
            StoreUnavailable: If the connector is unconfigured or the connection fails
        """
        if not self.is_configured():
            raise StoreUnavailable("Snowflake is not configured (set SNOWFLAKE_ACCOUNT and SNOWFLAKE_USER)")

        # Batch lookups call in from worker threads
        with self._lock:
            if self.session is None:
                try:
                    from snowflake.snowpark import Session

                    self.session = Session.builder.configs(self.config).create()
                    logger.info("Snowflake connection established.")
                except Exception as e:
                    logger.error(f"Error connecting to Snowflake: {str(e)}")
                    raise StoreUnavailable(f"Error connecting to Snowflake: {str(e)}") from e

        return self.session

    def disconnect(self) -> None:
        """
        Close the Snowflake connection.
        """
        with self._lock:
            try:
                if self.session is not None:
                    self.session.close()
                    logger.info("Snowflake connection closed.")
            except Exception as e:
                logger.error(f"Error closing Snowflake connection: {str(e)}")
                raise
            finally:
                self.session = None

    def execute_query(self, query: str, params: Optional[Dict[str, Any]] = None) -> pd.DataFrame:
        """
        Execute a SQL query on Snowflake and return the results as a DataFrame.

        Args:
            query (str): The SQL query to execute
            params (Optional[Dict[str, Any]]): Parameters to bind to the query

        Returns:
            pd.DataFrame: The query results as a pandas DataFrame
        """
        session = self.connect()

        try:
            formatted_query = bind_params(query, params)
            logger.debug(f"Executing query: {formatted_query.strip()[:200]}...")
            return session.sql(formatted_query).to_pandas()
        except Exception as e:
            logger.error(f"Error executing query: {str(e)}")
            raise
