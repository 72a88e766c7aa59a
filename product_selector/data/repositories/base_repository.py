"""
Base repository interface for data access.
"""
from abc import ABC, abstractmethod
from typing import Any, List, Dict, Optional, Generic, TypeVar
import pandas as pd
from product_selector.data.connectors.base_connector import BaseConnector
from product_selector.exceptions import StoreUnavailable
from product_selector.utils.logging_config import get_logger

# Set up logging
logger = get_logger(__name__)

# Generic type for repository entities
T = TypeVar('T')


class BaseRepository(ABC, Generic[T]):
    """
    Abstract base class for repositories that provide data access.
    """

    def __init__(self, connector: Optional[BaseConnector]):
        """
        Initialize the repository with a store connector.

        Args:
            connector (Optional[BaseConnector]): The store connector to use, or None
                                                 when no store is configured
        """
        self.connector = connector

    @property
    def is_available(self) -> bool:
        """Whether a configured connector is attached."""
        return self.connector is not None and self.connector.is_configured()

    @abstractmethod
    def get_all(self, *args, **kwargs) -> List[T]:
        """
        Get all entities.

        Returns:
            List[T]: A list of entity objects
        """
        pass

    @abstractmethod
    def get_raw_data(self, *args, **kwargs) -> pd.DataFrame:
        """
        Get raw data as a pandas DataFrame.

        Returns:
            pd.DataFrame: The raw data as a pandas DataFrame
        """
        pass

    def _execute_query(self, query: str, params: Optional[Dict[str, Any]] = None) -> pd.DataFrame:
        """
        Execute a query using the connector.

        Column names are upper-cased so results read the same regardless of
        how the store reports identifiers.

        Args:
            query (str): The SQL query to execute
            params (Optional[Dict[str, Any]]): Parameters to bind to the query

        Returns:
            pd.DataFrame: The query results

        Raises:
            StoreUnavailable: If no configured connector is attached
        """
        if not self.is_available:
            raise StoreUnavailable("No blacklist store is configured")

        df = self.connector.execute_query(query, params)
        if df is None:
            return pd.DataFrame()

        df.columns = [str(column).upper() for column in df.columns]
        return df
