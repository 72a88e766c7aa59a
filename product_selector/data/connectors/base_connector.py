"""
Base store connector interface.
"""
from abc import ABC, abstractmethod
import pandas as pd
from typing import Dict, Any, Optional


class BaseConnector(ABC):
    """
    Abstract base class for blacklist store connections.
    """

    def is_configured(self) -> bool:
        """
        Check whether the connector has enough settings to connect.

        Returns:
            bool: True if a connection can be attempted
        """
        return True

    @abstractmethod
    def connect(self) -> Any:
        """
        Establish a connection to the store.

        Returns:
            Any: The connection/session object

        Raises:
            StoreUnavailable: If the store is unconfigured or unreachable
        """
        pass

    @abstractmethod
    def disconnect(self) -> None:
        """
        Close the store connection.
        """
        pass

    @abstractmethod
    def execute_query(self, query: str, params: Optional[Dict[str, Any]] = None) -> pd.DataFrame:
        """
        Execute a query and return the results as a DataFrame.

        Args:
            query (str): The SQL query to execute
            params (Optional[Dict[str, Any]]): Parameters to bind to the query

        Returns:
            pd.DataFrame: The query results as a pandas DataFrame
        """
        pass

    def __enter__(self):
        self.connect()
        return self

    def __exit__(self, exc_type, exc_val, exc_tb):
        self.disconnect()
