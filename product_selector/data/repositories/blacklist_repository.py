"""
Blacklist repository for category exclusion flags.

Every operation fails open: an unconfigured or unreachable store reads as
"nothing is blacklisted" and writes report failure, so a store outage never
blocks product browsing.
"""
from concurrent.futures import ThreadPoolExecutor
from typing import Any, Dict, Iterable, List, Optional

import numpy as np
import pandas as pd

from product_selector.config.app_config import LOOKUP_WORKERS
from product_selector.config.store_config import (
    CONNECTION_PROBE_KEY,
    CREATE_TABLE_TEMPLATE,
    GET_STATUS_TEMPLATE,
    LIST_ALL_TEMPLATE,
    LIST_BLACKLISTED_TEMPLATE,
    UPSERT_STATUS_TEMPLATE,
)
from product_selector.data.connectors.base_connector import BaseConnector
from product_selector.data.models.filters import BatchUpdateResult, CategoryStatus
from product_selector.data.repositories.base_repository import BaseRepository
from product_selector.exceptions import StoreUnavailable
from product_selector.utils.logging_config import get_logger
from product_selector.utils.normalization import normalize_category_name

# Set up logging
logger = get_logger(__name__)


def _as_flag(value: Any) -> bool:
    # Only a real boolean true counts as blacklisted
    return value is True or (isinstance(value, np.bool_) and bool(value))


class BlacklistRepository(BaseRepository[CategoryStatus]):
    """
    Repository for reading and writing category blacklist flags.
    """

    def __init__(self, connector: Optional[BaseConnector], max_workers: int = LOOKUP_WORKERS):
        """
        Initialize the blacklist repository.

        Args:
            connector (Optional[BaseConnector]): The store connector to use
            max_workers (int): Concurrent lookups issued by get_batch_status
        """
        super().__init__(connector)
        self.max_workers = max(1, max_workers)

    def get_all(self, *args, **kwargs) -> List[CategoryStatus]:
        """
        Get every known category with its flag.

        Returns:
            List[CategoryStatus]: Categories sorted by id
        """
        return self.list_all_with_status()

    def get_raw_data(self, *args, **kwargs) -> pd.DataFrame:
        """
        Get the full blacklist table as a DataFrame.

        Returns:
            pd.DataFrame: CATEGORY_ID and IS_EXCLUDE columns
        """
        return self._execute_query(LIST_ALL_TEMPLATE)

    def get_status(self, category: str) -> bool:
        """
        Check whether a category is blacklisted.

        Args:
            category (str): Raw category name (normalized before lookup)

        Returns:
            bool: True only if the store holds a true flag for the category
        """
        if not self._check_available("blacklist check"):
            return False

        key = normalize_category_name(category)
        if not key:
            return False

        try:
            return self._lookup(key)
        except Exception as e:
            logger.error(f"Error getting blacklist status for {category}: {str(e)}")
            return False

    def get_batch_status(self, categories: Iterable[str]) -> Dict[str, bool]:
        """
        Check blacklist flags for many categories at once.

        One lookup is issued per unique normalized name; all lookups complete
        before this returns. The result is keyed by both the normalized names
        and the original spellings.

        Args:
            categories (Iterable[str]): Raw category names, duplicates allowed

        Returns:
            Dict[str, bool]: Category name (raw or normalized) to flag
        """
        unique_categories = list(dict.fromkeys(c for c in (categories or []) if c))
        if not unique_categories:
            return {}

        if not self._check_available("blacklist check"):
            return {}

        keys = list(dict.fromkeys(
            key for key in map(normalize_category_name, unique_categories) if key
        ))
        if not keys:
            return {}

        blacklist_map: Dict[str, bool] = {}
        try:
            with ThreadPoolExecutor(max_workers=min(self.max_workers, len(keys))) as pool:
                blacklist_map.update(zip(keys, pool.map(self._safe_lookup, keys)))

            for category in unique_categories:
                key = normalize_category_name(category)
                if key in blacklist_map:
                    blacklist_map[category] = blacklist_map[key]
        except Exception as e:
            logger.error(f"Error getting batch blacklist status: {str(e)}")

        logger.info(
            f"Checked {len(keys)} categories, "
            f"{sum(1 for key in keys if blacklist_map.get(key))} blacklisted"
        )
        return blacklist_map

    def set_status(self, category: str, is_blacklisted: bool) -> bool:
        """
        Create or update the flag for a category.

        Args:
            category (str): Category name (normalized before writing)
            is_blacklisted (bool): New flag value

        Returns:
            bool: True if the write succeeded
        """
        if not self._check_available("blacklist update"):
            return False

        key = normalize_category_name(category)
        if not key:
            logger.error("Category id cannot be empty")
            return False

        try:
            self._execute_query(
                UPSERT_STATUS_TEMPLATE,
                {"category_id": key, "is_exclude": bool(is_blacklisted)}
            )
        except Exception as e:
            logger.error(f"Error updating blacklist status for {key}: {str(e)}")
            return False

        logger.info(f"Category {key} blacklist status set to: {bool(is_blacklisted)}")
        return True

    def set_batch_status(self, updates: Iterable[CategoryStatus]) -> BatchUpdateResult:
        """
        Apply many flag updates.

        Args:
            updates (Iterable[CategoryStatus]): Categories and their new flags

        Returns:
            BatchUpdateResult: Success and failure counts
        """
        updates = list(updates or [])
        if not updates:
            return BatchUpdateResult()

        if not self._check_available("batch blacklist update"):
            return BatchUpdateResult(success=0, failed=len(updates))

        with ThreadPoolExecutor(max_workers=min(self.max_workers, len(updates))) as pool:
            outcomes = list(pool.map(lambda u: self.set_status(u.id, u.is_blacklisted), updates))

        failed_ids = [update.id for update, ok in zip(updates, outcomes) if not ok]
        return BatchUpdateResult(
            success=len(updates) - len(failed_ids),
            failed=len(failed_ids),
            errors=failed_ids or None
        )

    def list_all_blacklisted(self) -> List[str]:
        """
        Get the ids of all blacklisted categories.

        Returns:
            List[str]: Normalized category ids with a true flag
        """
        if not self._check_available("blacklist listing"):
            return []

        try:
            df = self._execute_query(LIST_BLACKLISTED_TEMPLATE)
        except Exception as e:
            logger.error(f"Error listing blacklisted categories: {str(e)}")
            return []

        if df.empty or "CATEGORY_ID" not in df.columns:
            return []
        return [str(category_id) for category_id in df["CATEGORY_ID"].tolist()]

    def list_all_with_status(self) -> List[CategoryStatus]:
        """
        Get every known category with its flag, for the blacklist editor.

        Returns:
            List[CategoryStatus]: Categories sorted by id
        """
        if not self._check_available("category listing"):
            return []

        try:
            df = self.get_raw_data()
        except Exception as e:
            logger.error(f"Error listing categories: {str(e)}")
            return []

        if df.empty or "CATEGORY_ID" not in df.columns:
            return []

        flags = df["IS_EXCLUDE"] if "IS_EXCLUDE" in df.columns else [False] * len(df)
        categories = [
            CategoryStatus(id=str(category_id), is_blacklisted=_as_flag(flag))
            for category_id, flag in zip(df["CATEGORY_ID"], flags)
        ]
        return sorted(categories, key=lambda c: c.id)

    def test_connection(self) -> bool:
        """
        Check that the store answers a probe read.

        Returns:
            bool: True if the round trip succeeded
        """
        if not self._check_available("connection test"):
            return False

        try:
            self._execute_query(GET_STATUS_TEMPLATE, {"category_id": CONNECTION_PROBE_KEY})
            return True
        except Exception as e:
            logger.error(f"Blacklist store connection test failed: {str(e)}")
            return False

    def ensure_table(self) -> bool:
        """
        Create the blacklist table if it does not exist.

        Returns:
            bool: True if the table exists afterwards
        """
        if not self._check_available("table setup"):
            return False

        try:
            self._execute_query(CREATE_TABLE_TEMPLATE)
            return True
        except Exception as e:
            logger.error(f"Error creating blacklist table: {str(e)}")
            return False

    def _check_available(self, operation: str) -> bool:
        if self.is_available:
            return True
        logger.warning(f"Blacklist store not configured, skipping {operation}")
        return False

    def _lookup(self, key: str) -> bool:
        df = self._execute_query(GET_STATUS_TEMPLATE, {"category_id": key})
        if df.empty or "IS_EXCLUDE" not in df.columns:
            return False
        return _as_flag(df["IS_EXCLUDE"].iloc[0])

    def _safe_lookup(self, key: str) -> bool:
        try:
            return self._lookup(key)
        except StoreUnavailable as e:
            logger.warning(f"Blacklist store unavailable for {key}: {str(e)}")
            return False
        except Exception as e:
            logger.error(f"Error getting blacklist status for {key}: {str(e)}")
            return False
