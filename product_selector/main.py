"""
Main entry point for the product selector.
"""
import logging
from typing import Any, Dict, List, Optional

from product_selector.analysis.filter_engine import FilterEngine
from product_selector.analysis.range_derivation import derive_defaults
from product_selector.data.connectors.base_connector import BaseConnector
from product_selector.data.connectors.snowflake_connector import SnowflakeConnector
from product_selector.data.ingest.spreadsheet_ingestor import ProgressCallback, SpreadsheetIngestor
from product_selector.data.models.filters import FilterCriteria, FilterOptions, FilterStatistics
from product_selector.data.models.product import ProductRecord
from product_selector.data.repositories.blacklist_repository import BlacklistRepository
from product_selector.utils.logging_config import setup_logging
from product_selector.utils.normalization import normalize_category_name


class ProductSelectionSession:
    """
    Owns the state of one browsing session: the ingested products, the
    active filter criteria and the blacklist snapshot.
    """

    def __init__(
        self,
        blacklist_repository: Optional[BlacklistRepository] = None,
        ingestor: Optional[SpreadsheetIngestor] = None,
        filter_engine: Optional[FilterEngine] = None,
        log_level=logging.INFO
    ):
        """
        Initialize the session.

        Args:
            blacklist_repository (Optional[BlacklistRepository]): Blacklist store access.
                Defaults to a repository over the environment-configured Snowflake connector.
            ingestor (Optional[SpreadsheetIngestor]): Spreadsheet parser
            filter_engine (Optional[FilterEngine]): Filter engine
            log_level: Logging level
        """
        self.logger = setup_logging(log_level=log_level)

        if blacklist_repository is None:
            blacklist_repository = BlacklistRepository(SnowflakeConnector())
        self.blacklist_repository = blacklist_repository
        self.ingestor = ingestor or SpreadsheetIngestor()
        self.filter_engine = filter_engine or FilterEngine()

        self.products: List[ProductRecord] = []
        self.options = FilterOptions()
        self.criteria = self.options.to_criteria()
        self.blacklist: Dict[str, bool] = {}

    def load(self, file: Any, on_progress: Optional[ProgressCallback] = None, filename: Optional[str] = None) -> List[ProductRecord]:
        """
        Ingest a spreadsheet and reset filters to the derived defaults.

        On failure the previous collection is discarded and the error re-raised.

        Args:
            file (Any): Path, raw bytes, or file-like upload
            on_progress (Optional[ProgressCallback]): Progress callback
            filename (Optional[str]): Name to validate for raw bytes

        Returns:
            List[ProductRecord]: The ingested products
        """
        try:
            products = self.ingestor.parse(file, on_progress=on_progress, filename=filename)
        except Exception:
            self.clear()
            raise

        self.products = products
        self.blacklist = {}
        self.options = derive_defaults(products)
        self.criteria = self.options.to_criteria()
        self.logger.info(f"Loaded {len(products)} products")

        return products

    def clear(self) -> None:
        """Discard the product collection and reset filters."""
        self.products = []
        self.blacklist = {}
        self.options = FilterOptions()
        self.criteria = self.options.to_criteria()

    def refresh_blacklist(self) -> Dict[str, bool]:
        """
        Look up blacklist flags for every sub-category in the collection.

        Returns:
            Dict[str, bool]: The new blacklist snapshot
        """
        sub_categories = [product.sub_category for product in self.products]
        self.blacklist = self.blacklist_repository.get_batch_status(sub_categories)
        return self.blacklist

    def apply(self, criteria: Optional[FilterCriteria] = None) -> List[ProductRecord]:
        """
        Filter the collection with the current blacklist snapshot.

        Args:
            criteria (Optional[FilterCriteria]): New criteria to store and apply;
                                                 uses the current criteria if None

        Returns:
            List[ProductRecord]: The filtered view
        """
        if criteria is not None:
            self.criteria = criteria
        return self.filter_engine.apply(self.products, self.criteria, dict(self.blacklist))

    def statistics(self, filtered: Optional[List[ProductRecord]] = None) -> FilterStatistics:
        """
        Summarize a filtered view of the collection.

        Args:
            filtered (Optional[List[ProductRecord]]): The view; recomputed if None

        Returns:
            FilterStatistics: Summary counts
        """
        if filtered is None:
            filtered = self.apply()
        return self.filter_engine.summarize(self.products, filtered, self.blacklist)

    def reset_filters(self) -> FilterCriteria:
        """
        Restore filter criteria to the ranges derived from the collection.

        Returns:
            FilterCriteria: The default criteria
        """
        self.criteria = self.options.to_criteria()
        return self.criteria

    def toggle_category(self, category: str, is_blacklisted: bool) -> bool:
        """
        Persist a blacklist flag and update the local snapshot.

        The change affects subsequent filter passes only.

        Args:
            category (str): Category name (raw or normalized)
            is_blacklisted (bool): New flag value

        Returns:
            bool: True if the store accepted the change
        """
        if not self.blacklist_repository.set_status(category, is_blacklisted):
            return False

        snapshot = dict(self.blacklist)
        snapshot[category] = is_blacklisted
        # Keep raw spellings in the snapshot consistent with the normalized key
        key = normalize_category_name(category)
        snapshot[key] = is_blacklisted
        for product in self.products:
            if normalize_category_name(product.sub_category) == key:
                snapshot[product.sub_category] = is_blacklisted
        self.blacklist = snapshot

        return True


def run_selection(
    file: Any,
    criteria: Optional[FilterCriteria] = None,
    connector: Optional[BaseConnector] = None,
    use_blacklist: bool = True,
    on_progress: Optional[ProgressCallback] = None,
    log_level: int = logging.INFO,
    filename: Optional[str] = None
) -> List[ProductRecord]:
    """
    Ingest a spreadsheet, look up the blacklist and filter in one call.

    Args:
        file (Any): Path, raw bytes, or file-like upload
        criteria (Optional[FilterCriteria]): Filter criteria (defaults to the derived ranges)
        connector (Optional[BaseConnector]): Store connector (defaults to Snowflake from env)
        use_blacklist (bool): Whether to exclude blacklisted sub-categories
        on_progress (Optional[ProgressCallback]): Progress callback
        log_level (int): Logging level
        filename (Optional[str]): Name to validate for raw bytes

    Returns:
        List[ProductRecord]: The filtered products
    """
    repository = BlacklistRepository(connector if connector is not None else SnowflakeConnector())
    session = ProductSelectionSession(blacklist_repository=repository, log_level=log_level)

    session.load(file, on_progress=on_progress, filename=filename)
    if use_blacklist:
        session.refresh_blacklist()

    return session.apply(criteria)


if __name__ == "__main__":
    import sys
    for product in run_selection(sys.argv[1]):
        print(f"{product.asin}\t{product.price}\t{product.title}")
