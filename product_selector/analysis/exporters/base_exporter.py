"""
Base exporter interface for exporting filtered product views.
"""
from abc import ABC, abstractmethod
from typing import Sequence
import pandas as pd
from product_selector.data.models.product import ProductRecord, TYPED_FIELDS


class BaseExporter(ABC):
    """
    Abstract base class for exporters that write a filtered product view.
    """

    @abstractmethod
    def export(self, products: Sequence[ProductRecord], output_path: str) -> str:
        """
        Export products to a specified format.

        Args:
            products (Sequence[ProductRecord]): Products to export
            output_path (str): Destination file path

        Returns:
            str: Path to the exported data
        """
        pass

    def prepare_dataframe(self, products: Sequence[ProductRecord]) -> pd.DataFrame:
        """
        Prepare a DataFrame of the typed product fields.

        Args:
            products (Sequence[ProductRecord]): Products to tabulate

        Returns:
            pd.DataFrame: One row per product, columns in record field order
        """
        return pd.DataFrame([product.to_dict() for product in products], columns=list(TYPED_FIELDS))
