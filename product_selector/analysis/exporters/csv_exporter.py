"""
CSV exporter for filtered product views.
"""
import os
from typing import Sequence
from product_selector.analysis.exporters.base_exporter import BaseExporter
from product_selector.data.models.product import ProductRecord
from product_selector.utils.logging_config import get_logger

# Set up logging
logger = get_logger(__name__)


class CSVExporter(BaseExporter):
    """
    Exporter for product views to CSV files.
    """

    def export(self, products: Sequence[ProductRecord], output_path: str) -> str:
        """
        Export products to a CSV file.

        Args:
            products (Sequence[ProductRecord]): Products to export
            output_path (str): Destination CSV path (parent directories are created)

        Returns:
            str: Path to the exported CSV file
        """
        output_dir = os.path.dirname(output_path)
        if output_dir:
            os.makedirs(output_dir, exist_ok=True)

        df = self.prepare_dataframe(products)
        # utf-8-sig so spreadsheet tools read the Chinese text correctly
        df.to_csv(output_path, index=False, encoding="utf-8-sig")
        logger.info(f"Exported {len(df)} products to {output_path}")

        return output_path
