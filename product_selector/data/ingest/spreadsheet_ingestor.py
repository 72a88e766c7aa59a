"""
Spreadsheet ingestor for product listing exports.

Reads the first sheet of an .xlsx export, locates the header row (skipping
an optional "Product-..." title row) and maps each data row onto a
ProductRecord. Rows without an ASIN are dropped; malformed cells never fail
the batch.
"""
import io
import os
from typing import Any, Callable, Dict, List, Mapping, Optional, Sequence, Tuple

import pandas as pd

from product_selector.config.app_config import (
    ASIN_LABEL,
    HEADER_LABELS,
    HEADER_SENTINEL_PREFIX,
    PROGRESS_READ,
    PROGRESS_DECODED,
    PROGRESS_SHEET_SELECTED,
    PROGRESS_CONVERTED,
    PROGRESS_COMPLETE,
)
from product_selector.data.models.product import ProductRecord
from product_selector.exceptions import ParseError
from product_selector.utils.conversion import parse_float, parse_int, parse_text
from product_selector.utils.logging_config import get_logger
from product_selector.utils.validation import describe_upload, validate_upload

# Set up logging
logger = get_logger(__name__)

ProgressCallback = Callable[[int], None]

FLOAT_FIELDS = ("price", "monthly_revenue", "rating")
INT_FIELDS = ("monthly_sales", "review_count")


class SpreadsheetIngestor:
    """
    Parses spreadsheet exports into ProductRecord objects.
    """

    def __init__(
        self,
        header_labels: Optional[Mapping[str, Sequence[str]]] = None,
        sentinel_prefix: str = HEADER_SENTINEL_PREFIX
    ):
        """
        Initialize the ingestor.

        Args:
            header_labels (Optional[Mapping[str, Sequence[str]]]): Field name to accepted
                column labels. Defaults to the export tool's bilingual label set.
            sentinel_prefix (str): Prefix identifying a title row above the header row
        """
        self.header_labels = header_labels if header_labels is not None else HEADER_LABELS
        self.sentinel_prefix = sentinel_prefix

    def parse(
        self,
        file: Any,
        on_progress: Optional[ProgressCallback] = None,
        filename: Optional[str] = None
    ) -> List[ProductRecord]:
        """
        Parse an uploaded spreadsheet into product records.

        Args:
            file (Any): Path, raw bytes, or file-like object (e.g. a Streamlit UploadedFile)
            on_progress (Optional[ProgressCallback]): Called with increasing percentages, ending at 100
            filename (Optional[str]): Name to validate when ``file`` carries none (raw bytes)

        Returns:
            List[ProductRecord]: One record per data row with a non-empty ASIN, in row order

        Raises:
            ValidationError: If the file is not an .xlsx file or is too large
            ParseError: If the file cannot be decoded or has no header row
        """
        report = on_progress or (lambda percent: None)

        name, size = describe_upload(file)
        if filename:
            name = filename
        validate_upload(name, size)

        data = self._read_bytes(file)
        if size is None:
            validate_upload(name, len(data))
        report(PROGRESS_READ)

        try:
            workbook = pd.ExcelFile(io.BytesIO(data), engine="openpyxl")
            report(PROGRESS_DECODED)

            if not workbook.sheet_names:
                raise ParseError("The workbook has no sheets")
            sheet_name = workbook.sheet_names[0]
            report(PROGRESS_SHEET_SELECTED)

            # Only blank cells are missing; text such as "NA" or "N/A" is a real value
            sheet = workbook.parse(sheet_name, header=None, keep_default_na=False, na_values=[""])
            rows = self._to_rows(sheet)
            report(PROGRESS_CONVERTED)
        except ParseError:
            raise
        except Exception as e:
            logger.error(f"Error decoding spreadsheet {name}: {str(e)}")
            raise ParseError("Failed to parse the file, please check that it is a valid .xlsx export") from e

        products = self.map_rows(rows)
        report(PROGRESS_COMPLETE)

        logger.info(f"Parsed {len(products)} products from {name} (sheet: {sheet_name})")
        return products

    def map_rows(self, rows: List[List[Any]]) -> List[ProductRecord]:
        """
        Map row-major cell values onto product records.

        Args:
            rows (List[List[Any]]): Sheet rows, empty cells as None

        Returns:
            List[ProductRecord]: Records for rows with a non-empty ASIN

        Raises:
            ParseError: If no header row can be found
        """
        headers, data_start = self.detect_header(rows)

        products = []
        skipped = 0
        for row in rows[data_start:]:
            raw = self._zip_row(headers, row)
            if not raw:
                continue

            product = self.to_product(raw)
            if product is None:
                skipped += 1
                continue
            products.append(product)

        if skipped:
            logger.info(f"Skipped {skipped} rows without an ASIN")

        return products

    def detect_header(self, rows: List[List[Any]]) -> Tuple[List[Optional[str]], int]:
        """
        Locate the header row.

        Args:
            rows (List[List[Any]]): Sheet rows

        Returns:
            Tuple[List[Optional[str]], int]: Header labels and the index of the first data row

        Raises:
            ParseError: If the header row is missing or empty
        """
        first_cell = rows[0][0] if rows and rows[0] else None

        if len(rows) > 1 and isinstance(first_cell, str) and first_cell.startswith(self.sentinel_prefix):
            logger.debug(f"Skipping title row: {first_cell}")
            header_row, data_start = rows[1], 2
        elif rows:
            header_row, data_start = rows[0], 1
        else:
            raise ParseError("Could not find a valid header row")

        headers = [parse_text(cell) or None for cell in header_row]
        if not any(headers):
            raise ParseError("Could not find a valid header row")

        if not any(header and ASIN_LABEL in header for header in headers):
            logger.warning(f"No ASIN column found in header row: {headers}")

        return headers, data_start

    def to_product(self, raw: Dict[str, Any]) -> Optional[ProductRecord]:
        """
        Build a product record from a label-to-value row mapping.

        Args:
            raw (Dict[str, Any]): Header label to cell value

        Returns:
            Optional[ProductRecord]: The record, or None if the row has no ASIN
        """
        values = {}
        for field_name, labels in self.header_labels.items():
            cell = next((raw[label] for label in labels if label in raw), None)

            if field_name in FLOAT_FIELDS:
                values[field_name] = parse_float(cell, field=field_name)
            elif field_name in INT_FIELDS:
                values[field_name] = parse_int(cell, field=field_name)
            else:
                values[field_name] = parse_text(cell)

        if not values.get("asin"):
            return None

        return ProductRecord(raw=raw, **values)

    @staticmethod
    def _zip_row(headers: List[Optional[str]], row: List[Any]) -> Dict[str, Any]:
        return {
            header: cell
            for header, cell in zip(headers, row)
            if header and cell is not None
        }

    @staticmethod
    def _to_rows(sheet: pd.DataFrame) -> List[List[Any]]:
        return [
            [None if _is_empty_cell(cell) else cell for cell in row]
            for row in sheet.itertuples(index=False, name=None)
        ]

    @staticmethod
    def _read_bytes(file: Any) -> bytes:
        if isinstance(file, (bytes, bytearray)):
            return bytes(file)

        if isinstance(file, (str, os.PathLike)):
            try:
                with open(file, "rb") as fh:
                    return fh.read()
            except OSError as e:
                raise ParseError(f"Failed to read the file: {str(e)}") from e

        if hasattr(file, "getvalue"):
            return file.getvalue()

        if hasattr(file, "seek"):
            file.seek(0)
        return file.read()


def _is_empty_cell(cell: Any) -> bool:
    try:
        return bool(pd.isna(cell))
    except (TypeError, ValueError):
        return False


def parse_spreadsheet(
    file: Any,
    on_progress: Optional[ProgressCallback] = None,
    filename: Optional[str] = None
) -> List[ProductRecord]:
    """
    Parse an uploaded spreadsheet with the default label set.

    Args:
        file (Any): Path, raw bytes, or file-like object
        on_progress (Optional[ProgressCallback]): Progress callback
        filename (Optional[str]): Name to validate for raw bytes

    Returns:
        List[ProductRecord]: Parsed products
    """
    return SpreadsheetIngestor().parse(file, on_progress=on_progress, filename=filename)
