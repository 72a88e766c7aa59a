"""
Tests for spreadsheet ingestion.
"""
import io
from types import SimpleNamespace

import pytest

from product_selector.config.app_config import MAX_UPLOAD_BYTES
from product_selector.data.ingest.spreadsheet_ingestor import SpreadsheetIngestor, parse_spreadsheet
from product_selector.exceptions import ParseError, ValidationError


class TestParse:
    """Tests for parsing .xlsx files end to end."""

    def test_parses_rows_and_drops_missing_asin(self, write_workbook, export_rows):
        products = parse_spreadsheet(write_workbook(export_rows))

        assert [p.asin for p in products] == ["B001", "B002", "B003"]

    def test_skips_title_row(self, write_workbook, export_rows):
        path = write_workbook(export_rows, title_row="Product-US-20240101")

        products = parse_spreadsheet(path)

        assert [p.asin for p in products] == ["B001", "B002", "B003"]

    def test_coerces_typed_fields(self, write_workbook, export_rows):
        first, second, third = parse_spreadsheet(write_workbook(export_rows))

        assert first.price == 19.99
        assert first.monthly_sales == 50
        assert first.rating == 4.5
        assert first.sub_category == "Table cloths"
        assert first.launch_date == "2024-01-15"
        assert second.monthly_revenue == 3125.0
        assert second.review_count == 40
        assert third.price == 35.0
        assert third.monthly_sales == 0
        assert third.monthly_revenue == 0.0

    def test_keeps_raw_row(self, write_workbook, export_rows):
        first = parse_spreadsheet(write_workbook(export_rows))[0]

        assert first.raw["价格($)"] == "19.99"
        assert first.raw["ASIN"] == "B001"

    def test_keeps_na_like_text(self, write_workbook):
        path = write_workbook([
            ["ASIN", "卖家所属地", "商品标题", "配送方式"],
            ["B001", "NA", "N/A", "None"],
        ])

        product = parse_spreadsheet(path)[0]

        assert product.seller_location == "NA"
        assert product.title == "N/A"
        assert product.shipping_method == "None"
        assert product.raw == {"ASIN": "B001", "卖家所属地": "NA", "商品标题": "N/A", "配送方式": "None"}

    def test_progress_is_monotonic_and_completes(self, write_workbook, export_rows):
        seen = []

        parse_spreadsheet(write_workbook(export_rows), on_progress=seen.append)

        assert seen == [20, 40, 60, 80, 100]

    def test_accepts_bytes_with_filename(self, write_workbook, export_rows):
        with open(write_workbook(export_rows), "rb") as fh:
            data = fh.read()

        products = SpreadsheetIngestor().parse(data, filename="upload.xlsx")

        assert len(products) == 3

    def test_accepts_file_like_upload(self, write_workbook, export_rows):
        with open(write_workbook(export_rows), "rb") as fh:
            upload = io.BytesIO(fh.read())
        upload.name = "upload.xlsx"

        products = SpreadsheetIngestor().parse(upload)

        assert len(products) == 3

    def test_uses_first_sheet_only(self, tmp_path, export_rows):
        from openpyxl import Workbook

        workbook = Workbook()
        workbook.active.append(["ASIN"])
        workbook.active.append(["FIRST"])
        other = workbook.create_sheet("Other")
        for row in export_rows:
            other.append(row)
        path = tmp_path / "sheets.xlsx"
        workbook.save(path)

        products = parse_spreadsheet(str(path))

        assert [p.asin for p in products] == ["FIRST"]


class TestValidation:
    """Tests for pre-parse validation and decode failures."""

    def test_rejects_wrong_extension(self):
        with pytest.raises(ValidationError):
            parse_spreadsheet("products.csv")

    def test_rejects_oversized_upload(self):
        upload = SimpleNamespace(name="big.xlsx", size=MAX_UPLOAD_BYTES + 1)

        with pytest.raises(ValidationError):
            parse_spreadsheet(upload)

    def test_undecodable_file_raises_parse_error(self):
        with pytest.raises(ParseError):
            SpreadsheetIngestor().parse(b"definitely not a zip", filename="broken.xlsx")

    def test_empty_sheet_raises_parse_error(self, write_workbook):
        with pytest.raises(ParseError):
            parse_spreadsheet(write_workbook([]))


class TestMapRows:
    """Tests for header detection and row mapping."""

    def test_sentinel_row_requires_prefix(self):
        rows = [["Products", None], ["ASIN", "Price"], ["B001", 3]]

        products = SpreadsheetIngestor().map_rows(rows)

        # "Products" is the header, so "ASIN"/"Price" is a data row
        assert [p.asin for p in products] == []

    def test_english_labels(self):
        rows = [["ASIN", "Price", "Monthly Sales", "Sub Category"], ["B009", "7.5", "12", "Mugs"]]

        product = SpreadsheetIngestor().map_rows(rows)[0]

        assert product.price == 7.5
        assert product.monthly_sales == 12
        assert product.sub_category == "Mugs"

    def test_first_matching_label_wins(self):
        rows = [["ASIN", "Price", "价格($)"], ["B010", "1", "2"]]

        product = SpreadsheetIngestor().map_rows(rows)[0]

        assert product.price == 2.0

    def test_malformed_cells_default_to_zero(self):
        rows = [["ASIN", "价格($)", "月销量", "评分"], ["B011", "abc", "12.9 units", "inf"]]

        product = SpreadsheetIngestor().map_rows(rows)[0]

        assert product.price == 0.0
        assert product.monthly_sales == 12
        assert product.rating == 0.0

    def test_missing_header_row(self):
        with pytest.raises(ParseError):
            SpreadsheetIngestor().map_rows([[None, None], ["B001"]])

    def test_blank_rows_are_skipped(self):
        rows = [["ASIN"], [None], ["B001"], []]

        assert [p.asin for p in SpreadsheetIngestor().map_rows(rows)] == ["B001"]

    def test_numeric_asin_loses_float_suffix(self):
        rows = [["ASIN"], [12345.0]]

        assert SpreadsheetIngestor().map_rows(rows)[0].asin == "12345"
