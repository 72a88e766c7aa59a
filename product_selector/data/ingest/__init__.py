"""
Spreadsheet ingestion package.
"""
from product_selector.data.ingest.spreadsheet_ingestor import SpreadsheetIngestor, parse_spreadsheet
