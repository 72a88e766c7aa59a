"""
Shared fixtures for the product selector tests.
"""
import os
import tempfile

# Keep log files out of the working tree; must run before the package is imported
os.environ.setdefault("PRODUCT_SELECTOR_LOG_DIR", tempfile.mkdtemp(prefix="product_selector_logs_"))

import pandas as pd
import pytest
from openpyxl import Workbook

from product_selector.data.connectors.base_connector import BaseConnector
from product_selector.data.models.product import ProductRecord


HEADER_ROW = [
    "ASIN", "商品标题", "价格($)", "大类目", "小类目", "月销量", "月销售额($)",
    "评分数", "评分", "上架时间", "配送方式", "卖家所属地", "商品主图", "商品详情页链接",
]


class InMemoryConnector(BaseConnector):
    """
    Connector that answers the blacklist repository's queries from a dict.
    """

    def __init__(self, flags=None, configured=True, fail=False):
        self.flags = dict(flags or {})
        self.configured = configured
        self.fail = fail
        self.queries = []

    def is_configured(self):
        return self.configured

    def connect(self):
        return self

    def disconnect(self):
        pass

    def execute_query(self, query, params=None):
        self.queries.append((query, params))
        if self.fail:
            raise RuntimeError("store offline")

        if query.strip().upper().startswith("CREATE"):
            return pd.DataFrame()

        if params and "is_exclude" in params:
            self.flags[params["category_id"]] = params["is_exclude"]
            return pd.DataFrame()

        if params and "category_id" in params:
            key = params["category_id"]
            if key not in self.flags:
                return pd.DataFrame(columns=["CATEGORY_ID", "IS_EXCLUDE"])
            # Lower-case columns, as some drivers report them
            return pd.DataFrame({"category_id": [key], "is_exclude": [self.flags[key]]})

        if "IS_EXCLUDE = TRUE" in query:
            return pd.DataFrame({"CATEGORY_ID": [k for k, v in self.flags.items() if v is True]})

        return pd.DataFrame({
            "CATEGORY_ID": list(self.flags.keys()),
            "IS_EXCLUDE": list(self.flags.values()),
        })

    @property
    def lookups(self):
        return [
            params["category_id"] for _, params in self.queries
            if params and "category_id" in params and "is_exclude" not in params
        ]


@pytest.fixture
def connector():
    return InMemoryConnector()


@pytest.fixture
def make_connector():
    """Factory for connectors with preset flags or failure modes."""
    return InMemoryConnector


@pytest.fixture
def write_workbook(tmp_path):
    """Factory writing rows to a single-sheet .xlsx file and returning its path."""

    def _write(rows, name="export.xlsx", title_row=None):
        workbook = Workbook()
        sheet = workbook.active
        if title_row is not None:
            sheet.append([title_row])
        for row in rows:
            sheet.append(row)
        path = tmp_path / name
        workbook.save(path)
        return str(path)

    return _write


@pytest.fixture
def export_rows():
    """Header plus three products and one row without an ASIN."""
    return [
        HEADER_ROW,
        ["B001", "Linen Tablecloth", "19.99", "Home & Kitchen", "Table cloths", "50", "999.5",
         "120", "4.5", "2024-01-15", "FBA", "CN", "https://img/1.jpg", "https://amazon.com/dp/B001"],
        ["B002", "Cotton Napkins", 12.5, "Home & Kitchen", "Napkins", 250, 3125,
         40, 3.9, "2023-06-01", "FBM", "US", "", ""],
        ["B003", "Oak Cutting Board", "35 USD", "Home & Kitchen", "Cutting Boards", "n/a", "",
         "8", "4.8", "", "FBA", "US", "", ""],
        ["", "Missing id", "5"],
    ]


@pytest.fixture
def sample_products():
    return [
        ProductRecord(asin="B001", title="Linen Tablecloth", price=19.99, sub_category="Table cloths",
                      monthly_sales=50, monthly_revenue=999.5, review_count=120, rating=4.5,
                      shipping_method="FBA", seller_location="CN"),
        ProductRecord(asin="B002", title="Cotton Napkins", price=12.5, sub_category="Napkins",
                      monthly_sales=250, monthly_revenue=3125.0, review_count=40, rating=3.9,
                      shipping_method="FBM", seller_location="US"),
        ProductRecord(asin="B003", title="Oak Cutting Board", price=35.0, sub_category="Cutting Boards",
                      monthly_sales=0, monthly_revenue=0.0, review_count=8, rating=4.8,
                      shipping_method="FBA", seller_location="US"),
    ]
