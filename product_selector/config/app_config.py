"""
Application-wide configuration settings for the product selector.
"""
import os
from typing import Dict, Tuple
from product_selector.utils.logging_config import get_logger

# Set up logging
logger = get_logger(__name__)

# Upload limits
ALLOWED_EXTENSION = ".xlsx"
MAX_UPLOAD_MB = int(os.environ.get("PRODUCT_SELECTOR_MAX_UPLOAD_MB", "10"))
MAX_UPLOAD_BYTES = MAX_UPLOAD_MB * 1024 * 1024

# Exports prepend a descriptive title row such as "Product-US-20240101" before the header row
HEADER_SENTINEL_PREFIX = "Product-"

# Column labels recognized for each typed field, in order of preference.
# Chinese labels come from the export tool's default locale and must be kept verbatim.
HEADER_LABELS: Dict[str, Tuple[str, ...]] = {
    "asin": ("ASIN",),
    "title": ("商品标题", "Product Title", "Title"),
    "price": ("价格($)", "Price($)", "Price"),
    "main_category": ("大类目", "Main Category", "Category"),
    "sub_category": ("小类目", "Sub Category", "Sub-Category"),
    "monthly_sales": ("月销量", "Monthly Sales"),
    "monthly_revenue": ("月销售额($)", "Monthly Revenue($)", "Monthly Revenue"),
    "review_count": ("评分数", "Ratings", "Review Count"),
    "rating": ("评分", "Rating"),
    "launch_date": ("上架时间", "Launch Date", "Date First Available"),
    "shipping_method": ("配送方式", "Fulfillment", "Shipping Method"),
    "seller_location": ("卖家所属地", "Seller Location"),
    "main_image": ("商品主图", "Image URL", "Main Image"),
    "product_url": ("商品详情页链接", "URL", "Product URL"),
}

ASIN_LABEL = HEADER_LABELS["asin"][0]

# Ingestion progress checkpoints (percent)
PROGRESS_READ = 20
PROGRESS_DECODED = 40
PROGRESS_SHEET_SELECTED = 60
PROGRESS_CONVERTED = 80
PROGRESS_COMPLETE = 100

# Fallback bounds for each numeric filter dimension: (floor, ceiling)
FALLBACK_RANGES: Dict[str, Tuple[float, float]] = {
    "price": (0, 1000),
    "monthly_sales": (0, 10000),
    "monthly_revenue": (0, 100000),
    "review_count": (0, 5000),
    "rating": (0, 5),
    "days_since_launch": (0, 365),
}

NUMERIC_DIMENSIONS = tuple(FALLBACK_RANGES.keys())

# Statistics thresholds
HIGH_RATING_THRESHOLD = 4.0
HIGH_SALES_THRESHOLD = 100

# Blacklist lookups
LOOKUP_WORKERS = int(os.environ.get("PRODUCT_SELECTOR_LOOKUP_WORKERS", "8"))

# Pagination
PAGE_SIZE_OPTIONS = (10, 15, 20, 25, 30, 50)
DEFAULT_PAGE_SIZE = int(os.environ.get("PRODUCT_SELECTOR_PAGE_SIZE", "10"))
PAGE_WINDOW_DELTA = 2
EDITOR_PAGE_SIZE = 250
EDITOR_COLUMNS = 5
