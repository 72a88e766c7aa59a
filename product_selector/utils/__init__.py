"""
Utility package for the product selector.
"""
from product_selector.utils.normalization import (
    normalize_category_name,
    matches_category_search
)
from product_selector.utils.conversion import (
    parse_float,
    parse_int,
    parse_text
)
from product_selector.utils.date_helpers import (
    days_since_launch,
    get_timestamp_str
)
from product_selector.utils.logging_config import setup_logging, get_logger
