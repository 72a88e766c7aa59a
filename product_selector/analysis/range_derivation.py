"""
Derivation of default filter ranges and options from a product collection.
"""
from datetime import datetime
from typing import List, Optional, Sequence

import pandas as pd

from product_selector.config.app_config import FALLBACK_RANGES
from product_selector.analysis.filter_engine import products_to_frame
from product_selector.data.models.filters import FilterOptions, NumericRange
from product_selector.data.models.product import ProductRecord

# Values outside these predicates are ignored when computing bounds
VALIDITY_RULES = {
    "price": lambda s: s > 0,
    "monthly_sales": lambda s: s >= 0,
    "monthly_revenue": lambda s: s >= 0,
    "review_count": lambda s: s >= 0,
    "rating": lambda s: s > 0,
    "days_since_launch": lambda s: s >= 0,
}


def _scalar(value):
    # numpy scalars back to plain Python numbers
    return value.item() if hasattr(value, "item") else value


def derive_range(values: pd.Series, dimension: str) -> NumericRange:
    """
    Derive the bounds of one numeric dimension.

    The fallback floor and ceiling are always inside the result, so an empty
    or degenerate input still yields the fallback range.

    Args:
        values (pd.Series): Values for the dimension
        dimension (str): Dimension name

    Returns:
        NumericRange: The derived range
    """
    floor, ceiling = FALLBACK_RANGES[dimension]
    valid = values[VALIDITY_RULES[dimension](values)]

    if valid.empty:
        return NumericRange(floor, ceiling)

    return NumericRange(min(_scalar(valid.min()), floor), max(_scalar(valid.max()), ceiling))


def distinct_options(values: pd.Series) -> List[str]:
    """
    Get the distinct non-empty values of a categorical column, sorted.

    Args:
        values (pd.Series): Column values

    Returns:
        List[str]: Sorted distinct values
    """
    return sorted({value for value in values.tolist() if value})


def derive_defaults(products: Sequence[ProductRecord], now: Optional[datetime] = None) -> FilterOptions:
    """
    Compute filter bounds and multi-select options for a product collection.

    Args:
        products (Sequence[ProductRecord]): The product collection
        now (Optional[datetime]): Reference moment for days since launch

    Returns:
        FilterOptions: Derived ranges per dimension and sorted option lists
    """
    options = FilterOptions()
    if not products:
        return options

    df = products_to_frame(products, now)

    for dimension in FALLBACK_RANGES:
        options.ranges[dimension] = derive_range(df[dimension], dimension)

    options.shipping_methods = distinct_options(df["shipping_method"])
    options.seller_locations = distinct_options(df["seller_location"])

    return options
