"""
Filter components for Streamlit UI.
"""
from typing import List
import streamlit as st
from product_selector.config.app_config import NUMERIC_DIMENSIONS
from product_selector.data.models.filters import FilterCriteria, FilterOptions, NumericRange

DIMENSION_LABELS = {
    "price": "Price ($)",
    "monthly_sales": "Monthly Sales",
    "monthly_revenue": "Monthly Revenue ($)",
    "review_count": "Review Count",
    "rating": "Rating",
    "days_since_launch": "Days Since Launch",
}

# Integer dimensions get integer sliders
INTEGER_DIMENSIONS = ("monthly_sales", "review_count", "days_since_launch")


def create_range_filter(dimension: str, bounds: NumericRange, current: NumericRange) -> NumericRange:
    """
    Create a range slider for a numeric dimension.

    Args:
        dimension (str): Dimension name
        bounds (NumericRange): Derived bounds for the slider
        current (NumericRange): Currently selected range

    Returns:
        NumericRange: Selected range
    """
    cast = int if dimension in INTEGER_DIMENSIONS else float
    low, high = cast(bounds.min), cast(bounds.max)
    if low == high:
        high = low + cast(1)

    value = (
        min(max(cast(current.min), low), high),
        max(min(cast(current.max), high), low),
    )
    selected = st.sidebar.slider(
        DIMENSION_LABELS.get(dimension, dimension),
        min_value=low,
        max_value=high,
        value=value,
        key=f"range_{dimension}"
    )
    return NumericRange(selected[0], selected[1])


def create_multiselect_filter(label: str, options: List[str], current: List[str], key: str) -> List[str]:
    """
    Create a multi-select filter. An empty selection means no constraint.

    Args:
        label (str): Widget label
        options (List[str]): Available values
        current (List[str]): Currently selected values
        key (str): Widget key

    Returns:
        List[str]: Selected values
    """
    return st.sidebar.multiselect(
        label,
        options=options,
        default=[value for value in current if value in options],
        key=key
    )


def create_reset_button() -> bool:
    """
    Create a reset filters button.

    Returns:
        bool: True if the button was clicked
    """
    return st.sidebar.button("Reset Filters")


def create_all_filters(options: FilterOptions, criteria: FilterCriteria) -> FilterCriteria:
    """
    Create all filter widgets and return filter criteria.

    Args:
        options (FilterOptions): Bounds and choices derived from the data
        criteria (FilterCriteria): Currently active criteria

    Returns:
        FilterCriteria: Criteria built from the widget values
    """
    st.sidebar.header("Filters")

    selected = FilterCriteria()
    for dimension in NUMERIC_DIMENSIONS:
        selected.with_range(
            dimension,
            create_range_filter(dimension, options.ranges[dimension], criteria.range_for(dimension))
        )

    selected.shipping_methods = create_multiselect_filter(
        "Shipping Method", options.shipping_methods, criteria.shipping_methods, "shipping_methods"
    )
    selected.seller_locations = create_multiselect_filter(
        "Seller Location", options.seller_locations, criteria.seller_locations, "seller_locations"
    )

    return selected
