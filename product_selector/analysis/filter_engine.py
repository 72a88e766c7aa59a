"""
Filter engine for product collections.
"""
from datetime import datetime
from typing import List, Mapping, Optional, Sequence

import numpy as np
import pandas as pd

from product_selector.config.app_config import (
    HIGH_RATING_THRESHOLD,
    HIGH_SALES_THRESHOLD,
    NUMERIC_DIMENSIONS,
)
from product_selector.data.models.filters import FilterCriteria, FilterStatistics
from product_selector.data.models.product import ProductRecord, TYPED_FIELDS
from product_selector.utils.date_helpers import days_since_launch
from product_selector.utils.normalization import normalize_category_name


def is_product_blacklisted(product: ProductRecord, blacklist: Optional[Mapping[str, bool]]) -> bool:
    """
    Check a product's sub-category against a blacklist snapshot.

    Args:
        product (ProductRecord): The product to check
        blacklist (Optional[Mapping[str, bool]]): Category (raw or normalized) to flag

    Returns:
        bool: True if either spelling of the sub-category is flagged
    """
    if not blacklist or not product.sub_category:
        return False

    return (
        blacklist.get(product.sub_category) is True
        or blacklist.get(normalize_category_name(product.sub_category)) is True
    )


def products_to_frame(products: Sequence[ProductRecord], now: Optional[datetime] = None) -> pd.DataFrame:
    """
    Build a DataFrame of typed product fields plus days since launch.

    Row i of the frame is products[i].

    Args:
        products (Sequence[ProductRecord]): Products to tabulate
        now (Optional[datetime]): Reference moment for days since launch

    Returns:
        pd.DataFrame: One row per product
    """
    if now is None:
        now = datetime.now()

    df = pd.DataFrame([product.to_dict() for product in products], columns=list(TYPED_FIELDS))
    df["days_since_launch"] = [days_since_launch(product.launch_date, now) for product in products]
    return df


class FilterEngine:
    """
    Applies filter criteria and a blacklist snapshot to a product collection.
    """

    def apply(
        self,
        products: Sequence[ProductRecord],
        criteria: FilterCriteria,
        blacklist: Optional[Mapping[str, bool]] = None,
        now: Optional[datetime] = None
    ) -> List[ProductRecord]:
        """
        Filter products, preserving their original order.

        A product is kept only if every numeric field lies in its inclusive
        range, its shipping method and seller location are selected (or
        nothing is selected for that dimension), and its sub-category is not
        blacklisted. The inputs are never modified.

        Args:
            products (Sequence[ProductRecord]): The product collection
            criteria (FilterCriteria): Active filter criteria
            blacklist (Optional[Mapping[str, bool]]): Blacklist snapshot for this pass
            now (Optional[datetime]): Reference moment for days since launch (defaults to now)

        Returns:
            List[ProductRecord]: The retained products
        """
        if not products:
            return []

        df = products_to_frame(products, now)
        mask = pd.Series(True, index=df.index)

        for dimension in NUMERIC_DIMENSIONS:
            value_range = criteria.range_for(dimension)
            mask &= df[dimension].between(value_range.min, value_range.max)

        if criteria.shipping_methods:
            mask &= df["shipping_method"].isin(criteria.shipping_methods)

        if criteria.seller_locations:
            mask &= df["seller_location"].isin(criteria.seller_locations)

        if blacklist:
            mask &= ~pd.Series(
                [is_product_blacklisted(product, blacklist) for product in products],
                index=df.index
            )

        return [products[i] for i in np.flatnonzero(mask.to_numpy())]

    def summarize(
        self,
        products: Sequence[ProductRecord],
        filtered: Sequence[ProductRecord],
        blacklist: Optional[Mapping[str, bool]] = None
    ) -> FilterStatistics:
        """
        Compute summary counts for a filtered view.

        Args:
            products (Sequence[ProductRecord]): The full collection
            filtered (Sequence[ProductRecord]): The filtered view
            blacklist (Optional[Mapping[str, bool]]): Blacklist snapshot used for the view

        Returns:
            FilterStatistics: Counts for display
        """
        return FilterStatistics(
            total=len(products),
            filtered=len(filtered),
            excluded_by_blacklist=sum(1 for p in products if is_product_blacklisted(p, blacklist)),
            high_rating=sum(1 for p in products if p.rating >= HIGH_RATING_THRESHOLD),
            high_sales=sum(1 for p in products if p.monthly_sales >= HIGH_SALES_THRESHOLD),
        )


def apply_filters(
    products: Sequence[ProductRecord],
    criteria: FilterCriteria,
    blacklist: Optional[Mapping[str, bool]] = None,
    now: Optional[datetime] = None
) -> List[ProductRecord]:
    """
    Filter products with a default FilterEngine.

    Args:
        products (Sequence[ProductRecord]): The product collection
        criteria (FilterCriteria): Active filter criteria
        blacklist (Optional[Mapping[str, bool]]): Blacklist snapshot
        now (Optional[datetime]): Reference moment for days since launch

    Returns:
        List[ProductRecord]: The retained products
    """
    return FilterEngine().apply(products, criteria, blacklist, now)
