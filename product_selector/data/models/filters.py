"""
Filter, statistics and blacklist data models.
"""
from dataclasses import dataclass, field
from typing import Dict, List, Optional

from product_selector.config.app_config import FALLBACK_RANGES, NUMERIC_DIMENSIONS


@dataclass(frozen=True)
class NumericRange:
    """
    Represents an inclusive [min, max] range.
    """
    min: float
    max: float

    def __post_init__(self):
        if self.min > self.max:
            raise ValueError(f"Invalid range: min {self.min} is greater than max {self.max}")

    def contains(self, value: float) -> bool:
        return self.min <= value <= self.max

    def as_tuple(self):
        return (self.min, self.max)


def fallback_range(dimension: str) -> NumericRange:
    """
    Get the fallback range for a numeric filter dimension.

    Args:
        dimension (str): Dimension name (e.g. "price")

    Returns:
        NumericRange: The fallback range
    """
    floor, ceiling = FALLBACK_RANGES[dimension]
    return NumericRange(floor, ceiling)


@dataclass
class FilterCriteria:
    """
    Represents the active filter configuration.

    Empty shipping_methods / seller_locations lists mean no constraint.
    """
    price_range: NumericRange = field(default_factory=lambda: fallback_range("price"))
    monthly_sales_range: NumericRange = field(default_factory=lambda: fallback_range("monthly_sales"))
    monthly_revenue_range: NumericRange = field(default_factory=lambda: fallback_range("monthly_revenue"))
    review_count_range: NumericRange = field(default_factory=lambda: fallback_range("review_count"))
    rating_range: NumericRange = field(default_factory=lambda: fallback_range("rating"))
    days_since_launch_range: NumericRange = field(default_factory=lambda: fallback_range("days_since_launch"))
    shipping_methods: List[str] = field(default_factory=list)
    seller_locations: List[str] = field(default_factory=list)

    def range_for(self, dimension: str) -> NumericRange:
        """
        Get the range configured for a numeric dimension.

        Args:
            dimension (str): One of NUMERIC_DIMENSIONS

        Returns:
            NumericRange: The configured range
        """
        if dimension not in NUMERIC_DIMENSIONS:
            raise KeyError(f"Unknown filter dimension: {dimension}")
        return getattr(self, f"{dimension}_range")

    def with_range(self, dimension: str, value_range: NumericRange) -> "FilterCriteria":
        """Set the range for a dimension and return self, for chaining."""
        if dimension not in NUMERIC_DIMENSIONS:
            raise KeyError(f"Unknown filter dimension: {dimension}")
        setattr(self, f"{dimension}_range", value_range)
        return self


@dataclass
class FilterOptions:
    """
    Represents data-derived filter bounds and multi-select options.
    """
    ranges: Dict[str, NumericRange] = field(
        default_factory=lambda: {dimension: fallback_range(dimension) for dimension in NUMERIC_DIMENSIONS}
    )
    shipping_methods: List[str] = field(default_factory=list)
    seller_locations: List[str] = field(default_factory=list)

    def to_criteria(self) -> FilterCriteria:
        """
        Build the default criteria spanning the full derived ranges.

        Returns:
            FilterCriteria: Criteria with no set-membership constraints
        """
        criteria = FilterCriteria()
        for dimension, value_range in self.ranges.items():
            criteria.with_range(dimension, value_range)
        return criteria


@dataclass
class FilterStatistics:
    """
    Represents summary counts for a filtered view.
    """
    total: int = 0
    filtered: int = 0
    excluded_by_blacklist: int = 0
    high_rating: int = 0  # Products rated at or above the high rating threshold
    high_sales: int = 0  # Products at or above the high sales threshold


@dataclass
class CategoryStatus:
    """
    Represents one blacklist entry as shown in the editor.
    """
    id: str  # Normalized category name
    is_blacklisted: bool = False


@dataclass
class BatchUpdateResult:
    """
    Represents the outcome of a batch blacklist update.
    """
    success: int = 0
    failed: int = 0
    errors: Optional[List[str]] = None
