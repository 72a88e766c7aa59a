"""
Data models for products, filters and blacklist entries.
"""
from product_selector.data.models.product import ProductRecord
from product_selector.data.models.filters import (
    NumericRange,
    FilterCriteria,
    FilterOptions,
    FilterStatistics,
    CategoryStatus,
    BatchUpdateResult
)
