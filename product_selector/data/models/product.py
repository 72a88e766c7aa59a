"""
Product data models.
"""
from dataclasses import dataclass, field, fields
from types import MappingProxyType
from typing import Any, Dict, Mapping


@dataclass(frozen=True)
class ProductRecord:
    """
    Represents one ingested product listing row.
    """
    asin: str  # Amazon Standard Identification Number, never empty
    title: str = ""
    price: float = 0.0
    main_category: str = ""
    sub_category: str = ""
    monthly_sales: int = 0
    monthly_revenue: float = 0.0
    review_count: int = 0
    rating: float = 0.0
    launch_date: str = ""  # As exported; may not parse as a date
    shipping_method: str = ""  # e.g. "FBA", "FBM"
    seller_location: str = ""
    main_image: str = ""
    product_url: str = ""
    raw: Mapping[str, Any] = field(default_factory=dict, compare=False, repr=False)

    def __post_init__(self):
        if not self.asin:
            raise ValueError("ProductRecord requires a non-empty ASIN")
        # Freeze the retained source row
        object.__setattr__(self, "raw", MappingProxyType(dict(self.raw)))

    def to_dict(self) -> Dict[str, Any]:
        """
        Get the typed fields as a dictionary (without the raw row).

        Returns:
            Dict[str, Any]: Field name to value
        """
        return {f.name: getattr(self, f.name) for f in fields(self) if f.name != "raw"}


TYPED_FIELDS = tuple(f.name for f in fields(ProductRecord) if f.name != "raw")
