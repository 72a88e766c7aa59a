"""
Filtering and derivation over product collections.
"""
from product_selector.analysis.filter_engine import FilterEngine, apply_filters, is_product_blacklisted
from product_selector.analysis.range_derivation import derive_defaults
from product_selector.analysis.pagination import Page, paginate, page_numbers
