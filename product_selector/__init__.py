"""
Product Selector Package.

This package ingests Amazon product listing exports, filters them by price,
sales, reviews, launch age and fulfillment, and excludes sub-categories
blacklisted in a shared store.
"""
from product_selector.main import ProductSelectionSession, run_selection

__version__ = "1.0.0"
