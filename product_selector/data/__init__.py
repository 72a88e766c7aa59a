"""
Data access package for the product selector.
"""
