"""
Configuration package for the product selector.
"""
