"""
Repositories for data access.
"""
