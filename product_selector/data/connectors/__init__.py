"""
Blacklist store connectors.
"""
