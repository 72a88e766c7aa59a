"""
Exporters for filtered product views.
"""
