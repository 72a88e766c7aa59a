#!/usr/bin/env python3
"""
CLI entry point for the Product Selector.
"""
import sys
from product_selector.cli.product_selector_cli import main

if __name__ == "__main__":
    sys.exit(main())
