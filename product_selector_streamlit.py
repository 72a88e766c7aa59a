#!/usr/bin/env python3
"""
Streamlit entry point for the Product Selector.
"""
import sys
import os

# Runs the Streamlit app in this process rather than spawning another

if __name__ == "__main__":
    current_dir = os.path.dirname(os.path.abspath(__file__))
    app_path = os.path.join(current_dir, "product_selector", "ui", "streamlit_app.py")

    if current_dir not in sys.path:
        sys.path.insert(0, current_dir)

    import runpy
    runpy.run_path(app_path, run_name="__main__")
