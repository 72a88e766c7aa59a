#!/usr/bin/env python3
"""
Setup script for the Product Selector.
"""
from setuptools import setup, find_packages

with open("README.md", "r", encoding="utf-8") as fh:
    long_description = fh.read()

setup(
    name="product-selector",
    version="1.0.0",
    author="Product Selection Team",
    description="Amazon product export filtering with a shared category blacklist",
    long_description=long_description,
    long_description_content_type="text/markdown",
    packages=find_packages(exclude=["tests", "tests.*"]),
    classifiers=[
        "Programming Language :: Python :: 3",
        "License :: OSI Approved :: MIT License",
        "Operating System :: OS Independent",
    ],
    python_requires=">=3.8",
    install_requires=[
        "pandas",
        "numpy",
        "openpyxl",
        "snowflake-snowpark-python",
        "streamlit",
    ],
    extras_require={
        "test": ["pytest"],
    },
    entry_points={
        "console_scripts": [
            "product-selector=product_selector.cli.product_selector_cli:main",
        ],
    },
)
