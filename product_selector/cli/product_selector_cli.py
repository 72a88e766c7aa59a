"""
Command-line interface for the product selector.
"""
import argparse
import logging
import sys
from typing import List, Optional

from product_selector.analysis.exporters.csv_exporter import CSVExporter
from product_selector.analysis.pagination import paginate
from product_selector.config.app_config import (
    DEFAULT_PAGE_SIZE,
    HIGH_RATING_THRESHOLD,
    HIGH_SALES_THRESHOLD,
    NUMERIC_DIMENSIONS,
)
from product_selector.data.connectors.snowflake_connector import SnowflakeConnector
from product_selector.data.models.filters import FilterCriteria, NumericRange
from product_selector.data.repositories.blacklist_repository import BlacklistRepository
from product_selector.exceptions import ProductSelectorError
from product_selector.main import ProductSelectionSession
from product_selector.utils.logging_config import get_logger
from product_selector.utils.validation import validate_page_size

# Set up logging
logger = get_logger(__name__)

DIMENSION_FLAGS = {
    "price": "price",
    "monthly_sales": "sales",
    "monthly_revenue": "revenue",
    "review_count": "reviews",
    "rating": "rating",
    "days_since_launch": "days",
}


def _split_list(value: Optional[str]) -> List[str]:
    if not value:
        return []
    return [item.strip() for item in value.split(",") if item.strip()]


def parse_args(args: Optional[List[str]] = None) -> argparse.Namespace:
    """
    Parse command-line arguments.

    Args:
        args (Optional[List[str]]): Command-line arguments (uses sys.argv if None)

    Returns:
        argparse.Namespace: Parsed arguments
    """
    parser = argparse.ArgumentParser(
        description="Product Selector - Filter Amazon product exports and manage the category blacklist"
    )
    common = argparse.ArgumentParser(add_help=False)
    common.add_argument(
        "--verbose",
        action="store_true",
        help="Enable verbose logging"
    )
    subparsers = parser.add_subparsers(dest="command", required=True)

    filter_parser = subparsers.add_parser(
        "filter", parents=[common], help="Parse an .xlsx export and filter its products"
    )
    filter_parser.add_argument("file", help="Path to the .xlsx export")
    for dimension, flag in DIMENSION_FLAGS.items():
        label = dimension.replace("_", " ")
        filter_parser.add_argument(f"--{flag}-min", type=float, dest=f"{dimension}_min",
                                   help=f"Minimum {label} (default: derived from the data)")
        filter_parser.add_argument(f"--{flag}-max", type=float, dest=f"{dimension}_max",
                                   help=f"Maximum {label} (default: derived from the data)")
    filter_parser.add_argument(
        "--shipping",
        type=str,
        help="Comma-separated shipping methods to include, e.g. FBA,FBM (default: all)"
    )
    filter_parser.add_argument(
        "--seller-location",
        type=str,
        help="Comma-separated seller locations to include (default: all)"
    )
    filter_parser.add_argument(
        "--no-blacklist",
        action="store_true",
        help="Do not exclude blacklisted sub-categories"
    )
    filter_parser.add_argument("--export", type=str, help="Write the filtered products to this CSV file")
    filter_parser.add_argument("--page", type=int, default=1, help="Page of results to print (default: 1)")
    filter_parser.add_argument(
        "--page-size",
        type=int,
        default=DEFAULT_PAGE_SIZE,
        help=f"Results per page (default: {DEFAULT_PAGE_SIZE})"
    )

    blacklist_parser = subparsers.add_parser("blacklist", parents=[common], help="Manage the category blacklist")
    blacklist_parser.add_argument(
        "action",
        choices=["list", "all", "check", "set", "unset", "init", "test"],
        help="list: blacklisted ids; all: every category with status; check/set/unset CATEGORY; "
             "init: create the table; test: check the connection"
    )
    blacklist_parser.add_argument("categories", nargs="*", help="Category names for check/set/unset")

    return parser.parse_args(args)


def build_criteria(parsed_args: argparse.Namespace, defaults: FilterCriteria) -> FilterCriteria:
    """
    Overlay command-line bounds and selections on the derived defaults.

    Args:
        parsed_args (argparse.Namespace): Parsed "filter" arguments
        defaults (FilterCriteria): Criteria derived from the data

    Returns:
        FilterCriteria: The criteria to apply

    Raises:
        ValueError: If a minimum is greater than its maximum
    """
    criteria = FilterCriteria()
    for dimension in NUMERIC_DIMENSIONS:
        default_range = defaults.range_for(dimension)
        low = getattr(parsed_args, f"{dimension}_min")
        high = getattr(parsed_args, f"{dimension}_max")
        criteria.with_range(dimension, NumericRange(
            default_range.min if low is None else low,
            default_range.max if high is None else high
        ))

    criteria.shipping_methods = _split_list(parsed_args.shipping)
    criteria.seller_locations = _split_list(parsed_args.seller_location)
    return criteria


def run_filter(parsed_args: argparse.Namespace, log_level: int) -> int:
    repository = BlacklistRepository(SnowflakeConnector())
    session = ProductSelectionSession(blacklist_repository=repository, log_level=log_level)

    session.load(parsed_args.file, on_progress=lambda percent: logger.debug(f"Parsing... {percent}%"))
    if not parsed_args.no_blacklist:
        session.refresh_blacklist()

    try:
        criteria = build_criteria(parsed_args, session.criteria)
    except ValueError as e:
        print(f"Error: {str(e)}")
        return 1

    filtered = session.apply(criteria)
    stats = session.statistics(filtered)

    print(f"\nParsed {stats.total} products, {stats.filtered} match the filters "
          f"({stats.excluded_by_blacklist} in blacklisted categories).")
    print(f"High rating (>={HIGH_RATING_THRESHOLD}): {stats.high_rating}    "
          f"High sales (>={HIGH_SALES_THRESHOLD}/month): {stats.high_sales}\n")

    page = paginate(filtered, parsed_args.page, validate_page_size(parsed_args.page_size, DEFAULT_PAGE_SIZE))
    for product in page.items:
        print(f"{product.asin:<12} ${product.price:>8.2f}  {product.rating:>3.1f}  "
              f"{product.monthly_sales:>7}  {product.sub_category[:30]:<30}  {product.title[:60]}")
    if page.total_pages > 1:
        print(f"\nShowing {page.start_index}-{page.end_index} of {page.total_items} (page {page.page}/{page.total_pages})")

    if parsed_args.export:
        output_path = CSVExporter().export(filtered, parsed_args.export)
        print(f"\nExported {len(filtered)} products to {output_path}")

    return 0


def run_blacklist(parsed_args: argparse.Namespace) -> int:
    repository = BlacklistRepository(SnowflakeConnector())
    action = parsed_args.action

    if action in ("check", "set", "unset") and not parsed_args.categories:
        print(f"Error: '{action}' needs at least one category")
        return 1

    if action == "list":
        for category_id in sorted(repository.list_all_blacklisted()):
            print(category_id)
    elif action == "all":
        for category in repository.list_all_with_status():
            print(f"{'[x]' if category.is_blacklisted else '[ ]'} {category.id}")
    elif action == "check":
        statuses = repository.get_batch_status(parsed_args.categories)
        for category in parsed_args.categories:
            print(f"{category}: {'blacklisted' if statuses.get(category) else 'not blacklisted'}")
    elif action in ("set", "unset"):
        failures = [
            category for category in parsed_args.categories
            if not repository.set_status(category, action == "set")
        ]
        if failures:
            print(f"Error: failed to update {', '.join(failures)}")
            return 1
        print(f"Updated {len(parsed_args.categories)} categories")
    elif action == "init":
        if not repository.ensure_table():
            print("Error: could not create the blacklist table")
            return 1
        print("Blacklist table is ready")
    elif action == "test":
        connected = repository.test_connection()
        print("Blacklist store connection succeeded" if connected else "Blacklist store connection failed")
        return 0 if connected else 1

    return 0


def main(args: Optional[List[str]] = None) -> int:
    """
    Main entry point for the CLI.

    Args:
        args (Optional[List[str]]): Command-line arguments (uses sys.argv if None)

    Returns:
        int: Exit code (0 for success, non-zero for errors)
    """
    parsed_args = parse_args(args)

    log_level = logging.DEBUG if parsed_args.verbose else logging.WARNING

    try:
        if parsed_args.command == "filter":
            return run_filter(parsed_args, log_level)
        return run_blacklist(parsed_args)

    except ProductSelectorError as e:
        print(f"\nError: {str(e)}")
        return 1

    except Exception as e:
        print(f"\nUnexpected error: {str(e)}")
        if parsed_args.verbose:
            import traceback
            traceback.print_exc()
        return 1


if __name__ == "__main__":
    sys.exit(main())
