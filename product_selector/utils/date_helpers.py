"""
Date helper utilities for the product selector.
"""
import math
import warnings
from datetime import datetime
from typing import Optional

import pandas as pd

SECONDS_PER_DAY = 24 * 60 * 60


def parse_launch_date(launch_date: Optional[str]) -> Optional[datetime]:
    """
    Parse a launch date string into a naive datetime.

    Args:
        launch_date (Optional[str]): Launch date as exported (e.g. "2023-05-01")

    Returns:
        Optional[datetime]: The parsed date, or None if absent or unparsable
    """
    if not launch_date:
        return None

    with warnings.catch_warnings():
        # Mixed export formats trigger pandas' format inference warning
        warnings.simplefilter("ignore", UserWarning)
        parsed = pd.to_datetime(launch_date, errors="coerce")

    if parsed is None or pd.isna(parsed):
        return None
    if parsed.tzinfo is not None:
        parsed = parsed.tz_convert(None)
    return parsed.to_pydatetime()


def days_since_launch(launch_date: Optional[str], now: Optional[datetime] = None) -> int:
    """
    Get the number of whole days between the launch date and now.

    Partial days round up, and future dates count the same as past ones.

    Args:
        launch_date (Optional[str]): Launch date string
        now (Optional[datetime]): Reference moment (defaults to the current time)

    Returns:
        int: Days since launch, or 0 if the date is absent or unparsable
    """
    launched = parse_launch_date(launch_date)
    if launched is None:
        return 0

    if now is None:
        now = datetime.now()

    return math.ceil(abs((now - launched).total_seconds()) / SECONDS_PER_DAY)


def get_timestamp_str() -> str:
    """
    Get a timestamp string for filenames.

    Returns:
        str: Timestamp string (YYYYMMDD_HHMMSS)
    """
    return datetime.now().strftime("%Y%m%d_%H%M%S")
