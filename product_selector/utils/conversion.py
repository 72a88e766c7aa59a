"""
Permissive cell value conversion for spreadsheet ingestion.

Numeric cells in exports are a mix of real numbers, numeric strings and
strings with trailing units ("19.99 USD"). Strings are parsed from their
leading numeric prefix; anything unparsable resolves to zero.
"""
import math
import re
from datetime import date, datetime
from typing import Any

from product_selector.exceptions import FieldCoercionWarning
from product_selector.utils.logging_config import get_logger

# Set up logging
logger = get_logger(__name__)

_FLOAT_PREFIX = re.compile(r"^\s*([+-]?(?:\d+\.?\d*|\.\d+)(?:[eE][+-]?\d+)?)")
_INT_PREFIX = re.compile(r"^\s*([+-]?\d+)")


def is_missing(value: Any) -> bool:
    """
    Check whether a cell value is empty (None, NaN or blank string).

    Args:
        value (Any): Cell value

    Returns:
        bool: True if the cell carries no data
    """
    if value is None:
        return True
    if isinstance(value, float) and math.isnan(value):
        return True
    if isinstance(value, str) and not value.strip():
        return True
    return False


def to_float(value: Any) -> float:
    """
    Strictly convert a cell value to float.

    Raises:
        FieldCoercionWarning: If the value has no numeric prefix or is not finite
    """
    if isinstance(value, bool) or is_missing(value):
        raise FieldCoercionWarning(value, "float")

    if isinstance(value, (int, float)):
        result = float(value)
    else:
        match = _FLOAT_PREFIX.match(str(value))
        if not match:
            raise FieldCoercionWarning(value, "float")
        result = float(match.group(1))

    if not math.isfinite(result):
        raise FieldCoercionWarning(value, "float")
    return result


def to_int(value: Any) -> int:
    """
    Strictly convert a cell value to int, truncating any fractional part.

    Raises:
        FieldCoercionWarning: If the value has no integer prefix
    """
    if isinstance(value, bool) or is_missing(value):
        raise FieldCoercionWarning(value, "int")

    if isinstance(value, (int, float)):
        if not math.isfinite(value):
            raise FieldCoercionWarning(value, "int")
        return int(value)

    match = _INT_PREFIX.match(str(value))
    if not match:
        raise FieldCoercionWarning(value, "int")
    return int(match.group(1))


def parse_float(value: Any, default: float = 0.0, field: str = "") -> float:
    """
    Permissively convert a cell value to float.

    Args:
        value (Any): Cell value
        default (float): Value returned when conversion fails
        field (str): Field name, used only for logging

    Returns:
        float: The converted value or the default
    """
    try:
        return to_float(value)
    except FieldCoercionWarning as e:
        if not is_missing(value):
            logger.debug(f"{field or 'value'}: {e}; using {default}")
        return default


def parse_int(value: Any, default: int = 0, field: str = "") -> int:
    """
    Permissively convert a cell value to int.

    Args:
        value (Any): Cell value
        default (int): Value returned when conversion fails
        field (str): Field name, used only for logging

    Returns:
        int: The converted value or the default
    """
    try:
        return to_int(value)
    except FieldCoercionWarning as e:
        if not is_missing(value):
            logger.debug(f"{field or 'value'}: {e}; using {default}")
        return default


def parse_text(value: Any) -> str:
    """
    Convert a cell value to a stripped string.

    Dates become ISO dates and integral floats lose their ".0", so that ids
    and launch dates read back the way they were typed.
    """
    if is_missing(value):
        return ""
    if isinstance(value, datetime):
        return value.date().isoformat()
    if isinstance(value, date):
        return value.isoformat()
    if isinstance(value, float) and value.is_integer():
        return str(int(value))
    return str(value).strip()
