"""
Validation utilities for the product selector.
"""
import os
from typing import Any, Optional, Tuple

from product_selector.config.app_config import ALLOWED_EXTENSION, MAX_UPLOAD_BYTES, MAX_UPLOAD_MB
from product_selector.exceptions import ValidationError


def describe_upload(file: Any) -> Tuple[str, Optional[int]]:
    """
    Get the name and size of an upload without reading it.

    Args:
        file (Any): A path, raw bytes, or a file-like object with a ``name``
                    (e.g. a Streamlit UploadedFile)

    Returns:
        Tuple[str, Optional[int]]: File name and size in bytes (None if unknown)
    """
    if isinstance(file, (str, os.PathLike)):
        path = os.fspath(file)
        size = os.path.getsize(path) if os.path.exists(path) else None
        return os.path.basename(path), size

    if isinstance(file, (bytes, bytearray)):
        return "", len(file)

    name = os.path.basename(str(getattr(file, "name", "") or ""))
    size = getattr(file, "size", None)
    if size is None and hasattr(file, "getbuffer"):
        size = file.getbuffer().nbytes
    return name, size


def validate_upload(name: str, size: Optional[int]) -> None:
    """
    Validate an upload against the accepted extension and size ceiling.

    Args:
        name (str): File name
        size (Optional[int]): File size in bytes, if known

    Raises:
        ValidationError: If the extension is not .xlsx or the file is too large
    """
    if not name.lower().endswith(ALLOWED_EXTENSION):
        raise ValidationError(f"Please upload a {ALLOWED_EXTENSION} file (got: {name or 'unnamed upload'})")

    if size is not None and size > MAX_UPLOAD_BYTES:
        raise ValidationError(f"File size cannot exceed {MAX_UPLOAD_MB}MB")


def validate_page_size(page_size: Any, default: int) -> int:
    """
    Validate and convert a page size value.

    Args:
        page_size (Any): The page size to validate
        default (int): Value used when conversion fails

    Returns:
        int: A positive page size
    """
    try:
        return max(1, int(page_size))
    except (ValueError, TypeError):
        return default
