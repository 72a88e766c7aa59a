"""
Pagination helpers for product lists and the blacklist editor.
"""
import math
from dataclasses import dataclass, field
from typing import Generic, List, Sequence, TypeVar, Union

from product_selector.config.app_config import DEFAULT_PAGE_SIZE, PAGE_WINDOW_DELTA

T = TypeVar('T')

ELLIPSIS = "..."


@dataclass
class Page(Generic[T]):
    """
    Represents one page of a sequence.
    """
    items: List[T] = field(default_factory=list)
    page: int = 1
    page_size: int = DEFAULT_PAGE_SIZE
    total_items: int = 0
    total_pages: int = 0
    start_index: int = 0  # 1-based position of the first item, 0 when empty
    end_index: int = 0  # 1-based position of the last item, 0 when empty


def paginate(items: Sequence[T], page: int = 1, page_size: int = DEFAULT_PAGE_SIZE) -> Page[T]:
    """
    Slice one page out of a sequence.

    Out-of-range page numbers are clamped to the first or last page.

    Args:
        items (Sequence[T]): Items to paginate
        page (int): 1-based page number
        page_size (int): Items per page

    Returns:
        Page[T]: The requested page
    """
    if page_size < 1:
        raise ValueError(f"page_size must be positive, got {page_size}")

    total_items = len(items)
    total_pages = math.ceil(total_items / page_size)
    page = min(max(1, page), max(1, total_pages))

    start = (page - 1) * page_size
    page_items = list(items[start:start + page_size])

    return Page(
        items=page_items,
        page=page,
        page_size=page_size,
        total_items=total_items,
        total_pages=total_pages,
        start_index=start + 1 if page_items else 0,
        end_index=start + len(page_items),
    )


def page_numbers(current: int, total: int, delta: int = PAGE_WINDOW_DELTA) -> List[Union[int, str]]:
    """
    Build the page number strip shown under a list.

    Shows a window of ``delta`` pages around the current page, plus the
    first and last pages, with "..." wherever pages are skipped.

    Args:
        current (int): Current page (1-based)
        total (int): Total number of pages
        delta (int): Pages shown on each side of the current page

    Returns:
        List[Union[int, str]]: Page numbers and ellipsis markers

    Example:
        >>> page_numbers(6, 20)
        [1, '...', 4, 5, 6, 7, 8, '...', 20]
    """
    if total < 1:
        return []

    start = max(1, current - delta)
    end = min(total, current + delta)
    pages: List[Union[int, str]] = []

    if start > 1:
        pages.append(1)
        if start > 2:
            pages.append(ELLIPSIS)

    pages.extend(range(start, end + 1))

    if end < total:
        if end < total - 1:
            pages.append(ELLIPSIS)
        pages.append(total)

    return pages
