"""Page arithmetic for the list view."""

from typing import List

from ..config import PAGE_SIZE, PAGE_WINDOW


def total_pages(total_count: int, page_size: int = PAGE_SIZE) -> int:
    """Number of pages needed for ``total_count`` items (ceiling division)."""
    if total_count <= 0:
        return 0
    return (total_count + page_size - 1) // page_size


def page_offset(page: int, page_size: int = PAGE_SIZE) -> int:
    """0-based offset of the first item on a 1-indexed page."""
    return (max(1, page) - 1) * page_size


def page_window(current_page: int, total: int, window: int = PAGE_WINDOW) -> List[int]:
    """Return the page numbers to render as selector buttons.

    The run is centred on ``current_page`` where possible and shifted
    so it never leaves ``[1, total]``; its length is
    ``min(window, total)``.

    >>> page_window(1, 10)
    [1, 2, 3, 4, 5]
    >>> page_window(10, 10)
    [6, 7, 8, 9, 10]
    """
    start = max(1, current_page - window // 2)
    end = min(total, start + window - 1)

    if end - start + 1 < window:
        start = max(1, end - window + 1)

    return list(range(start, end + 1))
