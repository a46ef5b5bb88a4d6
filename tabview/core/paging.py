from __future__ import annotations

import math
from typing import Any, Tuple

from .exceptions import InvalidConfiguration


def _is_positive_int(value: Any) -> bool:
    return isinstance(value, int) and not isinstance(value, bool) and value >= 1


def validate_rows_on_page(rows_on_page: Any) -> int:
    if not _is_positive_int(rows_on_page):
        raise InvalidConfiguration(
            f"rows_on_page must be a positive integer, got {rows_on_page!r}"
        )
    return rows_on_page


def validate_active_page(active_page: Any) -> int:
    if not _is_positive_int(active_page):
        raise InvalidConfiguration(
            f"active_page must be a positive integer, got {active_page!r}"
        )
    return active_page


def total_pages(data_length: int, rows_on_page: int) -> int:
    """Number of pages needed for data_length rows. 0 for an empty dataset."""
    validate_rows_on_page(rows_on_page)
    return math.ceil(data_length / rows_on_page)


def clamp_page(requested_page: int, pages: int) -> int:
    """
    Pull a requested page back onto the last page when it runs past the end.

    An empty dataset has 0 pages; the active page is then 1.
    """
    page = pages if pages < requested_page else requested_page
    return page or 1


def remap_on_page_size_change(
    old_active_page: int,
    old_rows_on_page: int,
    new_rows_on_page: int,
) -> int:
    """
    Find the page that keeps the first row of the old page in view.

    Page 3 at 10 rows shows rows 21-30; at 20 rows per page row 21 lives on
    page ceil(21 / 20) = 2.
    """
    validate_rows_on_page(new_rows_on_page)
    first_row = (old_active_page - 1) * old_rows_on_page + 1
    return math.ceil(first_row / new_rows_on_page)


def page_bounds(active_page: int, rows_on_page: int) -> Tuple[int, int]:
    """Half-open [start, stop) slice indices of the active page."""
    start = (active_page - 1) * rows_on_page
    return start, start + rows_on_page
