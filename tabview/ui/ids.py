from __future__ import annotations

__all__ = ["IDs", "sort_toggle_id"]


class IDs:
    class Control:
        # Core selectors
        TABLE_SELECT = "table-select"
        SEARCH_INPUT = "search-input"
        REFRESH_BTN = "refresh-btn"

        # Table
        TABLE_HEADER = "table-header"
        TABLE_BODY = "table-body"

        # Pager
        PAGE_PREV_BTN = "page-prev-btn"
        PAGE_NEXT_BTN = "page-next-btn"
        PAGE_SIZE_SELECT = "page-size-select"
        PAGE_SUMMARY = "page-summary"

    class Pattern:
        SORT_TOGGLE = "sort-toggle"


def sort_toggle_id(field: str) -> dict:
    return {"type": IDs.Pattern.SORT_TOGGLE, "field": field}
