from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Any, Dict, Tuple, Union

logger = logging.getLogger(__name__)

SORT_ORDERS = ("asc", "desc")
DEFAULT_ROWS_ON_PAGE = 1000


def normalize_sort_by(value: Any) -> Union[str, Tuple[str, ...]]:
    """A single path stays a str; any other sequence becomes a tuple of paths."""
    if value is None:
        return ""
    if isinstance(value, str):
        return value
    return tuple(str(p) for p in value)


def normalize_sort_order(value: Any) -> str:
    if value in SORT_ORDERS:
        return value
    logger.warning(
        "sort_order must be one of %s, falling back to 'asc'",
        list(SORT_ORDERS),
        extra={"sort_order": repr(value)},
    )
    return "asc"


@dataclass
class SortSpec:
    """
    Which field path(s) the view is sorted by, and in which direction.

    - sort_by: a dotted field path, or a tuple of paths (primary key first).
      An empty string means "keep dataset order".
    - sort_order: "asc" or "desc", shared by every path in sort_by.
    """

    sort_by: Union[str, Tuple[str, ...]] = ""
    sort_order: str = "asc"

    def to_dict(self) -> Dict[str, Any]:
        sort_by = self.sort_by if isinstance(self.sort_by, str) else list(self.sort_by)
        return {"sortBy": sort_by, "sortOrder": self.sort_order}

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> SortSpec:
        return cls(
            sort_by=normalize_sort_by(data.get("sortBy", "")),
            sort_order=normalize_sort_order(data.get("sortOrder", "asc")),
        )


@dataclass
class PageSpec:
    """The window onto the sorted dataset: 1-based page number and page size."""

    active_page: int = 1
    rows_on_page: int = DEFAULT_ROWS_ON_PAGE

    def to_dict(self) -> Dict[str, Any]:
        return {"activePage": self.active_page, "rowsOnPage": self.rows_on_page}

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> PageSpec:
        return cls(
            active_page=data.get("activePage", 1),
            rows_on_page=data.get("rowsOnPage", DEFAULT_ROWS_ON_PAGE),
        )
