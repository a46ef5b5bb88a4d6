from __future__ import annotations

import logging
from typing import Any, List, Optional, Sequence, Union, Tuple

from .change_detector import ChangeDetector
from .comparison import sort_records
from .events import EventStream, PageEvent, ReplayLatestStream, SortEvent, Subscription
from .paging import (
    clamp_page,
    page_bounds,
    remap_on_page_size_change,
    total_pages,
    validate_active_page,
    validate_rows_on_page,
)
from .state import (
    DEFAULT_ROWS_ON_PAGE,
    PageSpec,
    SortSpec,
    normalize_sort_by,
    normalize_sort_order,
)

logger = logging.getLogger(__name__)


class ViewEngine:
    """
    Sorted, paginated view over a caller-owned dataset.

    The engine holds three independent inputs (sort spec, page spec and a
    reference to the dataset). Changing any of them marks the view dirty;
    evaluate() rebuilds the materialised slice once per dirty period.

    Design Notes:
    - Nothing is scheduled in the background. The caller drives evaluate(),
      typically once per UI refresh.
    - The dataset is never copied or mutated. The engine sorts a shallow copy
      and keeps only the windowed slice.
    - Structural changes of the dataset (rows added, removed or reordered in
      the same list) are picked up by evaluate(). Mutating a field inside an
      existing record is not detected; call set_dataset() instead.
    - Not thread-safe. One writer at a time, and the dataset must not change
      while evaluate() runs.

    Streams:
    - on_sort_change: replays the latest SortEvent to new subscribers
    - on_page_change: PageEvent for every accepted page or dataset change
    - sort_by_change / sort_order_change: the accepted values on their own,
      for owners that persist the sort configuration
    """

    def __init__(
        self,
        dataset: Optional[Sequence[Any]] = None,
        sort_by: Union[str, Sequence[str], None] = "",
        sort_order: str = "asc",
        rows_on_page: int = DEFAULT_ROWS_ON_PAGE,
        active_page: int = 1,
    ):
        self._dataset: Sequence[Any] = dataset if dataset is not None else []
        self._sort = SortSpec(normalize_sort_by(sort_by), normalize_sort_order(sort_order))
        self._page = PageSpec(
            active_page=validate_active_page(active_page),
            rows_on_page=validate_rows_on_page(rows_on_page),
        )
        self._page.active_page = clamp_page(
            self._page.active_page, total_pages(len(self._dataset), self._page.rows_on_page)
        )

        self.on_sort_change: ReplayLatestStream[SortEvent] = ReplayLatestStream()
        self.on_page_change: EventStream[PageEvent] = EventStream()
        self.sort_by_change: EventStream[Union[str, Tuple[str, ...]]] = EventStream()
        self.sort_order_change: EventStream[str] = EventStream()

        self._detector = ChangeDetector()
        self._detector.reset(self._dataset)
        self._data: List[Any] = []
        self._dirty = True

        if self._sort.sort_by:
            self.on_sort_change.publish(self.get_sort())

    # ---------------------------------------------------------
    # Read accessors
    # ---------------------------------------------------------
    @property
    def dataset(self) -> Sequence[Any]:
        return self._dataset

    @property
    def data(self) -> List[Any]:
        """The current view slice, as of the last evaluate()."""
        return list(self._data)

    @property
    def dirty(self) -> bool:
        return self._dirty

    def get_sort(self) -> SortEvent:
        return SortEvent(sort_by=self._sort.sort_by, sort_order=self._sort.sort_order)

    def get_page(self) -> PageEvent:
        return PageEvent(
            active_page=self._page.active_page,
            rows_on_page=self._page.rows_on_page,
            data_length=len(self._dataset),
        )

    # ---------------------------------------------------------
    # Mutators
    # ---------------------------------------------------------
    def set_sort(self, sort_by: Union[str, Sequence[str], None], sort_order: str = "asc") -> None:
        """
        Change the sort spec. No-op unless sort_by or the normalised order
        differs from the current one. An order other than "asc"/"desc"
        falls back to "asc" with a warning.
        """
        sort_by = normalize_sort_by(sort_by)
        sort_order = normalize_sort_order(sort_order)
        if sort_by == self._sort.sort_by and sort_order == self._sort.sort_order:
            return

        self._sort = SortSpec(sort_by, sort_order)
        self._dirty = True
        logger.debug("Sort changed", extra={"sort_by": repr(sort_by), "sort_order": sort_order})

        self.on_sort_change.publish(self.get_sort())
        self.sort_by_change.publish(sort_by)
        self.sort_order_change.publish(sort_order)

    def set_page(self, active_page: int, rows_on_page: int) -> None:
        """
        Change the page spec. No-op unless either value differs.

        An explicitly requested page wins. When only the page size changes
        the active page is remapped so the first visible row stays visible.
        The result is clamped onto the available pages.
        """
        validate_active_page(active_page)
        validate_rows_on_page(rows_on_page)
        current = self._page
        if active_page == current.active_page and rows_on_page == current.rows_on_page:
            return

        if active_page != current.active_page:
            new_page = active_page
        else:
            new_page = remap_on_page_size_change(
                current.active_page, current.rows_on_page, rows_on_page
            )

        pages = total_pages(len(self._dataset), rows_on_page)
        self._page = PageSpec(active_page=clamp_page(new_page, pages), rows_on_page=rows_on_page)
        self._dirty = True
        self.on_page_change.publish(self.get_page())

    def set_dataset(self, dataset: Optional[Sequence[Any]]) -> None:
        """Replace the dataset reference, re-clamp the page and mark dirty."""
        self._dataset = dataset if dataset is not None else []
        self._detector.reset(self._dataset)
        self._recalculate_page()
        self._dirty = True

    # ---------------------------------------------------------
    # Subscriptions
    # ---------------------------------------------------------
    def subscribe_sort_change(self, handler) -> Subscription:
        return self.on_sort_change.subscribe(handler)

    def subscribe_page_change(self, handler) -> Subscription:
        return self.on_page_change.subscribe(handler)

    # ---------------------------------------------------------
    # Recompute
    # ---------------------------------------------------------
    def evaluate(self) -> List[Any]:
        """
        Bring the view slice up to date and return it.

        Calling this again without an intervening change does no work and
        publishes nothing.
        """
        if self._detector.check(self._dataset):
            self._recalculate_page()
            self._dirty = True

        if self._dirty:
            self._fill_data()
            self._dirty = False

        return self.data

    def _recalculate_page(self) -> None:
        pages = total_pages(len(self._dataset), self._page.rows_on_page)
        self._page.active_page = clamp_page(self._page.active_page, pages)
        self.on_page_change.publish(self.get_page())

    def _fill_data(self) -> None:
        rows = sort_records(self._dataset, self._sort.sort_by, self._sort.sort_order)
        start, stop = page_bounds(self._page.active_page, self._page.rows_on_page)
        self._data = rows[start:stop]
        logger.debug(
            "View slice recomputed",
            extra={
                "data_length": len(rows),
                "active_page": self._page.active_page,
                "rows_on_page": self._page.rows_on_page,
                "slice_length": len(self._data),
            },
        )
