from __future__ import annotations

from typing import Optional

from tabview.core.events import SortEvent, Subscription
from tabview.core.view_engine import ViewEngine

INDICATOR_ASC = "▲"
INDICATOR_DESC = "▼"
INDICATOR_NONE = ""


class SortToggle:
    """
    Sort control bound to one field path of a table.

    Subscribes to the engine's sort stream on creation. Because that stream
    replays the latest SortEvent, a toggle created after the sort was set
    knows at once whether its column is the sorted one.

    activate() flips the direction: ascending by this field becomes
    descending, anything else (other field, or descending) becomes ascending.
    """

    def __init__(self, engine: ViewEngine, sort_by: str):
        self._engine = engine
        self.sort_by = sort_by
        self.is_sorted_asc = False
        self.is_sorted_desc = False
        self._subscription: Optional[Subscription] = engine.subscribe_sort_change(self._on_sort_change)

    def _on_sort_change(self, event: SortEvent) -> None:
        mine = event.sort_by == self.sort_by
        self.is_sorted_asc = mine and event.sort_order == "asc"
        self.is_sorted_desc = mine and event.sort_order == "desc"

    @property
    def indicator(self) -> str:
        if self.is_sorted_asc:
            return INDICATOR_ASC
        if self.is_sorted_desc:
            return INDICATOR_DESC
        return INDICATOR_NONE

    def activate(self) -> None:
        if self.is_sorted_asc:
            self._engine.set_sort(self.sort_by, "desc")
        else:
            self._engine.set_sort(self.sort_by, "asc")

    def close(self) -> None:
        if self._subscription is not None:
            self._subscription.cancel()
            self._subscription = None

    def __enter__(self) -> SortToggle:
        return self

    def __exit__(self, *exc) -> None:
        self.close()
