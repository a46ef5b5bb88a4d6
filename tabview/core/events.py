"""
Change events and the synchronous broadcast streams that carry them.

EventStream delivers each published value to the current subscribers, in
subscription order, on the publisher's call stack. ReplayLatestStream also
remembers the most recent value and hands it to every new subscriber at
subscribe time, so a control mounted late can render the current sort state
without waiting for the next change.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Callable, Dict, Generic, List, Optional, Tuple, TypeVar, Union

__all__ = [
    "SortEvent",
    "PageEvent",
    "Subscription",
    "EventStream",
    "ReplayLatestStream",
]

T = TypeVar("T")
Handler = Callable[[T], None]


@dataclass(frozen=True)
class SortEvent:
    sort_by: Union[str, Tuple[str, ...]]
    sort_order: str

    def to_dict(self) -> Dict[str, Any]:
        sort_by = self.sort_by if isinstance(self.sort_by, str) else list(self.sort_by)
        return {"sortBy": sort_by, "sortOrder": self.sort_order}


@dataclass(frozen=True)
class PageEvent:
    active_page: int
    rows_on_page: int
    data_length: int

    def to_dict(self) -> Dict[str, Any]:
        return {
            "activePage": self.active_page,
            "rowsOnPage": self.rows_on_page,
            "dataLength": self.data_length,
        }


class Subscription:
    """Handle returned by subscribe(); cancel() detaches only this handler."""

    def __init__(self, stream: "EventStream[Any]", handler: Handler) -> None:
        self._stream = stream
        self.handler = handler
        self.active = True

    def cancel(self) -> None:
        if not self.active:
            return
        self.active = False
        self._stream._remove(self)


class EventStream(Generic[T]):
    def __init__(self) -> None:
        self._subs: List[Subscription] = []

    def subscribe(self, handler: Handler) -> Subscription:
        sub = Subscription(self, handler)
        self._subs.append(sub)
        return sub

    def publish(self, value: T) -> None:
        # snapshot so handlers can cancel or subscribe while we dispatch
        for sub in list(self._subs):
            if sub.active:
                sub.handler(value)

    def subscriber_count(self) -> int:
        return len(self._subs)

    def _remove(self, sub: Subscription) -> None:
        self._subs = [s for s in self._subs if s is not sub]


class ReplayLatestStream(EventStream[T]):
    def __init__(self) -> None:
        super().__init__()
        self._latest: Optional[T] = None
        self._has_latest = False

    @property
    def latest(self) -> Optional[T]:
        return self._latest

    @property
    def has_latest(self) -> bool:
        return self._has_latest

    def publish(self, value: T) -> None:
        self._latest = value
        self._has_latest = True
        super().publish(value)

    def subscribe(self, handler: Handler) -> Subscription:
        sub = super().subscribe(handler)
        if self._has_latest:
            try:
                handler(self._latest)
            except BaseException:
                # the caller never sees the handle, so it could not cancel it
                sub.cancel()
                raise
        return sub
