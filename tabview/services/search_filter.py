"""
Free-text search over records, run before the records reach a ViewEngine.

Search keys map a top-level field to an optional list of sub fields:

    {"placeId": [], "placeName": [], "address": ["displayAddress"]}

A key without sub fields matches on its own value; a key with sub fields
matches on any of those nested values instead.
"""

from __future__ import annotations

from typing import Any, Dict, Iterable, List, Sequence

from tabview.core.field_access import is_absent, resolve_path

SearchKeys = Dict[str, Sequence[str]]


def _matches(value: Any, needle: str) -> bool:
    if is_absent(value):
        return False
    return needle in str(value).lower()


def record_matches(record: Any, needle: str, search_keys: SearchKeys) -> bool:
    for key, sub_keys in search_keys.items():
        value = resolve_path(record, key)
        if sub_keys:
            if any(_matches(resolve_path(value, sub), needle) for sub in sub_keys):
                return True
        elif _matches(value, needle):
            return True
    return False


def filter_records(records: Iterable[Any], text: str | None, search_keys: SearchKeys) -> List[Any]:
    """
    Keep records where any search key contains text (case-insensitive).

    Blank text keeps every record. The result is always a new list holding
    the original record objects in their original order.
    """
    rows = list(records)
    needle = (text or "").strip().lower()
    if not needle:
        return rows
    return [r for r in rows if record_matches(r, needle, search_keys)]
