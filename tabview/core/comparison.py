"""
Type-aware, stable sorting of records by one or more field paths.

Each resolved leaf value is classified before comparison:

1. all-digit text (or a native number) compares as a number
2. text with a digit that parses as a calendar date compares as a timestamp
3. other text compares case-insensitively
4. anything else compares by its native ordering

Values from different classes never meet in a native comparison. They are
ordered by class instead:

    numbers < dates < text < other values < absent

Absent means a missing field, an explicit None or a NaN (float or Decimal).
The direction flips the whole ordering, so with "desc" absent values come
first.

Multi-field sorts apply the single direction to every field. The first field
is the primary key, later fields only break ties.
"""

from __future__ import annotations

import datetime as dt
import functools
import math
import re
import warnings
from decimal import Decimal
from typing import Any, Callable, Iterable, List, Sequence, Tuple, Union

import pandas as pd

from .field_access import is_absent, resolve_path

NUMBER = 0
DATE = 1
TEXT = 2
OTHER = 3
ABSENT = 4

SortBy = Union[str, Sequence[str]]
SortValue = Tuple[int, Any]
Comparator = Callable[[Any, Any], int]

_DIGITS = re.compile(r"[0-9]+")
_HAS_DIGIT = re.compile(r"[0-9]")
_ORDINAL = re.compile(r"[0-9]+(st|nd|rd|th)", re.IGNORECASE)


@functools.lru_cache(maxsize=4096)
def _parse_date(text: str) -> pd.Timestamp | None:
    # words like "now", "today" or "May" and bare ordinals parse relative to
    # the current clock
    if not _HAS_DIGIT.search(text) or _ORDINAL.fullmatch(text.strip()):
        return None
    with warnings.catch_warnings():
        # pandas warns when it has to guess day-first vs month-first
        warnings.simplefilter("ignore")
        try:
            ts = pd.to_datetime(text, errors="coerce")
        except (ValueError, TypeError, OverflowError):
            return None
    if not isinstance(ts, pd.Timestamp) or pd.isna(ts):
        return None
    return _naive_utc(ts)


def _naive_utc(ts: pd.Timestamp) -> pd.Timestamp:
    # aware and naive timestamps refuse to compare with each other
    if ts.tzinfo is not None:
        return ts.tz_convert("UTC").tz_localize(None)
    return ts


def infer_sort_value(value: Any) -> SortValue:
    """
    Classify a resolved leaf value.

    :return: (type class, comparable value)
    """
    if is_absent(value):
        return ABSENT, None

    if isinstance(value, str):
        if _DIGITS.fullmatch(value):
            return NUMBER, int(value)
        parsed = _parse_date(value)
        if parsed is not None:
            return DATE, parsed
        return TEXT, value.lower()

    if isinstance(value, Decimal) and value.is_nan():
        return ABSENT, None
    if isinstance(value, (bool, int, Decimal)):
        return NUMBER, value
    if isinstance(value, float):
        if math.isnan(value):
            return ABSENT, None
        return NUMBER, value

    if isinstance(value, (dt.datetime, dt.date)):
        return DATE, _naive_utc(pd.Timestamp(value))

    return OTHER, value


def _compare_native(a: Any, b: Any) -> int:
    try:
        if a < b:
            return -1
        if b < a:
            return 1
        return 0
    except TypeError:
        # unorderable pair: fall back to a fixed order by type name
        ta, tb = type(a).__name__, type(b).__name__
        return (ta > tb) - (ta < tb)


def compare_sort_values(a: SortValue, b: SortValue) -> int:
    a_class, a_value = a
    b_class, b_value = b
    if a_class != b_class:
        return -1 if a_class < b_class else 1
    if a_class == ABSENT:
        return 0
    return _compare_native(a_value, b_value)


def sort_fields(sort_by: SortBy | None) -> Tuple[str, ...]:
    """Normalise a single path or a sequence of paths to a tuple of paths."""
    if not sort_by:
        return ()
    if isinstance(sort_by, str):
        return (sort_by,)
    return tuple(str(p) for p in sort_by)


def build_sort_key(sort_by: SortBy | None) -> Callable[[Any], Tuple[SortValue, ...]]:
    fields = sort_fields(sort_by)

    def key(record: Any) -> Tuple[SortValue, ...]:
        return tuple(infer_sort_value(resolve_path(record, f)) for f in fields)

    return key


def _compare_keys(a: Tuple[SortValue, ...], b: Tuple[SortValue, ...], sign: int) -> int:
    for a_value, b_value in zip(a, b):
        result = compare_sort_values(a_value, b_value)
        if result:
            return sign * result
    return 0


def build_comparator(sort_by: SortBy | None, sort_order: str = "asc") -> Comparator:
    """
    Build a three-way comparator over records.

    Returns a negative number when the first record sorts before the second,
    positive when after, 0 when the sort keys are equal.
    """
    key = build_sort_key(sort_by)
    sign = -1 if sort_order == "desc" else 1

    def compare(a: Any, b: Any) -> int:
        return _compare_keys(key(a), key(b), sign)

    return compare


def sort_records(
    records: Iterable[Any],
    sort_by: SortBy | None,
    sort_order: str = "asc",
) -> List[Any]:
    """
    Return a new list holding the records in sorted order.

    The input is never mutated. The sort is stable in both directions:
    records with equal keys keep their original relative order.
    """
    rows = list(records)
    if not sort_fields(sort_by):
        return rows

    key = build_sort_key(sort_by)
    sign = -1 if sort_order == "desc" else 1

    # resolve each key once, not once per comparison
    decorated = [(key(r), r) for r in rows]
    decorated.sort(key=functools.cmp_to_key(lambda a, b: _compare_keys(a[0], b[0], sign)))
    return [r for _, r in decorated]
