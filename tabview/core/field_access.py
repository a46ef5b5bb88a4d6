from __future__ import annotations

from collections.abc import Mapping
from typing import Any


class _Missing:
    """
    Sentinel for a field path that does not resolve to a value.

    Kept distinct from None so callers can tell "the record says null" apart
    from "the record has no such field". Both are treated as absent by the
    comparison layer.
    """

    _instance: "_Missing | None" = None

    def __new__(cls) -> "_Missing":
        if cls._instance is None:
            cls._instance = super().__new__(cls)
        return cls._instance

    def __bool__(self) -> bool:
        return False

    def __repr__(self) -> str:
        return "MISSING"

    def __reduce__(self):
        return (_Missing, ())


MISSING = _Missing()

_SCALARS = (str, bytes, int, float, complex)


def is_absent(value: Any) -> bool:
    return value is MISSING or value is None


def resolve_path(record: Any, path: str) -> Any:
    """
    Walk a dotted field path ("address.city") against a record.

    Mappings are read with a key lookup, anything else with attribute lookup,
    so plain dicts, dataclasses and simple objects all work.

    If an intermediate value is absent (MISSING or None) the walk stops and
    that absent value is returned. Never raises for a missing field.

    :param record: the record to read from
    :param path: dotted path, segments separated by "."
    :return: the leaf value, or the absent value the walk stopped on
    """
    if not path:
        return MISSING

    value: Any = record
    for segment in path.split("."):
        if is_absent(value):
            return value
        if isinstance(value, Mapping):
            value = value.get(segment, MISSING)
        elif isinstance(value, _SCALARS):
            # scalars have no fields; don't leak str.upper and friends
            return MISSING
        else:
            value = getattr(value, segment, MISSING)
    return value
