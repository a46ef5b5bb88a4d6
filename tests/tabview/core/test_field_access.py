from __future__ import annotations

from dataclasses import dataclass

from tabview.core.field_access import MISSING, is_absent, resolve_path


@dataclass
class _Address:
    city: str


@dataclass
class _Customer:
    name: str
    address: _Address | None


def test_resolve_top_level_and_nested_paths():
    record = {"name": "Depot", "address": {"city": "Salem", "geo": {"lat": 44.9}}}

    assert resolve_path(record, "name") == "Depot"
    assert resolve_path(record, "address.city") == "Salem"
    assert resolve_path(record, "address.geo.lat") == 44.9


def test_missing_field_returns_missing_sentinel():
    record = {"name": "Depot"}

    assert resolve_path(record, "owner") is MISSING
    assert resolve_path(record, "owner.name") is MISSING


def test_null_intermediate_stops_walk_and_returns_none():
    record = {"address": None}

    assert resolve_path(record, "address.city") is None
    assert is_absent(resolve_path(record, "address.city"))


def test_attribute_access_on_objects():
    rec = _Customer(name="Ana", address=_Address(city="Eugene"))
    no_addr = _Customer(name="Bo", address=None)

    assert resolve_path(rec, "address.city") == "Eugene"
    assert resolve_path(no_addr, "address.city") is None


def test_scalars_have_no_fields():
    record = {"name": "Depot"}

    assert resolve_path(record, "name.upper") is MISSING
    assert resolve_path({"n": 5}, "n.real") is MISSING


def test_empty_path_is_missing():
    assert resolve_path({"": 1}, "") is MISSING


def test_missing_sentinel_is_falsy_singleton():
    assert not MISSING
    assert repr(MISSING) == "MISSING"
    assert type(MISSING)() is MISSING
