from tabview.services.search_filter import filter_records

SEARCH_KEYS = {
    "placeId": [],
    "placeName": [],
    "address": ["displayAddress"],
}


def _records():
    return [
        {"placeId": "1042", "placeName": "Riverside Fuel", "address": {"displayAddress": "12 River Rd, Salem"}},
        {"placeId": "988", "placeName": "Airport Depot", "address": {"displayAddress": "1 Terminal Way, Portland"}},
        {"placeId": "77", "placeName": "Hilltop Station", "address": None},
    ]


def test_blank_text_keeps_all_records_in_a_new_list():
    records = _records()

    result = filter_records(records, "  ", SEARCH_KEYS)

    assert result == records
    assert result is not records
    assert all(a is b for a, b in zip(result, records))


def test_match_is_case_insensitive_substring():
    result = filter_records(_records(), "DEPOT", SEARCH_KEYS)

    assert [r["placeId"] for r in result] == ["988"]


def test_sub_keys_search_nested_values():
    result = filter_records(_records(), "salem", SEARCH_KEYS)

    assert [r["placeId"] for r in result] == ["1042"]


def test_key_with_sub_keys_does_not_match_its_own_value():
    records = [{"address": "Salem"}]

    assert filter_records(records, "salem", {"address": ["displayAddress"]}) == []


def test_numbers_and_missing_fields():
    records = [{"placeId": 1042}, {"other": "x"}]

    assert filter_records(records, "04", {"placeId": []}) == [{"placeId": 1042}]
    assert filter_records(records, None, {"placeId": []}) == records
