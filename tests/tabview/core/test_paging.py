import pytest

from tabview.core.exceptions import InvalidConfiguration
from tabview.core.paging import (
    clamp_page,
    page_bounds,
    remap_on_page_size_change,
    total_pages,
    validate_active_page,
    validate_rows_on_page,
)


def test_total_pages_rounds_up():
    assert total_pages(25, 10) == 3
    assert total_pages(30, 10) == 3
    assert total_pages(1, 10) == 1
    assert total_pages(0, 10) == 0


def test_clamp_page_pulls_back_to_last_page():
    assert clamp_page(5, 3) == 3
    assert clamp_page(2, 3) == 2


def test_clamp_page_on_empty_dataset_is_one():
    assert clamp_page(4, 0) == 1


def test_remap_keeps_first_visible_row():
    # page 3 at 10 rows shows rows 21-30, row 21 is on page 2 at 20 rows
    assert remap_on_page_size_change(3, 10, 20) == 2
    # and back: row 21 at 10 rows is on page 3
    assert remap_on_page_size_change(2, 20, 10) == 3
    assert remap_on_page_size_change(1, 50, 10) == 1


def test_page_bounds_is_half_open_window():
    assert page_bounds(1, 10) == (0, 10)
    assert page_bounds(3, 10) == (20, 30)


@pytest.mark.parametrize("bad", [0, -5, 2.5, "10", None, True])
def test_rows_on_page_must_be_positive_int(bad):
    with pytest.raises(InvalidConfiguration):
        validate_rows_on_page(bad)


def test_zero_rows_on_page_is_rejected_not_divided_by():
    with pytest.raises(InvalidConfiguration):
        total_pages(10, 0)


def test_active_page_must_be_positive_int():
    assert validate_active_page(1) == 1
    with pytest.raises(InvalidConfiguration):
        validate_active_page(0)


def test_invalid_configuration_is_a_value_error():
    with pytest.raises(ValueError):
        validate_rows_on_page(-1)
