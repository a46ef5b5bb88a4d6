from tabview.config.model import ColumnConfig
from tabview.core.events import PageEvent
from tabview.core.view_engine import ViewEngine
from tabview.ui.helpers import display_rows, pager_summary, sort_header, view_slice_table

COLUMNS = [
    ColumnConfig(label="ID", field="id"),
    ColumnConfig(label="City", field="address.city"),
    ColumnConfig(label="Notes", field="notes", sortable=False),
]


def test_display_rows_resolves_paths_and_blanks_absent_values():
    rows = [
        {"id": "7", "address": {"city": "Salem"}, "notes": ["a"]},
        {"id": "8", "address": None},
    ]

    assert display_rows(rows, COLUMNS) == [
        {"id": "7", "address.city": "Salem", "notes": "['a']"},
        {"id": "8", "address.city": "", "notes": ""},
    ]


def test_pager_summary():
    assert pager_summary(PageEvent(1, 10, 0)) == "No rows"
    assert pager_summary(PageEvent(1, 10, 45)) == "Rows 1-10 of 45"
    assert pager_summary(PageEvent(5, 10, 45)) == "Rows 41-45 of 45"


def test_sort_header_marks_sorted_column_and_leaves_no_subscriptions():
    engine = ViewEngine(dataset=[], sort_by="address.city", sort_order="desc")

    cells = sort_header(engine, COLUMNS)

    assert len(cells) == 3
    assert cells[0].id == {"type": "sort-toggle", "field": "id"}
    assert cells[1].children[1].children == "▼"
    assert cells[0].children[1].children == ""
    assert cells[2].children == "Notes"
    assert engine.on_sort_change.subscriber_count() == 0


def test_view_slice_table_renders_engine_slice():
    engine = ViewEngine(dataset=[{"id": "10"}, {"id": "9"}], sort_by="id")

    table = view_slice_table(engine.evaluate(), COLUMNS)

    assert [row["id"] for row in table.data] == ["9", "10"]
    assert [c["id"] for c in table.columns] == ["id", "address.city", "notes"]
