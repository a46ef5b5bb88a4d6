import json

from tabview.core.events import PageEvent, SortEvent
from tabview.core.view_engine import ViewEngine
from tabview.ui.callbacks.callbacks_table import _is_sort_click, _step_page, apply_trigger
from tabview.ui.dash_app import build_app_config
from tabview.ui.ids import IDs, sort_toggle_id


def _rows(n):
    return [{"id": str(i), "name": f"row{i:03d}"} for i in range(1, n + 1)]


def _page_recorder(engine):
    pages = []
    engine.subscribe_page_change(pages.append)
    return pages


def _make_ctx(tmp_path, rows=25):
    root = tmp_path / "config"
    (root / "tables").mkdir(parents=True)
    (root / "data").mkdir()
    (root / "global.json").write_text(json.dumps({"ui_title": "Test", "data_root": "data"}))
    (root / "data" / "rows.json").write_text(json.dumps(_rows(rows)))
    (root / "tables" / "items.json").write_text(
        json.dumps(
            {
                "name": "items",
                "source": "rows.json",
                "columns": ["id", "name"],
                "search_keys": ["name"],
                "rows_on_page": 10,
            }
        )
    )
    return build_app_config(root)


def test_step_page_does_not_move_before_first_page():
    engine = ViewEngine(dataset=_rows(25), rows_on_page=10, active_page=1)
    pages = _page_recorder(engine)

    _step_page(engine, -1)

    assert engine.get_page().active_page == 1
    assert pages == []


def test_step_page_does_not_move_past_last_page():
    engine = ViewEngine(dataset=_rows(25), rows_on_page=10, active_page=3)
    pages = _page_recorder(engine)

    _step_page(engine, 1)

    assert engine.get_page().active_page == 3
    assert pages == []


def test_step_page_moves_one_page_inside_range():
    engine = ViewEngine(dataset=_rows(25), rows_on_page=10, active_page=2)
    pages = _page_recorder(engine)

    _step_page(engine, 1)
    _step_page(engine, -1)
    _step_page(engine, -1)

    assert pages == [PageEvent(3, 10, 25), PageEvent(2, 10, 25), PageEvent(1, 10, 25)]


def test_step_page_on_empty_dataset_stays_on_page_one():
    engine = ViewEngine(dataset=[], rows_on_page=10)

    _step_page(engine, 1)
    _step_page(engine, -1)

    assert engine.get_page() == PageEvent(1, 10, 0)


def test_fresh_sort_button_is_not_a_click():
    trigger = sort_toggle_id("id")

    assert not _is_sort_click(trigger, [{"prop_id": "x.n_clicks", "value": 0}])
    assert not _is_sort_click(trigger, [])
    assert _is_sort_click(trigger, [{"prop_id": "x.n_clicks", "value": 1}])
    assert not _is_sort_click(IDs.Control.PAGE_NEXT_BTN, [{"value": 1}])


def test_sort_trigger_toggles_direction(tmp_path):
    ctx = _make_ctx(tmp_path)

    engine = apply_trigger(ctx, "items", sort_toggle_id("id"))
    assert engine.get_sort() == SortEvent("id", "asc")

    apply_trigger(ctx, "items", sort_toggle_id("id"))
    assert engine.get_sort() == SortEvent("id", "desc")
    assert engine.evaluate()[0]["id"] == "25"


def test_sort_trigger_on_unknown_field_is_ignored(tmp_path):
    ctx = _make_ctx(tmp_path)

    engine = apply_trigger(ctx, "items", sort_toggle_id("nope"))

    assert engine.get_sort().sort_by == ""


def test_pager_triggers_respect_boundaries(tmp_path):
    ctx = _make_ctx(tmp_path)

    engine = apply_trigger(ctx, "items", IDs.Control.PAGE_PREV_BTN)
    assert engine.get_page().active_page == 1

    for _ in range(5):
        apply_trigger(ctx, "items", IDs.Control.PAGE_NEXT_BTN)
    assert engine.get_page().active_page == 3


def test_page_size_trigger_remaps_active_page(tmp_path):
    ctx = _make_ctx(tmp_path)
    apply_trigger(ctx, "items", IDs.Control.PAGE_NEXT_BTN)

    engine = apply_trigger(ctx, "items", IDs.Control.PAGE_SIZE_SELECT, page_size="25")

    assert engine.get_page() == PageEvent(1, 25, 25)


def test_search_trigger_filters_dataset(tmp_path):
    ctx = _make_ctx(tmp_path)

    engine = apply_trigger(ctx, "items", IDs.Control.SEARCH_INPUT, search_text="row02")

    assert [r["id"] for r in engine.evaluate()] == ["20", "21", "22", "23", "24", "25"]
    assert ctx.engines.search_text("items") == "row02"
