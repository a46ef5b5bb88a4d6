from __future__ import annotations

import logging
from typing import TYPE_CHECKING, Any, Dict, List, Optional

import dash
import dash_bootstrap_components as dbc
from dash import ALL, Input, Output

from tabview.core.exceptions import DataSourceError, InvalidConfiguration
from tabview.core.paging import total_pages
from tabview.core.view_engine import ViewEngine
from tabview.ui.helpers import pager_summary, sort_header, view_slice_table
from tabview.ui.ids import IDs
from tabview.ui.sort_toggle import SortToggle

if TYPE_CHECKING:
    from tabview.ui.config import AppConfig

logger = logging.getLogger(__name__)

_NO_CHANGE = (dash.no_update,) * 5


def _message(text: str, color: str = "secondary"):
    return dbc.Alert(text, color=color, className="mb-0")


def _step_page(engine: ViewEngine, delta: int) -> None:
    page = engine.get_page()
    pages = total_pages(page.data_length, page.rows_on_page)
    target = page.active_page + delta
    if 1 <= target <= max(pages, 1):
        engine.set_page(target, page.rows_on_page)


def _is_sort_toggle(trigger: Any) -> bool:
    return isinstance(trigger, dict) and trigger.get("type") == IDs.Pattern.SORT_TOGGLE


def _is_sort_click(trigger: Any, triggered: List[Dict[str, Any]]) -> bool:
    """
    Header buttons are re-created on every render; a fresh button with
    n_clicks=0 shows up as a trigger but is not a click.
    """
    return _is_sort_toggle(trigger) and bool(triggered and triggered[0].get("value"))


def apply_trigger(
        ctx: AppConfig,
        table_name: str,
        trigger: Any,
        page_size: Any = None,
        search_text: Optional[str] = None,
) -> ViewEngine:
    """Route one UI trigger to the matching engine mutator and return the engine."""
    engine = ctx.engines[table_name]

    if _is_sort_toggle(trigger):
        field = trigger.get("field")
        if ctx.sort_specs.is_valid(table_name, field):
            with SortToggle(engine, field) as toggle:
                toggle.activate()
        else:
            logger.warning("Ignoring sort on unknown field", extra={"table": table_name, "field": field})
    elif trigger == IDs.Control.PAGE_PREV_BTN:
        _step_page(engine, -1)
    elif trigger == IDs.Control.PAGE_NEXT_BTN:
        _step_page(engine, 1)
    elif trigger == IDs.Control.PAGE_SIZE_SELECT and page_size:
        engine.set_page(engine.get_page().active_page, int(page_size))
    elif trigger == IDs.Control.SEARCH_INPUT:
        ctx.engines.search(table_name, search_text)
    elif trigger == IDs.Control.REFRESH_BTN:
        ctx.engines.refresh(table_name)

    return engine


def register_table_callbacks(app: dash.Dash, ctx: AppConfig) -> None:
    # ---------------------------------------------------------
    # Every table interaction -> engine mutator -> evaluate -> render
    # ---------------------------------------------------------
    @app.callback(
        Output(IDs.Control.TABLE_HEADER, "children"),
        Output(IDs.Control.TABLE_BODY, "children"),
        Output(IDs.Control.PAGE_SUMMARY, "children"),
        Output(IDs.Control.PAGE_SIZE_SELECT, "value"),
        Output(IDs.Control.PAGE_SIZE_SELECT, "options"),
        Input(IDs.Control.TABLE_SELECT, "value"),
        Input({"type": IDs.Pattern.SORT_TOGGLE, "field": ALL}, "n_clicks"),
        Input(IDs.Control.PAGE_PREV_BTN, "n_clicks"),
        Input(IDs.Control.PAGE_NEXT_BTN, "n_clicks"),
        Input(IDs.Control.PAGE_SIZE_SELECT, "value"),
        Input(IDs.Control.SEARCH_INPUT, "value"),
        Input(IDs.Control.REFRESH_BTN, "n_clicks"),
    )
    def update_table(table_name, _sort_clicks, _prev, _next, page_size, search_text, _refresh):
        if not table_name:
            return [], _message("No table selected."), "", dash.no_update, dash.no_update

        cfg = ctx.table_by_name.get(table_name)
        if cfg is None:
            return [], _message(f"Table '{table_name}' not found.", "warning"), "", dash.no_update, dash.no_update

        trigger: Any = dash.ctx.triggered_id

        if _is_sort_toggle(trigger) and not _is_sort_click(trigger, dash.ctx.triggered):
            return _NO_CHANGE

        try:
            engine = apply_trigger(ctx, table_name, trigger, page_size, search_text)
            rows = engine.evaluate()
        except DataSourceError as e:
            logger.error("Could not load table records", extra={"table": table_name, "error": str(e)})
            return [], _message(f"Could not load records: {e}", "danger"), "", dash.no_update, dash.no_update
        except (InvalidConfiguration, ValueError) as e:
            logger.warning("Rejected table change", extra={"table": table_name, "error": str(e)})
            return _NO_CHANGE

        page = engine.get_page()
        options = [{"label": f"{n} / page", "value": n} for n in cfg.page_size_options]
        return (
            sort_header(engine, cfg.columns),
            view_slice_table(rows, cfg.columns),
            pager_summary(page),
            page.rows_on_page,
            options,
        )
