from __future__ import annotations

from typing import Any, Dict, List, Sequence

import dash_bootstrap_components as dbc
from dash import dash_table, html

from tabview.config.model import ColumnConfig
from tabview.core.events import PageEvent
from tabview.core.field_access import is_absent, resolve_path
from tabview.core.paging import page_bounds
from tabview.core.view_engine import ViewEngine
from tabview.ui.ids import sort_toggle_id
from tabview.ui.sort_toggle import SortToggle

FONT_FAMILY = 'system-ui, -apple-system, BlinkMacSystemFont, "SF Pro Text", "Segoe UI", sans-serif'


def _display_value(value: Any) -> Any:
    if is_absent(value):
        return ""
    if isinstance(value, (str, int, float, bool)):
        return value
    return str(value)


def display_rows(rows: Sequence[Any], columns: Sequence[ColumnConfig]) -> List[Dict[str, Any]]:
    """
    Flatten records for DataTable: one key per column field path, nested
    values resolved, absent values rendered as empty cells.
    """
    return [
        {c.field: _display_value(resolve_path(row, c.field)) for c in columns}
        for row in rows
    ]


def pager_summary(page: PageEvent) -> str:
    if page.data_length == 0:
        return "No rows"
    start, stop = page_bounds(page.active_page, page.rows_on_page)
    stop = min(stop, page.data_length)
    return f"Rows {start + 1}-{stop} of {page.data_length}"


def sort_header(engine: ViewEngine, columns: Sequence[ColumnConfig]) -> List[Any]:
    """
    Build one header cell per column. Sortable columns get a toggle button
    showing the current direction indicator.
    """
    cells: List[Any] = []
    for col in columns:
        if not col.sortable:
            cells.append(html.Span(col.label, className="tv-header-cell"))
            continue

        with SortToggle(engine, col.field) as toggle:
            indicator = toggle.indicator
            active = toggle.is_sorted_asc or toggle.is_sorted_desc

        cells.append(
            dbc.Button(
                [col.label, html.Span(indicator, className="ms-1 tv-sort-indicator")],
                id=sort_toggle_id(col.field),
                color="link",
                size="sm",
                className="tv-header-cell text-nowrap" + (" text-primary fw-semibold" if active else ""),
                n_clicks=0,
            )
        )
    return cells


def view_slice_table(rows: Sequence[Any], columns: Sequence[ColumnConfig]) -> dash_table.DataTable:
    """
    Build a styled Dash DataTable for the current view slice.

    Sorting and paging are done by the engine; the table only renders.
    """
    return dash_table.DataTable(
        data=display_rows(rows, columns),
        columns=[{"name": c.label, "id": c.field} for c in columns],

        # ---- FONT + LOOK & FEEL ----
        style_table={
            "overflowX": "auto",
        },
        style_as_list_view=True,
        style_cell={
            "fontFamily": FONT_FAMILY,
            "fontSize": "12px",
            "padding": "6px 8px",
            "border": "none",
            "textAlign": "left",
            "minWidth": "80px",
            "maxWidth": "260px",
            "whiteSpace": "nowrap",
            "textOverflow": "ellipsis",
        },
        style_header={
            "fontFamily": FONT_FAMILY,
            "fontSize": "12px",
            "fontWeight": "600",
            "backgroundColor": "#f3f4f6",
            "borderBottom": "1px solid #e5e7eb",
        },
        style_data={
            "borderBottom": "1px solid #e5e7eb",
        },

        page_action="none",
        sort_action="none",
        filter_action="none",
    )
