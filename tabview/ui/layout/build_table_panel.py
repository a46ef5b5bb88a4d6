from __future__ import annotations

from typing import Optional

import dash_bootstrap_components as dbc
from dash import dcc, html

from tabview.config.model import DEFAULT_PAGE_SIZE_OPTIONS, TableConfig
from tabview.ui.ids import IDs


def build_table_panel(table: Optional[TableConfig]) -> dbc.Card:
    """
    Table page:

    - search box + refresh button
    - sort toggle header and the current view slice
    - pager: previous / summary / next and page size selector
    """
    sizes = table.page_size_options if table is not None else DEFAULT_PAGE_SIZE_OPTIONS
    rows_on_page = table.rows_on_page if table is not None else sizes[0]

    toolbar = dbc.Row(
        [
            dbc.Col(
                dbc.Input(
                    id=IDs.Control.SEARCH_INPUT,
                    type="text",
                    placeholder="You can search by any column name",
                    debounce=True,
                ),
                md=9,
            ),
            dbc.Col(
                dbc.Button("Refresh", id=IDs.Control.REFRESH_BTN, color="secondary", n_clicks=0),
                md=3,
                className="text-end",
            ),
        ],
        className="gx-2 mb-2",
    )

    pager = dbc.Row(
        [
            dbc.Col(
                dbc.ButtonGroup(
                    [
                        dbc.Button("Previous", id=IDs.Control.PAGE_PREV_BTN, size="sm", n_clicks=0),
                        dbc.Button("Next", id=IDs.Control.PAGE_NEXT_BTN, size="sm", n_clicks=0),
                    ]
                ),
                md=4,
            ),
            dbc.Col(html.Small(id=IDs.Control.PAGE_SUMMARY, className="text-muted"), md=4),
            dbc.Col(
                dcc.Dropdown(
                    id=IDs.Control.PAGE_SIZE_SELECT,
                    options=[{"label": f"{n} / page", "value": n} for n in sizes],
                    value=rows_on_page,
                    clearable=False,
                ),
                md=4,
            ),
        ],
        className="gx-2 mt-2 align-items-center",
    )

    return dbc.Card(
        [
            dbc.CardHeader(table.title if table is not None else "No table"),
            dbc.CardBody(
                [
                    toolbar,
                    html.Div(id=IDs.Control.TABLE_HEADER, className="d-flex flex-wrap tv-sort-header"),
                    html.Div(id=IDs.Control.TABLE_BODY),
                    pager,
                ],
                className="p-2",
            ),
        ],
        className="mt-3",
    )
