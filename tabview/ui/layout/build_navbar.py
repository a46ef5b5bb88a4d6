from __future__ import annotations

from typing import List, Optional

import dash_bootstrap_components as dbc
from dash import dcc, html

from tabview.config.model import GlobalConfig, TableConfig
from tabview.ui.ids import IDs


def build_navbar(
    tables: List[TableConfig],
    global_config: GlobalConfig,
    default_table: Optional[TableConfig],
) -> dbc.Navbar:
    title = getattr(global_config, "ui_title", "Table Browser")

    if default_table is not None:
        default_name = default_table.name
    else:
        default_name = tables[0].name if tables else None

    table_options = [{"label": t.title, "value": t.name} for t in tables]

    return dbc.Navbar(
        dbc.Container(
            fluid=True,
            children=[
                html.H2(title, className="mb-0"),
                html.Div(
                    [
                        html.Div("Active Table", className="navbar-table-title"),
                        dcc.Dropdown(
                            id=IDs.Control.TABLE_SELECT,
                            options=table_options,
                            value=default_name,
                            clearable=False,
                            style={"minWidth": "240px"},
                        ),
                    ],
                    className="d-flex flex-column",
                ),
            ],
        ),
        color="light",
        className="mb-2",
    )
