from __future__ import annotations

from typing import TYPE_CHECKING, List, Optional

import dash_bootstrap_components as dbc

from tabview.config.model import GlobalConfig, TableConfig
from tabview.ui.layout.build_navbar import build_navbar
from tabview.ui.layout.build_table_panel import build_table_panel

if TYPE_CHECKING:
    from tabview.ui.config import AppConfig


def build_layout(ctx: AppConfig):
    tables = ctx.global_config.tables
    default_table = _choose_default_table(tables, ctx.global_config)

    navbar = build_navbar(tables, ctx.global_config, default_table)

    if default_table is None:
        table_panel = dbc.Card(
            dbc.CardBody("No tables configured. Add a table config under 'tables/'."),
            className="mt-3",
        )
    else:
        table_panel = build_table_panel(default_table)

    return dbc.Container(
        fluid=True,
        className="tv-root",
        children=[
            navbar,
            table_panel,
        ],
    )


def _choose_default_table(tables: List[TableConfig], global_config: GlobalConfig) -> Optional[TableConfig]:
    if not tables:
        return None

    default_name = getattr(global_config, "default_table", None)
    if default_name:
        for t in tables:
            if t.name == default_name:
                return t

    return tables[0]
