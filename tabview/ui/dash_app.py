from __future__ import annotations

import logging
from pathlib import Path

import dash_bootstrap_components as dbc
from dash import Dash

from .config import AppConfig
from tabview.config.loader import load_global_config
from tabview.services.engine_service import EngineManager
from tabview.services.record_source import RecordSourceManager
from tabview.services.sort_spec_provider import SortSpecProvider
from tabview.ui.layout.build_layout import build_layout
from tabview.ui.callbacks.callbacks_table import register_table_callbacks

logger = logging.getLogger(__name__)


def build_app_config(config_root: Path | str = Path("config")) -> AppConfig:
    config_root = Path(config_root)

    # 1) Load Config
    global_config = load_global_config(config_root)
    if not global_config.tables:
        raise RuntimeError("No table configs were loaded from config")

    table_by_name = {t.name: t for t in global_config.tables}

    # 2) Initialize Service Layer
    records = RecordSourceManager(table_by_name)
    engines = EngineManager(table_by_name, records)
    sort_specs = SortSpecProvider(global_config.tables)

    ctx = AppConfig(
        config_root=config_root,
        global_config=global_config,
        table_by_name=table_by_name,
        records=records,
        engines=engines,
        sort_specs=sort_specs,
    )
    ctx.validate()
    return ctx


def create_dash_app(config_root: Path | str = Path("config")) -> Dash:
    ctx = build_app_config(config_root)

    app = Dash(
        __name__,
        external_stylesheets=[dbc.themes.FLATLY],
    )
    app.title = getattr(ctx.global_config, "ui_title", "Table Browser")

    app.layout = build_layout(ctx)

    # Register callbacks
    register_table_callbacks(app, ctx)

    logger.info(
        "Dash app created",
        extra={"config_root": str(ctx.config_root), "tables": sorted(ctx.table_by_name)},
    )
    return app
