from __future__ import annotations

import json
import logging
from pathlib import Path
from typing import Any, List, Optional

from tabview.config.model import GlobalConfig, TableConfig
from tabview.core.exceptions import ConfigError

logger = logging.getLogger(__name__)


def _read_json(path: Path) -> Any:
    try:
        with path.open() as f:
            return json.load(f)
    except json.JSONDecodeError as e:
        raise ConfigError(f"Invalid JSON in {path}: {e}") from e


def _resolve_data_root(root: Path, data_root_raw: Optional[str]) -> Optional[Path]:
    # Absolute paths are used as-is, relative ones are resolved against the config root
    if data_root_raw is None:
        return None
    data_root_path = Path(data_root_raw)
    if data_root_path.is_absolute():
        return data_root_path
    return (root / data_root_path).resolve()


def load_table_configs(tables_dir: Path, data_root: Optional[Path] = None) -> List[TableConfig]:
    """
    Parse every '*.json' file in tables_dir into a TableConfig.

    Files that fail to parse are skipped and logged; one broken table does not
    take the others down.
    """
    tables: List[TableConfig] = []
    if not tables_dir.is_dir():
        return tables

    seen: set[str] = set()
    for idx, config_file in enumerate(sorted(tables_dir.glob("*.json"))):
        try:
            raw = _read_json(config_file)
            table = TableConfig.from_raw(raw, source_path=config_file, index=idx, data_root=data_root)
        except ConfigError as e:
            logger.error(
                "Skipping table due to config error",
                extra={"path": str(config_file), "error": str(e)},
            )
            continue

        if table.name in seen:
            logger.error(
                "Skipping table with duplicate name",
                extra={"path": str(config_file), "table": table.name},
            )
            continue

        seen.add(table.name)
        tables.append(table)

    return tables


def load_global_config(root: Path | str) -> GlobalConfig:
    """
    Load configuration from a directory using the multi-file layout.

    Expected structure:

        root/
            global.json
            tables/
                inventory.json
                customers.json
                ...

    global.json keys:

    - ui_title: title for UI, defaults to 'Table Browser'
    - default_table: table shown first, defaults to the first configured table
    - data_root: directory that relative table 'source' paths are resolved
                 against, itself relative to root

    :param root: Directory containing 'global.json' and optionally 'tables/'.
    :return: A GlobalConfig instance.
    :raises FileNotFoundError: if global.json does not exist.
    :raises ConfigError: if global.json is not a valid JSON object.
    """
    root = Path(root)
    logger.info(
        "Loading global config",
        extra={"config_root": str(root)},
    )

    global_path = root / "global.json"
    if not global_path.is_file():
        raise FileNotFoundError(f"File not found at {global_path}")

    raw_global = _read_json(global_path)
    if not isinstance(raw_global, dict):
        raise ConfigError(f"{global_path} must contain a JSON object")

    data_root = _resolve_data_root(root, raw_global.get("data_root"))
    tables = load_table_configs(root / "tables", data_root=data_root if data_root is not None else root)

    default_table = raw_global.get("default_table")
    if default_table is None and tables:
        default_table = tables[0].name

    return GlobalConfig(
        ui_title=raw_global.get("ui_title", "Table Browser"),
        default_table=default_table,
        tables=tables,
        data_root=data_root,
    )
