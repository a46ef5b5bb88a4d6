from __future__ import annotations

import logging
from pathlib import Path
from typing import Any, Dict, Iterator, List, Mapping

import pandas as pd

from tabview.config.model import TableConfig
from tabview.core.exceptions import DataSourceError

logger = logging.getLogger(__name__)

Record = Dict[str, Any]


def _frame_to_records(df: pd.DataFrame) -> List[Record]:
    # NaN is how pandas spells "no value"; records use None
    df = df.astype(object).where(pd.notna(df), None)
    return df.to_dict("records")


def read_records(path: Path) -> List[Record]:
    """
    Read a list of records from a '.json' (array of objects) or '.csv' file.

    Values are kept as close to the file as possible: no dtype or date
    conversion, so "007" stays text and type inference happens at sort time.

    :raises DataSourceError: if the file is missing, unreadable or of an
        unsupported type
    """
    path = Path(path)
    if not path.is_file():
        raise DataSourceError(f"Record source not found: {path}")

    suffix = path.suffix.lower()
    try:
        if suffix == ".json":
            df = pd.read_json(path, orient="records", dtype=False, convert_dates=False)
        elif suffix == ".csv":
            df = pd.read_csv(path, dtype=str)
        else:
            raise DataSourceError(f"Unsupported record source type '{suffix}': {path}")
    except DataSourceError:
        raise
    except (ValueError, OSError) as e:
        raise DataSourceError(f"Could not read records from {path}: {e}") from e

    return _frame_to_records(df)


class RecordSourceManager(Mapping[str, List[Record]]):
    """
    Lazily loaded, cached records per configured table.

    Implements the Mapping interface so the UI layer can look records up by
    table name without caring whether they were read yet.
    """

    def __init__(self, tables: Mapping[str, TableConfig]):
        self._tables = dict(tables)
        self._loaded: Dict[str, List[Record]] = {}

    def __getitem__(self, name: str) -> List[Record]:
        if name in self._loaded:
            return self._loaded[name]

        cfg = self._tables.get(name)
        if cfg is None:
            raise KeyError(f"Unknown table '{name}'")

        if cfg.source is None:
            records: List[Record] = []
        else:
            logger.info("Loading records", extra={"table": name, "path": str(cfg.source)})
            try:
                records = read_records(cfg.source)
            except DataSourceError as e:
                logger.error("Record source error on load", extra={"table": name, "error": str(e)})
                raise

        self._loaded[name] = records
        return records

    def __iter__(self) -> Iterator[str]:
        return iter(self._tables)

    def __len__(self) -> int:
        return len(self._tables)

    def is_loaded(self, name: str) -> bool:
        return name in self._loaded

    def reset(self, name: str | None = None) -> None:
        """Drop cached records for one table, or for all tables."""
        if name is None:
            self._loaded.clear()
        else:
            self._loaded.pop(name, None)
