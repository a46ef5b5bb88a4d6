from __future__ import annotations

import logging
from typing import Dict, Iterator, Mapping

from tabview.config.model import TableConfig
from tabview.core.view_engine import ViewEngine
from tabview.services.record_source import RecordSourceManager
from tabview.services.search_filter import filter_records

logger = logging.getLogger(__name__)


class EngineManager(Mapping[str, ViewEngine]):
    """
    One ViewEngine per configured table, built on first access.

    Records flow: RecordSourceManager -> search filter -> ViewEngine.
    The engine only ever sees the filtered list; a new search or a refresh
    hands it a new list through set_dataset().
    """

    def __init__(self, tables: Mapping[str, TableConfig], records: RecordSourceManager):
        self._tables = dict(tables)
        self._records = records
        self._engines: Dict[str, ViewEngine] = {}
        self._search_text: Dict[str, str] = {}

    def __getitem__(self, name: str) -> ViewEngine:
        if name in self._engines:
            return self._engines[name]

        cfg = self._tables.get(name)
        if cfg is None:
            raise KeyError(f"Unknown table '{name}'")

        logger.info("Building view engine", extra={"table": name})
        engine = ViewEngine(dataset=self._filtered(name), **cfg.engine_options())
        self._engines[name] = engine
        return engine

    def __iter__(self) -> Iterator[str]:
        return iter(self._tables)

    def __len__(self) -> int:
        return len(self._tables)

    def _filtered(self, name: str):
        cfg = self._tables[name]
        return filter_records(self._records[name], self._search_text.get(name, ""), cfg.search_keys)

    def search_text(self, name: str) -> str:
        return self._search_text.get(name, "")

    def search(self, name: str, text: str | None) -> ViewEngine:
        """Apply a new search text to a table and feed the result to its engine."""
        engine = self[name]
        text = text or ""
        if text == self._search_text.get(name, ""):
            return engine
        self._search_text[name] = text
        engine.set_dataset(self._filtered(name))
        return engine

    def refresh(self, name: str) -> ViewEngine:
        """Re-read a table's records from its source, keeping the search text."""
        engine = self[name]
        self._records.reset(name)
        engine.set_dataset(self._filtered(name))
        return engine
