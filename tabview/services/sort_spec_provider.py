from __future__ import annotations

from typing import Dict, List, Mapping, Sequence, Union

from tabview.config.model import ColumnConfig, TableConfig


class SortSpecProvider:
    """
    Supplies the sortable field paths per table.

    Controls ask the provider which columns get a sort toggle, and the UI
    layer checks incoming sort requests against it before forwarding them to
    the engine.
    """

    def __init__(self, tables: Sequence[TableConfig]):
        self._tables: Dict[str, TableConfig] = {t.name: t for t in tables}

    def _table(self, table: str) -> TableConfig:
        try:
            return self._tables[table]
        except KeyError:
            raise KeyError(f"Table '{table}' not found")

    def headers(self, table: str) -> List[ColumnConfig]:
        return list(self._table(table).columns)

    def sort_fields(self, table: str) -> List[str]:
        return self._table(table).sort_fields

    def is_valid(self, table: str, sort_by: Union[str, Sequence[str]]) -> bool:
        """True if every path in sort_by is a sortable column of the table."""
        fields = set(self.sort_fields(table))
        paths = [sort_by] if isinstance(sort_by, str) else list(sort_by)
        return bool(paths) and all(p in fields for p in paths)

    def as_mapping(self) -> Mapping[str, List[str]]:
        return {name: t.sort_fields for name, t in self._tables.items()}
