from __future__ import annotations

from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, Dict, List, Optional, Tuple, Union

from tabview.core.exceptions import ConfigError
from tabview.core.paging import validate_active_page, validate_rows_on_page
from tabview.core.state import DEFAULT_ROWS_ON_PAGE, SORT_ORDERS, normalize_sort_by

DEFAULT_PAGE_SIZE_OPTIONS = [10, 25, 50, 100]


@dataclass(frozen=True)
class ColumnConfig:
    """
    One displayed column of a table.

    - label: header text
    - field: dotted path into each record ("address.city")
    - sortable: whether a sort toggle is rendered for this column
    """
    label: str
    field: str
    sortable: bool = True

    @classmethod
    def from_raw(cls, raw: Any) -> ColumnConfig:
        if isinstance(raw, str):
            return cls(label=raw, field=raw)
        if not isinstance(raw, dict) or "field" not in raw:
            raise ConfigError(f"Column entry must be a field name or an object with 'field': {raw!r}")
        return cls(
            label=str(raw.get("label", raw["field"])),
            field=str(raw["field"]),
            sortable=bool(raw.get("sortable", True)),
        )


@dataclass
class TableConfig:
    """
    Parsed config entry for a single table.
    """
    name: str
    title: str
    source: Optional[Path]
    columns: List[ColumnConfig] = field(default_factory=list)
    search_keys: Dict[str, List[str]] = field(default_factory=dict)

    # Initial view configuration
    sort_by: Union[str, Tuple[str, ...]] = ""
    sort_order: str = "asc"
    rows_on_page: int = DEFAULT_ROWS_ON_PAGE
    active_page: int = 1
    page_size_options: List[int] = field(default_factory=lambda: list(DEFAULT_PAGE_SIZE_OPTIONS))

    source_path: Optional[Path] = None

    @property
    def sort_fields(self) -> List[str]:
        return [c.field for c in self.columns if c.sortable]

    def engine_options(self) -> Dict[str, Any]:
        """Keyword arguments for ViewEngine, minus the dataset."""
        return {
            "sort_by": self.sort_by,
            "sort_order": self.sort_order,
            "rows_on_page": self.rows_on_page,
            "active_page": self.active_page,
        }

    @classmethod
    def from_raw(
        cls,
        raw: Dict[str, Any],
        source_path: Optional[Path] = None,
        index: int = 0,
        data_root: Optional[Path] = None,
    ) -> TableConfig:
        """
        Build a TableConfig from a decoded JSON object.

        Relative 'source' paths are resolved against data_root when given.

        :raises ConfigError: on a missing name or an invalid view option
        """
        if not isinstance(raw, dict):
            raise ConfigError(f"Table config must be a JSON object, got {type(raw).__name__}")

        name = raw.get("name") or f"table_{index}"

        source = raw.get("source")
        source_p: Optional[Path] = None
        if source:
            source_p = Path(source)
            if not source_p.is_absolute() and data_root is not None:
                source_p = (data_root / source_p).resolve()

        columns = [ColumnConfig.from_raw(c) for c in raw.get("columns", [])]

        search_keys_raw = raw.get("search_keys", {})
        if isinstance(search_keys_raw, list):
            search_keys = {str(k): [] for k in search_keys_raw}
        elif isinstance(search_keys_raw, dict):
            search_keys = {str(k): [str(s) for s in (v or [])] for k, v in search_keys_raw.items()}
        else:
            raise ConfigError(f"Table '{name}': search_keys must be a list or an object")

        sort_order = raw.get("sort_order", "asc")
        if sort_order not in SORT_ORDERS:
            raise ConfigError(f"Table '{name}': sort_order must be one of {list(SORT_ORDERS)}, got {sort_order!r}")

        try:
            rows_on_page = validate_rows_on_page(raw.get("rows_on_page", DEFAULT_ROWS_ON_PAGE))
            active_page = validate_active_page(raw.get("active_page", 1))
            page_size_options = [
                validate_rows_on_page(n)
                for n in raw.get("page_size_options", DEFAULT_PAGE_SIZE_OPTIONS)
            ]
        except ValueError as e:
            raise ConfigError(f"Table '{name}': {e}") from e

        if rows_on_page not in page_size_options:
            page_size_options = sorted([*page_size_options, rows_on_page])

        return cls(
            name=str(name),
            title=str(raw.get("title", name)),
            source=source_p,
            columns=columns,
            search_keys=search_keys,
            sort_by=normalize_sort_by(raw.get("sort_by", "")),
            sort_order=sort_order,
            rows_on_page=rows_on_page,
            active_page=active_page,
            page_size_options=page_size_options,
            source_path=source_path,
        )


@dataclass
class GlobalConfig:
    ui_title: str
    default_table: Optional[str]
    tables: List[TableConfig]
    data_root: Optional[Path] = None

    def table(self, name: str) -> TableConfig:
        for t in self.tables:
            if t.name == name:
                return t
        raise KeyError(f"Table '{name}' not configured")
