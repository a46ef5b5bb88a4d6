"""
Config package for tabview.

Responsible for:
- config models (GlobalConfig, TableConfig, ColumnConfig)
- config I/O helpers (load_global_config / load_table_configs)
"""

from .model import ColumnConfig, GlobalConfig, TableConfig
from .loader import load_global_config, load_table_configs

__all__ = ["ColumnConfig", "GlobalConfig", "TableConfig", "load_global_config", "load_table_configs"]
