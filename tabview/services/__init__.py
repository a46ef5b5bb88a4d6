"""
Service layer: record loading, search filtering, sortable-field lookup and
the per-table engine registry used by the UI.
"""

from .engine_service import EngineManager
from .record_source import RecordSourceManager, read_records
from .search_filter import filter_records
from .sort_spec_provider import SortSpecProvider

__all__ = ["EngineManager", "RecordSourceManager", "SortSpecProvider", "filter_records", "read_records"]
