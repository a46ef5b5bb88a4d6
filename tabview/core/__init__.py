"""
Core domain layer: field access, type-aware comparison, page arithmetic,
change detection, change streams and the view engine that ties them together
"""

from .events import PageEvent, SortEvent
from .exceptions import InvalidConfiguration
from .state import PageSpec, SortSpec
from .view_engine import ViewEngine

__all__ = ["ViewEngine", "SortEvent", "PageEvent", "SortSpec", "PageSpec", "InvalidConfiguration"]
