"""
UI adapters for the table browser.

Currently provides a Dash-based web UI via create_dash_app(), plus the
SortToggle control that any UI can bind to a ViewEngine.
"""

from .dash_app import create_dash_app
from .sort_toggle import SortToggle

__all__ = ["create_dash_app", "SortToggle"]
