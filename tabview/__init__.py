"""
Top-level package for the tabular view browser.

This package exposes the view engine (core), its configuration layer,
the data services and the Dash UI adapters.
Most code should import from submodules such as:
    tabview.core
    tabview.services
    tabview.ui
"""

__all__: list[str] = []
