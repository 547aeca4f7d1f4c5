"""Widgets module for the ktwins TUI.

This module provides the reusable widgets the dashboard is built from:
- panel_view: Bordered, scrollable text panel (PanelView)
- detail_overlay: Modal overlay for logs, describe and digests (DetailOverlay)
"""

from ktwins.widgets.detail_overlay import DetailOverlay
from ktwins.widgets.panel_view import PanelView

__all__ = [
    "DetailOverlay",
    "PanelView",
]
