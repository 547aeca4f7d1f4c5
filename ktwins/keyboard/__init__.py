"""Keyboard bindings module.

This module provides all keyboard bindings for the ktwins TUI.
Bindings are organized into two categories:

- app: App-level bindings (APP_BINDINGS)
- navigation: Screen-specific bindings (*_BINDINGS)
"""

from ktwins.keyboard.app import APP_BINDINGS
from ktwins.keyboard.navigation import (
    DASHBOARD_HELP_TEXT,
    DASHBOARD_SCREEN_BINDINGS,
    OVERLAY_BINDINGS,
)

__all__ = [
    "APP_BINDINGS",
    "DASHBOARD_HELP_TEXT",
    # Screen-specific bindings
    "DASHBOARD_SCREEN_BINDINGS",
    "OVERLAY_BINDINGS",
]
