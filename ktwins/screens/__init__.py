"""ktwins TUI Screens.

This package contains all screen modules for the TUI application.

Domain Structure:
    - dashboard/ - The single dashboard screen, its presenter and controllers

Note: Keybindings are in the keyboard/ package:
    - ktwins.keyboard.DASHBOARD_SCREEN_BINDINGS - Dashboard keybindings

Example Usage:
    from ktwins.screens import DashboardScreen
"""

from __future__ import annotations

from ktwins.screens.dashboard import DashboardPresenter, DashboardScreen

__all__ = [
    "DashboardPresenter",
    "DashboardScreen",
]
