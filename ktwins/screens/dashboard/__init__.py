"""Dashboard screen module exports."""

from ktwins.screens.dashboard.config import (
    DEFAULT_PAGE,
    PAGES,
    PAGES_BY_ID,
    PANEL_SPECS,
)
from ktwins.screens.dashboard.dashboard_screen import DashboardScreen
from ktwins.screens.dashboard.presenter import DashboardPresenter
from ktwins.screens.dashboard.refresh import RefreshScheduler
from ktwins.screens.dashboard.view import DashboardView

__all__ = [
    "DEFAULT_PAGE",
    "PAGES",
    "PAGES_BY_ID",
    "PANEL_SPECS",
    "DashboardPresenter",
    "DashboardScreen",
    "DashboardView",
    "RefreshScheduler",
]
