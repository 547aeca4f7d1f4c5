"""Mutable dashboard state and settings."""

from ktwins.models.state.app_settings import AppSettings, ConfigError, ConfigLoadError
from ktwins.models.state.config_manager import ConfigManager
from ktwins.models.state.dashboard_state import DashboardState
from ktwins.models.state.namespace_context import (
    NamespaceContext,
    display_namespace,
    is_all_namespaces,
)
from ktwins.models.state.overlay_state import OverlayState
from ktwins.models.state.selection import Selection

__all__ = [
    "AppSettings",
    "ConfigError",
    "ConfigLoadError",
    "ConfigManager",
    "DashboardState",
    "NamespaceContext",
    "OverlayState",
    "Selection",
    "display_namespace",
    "is_all_namespaces",
]
