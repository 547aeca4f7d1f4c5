"""Scalar constants for the TUI.

All application-level constants with proper type hints using Final.
"""

from typing import Final

# ============================================================================
# Application
# ============================================================================

APP_TITLE: Final = "ktwins"

# ============================================================================
# Border colors (Textual color names)
# ============================================================================

COLOR_ACCENT: Final = "orange"
COLOR_BROWSE: Final = "green"
COLOR_MUTED: Final = "gray"
COLOR_PANEL: Final = "purple"
COLOR_NAMESPACES: Final = "white"
COLOR_OVERVIEW: Final = "lightskyblue"
COLOR_CALM: Final = "green"
COLOR_ALERTS_ACTIVE: Final = "yellow"
COLOR_EVENTS_ACTIVE: Final = "lightcyan"

# Rich style applied to the selected line while browsing
SELECTION_STYLE: Final = "black on yellow"

# Page indicator styles
INDICATOR_ACTIVE_STYLE: Final = "bold sky_blue1"
INDICATOR_IDLE_STYLE: Final = "bold orange1"

# ============================================================================
# Panel text
# ============================================================================

PLACEHOLDER_LOADING: Final = "Loading..."
PLACEHOLDER_LOGS: Final = "Loading logs..."
PLACEHOLDER_DESCRIBE: Final = "Loading describe..."
EMPTY_ALERTS: Final = "No alerts."
EMPTY_EVENTS: Final = "No events."
BROWSE_TITLE_SUFFIX: Final = "[L]ogs / [D]escribe"
OVERLAY_TITLE_SUFFIX: Final = "(Esc closes)"
ALL_NAMESPACES_LABEL: Final = "ALL"

# ============================================================================
# kubectl output tokens
# ============================================================================

TIMEOUT_MARKER: Final = "timeout"
NO_RESOURCES_FOUND: Final = "No resources found"
TABLE_HEADER_TOKEN: Final = "NAME"
ALERT_MARKER: Final = "⚠"

# Prefix for an overview count read from capped output
LOWER_BOUND_MARKER: Final = "≥"

__all__ = [
    "ALERT_MARKER",
    "ALL_NAMESPACES_LABEL",
    "APP_TITLE",
    "BROWSE_TITLE_SUFFIX",
    "COLOR_ACCENT",
    "COLOR_ALERTS_ACTIVE",
    "COLOR_BROWSE",
    "COLOR_CALM",
    "COLOR_EVENTS_ACTIVE",
    "COLOR_MUTED",
    "COLOR_NAMESPACES",
    "COLOR_OVERVIEW",
    "COLOR_PANEL",
    "EMPTY_ALERTS",
    "EMPTY_EVENTS",
    "INDICATOR_ACTIVE_STYLE",
    "INDICATOR_IDLE_STYLE",
    "LOWER_BOUND_MARKER",
    "NO_RESOURCES_FOUND",
    "OVERLAY_TITLE_SUFFIX",
    "PLACEHOLDER_DESCRIBE",
    "PLACEHOLDER_LOADING",
    "PLACEHOLDER_LOGS",
    "SELECTION_STYLE",
    "TABLE_HEADER_TOKEN",
    "TIMEOUT_MARKER",
]
