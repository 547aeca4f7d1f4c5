"""Limit and threshold constants for the TUI.

All limit values, thresholds, and validation ranges.
"""

from typing import Final

# ============================================================================
# Command output limits
# ============================================================================

MAX_OUTPUT_BYTES: Final = 64 * 1024

# Cap for the `-o name` listings behind the overview counts
MAX_COUNT_OUTPUT_BYTES: Final = 4 * 1024 * 1024

# ============================================================================
# Display limits
# ============================================================================

MAX_POD_LINES: Final = 30
MAX_GROUP_LINES: Final = 20
MAX_EVENT_LINES: Final = 20
MAX_ALERTS: Final = 5

# Short upper-case tokens treated as group titles rather than rows
MAX_TITLE_TOKEN_LENGTH: Final = 8

# ============================================================================
# Layout limits
# ============================================================================

HEADER_HEIGHT: Final = 9
COLLAPSED_PANEL_HEIGHT: Final = 3
COLLAPSED_WORKLOAD_PANEL_HEIGHT: Final = 4

# ============================================================================
# Validation limits
# ============================================================================

REFRESH_INTERVAL_MIN: Final = 0.5
NAMESPACE_HOTKEYS: Final = 10

__all__ = [
    "COLLAPSED_PANEL_HEIGHT",
    "COLLAPSED_WORKLOAD_PANEL_HEIGHT",
    "HEADER_HEIGHT",
    "MAX_ALERTS",
    "MAX_COUNT_OUTPUT_BYTES",
    "MAX_EVENT_LINES",
    "MAX_GROUP_LINES",
    "MAX_OUTPUT_BYTES",
    "MAX_POD_LINES",
    "MAX_TITLE_TOKEN_LENGTH",
    "NAMESPACE_HOTKEYS",
    "REFRESH_INTERVAL_MIN",
]
