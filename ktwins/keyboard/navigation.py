"""Screen-specific keyboard bindings.

This module contains:
1. Dashboard bindings (DASHBOARD_SCREEN_BINDINGS)
2. Overlay bindings (OVERLAY_BINDINGS)
3. The help text shown by the ``?`` key
"""

from textual.binding import Binding

from ktwins.constants.limits import NAMESPACE_HOTKEYS

# ============================================================================
# Dashboard Screen Bindings
# ============================================================================

# Arrows and enter take priority over the focused panel's scroll bindings.
DASHBOARD_SCREEN_BINDINGS: list[Binding] = [
    Binding("w", "set_page('workloads')", "Workloads"),
    Binding("n", "set_page('network')", "Network"),
    Binding("c", "set_page('cluster')", "Cluster"),
    Binding("m", "set_page('metrics')", "Metrics"),
    Binding("left", "switch_page(-1)", "Prev page", show=False, priority=True),
    Binding("right", "switch_page(1)", "Next page", show=False, priority=True),
    Binding("up", "move(-1)", "Up", show=False, priority=True),
    Binding("down", "move(1)", "Down", show=False, priority=True),
    Binding("enter", "activate", "Browse", priority=True),
    Binding("l", "logs", "Logs"),
    Binding("d", "describe", "Describe"),
    Binding("a", "alerts", "Alerts"),
    Binding("e", "events", "Events"),
    Binding("escape", "back", "Back", show=False),
    Binding("r", "refresh", "Refresh"),
    Binding("?", "show_help", "Help"),
    Binding("q", "app.quit", "Quit"),
    *(
        Binding(str(index), f"select_namespace({index})", "Namespace", show=False)
        for index in range(NAMESPACE_HOTKEYS)
    ),
]

# ============================================================================
# Overlay Bindings
# ============================================================================

OVERLAY_BINDINGS: list[Binding] = [
    Binding("escape", "close", "Close", priority=True),
]

# ============================================================================
# Help text
# ============================================================================

DASHBOARD_HELP_TEXT = (
    "w/n/c/m  pages   ←/→  cycle pages\n"
    "↑/↓  focus / select   enter  browse / logs\n"
    "l  logs   d  describe   a/e  alerts / events\n"
    "0-9  namespace   r  refresh   esc  back   q  quit"
)

__all__ = [
    "DASHBOARD_HELP_TEXT",
    "DASHBOARD_SCREEN_BINDINGS",
    "OVERLAY_BINDINGS",
]
