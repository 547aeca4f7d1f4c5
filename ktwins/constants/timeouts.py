"""Timeout constants for the TUI.

All timeout and interval values for kubectl requests and transient UI elements.
"""

from typing import Final

# ============================================================================
# API/Cluster timeouts (string format for kubectl)
# ============================================================================

CLUSTER_REQUEST_TIMEOUT: Final = "1s"

# Process-level command timeouts (must be greater than request timeout)
KUBECTL_COMMAND_TIMEOUT: Final = 1.2
DIAGNOSTIC_COMMAND_TIMEOUT: Final = 5.0

# ============================================================================
# UI timeouts (float, in seconds)
# ============================================================================

TOAST_TIMEOUT: Final = 1.5
HELP_TOAST_TIMEOUT: Final = 10.0

__all__ = [
    "CLUSTER_REQUEST_TIMEOUT",
    "DIAGNOSTIC_COMMAND_TIMEOUT",
    "HELP_TOAST_TIMEOUT",
    "KUBECTL_COMMAND_TIMEOUT",
    "TOAST_TIMEOUT",
]
