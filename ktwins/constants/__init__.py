"""Constants module for ktwins.

Centralized constants organized by domain:
- enums.py: All Enum class definitions
- values.py: Scalar constants (strings, colors with Final)
- timeouts.py: Timeout values (seconds)
- limits.py: Limit values (max/min)
- defaults.py: Default values for settings
- resources.py: Resource group tables

Note: Keyboard bindings are defined in ktwins.keyboard module.
"""

from ktwins.constants.defaults import (
    KUBECTL_BINARY_DEFAULT,
    LOG_TAIL_LINES_DEFAULT,
    REFRESH_INTERVAL_DEFAULT,
)
from ktwins.constants.enums import (
    DiagnosticMode,
    PageId,
    PanelId,
    PanelKind,
)
from ktwins.constants.limits import (
    MAX_ALERTS,
    MAX_EVENT_LINES,
    MAX_GROUP_LINES,
    MAX_OUTPUT_BYTES,
    MAX_POD_LINES,
)
from ktwins.constants.timeouts import (
    CLUSTER_REQUEST_TIMEOUT,
    DIAGNOSTIC_COMMAND_TIMEOUT,
    KUBECTL_COMMAND_TIMEOUT,
    TOAST_TIMEOUT,
)
from ktwins.constants.values import (
    APP_TITLE,
    TIMEOUT_MARKER,
)

__all__ = [
    # Application
    "APP_TITLE",
    # Timeouts
    "CLUSTER_REQUEST_TIMEOUT",
    "DIAGNOSTIC_COMMAND_TIMEOUT",
    "KUBECTL_BINARY_DEFAULT",
    "KUBECTL_COMMAND_TIMEOUT",
    "LOG_TAIL_LINES_DEFAULT",
    # Limits
    "MAX_ALERTS",
    "MAX_EVENT_LINES",
    "MAX_GROUP_LINES",
    "MAX_OUTPUT_BYTES",
    "MAX_POD_LINES",
    "REFRESH_INTERVAL_DEFAULT",
    "TIMEOUT_MARKER",
    "TOAST_TIMEOUT",
    # Enums
    "DiagnosticMode",
    "PageId",
    "PanelId",
    "PanelKind",
]
