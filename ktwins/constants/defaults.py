"""Default values for settings.

All default values used in AppSettings model and validation fallback values.
"""

from typing import Final

# ============================================================================
# Refresh defaults
# ============================================================================

REFRESH_INTERVAL_DEFAULT: Final = 2.0

# ============================================================================
# kubectl defaults
# ============================================================================

KUBECTL_BINARY_DEFAULT: Final = "kubectl"
LOG_TAIL_LINES_DEFAULT: Final = 200

# ============================================================================
# Logging defaults
# ============================================================================

LOG_LEVEL_DEFAULT: Final = "WARNING"
CONFIG_ENV_VAR: Final = "KTWINS_CONFIG"
CONFIG_PATH_DEFAULT: Final = "~/.config/ktwins/config.yaml"

__all__ = [
    "CONFIG_ENV_VAR",
    "CONFIG_PATH_DEFAULT",
    "KUBECTL_BINARY_DEFAULT",
    "LOG_LEVEL_DEFAULT",
    "LOG_TAIL_LINES_DEFAULT",
    "REFRESH_INTERVAL_DEFAULT",
]
