"""Application settings models."""

from pydantic import BaseModel, ConfigDict, Field

from ktwins.constants.defaults import (
    KUBECTL_BINARY_DEFAULT,
    LOG_LEVEL_DEFAULT,
    LOG_TAIL_LINES_DEFAULT,
    REFRESH_INTERVAL_DEFAULT,
)
from ktwins.constants.limits import (
    MAX_COUNT_OUTPUT_BYTES,
    MAX_EVENT_LINES,
    MAX_GROUP_LINES,
    MAX_OUTPUT_BYTES,
    MAX_POD_LINES,
    REFRESH_INTERVAL_MIN,
)
from ktwins.constants.timeouts import (
    CLUSTER_REQUEST_TIMEOUT,
    DIAGNOSTIC_COMMAND_TIMEOUT,
    KUBECTL_COMMAND_TIMEOUT,
    TOAST_TIMEOUT,
)


class AppSettings(BaseModel):
    """Application settings model with validation."""

    model_config = ConfigDict(populate_by_name=True, extra="ignore")

    # Refresh
    refresh_interval: float = Field(
        default=REFRESH_INTERVAL_DEFAULT, ge=REFRESH_INTERVAL_MIN
    )  # seconds

    # kubectl
    kubectl_binary: str = KUBECTL_BINARY_DEFAULT
    context: str = ""
    request_timeout: str = CLUSTER_REQUEST_TIMEOUT
    command_timeout: float = Field(default=KUBECTL_COMMAND_TIMEOUT, gt=0)
    diagnostic_timeout: float = Field(default=DIAGNOSTIC_COMMAND_TIMEOUT, gt=0)
    max_output_bytes: int = Field(default=MAX_OUTPUT_BYTES, gt=0)
    max_count_output_bytes: int = Field(default=MAX_COUNT_OUTPUT_BYTES, gt=0)
    log_tail_lines: int = Field(default=LOG_TAIL_LINES_DEFAULT, gt=0)

    # Display clamps
    max_pod_lines: int = Field(default=MAX_POD_LINES, gt=0)
    max_group_lines: int = Field(default=MAX_GROUP_LINES, gt=0)
    max_event_lines: int = Field(default=MAX_EVENT_LINES, gt=0)

    # UI
    toast_timeout: float = Field(default=TOAST_TIMEOUT, gt=0)

    # Logging
    log_level: str = LOG_LEVEL_DEFAULT
    log_file: str = ""


class ConfigError(Exception):
    """Base exception for configuration errors."""


class ConfigLoadError(ConfigError):
    """Raised when settings fail to load."""
