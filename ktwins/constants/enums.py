"""All enum definitions for the TUI.

This module consolidates all enumerations used throughout the application.
"""

from enum import Enum

# =============================================================================
# Dashboard structure
# =============================================================================


class PanelId(str, Enum):
    """Identity of every text panel on the dashboard."""

    NAMESPACES = "namespaces"
    OVERVIEW = "overview"
    ALERTS = "alerts"
    EVENTS = "events"
    WORKLOADS = "workloads"
    PODS = "pods"
    NETWORK = "network"
    INFRA = "infra"
    CONFIG = "config"
    STORAGE = "storage"
    METRICS = "metrics"


class PageId(str, Enum):
    """Tab-like groupings of panels; exactly one is active."""

    WORKLOADS = "workloads"
    NETWORK = "network"
    CLUSTER = "cluster"
    METRICS = "metrics"


class PanelKind(Enum):
    """Tag describing what a panel renders and how its rows are read."""

    SUMMARY = "summary"
    NAMESPACE_INDEX = "namespace_index"
    DIGEST = "digest"
    GROUPED_TABLE = "grouped_table"
    TABLE = "table"
    METRICS = "metrics"


# =============================================================================
# Actions
# =============================================================================


class DiagnosticMode(str, Enum):
    """Read-only kubectl actions available on a selected row."""

    LOGS = "logs"
    DESCRIBE = "describe"
