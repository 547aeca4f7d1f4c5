"""Base data-source contract for the dashboard.

The dashboard consumes cluster data only through this interface. Every method
is synchronous, best-effort and bounded in time by the implementation; the
refresh scheduler runs them in worker threads and never retries them.
"""

from __future__ import annotations

import logging
from abc import ABC, abstractmethod

from ktwins.constants.enums import DiagnosticMode
from ktwins.models.core.resource_group import ResourceGroup

logger = logging.getLogger(__name__)


class ClusterDataSource(ABC):
    """Producer of preformatted panel text.

    Implementations return ``""`` for "nothing to show" and put failure
    markers (such as ``timeout``) in the returned text instead of raising.
    """

    @abstractmethod
    def fetch_summary_counts(self, namespace_filter: str) -> str:
        """Overview text with per-kind resource counts."""
        ...

    @abstractmethod
    def fetch_grouped_resource_text(
        self,
        namespace_filter: str,
        groups: tuple[ResourceGroup, ...],
    ) -> str:
        """Listings for ``groups`` rendered under their titles, in order."""
        ...

    @abstractmethod
    def fetch_namespace_list(self) -> tuple[str, list[str]]:
        """Rendered namespace index and the ordered names (index 0 is ``""``)."""
        ...

    @abstractmethod
    def fetch_pods(self, namespace_filter: str) -> str:
        """Pod table."""
        ...

    @abstractmethod
    def fetch_alerts(self, namespace_filter: str) -> str:
        """Pods in failing phases, one per line."""
        ...

    @abstractmethod
    def fetch_events(self, namespace_filter: str) -> str:
        """Most recent events."""
        ...

    @abstractmethod
    def fetch_metrics(self, namespace_filter: str) -> str:
        """Pod metrics; ``""`` whenever metrics are unavailable."""
        ...

    @abstractmethod
    def run_diagnostic_command(
        self,
        kind: str,
        name: str,
        namespace: str,
        mode: DiagnosticMode,
    ) -> str:
        """Logs or describe output for one resource."""
        ...
