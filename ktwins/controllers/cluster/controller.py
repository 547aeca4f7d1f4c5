"""Cluster controller for kubectl-backed dashboard data.

Each fetch maps onto one or a few ``kubectl get`` calls through the bounded
``CommandRunner`` and returns text ready for a panel.
"""

from __future__ import annotations

import logging
from collections import Counter

from ktwins.constants.defaults import LOG_TAIL_LINES_DEFAULT
from ktwins.constants.enums import DiagnosticMode
from ktwins.constants.limits import (
    MAX_ALERTS,
    MAX_COUNT_OUTPUT_BYTES,
    MAX_EVENT_LINES,
    MAX_GROUP_LINES,
    MAX_POD_LINES,
)
from ktwins.constants.resources import CLUSTER_COUNT_KINDS, NAMESPACED_COUNT_KINDS
from ktwins.constants.timeouts import DIAGNOSTIC_COMMAND_TIMEOUT
from ktwins.controllers.base import ClusterDataSource
from ktwins.controllers.cluster.command_runner import CommandRunner, namespace_selector
from ktwins.controllers.cluster.parsers import KubectlOutputParser, clamp_lines
from ktwins.models.core.resource_group import ResourceGroup
from ktwins.models.state.app_settings import AppSettings
from ktwins.models.state.namespace_context import is_all_namespaces

logger = logging.getLogger(__name__)


class ClusterController(ClusterDataSource):
    """kubectl implementation of the dashboard data source."""

    def __init__(
        self,
        runner: CommandRunner | None = None,
        *,
        max_pod_lines: int = MAX_POD_LINES,
        max_group_lines: int = MAX_GROUP_LINES,
        max_event_lines: int = MAX_EVENT_LINES,
        log_tail_lines: int = LOG_TAIL_LINES_DEFAULT,
        diagnostic_timeout: float = DIAGNOSTIC_COMMAND_TIMEOUT,
        max_count_output_bytes: int = MAX_COUNT_OUTPUT_BYTES,
    ) -> None:
        self.runner = runner or CommandRunner()
        self.parser = KubectlOutputParser()
        self.max_pod_lines = max_pod_lines
        self.max_group_lines = max_group_lines
        self.max_event_lines = max_event_lines
        self.log_tail_lines = log_tail_lines
        self.diagnostic_timeout = diagnostic_timeout
        self.max_count_output_bytes = max_count_output_bytes

    @classmethod
    def from_settings(cls, settings: AppSettings) -> ClusterController:
        """Build a controller and its runner from application settings."""
        runner = CommandRunner(
            binary=settings.kubectl_binary,
            context=settings.context or None,
            request_timeout=settings.request_timeout,
            timeout=settings.command_timeout,
            max_output_bytes=settings.max_output_bytes,
        )
        return cls(
            runner,
            max_pod_lines=settings.max_pod_lines,
            max_group_lines=settings.max_group_lines,
            max_event_lines=settings.max_event_lines,
            log_tail_lines=settings.log_tail_lines,
            diagnostic_timeout=settings.diagnostic_timeout,
            max_count_output_bytes=settings.max_count_output_bytes,
        )

    # ------------------------------------------------------------------
    # Header panels
    # ------------------------------------------------------------------

    def _count_names(self, args: list[str]) -> tuple[Counter[str], bool]:
        """Count an ``-o name`` listing; the flag is True when output was capped."""
        result = self.runner.run(args, max_output_bytes=self.max_count_output_bytes)
        if result.truncated:
            logger.warning(
                "Count output capped at %d bytes, counts are lower bounds: %s",
                self.max_count_output_bytes,
                " ".join(args),
            )
        return self.parser.count_names(result.text), result.truncated

    def fetch_summary_counts(self, namespace_filter: str) -> str:
        namespaced, namespaced_capped = self._count_names(
            [
                "get",
                ",".join(NAMESPACED_COUNT_KINDS),
                *namespace_selector(namespace_filter),
                "-o",
                "name",
            ]
        )
        cluster, cluster_capped = self._count_names(
            ["get", ",".join(CLUSTER_COUNT_KINDS), "-o", "name"]
        )
        lower_bounds: set[str] = set()
        if namespaced_capped:
            lower_bounds.update(NAMESPACED_COUNT_KINDS)
        if cluster_capped:
            lower_bounds.update(CLUSTER_COUNT_KINDS)
        return self.parser.render_summary(
            namespace_filter, namespaced + cluster, lower_bounds=lower_bounds
        )

    def fetch_namespace_list(self) -> tuple[str, list[str]]:
        result = self.runner.run(["get", "ns", "--no-headers"])
        if result.timed_out or result.returncode not in (0, None):
            logger.warning("Namespace list unavailable: %s", result.text.strip())
            return self.parser.parse_namespaces("")
        return self.parser.parse_namespaces(result.output)

    def fetch_alerts(self, namespace_filter: str) -> str:
        output = self.runner.run_text(
            ["get", "pods", "--no-headers", *namespace_selector(namespace_filter)]
        )
        return self.parser.parse_alerts(
            output,
            all_namespaces=is_all_namespaces(namespace_filter),
            limit=MAX_ALERTS,
        )

    def fetch_events(self, namespace_filter: str) -> str:
        output = self.runner.run_text(
            [
                "get",
                "events",
                "--sort-by=.metadata.creationTimestamp",
                *namespace_selector(namespace_filter),
            ]
        )
        return self.parser.parse_events(output, self.max_event_lines)

    # ------------------------------------------------------------------
    # Page panels
    # ------------------------------------------------------------------

    def _fetch_listing(self, namespace_filter: str, group: ResourceGroup) -> str:
        args = ["get", group.kind]
        if group.namespaced:
            args.extend(namespace_selector(namespace_filter))
        output = self.runner.run_text(args)
        if self.parser.is_empty_listing(output):
            return ""
        max_lines = group.max_lines
        if max_lines is not None:
            max_lines = min(max_lines, self.max_group_lines)
        return clamp_lines(output.strip(), max_lines)

    def fetch_grouped_resource_text(
        self,
        namespace_filter: str,
        groups: tuple[ResourceGroup, ...],
    ) -> str:
        return self.parser.render_groups(
            (group.title, self._fetch_listing(namespace_filter, group))
            for group in groups
        )

    def fetch_pods(self, namespace_filter: str) -> str:
        output = self.runner.run_text(
            ["get", "pods", *namespace_selector(namespace_filter)]
        )
        if self.parser.is_empty_listing(output):
            return ""
        return clamp_lines(output, self.max_pod_lines)

    def fetch_metrics(self, namespace_filter: str) -> str:
        output = self.runner.run_text(
            ["top", "pods", *namespace_selector(namespace_filter)]
        )
        return self.parser.parse_metrics(output)

    # ------------------------------------------------------------------
    # Diagnostics
    # ------------------------------------------------------------------

    def build_diagnostic_args(
        self,
        kind: str,
        name: str,
        namespace: str,
        mode: DiagnosticMode,
    ) -> list[str]:
        """kubectl arguments for a logs or describe request."""
        selector = namespace_selector(namespace, allow_all=False)
        if mode == DiagnosticMode.LOGS:
            return ["logs", name, f"--tail={self.log_tail_lines}", *selector]
        return ["describe", kind, name, *selector]

    def run_diagnostic_command(
        self,
        kind: str,
        name: str,
        namespace: str,
        mode: DiagnosticMode,
    ) -> str:
        args = self.build_diagnostic_args(kind, name, namespace, mode)
        logger.info("Running diagnostic: kubectl %s", " ".join(args))
        return self.runner.run_text(args, timeout=self.diagnostic_timeout)
