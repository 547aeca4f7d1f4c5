"""Action dispatcher - logs and describe for the selected resource."""

from __future__ import annotations

import asyncio
import logging

from ktwins.constants.enums import DiagnosticMode
from ktwins.constants.values import PLACEHOLDER_DESCRIBE, PLACEHOLDER_LOGS
from ktwins.controllers.base import ClusterDataSource
from ktwins.models.state.dashboard_state import DashboardState
from ktwins.models.state.namespace_context import is_all_namespaces
from ktwins.screens.dashboard.browse import BrowseController
from ktwins.screens.dashboard.overlays import OverlayStack
from ktwins.screens.dashboard.view import DashboardView

logger = logging.getLogger(__name__)


class ActionDispatcher:
    """Opens a loading overlay and fills it from a background fetch."""

    def __init__(
        self,
        state: DashboardState,
        view: DashboardView,
        overlays: OverlayStack,
        browse: BrowseController,
        data_source: ClusterDataSource,
    ) -> None:
        self._state = state
        self._view = view
        self._overlays = overlays
        self._browse = browse
        self._data_source = data_source

    def _effective_namespace(self, namespace: str) -> str:
        """Row namespace, else the active filter; ``""`` when that means all."""
        if namespace.strip():
            return namespace.strip()
        current = self._state.namespace.filter
        return "" if is_all_namespaces(current) else current.strip()

    def trigger_logs(self, name: str, namespace: str = "") -> int | None:
        """Open a log tail overlay for pod ``name``; no-op for an empty name."""
        if not name:
            return None
        token = self._overlays.open_overlay(f"LOGS {name}", PLACEHOLDER_LOGS, pending=True)
        self._dispatch(
            token, "pod", name, self._effective_namespace(namespace), DiagnosticMode.LOGS
        )
        return token

    def trigger_describe(self, kind: str, name: str, namespace: str = "") -> int | None:
        """Open a describe overlay; no-op unless both kind and name are known."""
        if not name or not kind:
            return None
        token = self._overlays.open_overlay(
            f"DESCRIBE {kind}/{name}", PLACEHOLDER_DESCRIBE, pending=True
        )
        self._dispatch(
            token,
            kind,
            name,
            self._effective_namespace(namespace),
            DiagnosticMode.DESCRIBE,
        )
        return token

    def logs_selected(self) -> int | None:
        """Logs for the selected row, when the browsed panel offers them."""
        selection = self._state.selection
        if selection is None:
            return None
        if not self._state.panel(selection.panel_id).spec.supports_logs:
            return None
        resource = self._browse.selected_resource()
        if resource is None:
            return None
        return self.trigger_logs(resource.name, resource.namespace)

    def describe_selected(self) -> int | None:
        """Describe the selected row when its kind resolves."""
        resource = self._browse.selected_resource()
        if resource is None or not resource.kind:
            return None
        return self.trigger_describe(resource.kind, resource.name, resource.namespace)

    def _dispatch(
        self,
        token: int,
        kind: str,
        name: str,
        namespace: str,
        mode: DiagnosticMode,
    ) -> None:
        self._view.run_background(
            self._fetch(token, kind, name, namespace, mode),
            name=f"{mode.value}-{name}",
        )

    async def _fetch(
        self,
        token: int,
        kind: str,
        name: str,
        namespace: str,
        mode: DiagnosticMode,
    ) -> None:
        try:
            body = await asyncio.to_thread(
                self._data_source.run_diagnostic_command, kind, name, namespace, mode
            )
        except Exception as exc:
            logger.exception("%s %s/%s failed", mode.value, kind, name)
            body = f"error: {exc}"
        self._overlays.update_body(token, body)
