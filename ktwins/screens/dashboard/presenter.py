"""Dashboard presenter - owns dashboard state and wires the controllers together."""

from __future__ import annotations

import asyncio
import logging
import time
from collections.abc import Callable
from typing import Any, TypeVar

from ktwins.constants.enums import PageId, PanelId
from ktwins.constants.timeouts import TOAST_TIMEOUT
from ktwins.controllers.base import ClusterDataSource
from ktwins.models.core.snapshot import RefreshSnapshot
from ktwins.models.state.dashboard_state import DashboardState
from ktwins.models.state.namespace_context import display_namespace
from ktwins.screens.dashboard.actions import ActionDispatcher
from ktwins.screens.dashboard.browse import BrowseController, render_panel_text
from ktwins.screens.dashboard.config import (
    DEFAULT_PAGE,
    PAGES,
    PANEL_SPECS,
    SEMANTIC_BORDERS,
)
from ktwins.screens.dashboard.navigation import NavigationController
from ktwins.screens.dashboard.overlays import OverlayStack
from ktwins.screens.dashboard.refresh import RefreshScheduler
from ktwins.screens.dashboard.view import DashboardView

logger = logging.getLogger(__name__)

T = TypeVar("T")

_GROUPED_PANELS = (
    PanelId.WORKLOADS,
    PanelId.NETWORK,
    PanelId.INFRA,
    PanelId.CONFIG,
    PanelId.STORAGE,
)


class DashboardPresenter:
    """Presenter for DashboardScreen - refresh cycles, navigation and actions.

    Every public method runs on the UI event loop. Background work (data
    collection, diagnostics) only returns values that these methods apply.
    """

    def __init__(
        self,
        view: DashboardView,
        data_source: ClusterDataSource,
        *,
        namespace: str = "",
        toast_timeout: float = TOAST_TIMEOUT,
    ) -> None:
        self._view = view
        self._data_source = data_source
        self.state = DashboardState.from_specs(
            PANEL_SPECS.values(), page=DEFAULT_PAGE, namespace_filter=namespace
        )
        self.browse = BrowseController(self.state, view)
        self.navigation = NavigationController(self.state, view, self.browse)
        self.overlays = OverlayStack(self.state, view, toast_timeout=toast_timeout)
        self.actions = ActionDispatcher(
            self.state, view, self.overlays, self.browse, data_source
        )
        self.scheduler: RefreshScheduler[RefreshSnapshot] = RefreshScheduler(
            self.collect, self.commit
        )

    # =========================================================================
    # Lifecycle
    # =========================================================================

    def start(self) -> None:
        """Render the initial page and request the first refresh."""
        for panel in self.state.panels.values():
            self._view.set_panel_title(panel.panel_id, panel.title)
            self._view.show_panel_text(
                panel.panel_id, render_panel_text(panel.panel_id, panel.text)
            )
        self.navigation.set_page(self.state.current_page)
        self.scheduler.request_refresh()

    def request_refresh(self) -> None:
        self.scheduler.request_refresh()

    # =========================================================================
    # Refresh
    # =========================================================================

    async def _guarded(
        self,
        label: str,
        fetch: Callable[..., T],
        *args: Any,
        default: T,
    ) -> T:
        try:
            return await asyncio.to_thread(fetch, *args)
        except Exception:
            logger.warning("Fetching %s failed", label, exc_info=True)
            return default

    async def collect(self) -> RefreshSnapshot:
        """Fetch every panel concurrently for the current namespace filter."""
        namespace_filter = self.state.namespace.filter
        source = self._data_source
        started = time.monotonic()

        singles: dict[PanelId, Callable[[str], str]] = {
            PanelId.OVERVIEW: source.fetch_summary_counts,
            PanelId.ALERTS: source.fetch_alerts,
            PanelId.EVENTS: source.fetch_events,
            PanelId.PODS: source.fetch_pods,
            PanelId.METRICS: source.fetch_metrics,
        }
        panel_ids = [*singles, *_GROUPED_PANELS]
        fetches = [
            self._guarded(panel_id.value, fetch, namespace_filter, default="")
            for panel_id, fetch in singles.items()
        ]
        fetches.extend(
            self._guarded(
                panel_id.value,
                source.fetch_grouped_resource_text,
                namespace_filter,
                PANEL_SPECS[panel_id].groups,
                default="",
            )
            for panel_id in _GROUPED_PANELS
        )
        namespace_fetch = self._guarded(
            "namespaces", source.fetch_namespace_list, default=("", [""])
        )

        *texts, (namespace_text, namespace_names) = await asyncio.gather(
            *fetches, namespace_fetch
        )
        snapshot = RefreshSnapshot(
            namespace_filter=namespace_filter,
            texts=dict(zip(panel_ids, texts)),
            namespace_names=namespace_names,
            duration_ms=(time.monotonic() - started) * 1000,
        )
        snapshot.texts[PanelId.NAMESPACES] = namespace_text
        return snapshot

    def commit(self, snapshot: RefreshSnapshot) -> None:
        """Apply a snapshot to every panel in one batched view update.

        A snapshot collected for a namespace filter that has since changed is
        dropped and a fresh cycle is requested instead.
        """
        state = self.state
        if snapshot.namespace_filter != state.namespace.filter:
            logger.debug(
                "Dropping refresh for namespace %s, filter is now %s",
                display_namespace(snapshot.namespace_filter),
                display_namespace(state.namespace.filter),
            )
            self.scheduler.request_refresh()
            return
        with self._view.batch_update():
            for panel_id, panel in state.panels.items():
                panel.text = snapshot.text_for(panel_id)
            state.namespace.replace_names(snapshot.namespace_names)

            for panel_id, (calm, active) in SEMANTIC_BORDERS.items():
                panel = state.panel(panel_id)
                panel.border = active if panel.has_content else calm

            browsed = state.selection.panel_id if state.selection else None
            for panel_id, panel in state.panels.items():
                if panel_id != browsed:
                    self._view.show_panel_text(
                        panel_id, render_panel_text(panel_id, panel.text)
                    )
            if browsed is not None and not self.browse.highlight():
                logger.debug("No selectable rows left in %s", browsed.value)
                self.browse.exit_browse()

            for page in PAGES:
                for slot in page.slots:
                    panel = state.panel(slot.panel_id)
                    self._view.set_panel_collapsed(
                        slot.panel_id,
                        not panel.has_content,
                        height=panel.spec.collapsed_height,
                        weight=slot.weight,
                    )

            self.navigation.ensure_focus()
            self.navigation.highlight_focus()
        logger.debug(
            "Committed refresh for namespace %s (%.0fms)",
            display_namespace(snapshot.namespace_filter),
            snapshot.duration_ms,
        )

    # =========================================================================
    # Input handling
    # =========================================================================

    def set_page(self, page_id: PageId) -> None:
        self.navigation.set_page(page_id)

    def switch_page(self, delta: int) -> None:
        self.navigation.switch_page(delta)

    def move(self, delta: int) -> None:
        """Up/down: move the selection while browsing, else move focus."""
        if self.state.browsing:
            self.browse.adjust_selection(delta)
        else:
            self.navigation.move_focus(delta)

    def activate(self) -> None:
        """Enter: open logs while browsing, else browse the focused panel."""
        if self.state.browsing:
            self.actions.logs_selected()
        else:
            self.browse.enter_browse(self.state.focused)

    def open_logs(self) -> None:
        self.actions.logs_selected()

    def open_describe(self) -> None:
        if self.state.browsing:
            self.actions.describe_selected()

    def show_digest(self, panel_id: PanelId) -> None:
        self.overlays.open_digest(panel_id)

    def select_namespace(self, index: int) -> None:
        """Quick-select ``names[index]``; out-of-range indexes do nothing."""
        previous = self.state.namespace.filter
        if not self.state.namespace.select(index):
            return
        current = self.state.namespace.filter
        logger.info(
            "Namespace filter %s -> %s",
            display_namespace(previous),
            display_namespace(current),
        )
        self.overlays.show_toast(
            f"Namespace: {display_namespace(previous)} -> {display_namespace(current)}"
        )
        self.browse.exit_browse()
        self.scheduler.request_refresh()

    def back(self) -> None:
        """Escape: close the top overlay, else leave browse mode."""
        if self.overlays.is_open:
            self.overlays.close_overlay()
        elif self.state.browsing:
            self.browse.exit_browse()

    def close_overlay(self) -> None:
        self.overlays.close_overlay()

    def on_panel_focused(self, panel_id: PanelId) -> None:
        self.navigation.sync_focus(panel_id)
