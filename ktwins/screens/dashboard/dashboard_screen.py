"""Dashboard screen - header panels, paged resource panels and page indicator."""

from __future__ import annotations

import logging
from collections.abc import Coroutine
from contextlib import AbstractContextManager
from typing import Any

from rich.text import Text
from textual import events
from textual.app import ComposeResult
from textual.containers import Horizontal, Vertical
from textual.screen import Screen
from textual.widgets import ContentSwitcher, Static

from ktwins.constants.enums import PageId, PanelId
from ktwins.constants.limits import HEADER_HEIGHT
from ktwins.constants.timeouts import HELP_TOAST_TIMEOUT
from ktwins.controllers.base import ClusterDataSource
from ktwins.keyboard import DASHBOARD_HELP_TEXT, DASHBOARD_SCREEN_BINDINGS
from ktwins.models.state.app_settings import AppSettings
from ktwins.screens.dashboard.config import (
    DEFAULT_PAGE,
    HEADER_WEIGHTS,
    ID_HEADER,
    ID_HEADER_DIGESTS,
    ID_PAGE_INDICATOR,
    ID_PAGES,
    PAGES,
    PANEL_SPECS,
    page_widget_id,
    panel_widget_id,
)
from ktwins.screens.dashboard.presenter import DashboardPresenter
from ktwins.widgets import DetailOverlay, PanelView

logger = logging.getLogger(__name__)


class DashboardScreen(Screen[None]):
    """The single dashboard screen; renders whatever the presenter commits."""

    BINDINGS = DASHBOARD_SCREEN_BINDINGS

    DEFAULT_CSS = f"""
    DashboardScreen {{
        layout: vertical;
    }}

    #{ID_HEADER} {{
        height: {HEADER_HEIGHT};
    }}

    #{ID_HEADER_DIGESTS} > PanelView {{
        height: 1fr;
    }}

    #{ID_PAGES} {{
        height: 1fr;
    }}

    #{ID_PAGES} > Vertical {{
        height: 1fr;
    }}

    #{ID_PAGE_INDICATOR} {{
        height: 1;
        padding: 0 1;
    }}
    """

    def __init__(
        self,
        data_source: ClusterDataSource,
        settings: AppSettings | None = None,
        *,
        namespace: str = "",
    ) -> None:
        super().__init__()
        self.settings = settings or AppSettings()
        self._panel_views: dict[PanelId, PanelView] = {}
        self._overlays: dict[int, DetailOverlay] = {}
        self.presenter = DashboardPresenter(
            self,
            data_source,
            namespace=namespace,
            toast_timeout=self.settings.toast_timeout,
        )

    # =========================================================================
    # Composition
    # =========================================================================

    def _panel_view(self, panel_id: PanelId, *, focusable: bool = True) -> PanelView:
        spec = PANEL_SPECS[panel_id]
        view = PanelView(
            panel_id,
            spec.title,
            border=spec.border,
            focusable=focusable,
            id=panel_widget_id(panel_id),
        )
        self._panel_views[panel_id] = view
        return view

    def compose(self) -> ComposeResult:
        namespaces = self._panel_view(PanelId.NAMESPACES, focusable=False)
        namespaces.styles.width = f"{HEADER_WEIGHTS['namespaces']}fr"
        overview = self._panel_view(PanelId.OVERVIEW, focusable=False)
        overview.styles.width = f"{HEADER_WEIGHTS['overview']}fr"
        digests = Vertical(
            self._panel_view(PanelId.ALERTS, focusable=False),
            self._panel_view(PanelId.EVENTS, focusable=False),
            id=ID_HEADER_DIGESTS,
        )
        digests.styles.width = f"{HEADER_WEIGHTS['digests']}fr"
        yield Horizontal(namespaces, overview, digests, id=ID_HEADER)

        with ContentSwitcher(id=ID_PAGES, initial=page_widget_id(DEFAULT_PAGE)):
            for page in PAGES:
                yield Vertical(
                    *(self._panel_view(slot.panel_id) for slot in page.slots),
                    id=page_widget_id(page.page_id),
                )

        yield Static(id=ID_PAGE_INDICATOR)

    def on_mount(self) -> None:
        self.presenter.start()
        self.run_worker(
            self.presenter.scheduler.run(),
            name="refresh-loop",
            group="refresh",
            exclusive=True,
        )
        self.set_interval(self.settings.refresh_interval, self.presenter.request_refresh)

    def on_descendant_focus(self, event: events.DescendantFocus) -> None:
        if isinstance(event.widget, PanelView):
            self.presenter.on_panel_focused(event.widget.panel_id)

    # =========================================================================
    # DashboardView
    # =========================================================================

    def show_panel_text(self, panel_id: PanelId, text: str | Text) -> None:
        self._panel_views[panel_id].set_text(text)

    def set_panel_border(self, panel_id: PanelId, color: str) -> None:
        self._panel_views[panel_id].set_border_color(color)

    def set_panel_title(self, panel_id: PanelId, title: str) -> None:
        self._panel_views[panel_id].border_title = title

    def set_panel_collapsed(
        self,
        panel_id: PanelId,
        collapsed: bool,
        *,
        height: int,
        weight: int,
    ) -> None:
        self._panel_views[panel_id].set_collapsed(collapsed, height=height, weight=weight)

    def focus_panel(self, panel_id: PanelId | None) -> None:
        self.set_focus(self._panel_views[panel_id] if panel_id is not None else None)

    def panel_viewport(self, panel_id: PanelId) -> tuple[int, int]:
        return self._panel_views[panel_id].viewport()

    def scroll_panel_to(self, panel_id: PanelId, line: int) -> None:
        self._panel_views[panel_id].scroll_to_line(line)

    def show_page(self, page_id: PageId) -> None:
        self.query_one(f"#{ID_PAGES}", ContentSwitcher).current = page_widget_id(page_id)

    def set_page_indicator(self, indicator: Text) -> None:
        self.query_one(f"#{ID_PAGE_INDICATOR}", Static).update(indicator)

    def push_overlay(self, token: int, title: str, body: str) -> None:
        overlay = DetailOverlay(token, title, body, on_close=self.presenter.close_overlay)
        self._overlays[token] = overlay
        self.app.push_screen(overlay)

    def update_overlay(self, token: int, body: str) -> None:
        overlay = self._overlays.get(token)
        if overlay is not None:
            overlay.set_body(body)

    def pop_overlay(self, token: int) -> None:
        overlay = self._overlays.pop(token, None)
        if overlay is not None and self.app.screen is overlay:
            self.app.pop_screen()

    def show_toast(self, message: str, timeout: float) -> None:
        self.notify(message, timeout=timeout)

    def run_background(self, work: Coroutine[Any, Any, None], name: str) -> None:
        self.run_worker(work, name=name, group="diagnostics")

    def batch_update(self) -> AbstractContextManager[None]:
        return self.app.batch_update()

    # =========================================================================
    # Actions
    # =========================================================================

    def action_set_page(self, page: str) -> None:
        self.presenter.set_page(PageId(page))

    def action_switch_page(self, delta: int) -> None:
        self.presenter.switch_page(delta)

    def action_move(self, delta: int) -> None:
        self.presenter.move(delta)

    def action_activate(self) -> None:
        self.presenter.activate()

    def action_logs(self) -> None:
        self.presenter.open_logs()

    def action_describe(self) -> None:
        self.presenter.open_describe()

    def action_alerts(self) -> None:
        self.presenter.show_digest(PanelId.ALERTS)

    def action_events(self) -> None:
        self.presenter.show_digest(PanelId.EVENTS)

    def action_back(self) -> None:
        self.presenter.back()

    def action_refresh(self) -> None:
        logger.debug("Manual refresh requested")
        self.presenter.request_refresh()

    def action_show_help(self) -> None:
        self.notify(DASHBOARD_HELP_TEXT, title="Help", timeout=HELP_TOAST_TIMEOUT)

    def action_select_namespace(self, index: int) -> None:
        self.presenter.select_namespace(index)
