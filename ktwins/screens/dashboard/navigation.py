"""Navigation controller - active page, focus order and border emphasis."""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from rich.text import Text

from ktwins.constants.enums import PageId, PanelId
from ktwins.constants.values import (
    COLOR_ACCENT,
    COLOR_BROWSE,
    COLOR_MUTED,
    INDICATOR_ACTIVE_STYLE,
    INDICATOR_IDLE_STYLE,
)
from ktwins.models.state.dashboard_state import DashboardState
from ktwins.screens.dashboard.config import (
    HEADER_PANELS,
    INDICATOR_EXTRAS,
    PAGES,
    PAGES_BY_ID,
)
from ktwins.screens.dashboard.view import DashboardView

if TYPE_CHECKING:
    from ktwins.screens.dashboard.browse import BrowseController

logger = logging.getLogger(__name__)


def border_for(state: DashboardState, panel_id: PanelId) -> str:
    """Border colour a panel should show right now.

    Header panels always show their default or semantic colour. Page panels
    show browse, then focus, then empty emphasis before falling back to it.
    """
    panel = state.panel(panel_id)
    if panel_id in HEADER_PANELS:
        return panel.border
    if state.selection is not None and state.selection.panel_id == panel_id:
        return COLOR_BROWSE
    if state.focused == panel_id:
        return COLOR_ACCENT
    if not panel.has_content:
        return COLOR_MUTED
    return panel.border


def apply_emphasis(state: DashboardState, view: DashboardView) -> None:
    """Push the current border of every panel to the view."""
    for panel_id in state.panels:
        view.set_panel_border(panel_id, border_for(state, panel_id))


def render_indicator(page_id: PageId) -> Text:
    """Page indicator line, e.g. ``[w]orkloads | [n]etwork | ... | [q]uit``."""
    indicator = Text()
    entries: list[tuple[str, str, str]] = [
        (
            f"[{page.hotkey}]",
            page.label[len(page.hotkey):],
            INDICATOR_ACTIVE_STYLE if page.page_id == page_id else INDICATOR_IDLE_STYLE,
        )
        for page in PAGES
    ]
    entries.extend((key, rest, INDICATOR_ACTIVE_STYLE) for key, rest in INDICATOR_EXTRAS)
    for position, (key, rest, style) in enumerate(entries):
        if position:
            indicator.append(" | ")
        indicator.append(key, style=style)
        indicator.append(rest)
    return indicator


class NavigationController:
    """Switches pages and moves focus across the panels that have content."""

    def __init__(
        self,
        state: DashboardState,
        view: DashboardView,
        browse: BrowseController,
    ) -> None:
        self._state = state
        self._view = view
        self._browse = browse

    @property
    def current_page(self) -> PageId:
        return self._state.current_page

    def focus_order(self, page_id: PageId | None = None) -> list[PanelId]:
        """Panels of ``page_id`` with non-blank committed text, in declared order."""
        page = PAGES_BY_ID[page_id or self._state.current_page]
        return [
            panel_id
            for panel_id in page.panel_ids
            if self._state.panel(panel_id).has_content
        ]

    def focus(self, panel_id: PanelId | None) -> None:
        self._state.focused = panel_id
        self._view.focus_panel(panel_id)

    def highlight_focus(self) -> None:
        apply_emphasis(self._state, self._view)

    def set_page(self, page_id: PageId) -> None:
        """Exit browse, switch page and focus its first focusable panel."""
        self._browse.exit_browse()
        self._state.current_page = page_id
        self._view.show_page(page_id)
        self._view.set_page_indicator(render_indicator(page_id))
        order = self.focus_order(page_id)
        self.focus(order[0] if order else None)
        self.highlight_focus()
        logger.debug("Page %s, focus order %s", page_id.value, order)

    def switch_page(self, delta: int) -> None:
        """Cycle pages in declared order, wrapping at both ends."""
        page_ids = [page.page_id for page in PAGES]
        index = page_ids.index(self._state.current_page)
        self.set_page(page_ids[(index + delta) % len(page_ids)])

    def move_focus(self, delta: int) -> None:
        """Cycle focus through the current focus order."""
        order = self.focus_order()
        if not order:
            return
        if self._state.focused not in order:
            self.focus(order[0])
        else:
            index = order.index(self._state.focused)
            self.focus(order[(index + delta) % len(order)])
        self.highlight_focus()

    def ensure_focus(self) -> None:
        """Focus the first focusable panel when nothing is focused."""
        if self._state.focused is not None:
            return
        order = self.focus_order()
        if order:
            self.focus(order[0])

    def sync_focus(self, panel_id: PanelId) -> None:
        """Adopt a focus change that originated in the view (mouse click)."""
        if panel_id == self._state.focused:
            return
        if panel_id not in PAGES_BY_ID[self._state.current_page].panel_ids:
            return
        selection = self._state.selection
        if selection is not None and selection.panel_id != panel_id:
            self._browse.exit_browse()
        self._state.focused = panel_id
        self.highlight_focus()
