"""Browse mode - line selection inside one tabular panel.

The selection is only an index into the panel's last committed text. It is
re-validated against fresh text on every highlight, so a refresh can move it
forward to the next selectable row or end browse mode entirely.
"""

from __future__ import annotations

import logging

from rich.text import Text

from ktwins.constants.enums import PanelId
from ktwins.constants.values import BROWSE_TITLE_SUFFIX, SELECTION_STYLE
from ktwins.controllers.resources.resolver import resolve_resource
from ktwins.controllers.resources.row_parser import find_selectable, is_selectable
from ktwins.models.core.snapshot import ResourceRef
from ktwins.models.state.dashboard_state import DashboardState
from ktwins.models.state.selection import Selection
from ktwins.screens.dashboard.config import PANEL_TEXT_STYLES
from ktwins.screens.dashboard.navigation import apply_emphasis
from ktwins.screens.dashboard.view import DashboardView

logger = logging.getLogger(__name__)


def render_panel_text(panel_id: PanelId, text: str) -> Text | str:
    """Plain panel rendering, with the panel's text style when it has one."""
    style = PANEL_TEXT_STYLES.get(panel_id)
    if style is None:
        return text
    return Text(text, style=style)


def render_selection(lines: list[str], selected: int) -> Text:
    """Render ``lines`` with the ``selected`` line shown inverted."""
    rendered = Text()
    for index, line in enumerate(lines):
        if index:
            rendered.append("\n")
        rendered.append(line, style=SELECTION_STYLE if index == selected else None)
    return rendered


class BrowseController:
    """Enter, move within and leave browse mode on an allow-listed panel."""

    def __init__(self, state: DashboardState, view: DashboardView) -> None:
        self._state = state
        self._view = view

    @property
    def selection(self) -> Selection | None:
        return self._state.selection

    def enter_browse(self, panel_id: PanelId | None) -> bool:
        """Start browsing ``panel_id`` at its first selectable line after line 0.

        Returns:
            True when browse mode was entered.
        """
        if panel_id is None:
            return False
        panel = self._state.panel(panel_id)
        if not panel.spec.browsable:
            return False
        start = find_selectable(panel.spec, panel.lines, 1, 1, wrap=True)
        if start == -1:
            return False
        if self._state.selection is not None:
            self.exit_browse()

        self._state.selection = Selection(panel_id, start, original_title=panel.title)
        panel.title = f"{panel.title.strip()} {BROWSE_TITLE_SUFFIX}"
        self._view.set_panel_title(panel_id, panel.title)
        self._state.focused = panel_id
        self._view.focus_panel(panel_id)
        self.highlight()
        apply_emphasis(self._state, self._view)
        logger.debug("Browse %s from line %d", panel_id.value, start)
        return True

    def exit_browse(self) -> None:
        """Restore the browsed panel's title, border and plain text."""
        selection = self._state.selection
        if selection is None:
            return
        self._state.selection = None
        panel = self._state.panel(selection.panel_id)
        panel.title = selection.original_title
        self._view.set_panel_title(selection.panel_id, panel.title)
        self._view.show_panel_text(
            selection.panel_id, render_panel_text(selection.panel_id, panel.text)
        )
        apply_emphasis(self._state, self._view)

    def adjust_selection(self, delta: int) -> None:
        """Move to the next selectable line in the direction of ``delta``.

        Stops at the edges; when nothing selectable lies that way the
        selection stays where it is.
        """
        selection = self._state.selection
        if selection is None:
            return
        panel = self._state.panel(selection.panel_id)
        target = find_selectable(
            panel.spec, panel.lines, selection.line + delta, delta, wrap=False
        )
        if target != -1:
            selection.line = target
        self.highlight()

    def highlight(self) -> bool:
        """Render the browsed panel with its selected line marked.

        An invalid selection is first moved to the nearest selectable line,
        searching forward with wrap-around. When no line is selectable the
        panel shows plain text.

        Returns:
            False when the panel has no selectable line left.
        """
        selection = self._state.selection
        if selection is None:
            return False
        panel = self._state.panel(selection.panel_id)
        lines = panel.lines
        if not is_selectable(panel.spec, lines, selection.line):
            selection.line = find_selectable(
                panel.spec, lines, selection.line, 1, wrap=True
            )
        if selection.line == -1:
            self._view.show_panel_text(
                selection.panel_id, render_panel_text(selection.panel_id, panel.text)
            )
            return False

        self._view.show_panel_text(
            selection.panel_id, render_selection(lines, selection.line)
        )
        self._follow_selection(selection)
        return True

    def _follow_selection(self, selection: Selection) -> None:
        top, height = self._view.panel_viewport(selection.panel_id)
        if height <= 0:
            return
        if selection.line < top:
            self._view.scroll_panel_to(selection.panel_id, selection.line)
        elif selection.line >= top + height:
            self._view.scroll_panel_to(selection.panel_id, selection.line - height + 1)

    def selected_resource(self) -> ResourceRef | None:
        """Identity of the selected row under the current namespace filter."""
        selection = self._state.selection
        if selection is None or selection.line < 0:
            return None
        panel = self._state.panel(selection.panel_id)
        return resolve_resource(
            panel.spec,
            panel.lines,
            selection.line,
            self._state.namespace.filter,
        )
