"""Scrollable bordered text panel used for every dashboard region.

CSS Classes: panel-view, -collapsed
"""

from __future__ import annotations

from rich.text import Text
from textual.app import ComposeResult
from textual.containers import ScrollableContainer
from textual.widgets import Static

from ktwins.constants.enums import PanelId


class PanelView(ScrollableContainer):
    """Titled, bordered, scrollable panel showing preformatted text."""

    DEFAULT_CSS = """
    PanelView {
        height: 1fr;
        border: round $panel;
        border-title-style: bold;
        padding: 0 1;
        overflow: auto auto;
        scrollbar-size: 1 1;
    }

    PanelView > .panel-body {
        width: auto;
        height: auto;
    }
    """

    def __init__(
        self,
        panel_id: PanelId,
        title: str,
        *,
        border: str,
        focusable: bool = True,
        id: str | None = None,
    ) -> None:
        super().__init__(id=id, classes="panel-view")
        self.panel_id = panel_id
        self.border_title = title
        self.can_focus = focusable
        self._border_color = border
        self._body = Static(Text(""), classes="panel-body")
        self._plain_text = ""

    def compose(self) -> ComposeResult:
        yield self._body

    def on_mount(self) -> None:
        self.styles.border = ("round", self._border_color)

    @property
    def border_color(self) -> str:
        return self._border_color

    def set_border_color(self, color: str) -> None:
        if color == self._border_color:
            return
        self._border_color = color
        self.styles.border = ("round", color)

    @property
    def plain_text(self) -> str:
        return self._plain_text

    def set_text(self, text: str | Text) -> None:
        """Replace the body; plain strings are never parsed as markup."""
        self._plain_text = text if isinstance(text, str) else text.plain
        self._body.update(Text(text, no_wrap=True) if isinstance(text, str) else text)

    def set_collapsed(self, collapsed: bool, *, height: int, weight: int) -> None:
        """Shrink to ``height`` rows (border kept) or grow to ``weight`` fr."""
        self.set_class(collapsed, "-collapsed")
        self.styles.height = height if collapsed else f"{weight}fr"

    def viewport(self) -> tuple[int, int]:
        """First visible line and number of visible lines."""
        return round(self.scroll_y), self.scrollable_content_region.height

    def scroll_to_line(self, line: int) -> None:
        self.scroll_to(y=max(0, line), animate=False)
