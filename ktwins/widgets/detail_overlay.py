"""Full-screen overlay for logs, describe output and alert/event digests.

Standard Reactive Pattern:
- Overlays are modal screens, inherit from ModalScreen
- No reactive state needed (the presenter owns their lifecycle)

CSS Classes: widget-detail-overlay
"""

from __future__ import annotations

from collections.abc import Callable

from rich.text import Text
from textual.app import ComposeResult
from textual.containers import VerticalScroll
from textual.screen import ModalScreen
from textual.widgets import Static

from ktwins.keyboard.navigation import OVERLAY_BINDINGS


class DetailOverlay(ModalScreen[None]):
    """Scrollable text overlay; escape asks the owner to close it."""

    BINDINGS = OVERLAY_BINDINGS

    DEFAULT_CSS = """
    DetailOverlay {
        align: center middle;
    }

    DetailOverlay > .overlay-container {
        width: 1fr;
        height: 1fr;
        border: round $accent;
        border-title-style: bold;
        background: $surface;
        padding: 0 1;
        overflow: auto auto;
    }

    DetailOverlay .overlay-body {
        width: auto;
        height: auto;
    }
    """

    def __init__(
        self,
        token: int,
        title: str,
        body: str,
        on_close: Callable[[], None] | None = None,
    ) -> None:
        """Initialize the overlay.

        Args:
            token: Identity the owner uses to address this overlay.
            title: Border title.
            body: Initial text (often a loading placeholder).
            on_close: Called when the user asks to close the overlay.
        """
        super().__init__()
        self.token = token
        self._title = title
        self._body_text = body
        self._on_close = on_close
        self._body = Static(Text(body), classes="overlay-body")
        self._container = VerticalScroll(self._body, classes="overlay-container")
        self._container.border_title = title

    @property
    def overlay_title(self) -> str:
        return self._title

    @property
    def body_text(self) -> str:
        return self._body_text

    def compose(self) -> ComposeResult:
        yield self._container

    def on_mount(self) -> None:
        self._container.focus()

    def set_body(self, body: str) -> None:
        self._body_text = body
        self._body.update(Text(body))
        if self._container.is_mounted:
            self._container.scroll_home(animate=False)

    def action_close(self) -> None:
        if self._on_close is not None:
            self._on_close()
        else:
            self.dismiss(None)
