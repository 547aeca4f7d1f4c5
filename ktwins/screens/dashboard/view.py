"""Rendering surface the dashboard presenter drives.

``DashboardScreen`` implements this protocol with Textual widgets; unit
tests substitute a recording fake. All calls happen on the UI event loop.
"""

from __future__ import annotations

from collections.abc import Coroutine
from contextlib import AbstractContextManager
from typing import Any, Protocol

from rich.text import Text

from ktwins.constants.enums import PageId, PanelId


class DashboardView(Protocol):
    """Operations the presenter needs from the UI toolkit."""

    def show_panel_text(self, panel_id: PanelId, text: str | Text) -> None: ...

    def set_panel_border(self, panel_id: PanelId, color: str) -> None: ...

    def set_panel_title(self, panel_id: PanelId, title: str) -> None: ...

    def set_panel_collapsed(
        self,
        panel_id: PanelId,
        collapsed: bool,
        *,
        height: int,
        weight: int,
    ) -> None: ...

    def focus_panel(self, panel_id: PanelId | None) -> None: ...

    def panel_viewport(self, panel_id: PanelId) -> tuple[int, int]:
        """Return ``(first visible line, visible line count)``."""
        ...

    def scroll_panel_to(self, panel_id: PanelId, line: int) -> None: ...

    def show_page(self, page_id: PageId) -> None: ...

    def set_page_indicator(self, indicator: Text) -> None: ...

    def push_overlay(self, token: int, title: str, body: str) -> None: ...

    def update_overlay(self, token: int, body: str) -> None: ...

    def pop_overlay(self, token: int) -> None: ...

    def show_toast(self, message: str, timeout: float) -> None: ...

    def run_background(self, work: Coroutine[Any, Any, None], name: str) -> None: ...

    def batch_update(self) -> AbstractContextManager[None]: ...
