"""Overlay state for transient full-screen views."""

from __future__ import annotations

from dataclasses import dataclass

from ktwins.constants.enums import PanelId


@dataclass
class OverlayState:
    """One open overlay.

    Attributes:
        token: Identity used to route late asynchronous results.
        title: Overlay title.
        body: Current body text.
        pending: True while an asynchronous result is still awaited.
        restore_focus: Panel to focus on close; only set on the innermost overlay.
    """

    token: int
    title: str
    body: str
    pending: bool = False
    restore_focus: PanelId | None = None
