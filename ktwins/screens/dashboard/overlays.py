"""Overlay stack - modal detail views and transient toasts."""

from __future__ import annotations

import itertools
import logging

from ktwins.constants.enums import PanelId
from ktwins.constants.timeouts import TOAST_TIMEOUT
from ktwins.constants.values import OVERLAY_TITLE_SUFFIX
from ktwins.models.state.dashboard_state import DashboardState
from ktwins.models.state.overlay_state import OverlayState
from ktwins.screens.dashboard.config import DIGESTS
from ktwins.screens.dashboard.navigation import apply_emphasis
from ktwins.screens.dashboard.view import DashboardView

logger = logging.getLogger(__name__)


class OverlayStack:
    """Opens, updates and closes modal overlays.

    Each overlay gets a token; asynchronous results address the overlay by
    token so a result for an overlay that was already closed is dropped.
    """

    def __init__(
        self,
        state: DashboardState,
        view: DashboardView,
        *,
        toast_timeout: float = TOAST_TIMEOUT,
    ) -> None:
        self._state = state
        self._view = view
        self._toast_timeout = toast_timeout
        self._tokens = itertools.count(1)

    @property
    def is_open(self) -> bool:
        return self._state.modal_open

    @property
    def top(self) -> OverlayState | None:
        return self._state.overlays[-1] if self._state.overlays else None

    def open_overlay(self, title: str, body: str, *, pending: bool = False) -> int:
        """Push a modal overlay and return its token.

        Only the innermost overlay remembers which panel to refocus on close.
        """
        overlay = OverlayState(
            token=next(self._tokens),
            title=f"{title} {OVERLAY_TITLE_SUFFIX}",
            body=body,
            pending=pending,
            restore_focus=None if self._state.overlays else self._state.focused,
        )
        self._state.overlays.append(overlay)
        self._view.push_overlay(overlay.token, overlay.title, overlay.body)
        return overlay.token

    def close_overlay(self) -> None:
        """Pop the top overlay; restore focus once the stack is empty."""
        if not self._state.overlays:
            return
        overlay = self._state.overlays.pop()
        self._view.pop_overlay(overlay.token)
        if self._state.overlays:
            return
        if overlay.restore_focus is not None:
            self._state.focused = overlay.restore_focus
        self._view.focus_panel(self._state.focused)
        apply_emphasis(self._state, self._view)

    def update_body(self, token: int, body: str) -> bool:
        """Replace the body of overlay ``token`` if it is still open.

        Returns:
            False when the overlay is gone and the result was discarded.
        """
        for overlay in self._state.overlays:
            if overlay.token == token:
                overlay.body = body
                overlay.pending = False
                self._view.update_overlay(token, body)
                return True
        logger.debug("Discarding result for closed overlay %d", token)
        return False

    def open_digest(self, panel_id: PanelId) -> int:
        """Show the cached alerts or events text in an overlay."""
        title, empty_text = DIGESTS[panel_id]
        content = self._state.panel(panel_id).text
        if not content.strip():
            content = empty_text
        return self.open_overlay(title, content)

    def show_toast(self, message: str) -> None:
        """Short-lived notification; independent of the modal stack."""
        self._view.show_toast(message, self._toast_timeout)
