"""Dashboard state owned by the presenter on the UI event loop."""

from __future__ import annotations

from collections.abc import Iterable
from dataclasses import dataclass, field

from ktwins.constants.enums import PageId, PanelId
from ktwins.models.core.panel import PanelSpec, PanelState
from ktwins.models.state.namespace_context import NamespaceContext
from ktwins.models.state.overlay_state import OverlayState
from ktwins.models.state.selection import Selection


@dataclass
class DashboardState:
    """All mutable dashboard state.

    Only code running on the UI event loop reads or writes this object;
    background work hands results back instead of touching it.
    """

    panels: dict[PanelId, PanelState]
    current_page: PageId
    namespace: NamespaceContext = field(default_factory=NamespaceContext)
    focused: PanelId | None = None
    selection: Selection | None = None
    overlays: list[OverlayState] = field(default_factory=list)

    @classmethod
    def from_specs(
        cls,
        specs: Iterable[PanelSpec],
        *,
        page: PageId,
        namespace_filter: str = "",
    ) -> DashboardState:
        return cls(
            panels={spec.panel_id: PanelState(spec) for spec in specs},
            current_page=page,
            namespace=NamespaceContext(filter=namespace_filter.strip()),
        )

    @property
    def modal_open(self) -> bool:
        return bool(self.overlays)

    @property
    def browsing(self) -> bool:
        return self.selection is not None

    def panel(self, panel_id: PanelId) -> PanelState:
        return self.panels[panel_id]
