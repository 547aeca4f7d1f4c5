"""Refresh snapshot - a complete set of panel texts from one refresh cycle."""

from __future__ import annotations

from dataclasses import dataclass, field

from ktwins.constants.enums import PanelId


@dataclass(frozen=True)
class ResourceRef:
    """Identity of a resource reconstructed from a rendered row."""

    kind: str
    name: str
    namespace: str = ""


@dataclass
class RefreshSnapshot:
    """Everything one refresh cycle computed, committed as a single unit."""

    namespace_filter: str
    texts: dict[PanelId, str] = field(default_factory=dict)
    namespace_names: list[str] = field(default_factory=lambda: [""])
    duration_ms: float = 0.0

    def text_for(self, panel_id: PanelId) -> str:
        return self.texts.get(panel_id, "")
