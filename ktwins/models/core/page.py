"""Page models - ordered panel groupings shown one at a time."""

from __future__ import annotations

from dataclasses import dataclass

from ktwins.constants.enums import PageId, PanelId


@dataclass(frozen=True, slots=True)
class PanelSlot:
    """A panel reference inside a page with its layout weight."""

    panel_id: PanelId
    weight: int = 1


@dataclass(frozen=True, slots=True)
class PageSpec:
    """A named page; ``slots`` order is also the focus order."""

    page_id: PageId
    label: str
    hotkey: str
    slots: tuple[PanelSlot, ...]

    @property
    def panel_ids(self) -> tuple[PanelId, ...]:
        return tuple(slot.panel_id for slot in self.slots)
