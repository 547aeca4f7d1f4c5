"""Browse selection state."""

from __future__ import annotations

from dataclasses import dataclass

from ktwins.constants.enums import PanelId


@dataclass
class Selection:
    """The panel in browse mode and the selected line of its last text."""

    panel_id: PanelId
    line: int
    original_title: str = ""
