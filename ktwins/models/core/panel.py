"""Panel models - static panel behaviour and live panel state."""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass, field

from ktwins.constants.enums import PanelId, PanelKind
from ktwins.constants.limits import COLLAPSED_PANEL_HEIGHT
from ktwins.constants.values import COLOR_PANEL, PLACEHOLDER_LOADING
from ktwins.models.core.resource_group import ResourceGroup


@dataclass(frozen=True, slots=True)
class PanelSpec:
    """Behaviour of one panel, looked up once instead of branched on.

    The selectability rule (``min_fields``) and the resolver inputs
    (``fixed_kind``, ``groups``, ``cluster_scoped``) travel with the panel so
    callers never switch on panel identity.
    """

    panel_id: PanelId
    title: str
    kind: PanelKind
    border: str = COLOR_PANEL
    browsable: bool = False
    supports_logs: bool = False
    min_fields: int = 2
    fixed_kind: str = ""
    groups: tuple[ResourceGroup, ...] = ()
    cluster_scoped: bool = False
    collapsed_height: int = COLLAPSED_PANEL_HEIGHT

    @property
    def group_kinds(self) -> Mapping[str, str]:
        """Map of group title line -> resource kind tag."""
        return {group.title: group.kind for group in self.groups}


@dataclass(slots=True)
class PanelState:
    """Live state of a panel owned by the dashboard presenter.

    ``text`` is the last committed (fetched) text; anything shown on screen is
    either this text or a highlight rendering derived from it. ``border`` is
    the default or semantic colour, before focus and browse emphasis.
    """

    spec: PanelSpec
    text: str = PLACEHOLDER_LOADING
    border: str = field(default="")
    title: str = field(default="")

    def __post_init__(self) -> None:
        if not self.border:
            self.border = self.spec.border
        if not self.title:
            self.title = self.spec.title

    @property
    def panel_id(self) -> PanelId:
        return self.spec.panel_id

    @property
    def has_content(self) -> bool:
        """Return True when the committed text is not blank."""
        return bool(self.text.strip())

    @property
    def lines(self) -> list[str]:
        return self.text.split("\n")
