"""Core dashboard models."""

from ktwins.models.core.page import PageSpec, PanelSlot
from ktwins.models.core.panel import PanelSpec, PanelState
from ktwins.models.core.resource_group import ResourceGroup
from ktwins.models.core.snapshot import RefreshSnapshot, ResourceRef

__all__ = [
    "PageSpec",
    "PanelSlot",
    "PanelSpec",
    "PanelState",
    "RefreshSnapshot",
    "ResourceGroup",
    "ResourceRef",
]
