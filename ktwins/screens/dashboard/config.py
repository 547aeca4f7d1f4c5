"""Dashboard screen configuration - panel registry, pages, and widget ID constants."""

from __future__ import annotations

from ktwins.constants.enums import PageId, PanelId, PanelKind
from ktwins.constants.limits import COLLAPSED_WORKLOAD_PANEL_HEIGHT
from ktwins.constants.resources import (
    CONFIG_GROUPS,
    INFRA_GROUPS,
    NETWORK_GROUPS,
    STORAGE_GROUPS,
    WORKLOAD_GROUPS,
)
from ktwins.constants.values import (
    COLOR_ALERTS_ACTIVE,
    COLOR_CALM,
    COLOR_EVENTS_ACTIVE,
    COLOR_NAMESPACES,
    COLOR_OVERVIEW,
    EMPTY_ALERTS,
    EMPTY_EVENTS,
)
from ktwins.models.core.page import PageSpec, PanelSlot
from ktwins.models.core.panel import PanelSpec

# =============================================================================
# Panel registry
# =============================================================================

PANEL_SPECS: dict[PanelId, PanelSpec] = {
    spec.panel_id: spec
    for spec in (
        PanelSpec(
            PanelId.NAMESPACES,
            "NAMESPACES",
            PanelKind.NAMESPACE_INDEX,
            border=COLOR_NAMESPACES,
        ),
        PanelSpec(
            PanelId.OVERVIEW,
            "OVERVIEW",
            PanelKind.SUMMARY,
            border=COLOR_OVERVIEW,
        ),
        PanelSpec(
            PanelId.ALERTS,
            "ALERTS",
            PanelKind.DIGEST,
            border=COLOR_CALM,
            min_fields=1,
            fixed_kind="pod",
        ),
        PanelSpec(
            PanelId.EVENTS,
            "EVENTS",
            PanelKind.DIGEST,
            border=COLOR_CALM,
            min_fields=1,
        ),
        PanelSpec(
            PanelId.WORKLOADS,
            "WORKLOADS",
            PanelKind.GROUPED_TABLE,
            browsable=True,
            groups=WORKLOAD_GROUPS,
            collapsed_height=COLLAPSED_WORKLOAD_PANEL_HEIGHT,
        ),
        PanelSpec(
            PanelId.PODS,
            "PODS",
            PanelKind.TABLE,
            browsable=True,
            supports_logs=True,
            fixed_kind="pod",
            collapsed_height=COLLAPSED_WORKLOAD_PANEL_HEIGHT,
        ),
        PanelSpec(
            PanelId.NETWORK,
            "NETWORK",
            PanelKind.GROUPED_TABLE,
            browsable=True,
            groups=NETWORK_GROUPS,
        ),
        PanelSpec(
            PanelId.INFRA,
            "INFRA",
            PanelKind.GROUPED_TABLE,
            browsable=True,
            groups=INFRA_GROUPS,
            cluster_scoped=True,
        ),
        PanelSpec(
            PanelId.CONFIG,
            "CONFIG",
            PanelKind.GROUPED_TABLE,
            browsable=True,
            groups=CONFIG_GROUPS,
        ),
        PanelSpec(
            PanelId.STORAGE,
            "STORAGE",
            PanelKind.GROUPED_TABLE,
            browsable=True,
            groups=STORAGE_GROUPS,
        ),
        PanelSpec(
            PanelId.METRICS,
            "POD METRICS",
            PanelKind.METRICS,
        ),
    )
}

# Always visible above the pages, never focusable
HEADER_PANELS: tuple[PanelId, ...] = (
    PanelId.NAMESPACES,
    PanelId.OVERVIEW,
    PanelId.ALERTS,
    PanelId.EVENTS,
)

# Header column weights (alerts and events share the last column)
HEADER_WEIGHTS: dict[str, int] = {
    "namespaces": 1,
    "overview": 2,
    "digests": 1,
}

# Semantic border colours: (empty, non-empty)
SEMANTIC_BORDERS: dict[PanelId, tuple[str, str]] = {
    PanelId.ALERTS: (COLOR_CALM, COLOR_ALERTS_ACTIVE),
    PanelId.EVENTS: (COLOR_CALM, COLOR_EVENTS_ACTIVE),
}

# Rich styles for whole-panel text
PANEL_TEXT_STYLES: dict[PanelId, str] = {
    PanelId.ALERTS: "red",
    PanelId.METRICS: "green",
}

# =============================================================================
# Pages (declared order is the cycling order)
# =============================================================================

PAGES: tuple[PageSpec, ...] = (
    PageSpec(
        PageId.WORKLOADS,
        "workloads",
        "w",
        (PanelSlot(PanelId.WORKLOADS), PanelSlot(PanelId.PODS)),
    ),
    PageSpec(
        PageId.NETWORK,
        "network",
        "n",
        (PanelSlot(PanelId.NETWORK),),
    ),
    PageSpec(
        PageId.CLUSTER,
        "cluster",
        "c",
        (
            PanelSlot(PanelId.INFRA),
            PanelSlot(PanelId.CONFIG),
            PanelSlot(PanelId.STORAGE),
        ),
    ),
    PageSpec(
        PageId.METRICS,
        "metrics",
        "m",
        (PanelSlot(PanelId.METRICS),),
    ),
)
PAGES_BY_ID: dict[PageId, PageSpec] = {page.page_id: page for page in PAGES}
DEFAULT_PAGE: PageId = PageId.WORKLOADS

# Indicator entries after the page list: (key label, rest of word)
INDICATOR_EXTRAS: tuple[tuple[str, str], ...] = (
    ("[a]", "lerts"),
    ("[e]", "vents"),
    ("[0-9]", " namespace"),
    ("[q]", "uit"),
)

# =============================================================================
# Digests
# =============================================================================

DIGESTS: dict[PanelId, tuple[str, str]] = {
    PanelId.ALERTS: ("ALERTS", EMPTY_ALERTS),
    PanelId.EVENTS: ("EVENTS", EMPTY_EVENTS),
}

# =============================================================================
# Widget IDs
# =============================================================================

ID_HEADER = "dashboard-header"
ID_HEADER_DIGESTS = "dashboard-header-digests"
ID_PAGES = "dashboard-pages"
ID_PAGE_INDICATOR = "page-indicator"


def panel_widget_id(panel_id: PanelId) -> str:
    return f"panel-{panel_id.value}"


def page_widget_id(page_id: PageId) -> str:
    return f"page-{page_id.value}"
