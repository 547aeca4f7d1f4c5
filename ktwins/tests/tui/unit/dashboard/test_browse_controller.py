"""Unit tests for browse mode selection."""

from __future__ import annotations

import pytest
import pytest_asyncio
from rich.text import Text

from ktwins.constants.enums import PanelId
from ktwins.constants.values import SELECTION_STYLE
from ktwins.models.core.snapshot import ResourceRef
from ktwins.screens.dashboard.browse import render_panel_text, render_selection
from ktwins.screens.dashboard.presenter import DashboardPresenter


@pytest_asyncio.fixture
async def refreshed(presenter: DashboardPresenter) -> DashboardPresenter:
    """Presenter after one refresh, focused on the pods panel."""
    await presenter.scheduler.drain()
    presenter.move(1)
    return presenter


class TestRendering:
    """Tests for render_selection and render_panel_text."""

    def test_selected_line_is_styled(self) -> None:
        """Only the selected line carries the selection style."""
        text = render_selection(["NAME READY", "web 1/1", "db 1/1"], 1)
        assert text.plain == "NAME READY\nweb 1/1\ndb 1/1"
        styled = [text.plain[span.start:span.end] for span in text.spans if span.style == SELECTION_STYLE]
        assert styled == ["web 1/1"]

    def test_panel_text_styles(self) -> None:
        """Alerts render red; ordinary panels stay plain strings."""
        alerts = render_panel_text(PanelId.ALERTS, "⚠ web: Error")
        assert isinstance(alerts, Text)
        assert str(alerts.style) == "red"
        assert render_panel_text(PanelId.PODS, "web 1/1") == "web 1/1"


class TestBrowseController:
    """Tests for BrowseController."""

    @pytest.mark.asyncio
    async def test_enter_then_exit_restores_panel(self, refreshed: DashboardPresenter, fake_view) -> None:
        """Entering and leaving browse restores title, border and text exactly."""
        before = (
            fake_view.titles[PanelId.PODS],
            fake_view.borders[PanelId.PODS],
            fake_view.texts[PanelId.PODS],
        )

        assert refreshed.browse.enter_browse(PanelId.PODS) is True
        assert fake_view.titles[PanelId.PODS] == "PODS [L]ogs / [D]escribe"
        assert fake_view.borders[PanelId.PODS] == "green"
        assert isinstance(fake_view.texts[PanelId.PODS], Text)

        refreshed.browse.exit_browse()
        after = (
            fake_view.titles[PanelId.PODS],
            fake_view.borders[PanelId.PODS],
            fake_view.texts[PanelId.PODS],
        )
        assert after == before

    @pytest.mark.asyncio
    async def test_enter_starts_after_header(self, refreshed: DashboardPresenter) -> None:
        """The first selectable line after line 0 is selected."""
        refreshed.browse.enter_browse(PanelId.PODS)
        assert refreshed.state.selection.line == 1
        assert refreshed.state.selection.original_title == "PODS"

    @pytest.mark.asyncio
    async def test_enter_refused_on_non_browsable_panel(self, refreshed: DashboardPresenter) -> None:
        """Header and metrics panels never enter browse."""
        assert refreshed.browse.enter_browse(PanelId.OVERVIEW) is False
        assert refreshed.browse.enter_browse(PanelId.METRICS) is False
        assert refreshed.browse.enter_browse(None) is False
        assert refreshed.state.browsing is False

    @pytest.mark.asyncio
    async def test_enter_refused_without_rows(self, refreshed: DashboardPresenter) -> None:
        """A panel showing only headings cannot be browsed."""
        refreshed.state.panel(PanelId.NETWORK).text = "SVC\nNAME TYPE"
        assert refreshed.browse.enter_browse(PanelId.NETWORK) is False

    @pytest.mark.asyncio
    async def test_adjust_stops_at_last_row(self, refreshed: DashboardPresenter) -> None:
        """A forward move at the last row leaves the selection unchanged."""
        refreshed.browse.enter_browse(PanelId.PODS)
        refreshed.browse.adjust_selection(1)
        assert refreshed.state.selection.line == 2
        refreshed.browse.adjust_selection(1)
        assert refreshed.state.selection.line == 2

    @pytest.mark.asyncio
    async def test_adjust_never_selects_header(self, refreshed: DashboardPresenter) -> None:
        """Moving up from the first row stays on it."""
        refreshed.browse.enter_browse(PanelId.PODS)
        refreshed.browse.adjust_selection(-1)
        assert refreshed.state.selection.line == 1

    @pytest.mark.asyncio
    async def test_highlight_reseeks_with_wrap(self, refreshed: DashboardPresenter) -> None:
        """An invalid selection moves forward, wrapping to the top."""
        refreshed.browse.enter_browse(PanelId.PODS)
        refreshed.state.selection.line = 0
        assert refreshed.browse.highlight() is True
        assert refreshed.state.selection.line == 1

    @pytest.mark.asyncio
    async def test_selection_followed_by_scrolling(self, refreshed: DashboardPresenter, fake_view) -> None:
        """Selecting below the viewport scrolls it into view."""
        fake_view.viewports[PanelId.PODS] = (0, 2)
        refreshed.browse.enter_browse(PanelId.PODS)
        refreshed.browse.adjust_selection(1)
        assert fake_view.scrolls[-1] == (PanelId.PODS, 1)

    @pytest.mark.asyncio
    async def test_selected_resource(self, refreshed: DashboardPresenter) -> None:
        """The selected row resolves under the current filter."""
        refreshed.browse.enter_browse(PanelId.PODS)
        assert refreshed.browse.selected_resource() == ResourceRef(
            kind="pod", name="nginx-7d", namespace="default"
        )

    @pytest.mark.asyncio
    async def test_reentering_other_panel_restores_first(
        self, refreshed: DashboardPresenter, fake_view
    ) -> None:
        """Only one panel is browsed at a time."""
        refreshed.browse.enter_browse(PanelId.PODS)
        refreshed.browse.enter_browse(PanelId.WORKLOADS)
        assert refreshed.state.selection.panel_id == PanelId.WORKLOADS
        assert fake_view.titles[PanelId.PODS] == "PODS"
