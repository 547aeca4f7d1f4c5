"""Smoke tests for DashboardScreen.

Runs the real Textual app against the in-memory data source and checks that
refresh cycles reach the widgets.
"""

from __future__ import annotations

import pytest
from textual.widgets import ContentSwitcher

from ktwins.app import KtwinsApp
from ktwins.constants.enums import PageId, PanelId
from ktwins.screens.dashboard.config import ID_PAGES, panel_widget_id
from ktwins.screens.dashboard.dashboard_screen import DashboardScreen
from ktwins.widgets import PanelView


def _panel(app: KtwinsApp, panel_id: PanelId) -> PanelView:
    return app.screen.query_one(f"#{panel_widget_id(panel_id)}", PanelView)


class TestDashboardScreenMount:
    """Composition and the first refresh."""

    @pytest.mark.asyncio
    async def test_dashboard_is_pushed(self, app: KtwinsApp) -> None:
        async with app.run_test(size=(120, 40)) as pilot:
            await pilot.pause()
            assert isinstance(app.screen, DashboardScreen)

    @pytest.mark.asyncio
    async def test_every_panel_is_composed(self, app: KtwinsApp) -> None:
        async with app.run_test(size=(120, 40)) as pilot:
            await pilot.pause()
            for panel_id in PanelId:
                assert _panel(app, panel_id).panel_id == panel_id

    @pytest.mark.asyncio
    async def test_first_refresh_fills_panels(self, app: KtwinsApp, wait_for) -> None:
        async with app.run_test(size=(120, 40)) as pilot:
            screen = app.screen
            assert isinstance(screen, DashboardScreen)
            await wait_for(pilot, lambda: screen.presenter.scheduler.cycles >= 1)

            assert "nginx-7d" in _panel(app, PanelId.PODS).plain_text
            assert _panel(app, PanelId.OVERVIEW).plain_text == "NS default"
            assert "1) default" in _panel(app, PanelId.NAMESPACES).plain_text

    @pytest.mark.asyncio
    async def test_empty_digests_keep_calm_border(self, app: KtwinsApp, wait_for) -> None:
        async with app.run_test(size=(120, 40)) as pilot:
            screen = app.screen
            await wait_for(pilot, lambda: screen.presenter.scheduler.cycles >= 1)
            assert _panel(app, PanelId.ALERTS).border_color == "green"

    @pytest.mark.asyncio
    async def test_empty_panels_collapse(self, app: KtwinsApp, wait_for) -> None:
        async with app.run_test(size=(120, 40)) as pilot:
            screen = app.screen
            await wait_for(pilot, lambda: screen.presenter.scheduler.cycles >= 1)
            assert _panel(app, PanelId.METRICS).has_class("-collapsed")
            assert not _panel(app, PanelId.PODS).has_class("-collapsed")

    @pytest.mark.asyncio
    async def test_initial_page_and_focus(self, app: KtwinsApp, wait_for) -> None:
        async with app.run_test(size=(120, 40)) as pilot:
            screen = app.screen
            await wait_for(pilot, lambda: screen.presenter.scheduler.cycles >= 1)
            switcher = app.screen.query_one(f"#{ID_PAGES}", ContentSwitcher)
            assert switcher.current == "page-workloads"
            assert screen.presenter.state.current_page == PageId.WORKLOADS
            assert app.focused is _panel(app, PanelId.WORKLOADS)

