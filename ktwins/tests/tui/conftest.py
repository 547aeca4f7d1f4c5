"""Shared fixtures for ktwins TUI tests.

Provides:
- FakeView: recording stand-in for DashboardScreen
- FakeDataSource: in-memory ClusterDataSource with canned panel texts
- app: KtwinsApp wired to a FakeDataSource
- wait_for: poll a condition from inside app.run_test()
"""

from __future__ import annotations

import asyncio
from collections.abc import Awaitable, Callable, Coroutine, Iterator
from contextlib import nullcontext
from typing import Any

import pytest
from rich.text import Text

from ktwins.app import KtwinsApp
from ktwins.constants.enums import DiagnosticMode, PageId, PanelId
from ktwins.controllers.base import ClusterDataSource
from ktwins.models.core.resource_group import ResourceGroup
from ktwins.models.state.app_settings import AppSettings
from ktwins.screens.dashboard.presenter import DashboardPresenter

# =============================================================================
# Canned kubectl output
# =============================================================================

PODS_DEFAULT = (
    "NAME       READY   STATUS    RESTARTS   AGE\n"
    "nginx-7d   1/1     Running   0          1d\n"
    "redis-0    1/1     Running   0          2d"
)
WORKLOADS_DEFAULT = (
    "DEPLOY\n"
    "NAME    READY   UP-TO-DATE   AVAILABLE   AGE\n"
    "nginx   1/1     1            1           1d\n"
    "\n"
    "STS\n"
    "NAME    READY   AGE\n"
    "redis   1/1     2d"
)
INFRA_TEXT = (
    "NODES\n"
    "NAME     STATUS   ROLES           AGE   VERSION\n"
    "node-a   Ready    control-plane   9d    v1.30.0"
)


# =============================================================================
# Fakes
# =============================================================================


class FakeView:
    """Records every DashboardView call for assertions."""

    def __init__(self) -> None:
        self.texts: dict[PanelId, str | Text] = {}
        self.borders: dict[PanelId, str] = {}
        self.titles: dict[PanelId, str] = {}
        self.collapsed: dict[PanelId, tuple[bool, int, int]] = {}
        self.focused: PanelId | None = None
        self.page: PageId | None = None
        self.indicator: Text | None = None
        self.overlays: dict[int, tuple[str, str]] = {}
        self.toasts: list[str] = []
        self.background: list[Coroutine[Any, Any, None]] = []
        self.viewports: dict[PanelId, tuple[int, int]] = {}
        self.scrolls: list[tuple[PanelId, int]] = []
        self.batches = 0

    def plain(self, panel_id: PanelId) -> str:
        text = self.texts.get(panel_id, "")
        return text if isinstance(text, str) else text.plain

    def show_panel_text(self, panel_id: PanelId, text: str | Text) -> None:
        self.texts[panel_id] = text

    def set_panel_border(self, panel_id: PanelId, color: str) -> None:
        self.borders[panel_id] = color

    def set_panel_title(self, panel_id: PanelId, title: str) -> None:
        self.titles[panel_id] = title

    def set_panel_collapsed(
        self,
        panel_id: PanelId,
        collapsed: bool,
        *,
        height: int,
        weight: int,
    ) -> None:
        self.collapsed[panel_id] = (collapsed, height, weight)

    def focus_panel(self, panel_id: PanelId | None) -> None:
        self.focused = panel_id

    def panel_viewport(self, panel_id: PanelId) -> tuple[int, int]:
        return self.viewports.get(panel_id, (0, 100))

    def scroll_panel_to(self, panel_id: PanelId, line: int) -> None:
        self.scrolls.append((panel_id, line))

    def show_page(self, page_id: PageId) -> None:
        self.page = page_id

    def set_page_indicator(self, indicator: Text) -> None:
        self.indicator = indicator

    def push_overlay(self, token: int, title: str, body: str) -> None:
        self.overlays[token] = (title, body)

    def update_overlay(self, token: int, body: str) -> None:
        title, _ = self.overlays[token]
        self.overlays[token] = (title, body)

    def pop_overlay(self, token: int) -> None:
        self.overlays.pop(token, None)

    def show_toast(self, message: str, timeout: float) -> None:
        self.toasts.append(message)

    def run_background(self, work: Coroutine[Any, Any, None], name: str) -> None:
        self.background.append(work)

    def batch_update(self) -> nullcontext[None]:
        self.batches += 1
        return nullcontext()

    async def run_background_work(self) -> None:
        """Await every background coroutine queued so far."""
        work, self.background = self.background, []
        await asyncio.gather(*work)

    def close_background_work(self) -> None:
        for work in self.background:
            work.close()
        self.background = []


class FakeDataSource(ClusterDataSource):
    """Serves canned texts; ``failing`` names methods that raise."""

    def __init__(
        self,
        *,
        pods: str = PODS_DEFAULT,
        workloads: str = WORKLOADS_DEFAULT,
        infra: str = INFRA_TEXT,
        alerts: str = "",
        events: str = "",
        metrics: str = "",
        namespaces: list[str] | None = None,
        failing: set[str] | None = None,
    ) -> None:
        self.texts = {
            "pods": pods,
            "WORKLOADS": workloads,
            "INFRA": infra,
            "alerts": alerts,
            "events": events,
            "metrics": metrics,
        }
        self.namespaces = namespaces if namespaces is not None else ["", "default"]
        self.failing = failing or set()
        self.calls: list[tuple[str, tuple[Any, ...]]] = []

    def _record(self, method: str, *args: Any) -> None:
        self.calls.append((method, args))
        if method in self.failing:
            raise RuntimeError(f"{method} failed")

    def fetch_summary_counts(self, namespace_filter: str) -> str:
        self._record("fetch_summary_counts", namespace_filter)
        return f"NS {namespace_filter or 'ALL'}"

    def fetch_grouped_resource_text(
        self,
        namespace_filter: str,
        groups: tuple[ResourceGroup, ...],
    ) -> str:
        self._record("fetch_grouped_resource_text", namespace_filter, groups)
        titles = {group.title for group in groups}
        if "DEPLOY" in titles:
            return self.texts["WORKLOADS"]
        if "NODES" in titles:
            return self.texts["INFRA"]
        return ""

    def fetch_namespace_list(self) -> tuple[str, list[str]]:
        self._record("fetch_namespace_list")
        rendered = "".join(
            f"{index}) {name or 'ALL'}\n" for index, name in enumerate(self.namespaces)
        )
        return rendered, list(self.namespaces)

    def fetch_pods(self, namespace_filter: str) -> str:
        self._record("fetch_pods", namespace_filter)
        return self.texts["pods"]

    def fetch_alerts(self, namespace_filter: str) -> str:
        self._record("fetch_alerts", namespace_filter)
        return self.texts["alerts"]

    def fetch_events(self, namespace_filter: str) -> str:
        self._record("fetch_events", namespace_filter)
        return self.texts["events"]

    def fetch_metrics(self, namespace_filter: str) -> str:
        self._record("fetch_metrics", namespace_filter)
        return self.texts["metrics"]

    def run_diagnostic_command(
        self,
        kind: str,
        name: str,
        namespace: str,
        mode: DiagnosticMode,
    ) -> str:
        self._record("run_diagnostic_command", kind, name, namespace, mode)
        return f"{mode.value} {kind}/{name} ns={namespace}"


# =============================================================================
# Fixtures
# =============================================================================


@pytest.fixture
def fake_view() -> Iterator[FakeView]:
    view = FakeView()
    yield view
    view.close_background_work()


@pytest.fixture
def fake_source() -> FakeDataSource:
    return FakeDataSource()


@pytest.fixture
def presenter(fake_view: FakeView, fake_source: FakeDataSource) -> DashboardPresenter:
    """Started presenter with the default namespace filter ``default``."""
    dashboard = DashboardPresenter(fake_view, fake_source, namespace="default")
    dashboard.start()
    return dashboard


@pytest.fixture
def app(fake_source: FakeDataSource) -> KtwinsApp:
    """App that never shells out to kubectl."""
    return KtwinsApp(
        namespace="default",
        settings=AppSettings(refresh_interval=60),
        data_source=fake_source,
    )


@pytest.fixture
def wait_for() -> Callable[..., Awaitable[None]]:
    """Pause the pilot until ``condition()`` holds."""

    async def _wait_for(pilot: Any, condition: Callable[[], bool], attempts: int = 100) -> None:
        for _ in range(attempts):
            if condition():
                return
            await pilot.pause(0.02)
        raise AssertionError("condition not met while the app was running")

    return _wait_for
