"""Main application class for the ktwins TUI."""

from __future__ import annotations

import logging
from pathlib import Path

from textual.app import App
from textual.binding import Binding

from ktwins.constants import APP_TITLE
from ktwins.controllers.base import ClusterDataSource
from ktwins.controllers.cluster import ClusterController
from ktwins.keyboard.app import APP_BINDINGS
from ktwins.models.state.config_manager import (
    AppSettings,
    ConfigLoadError,
    ConfigManager,
)

logger = logging.getLogger(__name__)


class KtwinsApp(App[None]):
    """Main TUI application for ktwins."""

    TITLE = APP_TITLE
    BINDINGS: list[Binding] = APP_BINDINGS

    # Type hint for settings attribute
    settings: AppSettings

    def __init__(
        self,
        namespace: str = "",
        context: str | None = None,
        config_path: Path | None = None,
        settings: AppSettings | None = None,
        data_source: ClusterDataSource | None = None,
        *args,
        **kwargs,
    ) -> None:
        super().__init__(*args, **kwargs)
        self.namespace = namespace
        self.context = context
        self.config_path = config_path
        self._data_source = data_source

        if settings is not None:
            self.settings = settings
        else:
            self._load_settings()

    def _load_settings(self) -> None:
        """Load application settings from the config file."""
        try:
            self.settings = ConfigManager.load(self.config_path)
        except ConfigLoadError as exc:
            # Use defaults if loading fails
            logger.warning("Using default settings: %s", exc)
            self.settings = AppSettings()

        # Apply CLI overrides if provided
        if self.context:
            self.settings.context = self.context

    @property
    def data_source(self) -> ClusterDataSource:
        if self._data_source is None:
            self._data_source = ClusterController.from_settings(self.settings)
        return self._data_source

    def on_mount(self) -> None:
        """Called when app is mounted."""
        from ktwins.screens import DashboardScreen

        self.push_screen(
            DashboardScreen(self.data_source, self.settings, namespace=self.namespace)
        )
