"""Main application class for KubeDash TUI."""

from __future__ import annotations

import logging
from pathlib import Path

from textual.app import App
from textual.binding import Binding

from kubedash.constants import APP_TITLE
from kubedash.controllers.dashboard import DashboardController
from kubedash.keyboard.app import APP_BINDINGS
from kubedash.models.state.config_manager import (
    ConfigLoadError,
    ConfigManager,
    DashboardSettings,
)

logger = logging.getLogger(__name__)


class DashboardApp(App[None]):
    """Main TUI application for KubeDash."""

    TITLE = APP_TITLE
    BINDINGS: list[Binding] = APP_BINDINGS

    # Type hint for settings attribute
    settings: DashboardSettings
    controller: DashboardController

    def __init__(
        self,
        config_path: Path | None = None,
        api_base_url: str | None = None,
        namespace: str | None = None,
        auto_refresh: bool | None = None,
        refresh_interval: float | None = None,
        settings: DashboardSettings | None = None,
        controller: DashboardController | None = None,
        *args,
        **kwargs,
    ) -> None:
        super().__init__(*args, **kwargs)
        self.config_path = config_path
        # auto_refresh is already a Textual MessagePump property
        self._cli_overrides = {
            "api_base_url": api_base_url,
            "namespace": namespace,
            "auto_refresh": auto_refresh,
            "refresh_interval": refresh_interval,
        }

        if settings is not None:
            self.settings = settings
        else:
            self._load_settings()
        self._apply_overrides()

        self.controller = controller or DashboardController.from_settings(self.settings)
        self.sub_title = self.settings.api_base_url

    def _load_settings(self) -> None:
        """Load settings from the config file and environment."""
        try:
            self.settings = ConfigManager.load(self.config_path)
        except ConfigLoadError as exc:
            # Use defaults if loading fails
            logger.warning("Falling back to default settings: %s", exc)
            self.settings = DashboardSettings()

    def _apply_overrides(self) -> None:
        """Apply CLI overrides on top of loaded settings."""
        updates = {
            key: value for key, value in self._cli_overrides.items() if value is not None
        }
        if updates:
            # Re-validate so overrides obey the same bounds as the file
            self.settings = DashboardSettings.model_validate(
                {**self.settings.model_dump(), **updates}
            )

    def on_mount(self) -> None:
        """Called when app is mounted."""
        from kubedash.screens import DashboardScreen

        self.push_screen(DashboardScreen(self.controller))

    async def on_unmount(self) -> None:
        """Stop timers and close the HTTP client when the app exits."""
        await self.controller.aclose()


__all__ = [
    "DashboardApp",
]
