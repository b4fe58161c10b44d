"""Dashboard domain: refresh-cycle orchestration."""

from kubedash.controllers.dashboard.controller import (
    DashboardController,
    DashboardSnapshot,
    Notifier,
    Renderer,
)

__all__ = [
    "DashboardController",
    "DashboardSnapshot",
    "Notifier",
    "Renderer",
]
