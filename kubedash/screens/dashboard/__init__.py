"""Dashboard screen package."""

from kubedash.screens.dashboard.dashboard_screen import DashboardScreen
from kubedash.screens.dashboard.presenter import DashboardPresenter

__all__ = [
    "DashboardPresenter",
    "DashboardScreen",
]
