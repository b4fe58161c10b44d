"""Screens for kubedash."""

from kubedash.screens.dashboard import DashboardPresenter, DashboardScreen

__all__ = [
    "DashboardPresenter",
    "DashboardScreen",
]
