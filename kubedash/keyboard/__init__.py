"""Keyboard bindings module.

Bindings are organized into two categories:

- app: App-level bindings (APP_BINDINGS)
- navigation: Screen-specific bindings (*_SCREEN_BINDINGS)
"""

from kubedash.keyboard.app import APP_BINDINGS
from kubedash.keyboard.navigation import DASHBOARD_SCREEN_BINDINGS

__all__ = [
    "APP_BINDINGS",
    "DASHBOARD_SCREEN_BINDINGS",
]
