"""Settings state models."""

from kubedash.models.state.app_settings import (
    ConfigError,
    ConfigLoadError,
    DashboardSettings,
)
from kubedash.models.state.config_manager import ConfigManager

__all__ = [
    "ConfigError",
    "ConfigLoadError",
    "ConfigManager",
    "DashboardSettings",
]
