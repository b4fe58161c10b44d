"""Settings loading from a YAML file with environment overrides."""

from __future__ import annotations

import logging
import os
from collections.abc import Mapping
from pathlib import Path
from typing import Any

import yaml
from pydantic import ValidationError

from kubedash.constants.defaults import CONFIG_PATH_DEFAULT, ENV_PREFIX
from kubedash.models.state.app_settings import (
    ConfigError,
    ConfigLoadError,
    DashboardSettings,
)

logger = logging.getLogger(__name__)


class ConfigManager:
    """Loads ``DashboardSettings`` from disk and the environment."""

    # Environment variable suffix -> settings field
    ENV_FIELDS = {
        "API_BASE_URL": "api_base_url",
        "NAMESPACE": "namespace",
        "REFRESH_INTERVAL": "refresh_interval",
        "AUTO_REFRESH": "auto_refresh",
    }

    @staticmethod
    def default_path() -> Path:
        return Path(CONFIG_PATH_DEFAULT).expanduser()

    @classmethod
    def load(
        cls,
        path: Path | str | None = None,
        *,
        environ: Mapping[str, str] | None = None,
    ) -> DashboardSettings:
        """Load settings, layering environment overrides over the file.

        A missing file is not an error; defaults are used.

        Args:
            path: YAML settings file. Defaults to ``~/.config/kubedash/settings.yaml``.
            environ: Environment mapping; defaults to ``os.environ``.

        Returns:
            Validated settings.

        Raises:
            ConfigLoadError: If the file is unreadable, not a YAML mapping,
                or holds invalid values.
        """
        config_path = Path(path).expanduser() if path is not None else cls.default_path()
        raw = cls._read_file(config_path)
        raw.update(cls._env_overrides(os.environ if environ is None else environ))

        try:
            settings = DashboardSettings.model_validate(raw)
        except ValidationError as exc:
            raise ConfigLoadError(f"Invalid settings in {config_path}: {exc}") from exc

        logger.debug("Loaded settings from %s", config_path)
        return settings

    @staticmethod
    def _read_file(config_path: Path) -> dict[str, Any]:
        if not config_path.exists():
            logger.debug("Settings file %s not found, using defaults", config_path)
            return {}
        try:
            with config_path.open(encoding="utf-8") as handle:
                data = yaml.safe_load(handle)
        except (OSError, yaml.YAMLError) as exc:
            raise ConfigLoadError(f"Failed to read {config_path}: {exc}") from exc

        if data is None:
            return {}
        if not isinstance(data, dict):
            raise ConfigLoadError(f"Settings file {config_path} must contain a mapping")
        return data

    @classmethod
    def _env_overrides(cls, environ: Mapping[str, str]) -> dict[str, Any]:
        overrides: dict[str, Any] = {}
        for suffix, field_name in cls.ENV_FIELDS.items():
            value = environ.get(f"{ENV_PREFIX}{suffix}")
            if value is not None and value.strip():
                overrides[field_name] = value.strip()
        return overrides


__all__ = [
    "ConfigError",
    "ConfigLoadError",
    "ConfigManager",
    "DashboardSettings",
]
