"""Unit tests for ConfigManager and DashboardSettings.

This module tests:
- Defaults when no file exists
- YAML loading and validation errors
- KUBEDASH_* environment overrides
"""

from __future__ import annotations

from pathlib import Path

import pytest

from kubedash.constants.enums import CacheKey
from kubedash.models.cache import DataCache
from kubedash.models.state import ConfigError, ConfigLoadError, ConfigManager, DashboardSettings


def _write(path: Path, text: str) -> Path:
    path.write_text(text, encoding="utf-8")
    return path


class TestDashboardSettings:
    """Tests for settings defaults and bounds."""

    def test_defaults(self) -> None:
        settings = DashboardSettings()

        assert settings.api_base_url == "http://127.0.0.1:8001"
        assert settings.namespace == "default"
        assert settings.auto_refresh is False
        assert settings.refresh_interval == 10.0
        assert settings.manual_refresh_cooldown == 1.0
        assert settings.max_retry_attempts == 3
        assert settings.retry_base_delay == 1.0
        assert settings.series_capacity == 10
        assert settings.cache_ttls[CacheKey.NAMESPACES] == 30.0

    @pytest.mark.parametrize(
        "overrides",
        [
            {"refresh_interval": 0.5},
            {"max_retry_attempts": 0},
            {"series_capacity": 0},
            {"request_timeout": 0},
            {"cache_ttls": {"namespaces": 0}},
        ],
    )
    def test_bounds(self, overrides: dict) -> None:
        with pytest.raises(ValueError):
            DashboardSettings(**overrides)

    def test_config_load_error_is_config_error(self) -> None:
        assert issubclass(ConfigLoadError, ConfigError)


class TestConfigManagerLoad:
    """Tests for ConfigManager.load()."""

    def test_missing_file_gives_defaults(self, tmp_path: Path) -> None:
        settings = ConfigManager.load(tmp_path / "absent.yaml", environ={})
        assert settings == DashboardSettings()

    def test_empty_file_gives_defaults(self, tmp_path: Path) -> None:
        path = _write(tmp_path / "settings.yaml", "")
        assert ConfigManager.load(path, environ={}) == DashboardSettings()

    def test_reads_yaml(self, tmp_path: Path) -> None:
        path = _write(
            tmp_path / "settings.yaml",
            "api_base_url: http://dash.internal:9000\n"
            "namespace: prod\n"
            "auto_refresh: true\n"
            "refresh_interval: 30\n"
            "cache_ttls:\n"
            "  system_info: 2\n",
        )

        settings = ConfigManager.load(path, environ={})

        assert settings.api_base_url == "http://dash.internal:9000"
        assert settings.namespace == "prod"
        assert settings.auto_refresh is True
        assert settings.refresh_interval == 30.0
        assert settings.cache_ttls == {CacheKey.SYSTEM_INFO: 2.0}

    def test_partial_ttls_keep_other_defaults_in_cache(self, tmp_path: Path) -> None:
        path = _write(tmp_path / "settings.yaml", "cache_ttls:\n  pod_statuses: 20\n")

        cache = DataCache(ConfigManager.load(path, environ={}).cache_ttls)

        assert cache.ttl_for(CacheKey.POD_STATUSES) == 20.0
        assert cache.ttl_for(CacheKey.SYSTEM_INFO) == 5.0

    def test_env_overrides_file(self, tmp_path: Path) -> None:
        path = _write(tmp_path / "settings.yaml", "namespace: prod\n")
        environ = {
            "KUBEDASH_NAMESPACE": "staging",
            "KUBEDASH_REFRESH_INTERVAL": "15",
            "KUBEDASH_AUTO_REFRESH": "true",
            "KUBEDASH_API_BASE_URL": " http://env:8001 ",
        }

        settings = ConfigManager.load(path, environ=environ)

        assert settings.namespace == "staging"
        assert settings.refresh_interval == 15.0
        assert settings.auto_refresh is True
        assert settings.api_base_url == "http://env:8001"

    def test_blank_env_ignored(self, tmp_path: Path) -> None:
        path = _write(tmp_path / "settings.yaml", "namespace: prod\n")

        settings = ConfigManager.load(path, environ={"KUBEDASH_NAMESPACE": "  "})

        assert settings.namespace == "prod"

    def test_invalid_yaml(self, tmp_path: Path) -> None:
        path = _write(tmp_path / "settings.yaml", "namespace: [unclosed\n")

        with pytest.raises(ConfigLoadError, match="Failed to read"):
            ConfigManager.load(path, environ={})

    def test_non_mapping(self, tmp_path: Path) -> None:
        path = _write(tmp_path / "settings.yaml", "- a\n- b\n")

        with pytest.raises(ConfigLoadError, match="must contain a mapping"):
            ConfigManager.load(path, environ={})

    def test_invalid_value(self, tmp_path: Path) -> None:
        path = _write(tmp_path / "settings.yaml", "refresh_interval: 0\n")

        with pytest.raises(ConfigLoadError, match="Invalid settings"):
            ConfigManager.load(path, environ={})

    @pytest.mark.parametrize("ttl", ["0", "-5"])
    def test_non_positive_cache_ttl(self, tmp_path: Path, ttl: str) -> None:
        path = _write(tmp_path / "settings.yaml", f"cache_ttls:\n  system_info: {ttl}\n")

        with pytest.raises(ConfigLoadError, match="Invalid settings"):
            ConfigManager.load(path, environ={})

    def test_invalid_env_value(self, tmp_path: Path) -> None:
        with pytest.raises(ConfigLoadError):
            ConfigManager.load(
                tmp_path / "absent.yaml",
                environ={"KUBEDASH_REFRESH_INTERVAL": "soon"},
            )

    def test_default_path(self) -> None:
        path = ConfigManager.default_path()
        assert path.name == "settings.yaml"
        assert path.parent.name == "kubedash"
