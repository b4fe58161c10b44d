"""Application settings models."""

from typing import Annotated

from pydantic import BaseModel, ConfigDict, Field

from kubedash.constants.defaults import (
    API_BASE_URL_DEFAULT,
    AUTO_REFRESH_DEFAULT,
    NAMESPACE_DEFAULT,
)
from kubedash.constants.enums import CacheKey
from kubedash.constants.limits import (
    MAX_RETRY_ATTEMPTS,
    POD_LOG_TAIL_LINES,
    REFRESH_INTERVAL_MIN,
    SERIES_CAPACITY,
)
from kubedash.constants.timeouts import (
    API_REQUEST_TIMEOUT,
    KUBERNETES_INFO_TTL,
    MANUAL_REFRESH_COOLDOWN,
    NAMESPACES_TTL,
    POD_STATUSES_TTL,
    REFRESH_INTERVAL_DEFAULT,
    RETRY_BASE_DELAY,
    SYSTEM_INFO_TTL,
)


def _default_cache_ttls() -> dict[CacheKey, float]:
    return {
        CacheKey.SYSTEM_INFO: SYSTEM_INFO_TTL,
        CacheKey.NAMESPACES: NAMESPACES_TTL,
        CacheKey.KUBERNETES_INFO: KUBERNETES_INFO_TTL,
        CacheKey.POD_STATUSES: POD_STATUSES_TTL,
    }


class DashboardSettings(BaseModel):
    """Dashboard settings model with validation."""

    model_config = ConfigDict(populate_by_name=True)

    # API
    api_base_url: str = API_BASE_URL_DEFAULT
    namespace: str = NAMESPACE_DEFAULT
    request_timeout: float = Field(default=API_REQUEST_TIMEOUT, gt=0)  # seconds, per attempt

    # Refresh cycle
    auto_refresh: bool = AUTO_REFRESH_DEFAULT
    refresh_interval: float = Field(default=REFRESH_INTERVAL_DEFAULT, ge=REFRESH_INTERVAL_MIN)
    manual_refresh_cooldown: float = Field(default=MANUAL_REFRESH_COOLDOWN, gt=0)

    # Retry
    max_retry_attempts: int = Field(default=MAX_RETRY_ATTEMPTS, ge=1)
    retry_base_delay: float = Field(default=RETRY_BASE_DELAY, ge=0)

    # Charts and logs
    series_capacity: int = Field(default=SERIES_CAPACITY, ge=1)
    pod_log_tail_lines: int = Field(default=POD_LOG_TAIL_LINES, ge=1)

    # Per-dataset freshness windows (seconds); missing keys keep their default
    cache_ttls: dict[CacheKey, Annotated[float, Field(gt=0)]] = Field(
        default_factory=_default_cache_ttls
    )


class ConfigError(Exception):
    """Base exception for configuration errors."""


class ConfigLoadError(ConfigError):
    """Raised when settings fail to load."""
