"""Constants module for kubedash.

Centralized constants organized by domain:
- enums.py: All Enum class definitions
- values.py: Scalar constants (strings with Final)
- timeouts.py: Timeout, interval and TTL values (seconds)
- limits.py: Limit values (max/min, capacities)
- defaults.py: Default values for settings
"""

from kubedash.constants.defaults import (
    API_BASE_URL_DEFAULT,
    AUTO_REFRESH_DEFAULT,
    CONFIG_PATH_DEFAULT,
    NAMESPACE_DEFAULT,
)
from kubedash.constants.enums import (
    NAMESPACE_SCOPED_KEYS,
    CacheKey,
    HealthState,
    MetricName,
    NotifyLevel,
    PodPhase,
    SchedulerState,
)
from kubedash.constants.limits import (
    MAX_RETRY_ATTEMPTS,
    POD_LOG_TAIL_LINES,
    REFRESH_INTERVAL_MIN,
    SERIES_CAPACITY,
)
from kubedash.constants.timeouts import (
    API_REQUEST_TIMEOUT,
    MANUAL_REFRESH_COOLDOWN,
    REFRESH_INTERVAL_DEFAULT,
    RETRY_BASE_DELAY,
)
from kubedash.constants.values import APP_TITLE

__all__ = [
    # Defaults
    "API_BASE_URL_DEFAULT",
    # Timeouts
    "API_REQUEST_TIMEOUT",
    # Application
    "APP_TITLE",
    "AUTO_REFRESH_DEFAULT",
    "CONFIG_PATH_DEFAULT",
    "MANUAL_REFRESH_COOLDOWN",
    # Limits
    "MAX_RETRY_ATTEMPTS",
    # Enums
    "NAMESPACE_DEFAULT",
    "NAMESPACE_SCOPED_KEYS",
    "POD_LOG_TAIL_LINES",
    "REFRESH_INTERVAL_DEFAULT",
    "REFRESH_INTERVAL_MIN",
    "RETRY_BASE_DELAY",
    "SERIES_CAPACITY",
    "CacheKey",
    "HealthState",
    "MetricName",
    "NotifyLevel",
    "PodPhase",
    "SchedulerState",
]
