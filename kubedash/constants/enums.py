"""All enum definitions for kubedash.

This module consolidates all enumerations used throughout the application.
"""

from enum import Enum

# =============================================================================
# Cache Enums
# =============================================================================


class CacheKey(Enum):
    """Logical datasets held in the response cache."""

    SYSTEM_INFO = "system_info"
    NAMESPACES = "namespaces"
    KUBERNETES_INFO = "kubernetes_info"
    POD_STATUSES = "pod_statuses"


# Datasets whose payload depends on the selected namespace
NAMESPACE_SCOPED_KEYS: frozenset[CacheKey] = frozenset(
    {CacheKey.KUBERNETES_INFO, CacheKey.POD_STATUSES}
)


# =============================================================================
# Series Enums
# =============================================================================


class MetricName(Enum):
    """Metric streams that own a rolling chart buffer."""

    CPU = "cpu"
    MEMORY = "memory"
    STORAGE = "storage"


# =============================================================================
# Status Enums
# =============================================================================


class PodPhase(Enum):
    """Pod status categories counted by the classifier."""

    RUNNING = "running"
    PENDING = "pending"
    FAILED = "failed"


class HealthState(Enum):
    """Cluster health check outcome."""

    HEALTHY = "healthy"
    UNHEALTHY = "unhealthy"
    UNKNOWN = "unknown"


# =============================================================================
# Scheduler Enums
# =============================================================================


class SchedulerState(Enum):
    """Refresh scheduler lifecycle state."""

    IDLE = "idle"
    SCHEDULED = "scheduled"
    MANUAL_COOLDOWN = "manual_cooldown"


# =============================================================================
# Notification Enums
# =============================================================================


class NotifyLevel(Enum):
    """Notification levels understood by the notification collaborator."""

    INFO = "info"
    SUCCESS = "success"
    WARNING = "warning"
    ERROR = "error"


__all__ = [
    "NAMESPACE_SCOPED_KEYS",
    "CacheKey",
    "HealthState",
    "MetricName",
    "NotifyLevel",
    "PodPhase",
    "SchedulerState",
]
