"""API response models."""

from kubedash.models.api.responses import (
    DeploymentInfo,
    HealthStatus,
    KubernetesInfo,
    PodLogs,
    PodSummary,
    ScanResult,
    ServiceInfo,
    ServicePort,
    SystemInfo,
    UsageInfo,
)

__all__ = [
    "DeploymentInfo",
    "HealthStatus",
    "KubernetesInfo",
    "PodLogs",
    "PodSummary",
    "ScanResult",
    "ServiceInfo",
    "ServicePort",
    "SystemInfo",
    "UsageInfo",
]
