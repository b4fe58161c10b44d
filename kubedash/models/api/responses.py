"""Response models for the dashboard REST API."""

from typing import Any

from pydantic import BaseModel, Field, field_validator


class UsageInfo(BaseModel):
    """Usage block carrying a utilization percentage."""

    percent: float
    total: float | None = None
    used: float | None = None


class SystemInfo(BaseModel):
    """Host utilization returned by ``GET /system_info``."""

    cpu_percent: float
    memory_usage: UsageInfo
    disk_usage: UsageInfo


class KubernetesInfo(BaseModel):
    """Resource counts for a namespace from ``GET /kubernetes_info``."""

    num_deployments: int = 0
    num_pods: int = 0
    num_services: int = 0


class PodSummary(BaseModel):
    """One pod row from ``GET /pods``."""

    name: str
    status: str
    namespace: str | None = None


class DeploymentInfo(BaseModel):
    """One deployment row from ``GET /kubernetes_deployments``."""

    name: str
    replicas: int = 0
    ready_replicas: int = 0
    strategy: str = ""

    @field_validator("replicas", "ready_replicas", mode="before")
    @classmethod
    def _none_as_zero(cls, value: Any) -> Any:
        # Kubernetes omits replica counts that are zero
        return 0 if value is None else value

    @property
    def is_ready(self) -> bool:
        return self.ready_replicas == self.replicas


class ServicePort(BaseModel):
    """A single exposed service port."""

    port: int
    protocol: str = "TCP"


class ServiceInfo(BaseModel):
    """One service row from ``GET /kubernetes_services``."""

    name: str
    type: str = ""
    cluster_ip: str | None = None
    ports: list[ServicePort] = Field(default_factory=list)

    @property
    def ports_label(self) -> str:
        return ", ".join(f"{p.port}/{p.protocol}" for p in self.ports)


class PodLogs(BaseModel):
    """Tail of a pod's logs from ``GET /pod_logs``."""

    logs: list[str] | None = None
    error: str | None = None

    @property
    def text(self) -> str:
        if self.logs is not None:
            return "\n".join(self.logs)
        if self.error:
            return f"Error fetching logs: {self.error}"
        return "No logs available for this pod"


class HealthStatus(BaseModel):
    """Payload of ``GET /health``."""

    status: str

    @property
    def is_ok(self) -> bool:
        return self.status == "ok"


class ScanResult(BaseModel):
    """Payload of ``POST /scan_image``."""

    scan_results: Any = None
    error: str | None = None


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
