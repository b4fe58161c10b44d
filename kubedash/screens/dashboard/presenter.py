"""Dashboard screen presenter - formatting of snapshots for display."""

from __future__ import annotations

import json
from collections.abc import Sequence

from rich.markup import escape

from kubedash.constants.enums import CacheKey, HealthState, MetricName, NotifyLevel, PodPhase
from kubedash.constants.limits import PERCENT_MAX, PERCENT_MIN
from kubedash.constants.values import HEALTHY, PLACEHOLDER_VALUE, UNHEALTHY, UNKNOWN
from kubedash.controllers.dashboard import DashboardSnapshot
from kubedash.controllers.pods.parsers import PodStatusTally
from kubedash.models.api import (
    DeploymentInfo,
    KubernetesInfo,
    ScanResult,
    ServiceInfo,
    SystemInfo,
)
from kubedash.models.series import TimeSeriesPoint
from kubedash.screens.dashboard.config import (
    METRIC_TITLES,
    NOTIFY_COLORS,
    POD_PHASE_COLORS,
    POD_PHASE_LABELS,
)


class DashboardPresenter:
    """Turns controller snapshots into display strings for DashboardScreen."""

    @staticmethod
    def format_percent(value: float | None) -> str:
        if value is None:
            return PLACEHOLDER_VALUE
        return f"{round(value)}%"

    @staticmethod
    def metric_value(info: SystemInfo | None, metric: MetricName) -> float | None:
        if info is None:
            return None
        if metric is MetricName.CPU:
            return info.cpu_percent
        if metric is MetricName.MEMORY:
            return info.memory_usage.percent
        return info.disk_usage.percent

    def metric_line(
        self, snapshot: DashboardSnapshot, metric: MetricName
    ) -> str:
        """Title and latest value, marked stale when the last fetch failed."""
        value = self.format_percent(self.metric_value(snapshot.system_info, metric))
        line = f"{METRIC_TITLES[metric]}: [b]{value}[/b]"
        if self.is_stale(snapshot, CacheKey.SYSTEM_INFO):
            line += " [dim](stale)[/dim]"
        return line

    @staticmethod
    def chart_values(points: Sequence[TimeSeriesPoint]) -> list[float]:
        """Chart values clamped to the percentage range."""
        return [min(max(point.value, PERCENT_MIN), PERCENT_MAX) for point in points]

    @staticmethod
    def chart_ticks(
        points: Sequence[TimeSeriesPoint], max_ticks: int = 6
    ) -> tuple[list[int], list[str]]:
        """Evenly spaced x-axis positions labelled with sample times."""
        if not points:
            return [], []
        count = min(max_ticks, len(points))
        if count == 1:
            indexes = [0]
        else:
            indexes = sorted(
                {round(i * (len(points) - 1) / (count - 1)) for i in range(count)}
            )
        return indexes, [points[index].label for index in indexes]

    @staticmethod
    def is_stale(snapshot: DashboardSnapshot, key: CacheKey) -> bool:
        result = snapshot.results.get(key)
        return result is not None and result.stale

    def resources_text(self, snapshot: DashboardSnapshot) -> str:
        info: KubernetesInfo | None = snapshot.kubernetes_info
        if info is None:
            counts = (PLACEHOLDER_VALUE,) * 3
        else:
            counts = (str(info.num_deployments), str(info.num_pods), str(info.num_services))
        text = (
            f"Deployments: [b]{counts[0]}[/b]  "
            f"Pods: [b]{counts[1]}[/b]  "
            f"Services: [b]{counts[2]}[/b]"
        )
        if self.is_stale(snapshot, CacheKey.KUBERNETES_INFO):
            text += " [dim](stale)[/dim]"
        return text

    @staticmethod
    def pod_tally_text(tally: PodStatusTally) -> str:
        counts = tally.as_dict()
        return "  ".join(
            f"[{POD_PHASE_COLORS[phase]}]{POD_PHASE_LABELS[phase]}: "
            f"{counts[phase.value]}[/{POD_PHASE_COLORS[phase]}]"
            for phase in PodPhase
        )

    @staticmethod
    def namespace_text(snapshot: DashboardSnapshot) -> str:
        available = len(snapshot.namespaces)
        return f"Namespace: [b]{escape(snapshot.namespace)}[/b] ({available} available)"

    @staticmethod
    def auto_refresh_text(enabled: bool, period: float) -> str:
        if enabled:
            return f"Auto-refresh: [green]on[/green] ({period:g}s)"
        return "Auto-refresh: [dim]off[/dim]"

    @staticmethod
    def health_text(state: HealthState) -> str:
        if state is HealthState.HEALTHY:
            return f"Cluster: {HEALTHY}"
        if state is HealthState.UNHEALTHY:
            return f"Cluster: {UNHEALTHY}"
        return f"Cluster: {UNKNOWN}"

    @staticmethod
    def notification_text(message: str, level: NotifyLevel) -> str:
        color = NOTIFY_COLORS[level]
        return f"[{color}]{level.value.upper()}[/{color}] {escape(message)}"

    @staticmethod
    def next_item(current: str | None, items: Sequence[str]) -> str | None:
        """Item after ``current`` in the list, wrapping; None if none other.

        Used to cycle both namespaces and pods.
        """
        if not items:
            return None
        if current not in items:
            return items[0]
        if len(items) == 1:
            return None
        index = list(items).index(current)
        return items[(index + 1) % len(items)]

    # =========================================================================
    # On-demand sections
    # =========================================================================

    @staticmethod
    def pod_logs_title(pod_name: str | None) -> str:
        if not pod_name:
            return "Pod logs: [dim]no pod selected[/dim] (p to select)"
        return f"Pod logs: [b]{escape(pod_name)}[/b]"

    @staticmethod
    def deployment_rows(deployments: Sequence[DeploymentInfo]) -> list[tuple[str, ...]]:
        return [
            (
                deployment.name,
                f"{deployment.ready_replicas}/{deployment.replicas}",
                deployment.strategy or PLACEHOLDER_VALUE,
                "Ready" if deployment.is_ready else "Updating",
            )
            for deployment in deployments
        ]

    @staticmethod
    def service_rows(services: Sequence[ServiceInfo]) -> list[tuple[str, ...]]:
        return [
            (
                service.name,
                service.type or PLACEHOLDER_VALUE,
                service.cluster_ip or "None",
                service.ports_label or PLACEHOLDER_VALUE,
            )
            for service in services
        ]

    @staticmethod
    def scan_text(result: ScanResult) -> str:
        """Scan output pretty-printed as JSON, or the error the scanner gave."""
        if result.error:
            return f"Error: {result.error}"
        payload = result.scan_results
        if isinstance(payload, str):
            try:
                payload = json.loads(payload)
            except ValueError:
                return result.scan_results
        return json.dumps(payload, indent=2)


__all__ = [
    "DashboardPresenter",
]
