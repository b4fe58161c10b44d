"""Dashboard screen configuration - widget IDs and display labels."""

from __future__ import annotations

from kubedash.constants.enums import MetricName, NotifyLevel, PodPhase

# =============================================================================
# Widget IDs
# =============================================================================

NAMESPACE_LABEL_ID = "namespace-label"
AUTO_REFRESH_LABEL_ID = "auto-refresh-label"
RESOURCES_ID = "resources-summary"
POD_TALLY_ID = "pod-tally"
HEALTH_ID = "health-status"
NOTIFICATIONS_LOG_ID = "notifications-log"

DETAILS_TABS_ID = "details-tabs"
NOTIFICATIONS_TAB_ID = "tab-notifications"
POD_LOGS_TAB_ID = "tab-pod-logs"
DEPLOYMENTS_TAB_ID = "tab-deployments"
SERVICES_TAB_ID = "tab-services"
SCAN_TAB_ID = "tab-image-scan"

POD_LOGS_TITLE_ID = "pod-logs-title"
POD_LOGS_ID = "pod-logs"
DEPLOYMENTS_TABLE_ID = "deployments-table"
SERVICES_TABLE_ID = "services-table"
SCAN_INPUT_ID = "image-scan-input"
SCAN_RESULTS_ID = "image-scan-results"


def metric_value_id(metric: MetricName) -> str:
    return f"metric-{metric.value}-value"


def metric_plot_id(metric: MetricName) -> str:
    return f"metric-{metric.value}-plot"


# =============================================================================
# Labels
# =============================================================================

METRIC_TITLES: dict[MetricName, str] = {
    MetricName.CPU: "CPU Usage",
    MetricName.MEMORY: "Memory Usage",
    MetricName.STORAGE: "Storage Usage",
}

METRIC_COLORS: dict[MetricName, str] = {
    MetricName.CPU: "cyan",
    MetricName.MEMORY: "magenta",
    MetricName.STORAGE: "green",
}

POD_PHASE_LABELS: dict[PodPhase, str] = {
    PodPhase.RUNNING: "Running",
    PodPhase.PENDING: "Pending",
    PodPhase.FAILED: "Failed",
}

POD_PHASE_COLORS: dict[PodPhase, str] = {
    PodPhase.RUNNING: "green",
    PodPhase.PENDING: "yellow",
    PodPhase.FAILED: "red",
}

# Textual's notify() knows three severities
NOTIFY_SEVERITY: dict[NotifyLevel, str] = {
    NotifyLevel.INFO: "information",
    NotifyLevel.SUCCESS: "information",
    NotifyLevel.WARNING: "warning",
    NotifyLevel.ERROR: "error",
}

NOTIFY_COLORS: dict[NotifyLevel, str] = {
    NotifyLevel.INFO: "cyan",
    NotifyLevel.SUCCESS: "green",
    NotifyLevel.WARNING: "yellow",
    NotifyLevel.ERROR: "red",
}

# =============================================================================
# Tables
# =============================================================================

DEPLOYMENT_COLUMNS: tuple[str, ...] = ("Name", "Replicas", "Strategy", "Status")
SERVICE_COLUMNS: tuple[str, ...] = ("Name", "Type", "Cluster IP", "Ports")

SCAN_INPUT_PLACEHOLDER = "repository/image:tag"
