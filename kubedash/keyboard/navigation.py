"""Screen-specific keyboard bindings."""

from textual.binding import Binding

# ============================================================================
# Dashboard screen bindings
# ============================================================================

DASHBOARD_SCREEN_BINDINGS: list[Binding] = [
    Binding("r", "refresh", "Refresh"),
    Binding("a", "toggle_auto_refresh", "Auto-refresh"),
    Binding("n", "next_namespace", "Namespace"),
    Binding("h", "health_check", "Health"),
    Binding("p", "next_pod", "Pod"),
    Binding("l", "pod_logs", "Logs"),
    Binding("d", "deployments", "Deployments"),
    Binding("s", "services", "Services"),
    Binding("i", "image_scan", "Scan"),
]

__all__ = [
    "DASHBOARD_SCREEN_BINDINGS",
]
