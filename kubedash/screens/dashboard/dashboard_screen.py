"""Dashboard screen - live metrics, pod status and on-demand cluster sections."""

from __future__ import annotations

import logging
from contextlib import suppress
from functools import partial

from textual.app import ComposeResult
from textual.binding import Binding
from textual.containers import Horizontal, Vertical
from textual.css.query import NoMatches, WrongType
from textual.screen import Screen
from textual.widgets import (
    DataTable,
    Footer,
    Header,
    Input,
    RichLog,
    Static,
    TabbedContent,
    TabPane,
)
from textual_plotext import PlotextPlot

from kubedash.constants.enums import HealthState, MetricName, NotifyLevel
from kubedash.constants.limits import PERCENT_MAX, PERCENT_MIN
from kubedash.controllers.dashboard import DashboardController, DashboardSnapshot
from kubedash.keyboard import DASHBOARD_SCREEN_BINDINGS
from kubedash.models.series import TimeSeriesPoint
from kubedash.screens.dashboard.config import (
    AUTO_REFRESH_LABEL_ID,
    DEPLOYMENT_COLUMNS,
    DEPLOYMENTS_TAB_ID,
    DEPLOYMENTS_TABLE_ID,
    DETAILS_TABS_ID,
    HEALTH_ID,
    METRIC_COLORS,
    METRIC_TITLES,
    NAMESPACE_LABEL_ID,
    NOTIFICATIONS_LOG_ID,
    NOTIFICATIONS_TAB_ID,
    NOTIFY_SEVERITY,
    POD_LOGS_ID,
    POD_LOGS_TAB_ID,
    POD_LOGS_TITLE_ID,
    POD_TALLY_ID,
    RESOURCES_ID,
    SCAN_INPUT_ID,
    SCAN_INPUT_PLACEHOLDER,
    SCAN_RESULTS_ID,
    SCAN_TAB_ID,
    SERVICE_COLUMNS,
    SERVICES_TAB_ID,
    SERVICES_TABLE_ID,
    metric_plot_id,
    metric_value_id,
)
from kubedash.screens.dashboard.presenter import DashboardPresenter

logger = logging.getLogger(__name__)


class DashboardScreen(Screen[None]):
    """Main dashboard screen fed by a DashboardController."""

    BINDINGS: list[Binding] = DASHBOARD_SCREEN_BINDINGS

    DEFAULT_CSS = """
    DashboardScreen {
        layout: vertical;
    }

    #status-bar {
        height: 1;
        padding: 0 1;
    }

    #status-bar Static {
        width: 1fr;
    }

    #metrics-row {
        height: 14;
    }

    .metric-card {
        width: 1fr;
        border: round $primary;
        padding: 0 1;
    }

    .metric-card Static {
        height: 1;
    }

    .metric-card PlotextPlot {
        height: 1fr;
    }

    .summary-line {
        height: 1;
        padding: 0 1;
    }

    #details-tabs {
        height: 1fr;
    }

    #details-tabs RichLog, #details-tabs DataTable {
        height: 1fr;
    }

    #pod-logs-title {
        height: 1;
        padding: 0 1;
    }
    """

    def __init__(self, controller: DashboardController) -> None:
        super().__init__()
        self._controller = controller
        self._presenter = DashboardPresenter()
        self._selected_pod: str | None = None

    @property
    def controller(self) -> DashboardController:
        return self._controller

    def compose(self) -> ComposeResult:
        yield Header()
        yield Horizontal(
            Static("", id=NAMESPACE_LABEL_ID),
            Static("", id=AUTO_REFRESH_LABEL_ID),
            Static(self._presenter.health_text(HealthState.UNKNOWN), id=HEALTH_ID),
            id="status-bar",
        )
        yield Horizontal(
            *(
                Vertical(
                    Static("", id=metric_value_id(metric)),
                    PlotextPlot(id=metric_plot_id(metric)),
                    classes="metric-card",
                )
                for metric in MetricName
            ),
            id="metrics-row",
        )
        yield Static("", id=RESOURCES_ID, classes="summary-line")
        yield Static("", id=POD_TALLY_ID, classes="summary-line")
        with TabbedContent(id=DETAILS_TABS_ID, initial=NOTIFICATIONS_TAB_ID):
            with TabPane("Notifications", id=NOTIFICATIONS_TAB_ID):
                yield RichLog(id=NOTIFICATIONS_LOG_ID, markup=True, wrap=True)
            with TabPane("Pod Logs", id=POD_LOGS_TAB_ID):
                yield Static(self._presenter.pod_logs_title(None), id=POD_LOGS_TITLE_ID)
                yield RichLog(id=POD_LOGS_ID, wrap=True)
            with TabPane("Deployments", id=DEPLOYMENTS_TAB_ID):
                yield DataTable(id=DEPLOYMENTS_TABLE_ID, zebra_stripes=True)
            with TabPane("Services", id=SERVICES_TAB_ID):
                yield DataTable(id=SERVICES_TABLE_ID, zebra_stripes=True)
            with TabPane("Image Scan", id=SCAN_TAB_ID):
                yield Input(placeholder=SCAN_INPUT_PLACEHOLDER, id=SCAN_INPUT_ID)
                yield RichLog(id=SCAN_RESULTS_ID, wrap=True)
        yield Footer()

    def on_mount(self) -> None:
        """Wire collaborators and start the first refresh cycle."""
        self._controller.bind(render=self.render_snapshot, notify=self.show_notification)
        self._update_auto_refresh_label()
        self.run_worker(
            self._controller.refresh_cycle,
            name="initial-refresh",
            exit_on_error=False,
        )
        if self._controller.settings.auto_refresh:
            self._controller.on_tick()
            self._update_auto_refresh_label()

    def on_unmount(self) -> None:
        """Stop every refresh timer when the screen goes away."""
        self._controller.teardown()
        logger.debug("Dashboard screen unmounted, refresh timers stopped")

    # =========================================================================
    # Rendering collaborators
    # =========================================================================

    def render_snapshot(self, snapshot: DashboardSnapshot) -> None:
        with suppress(NoMatches, WrongType):
            self.query_one(f"#{NAMESPACE_LABEL_ID}", Static).update(
                self._presenter.namespace_text(snapshot)
            )
            for metric in MetricName:
                self.query_one(f"#{metric_value_id(metric)}", Static).update(
                    self._presenter.metric_line(snapshot, metric)
                )
                self._render_metric_plot(metric, snapshot.series.get(metric, ()))
            self.query_one(f"#{RESOURCES_ID}", Static).update(
                self._presenter.resources_text(snapshot)
            )
            self.query_one(f"#{POD_TALLY_ID}", Static).update(
                self._presenter.pod_tally_text(snapshot.pod_tally)
            )

    def _render_metric_plot(
        self, metric: MetricName, points: tuple[TimeSeriesPoint, ...]
    ) -> None:
        plot = self.query_one(f"#{metric_plot_id(metric)}", PlotextPlot)
        plt = plot.plt
        plt.clear_data()
        plt.title(METRIC_TITLES[metric])
        plt.ylim(PERCENT_MIN, PERCENT_MAX)
        values = self._presenter.chart_values(points)
        if values:
            x_values = list(range(len(values)))
            tick_indexes, tick_labels = self._presenter.chart_ticks(points)
            plt.xticks(tick_indexes, tick_labels)
            # "dot" keeps the line thin; the scatter overlay marks each sample
            plt.plot(x_values, values, color=METRIC_COLORS[metric], marker="dot")
            plt.scatter(x_values, values, color=METRIC_COLORS[metric], marker="◆")
        plot.refresh()

    def show_notification(self, message: str, level: NotifyLevel) -> None:
        with suppress(NoMatches, WrongType):
            self.query_one(f"#{NOTIFICATIONS_LOG_ID}", RichLog).write(
                self._presenter.notification_text(message, level)
            )
        self.app.notify(message, severity=NOTIFY_SEVERITY[level])  # type: ignore[arg-type]

    def _update_auto_refresh_label(self) -> None:
        scheduler = self._controller.scheduler
        with suppress(NoMatches, WrongType):
            self.query_one(f"#{AUTO_REFRESH_LABEL_ID}", Static).update(
                self._presenter.auto_refresh_text(scheduler.auto_enabled, scheduler.period)
            )

    # =========================================================================
    # Actions
    # =========================================================================

    def action_refresh(self) -> None:
        self._controller.force_refresh()

    def action_toggle_auto_refresh(self) -> None:
        self._controller.set_auto_refresh(not self._controller.scheduler.auto_enabled)
        self._update_auto_refresh_label()

    def action_next_namespace(self) -> None:
        snapshot = self._controller.last_snapshot
        namespaces = snapshot.namespaces if snapshot is not None else []
        target = self._presenter.next_item(self._controller.namespace, namespaces)
        if target is None:
            self.show_notification("No other namespace available", NotifyLevel.WARNING)
            return
        self._controller.set_namespace(target)
        self._select_pod(None)
        # Not debounced: the switch emptied the namespace-scoped cache
        self.run_worker(
            self._controller.refresh_cycle,
            name="namespace-refresh",
            exit_on_error=False,
        )

    def action_health_check(self) -> None:
        self.run_worker(self._run_health_check, name="health-check", exit_on_error=False)

    async def _run_health_check(self) -> None:
        state = await self._controller.check_health()
        with suppress(NoMatches, WrongType):
            self.query_one(f"#{HEALTH_ID}", Static).update(
                self._presenter.health_text(state)
            )

    def action_next_pod(self) -> None:
        target = self._presenter.next_item(self._selected_pod, self._controller.pod_names)
        if target is None:
            self.show_notification("No other pod available", NotifyLevel.WARNING)
            return
        self._select_pod(target)
        self._show_tab(POD_LOGS_TAB_ID)

    def action_pod_logs(self) -> None:
        if self._selected_pod is None:
            self._select_pod(self._presenter.next_item(None, self._controller.pod_names))
        self.run_worker(
            partial(self._run_pod_logs, self._selected_pod or ""),
            name="pod-logs",
            exit_on_error=False,
        )

    async def _run_pod_logs(self, pod_name: str) -> None:
        logs = await self._controller.fetch_pod_logs(pod_name)
        if logs is None:
            return
        with suppress(NoMatches, WrongType):
            log = self.query_one(f"#{POD_LOGS_ID}", RichLog)
            log.clear()
            log.write(logs.text)
        self._show_tab(POD_LOGS_TAB_ID)

    def action_deployments(self) -> None:
        self.run_worker(self._run_deployments, name="deployments", exit_on_error=False)

    async def _run_deployments(self) -> None:
        deployments = await self._controller.fetch_deployments()
        if deployments is None:
            return
        if not deployments:
            self.show_notification("No deployments found", NotifyLevel.INFO)
        self._fill_table(
            DEPLOYMENTS_TABLE_ID,
            DEPLOYMENT_COLUMNS,
            self._presenter.deployment_rows(deployments),
        )
        self._show_tab(DEPLOYMENTS_TAB_ID)

    def action_services(self) -> None:
        self.run_worker(self._run_services, name="services", exit_on_error=False)

    async def _run_services(self) -> None:
        services = await self._controller.fetch_services()
        if services is None:
            return
        if not services:
            self.show_notification("No services found", NotifyLevel.INFO)
        self._fill_table(
            SERVICES_TABLE_ID,
            SERVICE_COLUMNS,
            self._presenter.service_rows(services),
        )
        self._show_tab(SERVICES_TAB_ID)

    def action_image_scan(self) -> None:
        self._show_tab(SCAN_TAB_ID)
        with suppress(NoMatches, WrongType):
            self.query_one(f"#{SCAN_INPUT_ID}", Input).focus()

    def on_input_submitted(self, event: Input.Submitted) -> None:
        if event.input.id != SCAN_INPUT_ID:
            return
        self.run_worker(
            partial(self._run_image_scan, event.value),
            name="image-scan",
            exit_on_error=False,
        )

    async def _run_image_scan(self, image_name: str) -> None:
        result = await self._controller.scan_image(image_name)
        if result is None:
            return
        with suppress(NoMatches, WrongType):
            log = self.query_one(f"#{SCAN_RESULTS_ID}", RichLog)
            log.clear()
            log.write(self._presenter.scan_text(result))

    # =========================================================================
    # Section helpers
    # =========================================================================

    def _select_pod(self, pod_name: str | None) -> None:
        self._selected_pod = pod_name
        with suppress(NoMatches, WrongType):
            self.query_one(f"#{POD_LOGS_TITLE_ID}", Static).update(
                self._presenter.pod_logs_title(pod_name)
            )

    def _show_tab(self, tab_id: str) -> None:
        with suppress(NoMatches, WrongType):
            self.query_one(f"#{DETAILS_TABS_ID}", TabbedContent).active = tab_id

    def _fill_table(
        self,
        table_id: str,
        columns: tuple[str, ...],
        rows: list[tuple[str, ...]],
    ) -> None:
        with suppress(NoMatches, WrongType):
            table = self.query_one(f"#{table_id}", DataTable)
            table.clear(columns=True)
            table.add_columns(*columns)
            table.add_rows(rows)


__all__ = [
    "DashboardScreen",
]
