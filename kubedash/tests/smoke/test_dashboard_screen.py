"""Smoke tests for DashboardScreen - composition, bindings and actions.

Note: Tests avoid app.run_test() to keep them fast and deterministic.
Actions are exercised against a mocked controller.
"""

from __future__ import annotations

import inspect
from types import SimpleNamespace
from typing import Any, cast
from unittest.mock import AsyncMock, MagicMock

import pytest

from kubedash.constants.enums import NotifyLevel
from kubedash.controllers.dashboard import DashboardController, DashboardSnapshot
from kubedash.keyboard import DASHBOARD_SCREEN_BINDINGS
from kubedash.models.api import DeploymentInfo, PodLogs, ScanResult, ServiceInfo
from kubedash.screens import DashboardScreen


@pytest.fixture
def controller() -> MagicMock:
    mock = MagicMock(spec=DashboardController)
    mock.namespace = "default"
    mock.pod_names = ["api-1", "api-2"]
    mock.scheduler = MagicMock()
    mock.scheduler.auto_enabled = False
    mock.last_snapshot = DashboardSnapshot(
        namespace="default", namespaces=["default", "prod"]
    )
    return mock


@pytest.fixture
def screen(controller: MagicMock, monkeypatch: pytest.MonkeyPatch) -> DashboardScreen:
    """Screen with widget lookups stubbed, since it is never mounted."""
    screen = DashboardScreen(controller)
    monkeypatch.setattr(screen, "_show_tab", MagicMock())
    monkeypatch.setattr(screen, "_fill_table", MagicMock())
    return screen


@pytest.fixture
def run_worker(screen: DashboardScreen, monkeypatch: pytest.MonkeyPatch) -> MagicMock:
    mock = MagicMock()
    monkeypatch.setattr(screen, "run_worker", mock)
    return mock


@pytest.fixture
def shown(
    screen: DashboardScreen, monkeypatch: pytest.MonkeyPatch
) -> list[tuple[str, NotifyLevel]]:
    messages: list[tuple[str, NotifyLevel]] = []
    monkeypatch.setattr(
        screen, "show_notification", lambda message, level: messages.append((message, level))
    )
    return messages


class TestDashboardScreenAttributes:
    """Test DashboardScreen class attributes."""

    def test_bindings(self) -> None:
        assert DashboardScreen.BINDINGS is DASHBOARD_SCREEN_BINDINGS

    def test_binding_keys(self) -> None:
        keys = {binding.key for binding in DashboardScreen.BINDINGS}
        assert keys == {"r", "a", "n", "h", "p", "l", "d", "s", "i"}

    def test_every_binding_has_action(self) -> None:
        for binding in DashboardScreen.BINDINGS:
            assert hasattr(DashboardScreen, f"action_{binding.action}")

    def test_compose_includes_charts_and_log(self) -> None:
        source = inspect.getsource(DashboardScreen.compose)
        assert "PlotextPlot" in source
        assert "RichLog" in source

    def test_compose_includes_sections(self) -> None:
        source = inspect.getsource(DashboardScreen.compose)
        assert "TabbedContent" in source
        assert "DataTable" in source
        assert "Input" in source

    def test_unmount_tears_down_controller(self) -> None:
        source = inspect.getsource(DashboardScreen.on_unmount)
        assert "teardown()" in source


class TestDashboardScreenActions:
    """Test screen actions delegate to the controller."""

    def test_refresh(self, controller: MagicMock) -> None:
        screen = DashboardScreen(controller)
        screen.action_refresh()
        controller.force_refresh.assert_called_once_with()

    def test_toggle_auto_refresh(self, controller: MagicMock) -> None:
        screen = DashboardScreen(controller)
        screen.action_toggle_auto_refresh()
        controller.set_auto_refresh.assert_called_once_with(True)

    def test_next_namespace_refreshes_without_cooldown(
        self, screen: DashboardScreen, controller: MagicMock, run_worker: MagicMock
    ) -> None:
        """A switch inside the manual cooldown still loads the new namespace."""
        controller.force_refresh.return_value = False

        screen.action_next_namespace()

        controller.set_namespace.assert_called_once_with("prod")
        controller.force_refresh.assert_not_called()
        run_worker.assert_called_once()
        assert run_worker.call_args.args[0] is controller.refresh_cycle
        assert screen._selected_pod is None

    def test_next_namespace_without_alternatives(
        self, controller: MagicMock, monkeypatch: pytest.MonkeyPatch
    ) -> None:
        controller.last_snapshot = None
        screen = DashboardScreen(controller)
        shown: list[tuple[str, NotifyLevel]] = []
        monkeypatch.setattr(
            screen, "show_notification", lambda message, level: shown.append((message, level))
        )

        screen.action_next_namespace()

        controller.set_namespace.assert_not_called()
        assert shown == [("No other namespace available", NotifyLevel.WARNING)]

    def test_controller_property(self, controller: MagicMock) -> None:
        assert DashboardScreen(controller).controller is controller


class TestDashboardScreenSections:
    """Test the pod logs, deployments, services and image scan sections."""

    def test_next_pod_cycles_pod_names(
        self, screen: DashboardScreen, shown: list
    ) -> None:
        screen.action_next_pod()
        assert screen._selected_pod == "api-1"

        screen.action_next_pod()
        assert screen._selected_pod == "api-2"

        screen.action_next_pod()
        assert screen._selected_pod == "api-1"
        assert shown == []

    def test_next_pod_without_pods(
        self, screen: DashboardScreen, controller: MagicMock, shown: list
    ) -> None:
        controller.pod_names = []

        screen.action_next_pod()

        assert screen._selected_pod is None
        assert shown == [("No other pod available", NotifyLevel.WARNING)]

    def test_pod_logs_defaults_to_first_pod(
        self, screen: DashboardScreen, run_worker: MagicMock
    ) -> None:
        screen.action_pod_logs()

        assert screen._selected_pod == "api-1"
        work = run_worker.call_args.args[0]
        assert work.args == ("api-1",)

    @pytest.mark.asyncio
    async def test_run_pod_logs_switches_tab(
        self, screen: DashboardScreen, controller: MagicMock
    ) -> None:
        controller.fetch_pod_logs = AsyncMock(return_value=PodLogs(logs=["ready"]))

        await screen._run_pod_logs("api-1")

        controller.fetch_pod_logs.assert_awaited_once_with("api-1")
        screen._show_tab.assert_called_once_with("tab-pod-logs")

    @pytest.mark.asyncio
    async def test_run_pod_logs_failure_keeps_tab(
        self, screen: DashboardScreen, controller: MagicMock
    ) -> None:
        controller.fetch_pod_logs = AsyncMock(return_value=None)

        await screen._run_pod_logs("api-1")

        screen._show_tab.assert_not_called()

    def test_deployments_and_services_run_workers(
        self, screen: DashboardScreen, run_worker: MagicMock
    ) -> None:
        screen.action_deployments()
        screen.action_services()

        names = [call.kwargs["name"] for call in run_worker.call_args_list]
        assert names == ["deployments", "services"]

    @pytest.mark.asyncio
    async def test_run_deployments_fills_table(
        self, screen: DashboardScreen, controller: MagicMock
    ) -> None:
        controller.fetch_deployments = AsyncMock(
            return_value=[DeploymentInfo(name="web", replicas=2, ready_replicas=1)]
        )

        await screen._run_deployments()

        table_id, columns, rows = screen._fill_table.call_args.args
        assert table_id == "deployments-table"
        assert columns[0] == "Name"
        assert rows == [("web", "1/2", "-", "Updating")]
        screen._show_tab.assert_called_once_with("tab-deployments")

    @pytest.mark.asyncio
    async def test_run_deployments_failure_leaves_table(
        self, screen: DashboardScreen, controller: MagicMock
    ) -> None:
        controller.fetch_deployments = AsyncMock(return_value=None)

        await screen._run_deployments()

        screen._fill_table.assert_not_called()

    @pytest.mark.asyncio
    async def test_run_services_empty_notifies(
        self, screen: DashboardScreen, controller: MagicMock, shown: list
    ) -> None:
        controller.fetch_services = AsyncMock(return_value=[])

        await screen._run_services()

        assert shown == [("No services found", NotifyLevel.INFO)]
        assert screen._fill_table.call_args.args[0] == "services-table"

    @pytest.mark.asyncio
    async def test_run_services_fills_table(
        self, screen: DashboardScreen, controller: MagicMock
    ) -> None:
        controller.fetch_services = AsyncMock(
            return_value=[ServiceInfo(name="web", type="NodePort")]
        )

        await screen._run_services()

        assert screen._fill_table.call_args.args[2] == [("web", "NodePort", "None", "-")]

    def test_image_scan_opens_tab(self, screen: DashboardScreen) -> None:
        screen.action_image_scan()
        screen._show_tab.assert_called_once_with("tab-image-scan")

    def test_scan_input_submitted_runs_scan(
        self, screen: DashboardScreen, run_worker: MagicMock
    ) -> None:
        event = SimpleNamespace(input=SimpleNamespace(id="image-scan-input"), value="nginx")

        screen.on_input_submitted(cast(Any, event))

        work = run_worker.call_args.args[0]
        assert work.args == ("nginx",)
        assert run_worker.call_args.kwargs["name"] == "image-scan"

    def test_other_input_ignored(
        self, screen: DashboardScreen, run_worker: MagicMock
    ) -> None:
        event = SimpleNamespace(input=SimpleNamespace(id="something-else"), value="x")

        screen.on_input_submitted(cast(Any, event))

        run_worker.assert_not_called()

    @pytest.mark.asyncio
    async def test_run_image_scan_delegates(
        self, screen: DashboardScreen, controller: MagicMock
    ) -> None:
        controller.scan_image = AsyncMock(return_value=ScanResult(scan_results={}))

        await screen._run_image_scan("nginx")

        controller.scan_image.assert_awaited_once_with("nginx")
