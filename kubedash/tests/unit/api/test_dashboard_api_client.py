"""Unit tests for DashboardApiClient against an httpx MockTransport.

This module tests:
- Endpoint paths and query parameters
- Response validation (typed models, InvalidShape)
- Retry integration (ExhaustedRetries wrapping HTTP/transport errors)
- Image name validation before scans
"""

from __future__ import annotations

import json
from collections.abc import Callable
from unittest.mock import AsyncMock

import httpx
import pytest

from kubedash.controllers.api import (
    DashboardApiClient,
    ExhaustedRetries,
    HttpError,
    InvalidImageName,
    InvalidShape,
    ParseError,
    RetryingFetcher,
    TransportError,
)
from kubedash.controllers.api.client import validate_image_name
from kubedash.models.api import PodSummary, SystemInfo

SYSTEM_INFO = {
    "cpu_percent": 37.5,
    "memory_usage": {"percent": 61.2, "total": 16.0, "used": 9.8},
    "disk_usage": {"percent": 44.0},
}

Handler = Callable[[httpx.Request], httpx.Response]


class RecordingHandler:
    """MockTransport handler that records requests and replays responses."""

    def __init__(self, responder: Handler) -> None:
        self.requests: list[httpx.Request] = []
        self._responder = responder

    def __call__(self, request: httpx.Request) -> httpx.Response:
        self.requests.append(request)
        return self._responder(request)


def _client(handler: Handler) -> DashboardApiClient:
    http_client = httpx.AsyncClient(
        transport=httpx.MockTransport(handler), base_url="http://dashboard.test"
    )
    return DashboardApiClient(
        fetcher=RetryingFetcher(sleep=AsyncMock()),
        http_client=http_client,
    )


# =============================================================================
# Endpoints
# =============================================================================


class TestEndpoints:
    """Tests for successful endpoint calls."""

    @pytest.mark.asyncio
    async def test_get_system_info(self) -> None:
        handler = RecordingHandler(lambda request: httpx.Response(200, json=SYSTEM_INFO))
        client = _client(handler)

        info = await client.get_system_info()

        assert isinstance(info, SystemInfo)
        assert info.cpu_percent == 37.5
        assert info.memory_usage.percent == 61.2
        assert handler.requests[0].url.path == "/system_info"

    @pytest.mark.asyncio
    async def test_get_namespaces(self) -> None:
        client = _client(lambda request: httpx.Response(200, json=["default", "prod"]))
        assert await client.get_namespaces() == ["default", "prod"]

    @pytest.mark.asyncio
    async def test_get_kubernetes_info_sends_namespace(self) -> None:
        payload = {"num_deployments": 3, "num_pods": 7, "num_services": 2}
        handler = RecordingHandler(lambda request: httpx.Response(200, json=payload))
        client = _client(handler)

        info = await client.get_kubernetes_info("prod")

        assert info.num_pods == 7
        assert handler.requests[0].url.params["namespace"] == "prod"

    @pytest.mark.asyncio
    async def test_get_pods(self) -> None:
        payload = [
            {"name": "api-1", "status": "Running", "namespace": "prod"},
            {"name": "api-2", "status": "Pending"},
        ]
        client = _client(lambda request: httpx.Response(200, json=payload))

        pods = await client.get_pods("prod")

        assert pods == [
            PodSummary(name="api-1", status="Running", namespace="prod"),
            PodSummary(name="api-2", status="Pending"),
        ]

    @pytest.mark.asyncio
    async def test_get_pod_logs_params(self) -> None:
        handler = RecordingHandler(
            lambda request: httpx.Response(200, json={"logs": ["a", "b"]})
        )
        client = _client(handler)

        logs = await client.get_pod_logs("prod", "api-1")

        params = handler.requests[0].url.params
        assert params["pod_name"] == "api-1"
        assert params["tail_lines"] == "100"
        assert logs.text == "a\nb"

    @pytest.mark.asyncio
    async def test_get_deployments_treats_null_replicas_as_zero(self) -> None:
        payload = [{"name": "web", "replicas": 2, "ready_replicas": None}]
        client = _client(lambda request: httpx.Response(200, json=payload))

        deployments = await client.get_deployments("prod")

        assert deployments[0].ready_replicas == 0
        assert not deployments[0].is_ready

    @pytest.mark.asyncio
    async def test_get_services(self) -> None:
        payload = [
            {
                "name": "web",
                "type": "ClusterIP",
                "cluster_ip": "10.0.0.1",
                "ports": [{"port": 80, "protocol": "TCP"}, {"port": 53, "protocol": "UDP"}],
            }
        ]
        client = _client(lambda request: httpx.Response(200, json=payload))

        services = await client.get_services("prod")

        assert services[0].ports_label == "80/TCP, 53/UDP"

    @pytest.mark.asyncio
    async def test_get_health(self) -> None:
        client = _client(lambda request: httpx.Response(200, json={"status": "ok"}))
        assert (await client.get_health()).is_ok


# =============================================================================
# Failures
# =============================================================================


class TestFailures:
    """Tests for error propagation."""

    @pytest.mark.asyncio
    async def test_http_error_exhausts_retries(self) -> None:
        handler = RecordingHandler(lambda request: httpx.Response(500, text="boom"))
        client = _client(handler)

        with pytest.raises(ExhaustedRetries) as exc_info:
            await client.get_system_info()

        assert len(handler.requests) == 3
        assert isinstance(exc_info.value.last_error, HttpError)
        assert "HTTP 500: boom" in str(exc_info.value)

    @pytest.mark.asyncio
    async def test_connection_error_is_transport_error(self) -> None:
        def refuse(request: httpx.Request) -> httpx.Response:
            raise httpx.ConnectError("connection refused", request=request)

        client = _client(refuse)

        with pytest.raises(ExhaustedRetries) as exc_info:
            await client.get_namespaces()

        assert isinstance(exc_info.value.last_error, TransportError)

    @pytest.mark.asyncio
    async def test_corrupt_gzip_body_is_retried_parse_error(self) -> None:
        handler = RecordingHandler(
            lambda request: httpx.Response(
                200,
                headers={"Content-Encoding": "gzip"},
                stream=httpx.ByteStream(b"not gzip"),
            )
        )
        client = _client(handler)

        with pytest.raises(ExhaustedRetries) as exc_info:
            await client.get_system_info()

        assert len(handler.requests) == 3
        assert isinstance(exc_info.value.last_error, ParseError)

    @pytest.mark.asyncio
    async def test_missing_field_is_invalid_shape(self) -> None:
        """A JSON object without cpu_percent is not retried."""
        payload = {"memory_usage": {"percent": 1}, "disk_usage": {"percent": 2}}
        handler = RecordingHandler(lambda request: httpx.Response(200, json=payload))
        client = _client(handler)

        with pytest.raises(InvalidShape) as exc_info:
            await client.get_system_info()

        assert exc_info.value.endpoint == "/system_info"
        assert len(handler.requests) == 1

    @pytest.mark.asyncio
    async def test_wrong_type_is_invalid_shape(self) -> None:
        client = _client(lambda request: httpx.Response(200, json={"not": "a list"}))

        with pytest.raises(InvalidShape):
            await client.get_namespaces()


# =============================================================================
# Image scanning
# =============================================================================


class TestImageScan:
    """Tests for validate_image_name and scan_image."""

    @pytest.mark.parametrize(
        "name",
        ["nginx", "nginx:1.25", "library/nginx:latest", "ghcr.io/org/app:v1.2-rc"],
    )
    def test_valid_names(self, name: str) -> None:
        assert validate_image_name(f"  {name} ") == name

    @pytest.mark.parametrize(
        ("name", "message"),
        [
            ("   ", "Please enter a Docker image name"),
            ("nginx<script>", "Invalid characters detected in image name"),
            ("nginx:1:2", "Invalid image name format"),
            ("my image", "Invalid image name format"),
        ],
    )
    def test_invalid_names(self, name: str, message: str) -> None:
        with pytest.raises(InvalidImageName, match=message):
            validate_image_name(name)

    @pytest.mark.asyncio
    async def test_invalid_name_sends_no_request(self) -> None:
        handler = RecordingHandler(lambda request: httpx.Response(200, json={}))
        client = _client(handler)

        with pytest.raises(InvalidImageName):
            await client.scan_image("bad name")

        assert handler.requests == []

    @pytest.mark.asyncio
    async def test_scan_posts_container_id(self) -> None:
        handler = RecordingHandler(
            lambda request: httpx.Response(200, json={"scan_results": {"Results": []}})
        )
        client = _client(handler)

        result = await client.scan_image("nginx:latest")

        request = handler.requests[0]
        assert request.method == "POST"
        assert json.loads(request.content) == {"container_id": "nginx:latest"}
        assert result.scan_results == {"Results": []}

    @pytest.mark.asyncio
    async def test_scan_is_not_retried(self) -> None:
        handler = RecordingHandler(lambda request: httpx.Response(502))
        client = _client(handler)

        with pytest.raises(ExhaustedRetries):
            await client.scan_image("nginx")

        assert len(handler.requests) == 1


# =============================================================================
# Lifecycle
# =============================================================================


class TestLifecycle:
    """Tests for client ownership."""

    @pytest.mark.asyncio
    async def test_injected_client_not_closed(self) -> None:
        http_client = httpx.AsyncClient(
            transport=httpx.MockTransport(lambda request: httpx.Response(200))
        )
        client = DashboardApiClient(http_client=http_client)

        await client.aclose()

        assert not http_client.is_closed
        await http_client.aclose()

    @pytest.mark.asyncio
    async def test_owned_client_closed_by_context_manager(self) -> None:
        async with DashboardApiClient("http://dashboard.test/") as client:
            pass
        assert client._client.is_closed
