"""Dashboard REST API client.

Every call goes through ``RetryingFetcher`` and is validated against the
pydantic response models, so callers only ever see typed results,
``ExhaustedRetries`` or ``InvalidShape``.
"""

from __future__ import annotations

import logging
import re
from typing import Any, TypeVar

import httpx
from pydantic import TypeAdapter, ValidationError

from kubedash.constants.defaults import API_BASE_URL_DEFAULT
from kubedash.constants.limits import POD_LOG_TAIL_LINES, SCAN_IMAGE_ATTEMPTS
from kubedash.constants.timeouts import API_REQUEST_TIMEOUT
from kubedash.constants.values import IMAGE_NAME_PATTERN
from kubedash.controllers.api.errors import InvalidImageName, InvalidShape
from kubedash.controllers.api.fetchers import RetryingFetcher
from kubedash.models.api import (
    DeploymentInfo,
    HealthStatus,
    KubernetesInfo,
    PodLogs,
    PodSummary,
    ScanResult,
    ServiceInfo,
    SystemInfo,
)

logger = logging.getLogger(__name__)

ModelT = TypeVar("ModelT")

_IMAGE_NAME_RE = re.compile(IMAGE_NAME_PATTERN)
_UNSAFE_CHARS = set("<>\"'")


def validate_image_name(image_name: str) -> str:
    """Return a stripped image reference or raise InvalidImageName."""
    name = image_name.strip()
    if not name:
        raise InvalidImageName("Please enter a Docker image name")
    if any(char in _UNSAFE_CHARS for char in name):
        raise InvalidImageName("Invalid characters detected in image name")
    if not _IMAGE_NAME_RE.match(name):
        raise InvalidImageName(
            "Invalid image name format. Use format: repository/image:tag"
        )
    return name


class DashboardApiClient:
    """Async client for the cluster dashboard REST API."""

    ENDPOINT_SYSTEM_INFO = "/system_info"
    ENDPOINT_NAMESPACES = "/kubernetes_namespaces"
    ENDPOINT_KUBERNETES_INFO = "/kubernetes_info"
    ENDPOINT_PODS = "/pods"
    ENDPOINT_POD_LOGS = "/pod_logs"
    ENDPOINT_DEPLOYMENTS = "/kubernetes_deployments"
    ENDPOINT_SERVICES = "/kubernetes_services"
    ENDPOINT_HEALTH = "/health"
    ENDPOINT_SCAN_IMAGE = "/scan_image"

    def __init__(
        self,
        base_url: str = API_BASE_URL_DEFAULT,
        *,
        fetcher: RetryingFetcher | None = None,
        http_client: httpx.AsyncClient | None = None,
        timeout: float = API_REQUEST_TIMEOUT,
    ) -> None:
        """Initialize the client.

        Args:
            base_url: API root, e.g. ``http://127.0.0.1:8001``
            fetcher: Retry policy; a default ``RetryingFetcher`` if omitted
            http_client: Pre-built client (tests pass one with a MockTransport).
                A client passed in is not closed by ``aclose()``.
            timeout: Per-attempt request timeout in seconds
        """
        self._fetcher = fetcher or RetryingFetcher()
        self._owns_client = http_client is None
        self._client = http_client or httpx.AsyncClient(
            base_url=base_url.rstrip("/"),
            timeout=httpx.Timeout(timeout),
            headers={"Accept": "application/json"},
        )

    @property
    def fetcher(self) -> RetryingFetcher:
        return self._fetcher

    async def aclose(self) -> None:
        if self._owns_client:
            await self._client.aclose()

    async def __aenter__(self) -> DashboardApiClient:
        return self

    async def __aexit__(self, *exc_info: object) -> None:
        await self.aclose()

    # =========================================================================
    # Transport helpers
    # =========================================================================

    async def _get_json(
        self,
        path: str,
        params: dict[str, Any] | None = None,
        *,
        max_attempts: int | None = None,
    ) -> Any:
        return await self._fetcher.fetch(
            lambda: self._client.get(path, params=params),
            max_attempts,
            description=f"GET {path}",
        )

    async def _post_json(
        self,
        path: str,
        body: dict[str, Any],
        *,
        max_attempts: int | None = None,
    ) -> Any:
        return await self._fetcher.fetch(
            lambda: self._client.post(path, json=body),
            max_attempts,
            description=f"POST {path}",
        )

    @staticmethod
    def _validate(endpoint: str, model: type[ModelT] | Any, payload: Any) -> ModelT:
        """Validate a decoded payload against a model or type expression."""
        try:
            return TypeAdapter(model).validate_python(payload)
        except ValidationError as exc:
            logger.warning("Unexpected payload shape from %s: %s", endpoint, exc)
            raise InvalidShape(endpoint, str(exc)) from exc

    # =========================================================================
    # Endpoints
    # =========================================================================

    async def get_system_info(self) -> SystemInfo:
        payload = await self._get_json(self.ENDPOINT_SYSTEM_INFO)
        return self._validate(self.ENDPOINT_SYSTEM_INFO, SystemInfo, payload)

    async def get_namespaces(self) -> list[str]:
        payload = await self._get_json(self.ENDPOINT_NAMESPACES)
        return self._validate(self.ENDPOINT_NAMESPACES, list[str], payload)

    async def get_kubernetes_info(self, namespace: str) -> KubernetesInfo:
        payload = await self._get_json(
            self.ENDPOINT_KUBERNETES_INFO, {"namespace": namespace}
        )
        return self._validate(self.ENDPOINT_KUBERNETES_INFO, KubernetesInfo, payload)

    async def get_pods(self, namespace: str) -> list[PodSummary]:
        payload = await self._get_json(self.ENDPOINT_PODS, {"namespace": namespace})
        return self._validate(self.ENDPOINT_PODS, list[PodSummary], payload)

    async def get_pod_logs(
        self,
        namespace: str,
        pod_name: str,
        tail_lines: int = POD_LOG_TAIL_LINES,
    ) -> PodLogs:
        payload = await self._get_json(
            self.ENDPOINT_POD_LOGS,
            {"namespace": namespace, "pod_name": pod_name, "tail_lines": tail_lines},
        )
        return self._validate(self.ENDPOINT_POD_LOGS, PodLogs, payload)

    async def get_deployments(self, namespace: str) -> list[DeploymentInfo]:
        payload = await self._get_json(
            self.ENDPOINT_DEPLOYMENTS, {"namespace": namespace}
        )
        return self._validate(self.ENDPOINT_DEPLOYMENTS, list[DeploymentInfo], payload)

    async def get_services(self, namespace: str) -> list[ServiceInfo]:
        payload = await self._get_json(self.ENDPOINT_SERVICES, {"namespace": namespace})
        return self._validate(self.ENDPOINT_SERVICES, list[ServiceInfo], payload)

    async def get_health(self) -> HealthStatus:
        payload = await self._get_json(self.ENDPOINT_HEALTH)
        return self._validate(self.ENDPOINT_HEALTH, HealthStatus, payload)

    async def scan_image(self, image_name: str) -> ScanResult:
        """Submit an image for a vulnerability scan.

        Raises:
            InvalidImageName: Before any request, if the reference is malformed.
        """
        container_id = validate_image_name(image_name)
        payload = await self._post_json(
            self.ENDPOINT_SCAN_IMAGE,
            {"container_id": container_id},
            max_attempts=SCAN_IMAGE_ATTEMPTS,
        )
        return self._validate(self.ENDPOINT_SCAN_IMAGE, ScanResult, payload)


__all__ = [
    "DashboardApiClient",
    "validate_image_name",
]
