"""Dashboard controller - owns the data-synchronization context.

The controller is the single owner of the response cache, the API client and
its retry policy, the rolling metric series, the pod status parser and the
refresh scheduler. The rendering layer talks only to this object:

- ``get_cached(key)`` / ``snapshot(metric)`` / ``classify(statuses)`` for reads
- ``force_refresh()`` / ``on_tick(period)`` / ``disable_auto()`` for control
- ``teardown()`` when the owning screen goes away
"""

from __future__ import annotations

import asyncio
import logging
import time
from collections.abc import Awaitable, Callable, Iterable
from dataclasses import dataclass, field
from typing import Any

from kubedash.constants.defaults import NAMESPACE_DEFAULT
from kubedash.constants.enums import (
    NAMESPACE_SCOPED_KEYS,
    CacheKey,
    HealthState,
    MetricName,
    NotifyLevel,
)
from kubedash.controllers.api.client import DashboardApiClient, validate_image_name
from kubedash.controllers.api.errors import (
    DashboardError,
    InvalidImageName,
)
from kubedash.controllers.api.fetchers import RetryingFetcher
from kubedash.controllers.base import BaseController, FetchResult
from kubedash.controllers.pods.parsers import PodStatusParser, PodStatusTally
from kubedash.models.api import (
    DeploymentInfo,
    KubernetesInfo,
    PodLogs,
    PodSummary,
    ScanResult,
    ServiceInfo,
    SystemInfo,
)
from kubedash.models.cache import DataCache
from kubedash.models.series import MetricSeries, TimeSeriesPoint
from kubedash.models.state import DashboardSettings
from kubedash.utils.clock import Clock
from kubedash.utils.refresh_scheduler import RefreshScheduler

logger = logging.getLogger(__name__)

Renderer = Callable[["DashboardSnapshot"], None]
Notifier = Callable[[str, NotifyLevel], None]


@dataclass
class DashboardSnapshot:
    """Everything the rendering layer needs after one refresh cycle."""

    namespace: str
    system_info: SystemInfo | None = None
    namespaces: list[str] = field(default_factory=list)
    kubernetes_info: KubernetesInfo | None = None
    pod_tally: PodStatusTally = field(default_factory=PodStatusTally)
    pod_names: list[str] = field(default_factory=list)
    series: dict[MetricName, tuple[TimeSeriesPoint, ...]] = field(default_factory=dict)
    results: dict[CacheKey, FetchResult] = field(default_factory=dict)

    @property
    def failed_keys(self) -> list[CacheKey]:
        return [key for key, result in self.results.items() if not result.success]


class DashboardController(BaseController):
    """Refresh-cycle orchestration over the cached dashboard datasets."""

    _ERROR_CONTEXT = {
        CacheKey.SYSTEM_INFO: "Failed to fetch system metrics",
        CacheKey.NAMESPACES: "Failed to fetch namespaces",
        CacheKey.KUBERNETES_INFO: "Failed to fetch info for namespace",
        CacheKey.POD_STATUSES: "Failed to fetch pod statuses",
    }

    def __init__(
        self,
        api: DashboardApiClient,
        *,
        settings: DashboardSettings | None = None,
        cache: DataCache | None = None,
        series: MetricSeries | None = None,
        parser: PodStatusParser | None = None,
        clock: Clock | None = None,
        render: Renderer | None = None,
        notify: Notifier | None = None,
    ) -> None:
        """Initialize the controller.

        Args:
            api: Client used for every network call
            settings: Refresh, cache and chart settings; defaults if omitted
            cache: Response cache; built from ``settings.cache_ttls`` if omitted
            series: Rolling metric buffers; built from ``settings.series_capacity``
            parser: Pod status classifier
            clock: Timer source for the scheduler and cache (tests pass a fake)
            render: Called with a DashboardSnapshot after every cycle
            notify: Called with ``(message, level)`` for user-facing messages
        """
        super().__init__()
        self._settings = settings or DashboardSettings()
        self._api = api
        self._cache = cache or DataCache(
            self._settings.cache_ttls,
            clock=clock.now if clock is not None else time.monotonic,
        )
        self._series = series or MetricSeries(self._settings.series_capacity)
        self._parser = parser or PodStatusParser()
        self._render = render
        self._notify = notify
        self._namespace = self._settings.namespace or NAMESPACE_DEFAULT
        self._pod_names: list[str] = []
        # Cycles may overlap; is_loading stays set until the last one ends
        self._in_flight = 0
        self.last_snapshot: DashboardSnapshot | None = None
        self.scheduler = RefreshScheduler(
            self.refresh_cycle,
            clock=clock,
            period=self._settings.refresh_interval,
            cooldown=self._settings.manual_refresh_cooldown,
        )

    @classmethod
    def from_settings(
        cls,
        settings: DashboardSettings,
        *,
        clock: Clock | None = None,
        render: Renderer | None = None,
        notify: Notifier | None = None,
    ) -> DashboardController:
        """Build a controller and its API client from settings."""
        fetcher = RetryingFetcher(
            max_attempts=settings.max_retry_attempts,
            base_delay=settings.retry_base_delay,
        )
        api = DashboardApiClient(
            settings.api_base_url,
            fetcher=fetcher,
            timeout=settings.request_timeout,
        )
        return cls(api, settings=settings, clock=clock, render=render, notify=notify)

    # =========================================================================
    # Collaborator wiring
    # =========================================================================

    def bind(
        self, *, render: Renderer | None = None, notify: Notifier | None = None
    ) -> None:
        """Attach rendering and notification collaborators after construction."""
        if render is not None:
            self._render = render
        if notify is not None:
            self._notify = notify

    def notify(self, message: str, level: NotifyLevel = NotifyLevel.INFO) -> None:
        log_level = logging.ERROR if level is NotifyLevel.ERROR else logging.INFO
        logger.log(log_level, "%s", message)
        if self._notify is not None:
            self._notify(message, level)

    # =========================================================================
    # Read API for the rendering layer
    # =========================================================================

    @property
    def settings(self) -> DashboardSettings:
        return self._settings

    @property
    def cache(self) -> DataCache:
        return self._cache

    @property
    def namespace(self) -> str:
        return self._namespace

    @property
    def pod_names(self) -> list[str]:
        return list(self._pod_names)

    def get_cached(self, key: CacheKey) -> Any:
        """Return the fresh cached value for a dataset, or None."""
        return self._cache.get(key)

    def snapshot(self, metric: MetricName | str) -> tuple[TimeSeriesPoint, ...]:
        """Return the rolling samples for one metric, oldest first."""
        return self._series.snapshot(metric)

    def classify(self, statuses: Iterable[str]) -> PodStatusTally:
        return self._parser.classify(statuses)

    # =========================================================================
    # Refresh control
    # =========================================================================

    def force_refresh(self) -> bool:
        """Manual refresh, debounced by the scheduler cooldown."""
        return self.scheduler.manual_refresh()

    def on_tick(self, period: float | None = None) -> None:
        """Enable auto-refresh every ``period`` seconds (settings default)."""
        self.scheduler.enable_auto(period)

    def disable_auto(self) -> None:
        self.scheduler.disable_auto()

    def set_auto_refresh(self, enabled: bool) -> None:
        """Toggle auto-refresh and tell the user about it."""
        self.scheduler.disable_auto()
        if enabled:
            self.scheduler.enable_auto()
            self.notify(f"Auto-refresh enabled ({self.scheduler.period:g}s)")
        else:
            self.notify("Auto-refresh disabled")

    def set_namespace(self, namespace: str) -> None:
        """Switch namespace and drop cached namespace-scoped datasets."""
        if namespace == self._namespace:
            return
        self._namespace = namespace
        self._pod_names = []
        for key in NAMESPACE_SCOPED_KEYS:
            self._cache.clear(key)
        self.notify(f"Switched to namespace: {namespace}")

    def teardown(self) -> None:
        """Stop all timers. In-flight fetches are left to finish."""
        self.scheduler.teardown()

    async def aclose(self) -> None:
        self.teardown()
        await self._api.aclose()

    # =========================================================================
    # Refresh cycle
    # =========================================================================

    async def refresh_cycle(self) -> DashboardSnapshot:
        """Load every dataset, preferring fresh cache entries, then render.

        All cache reads happen before the first await, so the cycle sees the
        cache as it was when the cycle started. A failed dataset keeps its
        previous cache entry, which is rendered as stale data.
        """
        self._in_flight += 1
        self.is_loading = True
        self._load_start_time = time.monotonic()
        try:
            namespace = self._namespace
            cached = {key: self._cache.get(key) for key in CacheKey}
            loaders: dict[CacheKey, Callable[[], Awaitable[Any]]] = {
                CacheKey.SYSTEM_INFO: self._api.get_system_info,
                CacheKey.NAMESPACES: self._api.get_namespaces,
                CacheKey.KUBERNETES_INFO: lambda: self._api.get_kubernetes_info(namespace),
                CacheKey.POD_STATUSES: lambda: self._api.get_pods(namespace),
            }
            keys = list(CacheKey)
            outcomes = await asyncio.gather(
                *(self._load(key, cached[key], loaders[key], namespace) for key in keys)
            )
            snapshot = self._apply_results(namespace, dict(zip(keys, outcomes)))
        finally:
            self._in_flight -= 1
            self.is_loading = self._in_flight > 0

        duration_ms = (time.monotonic() - self._load_start_time) * 1000
        logger.debug("Refresh cycle finished in %.2fms", duration_ms)
        self.last_snapshot = snapshot
        if self._render is not None:
            self._render(snapshot)
        return snapshot

    async def _load(
        self,
        key: CacheKey,
        cached_value: Any,
        loader: Callable[[], Awaitable[Any]],
        namespace: str,
    ) -> FetchResult:
        if cached_value is not None:
            logger.debug("Cache hit: %s", key.value)
            return FetchResult(success=True, data=cached_value, from_cache=True)

        start = time.monotonic()
        try:
            value = await loader()
        except DashboardError as exc:
            duration_ms = (time.monotonic() - start) * 1000
            context = self._ERROR_CONTEXT[key]
            if key in NAMESPACE_SCOPED_KEYS:
                context = f"{context} {namespace}"
            self.notify(f"{context}: {exc}", NotifyLevel.ERROR)
            previous = self._cache.get_entry(key)
            return FetchResult(
                success=False,
                data=previous.value if previous is not None else None,
                error=str(exc),
                duration_ms=duration_ms,
                stale=previous is not None,
            )

        duration_ms = (time.monotonic() - start) * 1000
        if key in NAMESPACE_SCOPED_KEYS and namespace != self._namespace:
            # Namespace switched while this request was in flight
            logger.debug("Discarding %s for old namespace %s", key.value, namespace)
            return FetchResult(success=True, data=value, duration_ms=duration_ms)
        self._cache.set(key, value)
        return FetchResult(success=True, data=value, duration_ms=duration_ms)

    def _apply_results(
        self, namespace: str, results: dict[CacheKey, FetchResult]
    ) -> DashboardSnapshot:
        """Feed loaded data into the series and classifier. Runs without awaiting."""
        system_info: SystemInfo | None = results[CacheKey.SYSTEM_INFO].data
        if system_info is not None and results[CacheKey.SYSTEM_INFO].success:
            self._push_system_samples(system_info)

        namespaces: list[str] = results[CacheKey.NAMESPACES].data or []
        if results[CacheKey.NAMESPACES].success:
            self._reconcile_namespace(namespaces)

        kubernetes_info: KubernetesInfo | None = None
        pods: list[PodSummary] = []
        if self._namespace == namespace:
            kubernetes_info = results[CacheKey.KUBERNETES_INFO].data
            pods = results[CacheKey.POD_STATUSES].data or []
            self._pod_names = [pod.name for pod in pods]

        return DashboardSnapshot(
            namespace=self._namespace,
            system_info=system_info,
            namespaces=list(namespaces),
            kubernetes_info=kubernetes_info,
            pod_tally=self._parser.classify(pod.status for pod in pods),
            pod_names=list(self._pod_names),
            series={metric: self._series.snapshot(metric) for metric in self._series.metrics()},
            results=results,
        )

    def _push_system_samples(self, info: SystemInfo) -> None:
        self._series.push_value(MetricName.CPU, info.cpu_percent)
        self._series.push_value(MetricName.MEMORY, info.memory_usage.percent)
        self._series.push_value(MetricName.STORAGE, info.disk_usage.percent)

    def _reconcile_namespace(self, namespaces: list[str]) -> None:
        """Keep the selected namespace, or fall back to the first available."""
        if self._namespace in namespaces:
            return
        fallback = namespaces[0] if namespaces else NAMESPACE_DEFAULT
        if fallback != self._namespace:
            logger.info(
                "Namespace %s not found, switching to %s", self._namespace, fallback
            )
            self._namespace = fallback
            self._pod_names = []
            for key in NAMESPACE_SCOPED_KEYS:
                self._cache.clear(key)

    # =========================================================================
    # BaseController
    # =========================================================================

    async def check_connection(self) -> bool:
        return await self.check_health() is HealthState.HEALTHY

    async def fetch_all(self) -> dict[str, Any]:
        snapshot = await self.refresh_cycle()
        return {key.value: result.data for key, result in snapshot.results.items()}

    # =========================================================================
    # On-demand datasets (not cached)
    # =========================================================================

    async def check_health(self) -> HealthState:
        """Run the cluster health check and report it."""
        try:
            health = await self._api.get_health()
        except DashboardError as exc:
            logger.warning("Health check failed: %s", exc)
            self.notify("Health check failed", NotifyLevel.ERROR)
            return HealthState.UNKNOWN
        if health.is_ok:
            self.notify("Cluster health check completed: Healthy", NotifyLevel.SUCCESS)
            return HealthState.HEALTHY
        self.notify(
            f"Cluster health check completed: {health.status}", NotifyLevel.WARNING
        )
        return HealthState.UNHEALTHY

    async def fetch_pod_logs(
        self, pod_name: str, tail_lines: int | None = None
    ) -> PodLogs | None:
        if not pod_name:
            self.notify("No pod selected", NotifyLevel.WARNING)
            return None
        lines = tail_lines or self._settings.pod_log_tail_lines
        logs = await self._on_demand(
            f"Failed to fetch logs for pod {pod_name}",
            lambda: self._api.get_pod_logs(self._namespace, pod_name, lines),
        )
        if logs is not None:
            self.notify(f"Logs fetched for pod: {pod_name}", NotifyLevel.SUCCESS)
        return logs

    async def fetch_deployments(self) -> list[DeploymentInfo] | None:
        return await self._on_demand(
            "Failed to fetch deployments",
            lambda: self._api.get_deployments(self._namespace),
        )

    async def fetch_services(self) -> list[ServiceInfo] | None:
        return await self._on_demand(
            "Failed to fetch services",
            lambda: self._api.get_services(self._namespace),
        )

    async def scan_image(self, image_name: str) -> ScanResult | None:
        """Submit an image scan; invalid names are rejected without a request."""
        try:
            name = validate_image_name(image_name)
        except InvalidImageName as exc:
            self.notify(str(exc), NotifyLevel.ERROR)
            return None
        self.notify(f"Scanning image: {name}")
        try:
            result = await self._api.scan_image(name)
        except DashboardError as exc:
            logger.warning("Image scan failed: %s", exc)
            self.notify("Image scan failed", NotifyLevel.ERROR)
            return None
        if result.error:
            self.notify(f"Scan error: {result.error}", NotifyLevel.ERROR)
        else:
            self.notify(f"Scan completed for: {name}", NotifyLevel.SUCCESS)
        return result

    async def _on_demand(
        self, context: str, loader: Callable[[], Awaitable[Any]]
    ) -> Any:
        try:
            return await loader()
        except DashboardError as exc:
            self.notify(f"{context}: {exc}", NotifyLevel.ERROR)
            return None


__all__ = [
    "DashboardController",
    "DashboardSnapshot",
    "Notifier",
    "Renderer",
]
