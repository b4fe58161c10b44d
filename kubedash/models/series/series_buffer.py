"""Rolling time-series buffers feeding the live metric charts."""

from __future__ import annotations

from collections import deque
from collections.abc import Callable, Iterable
from datetime import datetime

from pydantic import BaseModel, ConfigDict

from kubedash.constants.enums import MetricName
from kubedash.constants.limits import SERIES_CAPACITY
from kubedash.constants.values import SAMPLE_LABEL_FORMAT


class TimeSeriesPoint(BaseModel):
    """One chart sample: a time label and its value."""

    model_config = ConfigDict(frozen=True)

    label: str
    value: float


class SeriesBuffer:
    """Fixed-capacity FIFO of samples, oldest first.

    Values are stored as given. Range checks (0-100 for percentages) belong
    to the producer.
    """

    def __init__(self, capacity: int = SERIES_CAPACITY) -> None:
        if capacity < 1:
            raise ValueError(f"capacity must be at least 1, got {capacity}")
        self._capacity = capacity
        self._points: deque[TimeSeriesPoint] = deque(maxlen=capacity)

    @property
    def capacity(self) -> int:
        return self._capacity

    def push(self, point: TimeSeriesPoint) -> None:
        """Append a point, discarding the oldest once over capacity."""
        self._points.append(point)

    def snapshot(self) -> tuple[TimeSeriesPoint, ...]:
        """Return the points oldest to newest without touching the buffer."""
        return tuple(self._points)

    def values(self) -> list[float]:
        """Return just the sample values, oldest to newest."""
        return [point.value for point in self._points]

    def __len__(self) -> int:
        return len(self._points)


class MetricSeries:
    """One independent ``SeriesBuffer`` per displayed metric."""

    def __init__(
        self,
        capacity: int = SERIES_CAPACITY,
        *,
        metrics: Iterable[MetricName] = tuple(MetricName),
        now: Callable[[], datetime] = datetime.now,
    ) -> None:
        self._buffers: dict[MetricName, SeriesBuffer] = {
            metric: SeriesBuffer(capacity) for metric in metrics
        }
        self._now = now

    def push_value(
        self, metric: MetricName | str, value: float, label: str | None = None
    ) -> TimeSeriesPoint:
        """Push a sample labelled with the current wall-clock time (HH:MM:SS)."""
        point = TimeSeriesPoint(
            label=label if label is not None else self._now().strftime(SAMPLE_LABEL_FORMAT),
            value=value,
        )
        self.buffer(metric).push(point)
        return point

    def buffer(self, metric: MetricName | str) -> SeriesBuffer:
        """Return the buffer for a metric name.

        Raises:
            ValueError: If the name is not a known metric.
            KeyError: If the metric has no buffer.
        """
        return self._buffers[MetricName(metric)]

    def snapshot(self, metric: MetricName | str) -> tuple[TimeSeriesPoint, ...]:
        return self.buffer(metric).snapshot()

    def metrics(self) -> tuple[MetricName, ...]:
        return tuple(self._buffers)


__all__ = [
    "MetricSeries",
    "SeriesBuffer",
    "TimeSeriesPoint",
]
