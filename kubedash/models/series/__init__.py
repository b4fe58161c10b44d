"""Rolling time-series models."""

from kubedash.models.series.series_buffer import (
    MetricSeries,
    SeriesBuffer,
    TimeSeriesPoint,
)

__all__ = [
    "MetricSeries",
    "SeriesBuffer",
    "TimeSeriesPoint",
]
