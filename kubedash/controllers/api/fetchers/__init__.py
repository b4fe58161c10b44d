"""Fetchers for the dashboard API."""

from kubedash.controllers.api.fetchers.retrying_fetcher import (
    RequestFactory,
    RetryingFetcher,
    SleepFunc,
)

__all__ = [
    "RequestFactory",
    "RetryingFetcher",
    "SleepFunc",
]
