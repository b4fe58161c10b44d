"""Dashboard API access: client, retrying fetcher and error taxonomy."""

from kubedash.controllers.api.client import DashboardApiClient, validate_image_name
from kubedash.controllers.api.errors import (
    DashboardError,
    ExhaustedRetries,
    FetchError,
    HttpError,
    InvalidImageName,
    InvalidShape,
    ParseError,
    TransportError,
)
from kubedash.controllers.api.fetchers import RetryingFetcher

__all__ = [
    "DashboardApiClient",
    "DashboardError",
    "ExhaustedRetries",
    "FetchError",
    "HttpError",
    "InvalidImageName",
    "InvalidShape",
    "ParseError",
    "RetryingFetcher",
    "TransportError",
    "validate_image_name",
]
