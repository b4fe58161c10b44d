"""Error taxonomy for dashboard API access."""

from __future__ import annotations


class DashboardError(Exception):
    """Base exception for data-synchronization errors."""


class FetchError(DashboardError):
    """A single fetch attempt failed; the fetcher may retry it."""


class TransportError(FetchError):
    """The API could not be reached (connection refused, DNS, timeout)."""


class HttpError(FetchError):
    """The API answered with a non-2xx status."""

    def __init__(self, status_code: int, body: str = "") -> None:
        self.status_code = status_code
        self.body = body
        super().__init__(f"HTTP {status_code}: {body or 'Unknown error'}")


class ParseError(FetchError):
    """The response body was not valid JSON."""


class ExhaustedRetries(DashboardError):
    """Every attempt failed; wraps the last underlying error."""

    def __init__(self, last_error: FetchError, attempts: int) -> None:
        self.last_error = last_error
        self.attempts = attempts
        super().__init__(f"Failed after {attempts} attempts: {last_error}")


class InvalidShape(DashboardError):
    """Well-formed JSON that is missing expected fields."""

    def __init__(self, endpoint: str, detail: str) -> None:
        self.endpoint = endpoint
        self.detail = detail
        super().__init__(f"Invalid data received from {endpoint}: {detail}")


class InvalidImageName(DashboardError):
    """An image reference rejected before submitting a scan."""


__all__ = [
    "DashboardError",
    "ExhaustedRetries",
    "FetchError",
    "HttpError",
    "InvalidImageName",
    "InvalidShape",
    "ParseError",
    "TransportError",
]
