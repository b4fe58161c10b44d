"""Base controller with async patterns for the dashboard.

This module provides the foundation for background data loading on the
shared event loop, so the UI stays responsive while API calls are in flight.
"""

from __future__ import annotations

import logging
from abc import ABC, abstractmethod
from dataclasses import dataclass
from typing import Any

logger = logging.getLogger(__name__)


@dataclass
class FetchResult:
    """Outcome of loading one dataset within a refresh cycle."""

    success: bool
    data: Any | None = None
    error: str | None = None
    duration_ms: float = 0.0
    from_cache: bool = False
    stale: bool = False


class AsyncControllerMixin:
    """Mixin tracking loading state for controllers driven by the event loop."""

    def __init__(self) -> None:
        """Initialize the async controller mixin."""
        self._load_start_time: float | None = None
        self.is_loading = False


class BaseController(AsyncControllerMixin, ABC):
    """Base controller class with event-loop friendly patterns.

    Subclasses should implement the abstract methods to provide
    specific data fetching functionality.
    """

    @abstractmethod
    async def check_connection(self) -> bool:
        """Check if the data source is available.

        Returns:
            True if connection is available, False otherwise
        """
        ...

    @abstractmethod
    async def fetch_all(self) -> dict[str, Any]:
        """Fetch all data from the source.

        Returns:
            Dictionary containing all fetched data
        """
        ...
