"""Controllers module for kubedash.

This module provides domain-driven controllers for fetching and
synchronizing dashboard data from the cluster REST API.
"""

from __future__ import annotations

# Base classes
from kubedash.controllers.base import (
    AsyncControllerMixin,
    BaseController,
    FetchResult,
)

# Dashboard domain
from kubedash.controllers.dashboard import (
    DashboardController,
    DashboardSnapshot,
)

# Pod domain
from kubedash.controllers.pods import PodStatusParser, PodStatusTally

__all__ = [
    # Base
    "AsyncControllerMixin",
    "BaseController",
    # Domain Controllers
    "DashboardController",
    "DashboardSnapshot",
    "FetchResult",
    # Pod domain
    "PodStatusParser",
    "PodStatusTally",
]
