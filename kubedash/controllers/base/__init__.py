"""Base controller classes."""

from kubedash.controllers.base.base_controller import (
    AsyncControllerMixin,
    BaseController,
    FetchResult,
)

__all__ = [
    "AsyncControllerMixin",
    "BaseController",
    "FetchResult",
]
