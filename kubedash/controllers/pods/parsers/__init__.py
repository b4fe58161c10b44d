"""Parsers for pod data."""

from kubedash.controllers.pods.parsers.pod_status_parser import (
    PodStatusParser,
    PodStatusTally,
)

__all__ = [
    "PodStatusParser",
    "PodStatusTally",
]
