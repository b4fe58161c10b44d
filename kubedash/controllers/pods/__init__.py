"""Pod domain."""

from kubedash.controllers.pods.parsers import PodStatusParser, PodStatusTally

__all__ = [
    "PodStatusParser",
    "PodStatusTally",
]
