"""KubeDash - terminal dashboard for a cluster monitoring REST API."""

__version__ = "0.1.0"

__all__ = [
    "__version__",
]
