"""Scalar constants for kubedash.

All application-level constants with proper type hints using Final.
"""

from typing import Final

# ============================================================================
# Application
# ============================================================================

APP_TITLE: Final = "KubeDash"

# ============================================================================
# Series labels
# ============================================================================

SAMPLE_LABEL_FORMAT: Final = "%H:%M:%S"

# ============================================================================
# Image scanning
# ============================================================================

IMAGE_NAME_PATTERN: Final = r"^[a-zA-Z0-9._/-]+(:[a-zA-Z0-9._-]+)?$"

# ============================================================================
# Health status (markup for rich text display)
# ============================================================================

HEALTHY: Final = "[green]HEALTHY[/green]"
UNHEALTHY: Final = "[red]UNHEALTHY[/red]"
UNKNOWN: Final = "[dim]UNKNOWN[/dim]"

# ============================================================================
# Display placeholders
# ============================================================================

PLACEHOLDER_VALUE: Final = "-"

__all__ = [
    "APP_TITLE",
    "HEALTHY",
    "IMAGE_NAME_PATTERN",
    "PLACEHOLDER_VALUE",
    "SAMPLE_LABEL_FORMAT",
    "UNHEALTHY",
    "UNKNOWN",
]
