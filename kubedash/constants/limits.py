"""Limit and threshold constants.

All limit values, capacities, and validation ranges.
"""

from typing import Final

# ============================================================================
# Retry limits
# ============================================================================

MAX_RETRY_ATTEMPTS: Final = 3
# Image scans are expensive server-side; a failed scan is not retried
SCAN_IMAGE_ATTEMPTS: Final = 1

# ============================================================================
# Series limits
# ============================================================================

SERIES_CAPACITY: Final = 10

# ============================================================================
# Validation limits
# ============================================================================

REFRESH_INTERVAL_MIN: Final = 1.0
PERCENT_MIN: Final = 0.0
PERCENT_MAX: Final = 100.0

# ============================================================================
# Log limits
# ============================================================================

POD_LOG_TAIL_LINES: Final = 100

__all__ = [
    "MAX_RETRY_ATTEMPTS",
    "PERCENT_MAX",
    "PERCENT_MIN",
    "POD_LOG_TAIL_LINES",
    "REFRESH_INTERVAL_MIN",
    "SCAN_IMAGE_ATTEMPTS",
    "SERIES_CAPACITY",
]
