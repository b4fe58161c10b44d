"""Timeout and interval constants.

All timeout and interval values for API requests, retries and refresh cycles.
"""

from typing import Final

# ============================================================================
# HTTP timeouts (float, in seconds)
# ============================================================================

# Per-attempt request timeout; total fetch time is bounded by attempt exhaustion
API_REQUEST_TIMEOUT: Final = 10.0

# ============================================================================
# Retry timing (float, in seconds)
# ============================================================================

RETRY_BASE_DELAY: Final = 1.0

# ============================================================================
# Refresh cycle timing (float, in seconds)
# ============================================================================

REFRESH_INTERVAL_DEFAULT: Final = 10.0
MANUAL_REFRESH_COOLDOWN: Final = 1.0

# ============================================================================
# Cache TTLs (float, in seconds)
# ============================================================================

SYSTEM_INFO_TTL: Final = 5.0
NAMESPACES_TTL: Final = 30.0
KUBERNETES_INFO_TTL: Final = 10.0
POD_STATUSES_TTL: Final = 10.0

__all__ = [
    "API_REQUEST_TIMEOUT",
    "KUBERNETES_INFO_TTL",
    "MANUAL_REFRESH_COOLDOWN",
    "NAMESPACES_TTL",
    "POD_STATUSES_TTL",
    "REFRESH_INTERVAL_DEFAULT",
    "RETRY_BASE_DELAY",
    "SYSTEM_INFO_TTL",
]
