"""Default values for settings.

All default values used in DashboardSettings and validation fallback values.
"""

from typing import Final

# ============================================================================
# API defaults
# ============================================================================

API_BASE_URL_DEFAULT: Final = "http://127.0.0.1:8001"
NAMESPACE_DEFAULT: Final = "default"

# ============================================================================
# Refresh defaults
# ============================================================================

AUTO_REFRESH_DEFAULT: Final = False

# ============================================================================
# Config file defaults
# ============================================================================

CONFIG_PATH_DEFAULT: Final = "~/.config/kubedash/settings.yaml"
ENV_PREFIX: Final = "KUBEDASH_"

# ============================================================================
# Logging defaults
# ============================================================================

LOG_FILE_DEFAULT: Final = "~/.cache/kubedash/kubedash.log"
LOG_LEVEL_DEFAULT: Final = "WARNING"

__all__ = [
    "API_BASE_URL_DEFAULT",
    "AUTO_REFRESH_DEFAULT",
    "CONFIG_PATH_DEFAULT",
    "ENV_PREFIX",
    "LOG_FILE_DEFAULT",
    "LOG_LEVEL_DEFAULT",
    "NAMESPACE_DEFAULT",
]
