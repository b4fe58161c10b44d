"""Data cache implementation."""

from __future__ import annotations

import logging
import time
from collections.abc import Callable, Mapping
from dataclasses import dataclass
from typing import Any

from kubedash.constants.enums import CacheKey
from kubedash.constants.timeouts import (
    KUBERNETES_INFO_TTL,
    NAMESPACES_TTL,
    POD_STATUSES_TTL,
    SYSTEM_INFO_TTL,
)

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class CacheEntry:
    """A cached value with the time it was fetched and its validity window."""

    value: Any
    fetched_at: float
    ttl: float

    def is_fresh(self, now: float) -> bool:
        """Return True while ``now - fetched_at < ttl``."""
        return now - self.fetched_at < self.ttl


class DataCache:
    """TTL-based response cache keyed by a fixed set of datasets.

    Notes:
    - Each ``CacheKey`` carries its own TTL, fixed at construction.
    - All operations are synchronous. The cache has a single logical owner
      (the refresh cycle on the event loop), so no lock is taken; concurrent
      writers simply overwrite each other (last writer wins).
    - Expired entries are left in place and reported as absent. Nothing is
      evicted except by overwrite or an explicit ``clear()``.
    """

    TTL_SECONDS: Mapping[CacheKey, float] = {
        CacheKey.SYSTEM_INFO: SYSTEM_INFO_TTL,
        CacheKey.NAMESPACES: NAMESPACES_TTL,
        CacheKey.KUBERNETES_INFO: KUBERNETES_INFO_TTL,
        CacheKey.POD_STATUSES: POD_STATUSES_TTL,
    }

    def __init__(
        self,
        ttls: Mapping[CacheKey, float] | None = None,
        *,
        clock: Callable[[], float] = time.monotonic,
    ) -> None:
        merged = dict(self.TTL_SECONDS)
        if ttls:
            merged.update(ttls)
        for key, ttl in merged.items():
            if ttl <= 0:
                raise ValueError(f"TTL for {key.value} must be positive, got {ttl}")
        self._ttls: dict[CacheKey, float] = merged
        self._entries: dict[CacheKey, CacheEntry] = {}
        self._clock = clock

    def ttl_for(self, key: CacheKey) -> float:
        """Return the configured TTL for a key."""
        return self._ttls[key]

    def get(self, key: CacheKey) -> Any:
        """Get cached data or None if never set or expired."""
        entry = self._entries.get(key)
        if entry is None:
            logger.debug("Cache miss (empty): %s", key.value)
            return None
        if not entry.is_fresh(self._clock()):
            logger.debug("Cache miss (expired): %s", key.value)
            return None
        return entry.value

    def get_entry(self, key: CacheKey) -> CacheEntry | None:
        """Return the raw entry regardless of freshness (for stale display)."""
        return self._entries.get(key)

    def set(self, key: CacheKey, value: Any) -> None:
        """Cache data stamped with the current time and the key's TTL."""
        self._entries[key] = CacheEntry(
            value=value,
            fetched_at=self._clock(),
            ttl=self._ttls[key],
        )

    def age(self, key: CacheKey) -> float | None:
        """Seconds since the key was last set, or None if never set."""
        entry = self._entries.get(key)
        if entry is None:
            return None
        return self._clock() - entry.fetched_at

    def clear(self, key: CacheKey | None = None) -> None:
        """Clear cache for specific key or all."""
        if key is not None:
            self._entries.pop(key, None)
        else:
            self._entries.clear()

    def __len__(self) -> int:
        return len(self._entries)


__all__ = [
    "CacheEntry",
    "DataCache",
]
