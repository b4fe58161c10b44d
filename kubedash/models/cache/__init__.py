"""Response cache models."""

from kubedash.models.cache.data_cache import CacheEntry, DataCache

__all__ = [
    "CacheEntry",
    "DataCache",
]
