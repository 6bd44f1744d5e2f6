"""
kvcache

Namespaced key prefixing, TTL unit normalization and input validation over
Redis string and list keys.

Usage:
    from kvcache import init_cache

    cache = await init_cache()
    await cache.set("token", "abc", 30, "m")
    await cache.close()
"""

from kvcache.core.exceptions import (
    CacheConnectionError,
    CacheIndexOutOfRangeError,
    CacheTypeMismatchError,
    InvalidArgumentError,
    KVCacheError,
)
from kvcache.infrastructure.cache import CacheManager, ConnectionManager, init_cache

__version__ = "1.0.0"

__all__ = [
    "CacheManager",
    "ConnectionManager",
    "init_cache",
    "KVCacheError",
    "InvalidArgumentError",
    "CacheTypeMismatchError",
    "CacheIndexOutOfRangeError",
    "CacheConnectionError",
]
