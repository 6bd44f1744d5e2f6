"""
Cache Module

Namespaced façade over Redis string and list keys.
"""

from .cache_manager import (
    CacheManager,
    CacheValue,
    ListValue,
    init_cache,
)
from .redis_client import ConnectionManager
from .ttl import Expiry, ExpiryMode, TimeUnit, normalize_ttl

__all__ = [
    "CacheManager",
    "CacheValue",
    "ListValue",
    "init_cache",
    "ConnectionManager",
    "Expiry",
    "ExpiryMode",
    "TimeUnit",
    "normalize_ttl",
]
