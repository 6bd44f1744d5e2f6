"""
Cache-Related Exceptions

All exceptions raised around the backing Redis store.
"""

from kvcache.core.exceptions.base import KVCacheError


class CacheError(KVCacheError):
    """Base exception for cache-related errors."""
    pass


class CacheConnectionError(CacheError):
    """
    Raised when unable to connect to the store (Redis).

    Common causes:
    - Redis server is down
    - Network connectivity issues
    - Incorrect host/port configuration
    - Authentication failure
    """
    pass


class CacheTypeMismatchError(CacheError):
    """
    Raised when a string operation hits a key holding another type.

    Redis answers such commands with a WRONGTYPE error; ``get`` on a
    list key is the common case.
    """
    pass


class CacheIndexOutOfRangeError(CacheError):
    """
    Raised when a list write targets an index outside the list bounds.

    Bounds are checked by the store, not locally.
    """
    pass
