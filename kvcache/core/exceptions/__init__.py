"""
Exception Module

Structured exception hierarchy for the namespaced cache.

Module Structure:
-----------------
- **base.py**: KVCacheError base class
- **cache.py**: Store-related exceptions (connection, type mismatch, index range)
- **validation.py**: Argument validation exceptions

Usage:
------
```python
from kvcache.core.exceptions import CacheTypeMismatchError, InvalidArgumentError
```

Store errors that are not listed here (``redis.exceptions.RedisError`` and
subclasses) are not wrapped and reach the caller unchanged.
"""

# Base exception
from kvcache.core.exceptions.base import KVCacheError

# Cache exceptions
from kvcache.core.exceptions.cache import (
    CacheConnectionError,
    CacheError,
    CacheIndexOutOfRangeError,
    CacheTypeMismatchError,
)

# Validation exceptions
from kvcache.core.exceptions.validation import InvalidArgumentError, ValidationError

__all__ = [
    # Base
    "KVCacheError",
    # Cache
    "CacheError",
    "CacheConnectionError",
    "CacheTypeMismatchError",
    "CacheIndexOutOfRangeError",
    # Validation
    "ValidationError",
    "InvalidArgumentError",
]
