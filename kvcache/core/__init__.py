"""
Core Module

Foundational components: configuration, logging and exceptions.
"""

from .exceptions import (
    CacheConnectionError,
    CacheError,
    CacheIndexOutOfRangeError,
    CacheTypeMismatchError,
    InvalidArgumentError,
    KVCacheError,
    ValidationError,
)
from .logging import (
    get_logger,
    log_stage,
    setup_logging,
)

__all__ = [
    "setup_logging",
    "get_logger",
    "log_stage",
    "KVCacheError",
    "CacheError",
    "CacheConnectionError",
    "CacheTypeMismatchError",
    "CacheIndexOutOfRangeError",
    "ValidationError",
    "InvalidArgumentError",
]
