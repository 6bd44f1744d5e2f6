"""
Validation Exceptions

Raised before any store call when caller input is unusable.
"""

from kvcache.core.exceptions.base import KVCacheError


class ValidationError(KVCacheError):
    """
    Raised when input validation fails.

    This is the base class for all validation-related errors.
    """
    pass


class InvalidArgumentError(ValidationError):
    """
    Raised when an operation argument is rejected.

    Common causes:
    - Missing key or value (None)
    - TTL unit other than h/m/s/ms
    - Negative or non-integer TTL
    - Empty namespace
    """
    pass
