"""
System Constants and Enumerations

Stage identifiers used in structured logs, TTL unit names and the
namespace separator used when composing effective cache keys.
"""

from enum import Enum

# ============================================================================
# Stage Identifiers (for logging)
# ============================================================================


class Stage(str, Enum):
    """
    Cache operation stages for structured logging.

    Format: {AREA}.{OPERATION}
    """

    # Connection lifecycle
    REDIS_INIT = "REDIS.1"
    REDIS_CONNECT = "REDIS.2"
    REDIS_DISCONNECT = "REDIS.3"
    REDIS_HEALTH = "REDIS.HEALTH"

    # String operations
    CACHE_SET = "CACHE.SET"
    CACHE_GET = "CACHE.GET"
    CACHE_DELETE = "CACHE.DEL"

    # List operations
    LIST_PUSH = "LIST.PUSH"
    LIST_POP = "LIST.POP"
    LIST_LEN = "LIST.LEN"
    LIST_INDEX = "LIST.INDEX"
    LIST_SET = "LIST.SET"


# ============================================================================
# Key Composition
# ============================================================================

# Effective key = f"{namespace}{NAMESPACE_SEPARATOR}{key}"
NAMESPACE_SEPARATOR = "_"


# ============================================================================
# TTL Units
# ============================================================================

SECONDS_PER_HOUR = 3600
SECONDS_PER_MINUTE = 60
DEFAULT_TTL_UNIT = "s"

# Redis error prefixes surfaced by redis-py as ResponseError messages
REDIS_ERR_WRONGTYPE = "WRONGTYPE"
REDIS_ERR_INDEX_OUT_OF_RANGE = "index out of range"
REDIS_ERR_NO_SUCH_KEY = "no such key"
