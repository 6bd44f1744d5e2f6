#!/usr/bin/env python3
"""
Namespaced Cache Manager

Architecture:
    CacheManager (Public API)
        ├── key composition   "{namespace}_{key}"
        ├── TTL normalization (ttl.normalize_ttl)
        └── injected store    (redis.asyncio.Redis or compatible)

Every public operation is exactly one store round-trip. Nothing is retried,
batched or cached locally; store errors propagate unless listed below.

Error mapping:
    - None key/value, bad TTL or unit   -> InvalidArgumentError (no store call)
    - GET on a non-string key           -> CacheTypeMismatchError
    - LSET outside the list bounds      -> CacheIndexOutOfRangeError
"""

import time
from typing import Any

import redis.asyncio as redis
from redis.exceptions import ResponseError

from kvcache.core.config.constants import (
    DEFAULT_TTL_UNIT,
    NAMESPACE_SEPARATOR,
    REDIS_ERR_INDEX_OUT_OF_RANGE,
    REDIS_ERR_NO_SUCH_KEY,
    REDIS_ERR_WRONGTYPE,
    Stage,
)
from kvcache.core.config.settings import Settings, get_settings
from kvcache.core.exceptions import (
    CacheIndexOutOfRangeError,
    CacheTypeMismatchError,
    InvalidArgumentError,
)
from kvcache.core.logging.logger import get_logger, log_stage
from kvcache.infrastructure.cache.redis_client import ConnectionManager
from kvcache.infrastructure.cache.ttl import normalize_ttl

logger = get_logger(__name__)

# Scalar stored under a string-type key
CacheValue = str | int | float

# Element of a list-type key; encoding to the wire is redis-py's job
ListValue = str | bytes | int | float


class CacheManager:
    """
    Namespaced façade over a Redis store for string and list keys.

    The store handle is injected and held for the lifetime of the manager.
    The namespace is fixed at construction.

    Usage:
        client = await ConnectionManager(settings).connect()
        cache = CacheManager(client, namespace="shop")

        await cache.set("user:1", "alice", 10, "m")   # SET shop_user:1 alice EX 600
        await cache.get("user:1")                     # "alice"

        await cache.push_list_after("jobs", "a")      # RPUSH shop_jobs a
        await cache.rm_list_top("jobs")               # LPOP shop_jobs -> "a"
    """

    def __init__(
        self,
        store: redis.Redis,
        namespace: str | None = None,
        connection: ConnectionManager | None = None,
    ):
        """
        Args:
            store: Connected async Redis client (or compatible object)
            namespace: Key prefix; defaults to settings.app.APP_NAME
            connection: ConnectionManager that owns ``store``; closed by close()

        Raises:
            InvalidArgumentError: If the namespace is empty or blank
        """
        if namespace is None:
            namespace = get_settings().app.APP_NAME
        if not namespace.strip():
            raise InvalidArgumentError("[cache]: namespace must not be empty")

        self._store = store
        self._namespace = namespace
        self._connection = connection

    @property
    def namespace(self) -> str:
        return self._namespace

    def get_prefix_key(self, key: str) -> str:
        """Compose the effective store key for ``key``."""
        return f"{self._namespace}{NAMESPACE_SEPARATOR}{key}"

    # -------------------------------------------------------------------------
    # String Operations
    # -------------------------------------------------------------------------

    async def set(
        self,
        key: str,
        value: CacheValue,
        ttl: int | float | None = None,
        unit: str = DEFAULT_TTL_UNIT,
    ) -> Any:
        """
        Set a string-type entry, optionally with an expiry.

        STAGE-CACHE.SET

        Args:
            key: Cache key (prefixed with the namespace)
            value: Scalar to store
            ttl: Duration before expiry; None stores without expiry
            unit: Unit of ``ttl``: h, m, s (default) or ms, any case

        Returns:
            The store's SET reply (True on success)

        Raises:
            InvalidArgumentError: Missing key/value, bad unit or bad TTL
        """
        if key is None or value is None:
            log_stage(logger, Stage.CACHE_SET, "Rejected cache set", level="warning", key=key)
            raise InvalidArgumentError(
                "[cache]: key and value are required",
                details={"key_missing": key is None, "value_missing": value is None},
            )

        effective_key = self.get_prefix_key(key)

        if ttl is None:
            log_stage(logger, Stage.CACHE_SET, "Cache set", level="debug", key=effective_key)
            return await self._store.set(effective_key, value)

        try:
            expiry = normalize_ttl(ttl, unit)
        except InvalidArgumentError as e:
            log_stage(
                logger, Stage.CACHE_SET, "Rejected cache TTL", level="warning",
                key=effective_key, ttl=repr(ttl), unit=repr(unit),
            )
            raise e.with_context(key=key)

        log_stage(
            logger,
            Stage.CACHE_SET,
            "Cache set with expiry",
            level="debug",
            key=effective_key,
            mode=expiry.mode.value,
            expiry=expiry.amount,
        )
        return await self._store.set(effective_key, value, **expiry.as_set_kwargs())

    async def get(self, key: str) -> Any:
        """
        Get a string-type entry.

        STAGE-CACHE.GET

        Returns:
            Stored value, or None if the key does not exist

        Raises:
            InvalidArgumentError: If key is None
            CacheTypeMismatchError: If the key holds a non-string value
        """
        if key is None:
            log_stage(logger, Stage.CACHE_GET, "Rejected cache get", level="warning")
            raise InvalidArgumentError("[cache]: key is required")

        effective_key = self.get_prefix_key(key)

        try:
            value = await self._store.get(effective_key)
        except ResponseError as e:
            if not str(e).startswith(REDIS_ERR_WRONGTYPE):
                raise
            log_stage(
                logger, Stage.CACHE_GET, "Cache get on non-string key", level="warning", key=effective_key
            )
            raise CacheTypeMismatchError.from_exception(
                e,
                message="[cache]: get only supports string-type entries",
                key=effective_key,
            ) from e

        log_stage(
            logger,
            Stage.CACHE_GET,
            "Cache hit" if value is not None else "Cache miss",
            level="debug",
            key=effective_key,
        )
        return value

    async def has(self, key: str) -> bool:
        """True if ``get(key)`` yields a value."""
        return await self.get(key) is not None

    async def delete(self, key: str) -> int:
        """
        Delete an entry of any type.

        STAGE-CACHE.DEL

        Returns:
            Number of keys removed (0 if absent)

        Raises:
            InvalidArgumentError: If key is None
        """
        if key is None:
            log_stage(logger, Stage.CACHE_DELETE, "Rejected cache delete", level="warning")
            raise InvalidArgumentError("[cache]: key is required")

        effective_key = self.get_prefix_key(key)
        removed = await self._store.delete(effective_key)
        log_stage(logger, Stage.CACHE_DELETE, "Cache delete", level="debug", key=effective_key, removed=removed)
        return removed

    # -------------------------------------------------------------------------
    # List Operations (queues)
    # -------------------------------------------------------------------------

    async def push_list_after(self, key: str, value: ListValue) -> int:
        """
        Append to the tail of a list, creating it if needed (RPUSH).

        Returns:
            New list length
        """
        effective_key = self.get_prefix_key(key)
        log_stage(logger, Stage.LIST_PUSH, "List push tail", level="debug", key=effective_key)
        return await self._store.rpush(effective_key, value)

    async def push_list_top(self, key: str, value: ListValue) -> int:
        """
        Prepend to the head of a list, creating it if needed (LPUSH).

        Returns:
            New list length
        """
        effective_key = self.get_prefix_key(key)
        log_stage(logger, Stage.LIST_PUSH, "List push head", level="debug", key=effective_key)
        return await self._store.lpush(effective_key, value)

    async def rpushx(self, key: str, value: ListValue) -> int:
        """
        Append to the tail only if the list already exists (RPUSHX).

        Returns:
            New list length, 0 when the key does not exist
        """
        effective_key = self.get_prefix_key(key)
        log_stage(
            logger, Stage.LIST_PUSH, "List push tail if exists", level="debug", key=effective_key
        )
        return await self._store.rpushx(effective_key, value)

    async def rm_list_top(self, key: str) -> Any:
        """Pop the head of a list (LPOP); None when empty or missing."""
        effective_key = self.get_prefix_key(key)
        log_stage(logger, Stage.LIST_POP, "List pop head", level="debug", key=effective_key)
        return await self._store.lpop(effective_key)

    async def rm_list_after(self, key: str) -> Any:
        """Pop the tail of a list (RPOP); None when empty or missing."""
        effective_key = self.get_prefix_key(key)
        log_stage(logger, Stage.LIST_POP, "List pop tail", level="debug", key=effective_key)
        return await self._store.rpop(effective_key)

    async def get_list_len(self, key: str) -> int:
        """Length of a list (LLEN); 0 when missing."""
        effective_key = self.get_prefix_key(key)
        log_stage(logger, Stage.LIST_LEN, "List length", level="debug", key=effective_key)
        return await self._store.llen(effective_key)

    async def get_list_index(self, key: str, index: int) -> Any:
        """
        Element at ``index`` of a list (LINDEX).

        Zero-based; negative indices count from the tail (-1 is the last).

        Returns:
            The element, or None when the index is out of range
        """
        effective_key = self.get_prefix_key(key)
        log_stage(logger, Stage.LIST_INDEX, "List index", level="debug", key=effective_key, index=index)
        return await self._store.lindex(effective_key, index)

    async def set_list_value(self, key: str, index: int, value: ListValue) -> Any:
        """
        Overwrite the element at ``index`` of a list (LSET).

        Raises:
            CacheIndexOutOfRangeError: If the index is outside the list,
                or the list does not exist
        """
        effective_key = self.get_prefix_key(key)
        log_stage(
            logger, Stage.LIST_SET, "List set", level="debug", key=effective_key, index=index
        )

        try:
            return await self._store.lset(effective_key, index, value)
        except ResponseError as e:
            message = str(e)
            if REDIS_ERR_INDEX_OUT_OF_RANGE not in message and REDIS_ERR_NO_SUCH_KEY not in message:
                raise
            log_stage(
                logger, Stage.LIST_SET, "List index out of range", level="warning",
                key=effective_key, index=index,
            )
            raise CacheIndexOutOfRangeError.from_exception(
                e,
                message=f"[cache]: list index {index} out of range",
                key=effective_key,
                index=index,
            ) from e

    # -------------------------------------------------------------------------
    # Monitoring & Lifecycle
    # -------------------------------------------------------------------------

    async def health_check(self) -> dict[str, Any]:
        """
        Ping the store.

        STAGE-REDIS.HEALTH

        Returns:
            Dict with status, namespace and ping latency; never raises
        """
        health: dict[str, Any] = {
            "status": "healthy",
            "namespace": self._namespace,
            "ping_latency_ms": None,
        }

        try:
            start = time.perf_counter()
            await self._store.ping()
            health["ping_latency_ms"] = round((time.perf_counter() - start) * 1000, 2)
        except Exception as e:
            health["status"] = "unhealthy"
            health["error"] = str(e)
            log_stage(logger, Stage.REDIS_HEALTH, "Store health check failed", level="warning", error=str(e))

        return health

    async def close(self) -> None:
        """Disconnect the owning ConnectionManager, if this manager has one."""
        if self._connection is not None:
            await self._connection.disconnect()


async def init_cache(settings: Settings | None = None) -> CacheManager:
    """
    Connect to Redis and build a CacheManager for the configured namespace.

    The returned manager owns the connection; call ``close()`` on shutdown.

    Raises:
        CacheConnectionError: If Redis is unreachable
    """
    settings = settings or get_settings()
    connection = ConnectionManager(settings)
    client = await connection.connect()
    return CacheManager(client, namespace=settings.app.APP_NAME, connection=connection)
