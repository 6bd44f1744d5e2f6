"""
Unit Tests for Redis Connection Management

Pool and client construction are patched; no Redis server is needed.
"""

from unittest.mock import AsyncMock, MagicMock, patch

import pytest
from redis.exceptions import ConnectionError

from kvcache.core.exceptions import CacheConnectionError
from kvcache.infrastructure.cache.cache_manager import CacheManager, init_cache
from kvcache.infrastructure.cache.redis_client import ConnectionManager

MODULE = "kvcache.infrastructure.cache.redis_client"


@pytest.fixture
def patched_redis():
    """Patch ConnectionPool and redis.Redis; yield (pool_cls, client)."""
    client = MagicMock()
    client.ping = AsyncMock(return_value=True)
    client.aclose = AsyncMock()

    pool = MagicMock()
    pool.disconnect = AsyncMock()

    with (
        patch(f"{MODULE}.ConnectionPool", return_value=pool) as pool_cls,
        patch(f"{MODULE}.redis.Redis", return_value=client),
    ):
        yield pool_cls, client


@pytest.mark.unit
class TestConnectionManager:
    """Test suite for ConnectionManager."""

    @pytest.mark.asyncio
    async def test_connect_builds_pool_from_settings(self, mock_settings, patched_redis):
        """Test pool parameters come from RedisSettings."""
        pool_cls, client = patched_redis
        connection = ConnectionManager(mock_settings)

        result = await connection.connect()

        assert result is client
        assert connection.is_connected()
        kwargs = pool_cls.call_args.kwargs
        assert kwargs["host"] == "localhost"
        assert kwargs["port"] == 6379
        assert kwargs["max_connections"] == 10
        assert kwargs["decode_responses"] is True
        client.ping.assert_awaited_once()

    @pytest.mark.asyncio
    async def test_connect_is_idempotent(self, mock_settings, patched_redis):
        """Test a second connect reuses the client."""
        pool_cls, _ = patched_redis
        connection = ConnectionManager(mock_settings)

        first = await connection.connect()
        second = await connection.connect()

        assert first is second
        assert pool_cls.call_count == 1

    @pytest.mark.asyncio
    async def test_connect_failure_raises_cache_connection_error(self, mock_settings, patched_redis):
        """Test ping failure is wrapped and the pool is released."""
        _, client = patched_redis
        client.ping.side_effect = ConnectionError("refused")
        connection = ConnectionManager(mock_settings)

        with pytest.raises(CacheConnectionError) as exc_info:
            await connection.connect()

        assert exc_info.value.details == {"host": "localhost", "port": 6379}
        assert not connection.is_connected()
        assert connection.get_client() is None

    @pytest.mark.asyncio
    async def test_disconnect_closes_client_and_pool(self, mock_settings, patched_redis):
        """Test disconnect releases resources."""
        pool_cls, client = patched_redis
        connection = ConnectionManager(mock_settings)
        await connection.connect()

        await connection.disconnect()

        client.aclose.assert_awaited_once()
        pool_cls.return_value.disconnect.assert_awaited_once()
        assert not connection.is_connected()

    @pytest.mark.asyncio
    async def test_ping(self, mock_settings, patched_redis):
        """Test ping is False before connect and True after."""
        connection = ConnectionManager(mock_settings)
        assert await connection.ping() is False

        await connection.connect()
        assert await connection.ping() is True

    @pytest.mark.asyncio
    async def test_async_context_manager(self, mock_settings, patched_redis):
        """Test 'async with' connects and disconnects."""
        _, client = patched_redis

        async with ConnectionManager(mock_settings) as connected:
            assert connected is client

        client.aclose.assert_awaited_once()


@pytest.mark.unit
class TestInitCache:
    """Test the composition root."""

    @pytest.mark.asyncio
    async def test_init_cache_binds_namespace_and_client(self, mock_settings, patched_redis):
        """Test init_cache wires settings, connection and manager."""
        _, client = patched_redis

        manager = await init_cache(mock_settings)

        assert isinstance(manager, CacheManager)
        assert manager.namespace == "testapp"
        assert manager.get_prefix_key("k") == "testapp_k"

        await manager.close()
        client.aclose.assert_awaited_once()
