"""
Pytest Configuration and Shared Test Fixtures

This module provides pytest configuration and reusable fixtures for all tests.
All fixtures defined here are automatically available to all test files.
"""

import os
from unittest.mock import AsyncMock, MagicMock

import pytest

from tests.test_fixtures.cache_factory import InMemoryRedis

# ============================================================================
# Mock Configuration Fixtures
# ============================================================================


@pytest.fixture
def mock_settings():
    """
    Mock application settings for testing.

    Returns a MagicMock with the attributes the cache reads.
    """
    from kvcache.core.config.settings import Settings

    settings = MagicMock(spec=Settings)

    settings.app.APP_NAME = "testapp"

    settings.redis.REDIS_HOST = "localhost"
    settings.redis.REDIS_PORT = 6379
    settings.redis.REDIS_DB = 0
    settings.redis.REDIS_PASSWORD = None
    settings.redis.REDIS_MAX_CONNECTIONS = 10
    settings.redis.REDIS_SOCKET_TIMEOUT = 5
    settings.redis.REDIS_SOCKET_CONNECT_TIMEOUT = 5
    settings.redis.REDIS_HEALTH_CHECK_INTERVAL = 30

    settings.logging.LOG_LEVEL = "DEBUG"
    settings.logging.LOG_FORMAT = "console"

    return settings


# ============================================================================
# Environment-Based Integration Toggles
# ============================================================================


@pytest.fixture(scope="session")
def use_real_redis():
    """Check if real Redis should be used for integration tests."""
    return os.getenv("USE_REAL_REDIS", "0").lower() in ("1", "true", "yes")


# ============================================================================
# Store Fixtures
# ============================================================================


@pytest.fixture
def in_memory_redis_client():
    """
    In-memory Redis client stub for testing.

    Mimics the string and list commands used by CacheManager, including
    the WRONGTYPE and index errors a real server returns.
    """
    return InMemoryRedis()


@pytest.fixture
def mock_redis_client():
    """AsyncMock Redis client for asserting exact command shapes."""
    client = AsyncMock()
    client.get = AsyncMock(return_value=None)
    client.set = AsyncMock(return_value=True)
    client.delete = AsyncMock(return_value=1)
    client.rpush = AsyncMock(return_value=1)
    client.lpush = AsyncMock(return_value=1)
    client.rpushx = AsyncMock(return_value=0)
    client.lpop = AsyncMock(return_value=None)
    client.rpop = AsyncMock(return_value=None)
    client.llen = AsyncMock(return_value=0)
    client.lindex = AsyncMock(return_value=None)
    client.lset = AsyncMock(return_value=True)
    client.ping = AsyncMock(return_value=True)
    return client


# ============================================================================
# Cache Manager Fixtures
# ============================================================================


@pytest.fixture
def cache_manager(in_memory_redis_client):
    """CacheManager over the in-memory store, namespace 'testapp'."""
    from kvcache.infrastructure.cache.cache_manager import CacheManager

    return CacheManager(in_memory_redis_client, namespace="testapp")


@pytest.fixture
def mocked_cache_manager(mock_redis_client):
    """CacheManager over an AsyncMock store, namespace 'testapp'."""
    from kvcache.infrastructure.cache.cache_manager import CacheManager

    return CacheManager(mock_redis_client, namespace="testapp")


@pytest.fixture
async def real_or_memory_cache(use_real_redis, in_memory_redis_client):
    """
    CacheManager backed by real Redis if enabled, otherwise the in-memory stub.
    """
    from kvcache.infrastructure.cache.cache_manager import CacheManager, init_cache

    if use_real_redis:
        manager = await init_cache()
        yield manager
        await manager.close()
    else:
        yield CacheManager(in_memory_redis_client, namespace="testapp")
