"""Integration test fixtures: real Redis on localhost:6379, database 1."""

from __future__ import annotations

import logging
import socket
import time
from collections.abc import AsyncGenerator, Generator

import pytest
import pytest_asyncio
from redis.asyncio import Redis

from cache_adapter_infra.cache.redis_cache import RedisCacheClient

# ---------------------------------------------------------------------------
# Service health checks (with retry for CI container start-up)
# ---------------------------------------------------------------------------


def _tcp_reachable(
    host: str,
    port: int,
    timeout: float = 1.0,
    retries: int = 15,
    delay: float = 2.0,
) -> bool:
    """Check if a TCP service is reachable, retrying on failure."""
    for attempt in range(retries):
        try:
            with socket.create_connection((host, port), timeout=timeout):
                return True
        except OSError:
            if attempt < retries - 1:
                time.sleep(delay)
    return False


_redis_up = _tcp_reachable("localhost", 6379, retries=3, delay=1.0)

require_redis = pytest.mark.skipif(
    not _redis_up,
    reason="Redis not reachable on localhost:6379; start one with `docker run -p 6379:6379 redis`",
)

TEST_REDIS_URL = "redis://localhost:6379/1"


# ---------------------------------------------------------------------------
# Redis fixtures
# ---------------------------------------------------------------------------


@pytest_asyncio.fixture
async def redis_client() -> AsyncGenerator[Redis, None]:  # type: ignore[type-arg]
    """Function-scoped raw Redis client on test DB 1, flushed around each test."""
    if not _redis_up:
        pytest.skip("Redis not available")

    client = Redis.from_url(TEST_REDIS_URL, decode_responses=True)
    await client.flushdb()
    yield client
    await client.flushdb()
    await client.aclose()


@pytest_asyncio.fixture
async def redis_cache(redis_client: Redis) -> AsyncGenerator[RedisCacheClient, None]:  # type: ignore[type-arg]
    """Connected RedisCacheClient on its own client for test DB 1."""
    cache = RedisCacheClient(Redis.from_url(TEST_REDIS_URL), target="localhost:6379/1")
    await cache.connect()
    yield cache
    await cache.close()


# ---------------------------------------------------------------------------
# Logging cleanup
# ---------------------------------------------------------------------------


@pytest.fixture(autouse=True)
def _reset_logging() -> Generator[None, None, None]:
    """Save and restore root logger handlers changed by configure_logging()."""
    root = logging.getLogger()
    original_handlers = root.handlers[:]
    original_level = root.level
    yield
    root.handlers = original_handlers
    root.level = original_level
