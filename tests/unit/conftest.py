"""Shared pytest fixtures for unit tests."""

from __future__ import annotations

import logging
from collections.abc import AsyncGenerator, Generator
from pathlib import Path
from unittest.mock import MagicMock

import pytest
import pytest_asyncio

from cache_adapter_infra.cache.disk_cache import DiskCacheClient
from cache_adapter_infra.cache.redis_cache import RedisCacheClient
from tests.mocks.mock_redis import make_mock_redis
from tests.mocks.mock_settings import make_settings


@pytest.fixture
def mock_settings() -> MagicMock:
    """Return a MagicMock Settings with sensible defaults."""
    return make_settings()


@pytest.fixture
def mock_redis() -> MagicMock:
    """Return a mock redis-py asyncio client."""
    return make_mock_redis()


@pytest_asyncio.fixture
async def redis_cache(mock_redis: MagicMock) -> AsyncGenerator[RedisCacheClient, None]:
    """Return a connected RedisCacheClient wrapping the mock client."""
    cache = RedisCacheClient(mock_redis, target="localhost:6379/0")
    await cache.connect()
    yield cache
    await cache.close()


@pytest_asyncio.fixture
async def disk_cache(tmp_path: Path) -> AsyncGenerator[DiskCacheClient, None]:
    """Return a connected DiskCacheClient in a temporary directory."""
    cache = DiskCacheClient(tmp_path / "disk_cache")
    await cache.connect()
    yield cache
    await cache.close()


@pytest.fixture(autouse=True)
def _reset_logging() -> Generator[None, None, None]:
    """Save and restore root logger handlers changed by configure_logging()."""
    root = logging.getLogger()
    original_handlers = root.handlers[:]
    original_level = root.level
    yield
    root.handlers = original_handlers
    root.level = original_level
