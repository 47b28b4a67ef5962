"""diskcache-backed implementation of CacheClient."""

from __future__ import annotations

import asyncio
import sqlite3
from collections.abc import Callable
from pathlib import Path
from typing import TypeVar

import diskcache

from cache_adapter_core.exceptions import CacheCommandError, CacheConnectionError
from cache_adapter_infra.cache.lifecycle import ConnectionLifecycle

T = TypeVar("T")


class DiskCacheClient(ConnectionLifecycle):
    """Persistent cache backed by diskcache (SQLite under the hood)."""

    backend = "disk"

    def __init__(self, cache_dir: Path) -> None:
        """Initialize with a cache directory. The cache is opened by connect()."""
        super().__init__()
        self._cache_dir = cache_dir
        self._cache: diskcache.Cache | None = None

    @property
    def target(self) -> str:
        return str(self._cache_dir)

    async def connect(self) -> None:
        """Create the directory and open the cache."""
        self._ensure_open("connect")
        self._mark_connecting()
        try:
            self._cache = await asyncio.to_thread(self._open)
        except (OSError, sqlite3.Error) as exc:
            self._mark_failed(exc)
            msg = f"Cannot open disk cache at {self.target}: {exc}"
            raise CacheConnectionError(msg) from exc
        self._mark_ready()

    def _open(self) -> diskcache.Cache:
        self._cache_dir.mkdir(parents=True, exist_ok=True)
        return diskcache.Cache(str(self._cache_dir))

    async def get(self, key: str) -> str | None:
        """Retrieve a value by key."""
        result = await self._execute("get", lambda cache: cache.get(key))
        if result is None:
            return None
        return str(result)

    async def set(self, key: str, value: str, ttl_seconds: int | None = None) -> None:
        """Store a value, expiring it after ttl_seconds when positive."""
        if ttl_seconds is not None and ttl_seconds < 0:
            msg = f"ttl_seconds must be positive or None, got {ttl_seconds}"
            raise ValueError(msg)
        expire = ttl_seconds or None
        await self._execute("set", lambda cache: cache.set(key, value, expire=expire))

    async def delete(self, key: str) -> None:
        """Delete a key from the cache."""
        await self._execute("delete", lambda cache: cache.delete(key))

    async def exists(self, key: str) -> bool:
        """Check if a key exists."""
        result = await self._execute("exists", lambda cache: key in cache)
        return bool(result)

    async def close(self) -> None:
        """Close the cache."""
        if self.closed:
            return
        cache, self._cache = self._cache, None
        try:
            if cache is not None:
                await asyncio.to_thread(cache.close)
        finally:
            self._mark_closed()

    async def _execute(self, operation: str, command: Callable[[diskcache.Cache], T]) -> T:
        """Run a blocking diskcache call in a worker thread."""
        self._ensure_ready(operation)
        cache = self._cache
        assert cache is not None
        try:
            return await asyncio.to_thread(command, cache)
        except (diskcache.Timeout, sqlite3.Error) as exc:
            msg = f"Disk cache {operation} failed: {exc}"
            raise CacheCommandError(msg) from exc
