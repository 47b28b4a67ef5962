"""Factory for creating a cache client from settings."""

from __future__ import annotations

from typing import TYPE_CHECKING

from cache_adapter_core.interfaces.cache import CacheClient

if TYPE_CHECKING:
    from cache_adapter_core.config.settings import Settings


def create_cache_client(settings: Settings) -> CacheClient:
    """Create a cache client based on settings.

    Returns ``DiskCacheClient`` when ``settings.cache_backend == "disk"``,
    otherwise returns ``RedisCacheClient`` built from the Redis coordinates.
    The returned handle is not connected yet.
    """
    if settings.cache_backend == "disk":
        from cache_adapter_infra.cache.disk_cache import DiskCacheClient

        return DiskCacheClient(settings.cache_dir)

    from cache_adapter_infra.cache.redis_cache import RedisCacheClient

    return RedisCacheClient.from_settings(settings)
