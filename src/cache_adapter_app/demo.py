"""Demonstration run: set, read back, delete and read again through the contract."""

from __future__ import annotations

from typing import TYPE_CHECKING

import structlog
from pydantic import BaseModel, Field

from cache_adapter_app.observability import bind_cache_context, clear_cache_context
from cache_adapter_core.constants import DEMO_KEY, DEMO_TTL_SECONDS, DEMO_VALUE
from cache_adapter_infra.cache.factory import create_cache_client

if TYPE_CHECKING:
    from cache_adapter_core.config.settings import Settings
    from cache_adapter_core.interfaces.cache import CacheClient

logger = structlog.get_logger()


class DemoResult(BaseModel):
    """Values observed during a demo run."""

    key: str = Field(description="Key used for the run")
    cached_value: str | None = Field(description="Value read back right after set")
    deleted_value: str | None = Field(description="Value read after delete (expected None)")


class DemoApp:
    """Exercises a cache handle through the contract only."""

    def __init__(self, cache: CacheClient) -> None:
        """Initialize with any CacheClient implementation."""
        self._cache = cache

    async def run(
        self,
        key: str = DEMO_KEY,
        value: str = DEMO_VALUE,
        ttl_seconds: int | None = DEMO_TTL_SECONDS,
    ) -> DemoResult:
        """Set, get, delete, get; return what each get observed."""
        await self._cache.set(key, value, ttl_seconds)
        cached_value = await self._cache.get(key)
        logger.info("demo_cached_value", key=key, value=cached_value)

        await self._cache.delete(key)
        deleted_value = await self._cache.get(key)
        logger.info("demo_deleted_value", key=key, value=deleted_value)

        return DemoResult(key=key, cached_value=cached_value, deleted_value=deleted_value)


async def run_demo(settings: Settings, **run_kwargs: object) -> DemoResult:
    """Build the configured cache, run the demo, and always close the handle."""
    cache = create_cache_client(settings)
    bind_cache_context(settings.cache_backend, cache.target)
    try:
        await cache.connect()
        return await DemoApp(cache).run(**run_kwargs)  # type: ignore[arg-type]
    except Exception as exc:
        logger.error("demo_failed", error_type=type(exc).__name__, error=str(exc))
        raise
    finally:
        await cache.close()
        clear_cache_context()
