"""Redis-backed implementation of CacheClient."""

from __future__ import annotations

from collections.abc import Awaitable, Callable
from typing import TYPE_CHECKING, TypeVar

from redis.asyncio import Redis
from redis.exceptions import ConnectionError as RedisConnectionError
from redis.exceptions import RedisError
from redis.exceptions import TimeoutError as RedisTimeoutError

from cache_adapter_core.exceptions import CacheCommandError, CacheConnectionError
from cache_adapter_infra.cache.lifecycle import ConnectionLifecycle

if TYPE_CHECKING:
    from cache_adapter_core.config.settings import Settings

T = TypeVar("T")


def _decode(value: object) -> str | None:
    """Normalize a Redis reply to str, keeping None for a miss."""
    if value is None:
        return None
    if isinstance(value, bytes):
        return value.decode("utf-8")
    return str(value)


class RedisCacheClient(ConnectionLifecycle):
    """Cache backed by a Redis server through a redis-py asyncio client.

    The adapter owns exactly one client for its lifetime. It never retries:
    connection-level failures move the handle to ``disconnected`` and raise
    ``CacheConnectionError``; any other Redis error raises
    ``CacheCommandError``.
    """

    backend = "redis"

    def __init__(self, redis: Redis, *, target: str | None = None) -> None:  # type: ignore[type-arg]
        """Initialize with a redis-py asyncio client. No I/O is performed."""
        super().__init__()
        self._redis = redis
        self._target = target or _describe(redis)

    @classmethod
    def from_settings(cls, settings: Settings) -> RedisCacheClient:
        """Build a client from host, port, db and credentials in settings."""
        password = settings.redis_password.get_secret_value() if settings.redis_password else None
        redis = Redis(
            host=settings.redis_host,
            port=settings.redis_port,
            db=settings.redis_db,
            username=settings.redis_username,
            password=password,
            socket_connect_timeout=settings.redis_connect_timeout_seconds,
            socket_timeout=settings.redis_socket_timeout_seconds,
            ssl=settings.redis_ssl,
            decode_responses=True,
        )
        return cls(
            redis,
            target=f"{settings.redis_host}:{settings.redis_port}/{settings.redis_db}",
        )

    @property
    def target(self) -> str:
        """Location of the Redis server, e.g. 'localhost:6379/0'."""
        return self._target

    async def connect(self) -> None:
        """Ping the server and mark the handle ready."""
        self._ensure_open("connect")
        self._mark_connecting()
        try:
            await self._redis.ping()
        except (RedisConnectionError, RedisTimeoutError, OSError) as exc:
            self._mark_failed(exc)
            msg = f"Redis at {self.target} is unreachable: {exc}"
            raise CacheConnectionError(msg) from exc
        except RedisError as exc:
            self._mark_failed(exc)
            msg = f"Redis at {self.target} rejected PING: {exc}"
            raise CacheConnectionError(msg) from exc
        self._mark_ready()

    async def get(self, key: str) -> str | None:
        """Retrieve a value by key."""
        value = await self._execute("get", lambda: self._redis.get(key))
        return _decode(value)

    async def set(self, key: str, value: str, ttl_seconds: int | None = None) -> None:
        """Store a value, with an expiry when ttl_seconds is positive."""
        if ttl_seconds is not None and ttl_seconds < 0:
            msg = f"ttl_seconds must be positive or None, got {ttl_seconds}"
            raise ValueError(msg)
        if ttl_seconds:
            await self._execute(
                "set", lambda: self._redis.set(name=key, value=value, ex=ttl_seconds)
            )
        else:
            await self._execute("set", lambda: self._redis.set(name=key, value=value))

    async def delete(self, key: str) -> None:
        """Delete a key from the cache."""
        await self._execute("delete", lambda: self._redis.delete(key))

    async def exists(self, key: str) -> bool:
        """Check if a key exists."""
        count = await self._execute("exists", lambda: self._redis.exists(key))
        return bool(count)

    async def close(self) -> None:
        """Close the client's connections. Safe to call more than once."""
        if self.closed:
            return
        try:
            await self._redis.aclose()
        finally:
            self._mark_closed()

    async def _execute(self, operation: str, command: Callable[[], Awaitable[T]]) -> T:
        """Run one Redis command, translating redis-py errors."""
        self._ensure_ready(operation)
        try:
            return await command()
        except (RedisConnectionError, RedisTimeoutError) as exc:
            self._mark_failed(exc)
            msg = f"Redis {operation} failed, connection to {self.target} lost: {exc}"
            raise CacheConnectionError(msg) from exc
        except RedisError as exc:
            msg = f"Redis {operation} failed: {exc}"
            raise CacheCommandError(msg) from exc


def _describe(redis: Redis) -> str:  # type: ignore[type-arg]
    """Best-effort 'host:port/db' for an injected client."""
    kwargs = getattr(getattr(redis, "connection_pool", None), "connection_kwargs", None)
    if not isinstance(kwargs, dict):
        return "redis"
    return f"{kwargs.get('host', 'localhost')}:{kwargs.get('port', 6379)}/{kwargs.get('db', 0)}"
