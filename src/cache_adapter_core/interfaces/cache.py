"""Abstract cache interface."""

from __future__ import annotations

from collections.abc import Callable
from typing import Protocol, Self, runtime_checkable

from cache_adapter_core.models.events import ConnectionEvent, ConnectionState

ConnectionListener = Callable[[ConnectionEvent], None]


@runtime_checkable
class CacheClient(Protocol):
    """Abstract cache interface; implementations can be swapped.

    Handles are not usable until ``connect()`` has completed. Calls made
    while the handle is not ready raise ``CacheConnectionError`` instead of
    being queued.
    """

    @property
    def state(self) -> ConnectionState:
        """Current connection state of the handle."""
        ...

    @property
    def target(self) -> str:
        """Human-readable location of the backing store."""
        ...

    async def connect(self) -> None:
        """Establish the connection and wait until the store is ready."""
        ...

    async def get(self, key: str) -> str | None:
        """Retrieve a value by key, or None if not found."""
        ...

    async def set(self, key: str, value: str, ttl_seconds: int | None = None) -> None:
        """Store a value; expire it after ttl_seconds when given."""
        ...

    async def delete(self, key: str) -> None:
        """Delete a key from the cache. Missing keys are not an error."""
        ...

    async def exists(self, key: str) -> bool:
        """Check if a key exists in the cache."""
        ...

    async def close(self) -> None:
        """Release the underlying connection."""
        ...

    def add_listener(self, listener: ConnectionListener) -> None:
        """Subscribe to connection lifecycle events."""
        ...

    def remove_listener(self, listener: ConnectionListener) -> None:
        """Unsubscribe from connection lifecycle events."""
        ...

    async def __aenter__(self) -> Self: ...

    async def __aexit__(self, *exc_info: object) -> None: ...
