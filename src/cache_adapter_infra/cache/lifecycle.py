"""Connection state tracking and lifecycle events shared by cache adapters."""

from __future__ import annotations

from typing import Self

import structlog

from cache_adapter_core.exceptions import CacheClosedError, CacheConnectionError
from cache_adapter_core.interfaces.cache import ConnectionListener
from cache_adapter_core.models.events import (
    ConnectionEvent,
    ConnectionEventKind,
    ConnectionState,
)

logger = structlog.get_logger()


class ConnectionLifecycle:
    """Base class holding a cache handle's connection state and listeners.

    Subclasses call ``_mark_connecting``, ``_mark_ready``, ``_mark_failed``
    and ``_mark_closed`` as their backing client changes state, and
    ``_ensure_ready`` before issuing any command.
    """

    backend: str = "base"

    def __init__(self) -> None:
        """Initialize in the idle state with no listeners."""
        self._state = ConnectionState.IDLE
        self._listeners: list[ConnectionListener] = []

    @property
    def state(self) -> ConnectionState:
        """Current connection state of the handle."""
        return self._state

    @property
    def target(self) -> str:
        """Human-readable location of the backing store."""
        return self.backend

    def add_listener(self, listener: ConnectionListener) -> None:
        """Subscribe to connection lifecycle events."""
        self._listeners.append(listener)

    def remove_listener(self, listener: ConnectionListener) -> None:
        """Unsubscribe from connection lifecycle events."""
        if listener in self._listeners:
            self._listeners.remove(listener)

    async def connect(self) -> None:
        """Establish the connection. Implemented by subclasses."""
        raise NotImplementedError

    async def close(self) -> None:
        """Release the connection. Implemented by subclasses."""
        raise NotImplementedError

    async def __aenter__(self) -> Self:
        await self.connect()
        return self

    async def __aexit__(self, *exc_info: object) -> None:
        await self.close()

    @property
    def closed(self) -> bool:
        """Whether close() has completed."""
        return self._state is ConnectionState.CLOSED

    def _ensure_open(self, operation: str) -> None:
        """Raise CacheClosedError once the handle has been closed."""
        if self.closed:
            msg = f"Cannot {operation}: {self.backend} cache at {self.target} is closed"
            raise CacheClosedError(msg)

    def _ensure_ready(self, operation: str) -> None:
        """Fail fast unless the handle is ready to issue commands."""
        if self._state is ConnectionState.READY:
            return
        self._ensure_open(operation)
        msg = (
            f"Cannot {operation}: {self.backend} cache at {self.target} is "
            f"{self._state.value}; await connect() first"
        )
        raise CacheConnectionError(msg)

    def _mark_connecting(self) -> None:
        self._state = ConnectionState.CONNECTING

    def _mark_ready(self) -> None:
        self._state = ConnectionState.READY
        logger.info("cache_connected", backend=self.backend, target=self.target)
        self._emit(
            ConnectionEvent(
                kind=ConnectionEventKind.CONNECTED,
                backend=self.backend,
                target=self.target,
            )
        )

    def _mark_failed(self, error: BaseException) -> None:
        self._state = ConnectionState.DISCONNECTED
        logger.error(
            "cache_connection_error",
            backend=self.backend,
            target=self.target,
            error_type=type(error).__name__,
            error=str(error),
        )
        self._emit(ConnectionEvent.from_error(self.backend, self.target, error))

    def _mark_closed(self) -> None:
        self._state = ConnectionState.CLOSED
        logger.info("cache_closed", backend=self.backend, target=self.target)
        self._emit(
            ConnectionEvent(
                kind=ConnectionEventKind.CLOSED,
                backend=self.backend,
                target=self.target,
            )
        )

    def _emit(self, event: ConnectionEvent) -> None:
        """Deliver an event to every listener; a failing listener is logged and skipped."""
        for listener in list(self._listeners):
            try:
                listener(event)
            except Exception:
                logger.exception(
                    "cache_listener_failed",
                    backend=self.backend,
                    event_kind=event.kind.value,
                )
