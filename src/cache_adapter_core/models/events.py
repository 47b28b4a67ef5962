"""Connection state and lifecycle event models."""

from __future__ import annotations

from datetime import UTC, datetime
from enum import StrEnum

from pydantic import BaseModel, Field


class ConnectionState(StrEnum):
    """Connection state of a cache handle."""

    IDLE = "idle"
    CONNECTING = "connecting"
    READY = "ready"
    DISCONNECTED = "disconnected"
    CLOSED = "closed"


class ConnectionEventKind(StrEnum):
    """Kinds of lifecycle events emitted by a cache handle."""

    CONNECTED = "connected"
    ERROR = "error"
    CLOSED = "closed"


class ConnectionEvent(BaseModel):
    """A lifecycle event observed on a cache handle."""

    kind: ConnectionEventKind = Field(description="What happened to the connection")
    backend: str = Field(description="Backend name, e.g. 'redis' or 'disk'")
    target: str = Field(description="Human-readable store location, e.g. 'localhost:6379/0'")
    error_type: str | None = Field(default=None, description="Exception class name on error")
    error_message: str | None = Field(default=None, description="Error description on error")
    occurred_at: datetime = Field(
        default_factory=lambda: datetime.now(UTC), description="When the event occurred"
    )

    @classmethod
    def from_error(cls, backend: str, target: str, error: BaseException) -> ConnectionEvent:
        """Build an error event carrying the underlying exception detail."""
        return cls(
            kind=ConnectionEventKind.ERROR,
            backend=backend,
            target=target,
            error_type=type(error).__name__,
            error_message=str(error),
        )
