"""Public model re-exports for cache_adapter_core."""

from cache_adapter_core.models.events import (
    ConnectionEvent,
    ConnectionEventKind,
    ConnectionState,
)

__all__ = [
    "ConnectionEvent",
    "ConnectionEventKind",
    "ConnectionState",
]
