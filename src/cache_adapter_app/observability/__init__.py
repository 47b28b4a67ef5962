"""Observability: structured logging."""

from cache_adapter_app.observability.logging import (
    bind_cache_context,
    clear_cache_context,
    configure_logging,
)

__all__ = [
    "bind_cache_context",
    "clear_cache_context",
    "configure_logging",
]
