"""Public interface re-exports for cache_adapter_core."""

from cache_adapter_core.interfaces.cache import CacheClient, ConnectionListener

__all__ = [
    "CacheClient",
    "ConnectionListener",
]
