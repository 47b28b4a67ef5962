"""Custom exception hierarchy for cache-adapter."""

from __future__ import annotations


class CacheError(Exception):
    """Base exception for all cache-adapter errors."""


class CacheConnectionError(CacheError):
    """Raised when the backing store is unreachable or the handle is not ready."""


class CacheClosedError(CacheConnectionError):
    """Raised when an operation is attempted on a closed cache handle."""


class CacheCommandError(CacheError):
    """Raised when the backing store rejects or fails a command."""
