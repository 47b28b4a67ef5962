"""Shared constants for cache-adapter."""

from __future__ import annotations

# Values used by the demo run
DEMO_KEY = "myKey"
DEMO_VALUE = "myValue"
DEMO_TTL_SECONDS = 3600

# Rendered in console output when a key is absent
NOT_FOUND_DISPLAY = "null"

DEFAULT_REDIS_HOST = "localhost"
DEFAULT_REDIS_PORT = 6379
