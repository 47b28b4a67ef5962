"""Shared mock Settings factory and real Settings factory for integration tests."""

from __future__ import annotations

from pathlib import Path
from typing import TYPE_CHECKING
from unittest.mock import MagicMock

if TYPE_CHECKING:
    from cache_adapter_core.config.settings import Settings


def make_settings(**overrides: object) -> MagicMock:
    """Create a mock Settings with sensible defaults.

    Override any attribute via keyword arguments.
    """
    settings = MagicMock()
    settings.cache_backend = "redis"
    settings.redis_host = "localhost"
    settings.redis_port = 6379
    settings.redis_db = 0
    settings.redis_username = None
    settings.redis_password = None
    settings.redis_url = None
    settings.redis_ssl = False
    settings.redis_connect_timeout_seconds = 5.0
    settings.redis_socket_timeout_seconds = 5.0
    settings.cache_dir = Path("/tmp/cache_adapter")
    settings.log_level = "INFO"
    settings.log_format = "console"

    for key, value in overrides.items():
        setattr(settings, key, value)

    return settings


def make_real_settings(tmp_path: Path, **overrides: object) -> Settings:
    """Create a real Settings instance pointing at the test Redis (db 1)."""
    from cache_adapter_core.config.settings import Settings as _Settings

    defaults: dict[str, object] = {
        "cache_backend": "redis",
        "redis_url": "redis://localhost:6379/1",
        "cache_dir": tmp_path / "cache",
    }
    defaults.update(overrides)
    return _Settings(**defaults)  # type: ignore[arg-type]
