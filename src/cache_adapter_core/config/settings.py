"""Application settings using pydantic-settings."""

from __future__ import annotations

from pathlib import Path
from typing import Literal
from urllib.parse import unquote, urlparse

from pydantic import Field, SecretStr, model_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from cache_adapter_core.constants import DEFAULT_REDIS_HOST, DEFAULT_REDIS_PORT


class Settings(BaseSettings):
    """Central configuration for cache-adapter."""

    model_config = SettingsConfigDict(env_prefix="CACHE_", env_file=".env")

    # --- Backend ---
    cache_backend: Literal["redis", "disk"] = Field(
        default="redis",
        description="Cache backend: 'redis' for a Redis server, 'disk' for local diskcache",
    )

    # --- Redis ---
    redis_host: str = Field(
        default=DEFAULT_REDIS_HOST,
        description="Redis server hostname",
    )
    redis_port: int = Field(
        default=DEFAULT_REDIS_PORT,
        ge=1,
        le=65535,
        description="Redis server port",
    )
    redis_db: int = Field(
        default=0,
        ge=0,
        description="Redis logical database index",
    )
    redis_username: str | None = Field(
        default=None,
        description="Redis ACL username (optional)",
    )
    redis_password: SecretStr | None = Field(
        default=None,
        description="Redis password (optional)",
    )
    redis_url: str | None = Field(
        default=None,
        description="redis:// URL; overrides host, port, db and credentials when set",
    )
    redis_ssl: bool = Field(
        default=False,
        description="Use TLS for the Redis connection (set by a rediss:// URL)",
    )
    redis_connect_timeout_seconds: float = Field(
        default=5.0,
        gt=0,
        description="Timeout for establishing the Redis connection",
    )
    redis_socket_timeout_seconds: float = Field(
        default=5.0,
        gt=0,
        description="Timeout for a single Redis command round-trip",
    )

    # --- Disk ---
    cache_dir: Path = Field(
        default=Path("./.cache/cache_adapter"),
        description="Directory for the diskcache backend",
    )

    # --- Logging ---
    log_level: str = Field(
        default="INFO",
        description="Root log level",
    )
    log_format: Literal["console", "json"] = Field(
        default="console",
        description="Log renderer: human-readable console or JSON lines",
    )

    @model_validator(mode="after")
    def apply_redis_url(self) -> Settings:
        """Populate Redis coordinates from redis_url when provided."""
        if not self.redis_url:
            return self
        parsed = urlparse(self.redis_url)
        if parsed.scheme not in ("redis", "rediss"):
            msg = f"redis_url must use the redis:// or rediss:// scheme, got {parsed.scheme!r}"
            raise ValueError(msg)
        self.redis_ssl = parsed.scheme == "rediss"
        self.redis_host = parsed.hostname or DEFAULT_REDIS_HOST
        self.redis_port = parsed.port or DEFAULT_REDIS_PORT
        path = parsed.path.lstrip("/")
        if path:
            if not path.isdigit():
                msg = f"redis_url database must be an integer, got {path!r}"
                raise ValueError(msg)
            self.redis_db = int(path)
        if parsed.username:
            self.redis_username = unquote(parsed.username)
        if parsed.password:
            self.redis_password = SecretStr(unquote(parsed.password))
        return self
