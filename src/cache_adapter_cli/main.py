"""CLI entrypoint using typer."""

from __future__ import annotations

import asyncio
from collections.abc import Awaitable, Callable
from typing import TypeVar

import typer
from rich.console import Console

from cache_adapter_app.demo import run_demo
from cache_adapter_app.observability import configure_logging
from cache_adapter_core.config.settings import Settings
from cache_adapter_core.constants import (
    DEMO_KEY,
    DEMO_TTL_SECONDS,
    DEMO_VALUE,
    NOT_FOUND_DISPLAY,
)
from cache_adapter_core.exceptions import CacheError
from cache_adapter_core.interfaces.cache import CacheClient
from cache_adapter_infra.cache.factory import create_cache_client

T = TypeVar("T")

app = typer.Typer(
    name="cache-adapter",
    help="Async cache client behind a swappable contract",
)
console = Console()

BackendOption = typer.Option(None, "--backend", help="Cache backend: redis or disk")
VerboseOption = typer.Option(False, "-v", "--verbose", help="Enable debug logging")


def _load_settings(backend: str | None, verbose: bool) -> Settings:
    """Load settings from the environment and apply command-line overrides."""
    settings = Settings()
    if backend is not None:
        if backend not in ("redis", "disk"):
            console.print(f"[red]Error:[/red] Unknown backend {backend!r}", style="bold")
            raise typer.Exit(code=2)
        settings.cache_backend = backend  # type: ignore[assignment]
    if verbose:
        settings.log_level = "DEBUG"
    configure_logging(settings)
    return settings


def _display(value: str | None) -> str:
    return NOT_FOUND_DISPLAY if value is None else value


def _run(coro: Awaitable[T]) -> T:
    """Run a coroutine, turning cache errors into exit code 1."""
    try:
        return asyncio.run(coro)  # type: ignore[arg-type]
    except CacheError as exc:
        console.print(f"[red]Error:[/red] {exc}")
        raise typer.Exit(code=1) from exc


async def _with_cache(settings: Settings, action: Callable[[CacheClient], Awaitable[T]]) -> T:
    """Connect the configured cache, run one action, and close it."""
    async with create_cache_client(settings) as cache:
        return await action(cache)


@app.command()
def demo(
    key: str = typer.Option(DEMO_KEY, "--key", help="Key to write and delete"),
    value: str = typer.Option(DEMO_VALUE, "--value", help="Value to write"),
    ttl: int = typer.Option(DEMO_TTL_SECONDS, "--ttl", min=0, help="TTL in seconds (0 = none)"),
    backend: str | None = BackendOption,
    verbose: bool = VerboseOption,
) -> None:
    """Set a key, read it, delete it, and read it again."""
    settings = _load_settings(backend, verbose)
    result = _run(run_demo(settings, key=key, value=value, ttl_seconds=ttl))
    console.print(f"Cached Value: {_display(result.cached_value)}", markup=False)
    console.print(f"Deleted Value: {_display(result.deleted_value)}", markup=False)


@app.command()
def get(
    key: str = typer.Argument(..., help="Key to read"),
    backend: str | None = BackendOption,
    verbose: bool = VerboseOption,
) -> None:
    """Print the value stored under KEY; exit 1 when it is absent."""
    settings = _load_settings(backend, verbose)
    value = _run(_with_cache(settings, lambda cache: cache.get(key)))
    console.print(_display(value), markup=False)
    if value is None:
        raise typer.Exit(code=1)


@app.command("set")
def set_(
    key: str = typer.Argument(..., help="Key to write"),
    value: str = typer.Argument(..., help="Value to store"),
    ttl: int | None = typer.Option(None, "--ttl", min=1, help="Expire after N seconds"),
    backend: str | None = BackendOption,
    verbose: bool = VerboseOption,
) -> None:
    """Store VALUE under KEY."""
    settings = _load_settings(backend, verbose)
    _run(_with_cache(settings, lambda cache: cache.set(key, value, ttl)))
    console.print("[green]OK[/green]")


@app.command()
def delete(
    key: str = typer.Argument(..., help="Key to delete"),
    backend: str | None = BackendOption,
    verbose: bool = VerboseOption,
) -> None:
    """Delete KEY. Deleting a missing key succeeds."""
    settings = _load_settings(backend, verbose)
    _run(_with_cache(settings, lambda cache: cache.delete(key)))
    console.print("[green]OK[/green]")


@app.command()
def ping(
    backend: str | None = BackendOption,
    verbose: bool = VerboseOption,
) -> None:
    """Check that the configured cache is reachable."""
    settings = _load_settings(backend, verbose)

    async def _noop(cache: CacheClient) -> str:
        return cache.target

    target = _run(_with_cache(settings, _noop))
    console.print(f"[green]Connected[/green] to {settings.cache_backend} at {target}")


@app.command()
def version() -> None:
    """Show version."""
    console.print("cache-adapter v0.1.0")


if __name__ == "__main__":
    app()
