"""Options and helpers shared by the palette commands."""

from __future__ import annotations

import functools
import sys
from typing import Any, Callable

import click

from palette_sync.cache.memory import MemoryCache
from palette_sync.cache.sqlite import SqliteCache
from palette_sync.config import LEGACY_MODES, MONTH_IN_SECONDS, SyncConfig
from palette_sync.errors import CacheUnavailable, ConfigurationError, ParseError
from palette_sync.synchroniser import PaletteSynchroniser


def _split_slugs(ctx: click.Context, param: click.Parameter, value: tuple[str, ...]) -> tuple[str, ...]:
    """Accept ``--slug a --slug b`` as well as ``--slug a,b``."""
    slugs: list[str] = []
    for item in value:
        slugs.extend(s.strip() for s in item.split(",") if s.strip())
    return tuple(slugs)


def parse_extra(ctx: click.Context, param: click.Parameter, value: tuple[str, ...]) -> list[tuple[str, str]]:
    """Turn repeated ``HEX=LABEL`` options into swatch pairs."""
    pairs: list[tuple[str, str]] = []
    for item in value:
        hex_code, sep, label = item.partition("=")
        if not sep or not hex_code.strip() or not label.strip():
            raise click.BadParameter(f"expected HEX=LABEL, got {item!r}")
        pairs.append((hex_code.strip(), label.strip()))
    return pairs


def sync_options(fn: Callable[..., Any]) -> Callable[..., Any]:
    """Stylesheet argument plus the options every palette command takes."""
    decorators = [
        click.argument("stylesheet", type=click.Path(dir_okay=False)),
        click.option(
            "-s", "--slug", "slugs", multiple=True, required=True, callback=_split_slugs,
            help="Color slug to read from :root (repeatable, or comma separated)",
        ),
        click.option("--prefix", default="", help="Prefix of the name variables (--<prefix>-<slug>)"),
        click.option("--strict/--permissive", default=True, help="Restrict choices to the palette"),
        click.option("--mimic/--no-mimic", default=True, help="Client widget mimics the block editor"),
        click.option(
            "--mode", "legacy_mode", type=click.Choice(LEGACY_MODES), default="insert",
            help="Where the palette goes in the legacy table when permissive",
        ),
        click.option("--lifetime", default=MONTH_IN_SECONDS, type=int, help="Cache lifetime in seconds"),
        click.option("--force", is_flag=True, default=False, help="Rescan even if the cache is fresh"),
        click.option("--cache", "cache_path", default=None, help="SQLite cache file (default: no persistent cache)"),
    ]
    for decorator in reversed(decorators):
        fn = decorator(fn)
    return fn


def open_synchroniser(
    stylesheet: str,
    slugs: tuple[str, ...],
    prefix: str,
    strict: bool,
    mimic: bool,
    legacy_mode: str,
    lifetime: int,
    force: bool,
    cache_path: str | None,
) -> PaletteSynchroniser:
    """Build a synchroniser from command options, exiting 2 on bad settings."""
    config = SyncConfig(
        stylesheet=stylesheet,
        color_slugs=slugs,
        name_prefix=prefix,
        strict=strict,
        mimic=mimic,
        lifetime=lifetime,
        force=force,
        legacy_mode=legacy_mode,
    )
    cache: Any
    if cache_path:
        try:
            cache = SqliteCache.open(cache_path)
            click.get_current_context().call_on_close(cache.close)
        except CacheUnavailable as exc:
            click.echo(f"Warning: {exc}; continuing without cache", err=True)
            cache = MemoryCache()
    else:
        cache = MemoryCache()
    try:
        return PaletteSynchroniser(config, cache=cache)
    except ConfigurationError as exc:
        click.echo(f"Configuration error: {exc}", err=True)
        sys.exit(2)


def handle_parse_errors(fn: Callable[..., Any]) -> Callable[..., Any]:
    """Report a ParseError on stderr and exit 1."""

    @functools.wraps(fn)
    def wrapper(*args: Any, **kwargs: Any) -> Any:
        try:
            return fn(*args, **kwargs)
        except ParseError as exc:
            click.echo(f"Parse error: {exc}", err=True)
            sys.exit(1)

    return wrapper
