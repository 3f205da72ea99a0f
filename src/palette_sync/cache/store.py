"""Palette store: cache keys, staleness and the two-record save.

A scan is recorded as two cache entries per stylesheet: the scan timestamp,
kept ``lifetime - 1`` seconds, and the palette, kept ``lifetime`` seconds. The
timestamp always expires first, so a live timestamp never points at an
evicted palette.
"""

from __future__ import annotations

import logging
import os
import time
from dataclasses import dataclass
from pathlib import Path
from typing import Callable

from palette_sync.cache.base import PaletteCache
from palette_sync.errors import CacheUnavailable
from palette_sync.palette.model import Palette

log = logging.getLogger(__name__)

KEY_PREFIX = "palette-sync"


@dataclass(frozen=True)
class CacheKeys:
    scanned_at: str
    palette: str


def cache_keys(path: str | os.PathLike[str]) -> CacheKeys:
    """Keys for a stylesheet, namespaced by its absolute path."""
    resolved = str(Path(path).expanduser().resolve())
    return CacheKeys(
        scanned_at=f"{KEY_PREFIX}-parsing-{resolved}",
        palette=f"{KEY_PREFIX}-colors-{resolved}",
    )


class PaletteStore:
    """Reads and writes scan records through a PaletteCache.

    The cache is an optimisation only: whenever the backend is unavailable
    the store behaves as if nothing were cached.
    """

    def __init__(self, cache: PaletteCache, clock: Callable[[], float] = time.time) -> None:
        self._cache = cache
        self._clock = clock

    @property
    def cache(self) -> PaletteCache:
        return self._cache

    def last_scan(self, path: str | os.PathLike[str]) -> int | None:
        """Timestamp of the last recorded scan, or None."""
        try:
            value = self._cache.get(cache_keys(path).scanned_at)
        except CacheUnavailable as e:
            log.warning("Palette cache unavailable, treating as miss: %s", e)
            return None
        return None if value is None else int(value)

    def is_stale(
        self, path: str | os.PathLike[str], lifetime: int, force: bool = False
    ) -> bool:
        """Whether the palette for *path* has to be rebuilt from the stylesheet."""
        if force:
            return True
        scanned_at = self.last_scan(path)
        if scanned_at is None:
            return True
        if self._clock() - scanned_at >= lifetime:
            return True
        try:
            modified_at = int(os.path.getmtime(path))
        except OSError:
            return True
        return modified_at > scanned_at

    def load(self, path: str | os.PathLike[str]) -> Palette | None:
        try:
            data = self._cache.get(cache_keys(path).palette)
        except CacheUnavailable as e:
            log.warning("Palette cache unavailable, treating as miss: %s", e)
            return None
        if data is None:
            log.debug("Palette cache miss for %s", path)
            return None
        log.debug("Palette cache hit for %s", path)
        return Palette.from_list(data)

    def store(self, path: str | os.PathLike[str], palette: Palette, lifetime: int) -> None:
        keys = cache_keys(path)
        try:
            self._cache.set(keys.scanned_at, int(self._clock()), lifetime - 1)
            self._cache.set(keys.palette, palette.to_list(), lifetime)
        except CacheUnavailable as e:
            log.warning("Palette cache unavailable, palette not stored: %s", e)

    def invalidate(self, path: str | os.PathLike[str]) -> None:
        keys = cache_keys(path)
        try:
            self._cache.delete(keys.scanned_at)
            self._cache.delete(keys.palette)
        except CacheUnavailable as e:
            log.warning("Palette cache unavailable, nothing invalidated: %s", e)
