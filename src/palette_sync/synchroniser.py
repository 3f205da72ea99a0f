"""PaletteSynchroniser: one stylesheet, one palette, many consumers."""

from __future__ import annotations

import logging
import time
from collections.abc import Iterable
from typing import Any, Callable

from palette_sync.cache.base import PaletteCache
from palette_sync.cache.memory import MemoryCache
from palette_sync.cache.store import PaletteStore
from palette_sync.config import SyncConfig
from palette_sync.css.scanner import read_stylesheet, scan
from palette_sync.errors import ParseError
from palette_sync.palette import export
from palette_sync.palette.builder import build
from palette_sync.palette.legacy import LegacyPalette, assemble
from palette_sync.palette.model import Palette

log = logging.getLogger(__name__)


class PaletteSynchroniser:
    """Derive the palette of a stylesheet and hand it to editor integrations.

    The configuration is validated on construction. The palette itself is
    resolved on first use and checked for staleness on every later use:
    rebuilt from the stylesheet when the cached copy is stale, read from the
    cache otherwise.

    When a rebuild fails (unreadable or malformed stylesheet) the last cached
    palette, if any, keeps being served; without one the error propagates.
    """

    def __init__(
        self,
        config: SyncConfig,
        cache: PaletteCache | None = None,
        clock: Callable[[], float] = time.time,
    ) -> None:
        config.validate()
        self._config = config
        self._store = PaletteStore(cache if cache is not None else MemoryCache(clock), clock)
        self._palette: Palette | None = None

    @property
    def config(self) -> SyncConfig:
        return self._config

    @property
    def store(self) -> PaletteStore:
        return self._store

    @property
    def palette(self) -> Palette:
        """The current palette, rebuilt whenever the stylesheet has gone stale.

        The first access honours the configured ``force``; later accesses only
        rebuild on a changed stylesheet or an expired scan.
        """
        if self._palette is None:
            return self.refresh()
        if self.needs_rebuild(force=False):
            return self.refresh(force=False)
        return self._palette

    # --- derivation -------------------------------------------------------------

    def needs_rebuild(self, force: bool | None = None) -> bool:
        cfg = self._config
        return self._store.is_stale(
            cfg.stylesheet_path, cfg.lifetime, cfg.force if force is None else force
        )

    def rebuild(self) -> Palette:
        """Scan the stylesheet, build the palette and record it in the cache."""
        cfg = self._config
        path = cfg.stylesheet_path
        log.info("Scanning %s for palette colors", path)
        source = read_stylesheet(path)
        palette = build(scan(source), cfg.slug_set, cfg.name_prefix)
        self._store.store(path, palette, cfg.lifetime)
        log.info("Built palette of %d colors from %s", len(palette), path)
        return palette

    def refresh(self, force: bool | None = None) -> Palette:
        """Resolve the palette again, honouring staleness unless *force* is set."""
        path = self._config.stylesheet_path
        if not self.needs_rebuild(force):
            cached = self._store.load(path)
            if cached is not None:
                self._palette = cached
                return cached
        try:
            palette = self.rebuild()
        except (ParseError, OSError) as e:
            cached = self._store.load(path)
            if cached is None:
                raise
            log.warning("Rebuild of %s failed, serving cached palette: %s", path, e)
            palette = cached
        self._palette = palette
        return palette

    # --- consumer views -------------------------------------------------------

    def legacy_palette(self, extra: Iterable[tuple[str, str]] = ()) -> LegacyPalette:
        return assemble(
            self.palette,
            strict=self._config.strict,
            mode=self._config.legacy_mode,
            extra=extra,
        )

    def editor_palette(self) -> list[dict[str, str]]:
        return export.editor_palette(self.palette)

    def color_codes(self) -> list[str]:
        return export.color_codes(self.palette)

    def client_settings(self, **kwargs: Any) -> dict[str, Any]:
        return export.client_settings(
            self.palette, strict=self._config.strict, mimic=self._config.mimic, **kwargs
        )

    def css_classes(self) -> str:
        return export.css_classes(self.palette)
