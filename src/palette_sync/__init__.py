"""Palette Sync: stylesheet-driven color palettes for editor integrations."""
from __future__ import annotations

__version__ = "1.0.1"

from palette_sync.config import SyncConfig
from palette_sync.errors import (
    CacheUnavailable,
    ConfigurationError,
    PaletteSyncError,
    ParseError,
)
from palette_sync.palette.model import Palette, PaletteEntry
from palette_sync.synchroniser import PaletteSynchroniser

__all__ = [
    "__version__",
    "CacheUnavailable",
    "ConfigurationError",
    "Palette",
    "PaletteEntry",
    "PaletteSyncError",
    "PaletteSynchroniser",
    "ParseError",
    "SyncConfig",
]
