from palette_sync.palette.builder import (
    ColorDeclaration,
    Ignored,
    NameDeclaration,
    build,
    classify,
    default_name,
)
from palette_sync.palette.legacy import DEFAULT_LEGACY_TABLE, LegacyPalette, assemble
from palette_sync.palette.model import Palette, PaletteEntry

__all__ = [
    "ColorDeclaration",
    "DEFAULT_LEGACY_TABLE",
    "Ignored",
    "LegacyPalette",
    "NameDeclaration",
    "Palette",
    "PaletteEntry",
    "assemble",
    "build",
    "classify",
    "default_name",
]
