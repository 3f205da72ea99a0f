"""Legacy toolbar palette: flat ``[hex, label, hex, label, ...]`` table and grid size.

The legacy editor takes its text-color swatches as one flat list alternating
a hex code (no ``#``) and a label, plus a number of rows and columns.
"""

from __future__ import annotations

import math
from collections.abc import Iterable
from dataclasses import dataclass

from palette_sync.palette.model import Palette

__all__ = [
    "DEFAULT_LEGACY_TABLE",
    "LegacyPalette",
    "assemble",
    "flatten",
    "layout",
]

MAX_COLS = 8

# The editor's own 39 colors, in its order.
DEFAULT_LEGACY_TABLE: tuple[str, ...] = (
    "000000", "Black",
    "993300", "Burnt orange",
    "333300", "Dark olive",
    "003300", "Dark green",
    "003366", "Dark azure",
    "000080", "Navy Blue",
    "333399", "Indigo",
    "333333", "Very dark gray",
    "800000", "Maroon",
    "FF6600", "Orange",
    "808000", "Olive",
    "008000", "Green",
    "008080", "Teal",
    "0000FF", "Blue",
    "666699", "Grayish blue",
    "808080", "Gray",
    "FF0000", "Red",
    "FF9900", "Amber",
    "99CC00", "Yellow green",
    "339966", "Sea green",
    "33CCCC", "Turquoise",
    "3366FF", "Royal blue",
    "800080", "Purple",
    "999999", "Medium gray",
    "FF00FF", "Magenta",
    "FFCC00", "Gold",
    "FFFF00", "Yellow",
    "00FF00", "Lime",
    "00FFFF", "Aqua",
    "00CCFF", "Sky blue",
    "993366", "Red violet",
    "FFFFFF", "White",
    "FF99CC", "Pink",
    "FFCC99", "Peach",
    "FFFF99", "Light yellow",
    "CCFFCC", "Pale green",
    "CCFFFF", "Pale cyan",
    "99CCFF", "Light sky blue",
    "CC99FF", "Plum",
)


@dataclass(frozen=True)
class LegacyPalette:
    """Flat swatch table with the grid the toolbar should draw it in."""

    table: tuple[str, ...]
    rows: int
    cols: int

    def pairs(self) -> list[tuple[str, str]]:
        return list(zip(self.table[::2], self.table[1::2]))

    def to_dict(self) -> dict[str, object]:
        """Options in the legacy editor's own naming."""
        return {
            "textcolor_map": list(self.table),
            "textcolor_rows": self.rows,
            "textcolor_cols": self.cols,
        }


def _strip_hash(color: str) -> str:
    return color[1:] if color.startswith("#") else color


def flatten(palette: Palette) -> list[str]:
    """Palette as ``[hex, name, hex, name, ...]`` with the ``#`` removed."""
    table: list[str] = []
    for entry in palette:
        table.extend((_strip_hash(entry.color), entry.name))
    return table


def layout(pair_count: int) -> tuple[int, int]:
    """Return ``(rows, cols)`` for *pair_count* swatches.

    At most 8 columns. When the swatches fill the last row exactly, one more
    row is reserved for the "no color" swatch. An empty table is 0 x 0.
    """
    if pair_count <= 0:
        return 0, 0
    cols = min(pair_count, MAX_COLS)
    rows = math.ceil(pair_count / 16)
    if pair_count % MAX_COLS == 0:
        rows += 1
    return rows, cols


def assemble(
    palette: Palette,
    strict: bool = True,
    mode: str = "insert",
    extra: Iterable[tuple[str, str]] = (),
) -> LegacyPalette:
    """Build the legacy toolbar table.

    strict: the custom palette replaces the default table; *extra* is not
        consulted.
    permissive: the custom palette, followed by *extra*, is spliced before
        (``insert``) or after (``append``) the default table.
    """
    if mode not in ("insert", "append"):
        raise ValueError(f"Unknown legacy mode: {mode!r}")

    custom = flatten(palette)
    if strict:
        table = custom
    else:
        for hex_code, label in extra:
            custom.extend((_strip_hash(hex_code), label))
        if mode == "insert":
            table = custom + list(DEFAULT_LEGACY_TABLE)
        else:
            table = list(DEFAULT_LEGACY_TABLE) + custom

    rows, cols = layout(len(table) // 2)
    return LegacyPalette(table=tuple(table), rows=rows, cols=cols)
