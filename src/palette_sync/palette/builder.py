"""Palette builder: merges color and name custom properties by slug.

For a slug ``accent`` and a prefix ``name``, the stylesheet carries::

    :root {
        --accent: #ff0000;
        --name-accent: "Accent";
    }

The two declarations may appear in any order; they meet on the slug.
"""

from __future__ import annotations

from collections.abc import Collection, Iterable
from dataclasses import dataclass

from palette_sync.css.model import RawDeclaration
from palette_sync.palette.model import Palette, PaletteEntry

__all__ = [
    "ColorDeclaration",
    "Ignored",
    "NameDeclaration",
    "build",
    "classify",
    "default_name",
]


@dataclass(frozen=True)
class ColorDeclaration:
    slug: str
    value: str


@dataclass(frozen=True)
class NameDeclaration:
    slug: str
    value: str


@dataclass(frozen=True)
class Ignored:
    name: str


Classified = ColorDeclaration | NameDeclaration | Ignored


def classify(
    declaration: RawDeclaration,
    color_slugs: Collection[str],
    name_prefix: str = "",
) -> Classified:
    """Tell whether a declaration carries a color, a display name, or neither.

    A color slug match wins over a prefix match.
    """
    if declaration.name in color_slugs:
        return ColorDeclaration(slug=declaration.name, value=declaration.value)
    if name_prefix:
        marker = f"{name_prefix}-"
        if declaration.name.startswith(marker):
            return NameDeclaration(
                slug=declaration.name[len(marker) :], value=declaration.value
            )
    return Ignored(name=declaration.name)


def default_name(slug: str) -> str:
    """Upper-case the first character only: ``bg-color`` -> ``Bg-color``."""
    return slug[:1].upper() + slug[1:]


def _unquote(value: str) -> str:
    """Strip the quotes of a value that is one CSS string, ``"Sea"`` -> ``Sea``."""
    if len(value) >= 2 and value[0] == value[-1] and value[0] in "\"'":
        inner = value[1:-1]
        if value[0] not in inner.replace(f"\\{value[0]}", ""):
            return inner.replace(f"\\{value[0]}", value[0])
    return value


def build(
    declarations: Iterable[RawDeclaration],
    color_slugs: Collection[str],
    name_prefix: str = "",
) -> Palette:
    """Build a Palette from scanned custom properties.

    Entries are ordered by the first color declaration of each slug. The last
    color and the last name declared for a slug win. Names without a color
    are dropped; colors without a name declaration get :func:`default_name`.
    A declared name is kept as written, empty or not, once unquoted.
    """
    slugs = frozenset(color_slugs)
    colors: dict[str, str] = {}  # insertion order is palette order
    names: dict[str, str] = {}

    for declaration in declarations:
        found = classify(declaration, slugs, name_prefix)
        if isinstance(found, ColorDeclaration):
            colors[found.slug] = found.value
        elif isinstance(found, NameDeclaration):
            names[found.slug] = _unquote(found.value)

    entries = []
    for slug, color in colors.items():
        name = names[slug] if slug in names else default_name(slug)
        entries.append(PaletteEntry(slug=slug, color=color, name=name))
    return Palette(entries=tuple(entries))
