"""Palette model: named color entries in palette order."""

from __future__ import annotations

from collections.abc import Iterator
from dataclasses import dataclass
from typing import Any


@dataclass(frozen=True)
class PaletteEntry:
    """One palette position.

    Attributes:
        slug: Identifier of the position (``accent-1``), matched against the
            custom property name.
        color: The declared CSS value, as written (hex, ``rgb()``, keyword...).
        name: Display name; defaults to the capitalised slug.
    """

    slug: str
    color: str
    name: str

    def to_dict(self) -> dict[str, str]:
        return {"name": self.name, "slug": self.slug, "color": self.color}

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> PaletteEntry:
        return cls(slug=data["slug"], color=data["color"], name=data["name"])


@dataclass(frozen=True)
class Palette:
    """An immutable, ordered collection of palette entries."""

    entries: tuple[PaletteEntry, ...] = ()

    def __iter__(self) -> Iterator[PaletteEntry]:
        return iter(self.entries)

    def __len__(self) -> int:
        return len(self.entries)

    def __getitem__(self, index: int) -> PaletteEntry:
        return self.entries[index]

    @property
    def slugs(self) -> tuple[str, ...]:
        return tuple(e.slug for e in self.entries)

    def get(self, slug: str) -> PaletteEntry | None:
        for entry in self.entries:
            if entry.slug == slug:
                return entry
        return None

    # --- serialisation --------------------------------------------------------

    def to_list(self) -> list[dict[str, str]]:
        return [e.to_dict() for e in self.entries]

    @classmethod
    def from_list(cls, data: list[dict[str, Any]]) -> Palette:
        return cls(entries=tuple(PaletteEntry.from_dict(d) for d in data))
