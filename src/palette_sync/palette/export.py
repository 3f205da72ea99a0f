"""Views of a Palette for the editor integrations that consume it."""

from __future__ import annotations

from typing import Any

from palette_sync.palette.model import Palette

__all__ = [
    "client_settings",
    "color_codes",
    "css_classes",
    "editor_palette",
    "expand_hex",
]

DEFAULT_CUSTOM_COLOR_TEXT = "Custom color"


def editor_palette(palette: Palette) -> list[dict[str, str]]:
    """Block-editor palette registration: ``[{name, slug, color}, ...]``."""
    return palette.to_list()


def color_codes(palette: Palette) -> list[str]:
    """Palette colors without duplicates, first occurrence kept."""
    seen: dict[str, None] = {}
    for entry in palette:
        seen.setdefault(entry.color, None)
    return list(seen)


def expand_hex(value: str) -> str | None:
    """Expand ``#abc`` to ``#aabbcc``.

    Other ``#`` values come back unchanged; anything that is not a hex
    color gives None.
    """
    if not isinstance(value, str) or not value.startswith("#"):
        return None
    if len(value) != 4:
        return value
    return "#" + "".join(c * 2 for c in value[1:])


def client_settings(
    palette: Palette,
    strict: bool = True,
    mimic: bool = True,
    custom_color_text: str = DEFAULT_CUSTOM_COLOR_TEXT,
) -> dict[str, Any]:
    """Payload handed to the client-side color widget."""
    codes = []
    for code in color_codes(palette):
        codes.append(expand_hex(code) or code)
    return {
        "palette": editor_palette(palette),
        "color_codes": codes,
        "settings": {"strict": strict, "mimic": mimic},
        "custom_color_text": custom_color_text,
    }


def css_classes(palette: Palette) -> str:
    """Helper classes for each palette color.

    ``.has-<slug>-color`` sets the text color and
    ``.has-<slug>-background-color`` the background, as the block editor
    expects them.
    """
    lines: list[str] = []
    for entry in palette:
        lines.append(f".has-{entry.slug}-color {{ color: {entry.color}; }}")
        lines.append(
            f".has-{entry.slug}-background-color {{ background-color: {entry.color}; }}"
        )
    return "\n".join(lines) + ("\n" if lines else "")
