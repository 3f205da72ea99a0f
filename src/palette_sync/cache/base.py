"""Cache protocol the palette store depends on."""

from __future__ import annotations

from typing import Any, Protocol


class PaletteCache(Protocol):
    """A key-value store with per-key expiry.

    ``ttl`` is in seconds; ``None`` means the entry never expires. A missing
    or expired key reads as ``None``. Implementations raise
    :class:`~palette_sync.errors.CacheUnavailable` when the store itself
    cannot be reached.
    """

    def get(self, key: str) -> Any | None: ...

    def set(self, key: str, value: Any, ttl: float | None = None) -> None: ...

    def delete(self, key: str) -> None: ...
