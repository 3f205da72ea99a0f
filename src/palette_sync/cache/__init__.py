from palette_sync.cache.base import PaletteCache
from palette_sync.cache.db import Database
from palette_sync.cache.memory import MemoryCache
from palette_sync.cache.sqlite import SqliteCache
from palette_sync.cache.store import CacheKeys, PaletteStore, cache_keys

__all__ = [
    "CacheKeys",
    "Database",
    "MemoryCache",
    "PaletteCache",
    "PaletteStore",
    "SqliteCache",
    "cache_keys",
]
