from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path

from palette_sync.errors import ConfigurationError

DAY_IN_SECONDS = 24 * 60 * 60
MONTH_IN_SECONDS = 30 * DAY_IN_SECONDS

LEGACY_MODES = ("insert", "append")
SURFACES = ("blocks", "acf", "legacy")


@dataclass(frozen=True)
class SyncConfig:
    stylesheet: str | None = None
    color_slugs: tuple[str, ...] | None = None
    name_prefix: str = ""  # "" disables name merging
    strict: bool = True
    mimic: bool = True
    lifetime: int = MONTH_IN_SECONDS
    force: bool = False
    legacy_mode: str = "insert"
    surfaces: tuple[str, ...] = SURFACES

    def __post_init__(self) -> None:
        # Accept any iterable of slugs but keep a hashable, ordered tuple.
        if self.color_slugs is not None and not isinstance(self.color_slugs, (tuple, str)):
            object.__setattr__(self, "color_slugs", tuple(self.color_slugs))
        if not isinstance(self.surfaces, tuple):
            object.__setattr__(self, "surfaces", tuple(self.surfaces))

    @property
    def stylesheet_path(self) -> Path:
        """Absolute path of the stylesheet; also the cache key namespace."""
        if not self.stylesheet:
            raise ConfigurationError("A stylesheet path is mandatory")
        return Path(self.stylesheet).expanduser().resolve()

    @property
    def slug_set(self) -> frozenset[str]:
        return frozenset(self.color_slugs or ())

    def enabled(self, surface: str) -> bool:
        return surface in self.surfaces

    def validate(self) -> None:
        """Raise ConfigurationError on the first invalid setting."""
        if not self.stylesheet:
            raise ConfigurationError("A stylesheet path is mandatory")
        if not self.stylesheet_path.is_file():
            raise ConfigurationError(
                f"Stylesheet does not exist: {self.stylesheet_path}"
            )
        if self.color_slugs is None:
            raise ConfigurationError("Color slugs are mandatory")
        if isinstance(self.color_slugs, str):
            raise ConfigurationError("Color slugs must be a collection, not a string")
        bad = [s for s in self.color_slugs if not isinstance(s, str) or not s]
        if bad:
            raise ConfigurationError(f"Invalid color slugs: {bad!r}")
        if isinstance(self.lifetime, bool) or not isinstance(self.lifetime, int):
            raise ConfigurationError(f"Lifetime must be an integer, got {self.lifetime!r}")
        if self.lifetime <= 0:
            raise ConfigurationError(f"Lifetime must be positive, got {self.lifetime}")
        if self.legacy_mode not in LEGACY_MODES:
            raise ConfigurationError(
                f"Unknown legacy mode {self.legacy_mode!r} "
                f"(expected one of {', '.join(LEGACY_MODES)})"
            )
        unknown = [s for s in self.surfaces if s not in SURFACES]
        if unknown:
            raise ConfigurationError(f"Unknown surfaces: {', '.join(unknown)}")
