"""Tests for PaletteSynchroniser: config checks, cache use and fallbacks."""

from __future__ import annotations

import logging

import pytest

from palette_sync import PaletteSynchroniser, SyncConfig
from palette_sync.cache import MemoryCache, cache_keys
from palette_sync.errors import ConfigurationError, ParseError

BROKEN = ":root { --accent: #000; --name-accent: \"Oops;\n}"
UNDECODABLE = b":root { --accent: #fff; --name-accent: \"\xff\xfe\"; }"


def make_config(path, **overrides) -> SyncConfig:
    values = {
        "stylesheet": str(path),
        "color_slugs": ("accent", "background", "text-color", "highlight", "unused"),
        "name_prefix": "name",
    }
    values.update(overrides)
    return SyncConfig(**values)


@pytest.fixture
def cache(clock) -> MemoryCache:
    return MemoryCache(clock=clock)


class TestConstruction:
    def test_validates_config(self, tmp_path):
        with pytest.raises(ConfigurationError):
            PaletteSynchroniser(make_config(tmp_path / "missing.css"))

    def test_missing_slugs(self, theme_css):
        with pytest.raises(ConfigurationError):
            PaletteSynchroniser(make_config(theme_css, color_slugs=None))

    def test_palette_is_lazy(self, tmp_path, clock):
        path = tmp_path / "late.css"
        path.write_text(BROKEN)
        # Construction succeeds; parsing only happens on first use.
        sync = PaletteSynchroniser(make_config(path), clock=clock)
        with pytest.raises(ParseError):
            sync.palette


class TestResolution:
    def test_builds_palette(self, theme_css, cache, clock):
        sync = PaletteSynchroniser(make_config(theme_css), cache=cache, clock=clock)
        assert sync.palette.slugs == ("accent", "background", "text-color", "highlight")
        assert sync.palette.get("accent").name == "Sunset orange"

    def test_stores_in_cache(self, theme_css, cache, clock):
        sync = PaletteSynchroniser(make_config(theme_css), cache=cache, clock=clock)
        palette = sync.palette
        assert sync.store.load(theme_css) == palette
        assert sync.store.last_scan(theme_css) == int(clock.now)

    def test_second_instance_reads_cache(self, theme_css, cache, clock, set_mtime):
        first = PaletteSynchroniser(make_config(theme_css), cache=cache, clock=clock).palette
        # Rewrite the file but keep it older than the recorded scan.
        theme_css.write_text(":root { --accent: #123456; }")
        set_mtime(theme_css, clock.now - 10)
        second = PaletteSynchroniser(make_config(theme_css), cache=cache, clock=clock).palette
        assert second == first

    def test_modified_stylesheet_is_rescanned(self, theme_css, cache, clock, set_mtime):
        PaletteSynchroniser(make_config(theme_css), cache=cache, clock=clock).palette
        clock.advance(60)
        theme_css.write_text(":root { --accent: #123456; }")
        set_mtime(theme_css, clock.now - 1)
        sync = PaletteSynchroniser(make_config(theme_css), cache=cache, clock=clock)
        assert sync.palette.to_list() == [{"name": "Accent", "slug": "accent", "color": "#123456"}]

    def test_force_rescans(self, theme_css, cache, clock, set_mtime):
        PaletteSynchroniser(make_config(theme_css), cache=cache, clock=clock).palette
        theme_css.write_text(":root { --accent: #123456; }")
        set_mtime(theme_css, clock.now - 10)
        sync = PaletteSynchroniser(make_config(theme_css, force=True), cache=cache, clock=clock)
        assert sync.palette.get("accent").color == "#123456"

    def test_refresh_force_argument(self, theme_css, cache, clock, set_mtime):
        sync = PaletteSynchroniser(make_config(theme_css), cache=cache, clock=clock)
        sync.palette
        theme_css.write_text(":root { --background: #abcdef; }")
        set_mtime(theme_css, clock.now - 10)
        assert sync.refresh().get("accent") is not None
        assert sync.refresh(force=True).slugs == ("background",)
        assert sync.palette.slugs == ("background",)

    def test_rebuilds_when_cached_palette_vanished(self, theme_css, cache, clock):
        sync = PaletteSynchroniser(make_config(theme_css), cache=cache, clock=clock)
        expected = sync.palette
        cache.delete(cache_keys(theme_css).palette)
        assert sync.refresh() == expected

    def test_palette_follows_stylesheet_changes(self, theme_css, cache, clock, set_mtime):
        sync = PaletteSynchroniser(make_config(theme_css), cache=cache, clock=clock)
        assert sync.palette.get("accent").color == "#ff6600"
        clock.advance(60)
        theme_css.write_text(":root { --accent: #123456; }")
        set_mtime(theme_css, clock.now)
        assert sync.needs_rebuild()
        assert sync.palette.get("accent").color == "#123456"
        assert not sync.needs_rebuild()

    def test_palette_rebuilds_after_lifetime(self, theme_css, cache, clock):
        sync = PaletteSynchroniser(make_config(theme_css, lifetime=3600), cache=cache, clock=clock)
        sync.palette
        first_scan = sync.store.last_scan(theme_css)
        clock.advance(3600)
        sync.palette
        assert sync.store.last_scan(theme_css) == first_scan + 3600

    def test_empty_slugs(self, theme_css, clock):
        sync = PaletteSynchroniser(make_config(theme_css, color_slugs=()), clock=clock)
        assert len(sync.palette) == 0


class TestFallback:
    def test_serves_cached_palette_when_rebuild_fails(self, theme_css, cache, clock, set_mtime, caplog):
        good = PaletteSynchroniser(make_config(theme_css), cache=cache, clock=clock).palette
        clock.advance(60)
        theme_css.write_text(BROKEN)
        set_mtime(theme_css, clock.now)
        sync = PaletteSynchroniser(make_config(theme_css), cache=cache, clock=clock)
        with caplog.at_level(logging.WARNING, logger="palette_sync.synchroniser"):
            assert sync.palette == good
        assert "serving cached palette" in caplog.text

    def test_parse_error_without_cache(self, broken_css, clock):
        sync = PaletteSynchroniser(make_config(broken_css), clock=clock)
        with pytest.raises(ParseError):
            sync.refresh()

    def test_undecodable_stylesheet_without_cache(self, tmp_path, clock):
        path = tmp_path / "latin.css"
        path.write_bytes(UNDECODABLE)
        sync = PaletteSynchroniser(make_config(path), clock=clock)
        with pytest.raises(ParseError) as exc_info:
            sync.palette
        assert isinstance(exc_info.value.cause, UnicodeDecodeError)

    def test_undecodable_stylesheet_serves_cache(self, theme_css, cache, clock, set_mtime):
        good = PaletteSynchroniser(make_config(theme_css), cache=cache, clock=clock).palette
        clock.advance(60)
        theme_css.write_bytes(UNDECODABLE)
        set_mtime(theme_css, clock.now)
        sync = PaletteSynchroniser(make_config(theme_css), cache=cache, clock=clock)
        assert sync.palette == good

    def test_deleted_stylesheet_serves_cache(self, theme_css, cache, clock):
        sync = PaletteSynchroniser(make_config(theme_css), cache=cache, clock=clock)
        good = sync.palette
        theme_css.unlink()
        assert sync.refresh(force=True) == good


class TestViews:
    @pytest.fixture
    def sync(self, theme_css, clock) -> PaletteSynchroniser:
        return PaletteSynchroniser(make_config(theme_css), clock=clock)

    def test_editor_palette(self, sync):
        assert sync.editor_palette()[0] == {"name": "Sunset orange", "slug": "accent", "color": "#ff6600"}

    def test_legacy_strict(self, sync):
        result = sync.legacy_palette()
        assert result.table == (
            "ff6600", "Sunset orange",
            "fafafa", "Paper",
            "rgb(34, 34, 34)", "Text-color",
            "ff0", "Highlight",
        )
        assert (result.rows, result.cols) == (1, 4)

    def test_legacy_permissive_append(self, theme_css, clock):
        sync = PaletteSynchroniser(
            make_config(theme_css, strict=False, legacy_mode="append"), clock=clock
        )
        result = sync.legacy_palette(extra=[("000001", "Almost black")])
        assert result.table[-2:] == ("000001", "Almost black")
        assert result.table[-4:-2] == ("ff0", "Highlight")

    def test_color_codes(self, sync):
        assert sync.color_codes() == ["#ff6600", "#fafafa", "rgb(34, 34, 34)", "#ff0"]

    def test_client_settings(self, theme_css, clock):
        sync = PaletteSynchroniser(make_config(theme_css, mimic=False), clock=clock)
        payload = sync.client_settings()
        assert payload["settings"] == {"strict": True, "mimic": False}
        assert payload["color_codes"][-1] == "#ffff00"

    def test_css_classes(self, sync):
        assert ".has-accent-color { color: #ff6600; }" in sync.css_classes()
