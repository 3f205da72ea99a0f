from __future__ import annotations

import pytest

from palette_sync.cache.memory import MemoryCache
from palette_sync.config import SyncConfig
from palette_sync.synchroniser import PaletteSynchroniser
from palette_sync.web.app import create_app


@pytest.fixture
def make_app(theme_css, theme_slugs, clock):
    """Build a test app for the theme stylesheet: make_app(extra=..., **config)."""

    def factory(stylesheet=None, extra=None, **overrides):
        values = {
            "stylesheet": str(stylesheet or theme_css),
            "color_slugs": theme_slugs,
            "name_prefix": "name",
        }
        values.update(overrides)
        sync = PaletteSynchroniser(SyncConfig(**values), cache=MemoryCache(clock), clock=clock)
        application = create_app(sync, extra=extra)
        application.config["TESTING"] = True
        return application

    return factory


@pytest.fixture
def app(make_app):
    return make_app()


@pytest.fixture
def client(app):
    """Create a Flask test client."""
    return app.test_client()
