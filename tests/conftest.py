from __future__ import annotations

import os
import shutil
from pathlib import Path

import pytest

FIXTURES = Path(__file__).parent / "fixtures"

THEME_SLUGS = ("accent", "background", "text-color", "highlight", "unused")


class FakeClock:
    """Settable stand-in for time.time."""

    def __init__(self, now: float = 1_700_000_000.0) -> None:
        self.now = now

    def __call__(self) -> float:
        return self.now

    def advance(self, seconds: float) -> None:
        self.now += seconds


def _set_mtime(path: Path, timestamp: float) -> None:
    os.utime(path, (timestamp, timestamp))


@pytest.fixture
def set_mtime():
    """Set a file's modification time: set_mtime(path, timestamp)."""
    return _set_mtime


@pytest.fixture
def clock() -> FakeClock:
    return FakeClock()


@pytest.fixture
def theme_css(tmp_path: Path, clock: FakeClock) -> Path:
    """A writable copy of the theme fixture, last modified before clock.now."""
    path = tmp_path / "theme.css"
    shutil.copy(FIXTURES / "theme.css", path)
    _set_mtime(path, clock.now - 3600)
    return path


@pytest.fixture
def theme_slugs() -> tuple[str, ...]:
    return THEME_SLUGS


@pytest.fixture
def broken_css(tmp_path: Path, clock: FakeClock) -> Path:
    path = tmp_path / "broken.css"
    shutil.copy(FIXTURES / "broken.css", path)
    _set_mtime(path, clock.now - 3600)
    return path
