"""Custom-property scanner: reads the ``:root`` block of a stylesheet."""

from __future__ import annotations

import logging
import os
from pathlib import Path

from palette_sync.css.model import RawDeclaration, RuleBlock, Stylesheet
from palette_sync.css.parser import parse_stylesheet
from palette_sync.errors import ParseError

__all__ = ["ROOT_SELECTOR", "find_root_block", "read_stylesheet", "scan"]

ROOT_SELECTOR = ":root"

log = logging.getLogger(__name__)


def read_stylesheet(path: str | os.PathLike[str]) -> str:
    """Read a stylesheet as UTF-8.

    Undecodable bytes raise ParseError, like any other malformed source.
    OSError from the file system propagates unchanged.
    """
    try:
        return Path(path).read_text(encoding="utf-8")
    except UnicodeDecodeError as e:
        raise ParseError(
            f"Invalid stylesheet: {path} is not valid UTF-8 ({e.reason} at byte {e.start})",
            cause=e,
        ) from e


def find_root_block(stylesheet: Stylesheet) -> RuleBlock | None:
    """Return the first top-level rule whose selector is exactly ``:root``.

    Later ``:root`` blocks are ignored, and so are selector lists such as
    ``html, :root``.
    """
    for rule in stylesheet.rule_blocks():
        if rule.selector == ROOT_SELECTOR:
            return rule
    return None


def scan(source: str) -> list[RawDeclaration]:
    """Return the custom properties declared in the first ``:root`` block.

    Declarations come back in document order with the ``--`` marker stripped.
    Repeated names are all returned; the last one is the effective value.
    """
    root = find_root_block(parse_stylesheet(source))
    if root is None:
        log.debug("No %s block found", ROOT_SELECTOR)
        return []
    declarations = [
        RawDeclaration(name=d.property[2:], value=d.value, important=d.important)
        for d in root.declarations
        if d.is_custom
    ]
    log.debug("Scanned %d custom properties from %s", len(declarations), ROOT_SELECTOR)
    return declarations
