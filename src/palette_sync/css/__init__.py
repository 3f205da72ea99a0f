from palette_sync.css.model import (
    AtRule,
    Declaration,
    RawDeclaration,
    RuleBlock,
    Stylesheet,
)
from palette_sync.css.parser import parse_stylesheet
from palette_sync.css.scanner import ROOT_SELECTOR, find_root_block, read_stylesheet, scan

__all__ = [
    "AtRule",
    "Declaration",
    "RawDeclaration",
    "ROOT_SELECTOR",
    "RuleBlock",
    "Stylesheet",
    "find_root_block",
    "parse_stylesheet",
    "read_stylesheet",
    "scan",
]
