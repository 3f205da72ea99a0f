"""Lark Transformer that turns a stylesheet parse tree into a Stylesheet model."""

from __future__ import annotations

import logging
from functools import lru_cache
from pathlib import Path

from lark import Lark, Token, Transformer
from lark.exceptions import LarkError

from palette_sync.css.model import AtRule, Declaration, RuleBlock, Stylesheet
from palette_sync.errors import ParseError

GRAMMAR_PATH = Path(__file__).parent / "grammar.lark"

log = logging.getLogger(__name__)


class _Block:
    """Contents of a ``{ ... }`` block: tokens and nested blocks in order."""

    def __init__(self, items: list[Token | _Block]):
        self.items = items


def _join(tokens: list[Token]) -> str:
    """Re-join tokens, collapsing any gap in the source to a single space."""
    parts: list[str] = []
    previous: Token | None = None
    for tok in tokens:
        if previous is not None and tok.start_pos > previous.end_pos:
            parts.append(" ")
        parts.append(str(tok))
        previous = tok
    return "".join(parts)


def _is_delim(tok: Token, char: str) -> bool:
    return tok.type == "DELIM" and str(tok) == char


def _split_chunks(block: _Block) -> list[list[Token]]:
    """Split a block body on ``;``.

    A nested block ends the current chunk and the chunk is discarded: it was
    a nested rule's prelude, not a declaration.
    """
    chunks: list[list[Token]] = []
    current: list[Token] = []
    for item in block.items:
        if isinstance(item, _Block):
            current = []
        elif item.type == "SEMICOLON":
            if current:
                chunks.append(current)
            current = []
        else:
            current.append(item)
    if current:
        chunks.append(current)
    return chunks


def _to_declaration(tokens: list[Token]) -> Declaration | None:
    """Build a Declaration from one chunk, or None if it is not one."""
    colon = next((i for i, t in enumerate(tokens) if _is_delim(t, ":")), None)
    if colon != 1 or tokens[0].type != "IDENT":
        return None
    value_tokens = tokens[colon + 1 :]
    important = False
    if (
        len(value_tokens) >= 2
        and _is_delim(value_tokens[-2], "!")
        and value_tokens[-1].type == "IDENT"
        and str(value_tokens[-1]).lower() == "important"
    ):
        important = True
        value_tokens = value_tokens[:-2]
    return Declaration(
        property=str(tokens[0]),
        value=_join(value_tokens).strip(),
        important=important,
    )


class StylesheetTransformer(Transformer):  # type: ignore[type-arg]
    """Transform a Lark parse tree into Stylesheet model objects."""

    def block(self, items: list[Token | _Block]) -> _Block:
        return _Block(list(items))

    def qualified_rule(self, items: list[Token | _Block]) -> RuleBlock:
        *prelude, body = items
        declarations = []
        for chunk in _split_chunks(body):  # type: ignore[arg-type]
            decl = _to_declaration(chunk)
            if decl is not None:
                declarations.append(decl)
        line = prelude[0].line if prelude else None  # type: ignore[union-attr]
        return RuleBlock(
            selector=_join(prelude).strip(),  # type: ignore[arg-type]
            declarations=tuple(declarations),
            line=line,
        )

    def at_rule(self, items: list[Token | _Block]) -> AtRule:
        keyword = str(items[0])
        has_block = isinstance(items[-1], _Block)
        prelude = [
            t for t in items[1:] if isinstance(t, Token) and t.type != "SEMICOLON"
        ]
        return AtRule(name=keyword[1:], prelude=_join(prelude), has_block=has_block)

    def start(self, items: list[object]) -> Stylesheet:
        rules = [i for i in items if isinstance(i, (RuleBlock, AtRule))]
        return Stylesheet(rules=tuple(rules))


@lru_cache(maxsize=1)
def _parser() -> Lark:
    return Lark(GRAMMAR_PATH.read_text(encoding="utf-8"), parser="lalr", start="start")


def parse_stylesheet(source: str) -> Stylesheet:
    """Parse stylesheet text into a Stylesheet of top-level rules.

    Raises ParseError on unbalanced braces, unterminated strings or comments,
    or any other token the grammar cannot place. There is no partial result.
    """
    try:
        tree = _parser().parse(source)
    except LarkError as e:
        line = getattr(e, "line", None)
        column = getattr(e, "column", None)
        # Lark reports end-of-input errors at -1.
        if line is not None and line < 0:
            line = column = None
        raise ParseError(f"Invalid stylesheet: {e}", line=line, column=column, cause=e) from e
    stylesheet = StylesheetTransformer().transform(tree)
    log.debug("Parsed stylesheet: %d top-level rules", len(stylesheet.rules))
    return stylesheet
