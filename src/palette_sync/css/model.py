"""Stylesheet model: declarations, rule blocks and at-rules."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class Declaration:
    """A ``property: value`` pair inside a rule block."""

    property: str
    value: str
    important: bool = False

    @property
    def is_custom(self) -> bool:
        return self.property.startswith("--")


@dataclass(frozen=True)
class RawDeclaration:
    """A custom property from the ``:root`` block, ``--`` marker stripped."""

    name: str
    value: str
    important: bool = False


@dataclass(frozen=True)
class RuleBlock:
    """A top-level qualified rule: selector text plus its declarations."""

    selector: str
    declarations: tuple[Declaration, ...]
    line: int | None = None


@dataclass(frozen=True)
class AtRule:
    """A top-level at-rule (``@media``, ``@import`` ...). Its body is not modelled."""

    name: str  # without the leading "@"
    prelude: str
    has_block: bool


@dataclass(frozen=True)
class Stylesheet:
    """Top-level statements of a stylesheet in source order."""

    rules: tuple[RuleBlock | AtRule, ...]

    def rule_blocks(self) -> list[RuleBlock]:
        return [r for r in self.rules if isinstance(r, RuleBlock)]
