"""Stylesheet model: realized CSS rules and the compiled stylesheet."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class CssRule:
    """A concrete rule: selector, ordered declarations, enclosing at-rules.

    Two rules with equal fields are the same rule; the emitter relies on this
    for deduplication.
    """

    selector: str
    declarations: tuple[tuple[str, str], ...]
    at_rules: tuple[str, ...] = ()


@dataclass(frozen=True)
class CompiledStylesheet:
    """Ordered, deduplicated rules making up one build's output."""

    rules: tuple[CssRule, ...] = ()

    @property
    def css(self) -> str:
        from gust.emit.serializer import serialize

        return serialize(self.rules)

    def __len__(self) -> int:
        return len(self.rules)
