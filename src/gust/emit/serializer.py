"""Render realized rules as stylesheet text."""

from __future__ import annotations

from typing import Iterable

from gust.model.stylesheet import CssRule

INDENT = "  "


def serialize(rules: Iterable[CssRule]) -> str:
    """Render *rules* in order.

    Consecutive rules sharing leading at-rules stay inside one block; the
    output always ends with a newline unless there are no rules.
    """
    lines: list[str] = []
    open_blocks: tuple[str, ...] = ()
    for rule in rules:
        shared = 0
        while (
            shared < len(open_blocks)
            and shared < len(rule.at_rules)
            and open_blocks[shared] == rule.at_rules[shared]
        ):
            shared += 1
        for depth in range(len(open_blocks) - 1, shared - 1, -1):
            lines.append(INDENT * depth + "}")
        for depth in range(shared, len(rule.at_rules)):
            lines.append(INDENT * depth + rule.at_rules[depth] + " {")
        open_blocks = rule.at_rules

        pad = INDENT * len(open_blocks)
        lines.append(f"{pad}{rule.selector} {{")
        for prop, value in rule.declarations:
            lines.append(f"{pad}{INDENT}{prop}: {value};")
        lines.append(pad + "}")
    for depth in range(len(open_blocks) - 1, -1, -1):
        lines.append(INDENT * depth + "}")
    return "\n".join(lines) + "\n" if lines else ""
