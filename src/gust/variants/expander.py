"""Variant expansion: turning ``md:hover:`` prefixes into rule transforms."""

from __future__ import annotations

import re
from dataclasses import dataclass, replace
from typing import TYPE_CHECKING, Any, Callable, Sequence

from gust.errors import ConfigError
from gust.model.utility import RuleContext, UtilityDefinition, Variant

if TYPE_CHECKING:
    from gust.plugins.registry import VariantRegistry

__all__ = [
    "ExpandedUtility",
    "VariantExpander",
    "make_transform",
    "split_variants",
]

VariantDefinition = str | Callable[[RuleContext], RuleContext]

_PSEUDO_ELEMENT_RE = re.compile(r"(?<!\\)::[A-Za-z-]+(?:\([^)]*\))?")


def _pseudo_elements_last(selector: str) -> str:
    """Move pseudo-elements to the end, where CSS requires them.

    ``.x::placeholder:hover`` becomes ``.x:hover::placeholder``.
    """
    found = _PSEUDO_ELEMENT_RE.findall(selector)
    if not found:
        return selector
    stripped = _PSEUDO_ELEMENT_RE.sub("", selector)
    if stripped.endswith(tuple(found)):
        return selector
    return stripped + "".join(found)


def make_transform(definition: VariantDefinition) -> Callable[[RuleContext], RuleContext]:
    """Normalize a variant definition into a transform.

    Accepted forms:
        ``"@media print"`` wraps the rule in an at-rule.
        ``"&:hover"`` or ``".group:hover &"`` rewrites the selector; ``&``
        stands for the current selector.
        A callable taking and returning a :class:`RuleContext`.
    """
    if callable(definition):
        return definition
    if not isinstance(definition, str) or not definition.strip():
        raise ConfigError(f"Invalid variant definition: {definition!r}")
    text = definition.strip()
    if text.startswith("@"):

        def wrap(ctx: RuleContext) -> RuleContext:
            return replace(ctx, at_rules=(text,) + ctx.at_rules)

        return wrap
    if "&" not in text:
        raise ConfigError(f"Selector variant must contain '&': {definition!r}")

    def rewrite(ctx: RuleContext) -> RuleContext:
        return replace(ctx, selector=_pseudo_elements_last(text.replace("&", ctx.selector)))

    return rewrite


def split_variants(candidate: str) -> list[str]:
    """Split ``md:hover:bg-[url(a:b)]`` on colons outside brackets."""
    parts: list[str] = []
    depth = 0
    start = 0
    for i, ch in enumerate(candidate):
        if ch == "[":
            depth += 1
        elif ch == "]" and depth:
            depth -= 1
        elif ch == ":" and depth == 0:
            parts.append(candidate[start:i])
            start = i + 1
    parts.append(candidate[start:])
    return parts


@dataclass(frozen=True)
class ExpandedUtility:
    """A base utility combined with zero or more variants."""

    canonical_name: str
    definition: UtilityDefinition
    value: Any
    variants: tuple[Variant, ...]

    @property
    def rank(self) -> tuple[tuple[int, int], ...]:
        return tuple(v.rank for v in self.variants)


class VariantExpander:
    """Resolve variant names against the registry and apply them.

    Variants are kept in canonical order: highest rank (outermost, e.g.
    responsive breakpoints) first. The canonical name of a combination is
    therefore the same however the variants were ordered in source text.
    """

    def __init__(self, variants: VariantRegistry) -> None:
        self.variants = variants

    def resolve(self, names: Sequence[str]) -> tuple[Variant, ...] | None:
        """Look up every name; None if any is unknown."""
        found: list[Variant] = []
        for name in names:
            variant = self.variants.lookup(name)
            if variant is None:
                return None
            found.append(variant)
        return tuple(sorted(found, key=lambda v: (v.rank, v.name), reverse=True))

    @staticmethod
    def canonical_name(variants: Sequence[Variant], base: str) -> str:
        return ":".join([v.name for v in variants] + [base])

    @staticmethod
    def apply(variants: Sequence[Variant], ctx: RuleContext) -> RuleContext:
        """Apply canonically ordered *variants*, innermost first."""
        for variant in reversed(variants):
            ctx = variant.transform(ctx)
        return ctx

    def expand(
        self,
        definition: UtilityDefinition,
        names: Sequence[str],
        base: str | None = None,
        value: Any = None,
    ) -> ExpandedUtility | None:
        """Qualify one base utility with the variants called *names*."""
        variants = self.resolve(names)
        if variants is None:
            return None
        return ExpandedUtility(
            canonical_name=self.canonical_name(variants, base or definition.name),
            definition=definition,
            value=value,
            variants=variants,
        )
