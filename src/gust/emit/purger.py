"""Purger: match candidates against the registry and realize CSS rules.

Resolution order for a candidate's base utility:

1. exact concrete name (``p-4``, ``w-1/2``, ``flex``);
2. bracketed arbitrary value (``p-[3px]``, ``bg-[#1da1f2]``);
3. ``/modifier`` on a color utility (``bg-black/50``).

An exact name always wins over an arbitrary-value template. Output order
is derived only from variant rank and registration order, never from the
order in which candidates were found.
"""

from __future__ import annotations

import logging
import re
from dataclasses import dataclass
from typing import TYPE_CHECKING, Any, Iterable, Iterator, Mapping

from gust.emit.escape import escape_class
from gust.model.stylesheet import CompiledStylesheet, CssRule
from gust.model.utility import CssObject, RuleContext, TypedValue, UtilityDefinition
from gust.theme.colors import HEX_RE, NUMBER_RE, with_alpha
from gust.variants.expander import ExpandedUtility, VariantExpander, split_variants

if TYPE_CHECKING:
    from gust.plugins.registry import UtilityRegistry

logger = logging.getLogger(__name__)

__all__ = ["Match", "Purger", "infer_kind", "realize", "with_alpha"]

_ARBITRARY_RE = re.compile(r"^(?P<negative>-)?(?P<name>[A-Za-z0-9_.-]+?)-\[(?P<value>.+)\]$")
_TYPE_HINT_RE = re.compile(
    r"^(?P<kind>color|length|percentage|number|url|image|position|family-name|any):(?P<value>.+)$"
)
_LENGTH_RE = re.compile(
    r"^-?(?:\d+\.?\d*|\.\d+)(?:px|r?em|ch|ex|vw|vh|svw|svh|dvh|lvh|vmin|vmax|cm|mm|in|pt|pc|fr|deg|s|ms)$"
)
_COLOR_FUNCS = ("rgb(", "rgba(", "hsl(", "hsla(", "hwb(", "lab(", "lch(", "oklab(", "oklch(", "color(", "color-mix(")
_NAMED_COLORS = frozenset({
    "transparent", "currentcolor", "black", "white", "red", "green", "blue",
    "yellow", "orange", "purple", "pink", "gray", "grey", "silver", "navy",
    "teal", "maroon", "olive", "lime", "aqua", "fuchsia",
})


def infer_kind(raw: str) -> str:
    """Guess what kind of CSS value an arbitrary value is."""
    value = raw.strip()
    lowered = value.lower()
    if HEX_RE.match(value) or lowered.startswith(_COLOR_FUNCS) or lowered in _NAMED_COLORS:
        return "color"
    if lowered.startswith("url("):
        return "url"
    if "gradient(" in lowered:
        return "image"
    if value.endswith("%") and NUMBER_RE.match(value[:-1]):
        return "percentage"
    if NUMBER_RE.match(value):
        return "number"
    if _LENGTH_RE.match(lowered) or lowered.startswith(("calc(", "min(", "max(", "clamp(")):
        return "length"
    return "any"


def _split_modifier(base: str) -> tuple[str, str] | None:
    """Split ``bg-black/50`` at the last slash outside brackets."""
    depth = 0
    cut = -1
    for i, ch in enumerate(base):
        if ch == "[":
            depth += 1
        elif ch == "]" and depth:
            depth -= 1
        elif ch == "/" and depth == 0:
            cut = i
    if cut <= 0 or cut == len(base) - 1:
        return None
    return base[:cut], base[cut + 1:]


def _kind_of(definition: UtilityDefinition, value: Any) -> str:
    if isinstance(value, TypedValue):
        return value.kind
    return definition.types[0]


@dataclass(frozen=True)
class Match:
    """A candidate resolved to a utility, ready to realize."""

    candidate: str
    expanded: ExpandedUtility
    value_index: int
    arbitrary: bool = False
    important: bool = False

    @property
    def sort_key(self) -> tuple[Any, ...]:
        return (
            self.expanded.rank,
            self.expanded.definition.order,
            self.arbitrary,
            self.value_index,
            self.candidate,
        )


def _format_value(value: Any, important: bool) -> str:
    text = str(value)
    return f"{text} !important" if important else text


def _flatten(
    css: CssObject, selector: str, at_rules: tuple[str, ...], important: bool
) -> Iterator[CssRule]:
    declarations: list[tuple[str, str]] = []
    nested: list[tuple[str, CssObject]] = []
    for key, value in css.items():
        if isinstance(value, Mapping):
            nested.append((key, value))
        elif isinstance(value, (list, tuple)):
            declarations.extend((key, _format_value(v, important)) for v in value)
        elif value is not None:
            declarations.append((key, _format_value(value, important)))
    if declarations:
        yield CssRule(selector=selector, declarations=tuple(declarations), at_rules=at_rules)
    for key, child in nested:
        if key.startswith("@"):
            yield from _flatten(child, selector, at_rules + (key,), important)
        elif "&" in key:
            yield from _flatten(child, key.replace("&", selector), at_rules, important)
        else:
            yield from _flatten(child, f"{selector} {key}", at_rules, important)


def realize(match: Match) -> list[CssRule]:
    """Turn a match into concrete rules for its literal class name."""
    expanded = match.expanded
    ctx = VariantExpander.apply(expanded.variants, RuleContext(selector="." + escape_class(match.candidate)))
    css = expanded.definition.render(expanded.value)
    return list(_flatten(css, ctx.selector, ctx.at_rules, match.important))


class Purger:
    """Resolve candidates and emit the compiled stylesheet."""

    def __init__(
        self,
        utilities: UtilityRegistry,
        expander: VariantExpander,
        *,
        important: bool = False,
        blocklist: Iterable[str] = (),
    ) -> None:
        self.utilities = utilities
        self.expander = expander
        self.important = important
        self.blocklist = frozenset(blocklist)

    # ---- base resolution ---------------------------------------------------

    def _arbitrary(self, base: str) -> tuple[UtilityDefinition, Any, int] | None:
        found = _ARBITRARY_RE.match(base)
        if not found:
            return None
        definition = self.utilities.family(found.group("name"))
        if definition is None or not definition.supports_arbitrary:
            return None
        raw = found.group("value").replace("_", " ")
        hinted = _TYPE_HINT_RE.match(raw)
        if hinted:
            kind, raw = hinted.group("kind"), hinted.group("value")
        else:
            kind = infer_kind(raw)
        if not definition.accepts(kind):
            return None
        if kind == "any":
            kind = definition.types[0]
        if found.group("negative"):
            if not definition.supports_negative:
                return None
            raw = f"calc({raw} * -1)"
        value: Any = TypedValue(kind, raw) if len(definition.types) > 1 else raw
        return definition, value, len(definition.values)

    def _resolve_base(self, base: str) -> tuple[UtilityDefinition, Any, int, bool] | None:
        exact = self.utilities.exact_index().get(base)
        if exact is not None:
            return (*exact, False)
        arbitrary = self._arbitrary(base)
        if arbitrary is not None:
            return (*arbitrary, True)

        split = _split_modifier(base)
        if split is None:
            return None
        head, modifier = split
        resolved = self._resolve_base(head)
        if resolved is None:
            return None
        definition, value, index, is_arbitrary = resolved
        if definition.is_static or _kind_of(definition, value) != "color":
            return None
        raw = value.value if isinstance(value, TypedValue) else value
        if not isinstance(raw, str):
            return None
        tinted = with_alpha(raw, modifier)
        if tinted is None:
            return None
        value = TypedValue(value.kind, tinted) if isinstance(value, TypedValue) else tinted
        return definition, value, index, is_arbitrary

    # ---- public ------------------------------------------------------------

    def match(self, candidate: str) -> Match | None:
        """Resolve one candidate; None means it names nothing we know."""
        if candidate in self.blocklist:
            return None
        parts = split_variants(candidate)
        base = parts[-1]
        variant_names = parts[:-1]
        if not base or any(not name for name in variant_names):
            return None

        important = self.important
        if base.startswith("!"):
            important, base = True, base[1:]
        elif base.endswith("!"):
            important, base = True, base[:-1]
        if not base:
            return None

        resolved = self._resolve_base(base)
        if resolved is None:
            return None
        definition, value, index, arbitrary = resolved
        expanded = self.expander.expand(definition, variant_names, base=base, value=value)
        if expanded is None:
            return None
        return Match(
            candidate=candidate,
            expanded=expanded,
            value_index=index,
            arbitrary=arbitrary,
            important=important,
        )

    def matches(self, candidates: Iterable[str]) -> list[Match]:
        """Resolve every distinct candidate, sorted into emission order."""
        found = [m for m in (self.match(c) for c in set(candidates)) if m is not None]
        found.sort(key=lambda m: m.sort_key)
        return found

    def purge(self, candidates: Iterable[str]) -> CompiledStylesheet:
        """Emit rules for the candidates that name utilities."""
        return self.emit(self.matches(candidates))

    def emit(self, matched: Iterable[Match]) -> CompiledStylesheet:
        """Realize already-sorted matches, dropping duplicate rules."""
        matched = list(matched)
        seen: set[CssRule] = set()
        rules: list[CssRule] = []
        for match in matched:
            for rule in realize(match):
                if rule in seen:
                    continue
                seen.add(rule)
                rules.append(rule)
        logger.debug("Matched %d candidate(s) into %d rule(s)", len(matched), len(rules))
        return CompiledStylesheet(rules=tuple(rules))
