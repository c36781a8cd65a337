"""Registry entry models: utility definitions and variants."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Callable, Iterator, Mapping, Union


@dataclass(frozen=True)
class TypedValue:
    """A theme value tagged with its kind, for utilities that accept several.

    ``text-lg`` and ``text-red-500`` share the ``text`` utility; the tag tells
    its template whether to emit a font size or a color.
    """

    kind: str
    value: Any


# A CSS object maps property names to values, or nested selectors (containing
# "&") to further CSS objects.
CssObject = Mapping[str, Union[str, "CssObject"]]


@dataclass(frozen=True)
class UtilityDefinition:
    """A utility registered by a plugin.

    Static utilities carry fixed ``declarations`` and are matched by ``name``
    alone. Parametrized utilities carry a ``template`` and a ``values`` table;
    each key produces the concrete class ``{name}-{key}`` (``DEFAULT`` maps to
    the bare name), and bracketed arbitrary values feed the template directly.
    """

    name: str
    plugin: str
    order: int
    declarations: CssObject | None = None
    template: Callable[[Any], CssObject] | None = None
    values: Mapping[str, Any] = field(default_factory=dict)
    type: str = "any"  # one kind, or several joined by "|"
    supports_negative: bool = False
    supports_arbitrary: bool = True

    @property
    def types(self) -> tuple[str, ...]:
        return tuple(self.type.split("|"))

    def accepts(self, kind: str) -> bool:
        types = self.types
        return "any" in types or kind in types or kind == "any"

    @property
    def is_static(self) -> bool:
        return self.template is None

    @property
    def key(self) -> str:
        """Registry key: the class name, or ``name-*`` for a parametrized family."""
        return self.name if self.is_static else f"{self.name}-*"

    def concrete_names(self) -> Iterator[tuple[str, Any, int]]:
        """Yield ``(class name, value, value index)`` for every known value."""
        if self.is_static:
            yield self.name, None, 0
            return
        for index, (key, value) in enumerate(self.values.items()):
            name = self.name if key == "DEFAULT" else f"{self.name}-{key}"
            yield name, value, index
            if self.supports_negative and _negatable(value):
                yield f"-{name}", _negate(value), index

    def render(self, value: Any = None) -> CssObject:
        if self.is_static:
            return self.declarations or {}
        assert self.template is not None
        return self.template(value)


def _negatable(value: Any) -> bool:
    return isinstance(value, str) and value not in ("0", "0px", "auto") and not value.startswith("-")


def _negate(value: str) -> str:
    if value.startswith("calc(") or value.startswith("var("):
        return f"calc({value} * -1)"
    return f"-{value}"


@dataclass(frozen=True)
class RuleContext:
    """The selector and enclosing at-rules a variant operates on."""

    selector: str
    at_rules: tuple[str, ...] = ()


@dataclass(frozen=True)
class Variant:
    """A named modifier that rewrites a rule's selector or wraps it.

    ``rank`` orders variants canonically: registration order of the variant
    (or variant family), then position of the value within the family.
    """

    name: str
    transform: Callable[[RuleContext], RuleContext]
    rank: tuple[int, int]
