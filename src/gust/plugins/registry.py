"""Utility and variant registries populated by plugins."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Callable, Iterator, Mapping

from gust.model.utility import RuleContext, UtilityDefinition, Variant

Transform = Callable[[RuleContext], RuleContext]


class UtilityRegistry:
    """Registry of utilities keyed by name (``flex``) or family (``p-*``).

    Latest-wins on key collision: the replacement takes the position of the
    newer registration. Iteration follows registration order.
    """

    def __init__(self) -> None:
        self._utilities: dict[str, UtilityDefinition] = {}
        self._next_order = 0
        self._index: dict[str, tuple[UtilityDefinition, Any, int]] | None = None

    def next_order(self) -> int:
        order = self._next_order
        self._next_order += 1
        return order

    def register(self, definition: UtilityDefinition) -> None:
        """Register a utility, replacing any earlier one with the same name."""
        self._utilities.pop(definition.key, None)
        self._utilities[definition.key] = definition
        self._index = None

    def get(self, key: str) -> UtilityDefinition | None:
        return self._utilities.get(key)

    def family(self, name: str) -> UtilityDefinition | None:
        """The parametrized utility registered under *name*, if any."""
        return self._utilities.get(f"{name}-*")

    def __contains__(self, key: str) -> bool:
        return key in self._utilities

    def __len__(self) -> int:
        return len(self._utilities)

    def __iter__(self) -> Iterator[UtilityDefinition]:
        return iter(self._utilities.values())

    def names(self) -> list[str]:
        return list(self._utilities)

    def exact_index(self) -> Mapping[str, tuple[UtilityDefinition, Any, int]]:
        """Map every concrete class name to ``(definition, value, value index)``.

        Built in registration order, so a later utility producing the same
        concrete name shadows an earlier one.
        """
        if self._index is None:
            index: dict[str, tuple[UtilityDefinition, Any, int]] = {}
            for definition in self._utilities.values():
                for name, value, position in definition.concrete_names():
                    index[name] = (definition, value, position)
            self._index = index
        return self._index


@dataclass(frozen=True)
class VariantFamily:
    """Variants sharing a prefix, e.g. ``aria-*`` or ``group-*``.

    ``build`` turns the value for a suffix into a transform; bracketed
    suffixes (``aria-[sort=ascending]``) are passed through when
    ``arbitrary`` is set.
    """

    name: str
    build: Callable[[str], Transform]
    values: Mapping[str, str] = field(default_factory=dict)
    order: int = 0
    arbitrary: bool = True


class VariantRegistry:
    """Registry of static variants and variant families.

    Ranks come from a single registration counter shared by both kinds, so
    a variant registered later always sorts after (outside) earlier ones.
    Latest-wins on name collision.
    """

    def __init__(self) -> None:
        self._variants: dict[str, Variant] = {}
        self._families: dict[str, VariantFamily] = {}
        self._next_order = 0

    def _order(self) -> int:
        order = self._next_order
        self._next_order += 1
        return order

    def register(self, name: str, transform: Transform) -> Variant:
        variant = Variant(name=name, transform=transform, rank=(self._order(), 0))
        self._variants.pop(name, None)
        self._variants[name] = variant
        return variant

    def register_family(
        self,
        name: str,
        build: Callable[[str], Transform],
        values: Mapping[str, str] | None = None,
        *,
        arbitrary: bool = True,
    ) -> VariantFamily:
        family = VariantFamily(
            name=name,
            build=build,
            values=dict(values or {}),
            order=self._order(),
            arbitrary=arbitrary,
        )
        self._families.pop(name, None)
        self._families[name] = family
        return family

    def names(self) -> list[str]:
        names = list(self._variants)
        for family in self._families.values():
            names.extend(f"{family.name}-{key}" for key in family.values)
        return names

    def __len__(self) -> int:
        return len(self._variants) + len(self._families)

    def lookup(self, name: str) -> Variant | None:
        """Find the variant called *name*, or None if nothing provides it."""
        if name in self._variants:
            return self._variants[name]
        # Longest family prefix first, so "group-aria" beats "group".
        for family_name in sorted(self._families, key=len, reverse=True):
            if not name.startswith(family_name + "-"):
                continue
            family = self._families[family_name]
            suffix = name[len(family_name) + 1:]
            keys = list(family.values)
            if suffix in family.values:
                return Variant(
                    name=name,
                    transform=family.build(family.values[suffix]),
                    rank=(family.order, keys.index(suffix)),
                )
            if family.arbitrary and len(suffix) > 2 and suffix[0] == "[" and suffix[-1] == "]":
                raw = suffix[1:-1].replace("_", " ")
                return Variant(
                    name=name,
                    transform=family.build(raw),
                    rank=(family.order, len(keys)),
                )
        return None
