"""Theme model: resolved design tokens and their provenance."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Any, Iterator, Mapping


class Provenance(Enum):
    """Which layer of the theme a token came from."""

    DEFAULT = "default"
    EXTEND = "extend"
    OVERRIDE = "override"


@dataclass(frozen=True)
class ThemeToken:
    """A leaf of the resolved theme tree."""

    path: str
    value: Any
    provenance: Provenance


_MISSING = object()


def split_path(path: str | tuple[str, ...]) -> tuple[str, ...]:
    """Split ``colors.gray.100`` or ``spacing[2.5]`` into key segments."""
    if isinstance(path, tuple):
        return path
    segments: list[str] = []
    buf: list[str] = []
    in_bracket = False
    for ch in path:
        if in_bracket:
            if ch == "]":
                in_bracket = False
                segments.append("".join(buf))
                buf = []
            else:
                buf.append(ch)
        elif ch == "[":
            if buf:
                segments.append("".join(buf))
                buf = []
            in_bracket = True
        elif ch == ".":
            if buf:
                segments.append("".join(buf))
                buf = []
        else:
            buf.append(ch)
    if buf:
        segments.append("".join(buf))
    return tuple(segments)


def join_path(segments: tuple[str, ...]) -> str:
    return ".".join(segments)


def lookup(tree: Mapping[str, Any], segments: tuple[str, ...]) -> Any:
    """Walk *tree* along *segments*.

    Keys that themselves contain dots (``spacing.0.5``) are found by joining
    the remaining segments when a single segment does not match.
    Returns ``_MISSING`` when the path does not exist.
    """
    node: Any = tree
    i = 0
    while i < len(segments):
        if not isinstance(node, Mapping):
            return _MISSING
        for j in range(len(segments), i, -1):
            key = ".".join(segments[i:j])
            if key in node:
                node = node[key]
                i = j
                break
        else:
            return _MISSING
    return node


class Theme:
    """Read-only view over a fully resolved theme tree.

    Calling the theme with a path returns the token value::

        theme("colors.gray.100")
        theme("spacing[2.5]", "0px")
    """

    def __init__(
        self,
        values: Mapping[str, Any],
        provenance: Mapping[tuple[str, ...], Provenance] | None = None,
    ) -> None:
        self._values = values
        self._provenance = dict(provenance or {})

    def __call__(self, path: str, default: Any = None) -> Any:
        value = lookup(self._values, split_path(path))
        return default if value is _MISSING else value

    def __contains__(self, path: str) -> bool:
        return lookup(self._values, split_path(path)) is not _MISSING

    def keys(self) -> list[str]:
        return list(self._values)

    def as_dict(self) -> Mapping[str, Any]:
        return self._values

    def provenance(self, path: str | tuple[str, ...]) -> Provenance:
        """Return the layer that produced the token at *path*.

        The most specific recorded prefix of the path decides.
        """
        segments = split_path(path)
        for end in range(len(segments), 0, -1):
            found = self._provenance.get(segments[:end])
            if found is not None:
                return found
        return Provenance.DEFAULT

    def tokens(self) -> Iterator[ThemeToken]:
        """Yield every leaf token in key order."""

        def walk(node: Any, prefix: tuple[str, ...]) -> Iterator[ThemeToken]:
            if isinstance(node, Mapping):
                for key, child in node.items():
                    yield from walk(child, prefix + (str(key),))
            else:
                yield ThemeToken(
                    path=join_path(prefix),
                    value=node,
                    provenance=self.provenance(prefix),
                )

        yield from walk(self._values, ())
