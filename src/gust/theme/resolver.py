"""Theme resolution: defaults, extensions and overrides combined lazily.

Top-level keys set directly on the theme replace the default subtree;
keys under ``extend`` deep-merge into it (mappings merge, lists
concatenate). Any value may be lazy: a callable receiving the theme
accessor, or a string containing ``theme(path)`` references. Lazy values
are evaluated depth first, one path at a time. While the layers of a path
are merged, reads of that path see the layers merged so far; a path
re-entered before any layer is available is reported as a cycle.
"""

from __future__ import annotations

import logging
import re
from types import MappingProxyType
from typing import Any, Callable, Mapping

from gust.errors import ConfigError, CyclicThemeReferenceError, GustError
from gust.model.theme import Provenance, Theme, join_path, split_path

logger = logging.getLogger(__name__)

__all__ = ["ThemeResolver", "deep_merge", "resolve_theme"]

Path = tuple[str, ...]

_MISSING: Any = object()

_THEME_FN_RE = re.compile(r"""theme\(\s*['"]?([^'")]+?)['"]?\s*\)""")


class _Deferred:
    """Layers that must be merged once the lazy ones among them are evaluated."""

    __slots__ = ("layers",)

    def __init__(self, layers: tuple[Any, ...]) -> None:
        self.layers = layers


def _is_lazy(value: Any) -> bool:
    if isinstance(value, _Deferred):
        return True
    if isinstance(value, str):
        return "theme(" in value
    return callable(value)


def _merge_layers(base: Any, ext: Any) -> Any:
    if base is _MISSING:
        return ext
    if ext is _MISSING:
        return base
    if _is_lazy(base) or _is_lazy(ext):
        return _Deferred((base, ext))
    if isinstance(base, Mapping) and isinstance(ext, Mapping):
        merged = dict(base)
        for key, value in ext.items():
            merged[key] = _merge_layers(merged.get(key, _MISSING), value)
        return merged
    if isinstance(base, (list, tuple)) and isinstance(ext, (list, tuple)):
        return [*base, *ext]
    return ext


def deep_merge(base: Any, ext: Any) -> Any:
    """Merge *ext* into *base* without mutating either.

    Mappings merge key by key, sequences concatenate, anything else in *ext*
    replaces *base*.
    """
    return _merge_layers(base, ext)


def _freeze(value: Any) -> Any:
    if isinstance(value, Mapping):
        return MappingProxyType({k: _freeze(v) for k, v in value.items()})
    if isinstance(value, list):
        return tuple(_freeze(v) for v in value)
    return value


def _leaf_paths(tree: Mapping[str, Any], prefix: Path = ()) -> list[Path]:
    paths: list[Path] = []
    for key, value in tree.items():
        path = prefix + (str(key),)
        if isinstance(value, Mapping) and value:
            paths.extend(_leaf_paths(value, path))
        else:
            paths.append(path)
    return paths


class ThemeResolver:
    """Build the read-only theme from three layers.

    Args:
        defaults: The built-in token tree.
        extend: Tokens merged additively into the defaults.
        overrides: Top-level keys that replace the default subtree.
    """

    def __init__(
        self,
        defaults: Mapping[str, Any],
        extend: Mapping[str, Any] | None = None,
        overrides: Mapping[str, Any] | None = None,
    ) -> None:
        self.defaults = defaults
        self.extend = extend or {}
        self.overrides = overrides or {}
        self._cache: dict[Path, Any] = {}
        self._stack: list[Path] = []
        self._partial: dict[Path, Any] = {}
        self.errors: list[GustError] = []

    # ---- public ------------------------------------------------------------

    def resolve(self) -> Theme:
        """Evaluate every token and return the frozen theme.

        Every top-level key is attempted; all failures are kept on
        ``errors`` and the first one is raised.
        """
        values: dict[str, Any] = {}
        self.errors = []
        seen_cycles: set[frozenset[str]] = set()
        for key in self._top_keys():
            try:
                values[key] = _freeze(self._materialize((key,)))
            except CyclicThemeReferenceError as exc:
                members = frozenset(exc.cycle)
                if members not in seen_cycles:
                    seen_cycles.add(members)
                    self.errors.append(exc)
            except GustError as exc:
                self.errors.append(exc)
        if self.errors:
            raise self.errors[0]

        provenance: dict[Path, Provenance] = {}
        for key in self.overrides:
            provenance[(str(key),)] = Provenance.OVERRIDE
        for path in _leaf_paths(self.extend):
            provenance[path] = Provenance.EXTEND
        logger.debug("Resolved theme with %d top-level key(s)", len(values))
        return Theme(MappingProxyType(values), provenance)

    def __call__(self, path: str, default: Any = None) -> Any:
        """Theme accessor handed to lazy tokens."""
        found = self._find(split_path(path))
        if found is None:
            return default
        return self._materialize(found)

    # ---- internals ---------------------------------------------------------

    def _top_keys(self) -> list[str]:
        keys: dict[str, None] = {}
        for layer in (self.defaults, self.overrides, self.extend):
            for key in layer:
                keys[key] = None
        return list(keys)

    def _find(self, segments: Path) -> Path | None:
        """Map accessor segments to a real key path, joining dotted keys."""
        path: Path = ()
        i = 0
        while i < len(segments):
            node = self._node(path) if path else {k: None for k in self._top_keys()}
            if not isinstance(node, Mapping):
                return None
            for j in range(len(segments), i, -1):
                key = ".".join(segments[i:j])
                if key in node:
                    path = path + (key,)
                    i = j
                    break
            else:
                return None
        return path or None

    def _raw_top(self, key: str) -> Any:
        base = self.overrides.get(key, _MISSING)
        if base is _MISSING:
            base = self.defaults.get(key, _MISSING)
        return _merge_layers(base, self.extend.get(key, _MISSING))

    def _node(self, path: Path) -> Any:
        if path in self._cache:
            return self._cache[path]
        if path in self._stack:
            partial = self._partial.get(path, _MISSING)
            if partial is not _MISSING:
                return partial
            start = self._stack.index(path)
            cycle = [join_path(p) for p in self._stack[start:]] + [join_path(path)]
            raise CyclicThemeReferenceError(cycle)

        if len(path) == 1:
            raw = self._raw_top(path[0])
        else:
            parent = self._node(path[:-1])
            if not isinstance(parent, Mapping) or path[-1] not in parent:
                return _MISSING
            raw = parent[path[-1]]

        if _is_lazy(raw):
            self._stack.append(path)
            try:
                while _is_lazy(raw):
                    raw = self._evaluate(raw, path)
            finally:
                self._stack.pop()
                self._partial.pop(path, None)
        # Nodes read through a partly merged parent may still change.
        if not any(path[:i] in self._partial for i in range(1, len(path))):
            self._cache[path] = raw
        return raw

    def _evaluate(self, raw: Any, path: Path) -> Any:
        if isinstance(raw, _Deferred):
            merged: Any = _MISSING
            for layer in raw.layers:
                while _is_lazy(layer):
                    layer = self._evaluate(layer, path)
                merged = _merge_layers(merged, layer)
                self._partial[path] = merged
            return merged
        if isinstance(raw, str):
            return self._substitute(raw)
        fn: Callable[[Any], Any] = raw
        try:
            return fn(self)
        except GustError:
            raise
        except Exception as exc:
            raise ConfigError(
                f"Theme token '{join_path(path)}' failed to resolve: {exc}", cause=exc
            ) from exc

    def _substitute(self, raw: str) -> Any:
        whole = _THEME_FN_RE.fullmatch(raw.strip())
        if whole:
            return self._reference(whole.group(1))

        def replace(match: re.Match[str]) -> str:
            value = self._reference(match.group(1))
            if isinstance(value, (list, tuple)):
                return ", ".join(str(v) for v in value)
            return str(value)

        return _THEME_FN_RE.sub(replace, raw)

    def _reference(self, ref: str) -> Any:
        found = self._find(split_path(ref.strip()))
        if found is None:
            raise ConfigError(f"Unknown theme reference: theme({ref})")
        return self._materialize(found)

    def _materialize(self, path: Path) -> Any:
        node = self._node(path)
        if isinstance(node, Mapping):
            return {key: self._materialize(path + (key,)) for key in node}
        return node


def resolve_theme(
    defaults: Mapping[str, Any],
    extend: Mapping[str, Any] | None = None,
    overrides: Mapping[str, Any] | None = None,
) -> Theme:
    return ThemeResolver(defaults, extend, overrides).resolve()
