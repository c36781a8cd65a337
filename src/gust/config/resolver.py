"""Merge raw configuration sources into one normalized ``Config``.

Sources are processed in precedence order, presets first. Content patterns
concatenate, ``theme.extend`` trees deep-merge, any other top-level theme
key replaces the same key from an earlier source, and plugin lists
concatenate. The resulting trees are kept apart; combining them with the
defaults is the theme resolver's job.
"""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Any, Iterator, Mapping, Sequence

from gust.content.glob import validate_glob
from gust.errors import BuildError, ConfigError, GustError
from gust.model.config import Config, RawContent
from gust.theme.defaults import DEFAULT_THEME
from gust.theme.resolver import deep_merge

logger = logging.getLogger(__name__)

__all__ = ["ConfigResolver", "check_config", "resolve_config"]

# camelCase keys of the external shape and their snake_case aliases.
_ALIASES = {
    "dark_mode": "darkMode",
    "content_patterns": "content",
}
_KNOWN_KEYS = frozenset({
    "content", "theme", "plugins", "presets", "safelist", "blocklist",
    "darkMode", "important", "root",
})


def _normalize_keys(raw: Mapping[str, Any]) -> dict[str, Any]:
    return {_ALIASES.get(key, key): value for key, value in raw.items()}


class ConfigResolver:
    """Merge configuration sources, collecting every problem found.

    Args:
        sources: Raw config mappings (or ``Config`` objects), lowest
            precedence first.
        root: Directory the last source was loaded from, if any.
        defaults: Default theme tree; the built-in theme when omitted.
    """

    def __init__(
        self,
        sources: Sequence[Mapping[str, Any] | Config],
        *,
        root: Path | None = None,
        defaults: Mapping[str, Any] | None = None,
    ) -> None:
        self.sources = list(sources)
        self.root = root
        self.defaults = DEFAULT_THEME if defaults is None else defaults
        self.errors: list[GustError] = []

    # ---- public ------------------------------------------------------------

    def resolve(self) -> Config:
        """Return the merged config.

        All problems are collected on ``errors``. A single problem is raised
        as-is; several are raised together as a ``BuildError``.
        """
        config = self.merge()
        if len(self.errors) == 1:
            raise self.errors[0]
        if self.errors:
            raise BuildError(self.errors)
        return config

    def merge(self) -> Config:
        """Merge without raising; problems are left on ``errors``."""
        self.errors = []
        patterns: list[str] = []
        raw_content: list[RawContent] = []
        relative = False
        extend: Any = {}
        overrides: dict[str, Any] = {}
        plugins: list[Any] = []
        safelist: list[str] = []
        blocklist: list[str] = []
        dark_mode = "media"
        important = False
        content_rejected = False
        root = self.root

        for source, source_root in self._flatten(self.sources, self.root):
            if isinstance(source, Config):
                source = _from_config(source)
            if source_root is not None:
                root = source_root

            if "content" in source:
                parsed = self._content(source["content"], relative)
                if parsed is None:
                    content_rejected = True
                else:
                    found, raw, relative = parsed
                    patterns.extend(found)
                    raw_content.extend(raw)

            theme = source.get("theme") or {}
            if not isinstance(theme, Mapping):
                self.errors.append(ConfigError(f"'theme' must be a mapping, got {type(theme).__name__}"))
                theme = {}
            for key, value in theme.items():
                if key == "extend":
                    if not isinstance(value, Mapping):
                        self.errors.append(ConfigError("'theme.extend' must be a mapping"))
                        continue
                    extend = deep_merge(extend, value)
                else:
                    overrides[key] = value

            plugins.extend(self._sequence(source, "plugins"))
            safelist.extend(str(name) for name in self._sequence(source, "safelist"))
            blocklist.extend(str(name) for name in self._sequence(source, "blocklist"))
            if "darkMode" in source:
                dark_mode = self._dark_mode(source["darkMode"], dark_mode)
            if "important" in source:
                important = bool(source["important"])

            for key in source:
                if key not in _KNOWN_KEYS:
                    logger.debug("Ignoring unknown configuration key %r", key)

        logger.debug(
            "Merged %d source(s): %d pattern(s), %d plugin(s)",
            len(self.sources),
            len(patterns),
            len(plugins),
        )
        config = Config(
            content_patterns=tuple(patterns),
            patterns_relative_to_config=relative,
            root=root,
            theme_defaults=self.defaults,
            theme_extend=extend,
            theme_overrides=overrides,
            plugins=tuple(plugins),
            raw_content=tuple(raw_content),
            safelist=tuple(safelist),
            blocklist=tuple(blocklist),
            dark_mode=dark_mode,
            important=important,
        )
        # A rejected content value is reported once, not again as empty.
        self.errors.extend(check_config(config, require_content=not content_rejected))
        return config

    # ---- internals ---------------------------------------------------------

    def _flatten(
        self, sources: Sequence[Any], root: Path | None, depth: int = 0
    ) -> Iterator[tuple[Mapping[str, Any] | Config, Path | None]]:
        """Yield sources with their presets expanded in front of them."""
        if depth > 16:
            self.errors.append(ConfigError("Presets nested too deeply"))
            return
        for source in sources:
            source_root = root
            if isinstance(source, (str, Path)):
                from gust.config.loader import read_config

                path = Path(source)
                if root is not None and not path.is_absolute():
                    path = root / path
                try:
                    source, source_root = read_config(path)
                except ConfigError as exc:
                    self.errors.append(exc)
                    continue
            if isinstance(source, Config):
                yield source, source.root or source_root
                continue
            if not isinstance(source, Mapping):
                self.errors.append(ConfigError(f"Config source must be a mapping, got {type(source).__name__}"))
                continue
            source = _normalize_keys(source)
            if "root" in source and source["root"] is not None:
                source_root = Path(source["root"])
            presets = source.get("presets") or ()
            if presets:
                yield from self._flatten(list(presets), source_root, depth + 1)
            yield source, source_root

    def _content(
        self, content: Any, relative: bool
    ) -> tuple[list[str], list[RawContent], bool] | None:
        if isinstance(content, Mapping):
            relative = bool(content.get("relative", relative))
            files = content.get("files", [])
        else:
            relative = False
            files = content
        if isinstance(files, str) or not isinstance(files, Sequence):
            self.errors.append(ConfigError("'content' must be a list of globs or {relative, files}"))
            return None

        patterns: list[str] = []
        raw: list[RawContent] = []
        for entry in files:
            if isinstance(entry, str):
                patterns.append(entry)
            elif isinstance(entry, RawContent):
                raw.append(entry)
            elif isinstance(entry, Mapping) and "raw" in entry:
                raw.append(RawContent(raw=str(entry["raw"]), extension=str(entry.get("extension", "html"))))
            else:
                self.errors.append(ConfigError(f"Invalid content entry: {entry!r}"))
        return patterns, raw, relative

    def _sequence(self, source: Mapping[str, Any], key: str) -> list[Any]:
        value = source.get(key)
        if value is None:
            return []
        if isinstance(value, (str, bytes)) or not isinstance(value, Sequence):
            self.errors.append(ConfigError(f"'{key}' must be a list"))
            return []
        return list(value)

    def _dark_mode(self, value: Any, current: str) -> str:
        if isinstance(value, (list, tuple)) and value:
            value = value[0]
        if value in ("media", "class"):
            return value
        self.errors.append(ConfigError(f"'darkMode' must be 'media' or 'class', got {value!r}"))
        return current


def check_config(config: Config, *, require_content: bool = True) -> list[GustError]:
    """Problems that make *config* unusable: no content, or a malformed glob."""
    errors: list[GustError] = []
    if require_content and not config.content_patterns and not config.raw_content:
        errors.append(ConfigError("No content patterns configured"))
    for pattern in config.content_patterns:
        error = validate_glob(pattern)
        if error is not None:
            errors.append(error)
    return errors


def _from_config(config: Config) -> dict[str, Any]:
    """Turn an already-normalized config back into a raw source."""
    theme: dict[str, Any] = dict(config.theme_overrides)
    if config.theme_extend:
        theme["extend"] = config.theme_extend
    files: list[Any] = list(config.content_patterns) + list(config.raw_content)
    return {
        "content": {"relative": config.patterns_relative_to_config, "files": files},
        "theme": theme,
        "plugins": list(config.plugins),
        "safelist": list(config.safelist),
        "blocklist": list(config.blocklist),
        "darkMode": config.dark_mode,
        "important": config.important,
    }


def resolve_config(
    *sources: Mapping[str, Any] | Config | str | Path,
    root: Path | None = None,
) -> Config:
    """Merge *sources* (lowest precedence first) into one ``Config``."""
    return ConfigResolver(sources, root=root).resolve()
