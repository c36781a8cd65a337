"""Normalized configuration model produced by the config resolver."""

from __future__ import annotations

from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, Mapping


@dataclass(frozen=True)
class RawContent:
    """Inline content scanned as if it were a file with *extension*."""

    raw: str
    extension: str = "html"


@dataclass(frozen=True)
class Config:
    """A single merged configuration.

    ``theme_defaults``, ``theme_extend`` and ``theme_overrides`` are kept as
    three separate trees; the theme resolver combines them.
    """

    content_patterns: tuple[str, ...]
    patterns_relative_to_config: bool = False
    root: Path | None = None
    theme_defaults: Mapping[str, Any] | None = None  # None selects the built-in theme
    theme_extend: Mapping[str, Any] = field(default_factory=dict)
    theme_overrides: Mapping[str, Any] = field(default_factory=dict)
    plugins: tuple[Any, ...] = ()
    raw_content: tuple[RawContent, ...] = ()
    safelist: tuple[str, ...] = ()
    blocklist: tuple[str, ...] = ()
    dark_mode: str = "media"
    important: bool = False

    def content_root(self, cwd: Path | None = None) -> Path:
        """Directory that content patterns are resolved against."""
        if self.patterns_relative_to_config and self.root is not None:
            return self.root
        return cwd if cwd is not None else Path.cwd()
