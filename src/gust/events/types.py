"""Event types emitted while building a stylesheet."""

from dataclasses import dataclass


@dataclass(frozen=True)
class BuildStarted:
    content_patterns: tuple[str, ...]


@dataclass(frozen=True)
class PluginLoaded:
    plugin: str
    utilities: int
    variants: int


@dataclass(frozen=True)
class FileScanned:
    path: str
    candidates: int


@dataclass(frozen=True)
class FileSkipped:
    path: str
    reason: str


@dataclass(frozen=True)
class BuildCompleted:
    rules: int
    files: int


@dataclass(frozen=True)
class BuildFailed:
    error: str
