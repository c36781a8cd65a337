"""Error hierarchy for the gust stylesheet generator."""
from __future__ import annotations

from typing import TYPE_CHECKING, Sequence

if TYPE_CHECKING:
    from gust.model.diagnostic import Diagnostic


class GustError(Exception):
    """Base error for all gust errors."""

    def __init__(self, message: str, *, cause: Exception | None = None) -> None:
        super().__init__(message)
        self.cause = cause


class ConfigError(GustError):
    """The configuration is malformed or empty after merging."""


class GlobPatternError(ConfigError):
    """A content pattern is not a syntactically valid glob."""

    def __init__(
        self,
        message: str,
        *,
        pattern: str,
        column: int | None = None,
        cause: Exception | None = None,
    ) -> None:
        super().__init__(message, cause=cause)
        self.pattern = pattern
        self.column = column


class CyclicThemeReferenceError(GustError):
    """A lazily-resolved theme token refers back to itself."""

    def __init__(self, cycle: Sequence[str]) -> None:
        self.cycle = list(cycle)
        super().__init__("Cyclic theme reference: " + " -> ".join(self.cycle))


class PluginLoadError(GustError):
    """A plugin failed to import or raised during registration."""

    def __init__(self, plugin: str, cause: Exception) -> None:
        super().__init__(f"Plugin '{plugin}' failed to load: {cause}", cause=cause)
        self.plugin = plugin


class BuildError(GustError):
    """Raised once with every fatal problem collected during a build."""

    def __init__(
        self, errors: Sequence[GustError], diagnostics: Sequence[Diagnostic] = ()
    ) -> None:
        self.errors = list(errors)
        self.diagnostics = list(diagnostics)
        messages = [str(e) for e in self.errors]
        super().__init__(
            f"Build failed with {len(messages)} error(s): " + "; ".join(messages)
        )
