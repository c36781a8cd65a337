"""Build orchestration: config -> theme -> plugins -> scan -> purge -> CSS."""

from __future__ import annotations

import logging
from dataclasses import dataclass
from pathlib import Path
from typing import Any, Mapping, NoReturn

from gust.config.loader import read_config
from gust.config.resolver import ConfigResolver, check_config
from gust.content.scanner import ContentScanner
from gust.emit.purger import Purger
from gust.errors import BuildError, GustError, PluginLoadError
from gust.events import types as events
from gust.events.bus import EventBus
from gust.model.config import Config
from gust.model.diagnostic import Diagnostic
from gust.model.stylesheet import CompiledStylesheet
from gust.model.theme import Theme
from gust.plugins.core import CorePlugin
from gust.plugins.host import PluginHost
from gust.theme.defaults import DEFAULT_THEME
from gust.theme.resolver import ThemeResolver
from gust.variants.expander import VariantExpander

logger = logging.getLogger(__name__)

__all__ = ["BuildResult", "Builder", "build"]

ConfigInput = Config | Mapping[str, Any] | str | Path


@dataclass(frozen=True)
class BuildResult:
    """Everything a successful build produced."""

    stylesheet: CompiledStylesheet
    candidates: frozenset[str]
    matched: tuple[str, ...]
    files: tuple[str, ...]
    diagnostics: tuple[Diagnostic, ...] = ()

    @property
    def css(self) -> str:
        return self.stylesheet.css

    @property
    def warnings(self) -> list[Diagnostic]:
        return [d for d in self.diagnostics if d.is_warning]


class Builder:
    """Run one build over a config and the files it names.

    Config, glob and theme problems are collected and raised together;
    a failing plugin aborts immediately. Nothing is returned on failure.
    """

    def __init__(
        self,
        config: ConfigInput,
        *,
        cwd: Path | None = None,
        event_bus: EventBus | None = None,
        max_workers: int | None = None,
    ) -> None:
        self.source = config
        self.cwd = Path(cwd) if cwd is not None else Path.cwd()
        self.event_bus = event_bus or EventBus()
        self.max_workers = max_workers

    def build(self) -> BuildResult:
        errors: list[GustError] = []

        config = self._config(errors)
        if config is None:
            self._fail(errors)
        self.event_bus.emit(events.BuildStarted(content_patterns=config.content_patterns))

        theme = self._theme(config, errors)
        if errors or theme is None:
            self._fail(errors)

        host = PluginHost(theme, config=config, event_bus=self.event_bus)
        try:
            host.run(CorePlugin())
            host.load(config.plugins)
        except PluginLoadError as exc:
            self.event_bus.emit(events.BuildFailed(error=str(exc)))
            raise

        scanner = ContentScanner(
            config.content_patterns,
            config.content_root(self.cwd),
            raw_content=config.raw_content,
            max_workers=self.max_workers,
            event_bus=self.event_bus,
        )
        scan = scanner.scan()
        candidates = scan.candidates | frozenset(config.safelist)

        purger = Purger(
            host.utilities,
            VariantExpander(host.variants),
            important=config.important,
            blocklist=config.blocklist,
        )
        matches = purger.matches(candidates)
        stylesheet = purger.emit(matches)

        logger.info(
            "Built %d rule(s) from %d file(s), %d of %d candidate(s) matched",
            len(stylesheet),
            len(scan.files),
            len(matches),
            len(candidates),
        )
        self.event_bus.emit(events.BuildCompleted(rules=len(stylesheet), files=len(scan.files)))
        return BuildResult(
            stylesheet=stylesheet,
            candidates=candidates,
            matched=tuple(m.candidate for m in matches),
            files=scan.files,
            diagnostics=scan.diagnostics,
        )

    # ---- stages ------------------------------------------------------------

    def _config(self, errors: list[GustError]) -> Config | None:
        source = self.source
        root: Path | None = None
        if isinstance(source, (str, Path)):
            try:
                source, root = read_config(Path(source))
            except GustError as exc:
                errors.append(exc)
                return None
        if isinstance(source, Config):
            errors.extend(check_config(source))
            return source
        resolver = ConfigResolver([source], root=root)
        config = resolver.merge()
        errors.extend(resolver.errors)
        return config

    def _theme(self, config: Config, errors: list[GustError]) -> Theme | None:
        defaults = DEFAULT_THEME if config.theme_defaults is None else config.theme_defaults
        resolver = ThemeResolver(defaults, config.theme_extend, config.theme_overrides)
        try:
            return resolver.resolve()
        except GustError:
            errors.extend(resolver.errors)
            return None

    def _fail(self, errors: list[GustError]) -> NoReturn:
        error: GustError = errors[0] if len(errors) == 1 else BuildError(errors)
        for problem in errors:
            logger.error("Build error: %s", problem)
        self.event_bus.emit(events.BuildFailed(error=str(error)))
        raise error


def build(
    config: ConfigInput,
    *,
    cwd: Path | None = None,
    event_bus: EventBus | None = None,
    max_workers: int | None = None,
) -> BuildResult:
    """Build a stylesheet from *config*: a ``Config``, a raw mapping or a config file path."""
    return Builder(config, cwd=cwd, event_bus=event_bus, max_workers=max_workers).build()
