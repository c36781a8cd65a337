"""gust: utility-class stylesheet generator."""
from __future__ import annotations

__version__ = "0.1.0"

# Errors
from gust.errors import (
    BuildError,
    ConfigError,
    CyclicThemeReferenceError,
    GlobPatternError,
    GustError,
    PluginLoadError,
)

# Model
from gust.model import (
    CompiledStylesheet,
    Config,
    CssRule,
    Diagnostic,
    RawContent,
    Severity,
    Theme,
    TypedValue,
)

# Events
from gust.events import EventBus

# Configuration and theme
from gust.config import load_config, resolve_config
from gust.theme import DEFAULT_THEME, resolve_theme

# Plugins
from gust.plugins import Plugin, PluginAPI, PluginHost, plugin
from gust.plugins.core import CorePlugin
from gust.plugins.typography import TypographyPlugin

# Pipeline
from gust.content import ContentScanner, extract_candidates
from gust.emit import Purger, serialize
from gust.engine import BuildResult, Builder, build

__all__ = [
    "__version__",
    # errors
    "BuildError",
    "ConfigError",
    "CyclicThemeReferenceError",
    "GlobPatternError",
    "GustError",
    "PluginLoadError",
    # model
    "CompiledStylesheet",
    "Config",
    "CssRule",
    "Diagnostic",
    "RawContent",
    "Severity",
    "Theme",
    "TypedValue",
    "EventBus",
    # config and theme
    "DEFAULT_THEME",
    "load_config",
    "resolve_config",
    "resolve_theme",
    # plugins
    "CorePlugin",
    "Plugin",
    "PluginAPI",
    "PluginHost",
    "TypographyPlugin",
    "plugin",
    # pipeline
    "BuildResult",
    "Builder",
    "ContentScanner",
    "Purger",
    "build",
    "extract_candidates",
    "serialize",
]
