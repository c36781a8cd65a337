"""gust model layer -- public type re-exports."""

from gust.model.candidate import ClassCandidate
from gust.model.config import Config, RawContent
from gust.model.diagnostic import Diagnostic, Severity
from gust.model.stylesheet import CompiledStylesheet, CssRule
from gust.model.theme import Provenance, Theme, ThemeToken
from gust.model.utility import CssObject, RuleContext, TypedValue, UtilityDefinition, Variant

__all__ = [
    # config
    "Config",
    "RawContent",
    # candidate
    "ClassCandidate",
    # theme
    "Provenance",
    "Theme",
    "ThemeToken",
    # registry
    "CssObject",
    "RuleContext",
    "TypedValue",
    "UtilityDefinition",
    "Variant",
    # output
    "CssRule",
    "CompiledStylesheet",
    # diagnostic
    "Severity",
    "Diagnostic",
]
