"""Typographic defaults for prose content: ``prose``, ``prose-lg``, ``prose-invert``.

Each modifier is a CSS object keyed by ``:where(...)`` element selectors.
Projects can adjust any modifier through the ``typography`` theme key::

    theme = {"extend": {"typography": {"DEFAULT": {"css": {"max-width": "none"}}}}}
"""

from __future__ import annotations

from typing import Any, Mapping

from gust.model.theme import Theme
from gust.plugins.host import PluginAPI
from gust.theme.resolver import deep_merge

__all__ = ["TypographyPlugin", "plugin"]


def _colors(theme: Theme, *, invert: bool = False) -> dict[str, str]:
    def gray(step: str) -> str:
        return theme(f"colors.gray.{step}", "currentColor")

    names = {
        "body": ("700", "300"),
        "headings": ("900", "50"),
        "lead": ("600", "400"),
        "links": ("900", "50"),
        "bold": ("900", "50"),
        "counters": ("500", "400"),
        "bullets": ("300", "600"),
        "hr": ("200", "700"),
        "quotes": ("900", "100"),
        "code": ("900", "50"),
        "pre-code": ("200", "300"),
        "pre-bg": ("800", "900"),
    }
    prefix = "--tw-prose-invert-" if invert else "--tw-prose-"
    return {f"{prefix}{key}": gray(dark if invert else light) for key, (light, dark) in names.items()}


def _base(theme: Theme) -> dict[str, Any]:
    css: dict[str, Any] = {
        "color": "var(--tw-prose-body)",
        "max-width": "65ch",
    }
    css.update(_colors(theme))
    css.update(_colors(theme, invert=True))
    css.update({
        "& :where(p)": {"margin-top": "1.25em", "margin-bottom": "1.25em"},
        "& :where(a)": {
            "color": "var(--tw-prose-links)",
            "text-decoration": "underline",
            "font-weight": "500",
        },
        "& :where(strong)": {"color": "var(--tw-prose-bold)", "font-weight": "600"},
        "& :where(ol)": {"list-style-type": "decimal", "padding-left": "1.625em"},
        "& :where(ul)": {"list-style-type": "disc", "padding-left": "1.625em"},
        "& :where(ol > li)::marker": {"color": "var(--tw-prose-counters)"},
        "& :where(ul > li)::marker": {"color": "var(--tw-prose-bullets)"},
        "& :where(hr)": {
            "border-color": "var(--tw-prose-hr)",
            "border-top-width": "1px",
            "margin-top": "3em",
            "margin-bottom": "3em",
        },
        "& :where(blockquote)": {
            "font-weight": "500",
            "font-style": "italic",
            "color": "var(--tw-prose-quotes)",
            "border-left-width": "0.25rem",
            "padding-left": "1em",
        },
        "& :where(h1)": {
            "color": "var(--tw-prose-headings)",
            "font-weight": "800",
            "font-size": "2.25em",
            "margin-top": "0",
            "margin-bottom": "0.8888889em",
            "line-height": "1.1111111",
        },
        "& :where(h2)": {
            "color": "var(--tw-prose-headings)",
            "font-weight": "700",
            "font-size": "1.5em",
            "margin-top": "2em",
            "margin-bottom": "1em",
            "line-height": "1.3333333",
        },
        "& :where(h3)": {
            "color": "var(--tw-prose-headings)",
            "font-weight": "600",
            "font-size": "1.25em",
            "margin-top": "1.6em",
            "margin-bottom": "0.6em",
            "line-height": "1.6",
        },
        "& :where(code)": {
            "color": "var(--tw-prose-code)",
            "font-weight": "600",
            "font-size": "0.875em",
        },
        "& :where(pre)": {
            "color": "var(--tw-prose-pre-code)",
            "background-color": "var(--tw-prose-pre-bg)",
            "overflow-x": "auto",
            "font-size": "0.875em",
            "line-height": "1.7142857",
            "border-radius": "0.375rem",
            "padding": "0.8571429em 1.1428571em",
        },
        "& :where(img)": {"margin-top": "2em", "margin-bottom": "2em"},
    })
    return css


_SIZES: dict[str, dict[str, str]] = {
    "sm": {"font-size": "0.875rem", "line-height": "1.7142857"},
    "base": {"font-size": "1rem", "line-height": "1.75"},
    "lg": {"font-size": "1.125rem", "line-height": "1.7777778"},
    "xl": {"font-size": "1.25rem", "line-height": "1.8"},
    "2xl": {"font-size": "1.5rem", "line-height": "1.6666667"},
}

_INVERT = {
    f"--tw-prose-{key}": f"var(--tw-prose-invert-{key})"
    for key in (
        "body", "headings", "lead", "links", "bold", "counters",
        "bullets", "hr", "quotes", "code", "pre-code", "pre-bg",
    )
}


class TypographyPlugin:
    """Registers ``prose`` and its size and color modifiers."""

    name = "typography"

    def __init__(self, class_name: str = "prose") -> None:
        self.class_name = class_name

    def register_variants(self, api: PluginAPI, theme: Theme) -> None:
        return None

    def register_utilities(self, api: PluginAPI, theme: Theme) -> None:
        overrides: Mapping[str, Any] = theme("typography", {})
        modifiers: dict[str, dict[str, Any]] = {"DEFAULT": _base(theme)}
        modifiers.update({size: dict(css) for size, css in _SIZES.items()})
        modifiers["invert"] = dict(_INVERT)

        for key, extra in overrides.items():
            css = extra.get("css", {}) if isinstance(extra, Mapping) else {}
            modifiers[key] = deep_merge(modifiers.get(key, {}), css)

        api.add_utilities({
            self.class_name if key == "DEFAULT" else f"{self.class_name}-{key}": css
            for key, css in modifiers.items()
        })


plugin = TypographyPlugin()
