"""The built-in utility and variant set.

Core is loaded before any configured plugin through the same ``PluginAPI``
as everyone else, so a user plugin can replace any name registered here.
Registration order in this module is the emission order of the output.
"""

from __future__ import annotations

from typing import Any, Callable, Mapping

from gust.model.theme import Theme
from gust.model.utility import CssObject, TypedValue
from gust.plugins.host import PluginAPI
from gust.theme.colors import HEX_RE, flatten_colors, with_alpha

__all__ = ["CorePlugin", "PSEUDO_CLASSES", "PSEUDO_ELEMENTS", "plugin"]

# Variant name -> selector suffix appended to the class.
PSEUDO_CLASSES: dict[str, str] = {
    "first": ":first-child",
    "last": ":last-child",
    "only": ":only-child",
    "odd": ":nth-child(odd)",
    "even": ":nth-child(even)",
    "first-of-type": ":first-of-type",
    "last-of-type": ":last-of-type",
    "only-of-type": ":only-of-type",
    "visited": ":visited",
    "target": ":target",
    "open": "[open]",
    "default": ":default",
    "checked": ":checked",
    "indeterminate": ":indeterminate",
    "placeholder-shown": ":placeholder-shown",
    "autofill": ":autofill",
    "optional": ":optional",
    "required": ":required",
    "valid": ":valid",
    "invalid": ":invalid",
    "in-range": ":in-range",
    "out-of-range": ":out-of-range",
    "read-only": ":read-only",
    "empty": ":empty",
    "focus-within": ":focus-within",
    "hover": ":hover",
    "focus": ":focus",
    "focus-visible": ":focus-visible",
    "active": ":active",
    "enabled": ":enabled",
    "disabled": ":disabled",
}

PSEUDO_ELEMENTS: dict[str, str] = {
    "first-letter": "::first-letter",
    "first-line": "::first-line",
    "marker": "::marker",
    "selection": "::selection",
    "file": "::file-selector-button",
    "placeholder": "::placeholder",
    "backdrop": "::backdrop",
    "before": "::before",
    "after": "::after",
}

_HIDDEN_SIBLING = "& > :not([hidden]) ~ :not([hidden])"


def _typed(kind: str, values: Mapping[str, Any]) -> dict[str, TypedValue]:
    return {key: TypedValue(kind, value) for key, value in values.items()}


def _palette(theme: Theme, key: str) -> dict[str, Any]:
    """Flattened colors for a theme key, without the bare ``DEFAULT`` entry."""
    flat = flatten_colors(theme(key, {}))
    flat.pop("DEFAULT", None)
    return flat


def _match_typed(
    api: PluginAPI,
    name: str,
    handlers: Mapping[str, Callable[[Any], CssObject]],
    *tables: tuple[str, Mapping[str, Any]],
) -> None:
    """Register one utility whose values carry a kind tag.

    The first handler is the fallback for arbitrary values of unknown kind.
    Later tables win on key collision.
    """
    values: dict[str, TypedValue] = {}
    for kind, table in tables:
        values.update(_typed(kind, table))

    def template(value: TypedValue) -> CssObject:
        return handlers[value.kind](value.value)

    api.match_utilities({name: template}, values=values, type="|".join(handlers))


def _screens(theme: Theme) -> list[tuple[str, str]]:
    screens: list[tuple[str, str]] = []
    for name, value in theme("screens", {}).items():
        if isinstance(value, Mapping):
            value = value.get("min") or value.get("max")
        if value:
            screens.append((name, str(value)))
    return screens


def _transparent(color: str) -> str:
    if HEX_RE.match(color):
        return with_alpha(color, "0") or "transparent"
    return "transparent"


class CorePlugin:
    """Layout, spacing, sizing, typography, color and effect utilities."""

    name = "core"

    # ---- variants ------------------------------------------------------------

    def register_variants(self, api: PluginAPI, theme: Theme) -> None:
        for name, suffix in PSEUDO_CLASSES.items():
            api.add_variant(name, "&" + suffix)

        api.match_variant("group", lambda v: f".group{v} &", values=PSEUDO_CLASSES)
        api.match_variant("peer", lambda v: f".peer{v} ~ &", values=PSEUDO_CLASSES)

        for name, suffix in PSEUDO_ELEMENTS.items():
            api.add_variant(name, "&" + suffix)

        api.match_variant("aria", lambda v: f"&[aria-{v}]", values=theme("aria", {}))
        api.match_variant("data", lambda v: f"&[data-{v}]", values=theme("data", {}))
        api.match_variant(
            "supports",
            lambda v: f"@supports ({v})" if ":" in v else f"@supports ({v}: var(--tw))",
            values=theme("supports", {}),
        )

        api.add_variant("motion-safe", "@media (prefers-reduced-motion: no-preference)")
        api.add_variant("motion-reduce", "@media (prefers-reduced-motion: reduce)")
        api.add_variant("contrast-more", "@media (prefers-contrast: more)")
        api.add_variant("contrast-less", "@media (prefers-contrast: less)")
        api.add_variant("ltr", '&:where([dir="ltr"], [dir="ltr"] *)')
        api.add_variant("rtl", '&:where([dir="rtl"], [dir="rtl"] *)')

        dark_mode = api.config.dark_mode if api.config is not None else "media"
        if dark_mode == "class":
            api.add_variant("dark", ":is(.dark &)")
        else:
            api.add_variant("dark", "@media (prefers-color-scheme: dark)")

        api.add_variant("print", "@media print")
        api.add_variant("portrait", "@media (orientation: portrait)")
        api.add_variant("landscape", "@media (orientation: landscape)")

        screens = _screens(theme)
        for name, size in reversed(screens):
            api.add_variant(f"max-{name}", f"@media not all and (min-width: {size})")
        for name, size in screens:
            api.add_variant(name, f"@media (min-width: {size})")

    # ---- utilities -----------------------------------------------------------

    def register_utilities(self, api: PluginAPI, theme: Theme) -> None:
        self._accessibility(api)
        self._layout(api, theme)
        self._flexbox_grid(api, theme)
        self._spacing(api, theme)
        self._sizing(api, theme)
        self._typography(api, theme)
        self._backgrounds(api, theme)
        self._borders(api, theme)
        self._effects(api, theme)
        self._transitions(api, theme)
        self._transforms(api, theme)
        self._interactivity(api, theme)
        self._svg(api, theme)

    def _accessibility(self, api: PluginAPI) -> None:
        api.add_utilities({
            "sr-only": {
                "position": "absolute",
                "width": "1px",
                "height": "1px",
                "padding": "0",
                "margin": "-1px",
                "overflow": "hidden",
                "clip": "rect(0, 0, 0, 0)",
                "white-space": "nowrap",
                "border-width": "0",
            },
            "not-sr-only": {
                "position": "static",
                "width": "auto",
                "height": "auto",
                "padding": "0",
                "margin": "0",
                "overflow": "visible",
                "clip": "auto",
                "white-space": "normal",
            },
        })

    def _layout(self, api: PluginAPI, theme: Theme) -> None:
        container: dict[str, Any] = {"width": "100%"}
        for _, size in _screens(theme):
            container[f"@media (min-width: {size})"] = {"max-width": size}
        api.add_utilities({"container": container})

        api.add_utilities({
            "box-border": {"box-sizing": "border-box"},
            "box-content": {"box-sizing": "content-box"},
            "block": {"display": "block"},
            "inline-block": {"display": "inline-block"},
            "inline": {"display": "inline"},
            "flex": {"display": "flex"},
            "inline-flex": {"display": "inline-flex"},
            "table": {"display": "table"},
            "table-row": {"display": "table-row"},
            "table-cell": {"display": "table-cell"},
            "flow-root": {"display": "flow-root"},
            "grid": {"display": "grid"},
            "inline-grid": {"display": "inline-grid"},
            "contents": {"display": "contents"},
            "list-item": {"display": "list-item"},
            "hidden": {"display": "none"},
        })
        api.add_utilities({
            f"object-{fit}": {"object-fit": fit}
            for fit in ("contain", "cover", "fill", "none", "scale-down")
        })
        for prefix, prop in (("overflow", "overflow"), ("overflow-x", "overflow-x"), ("overflow-y", "overflow-y")):
            api.add_utilities({
                f"{prefix}-{mode}": {prop: mode}
                for mode in ("auto", "hidden", "clip", "visible", "scroll")
            })
        api.add_utilities({
            position: {"position": position}
            for position in ("static", "fixed", "absolute", "relative", "sticky")
        })

        inset = theme("inset", {})
        api.match_utilities(
            {
                "inset": lambda v: {"inset": v},
                "inset-x": lambda v: {"left": v, "right": v},
                "inset-y": lambda v: {"top": v, "bottom": v},
                "start": lambda v: {"inset-inline-start": v},
                "end": lambda v: {"inset-inline-end": v},
                "top": lambda v: {"top": v},
                "right": lambda v: {"right": v},
                "bottom": lambda v: {"bottom": v},
                "left": lambda v: {"left": v},
            },
            values=inset,
            supports_negative=True,
        )
        api.add_utilities({
            "visible": {"visibility": "visible"},
            "invisible": {"visibility": "hidden"},
            "collapse": {"visibility": "collapse"},
        })
        api.match_utilities(
            {"z": lambda v: {"z-index": v}},
            values=theme("zIndex", {}),
            supports_negative=True,
        )

    def _flexbox_grid(self, api: PluginAPI, theme: Theme) -> None:
        api.match_utilities(
            {"order": lambda v: {"order": v}},
            values=theme("order", {}),
            supports_negative=True,
        )
        api.match_utilities(
            {"grid-cols": lambda v: {"grid-template-columns": v}},
            values=theme("gridTemplateColumns", {}),
        )
        api.match_utilities(
            {"grid-rows": lambda v: {"grid-template-rows": v}},
            values=theme("gridTemplateRows", {}),
        )
        api.match_utilities({"col": lambda v: {"grid-column": v}}, values=theme("gridColumn", {}))
        api.add_utilities({
            "flex-row": {"flex-direction": "row"},
            "flex-row-reverse": {"flex-direction": "row-reverse"},
            "flex-col": {"flex-direction": "column"},
            "flex-col-reverse": {"flex-direction": "column-reverse"},
            "flex-wrap": {"flex-wrap": "wrap"},
            "flex-wrap-reverse": {"flex-wrap": "wrap-reverse"},
            "flex-nowrap": {"flex-wrap": "nowrap"},
        })
        api.match_utilities({"flex": lambda v: {"flex": v}}, values=theme("flex", {}))
        api.match_utilities({"grow": lambda v: {"flex-grow": v}}, values=theme("flexGrow", {}))
        api.match_utilities({"shrink": lambda v: {"flex-shrink": v}}, values=theme("flexShrink", {}))

        api.add_utilities({
            f"justify-{key}": {"justify-content": value}
            for key, value in (
                ("normal", "normal"),
                ("start", "flex-start"),
                ("end", "flex-end"),
                ("center", "center"),
                ("between", "space-between"),
                ("around", "space-around"),
                ("evenly", "space-evenly"),
                ("stretch", "stretch"),
            )
        })
        api.add_utilities({
            f"justify-items-{key}": {"justify-items": key}
            for key in ("start", "end", "center", "stretch")
        })
        api.add_utilities({
            f"content-{key}": {"align-content": value}
            for key, value in (
                ("center", "center"),
                ("start", "flex-start"),
                ("end", "flex-end"),
                ("between", "space-between"),
                ("around", "space-around"),
                ("evenly", "space-evenly"),
            )
        })
        api.add_utilities({
            f"items-{key}": {"align-items": value}
            for key, value in (
                ("start", "flex-start"),
                ("end", "flex-end"),
                ("center", "center"),
                ("baseline", "baseline"),
                ("stretch", "stretch"),
            )
        })
        api.add_utilities({
            f"self-{key}": {"align-self": value}
            for key, value in (
                ("auto", "auto"),
                ("start", "flex-start"),
                ("end", "flex-end"),
                ("center", "center"),
                ("stretch", "stretch"),
                ("baseline", "baseline"),
            )
        })
        api.add_utilities({
            f"place-items-{key}": {"place-items": key}
            for key in ("start", "end", "center", "baseline", "stretch")
        })

        api.match_utilities(
            {
                "gap": lambda v: {"gap": v},
                "gap-x": lambda v: {"column-gap": v},
                "gap-y": lambda v: {"row-gap": v},
            },
            values=theme("gap", {}),
        )

    def _spacing(self, api: PluginAPI, theme: Theme) -> None:
        api.match_utilities(
            {
                "space-x": lambda v: {_HIDDEN_SIBLING: {"margin-left": v}},
                "space-y": lambda v: {_HIDDEN_SIBLING: {"margin-top": v}},
            },
            values=theme("space", {}),
            supports_negative=True,
        )
        api.match_utilities(
            {
                "p": lambda v: {"padding": v},
                "px": lambda v: {"padding-left": v, "padding-right": v},
                "py": lambda v: {"padding-top": v, "padding-bottom": v},
                "ps": lambda v: {"padding-inline-start": v},
                "pe": lambda v: {"padding-inline-end": v},
                "pt": lambda v: {"padding-top": v},
                "pr": lambda v: {"padding-right": v},
                "pb": lambda v: {"padding-bottom": v},
                "pl": lambda v: {"padding-left": v},
            },
            values=theme("padding", {}),
        )
        api.match_utilities(
            {
                "m": lambda v: {"margin": v},
                "mx": lambda v: {"margin-left": v, "margin-right": v},
                "my": lambda v: {"margin-top": v, "margin-bottom": v},
                "ms": lambda v: {"margin-inline-start": v},
                "me": lambda v: {"margin-inline-end": v},
                "mt": lambda v: {"margin-top": v},
                "mr": lambda v: {"margin-right": v},
                "mb": lambda v: {"margin-bottom": v},
                "ml": lambda v: {"margin-left": v},
            },
            values=theme("margin", {}),
            supports_negative=True,
        )

    def _sizing(self, api: PluginAPI, theme: Theme) -> None:
        api.match_utilities({"size": lambda v: {"width": v, "height": v}}, values=theme("spacing", {}))
        api.match_utilities({"w": lambda v: {"width": v}}, values=theme("width", {}))
        api.match_utilities({"min-w": lambda v: {"min-width": v}}, values=theme("minWidth", {}))
        api.match_utilities({"max-w": lambda v: {"max-width": v}}, values=theme("maxWidth", {}))
        api.match_utilities({"h": lambda v: {"height": v}}, values=theme("height", {}))
        api.match_utilities({"min-h": lambda v: {"min-height": v}}, values=theme("minHeight", {}))
        api.match_utilities({"max-h": lambda v: {"max-height": v}}, values=theme("maxHeight", {}))

    def _typography(self, api: PluginAPI, theme: Theme) -> None:
        def font_size(value: Any) -> CssObject:
            if isinstance(value, (list, tuple)):
                size, extra = value[0], value[1] if len(value) > 1 else {}
                css: dict[str, Any] = {"font-size": size}
                if isinstance(extra, Mapping):
                    if "lineHeight" in extra:
                        css["line-height"] = extra["lineHeight"]
                    if "letterSpacing" in extra:
                        css["letter-spacing"] = extra["letterSpacing"]
                    if "fontWeight" in extra:
                        css["font-weight"] = extra["fontWeight"]
                elif extra:
                    css["line-height"] = extra
                return css
            return {"font-size": value}

        def font_family(value: Any) -> CssObject:
            if isinstance(value, (list, tuple)):
                value = ", ".join(value)
            return {"font-family": value}

        _match_typed(
            api,
            "font",
            {"number": lambda v: {"font-weight": v}, "family-name": font_family},
            ("family-name", theme("fontFamily", {})),
            ("number", theme("fontWeight", {})),
        )
        api.add_utilities({
            "italic": {"font-style": "italic"},
            "not-italic": {"font-style": "normal"},
            "antialiased": {
                "-webkit-font-smoothing": "antialiased",
                "-moz-osx-font-smoothing": "grayscale",
            },
        })
        api.match_utilities(
            {"tracking": lambda v: {"letter-spacing": v}},
            values=theme("letterSpacing", {}),
            supports_negative=True,
        )
        api.match_utilities({"leading": lambda v: {"line-height": v}}, values=theme("lineHeight", {}))
        api.add_utilities({
            f"text-{align}": {"text-align": align}
            for align in ("left", "center", "right", "justify", "start", "end")
        })
        _match_typed(
            api,
            "text",
            {"color": lambda v: {"color": v}, "length": font_size},
            ("color", _palette(theme, "textColor")),
            ("length", theme("fontSize", {})),
        )
        api.add_utilities({
            "underline": {"text-decoration-line": "underline"},
            "overline": {"text-decoration-line": "overline"},
            "line-through": {"text-decoration-line": "line-through"},
            "no-underline": {"text-decoration-line": "none"},
            "uppercase": {"text-transform": "uppercase"},
            "lowercase": {"text-transform": "lowercase"},
            "capitalize": {"text-transform": "capitalize"},
            "normal-case": {"text-transform": "none"},
            "truncate": {"overflow": "hidden", "text-overflow": "ellipsis", "white-space": "nowrap"},
            "text-ellipsis": {"text-overflow": "ellipsis"},
            "text-clip": {"text-overflow": "clip"},
            "align-baseline": {"vertical-align": "baseline"},
            "align-top": {"vertical-align": "top"},
            "align-middle": {"vertical-align": "middle"},
            "align-bottom": {"vertical-align": "bottom"},
            "whitespace-normal": {"white-space": "normal"},
            "whitespace-nowrap": {"white-space": "nowrap"},
            "whitespace-pre": {"white-space": "pre"},
            "whitespace-pre-line": {"white-space": "pre-line"},
            "whitespace-pre-wrap": {"white-space": "pre-wrap"},
            "break-normal": {"overflow-wrap": "normal", "word-break": "normal"},
            "break-words": {"overflow-wrap": "break-word"},
            "break-all": {"word-break": "break-all"},
        })

    def _backgrounds(self, api: PluginAPI, theme: Theme) -> None:
        api.add_utilities({
            "bg-fixed": {"background-attachment": "fixed"},
            "bg-local": {"background-attachment": "local"},
            "bg-scroll": {"background-attachment": "scroll"},
            "bg-repeat": {"background-repeat": "repeat"},
            "bg-no-repeat": {"background-repeat": "no-repeat"},
            "bg-repeat-x": {"background-repeat": "repeat-x"},
            "bg-repeat-y": {"background-repeat": "repeat-y"},
        })
        _match_typed(
            api,
            "bg",
            {
                "color": lambda v: {"background-color": v},
                "image": lambda v: {"background-image": v},
                "url": lambda v: {"background-image": v},
                "size": lambda v: {"background-size": v},
                "position": lambda v: {"background-position": v},
            },
            ("color", _palette(theme, "backgroundColor")),
            ("image", theme("backgroundImage", {})),
            ("size", theme("backgroundSize", {})),
            ("position", theme("backgroundPosition", {})),
        )

        stops = _palette(theme, "gradientColorStops")
        positions = theme("gradientColorStopPositions", {})
        _match_typed(
            api,
            "from",
            {
                "color": lambda c: {
                    "--tw-gradient-from": f"{c} var(--tw-gradient-from-position)",
                    "--tw-gradient-to": f"{_transparent(c)} var(--tw-gradient-to-position)",
                    "--tw-gradient-stops": "var(--tw-gradient-from), var(--tw-gradient-to)",
                },
                "percentage": lambda p: {"--tw-gradient-from-position": p},
            },
            ("color", stops),
            ("percentage", positions),
        )
        _match_typed(
            api,
            "via",
            {
                "color": lambda c: {
                    "--tw-gradient-to": f"{_transparent(c)} var(--tw-gradient-to-position)",
                    "--tw-gradient-stops": (
                        f"var(--tw-gradient-from), {c} var(--tw-gradient-via-position), var(--tw-gradient-to)"
                    ),
                },
                "percentage": lambda p: {"--tw-gradient-via-position": p},
            },
            ("color", stops),
            ("percentage", positions),
        )
        _match_typed(
            api,
            "to",
            {
                "color": lambda c: {"--tw-gradient-to": f"{c} var(--tw-gradient-to-position)"},
                "percentage": lambda p: {"--tw-gradient-to-position": p},
            },
            ("color", stops),
            ("percentage", positions),
        )

    def _borders(self, api: PluginAPI, theme: Theme) -> None:
        api.match_utilities(
            {
                "rounded": lambda v: {"border-radius": v},
                "rounded-t": lambda v: {"border-top-left-radius": v, "border-top-right-radius": v},
                "rounded-r": lambda v: {"border-top-right-radius": v, "border-bottom-right-radius": v},
                "rounded-b": lambda v: {"border-bottom-right-radius": v, "border-bottom-left-radius": v},
                "rounded-l": lambda v: {"border-top-left-radius": v, "border-bottom-left-radius": v},
                "rounded-tl": lambda v: {"border-top-left-radius": v},
                "rounded-tr": lambda v: {"border-top-right-radius": v},
                "rounded-br": lambda v: {"border-bottom-right-radius": v},
                "rounded-bl": lambda v: {"border-bottom-left-radius": v},
            },
            values=theme("borderRadius", {}),
        )

        colors = _palette(theme, "borderColor")
        widths = theme("borderWidth", {})
        sides: dict[str, tuple[str, ...]] = {
            "": ("",),
            "-x": ("-left", "-right"),
            "-y": ("-top", "-bottom"),
            "-t": ("-top",),
            "-r": ("-right",),
            "-b": ("-bottom",),
            "-l": ("-left",),
        }
        for suffix, props in sides.items():
            _match_typed(
                api,
                f"border{suffix}",
                {
                    "length": lambda v, props=props: {f"border{p}-width": v for p in props},
                    "color": lambda v, props=props: {f"border{p}-color": v for p in props},
                },
                ("color", colors),
                ("length", widths),
            )
        api.add_utilities({
            f"border-{style}": {"border-style": style}
            for style in ("solid", "dashed", "dotted", "double", "hidden", "none")
        })

    def _effects(self, api: PluginAPI, theme: Theme) -> None:
        api.match_utilities({"shadow": lambda v: {"box-shadow": v}}, values=theme("boxShadow", {}))
        api.match_utilities({"opacity": lambda v: {"opacity": v}}, values=theme("opacity", {}))
        _match_typed(
            api,
            "ring",
            {
                "length": lambda w: {
                    "--tw-ring-shadow": f"0 0 0 {w} var(--tw-ring-color, currentColor)",
                    "box-shadow": "var(--tw-ring-shadow)",
                },
                "color": lambda c: {"--tw-ring-color": c},
            },
            ("color", _palette(theme, "ringColor")),
            ("length", theme("ringWidth", {})),
        )
        api.add_utilities({
            "outline-none": {"outline": "2px solid transparent", "outline-offset": "2px"},
            "outline": {"outline-style": "solid"},
        })

    def _transitions(self, api: PluginAPI, theme: Theme) -> None:
        timing = theme("transitionTimingFunction.DEFAULT", "cubic-bezier(0.4, 0, 0.2, 1)")
        duration = theme("transitionDuration.DEFAULT", "150ms")
        api.match_utilities(
            {
                "transition": lambda v: {
                    "transition-property": v,
                    "transition-timing-function": timing,
                    "transition-duration": duration,
                },
            },
            values=theme("transitionProperty", {}),
        )
        api.match_utilities(
            {"duration": lambda v: {"transition-duration": v}},
            values={k: v for k, v in theme("transitionDuration", {}).items() if k != "DEFAULT"},
        )
        api.match_utilities(
            {"delay": lambda v: {"transition-delay": v}},
            values={k: v for k, v in theme("transitionDuration", {}).items() if k != "DEFAULT"},
        )
        api.match_utilities(
            {"ease": lambda v: {"transition-timing-function": v}},
            values={k: v for k, v in theme("transitionTimingFunction", {}).items() if k != "DEFAULT"},
        )

    def _transforms(self, api: PluginAPI, theme: Theme) -> None:
        api.match_utilities({"scale": lambda v: {"scale": v}}, values=theme("scale", {}))
        api.match_utilities(
            {"rotate": lambda v: {"rotate": v}},
            values=theme("rotate", {}),
            supports_negative=True,
        )
        api.match_utilities(
            {
                "translate-x": lambda v: {
                    "--tw-translate-x": v,
                    "translate": "var(--tw-translate-x) var(--tw-translate-y, 0)",
                },
                "translate-y": lambda v: {
                    "--tw-translate-y": v,
                    "translate": "var(--tw-translate-x, 0) var(--tw-translate-y)",
                },
            },
            values=theme("translate", {}),
            supports_negative=True,
        )

    def _interactivity(self, api: PluginAPI, theme: Theme) -> None:
        api.match_utilities({"cursor": lambda v: {"cursor": v}}, values=theme("cursor", {}))
        api.add_utilities({
            f"select-{mode}": {"user-select": mode}
            for mode in ("none", "text", "all", "auto")
        })
        api.add_utilities({
            "pointer-events-none": {"pointer-events": "none"},
            "pointer-events-auto": {"pointer-events": "auto"},
            "resize-none": {"resize": "none"},
            "resize": {"resize": "both"},
            "scroll-smooth": {"scroll-behavior": "smooth"},
        })

    def _svg(self, api: PluginAPI, theme: Theme) -> None:
        api.match_utilities(
            {"fill": lambda v: {"fill": v}},
            values=flatten_colors(theme("fill", {})),
            type="color",
        )
        _match_typed(
            api,
            "stroke",
            {"color": lambda v: {"stroke": v}, "number": lambda v: {"stroke-width": v}},
            ("color", _palette(theme, "stroke")),
            ("number", theme("strokeWidth", {})),
        )


plugin = CorePlugin()
