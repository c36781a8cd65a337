"""Built-in theme tokens.

Values that derive from other tokens are lazy: callables receiving the theme
accessor, evaluated by :class:`gust.theme.resolver.ThemeResolver`.
"""

from __future__ import annotations

from typing import Any

_SHADES = ("50", "100", "200", "300", "400", "500", "600", "700", "800", "900", "950")


def _scale(*hexes: str) -> dict[str, str]:
    return dict(zip(_SHADES, hexes))


COLORS: dict[str, Any] = {
    "inherit": "inherit",
    "current": "currentColor",
    "transparent": "transparent",
    "black": "#000",
    "white": "#fff",
    "slate": _scale("#f8fafc", "#f1f5f9", "#e2e8f0", "#cbd5e1", "#94a3b8", "#64748b", "#475569", "#334155", "#1e293b", "#0f172a", "#020617"),
    "gray": _scale("#f9fafb", "#f3f4f6", "#e5e7eb", "#d1d5db", "#9ca3af", "#6b7280", "#4b5563", "#374151", "#1f2937", "#111827", "#030712"),
    "zinc": _scale("#fafafa", "#f4f4f5", "#e4e4e7", "#d4d4d8", "#a1a1aa", "#71717a", "#52525b", "#3f3f46", "#27272a", "#18181b", "#09090b"),
    "neutral": _scale("#fafafa", "#f5f5f5", "#e5e5e5", "#d4d4d4", "#a3a3a3", "#737373", "#525252", "#404040", "#262626", "#171717", "#0a0a0a"),
    "stone": _scale("#fafaf9", "#f5f5f4", "#e7e5e4", "#d6d3d1", "#a8a29e", "#78716c", "#57534e", "#44403c", "#292524", "#1c1917", "#0c0a09"),
    "red": _scale("#fef2f2", "#fee2e2", "#fecaca", "#fca5a5", "#f87171", "#ef4444", "#dc2626", "#b91c1c", "#991b1b", "#7f1d1d", "#450a0a"),
    "orange": _scale("#fff7ed", "#ffedd5", "#fed7aa", "#fdba74", "#fb923c", "#f97316", "#ea580c", "#c2410c", "#9a3412", "#7c2d12", "#431407"),
    "amber": _scale("#fffbeb", "#fef3c7", "#fde68a", "#fcd34d", "#fbbf24", "#f59e0b", "#d97706", "#b45309", "#92400e", "#78350f", "#451a03"),
    "yellow": _scale("#fefce8", "#fef9c3", "#fef08a", "#fde047", "#facc15", "#eab308", "#ca8a04", "#a16207", "#854d0e", "#713f12", "#422006"),
    "green": _scale("#f0fdf4", "#dcfce7", "#bbf7d0", "#86efac", "#4ade80", "#22c55e", "#16a34a", "#15803d", "#166534", "#14532d", "#052e16"),
    "emerald": _scale("#ecfdf5", "#d1fae5", "#a7f3d0", "#6ee7b7", "#34d399", "#10b981", "#059669", "#047857", "#065f46", "#064e3b", "#022c22"),
    "teal": _scale("#f0fdfa", "#ccfbf1", "#99f6e4", "#5eead4", "#2dd4bf", "#14b8a6", "#0d9488", "#0f766e", "#115e59", "#134e4a", "#042f2e"),
    "cyan": _scale("#ecfeff", "#cffafe", "#a5f3fc", "#67e8f9", "#22d3ee", "#06b6d4", "#0891b2", "#0e7490", "#155e75", "#164e63", "#083344"),
    "sky": _scale("#f0f9ff", "#e0f2fe", "#bae6fd", "#7dd3fc", "#38bdf8", "#0ea5e9", "#0284c7", "#0369a1", "#075985", "#0c4a6e", "#082f49"),
    "blue": _scale("#eff6ff", "#dbeafe", "#bfdbfe", "#93c5fd", "#60a5fa", "#3b82f6", "#2563eb", "#1d4ed8", "#1e40af", "#1e3a8a", "#172554"),
    "indigo": _scale("#eef2ff", "#e0e7ff", "#c7d2fe", "#a5b4fc", "#818cf8", "#6366f1", "#4f46e5", "#4338ca", "#3730a3", "#312e81", "#1e1b4b"),
    "violet": _scale("#f5f3ff", "#ede9fe", "#ddd6fe", "#c4b5fd", "#a78bfa", "#8b5cf6", "#7c3aed", "#6d28d9", "#5b21b6", "#4c1d95", "#2e1065"),
    "purple": _scale("#faf5ff", "#f3e8ff", "#e9d5ff", "#d8b4fe", "#c084fc", "#a855f7", "#9333ea", "#7e22ce", "#6b21a8", "#581c87", "#3b0764"),
    "pink": _scale("#fdf2f8", "#fce7f3", "#fbcfe8", "#f9a8d4", "#f472b6", "#ec4899", "#db2777", "#be185d", "#9d174d", "#831843", "#500724"),
    "rose": _scale("#fff1f2", "#ffe4e6", "#fecdd3", "#fda4af", "#fb7185", "#f43f5e", "#e11d48", "#be123c", "#9f1239", "#881337", "#4c0519"),
}

SPACING: dict[str, str] = {
    "px": "1px",
    "0": "0px",
    "0.5": "0.125rem",
    "1": "0.25rem",
    "1.5": "0.375rem",
    "2": "0.5rem",
    "2.5": "0.625rem",
    "3": "0.75rem",
    "3.5": "0.875rem",
    "4": "1rem",
    "5": "1.25rem",
    "6": "1.5rem",
    "7": "1.75rem",
    "8": "2rem",
    "9": "2.25rem",
    "10": "2.5rem",
    "11": "2.75rem",
    "12": "3rem",
    "14": "3.5rem",
    "16": "4rem",
    "20": "5rem",
    "24": "6rem",
    "28": "7rem",
    "32": "8rem",
    "36": "9rem",
    "40": "10rem",
    "44": "11rem",
    "48": "12rem",
    "52": "13rem",
    "56": "14rem",
    "60": "15rem",
    "64": "16rem",
    "72": "18rem",
    "80": "20rem",
    "96": "24rem",
}

_FRACTIONS: dict[str, str] = {
    "1/2": "50%",
    "1/3": "33.333333%",
    "2/3": "66.666667%",
    "1/4": "25%",
    "2/4": "50%",
    "3/4": "75%",
    "1/5": "20%",
    "2/5": "40%",
    "3/5": "60%",
    "4/5": "80%",
    "1/6": "16.666667%",
    "5/6": "83.333333%",
    "full": "100%",
}

_PERCENT_STOPS = {f"{n}%": f"{n}%" for n in range(0, 101, 5)}


DEFAULT_THEME: dict[str, Any] = {
    "screens": {
        "sm": "640px",
        "md": "768px",
        "lg": "1024px",
        "xl": "1280px",
        "2xl": "1536px",
    },
    "supports": {},
    "aria": {
        "busy": 'busy="true"',
        "checked": 'checked="true"',
        "disabled": 'disabled="true"',
        "expanded": 'expanded="true"',
        "hidden": 'hidden="true"',
        "pressed": 'pressed="true"',
        "readonly": 'readonly="true"',
        "required": 'required="true"',
        "selected": 'selected="true"',
    },
    "data": {},
    "colors": COLORS,
    "spacing": SPACING,
    "inset": lambda theme: {"auto": "auto", **theme("spacing"), **_FRACTIONS},
    "margin": lambda theme: {"auto": "auto", **theme("spacing")},
    "padding": lambda theme: theme("spacing"),
    "gap": lambda theme: theme("spacing"),
    "space": lambda theme: theme("spacing"),
    "width": lambda theme: {
        "auto": "auto",
        **theme("spacing"),
        **_FRACTIONS,
        "screen": "100vw",
        "svw": "100svw",
        "min": "min-content",
        "max": "max-content",
        "fit": "fit-content",
    },
    "height": lambda theme: {
        "auto": "auto",
        **theme("spacing"),
        **_FRACTIONS,
        "screen": "100vh",
        "svh": "100svh",
        "min": "min-content",
        "max": "max-content",
        "fit": "fit-content",
    },
    "minWidth": {"0": "0px", "full": "100%", "min": "min-content", "max": "max-content", "fit": "fit-content"},
    "minHeight": {"0": "0px", "full": "100%", "screen": "100vh", "min": "min-content", "max": "max-content", "fit": "fit-content"},
    "maxWidth": lambda theme: {
        "none": "none",
        "xs": "20rem",
        "sm": "24rem",
        "md": "28rem",
        "lg": "32rem",
        "xl": "36rem",
        "2xl": "42rem",
        "3xl": "48rem",
        "4xl": "56rem",
        "5xl": "64rem",
        "6xl": "72rem",
        "7xl": "80rem",
        "full": "100%",
        "prose": "65ch",
        **{f"screen-{k}": v for k, v in theme("screens").items()},
    },
    "maxHeight": lambda theme: {**theme("spacing"), "none": "none", "full": "100%", "screen": "100vh"},
    "backgroundColor": lambda theme: theme("colors"),
    "textColor": lambda theme: theme("colors"),
    "borderColor": lambda theme: {**theme("colors"), "DEFAULT": theme("colors.gray.200", "currentColor")},
    "ringColor": lambda theme: {**theme("colors"), "DEFAULT": theme("colors.blue.500", "#3b82f6")},
    "gradientColorStops": lambda theme: theme("colors"),
    "gradientColorStopPositions": _PERCENT_STOPS,
    "fill": lambda theme: {"none": "none", **theme("colors")},
    "stroke": lambda theme: {"none": "none", **theme("colors")},
    "strokeWidth": {"0": "0", "1": "1", "2": "2"},
    "backgroundImage": {
        "none": "none",
        "gradient-to-t": "linear-gradient(to top, var(--tw-gradient-stops))",
        "gradient-to-tr": "linear-gradient(to top right, var(--tw-gradient-stops))",
        "gradient-to-r": "linear-gradient(to right, var(--tw-gradient-stops))",
        "gradient-to-br": "linear-gradient(to bottom right, var(--tw-gradient-stops))",
        "gradient-to-b": "linear-gradient(to bottom, var(--tw-gradient-stops))",
        "gradient-to-bl": "linear-gradient(to bottom left, var(--tw-gradient-stops))",
        "gradient-to-l": "linear-gradient(to left, var(--tw-gradient-stops))",
        "gradient-to-tl": "linear-gradient(to top left, var(--tw-gradient-stops))",
    },
    "backgroundSize": {"auto": "auto", "cover": "cover", "contain": "contain"},
    "backgroundPosition": {
        "bottom": "bottom",
        "center": "center",
        "left": "left",
        "right": "right",
        "top": "top",
    },
    "borderRadius": {
        "none": "0px",
        "sm": "0.125rem",
        "DEFAULT": "0.25rem",
        "md": "0.375rem",
        "lg": "0.5rem",
        "xl": "0.75rem",
        "2xl": "1rem",
        "3xl": "1.5rem",
        "full": "9999px",
    },
    "borderWidth": {"DEFAULT": "1px", "0": "0px", "2": "2px", "4": "4px", "8": "8px"},
    "ringWidth": {"DEFAULT": "3px", "0": "0px", "1": "1px", "2": "2px", "4": "4px", "8": "8px"},
    "boxShadow": {
        "sm": "0 1px 2px 0 rgb(0 0 0 / 0.05)",
        "DEFAULT": "0 1px 3px 0 rgb(0 0 0 / 0.1), 0 1px 2px -1px rgb(0 0 0 / 0.1)",
        "md": "0 4px 6px -1px rgb(0 0 0 / 0.1), 0 2px 4px -2px rgb(0 0 0 / 0.1)",
        "lg": "0 10px 15px -3px rgb(0 0 0 / 0.1), 0 4px 6px -4px rgb(0 0 0 / 0.1)",
        "xl": "0 20px 25px -5px rgb(0 0 0 / 0.1), 0 8px 10px -6px rgb(0 0 0 / 0.1)",
        "2xl": "0 25px 50px -12px rgb(0 0 0 / 0.25)",
        "inner": "inset 0 2px 4px 0 rgb(0 0 0 / 0.05)",
        "none": "none",
    },
    "fontFamily": {
        "sans": ["ui-sans-serif", "system-ui", "sans-serif"],
        "serif": ["ui-serif", "Georgia", "Cambria", '"Times New Roman"', "Times", "serif"],
        "mono": ["ui-monospace", "SFMono-Regular", "Menlo", "Monaco", "Consolas", "monospace"],
    },
    "fontSize": {
        "xs": ["0.75rem", {"lineHeight": "1rem"}],
        "sm": ["0.875rem", {"lineHeight": "1.25rem"}],
        "base": ["1rem", {"lineHeight": "1.5rem"}],
        "lg": ["1.125rem", {"lineHeight": "1.75rem"}],
        "xl": ["1.25rem", {"lineHeight": "1.75rem"}],
        "2xl": ["1.5rem", {"lineHeight": "2rem"}],
        "3xl": ["1.875rem", {"lineHeight": "2.25rem"}],
        "4xl": ["2.25rem", {"lineHeight": "2.5rem"}],
        "5xl": ["3rem", {"lineHeight": "1"}],
        "6xl": ["3.75rem", {"lineHeight": "1"}],
        "7xl": ["4.5rem", {"lineHeight": "1"}],
        "8xl": ["6rem", {"lineHeight": "1"}],
        "9xl": ["8rem", {"lineHeight": "1"}],
    },
    "fontWeight": {
        "thin": "100",
        "extralight": "200",
        "light": "300",
        "normal": "400",
        "medium": "500",
        "semibold": "600",
        "bold": "700",
        "extrabold": "800",
        "black": "900",
    },
    "lineHeight": {
        "none": "1",
        "tight": "1.25",
        "snug": "1.375",
        "normal": "1.5",
        "relaxed": "1.625",
        "loose": "2",
        "3": ".75rem",
        "4": "1rem",
        "5": "1.25rem",
        "6": "1.5rem",
        "7": "1.75rem",
        "8": "2rem",
        "9": "2.25rem",
        "10": "2.5rem",
    },
    "letterSpacing": {
        "tighter": "-0.05em",
        "tight": "-0.025em",
        "normal": "0em",
        "wide": "0.025em",
        "wider": "0.05em",
        "widest": "0.1em",
    },
    "opacity": {str(n): str(n / 100).rstrip("0").rstrip(".") if n % 100 else str(n // 100) for n in (0, 5, 10, 15, 20, 25, 30, 40, 50, 60, 70, 75, 80, 90, 95, 100)},
    "zIndex": {"auto": "auto", "0": "0", "10": "10", "20": "20", "30": "30", "40": "40", "50": "50"},
    "order": {
        "first": "-9999",
        "last": "9999",
        "none": "0",
        **{str(n): str(n) for n in range(1, 13)},
    },
    "flex": {"1": "1 1 0%", "auto": "1 1 auto", "initial": "0 1 auto", "none": "none"},
    "flexGrow": {"0": "0", "DEFAULT": "1"},
    "flexShrink": {"0": "0", "DEFAULT": "1"},
    "gridTemplateColumns": {
        "none": "none",
        "subgrid": "subgrid",
        **{str(n): f"repeat({n}, minmax(0, 1fr))" for n in range(1, 13)},
    },
    "gridTemplateRows": {
        "none": "none",
        "subgrid": "subgrid",
        **{str(n): f"repeat({n}, minmax(0, 1fr))" for n in range(1, 13)},
    },
    "gridColumn": {
        "auto": "auto",
        "span-full": "1 / -1",
        **{f"span-{n}": f"span {n} / span {n}" for n in range(1, 13)},
    },
    "scale": {
        "0": "0",
        "50": ".5",
        "75": ".75",
        "90": ".9",
        "95": ".95",
        "100": "1",
        "105": "1.05",
        "110": "1.1",
        "125": "1.25",
        "150": "1.5",
    },
    "rotate": {"0": "0deg", "1": "1deg", "2": "2deg", "3": "3deg", "6": "6deg", "12": "12deg", "45": "45deg", "90": "90deg", "180": "180deg"},
    "translate": lambda theme: {**theme("spacing"), **_FRACTIONS},
    "transitionProperty": {
        "none": "none",
        "all": "all",
        "DEFAULT": "color, background-color, border-color, text-decoration-color, fill, stroke, opacity, box-shadow, transform, filter, backdrop-filter",
        "colors": "color, background-color, border-color, text-decoration-color, fill, stroke",
        "opacity": "opacity",
        "shadow": "box-shadow",
        "transform": "transform",
    },
    "transitionDuration": {
        "DEFAULT": "150ms",
        **{str(n): f"{n}ms" for n in (0, 75, 100, 150, 200, 300, 500, 700, 1000)},
    },
    "transitionTimingFunction": {
        "DEFAULT": "cubic-bezier(0.4, 0, 0.2, 1)",
        "linear": "linear",
        "in": "cubic-bezier(0.4, 0, 1, 1)",
        "out": "cubic-bezier(0, 0, 0.2, 1)",
        "in-out": "cubic-bezier(0.4, 0, 0.2, 1)",
    },
    "cursor": {
        "auto": "auto",
        "default": "default",
        "pointer": "pointer",
        "wait": "wait",
        "text": "text",
        "move": "move",
        "help": "help",
        "not-allowed": "not-allowed",
        "none": "none",
        "grab": "grab",
        "grabbing": "grabbing",
    },
}
