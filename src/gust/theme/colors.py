"""Color helpers shared by the core plugin and the purger."""

from __future__ import annotations

import re
from typing import Any, Mapping

HEX_RE = re.compile(r"^#(?:[0-9a-fA-F]{3,4}|[0-9a-fA-F]{6}|[0-9a-fA-F]{8})$")
NUMBER_RE = re.compile(r"^-?(?:\d+\.?\d*|\.\d+)$")


def flatten_colors(tree: Mapping[str, Any], prefix: str = "") -> dict[str, Any]:
    """Flatten a nested palette into class suffixes.

    ``{"red": {"500": "#ef4444", "DEFAULT": "#f00"}}`` becomes
    ``{"red-500": "#ef4444", "red": "#f00"}``. A top-level ``DEFAULT`` is kept
    under its own key so callers can decide what the bare class means.
    """
    flat: dict[str, Any] = {}
    for key, value in tree.items():
        if key == "DEFAULT" and prefix:
            name = prefix
        elif prefix:
            name = f"{prefix}-{key}"
        else:
            name = key
        if isinstance(value, Mapping):
            flat.update(flatten_colors(value, name))
        else:
            flat[name] = value
    return flat


def _format_alpha(modifier: str) -> str | None:
    if modifier.startswith("[") and modifier.endswith("]"):
        return modifier[1:-1] or None
    if not NUMBER_RE.match(modifier):
        return None
    number = float(modifier)
    if not 0 <= number <= 100:
        return None
    return f"{number / 100:g}"


def with_alpha(color: str, modifier: str) -> str | None:
    """Apply an opacity modifier (``50`` or ``[.35]``) to *color*.

    Returns None when the modifier is not a valid opacity.
    """
    alpha = _format_alpha(modifier)
    if alpha is None:
        return None
    if HEX_RE.match(color):
        digits = color[1:]
        if len(digits) in (3, 4):
            digits = "".join(ch * 2 for ch in digits)
        r, g, b = (int(digits[i:i + 2], 16) for i in (0, 2, 4))
        return f"rgb({r} {g} {b} / {alpha})"
    if color in ("transparent", "inherit"):
        return color
    try:
        percent = f"{float(alpha) * 100:g}%"
    except ValueError:
        percent = alpha
    return f"color-mix(in srgb, {color} {percent}, transparent)"
