from gust.theme.colors import flatten_colors, with_alpha
from gust.theme.defaults import DEFAULT_THEME
from gust.theme.resolver import ThemeResolver, deep_merge, resolve_theme

__all__ = ["DEFAULT_THEME", "ThemeResolver", "deep_merge", "flatten_colors", "resolve_theme", "with_alpha"]
