from gust.plugins.host import (
    BUILTIN_PLUGINS,
    FunctionPlugin,
    Plugin,
    PluginAPI,
    PluginHost,
    plugin,
    resolve_plugin,
)
from gust.plugins.registry import UtilityRegistry, VariantFamily, VariantRegistry

__all__ = [
    "BUILTIN_PLUGINS",
    "FunctionPlugin",
    "Plugin",
    "PluginAPI",
    "PluginHost",
    "UtilityRegistry",
    "VariantFamily",
    "VariantRegistry",
    "plugin",
    "resolve_plugin",
]
