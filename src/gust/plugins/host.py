"""Plugin host: runs plugins in order against the shared registries."""

from __future__ import annotations

import importlib
import logging
from dataclasses import dataclass
from typing import Any, Callable, Iterable, Mapping, Protocol, runtime_checkable

from gust.emit.escape import escape_class
from gust.errors import ConfigError, PluginLoadError
from gust.events.bus import EventBus
from gust.events.types import PluginLoaded
from gust.model.config import Config
from gust.model.theme import Theme
from gust.model.utility import CssObject, UtilityDefinition
from gust.plugins.registry import Transform, UtilityRegistry, VariantRegistry
from gust.variants.expander import VariantDefinition, make_transform

logger = logging.getLogger(__name__)

__all__ = ["BUILTIN_PLUGINS", "Plugin", "PluginAPI", "PluginHost", "plugin", "resolve_plugin"]


@runtime_checkable
class Plugin(Protocol):
    """A capability object contributing utilities and variants.

    Both entry points receive the plugin API and the resolved theme. Either
    may be a no-op.
    """

    def register_utilities(self, api: PluginAPI, theme: Theme) -> None: ...

    def register_variants(self, api: PluginAPI, theme: Theme) -> None: ...


# Short names accepted wherever a plugin reference is.
BUILTIN_PLUGINS: dict[str, str] = {
    "core": "gust.plugins.core",
    "typography": "gust.plugins.typography",
    "@tailwindcss/typography": "gust.plugins.typography",
}

RegisterFunc = Callable[["PluginAPI", Theme], None]


@dataclass(frozen=True)
class FunctionPlugin:
    """Plugin assembled from two plain functions."""

    name: str
    utilities: RegisterFunc | None = None
    variants: RegisterFunc | None = None

    def register_utilities(self, api: PluginAPI, theme: Theme) -> None:
        if self.utilities is not None:
            self.utilities(api, theme)

    def register_variants(self, api: PluginAPI, theme: Theme) -> None:
        if self.variants is not None:
            self.variants(api, theme)


def plugin(
    name: str,
    utilities: RegisterFunc | None = None,
    variants: RegisterFunc | None = None,
) -> FunctionPlugin:
    """Build a plugin from registration functions."""
    return FunctionPlugin(name=name, utilities=utilities, variants=variants)


def _plugin_name(ref: Any) -> str:
    if isinstance(ref, str):
        return ref
    name = getattr(ref, "name", None)
    if isinstance(name, str) and name:
        return name
    return getattr(ref, "__name__", None) or type(ref).__name__


def resolve_plugin(ref: Any) -> Any:
    """Turn a plugin reference into a plugin object.

    References may be plugin objects, a bare ``(api, theme)`` function, or an
    import string: ``"package.module:attribute"`` or ``"package.module"``
    (which uses the module's ``plugin`` attribute). Names in
    ``BUILTIN_PLUGINS`` map to the bundled plugins.
    """
    if isinstance(ref, str):
        ref = BUILTIN_PLUGINS.get(ref, ref)
        module_name, _, attribute = ref.partition(":")
        module = importlib.import_module(module_name)
        target = getattr(module, attribute or "plugin")
        return resolve_plugin(target)
    if hasattr(ref, "register_utilities") or hasattr(ref, "register_variants"):
        return ref
    if callable(ref):
        return plugin(_plugin_name(ref), utilities=ref)
    raise ConfigError(f"Not a plugin: {ref!r}")


def _class_name(key: str) -> str:
    name = key.strip()
    if name.startswith("."):
        name = name[1:]
    if not name:
        raise ConfigError(f"Invalid utility name: {key!r}")
    return name


class PluginAPI:
    """Registration surface handed to each plugin.

    Mirrors the familiar ``addUtilities`` / ``matchUtilities`` /
    ``addVariant`` / ``matchVariant`` quartet.
    """

    def __init__(
        self,
        host: PluginHost,
        plugin_name: str,
        theme: Theme,
        config: Config | None = None,
    ) -> None:
        self._host = host
        self.plugin_name = plugin_name
        self.theme = theme
        self.config = config
        self.utilities_added = 0
        self.variants_added = 0

    def add_utilities(self, utilities: Mapping[str, CssObject]) -> None:
        """Register static utilities: ``{"flex": {"display": "flex"}}``."""
        registry = self._host.utilities
        for key, declarations in utilities.items():
            registry.register(
                UtilityDefinition(
                    name=_class_name(key),
                    plugin=self.plugin_name,
                    order=registry.next_order(),
                    declarations=declarations,
                )
            )
            self.utilities_added += 1

    def match_utilities(
        self,
        utilities: Mapping[str, Callable[[Any], CssObject]],
        *,
        values: Mapping[str, Any] | None = None,
        type: str = "any",
        supports_negative: bool = False,
        supports_arbitrary: bool = True,
    ) -> None:
        """Register parametrized utilities, one class per entry in *values*."""
        registry = self._host.utilities
        for name, template in utilities.items():
            registry.register(
                UtilityDefinition(
                    name=_class_name(name),
                    plugin=self.plugin_name,
                    order=registry.next_order(),
                    template=template,
                    values=dict(values or {}),
                    type=type,
                    supports_negative=supports_negative,
                    supports_arbitrary=supports_arbitrary,
                )
            )
            self.utilities_added += 1

    def add_variant(self, name: str, definition: VariantDefinition) -> None:
        """Register a variant: ``"&:hover"``, ``"@media print"`` or a callable."""
        self._host.variants.register(name, make_transform(definition))
        self.variants_added += 1

    def match_variant(
        self,
        name: str,
        build: Callable[[str], VariantDefinition],
        *,
        values: Mapping[str, str] | None = None,
        arbitrary: bool = True,
    ) -> None:
        """Register a variant family such as ``aria-*``."""

        def transform_for(value: str) -> Transform:
            return make_transform(build(value))

        self._host.variants.register_family(name, transform_for, values, arbitrary=arbitrary)
        self.variants_added += 1

    @staticmethod
    def e(class_name: str) -> str:
        """Escape a class name for use in a selector."""
        return escape_class(class_name)


class PluginHost:
    """Run plugins strictly in order and own the registries they fill.

    Only the host mutates the registries, one plugin at a time, which is what
    makes "last registration wins" well defined.
    """

    def __init__(
        self,
        theme: Theme,
        *,
        config: Config | None = None,
        event_bus: EventBus | None = None,
    ) -> None:
        self.theme = theme
        self.config = config
        self.event_bus = event_bus or EventBus()
        self.utilities = UtilityRegistry()
        self.variants = VariantRegistry()
        self.loaded: list[str] = []

    def load(self, plugins: Iterable[Any]) -> None:
        """Load every plugin in order; the first failure aborts."""
        for ref in plugins:
            self.run(ref)

    def run(self, ref: Any) -> None:
        name = _plugin_name(ref)
        try:
            instance = resolve_plugin(ref)
            name = _plugin_name(instance) if not isinstance(ref, str) else name
            api = PluginAPI(self, name, self.theme, self.config)
            register_variants = getattr(instance, "register_variants", None)
            if register_variants is not None:
                register_variants(api, self.theme)
            register_utilities = getattr(instance, "register_utilities", None)
            if register_utilities is not None:
                register_utilities(api, self.theme)
        except Exception as exc:
            logger.error("Plugin %s failed: %s", name, exc)
            raise PluginLoadError(name, exc) from exc
        self.loaded.append(name)
        logger.debug(
            "Loaded plugin %s (%d utilities, %d variants)",
            name,
            api.utilities_added,
            api.variants_added,
        )
        self.event_bus.emit(
            PluginLoaded(plugin=name, utilities=api.utilities_added, variants=api.variants_added)
        )
