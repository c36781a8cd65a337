"""Tests for the plugin host, the plugin API and the bundled plugins."""

import pytest

from gust.errors import ConfigError, PluginLoadError
from gust.events.bus import EventBus
from gust.events.types import PluginLoaded
from gust.model.config import Config
from gust.model.utility import RuleContext
from gust.plugins import PluginAPI, PluginHost, plugin, resolve_plugin
from gust.plugins.core import CorePlugin
from gust.plugins.typography import TypographyPlugin
from gust.theme import DEFAULT_THEME, resolve_theme


@pytest.fixture(scope="module")
def theme():
    return resolve_theme(DEFAULT_THEME, extend={"aria": {"current": "current"}})


@pytest.fixture
def host(theme):
    return PluginHost(theme)


def _static(name, css):
    def register(api, theme):
        api.add_utilities({name: css})

    return register


# ---------------------------------------------------------------------------
# Host
# ---------------------------------------------------------------------------


class TestOrdering:
    def test_later_plugin_wins(self, host):
        host.load([
            plugin("a", utilities=_static("btn", {"color": "red"})),
            plugin("b", utilities=_static("btn", {"color": "blue"})),
        ])
        assert host.utilities.get("btn").declarations == {"color": "blue"}
        assert host.utilities.get("btn").plugin == "b"

    def test_swapping_order_swaps_winner(self, host):
        host.load([
            plugin("b", utilities=_static("btn", {"color": "blue"})),
            plugin("a", utilities=_static("btn", {"color": "red"})),
        ])
        assert host.utilities.get("btn").declarations == {"color": "red"}

    def test_replacement_takes_later_position(self, host):
        host.load([
            plugin("a", utilities=lambda api, theme: api.add_utilities({"x": {}, "y": {}})),
            plugin("b", utilities=_static("x", {"color": "red"})),
        ])
        assert host.utilities.names() == ["y", "x"]

    def test_variants_register_before_utilities(self, host):
        calls = []

        class Recorder:
            name = "recorder"

            def register_utilities(self, api, theme):
                calls.append("utilities")

            def register_variants(self, api, theme):
                calls.append("variants")

        host.run(Recorder())
        assert calls == ["variants", "utilities"]
        assert host.loaded == ["recorder"]


class TestFailures:
    def test_raising_plugin_aborts_with_identity(self, host):
        def broken(api, theme):
            raise RuntimeError("kaboom")

        with pytest.raises(PluginLoadError) as exc_info:
            host.load([plugin("ok"), plugin("broken", utilities=broken), plugin("never")])
        error = exc_info.value
        assert error.plugin == "broken"
        assert isinstance(error.cause, RuntimeError)
        assert "kaboom" in str(error)
        assert host.loaded == ["ok"]

    def test_unimportable_reference(self, host):
        with pytest.raises(PluginLoadError) as exc_info:
            host.run("gust_no_such_module_anywhere")
        assert exc_info.value.plugin == "gust_no_such_module_anywhere"
        assert isinstance(exc_info.value.cause, ImportError)

    def test_invalid_variant_definition(self, host):
        def variants(api, theme):
            api.add_variant("bad", "no ampersand")

        with pytest.raises(PluginLoadError) as exc_info:
            host.run(plugin("bad-variants", variants=variants))
        assert isinstance(exc_info.value.cause, ConfigError)

    def test_failure_is_logged(self, host, caplog):
        with caplog.at_level("ERROR", logger="gust.plugins.host"):
            with pytest.raises(PluginLoadError):
                host.run(plugin("boom", utilities=lambda api, theme: 1 / 0))
        assert any("boom" in record.getMessage() for record in caplog.records)


class TestEvents:
    def test_plugin_loaded_counts(self, theme):
        bus = EventBus()
        seen = []
        bus.subscribe(PluginLoaded, seen.append)
        host = PluginHost(theme, event_bus=bus)

        def variants(api, theme):
            api.add_variant("hocus", "&:hover, &:focus")

        def utilities(api, theme):
            api.add_utilities({"a": {}, "b": {}})

        host.run(plugin("counted", utilities=utilities, variants=variants))
        assert seen == [PluginLoaded(plugin="counted", utilities=2, variants=1)]


# ---------------------------------------------------------------------------
# References
# ---------------------------------------------------------------------------


class TestResolvePlugin:
    def test_module_reference_uses_plugin_attribute(self):
        assert isinstance(resolve_plugin("gust.plugins.typography"), TypographyPlugin)

    def test_attribute_reference(self):
        assert isinstance(resolve_plugin("gust.plugins.core:plugin"), CorePlugin)

    @pytest.mark.parametrize("name", ["typography", "@tailwindcss/typography"])
    def test_builtin_aliases(self, name):
        assert isinstance(resolve_plugin(name), TypographyPlugin)

    def test_bare_function(self):
        def my_plugin(api, theme):
            pass

        resolved = resolve_plugin(my_plugin)
        assert resolved.name == "my_plugin"

    def test_object_passes_through(self):
        core = CorePlugin()
        assert resolve_plugin(core) is core

    def test_not_a_plugin(self):
        with pytest.raises(ConfigError):
            resolve_plugin(42)


# ---------------------------------------------------------------------------
# API
# ---------------------------------------------------------------------------


class TestPluginAPI:
    def test_match_utilities_from_theme(self, host):
        def utilities(api, theme):
            api.match_utilities(
                {"tab": lambda value: {"tab-size": value}},
                values={"2": "2", "4": "4"},
            )

        host.run(plugin("tabs", utilities=utilities))
        index = host.utilities.exact_index()
        assert "tab-2" in index
        assert index["tab-4"][0].render(index["tab-4"][1]) == {"tab-size": "4"}

    def test_leading_dot_is_stripped(self, host):
        host.run(plugin("dotted", utilities=_static(".card", {"padding": "1rem"})))
        assert "card" in host.utilities

    def test_static_and_family_names_coexist(self, host):
        def utilities(api, theme):
            api.add_utilities({"flex": {"display": "flex"}})
            api.match_utilities({"flex": lambda v: {"flex": v}}, values={"1": "1 1 0%"})

        host.run(plugin("flex", utilities=utilities))
        index = host.utilities.exact_index()
        assert index["flex"][0].is_static
        assert not index["flex-1"][0].is_static

    def test_escape_helper(self):
        assert PluginAPI.e("w-1/2") == "w-1\\/2"

    def test_plugin_sees_theme(self, host):
        seen = {}

        def utilities(api, theme):
            seen["red"] = theme("colors.red.500")

        host.run(plugin("reader", utilities=utilities))
        assert seen["red"] == "#ef4444"


# ---------------------------------------------------------------------------
# Bundled plugins
# ---------------------------------------------------------------------------


class TestCorePlugin:
    @pytest.fixture
    def core_host(self, theme):
        host = PluginHost(theme)
        host.run(CorePlugin())
        return host

    @pytest.mark.parametrize(
        "name",
        [
            "flex", "hidden", "block", "absolute", "p-4", "m-2", "-mt-4", "w-1/2",
            "left-1/4", "z-10", "grid-cols-1", "text-lg", "text-white", "font-bold",
            "font-mono", "bg-black", "bg-cover", "bg-fixed", "bg-no-repeat",
            "bg-gradient-to-b", "from-black", "from-5%", "to-95%", "via-transparent",
            "rounded-lg", "shadow-md", "border", "border-2", "border-gray-200",
            "opacity-50", "transition", "duration-300", "cursor-pointer",
            "select-none", "overflow-hidden", "container", "sr-only", "stroke-black",
            "italic", "leading-tight", "tracking-wide", "space-x-4",
        ],
    )
    def test_registers_common_utilities(self, core_host, name):
        assert name in core_host.utilities.exact_index()

    @pytest.mark.parametrize(
        "name",
        ["hover", "focus", "focus-within", "first", "before", "dark", "print",
         "sm", "md", "lg", "xl", "2xl", "max-md", "motion-safe", "group-hover",
         "peer-checked", "aria-current", "aria-busy", "aria-[sort=ascending]",
         "data-[state=open]", "supports-[display:grid]"],
    )
    def test_registers_common_variants(self, core_host, name):
        assert core_host.variants.lookup(name) is not None

    def test_unknown_variant(self, core_host):
        assert core_host.variants.lookup("hovr") is None

    def test_responsive_ranks_above_states(self, core_host):
        md = core_host.variants.lookup("md")
        hover = core_host.variants.lookup("hover")
        assert md.rank > hover.rank

    def test_breakpoints_rank_in_screen_order(self, core_host):
        ranks = [core_host.variants.lookup(s).rank for s in ("sm", "md", "lg", "xl", "2xl")]
        assert ranks == sorted(ranks)

    def test_dark_mode_class(self, theme):
        host = PluginHost(theme, config=Config(content_patterns=("*.html",), dark_mode="class"))
        host.run(CorePlugin())
        ctx = host.variants.lookup("dark").transform(RuleContext(".x"))
        assert ctx.selector == ":is(.dark .x)"
        assert ctx.at_rules == ()

    def test_can_be_overridden(self, core_host):
        core_host.run(plugin("mine", utilities=_static("flex", {"display": "grid"})))
        assert core_host.utilities.exact_index()["flex"][0].declarations == {"display": "grid"}


class TestTypographyPlugin:
    def test_prose_modifiers(self, host):
        host.run(TypographyPlugin())
        for name in ("prose", "prose-sm", "prose-lg", "prose-2xl", "prose-invert"):
            assert name in host.utilities

    def test_theme_customization(self):
        theme = resolve_theme(
            DEFAULT_THEME,
            extend={"typography": {"DEFAULT": {"css": {"max-width": "none"}}}},
        )
        host = PluginHost(theme)
        host.run(TypographyPlugin())
        assert host.utilities.get("prose").declarations["max-width"] == "none"

    def test_custom_class_name(self, host):
        host.run(TypographyPlugin(class_name="markdown"))
        assert "markdown-invert" in host.utilities
