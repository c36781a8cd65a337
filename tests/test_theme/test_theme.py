"""Tests for theme resolution: layering, lazy tokens, cycles, provenance."""

import pytest

from gust.errors import ConfigError, CyclicThemeReferenceError
from gust.model.theme import Provenance, split_path
from gust.theme import DEFAULT_THEME, ThemeResolver, deep_merge, resolve_theme


# ---------------------------------------------------------------------------
# Layering
# ---------------------------------------------------------------------------


class TestDefaults:
    def test_spacing(self):
        theme = resolve_theme(DEFAULT_THEME)
        assert theme("spacing.4") == "1rem"

    def test_lazy_token_reads_spacing(self):
        theme = resolve_theme(DEFAULT_THEME)
        assert theme("padding.4") == "1rem"
        assert theme("margin.auto") == "auto"

    def test_nested_color(self):
        theme = resolve_theme(DEFAULT_THEME)
        assert theme("colors.red.500") == "#ef4444"

    def test_dotted_key(self):
        theme = resolve_theme(DEFAULT_THEME)
        assert theme("spacing.2.5") == "0.625rem"
        assert theme("spacing[2.5]") == "0.625rem"

    def test_missing_path_returns_default(self):
        theme = resolve_theme(DEFAULT_THEME)
        assert theme("spacing.999") is None
        assert theme("nope.nothing", "fallback") == "fallback"
        assert "spacing.4" in theme
        assert "spacing.999" not in theme


class TestExtend:
    def test_extend_adds_token_and_keeps_defaults(self):
        theme = resolve_theme(DEFAULT_THEME, extend={"spacing": {"13": "3.25rem"}})
        assert theme("spacing.13") == "3.25rem"
        assert theme("spacing.4") == "1rem"

    def test_extend_reaches_lazy_dependents(self):
        theme = resolve_theme(DEFAULT_THEME, extend={"spacing": {"13": "3.25rem"}})
        assert theme("padding.13") == "3.25rem"
        assert theme("width.13") == "3.25rem"

    def test_extend_lists_concatenate(self):
        theme = resolve_theme(
            {"fontFamily": {"sans": ["Inter"]}},
            extend={"fontFamily": {"sans": ["system-ui"]}},
        )
        assert tuple(theme("fontFamily.sans")) == ("Inter", "system-ui")

    def test_extend_new_top_level_key(self):
        theme = resolve_theme(DEFAULT_THEME, extend={"aria": {"current": "current"}})
        assert theme("aria.current") == "current"
        assert theme("aria.busy") == 'busy="true"'

    def test_extend_with_lazy_value(self):
        theme = resolve_theme(
            DEFAULT_THEME,
            extend={"spacing": lambda theme: {"tablet": theme("screens.md")}},
        )
        assert theme("spacing.tablet") == "768px"
        assert theme("spacing.4") == "1rem"
        assert theme("padding.tablet") == "768px"

    def test_extend_reads_defaults_under_its_own_key(self):
        theme = resolve_theme(
            DEFAULT_THEME,
            extend={"colors": lambda t: {"primary": t("colors.blue.500")}},
        )
        assert theme("colors.primary") == "#3b82f6"
        assert theme("colors.red.500") == "#ef4444"
        assert theme("backgroundColor.primary") == "#3b82f6"

    def test_extend_reads_override_under_its_own_key(self):
        theme = resolve_theme(
            {},
            extend={"spacing": lambda t: {"gutter": t("spacing.base")}},
            overrides={"spacing": {"base": "6px"}},
        )
        assert theme("spacing.gutter") == "6px"
        assert theme("spacing.base") == "6px"


class TestOverride:
    def test_override_replaces_subtree(self):
        theme = resolve_theme(DEFAULT_THEME, overrides={"spacing": {"13": "3.25rem"}})
        assert theme("spacing.13") == "3.25rem"
        assert theme("spacing.4") is None

    def test_override_flows_into_lazy_dependents(self):
        theme = resolve_theme(DEFAULT_THEME, overrides={"spacing": {"13": "3.25rem"}})
        assert theme("padding.13") == "3.25rem"
        assert theme("padding.4") is None

    def test_override_and_extend_together(self):
        theme = resolve_theme(
            DEFAULT_THEME,
            extend={"screens": {"3xl": "1920px"}},
            overrides={"screens": {"tablet": "640px"}},
        )
        assert dict(theme("screens")) == {"tablet": "640px", "3xl": "1920px"}


class TestDeepMerge:
    def test_does_not_mutate_inputs(self):
        base = {"a": {"b": 1}, "l": [1]}
        ext = {"a": {"c": 2}, "l": [2]}
        merged = deep_merge(base, ext)
        assert merged == {"a": {"b": 1, "c": 2}, "l": [1, 2]}
        assert base == {"a": {"b": 1}, "l": [1]}

    def test_scalar_replaces(self):
        assert deep_merge({"a": 1}, {"a": 2}) == {"a": 2}


# ---------------------------------------------------------------------------
# References
# ---------------------------------------------------------------------------


class TestThemeFunction:
    def test_whole_string_reference_keeps_value(self):
        theme = resolve_theme({"spacing": {"4": "1rem"}, "gap": {"card": "theme(spacing.4)"}})
        assert theme("gap.card") == "1rem"

    def test_embedded_reference(self):
        theme = resolve_theme(
            {"spacing": {"4": "1rem"}, "inset": {"calc": "calc(theme('spacing.4') + 2px)"}}
        )
        assert theme("inset.calc") == "calc(1rem + 2px)"

    def test_unknown_reference_is_config_error(self):
        with pytest.raises(ConfigError, match="spacing.404"):
            resolve_theme({"gap": {"x": "theme(spacing.404)"}})

    def test_callable_failure_is_wrapped(self):
        def broken(theme):
            raise KeyError("boom")

        with pytest.raises(ConfigError) as exc_info:
            resolve_theme({"colors": broken})
        assert isinstance(exc_info.value.cause, KeyError)


class TestCycles:
    def test_two_token_cycle(self):
        with pytest.raises(CyclicThemeReferenceError) as exc_info:
            resolve_theme({"a": lambda t: t("b"), "b": lambda t: t("a")})
        assert exc_info.value.cycle == ["a", "b", "a"]
        assert "a -> b -> a" in str(exc_info.value)

    def test_self_reference_through_string(self):
        with pytest.raises(CyclicThemeReferenceError):
            resolve_theme({"spacing": {"x": "theme(spacing.x)"}})

    def test_cycle_reported_once(self):
        resolver = ThemeResolver({"a": lambda t: t("b"), "b": lambda t: t("a"), "c": {"ok": "1"}})
        with pytest.raises(CyclicThemeReferenceError):
            resolver.resolve()
        assert len(resolver.errors) == 1

    def test_independent_errors_are_all_collected(self):
        resolver = ThemeResolver(
            {"a": lambda t: t("a"), "b": {"x": "theme(missing.key)"}}
        )
        with pytest.raises(CyclicThemeReferenceError):
            resolver.resolve()
        assert len(resolver.errors) == 2
        assert isinstance(resolver.errors[1], ConfigError)

    def test_own_key_without_base_layer_is_a_cycle(self):
        with pytest.raises(CyclicThemeReferenceError):
            resolve_theme({}, extend={"brand": lambda t: {"b": t("brand.a")}})

    def test_reference_to_sibling_is_not_a_cycle(self):
        theme = resolve_theme({"spacing": {"a": "1px", "b": "theme(spacing.a)"}})
        assert theme("spacing.b") == "1px"


# ---------------------------------------------------------------------------
# Resolved theme object
# ---------------------------------------------------------------------------


class TestResolvedTheme:
    def test_read_only(self):
        theme = resolve_theme(DEFAULT_THEME)
        with pytest.raises(TypeError):
            theme("spacing")["4"] = "2rem"  # type: ignore[index]

    def test_provenance(self):
        theme = resolve_theme(
            DEFAULT_THEME,
            extend={"spacing": {"13": "3.25rem"}},
            overrides={"screens": {"tablet": "640px"}},
        )
        assert theme.provenance("spacing.13") is Provenance.EXTEND
        assert theme.provenance("spacing.4") is Provenance.DEFAULT
        assert theme.provenance("screens.tablet") is Provenance.OVERRIDE

    def test_tokens_carry_provenance(self):
        theme = resolve_theme({"spacing": {"1": "4px"}}, extend={"spacing": {"2": "8px"}})
        tokens = {t.path: t for t in theme.tokens()}
        assert tokens["spacing.1"].provenance is Provenance.DEFAULT
        assert tokens["spacing.2"].provenance is Provenance.EXTEND
        assert tokens["spacing.2"].value == "8px"

    def test_resolution_is_repeatable(self):
        first = resolve_theme(DEFAULT_THEME, extend={"spacing": {"13": "3.25rem"}})
        second = resolve_theme(DEFAULT_THEME, extend={"spacing": {"13": "3.25rem"}})
        assert first.as_dict() == second.as_dict()


class TestSplitPath:
    def test_brackets_and_dots(self):
        assert split_path("spacing[2.5]") == ("spacing", "2.5")
        assert split_path("colors.gray.100") == ("colors", "gray", "100")
