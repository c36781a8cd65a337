"""Tests for content glob parsing and compilation."""

import pytest

from gust.content.glob import compile_glob, validate_glob
from gust.errors import ConfigError, GlobPatternError


# ---------------------------------------------------------------------------
# Matching
# ---------------------------------------------------------------------------


class TestStar:
    def test_star_matches_within_one_segment(self):
        glob = compile_glob("*.html")
        assert glob.matches("index.html")
        assert not glob.matches("pages/index.html")

    def test_star_does_not_match_other_extensions(self):
        assert not compile_glob("*.html").matches("index.htm")

    def test_star_inside_segment(self):
        glob = compile_glob("app/src/*.rs")
        assert glob.matches("app/src/main.rs")
        assert not glob.matches("app/src/nested/main.rs")


class TestGlobstar:
    def test_globstar_matches_any_depth(self):
        glob = compile_glob("src/**/*.rs")
        assert glob.matches("src/main.rs")
        assert glob.matches("src/a/b/c.rs")
        assert not glob.matches("other/main.rs")

    def test_trailing_globstar(self):
        glob = compile_glob("vendor/**")
        assert glob.matches("vendor/x.js")
        assert glob.matches("vendor/a/b/c.js")

    def test_leading_globstar(self):
        glob = compile_glob("**/*.html")
        assert glob.matches("index.html")
        assert glob.matches("a/b/index.html")

    def test_double_star_inside_text_acts_as_star(self):
        glob = compile_glob("a**b")
        assert glob.matches("axxb")
        assert not glob.matches("ax/yb")


class TestQuestionMark:
    def test_single_character(self):
        glob = compile_glob("page-?.html")
        assert glob.matches("page-1.html")
        assert not glob.matches("page-10.html")
        assert not glob.matches("page-/.html")


class TestCharacterClass:
    def test_range(self):
        glob = compile_glob("img[0-9].svg")
        assert glob.matches("img3.svg")
        assert not glob.matches("imgx.svg")

    def test_negated_with_bang(self):
        glob = compile_glob("img[!0-9].svg")
        assert glob.matches("imgx.svg")
        assert not glob.matches("img3.svg")

    def test_negated_with_caret(self):
        assert compile_glob("img[^0-9].svg").matches("imgx.svg")


class TestAlternation:
    def test_multiple_extensions(self):
        glob = compile_glob("*.{html,rs}")
        assert glob.matches("a.html")
        assert glob.matches("b.rs")
        assert not glob.matches("c.js")

    def test_nested_alternation(self):
        glob = compile_glob("{a,b{c,d}}.txt")
        assert glob.matches("a.txt")
        assert glob.matches("bd.txt")
        assert not glob.matches("b.txt")

    def test_alternation_with_directories(self):
        glob = compile_glob("{app,server}/src/**/*.rs")
        assert glob.matches("app/src/main.rs")
        assert glob.matches("server/src/db/mod.rs")
        assert not glob.matches("client/src/main.rs")

    def test_branch_containing_slash_is_recursive(self):
        glob = compile_glob("{a/b,c}/*.html")
        assert glob.matches("a/b/x.html")
        assert glob.matches("c/x.html")
        assert glob.max_depth is None

    def test_empty_branch_alongside_others(self):
        glob = compile_glob("index{,.min}.js")
        assert glob.matches("index.js")
        assert glob.matches("index.min.js")


class TestLiterals:
    def test_regex_metacharacters_are_literal(self):
        glob = compile_glob("a+b(c).html")
        assert glob.matches("a+b(c).html")
        assert not glob.matches("aab(c).html")

    def test_escaped_star(self):
        glob = compile_glob(r"a\*.html")
        assert glob.matches("a*.html")
        assert not glob.matches("ab.html")


# ---------------------------------------------------------------------------
# Compiled metadata
# ---------------------------------------------------------------------------


class TestPrefixes:
    def test_negation(self):
        glob = compile_glob("!**/vendor/**")
        assert glob.negated
        assert glob.matches("vendor/x.js")
        assert glob.matches("a/vendor/b/c.js")

    def test_dot_slash_is_stripped(self):
        glob = compile_glob("./app/src/**/*.rs")
        assert glob.base == ("app", "src")
        assert glob.matches("app/src/main.rs")

    def test_absolute(self):
        glob = compile_glob("/srv/site/*.html")
        assert glob.absolute
        assert glob.base == ("/", "srv", "site")
        assert glob.matches("/srv/site/index.html")


class TestBaseAndDepth:
    def test_literal_base(self):
        glob = compile_glob("templates/*.html")
        assert glob.base == ("templates",)
        assert glob.max_depth == 0

    def test_no_base(self):
        glob = compile_glob("*.html")
        assert glob.base == ()
        assert glob.max_depth == 0

    def test_fixed_depth(self):
        glob = compile_glob("a/*/*.html")
        assert glob.base == ("a",)
        assert glob.max_depth == 1

    def test_recursive_depth_is_unbounded(self):
        assert compile_glob("src/**/*.rs").max_depth is None

    def test_single_file_pattern(self):
        glob = compile_glob("a.html")
        assert glob.base == ()
        assert glob.max_depth == 0
        assert glob.matches("a.html")


# ---------------------------------------------------------------------------
# Errors
# ---------------------------------------------------------------------------


class TestErrors:
    @pytest.mark.parametrize("pattern", ["src/{a,b", "img[0-9.svg", "a}b", "]"])
    def test_malformed_pattern_raises(self, pattern):
        with pytest.raises(GlobPatternError) as exc_info:
            compile_glob(pattern)
        assert exc_info.value.pattern == pattern

    def test_column_is_reported(self):
        with pytest.raises(GlobPatternError) as exc_info:
            compile_glob("src/{a,b")
        assert isinstance(exc_info.value.column, int)
        assert exc_info.value.column >= 1

    def test_empty_pattern(self):
        with pytest.raises(GlobPatternError):
            compile_glob("")

    def test_negation_only(self):
        with pytest.raises(GlobPatternError):
            compile_glob("!")

    def test_empty_alternation(self):
        with pytest.raises(GlobPatternError):
            compile_glob("*.{}")

    def test_glob_error_is_a_config_error(self):
        with pytest.raises(ConfigError):
            compile_glob("{")


class TestValidateGlob:
    def test_valid_returns_none(self):
        assert validate_glob("src/**/*.{html,rs}") is None

    def test_invalid_returns_error(self):
        error = validate_glob("src/{a")
        assert isinstance(error, GlobPatternError)
        assert "src/{a" in str(error)
