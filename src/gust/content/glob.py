"""Glob pattern parsing and compilation for content patterns.

Supported syntax::

    src/**/*.rs          recursive directories
    *.{html,rs}          alternation of literal extensions
    page-?.html          single character
    img[0-9].svg         character class ([!...] or [^...] negates)
    !**/vendor/**        exclusion (leading "!")

Each pattern compiles to one regular expression matched against
"/"-separated paths relative to the content root.
"""

from __future__ import annotations

import re
from dataclasses import dataclass
from functools import lru_cache
from pathlib import Path

from lark import Lark, Token, Transformer
from lark.exceptions import UnexpectedInput, VisitError

from gust.errors import GlobPatternError

GRAMMAR_PATH = Path(__file__).parent / "glob.lark"

__all__ = ["CompiledGlob", "compile_glob", "validate_glob"]


@dataclass(frozen=True)
class CompiledGlob:
    """A parsed pattern ready for matching.

    Attributes:
        pattern: The pattern as written, including any "!" prefix.
        regex: Regular expression source for the whole path (unanchored).
        base: Leading literal directory segments; the scan starts there.
        max_depth: How many directory levels below ``base`` can match, or
            None when the pattern is recursive.
        negated: True for exclusion patterns.
        absolute: True when the pattern starts at the file system root.
    """

    pattern: str
    regex: str
    base: tuple[str, ...]
    max_depth: int | None
    negated: bool = False
    absolute: bool = False

    def matches(self, path: str) -> bool:
        return re.fullmatch(self.regex, path) is not None


@dataclass(frozen=True)
class _Part:
    regex: str
    literal: str | None = None
    crosses: bool = False  # contains a "/" inside an alternation branch


@dataclass(frozen=True)
class _Segment:
    regex: str
    literal: str | None
    globstar: bool = False
    crosses: bool = False


class _GlobTransformer(Transformer):  # type: ignore[type-arg]
    """Turn the parse tree into per-segment regex fragments."""

    def STAR(self, token: Token) -> _Part:
        return _Part("[^/]*")

    def QMARK(self, token: Token) -> _Part:
        return _Part("[^/]")

    def LITERAL(self, token: Token) -> _Part:
        text = re.sub(r"\\(.)", r"\1", str(token))
        return _Part(re.escape(text), literal=text)

    def COMMA(self, token: Token) -> _Part:
        return _Part(",", literal=",")

    def SLASH(self, token: Token) -> _Part:
        return _Part("/", literal="/", crosses=True)

    def charclass(self, items: list[Token]) -> _Part:
        body = str(items[0])
        negate = body[0] in "!^"
        if negate:
            body = body[1:]
        body = re.sub(r"\\(.)", r"\1", body)
        escaped = "".join("\\" + ch if ch in "\\^[]" else ch for ch in body)
        return _Part("[" + ("^/" if negate else "") + escaped + "]")

    def branch(self, items: list[_Part]) -> list[_Part]:
        return items

    def alternation(self, items: list[object]) -> _Part:
        # Branches arrive as lists; separating commas arrive as bare parts.
        branches = [item for item in items if isinstance(item, list)]
        if all(not branch for branch in branches):
            raise ValueError("empty alternation")
        regex = "(?:" + "|".join("".join(p.regex for p in branch) for branch in branches) + ")"
        crosses = any(p.crosses for branch in branches for p in branch)
        return _Part(regex, crosses=crosses)

    def globstar(self, items: list[Token]) -> _Segment:
        return _Segment(regex="", literal=None, globstar=True)

    def parts(self, items: list[_Part]) -> _Segment:
        literals = [p.literal for p in items]
        literal = "".join(literals) if None not in literals else None  # type: ignore[arg-type]
        return _Segment(
            regex="".join(p.regex for p in items),
            literal=literal,
            crosses=any(p.crosses for p in items),
        )

    def start(self, items: list[object]) -> list[_Segment]:
        return [item for item in items if isinstance(item, _Segment)]


@lru_cache(maxsize=1)
def _parser() -> Lark:
    return Lark(GRAMMAR_PATH.read_text(), parser="lalr", start="start")


def _split_prefix(pattern: str) -> tuple[str, bool, bool]:
    body = pattern.strip()
    negated = body.startswith("!")
    if negated:
        body = body[1:]
    absolute = body.startswith("/")
    if absolute:
        body = body.lstrip("/")
    while body.startswith("./"):
        body = body[2:]
    return body, negated, absolute


@lru_cache(maxsize=512)
def compile_glob(pattern: str) -> CompiledGlob:
    """Parse *pattern* and compile it.

    Raises :class:`GlobPatternError` for malformed syntax.
    """
    body, negated, absolute = _split_prefix(pattern)
    if not body:
        raise GlobPatternError(f"Empty glob pattern: {pattern!r}", pattern=pattern)
    try:
        tree = _parser().parse(body)
        segments: list[_Segment] = _GlobTransformer().transform(tree)
    except UnexpectedInput as exc:
        column = getattr(exc, "column", None)
        if not isinstance(column, int) or column < 1:
            column = len(body) + 1
        offset = len(pattern) - len(pattern.lstrip()) + (len(pattern.strip()) - len(body))
        raise GlobPatternError(
            f"Invalid glob pattern {pattern!r} at column {column + offset}",
            pattern=pattern,
            column=column + offset,
            cause=exc,
        ) from exc
    except VisitError as exc:
        raise GlobPatternError(
            f"Invalid glob pattern {pattern!r}: {exc.orig_exc}",
            pattern=pattern,
            cause=exc,
        ) from exc

    base: list[str] = []
    for segment in segments[:-1]:
        if segment.literal is None or segment.crosses:
            break
        base.append(segment.literal)

    rest = segments[len(base):]
    recursive = any(s.globstar or s.crosses for s in rest)
    max_depth = None if recursive else len(rest) - 1

    pieces: list[str] = []
    prefix = "/" if absolute else ""
    for index, segment in enumerate(segments):
        last = index == len(segments) - 1
        if segment.globstar:
            pieces.append(".*" if last else "(?:[^/]+/)*")
        else:
            pieces.append(segment.regex + ("" if last else "/"))
    return CompiledGlob(
        pattern=pattern,
        regex=prefix + "".join(pieces),
        base=(("/",) if absolute else ()) + tuple(base),
        max_depth=max_depth,
        negated=negated,
        absolute=absolute,
    )


def validate_glob(pattern: str) -> GlobPatternError | None:
    """Return the syntax error for *pattern*, or None when it is valid."""
    try:
        compile_glob(pattern)
    except GlobPatternError as exc:
        return exc
    return None
