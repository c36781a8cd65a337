"""Language-agnostic extraction of utility-class candidates from text.

The extractor knows nothing about HTML, Rust or JavaScript: it pulls out
maximal runs of characters that may form a class name and leaves deciding
whether a run names a real utility to the purger.

A token directly followed by ``=`` that carries a prefix, such as the
Leptos directive ``class:hidden=move || ...``, also yields the part after
its last top-level colon (``hidden``).

Quotes and backticks end a run even between square brackets, so an
arbitrary value must not quote its contents: ``bg-[url(/img.png)]`` is
found whole, ``bg-[url('/img.png')]`` is cut at the quote.
"""

from __future__ import annotations

import re
import string
from typing import Iterable, Iterator

from gust.model.candidate import ClassCandidate

__all__ = ["extract_candidates", "extract_values", "merge_candidates"]

# Characters allowed anywhere in a candidate.
_ALPHABET = frozenset(string.ascii_letters + string.digits + "-_:/.%!@")
# Characters allowed only between square brackets (arbitrary values).
_BRACKET_EXTRA = frozenset("#(),=&>*+~^$|'?")
_TRIM = ".:/,"

# Whitespace, quotes and backticks always end a run; cheap to skip with re.
_RUN_RE = re.compile(r"[^\s\"'`]+")


def _split_run(run: str) -> Iterator[tuple[int, str]]:
    """Yield ``(offset, token)`` for each candidate inside one run.

    Single pass with a bracket depth counter; never backtracks.
    """
    begin: int | None = None
    depth = 0
    for i, ch in enumerate(run):
        if ch == "[":
            if begin is None:
                begin = i
            depth += 1
            continue
        if ch == "]" and depth:
            depth -= 1
            continue
        if ch in _ALPHABET or (depth and ch in _BRACKET_EXTRA):
            if begin is None:
                begin = i
            continue
        if begin is not None:
            yield begin, run[begin:i]
            begin = None
            depth = 0
    if begin is not None:
        yield begin, run[begin:]


def _last_colon(token: str) -> int | None:
    """Index of the last colon outside brackets, if any."""
    depth = 0
    cut = None
    for i, ch in enumerate(token):
        if ch == "[":
            depth += 1
        elif ch == "]" and depth:
            depth -= 1
        elif ch == ":" and depth == 0:
            cut = i
    return cut


def _clean(offset: int, token: str) -> tuple[int, str]:
    stripped = token.lstrip(_TRIM)
    offset += len(token) - len(stripped)
    return offset, stripped.rstrip(_TRIM)


def extract_candidates(text: str, source: str = "<memory>") -> list[ClassCandidate]:
    """Return every candidate in *text*, in discovery order, with offsets."""
    found: list[ClassCandidate] = []
    for match in _RUN_RE.finditer(text):
        run = match.group()
        for rel, token in _split_run(run):
            offset, value = _clean(match.start() + rel, token)
            if not value or not any(ch.isalnum() for ch in value):
                continue
            found.append(ClassCandidate(value=value, source=source, offset=offset))
            if run.startswith("=", rel + len(token)):
                cut = _last_colon(value)
                tail = value[cut + 1:] if cut is not None else ""
                if any(ch.isalnum() for ch in tail):
                    found.append(ClassCandidate(value=tail, source=source, offset=offset + cut + 1))
    return found


def extract_values(text: str) -> set[str]:
    """Return the distinct candidate strings in *text*."""
    return {c.value for c in extract_candidates(text)}


def merge_candidates(groups: Iterable[Iterable[str]]) -> frozenset[str]:
    """Union per-file candidate sets; the result is independent of order."""
    merged: set[str] = set()
    for group in groups:
        merged.update(group)
    return frozenset(merged)
