"""Class candidate model: raw tokens pulled out of content files."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class ClassCandidate:
    """A raw token that might name a utility class.

    ``source`` and ``offset`` are kept for diagnostics only; two candidates
    with the same ``value`` are the same candidate for matching purposes.
    """

    value: str
    source: str = "<memory>"
    offset: int = 0
