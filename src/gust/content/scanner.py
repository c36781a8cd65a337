"""Content scanner: expands content globs and collects class candidates."""

from __future__ import annotations

import logging
import os
import re
from concurrent.futures import ThreadPoolExecutor
from dataclasses import dataclass, field
from pathlib import Path
from typing import Iterable, Mapping, Sequence

from gust.content.extractor import extract_candidates, merge_candidates
from gust.content.glob import CompiledGlob, compile_glob
from gust.events.bus import EventBus
from gust.events.types import FileScanned, FileSkipped
from gust.model.config import RawContent
from gust.model.diagnostic import Diagnostic, Severity

logger = logging.getLogger(__name__)

# Bytes inspected for a NUL byte when deciding whether a file is binary.
SNIFF_BYTES = 8000


@dataclass(frozen=True)
class ScanResult:
    """Outcome of scanning every content source.

    ``sources`` maps each scanned file (or inline source) to the candidates
    found in it; it exists for diagnostics and plays no part in matching.
    """

    files: tuple[str, ...] = ()
    candidates: frozenset[str] = frozenset()
    sources: Mapping[str, frozenset[str]] = field(default_factory=dict)
    diagnostics: tuple[Diagnostic, ...] = ()


@dataclass(frozen=True)
class _FileResult:
    path: str
    candidates: frozenset[str] = frozenset()
    skipped: str | None = None


def _combine(globs: Sequence[CompiledGlob]) -> re.Pattern[str] | None:
    if not globs:
        return None
    return re.compile("|".join(f"(?:{g.regex})" for g in globs))


class ContentScanner:
    """Expand content patterns under *root* and extract candidates.

    All positive patterns are joined into one expression, so every file
    found while walking costs a single match call. File reads and
    tokenization run on a fixed-size thread pool; their results are merged
    by set union.
    """

    def __init__(
        self,
        patterns: Iterable[str],
        root: Path,
        *,
        raw_content: Iterable[RawContent] = (),
        max_workers: int | None = None,
        event_bus: EventBus | None = None,
    ) -> None:
        self.root = Path(root)
        self.globs = [compile_glob(p) for p in patterns]
        self.raw_content = list(raw_content)
        self.max_workers = max_workers or min(8, os.cpu_count() or 1)
        self.event_bus = event_bus or EventBus()

    # ---- file set ----------------------------------------------------------

    def _walk_roots(self, globs: Sequence[CompiledGlob]) -> dict[Path, int | None]:
        """Map each distinct walk start to the deepest level any pattern needs."""
        starts: dict[Path, int | None] = {}
        for glob in globs:
            start = self.root.joinpath(*glob.base)
            if start in starts:
                current = starts[start]
                if current is None or glob.max_depth is None:
                    starts[start] = None
                else:
                    starts[start] = max(current, glob.max_depth)
            else:
                starts[start] = glob.max_depth
        # An unbounded walk already visits everything below it.
        unbounded = [s for s, depth in starts.items() if depth is None]
        return {
            start: depth
            for start, depth in starts.items()
            if not any(other in start.parents for other in unbounded)
        }

    def expand(self) -> list[Path]:
        """Return the deduplicated, sorted set of files matched by the patterns."""
        positive = [g for g in self.globs if not g.negated]
        negative = [g for g in self.globs if g.negated]
        include_rel = _combine([g for g in positive if not g.absolute])
        include_abs = _combine([g for g in positive if g.absolute])
        exclude_rel = _combine([g for g in negative if not g.absolute])
        exclude_abs = _combine([g for g in negative if g.absolute])

        matched: set[Path] = set()
        for start, max_depth in self._walk_roots(positive).items():
            if not start.is_dir():
                continue
            for dirpath, dirnames, filenames in os.walk(start):
                depth = len(Path(dirpath).relative_to(start).parts)
                if max_depth is not None and depth >= max_depth:
                    dirnames[:] = []
                dirnames.sort()
                for filename in filenames:
                    path = Path(dirpath, filename)
                    rel = Path(os.path.relpath(path, self.root)).as_posix()
                    absolute = path.absolute().as_posix()
                    hit = (include_rel is not None and include_rel.fullmatch(rel)) or (
                        include_abs is not None and include_abs.fullmatch(absolute)
                    )
                    if not hit:
                        continue
                    if exclude_rel is not None and exclude_rel.fullmatch(rel):
                        continue
                    if exclude_abs is not None and exclude_abs.fullmatch(absolute):
                        continue
                    matched.add(path.resolve())
        return sorted(matched)

    # ---- reading -----------------------------------------------------------

    @staticmethod
    def _read(path: Path) -> _FileResult:
        try:
            data = path.read_bytes()
        except OSError as exc:
            return _FileResult(path=str(path), skipped=f"unreadable ({exc.strerror or exc})")
        if b"\x00" in data[:SNIFF_BYTES]:
            return _FileResult(path=str(path), skipped="binary content")
        text = data.decode("utf-8", errors="replace")
        values = frozenset(c.value for c in extract_candidates(text, source=str(path)))
        return _FileResult(path=str(path), candidates=values)

    def scan(self) -> ScanResult:
        """Read every matched file plus inline content and collect candidates."""
        files = self.expand()
        logger.debug("Scanning %d file(s) under %s", len(files), self.root)

        with ThreadPoolExecutor(max_workers=self.max_workers) as pool:
            results = list(pool.map(self._read, files))

        diagnostics: list[Diagnostic] = []
        sources: dict[str, frozenset[str]] = {}
        for result in results:
            if result.skipped is not None:
                logger.warning("Skipping %s: %s", result.path, result.skipped)
                diagnostics.append(
                    Diagnostic(
                        rule="content_readable",
                        severity=Severity.WARNING,
                        message=f"Skipped content file: {result.skipped}",
                        path=result.path,
                    )
                )
                self.event_bus.emit(FileSkipped(path=result.path, reason=result.skipped))
                continue
            sources[result.path] = result.candidates
            self.event_bus.emit(FileScanned(path=result.path, candidates=len(result.candidates)))

        for index, inline in enumerate(self.raw_content):
            name = f"<raw:{index}.{inline.extension}>"
            sources[name] = frozenset(
                c.value for c in extract_candidates(inline.raw, source=name)
            )

        return ScanResult(
            files=tuple(str(f) for f in files),
            candidates=merge_candidates(sources.values()),
            sources=sources,
            diagnostics=tuple(diagnostics),
        )
