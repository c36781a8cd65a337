"""Tests for the content scanner."""

from pathlib import Path

import pytest

from gust.content.scanner import ContentScanner
from gust.events.bus import EventBus
from gust.events.types import FileScanned, FileSkipped
from gust.model.config import RawContent
from gust.model.diagnostic import Severity


@pytest.fixture
def project(tmp_path: Path) -> Path:
    (tmp_path / "index.html").write_text('<div class="p-4 m-2">')
    (tmp_path / "about.html").write_text('<div class="text-lg">')
    app = tmp_path / "app" / "src"
    app.mkdir(parents=True)
    (app / "main.rs").write_text('html! { <main class="md:flex"> }')
    (app / "nested").mkdir()
    (app / "nested" / "view.rs").write_text('class="hover:underline"')
    (tmp_path / "script.js").write_text("const x = 'ignored-class';")
    vendor = tmp_path / "app" / "src" / "vendor"
    vendor.mkdir()
    (vendor / "lib.rs").write_text('class="vendor-only"')
    return tmp_path


def _names(paths, root: Path) -> list[str]:
    return [Path(p).relative_to(root.resolve()).as_posix() for p in paths]


# ---------------------------------------------------------------------------
# Expansion
# ---------------------------------------------------------------------------


class TestExpand:
    def test_top_level_pattern(self, project):
        scanner = ContentScanner(["*.html"], project)
        assert _names(scanner.expand(), project) == ["about.html", "index.html"]

    def test_recursive_pattern(self, project):
        scanner = ContentScanner(["./app/src/**/*.rs"], project)
        assert _names(scanner.expand(), project) == [
            "app/src/main.rs",
            "app/src/nested/view.rs",
            "app/src/vendor/lib.rs",
        ]

    def test_exclusion(self, project):
        scanner = ContentScanner(["app/src/**/*.rs", "!**/vendor/**"], project)
        assert _names(scanner.expand(), project) == ["app/src/main.rs", "app/src/nested/view.rs"]

    def test_overlapping_patterns_deduplicate(self, project):
        scanner = ContentScanner(["*.html", "index.html", "**/*.html"], project)
        assert _names(scanner.expand(), project) == ["about.html", "index.html"]

    def test_alternation(self, project):
        scanner = ContentScanner(["*.{html,js}"], project)
        assert _names(scanner.expand(), project) == ["about.html", "index.html", "script.js"]

    def test_missing_base_directory(self, project):
        assert ContentScanner(["server/src/**/*.rs"], project).expand() == []

    def test_fixed_depth_does_not_descend(self, project):
        scanner = ContentScanner(["app/*/*.rs"], project)
        assert _names(scanner.expand(), project) == ["app/src/main.rs"]

    def test_absolute_pattern(self, project):
        pattern = project.resolve().as_posix() + "/*.html"
        scanner = ContentScanner([pattern], project)
        assert _names(scanner.expand(), project) == ["about.html", "index.html"]

    def test_nested_start_under_recursive_pattern_is_walked_once(self, project):
        scanner = ContentScanner(["**/*.html", "app/src/**/*.rs"], project)
        assert scanner._walk_roots(scanner.globs) == {project: None}
        names = _names(scanner.expand(), project)
        assert names == [
            "about.html",
            "app/src/main.rs",
            "app/src/nested/view.rs",
            "app/src/vendor/lib.rs",
            "index.html",
        ]

    def test_bounded_start_keeps_nested_start(self, project):
        scanner = ContentScanner(["*.html", "app/src/**/*.rs"], project)
        assert len(scanner._walk_roots(scanner.globs)) == 2


# ---------------------------------------------------------------------------
# Scanning
# ---------------------------------------------------------------------------


class TestScan:
    def test_candidates_from_all_files(self, project):
        result = ContentScanner(["*.html", "app/src/**/*.rs"], project).scan()
        assert {"p-4", "m-2", "text-lg", "md:flex", "hover:underline"} <= result.candidates
        assert "ignored-class" not in result.candidates

    def test_per_file_sources(self, project):
        result = ContentScanner(["index.html"], project).scan()
        (path,) = result.files
        assert {"p-4", "m-2"} <= result.sources[path]

    def test_raw_content(self, project):
        scanner = ContentScanner([], project, raw_content=[RawContent("p-8 mt-1", extension="rs")])
        result = scanner.scan()
        assert result.files == ()
        assert {"p-8", "mt-1"} <= result.candidates
        assert "<raw:0.rs>" in result.sources

    def test_result_independent_of_worker_count(self, project):
        patterns = ["*.html", "app/src/**/*.rs"]
        one = ContentScanner(patterns, project, max_workers=1).scan()
        many = ContentScanner(patterns, project, max_workers=8).scan()
        assert one.candidates == many.candidates
        assert one.files == many.files

    def test_file_scanned_events(self, project):
        bus = EventBus()
        seen = []
        bus.subscribe(FileScanned, seen.append)
        ContentScanner(["*.html"], project, event_bus=bus).scan()
        assert len(seen) == 2
        assert all(event.candidates > 0 for event in seen)


class TestUnreadableContent:
    def test_binary_file_is_skipped_with_warning(self, project):
        (project / "logo.html").write_bytes(b"\x89PNG\x00\x00p-99")
        bus = EventBus()
        skipped = []
        bus.subscribe(FileSkipped, skipped.append)

        result = ContentScanner(["*.html"], project, event_bus=bus).scan()

        assert "p-99" not in result.candidates
        assert {"p-4", "text-lg"} <= result.candidates
        assert len(result.diagnostics) == 1
        diagnostic = result.diagnostics[0]
        assert diagnostic.severity is Severity.WARNING
        assert diagnostic.rule == "content_readable"
        assert diagnostic.path.endswith("logo.html")
        assert skipped and skipped[0].reason == "binary content"

    def test_warning_is_logged(self, project, caplog):
        (project / "blob.html").write_bytes(b"\x00")
        with caplog.at_level("WARNING", logger="gust.content.scanner"):
            ContentScanner(["*.html"], project).scan()
        assert any("blob.html" in record.getMessage() for record in caplog.records)

    def test_invalid_utf8_is_still_scanned(self, project):
        (project / "latin.html").write_bytes(b'class="p-6" \xe9')
        result = ContentScanner(["latin.html"], project).scan()
        assert "p-6" in result.candidates
        assert result.diagnostics == ()
