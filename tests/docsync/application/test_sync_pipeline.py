import unittest
from pathlib import Path
from unittest.mock import patch

from src.docsync.application.use_cases.sync_site_content import (
    SyncSiteContentCommand,
    SyncSiteContentUseCase,
)
from src.docsync.application.workflows.sync_pipeline import PipelineConfig, SyncPipeline
from src.docsync.domain.entities import SourceDocument, SyncEntry
from src.docsync.domain.errors import MappingConfigurationError, PageWriteError, SourceAccessError
from src.docsync.domain.mapping import SYNC_TABLE
from src.docsync.infrastructure.sinks.markdown_page_sink import MarkdownPageSink
from src.docsync.infrastructure.sinks.report_sink import JsonReportSink
from src.docsync.infrastructure.sources.RepoDocumentSource import RepoDocumentSource
from tests.utils.tempdir import managed_temp_dir

CARGO_TOML = '[package]\nname = "ghost"\nversion = "1.2.3"\n\n[dependencies.tauri]\nversion = "9.9.9"\n'


def _write(path: Path, text: str) -> None:
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text(text, encoding="utf-8")


def _pipeline(repo: Path, entries=SYNC_TABLE, report_path: Path | None = None) -> SyncPipeline:
    return SyncPipeline(
        entries=entries,
        source=RepoDocumentSource(repo),
        sink=MarkdownPageSink(repo / "website" / "src" / "content" / "docs"),
        report_sink=JsonReportSink(report_path) if report_path else None,
    )


class SyncPipelineTests(unittest.TestCase):
    def test_pipeline_syncs_all_existing_sources(self):
        with managed_temp_dir("sync_pipeline") as repo:
            _write(repo / "CHANGELOG.md", "# Changelog\n\n## 1.2.3\n\n- Fixed things\n")
            _write(repo / "ROADMAP.md", "# Roadmap\n\nNext up.\n")
            _write(repo / "CONTRIBUTING.md", "Open a pull request.\n")
            _write(repo / "SECURITY.md", "# Security Policy\n\nAll data stays local.\n")
            _write(repo / "src-tauri" / "Cargo.toml", CARGO_TOML)

            summary = _pipeline(repo).run(PipelineConfig(manifest_path="src-tauri/Cargo.toml", show_progress=False))

            self.assertEqual(summary.version, "1.2.3")
            self.assertEqual(len(summary.synced), 4)
            self.assertEqual(summary.missing, ())
            docs = repo / "website" / "src" / "content" / "docs"
            changelog = (docs / "reference" / "changelog.md").read_text(encoding="utf-8")
            self.assertEqual(
                changelog,
                '---\ntitle: "Changelog"\n'
                'description: "Release notes and version history for Ghost Agent OS."\n'
                "---\n\n## 1.2.3\n\n- Fixed things\n",
            )
            contributing = (docs / "reference" / "contributing.md").read_text(encoding="utf-8")
            self.assertTrue(contributing.endswith("---\n\nOpen a pull request.\n"))
            privacy = (docs / "reference" / "privacy.md").read_text(encoding="utf-8")
            self.assertIn('title: "Privacy & Security"', privacy)
            self.assertNotIn("# Security Policy", privacy)

    def test_second_run_is_byte_identical(self):
        with managed_temp_dir("sync_pipeline_idempotent") as repo:
            _write(repo / "CHANGELOG.md", "# Changelog\r\n\r\n- a\r\n")
            _write(repo / "ROADMAP.md", "# Roadmap\n\n- b\n")
            docs = repo / "website" / "src" / "content" / "docs"

            first = _pipeline(repo).run(PipelineConfig(show_progress=False))
            first_bytes = {p: (docs / p).read_bytes() for p in ("reference/changelog.md", "reference/roadmap.md")}
            second = _pipeline(repo).run(PipelineConfig(show_progress=False))
            second_bytes = {p: (docs / p).read_bytes() for p in ("reference/changelog.md", "reference/roadmap.md")}

            self.assertEqual(first_bytes, second_bytes)
            self.assertTrue(all(o.changed for o in first.synced))
            self.assertFalse(any(o.changed for o in second.synced))

    def test_missing_source_is_skipped_and_later_entries_still_run(self):
        with managed_temp_dir("sync_pipeline_missing") as repo:
            _write(repo / "SECURITY.md", "# Security\n\nLocal only.\n")
            docs = repo / "website" / "src" / "content" / "docs"
            _write(docs / "reference" / "changelog.md", "hand-made\n")

            summary = _pipeline(repo).run(PipelineConfig(manifest_path="src-tauri/Cargo.toml", show_progress=False))

            self.assertIsNone(summary.version)
            self.assertEqual([o.source_path for o in summary.missing], ["CHANGELOG.md", "ROADMAP.md", "CONTRIBUTING.md"])
            self.assertEqual([o.dest_path for o in summary.synced], ["reference/privacy.md"])
            self.assertEqual((docs / "reference" / "changelog.md").read_text(encoding="utf-8"), "hand-made\n")
            self.assertFalse((docs / "reference" / "roadmap.md").exists())

    def test_duplicate_destination_rejected_before_any_write(self):
        with managed_temp_dir("sync_pipeline_duplicate") as repo:
            _write(repo / "A.md", "# A\n\na\n")
            _write(repo / "B.md", "# B\n\nb\n")
            entries = (
                SyncEntry("A.md", "reference/page.md", "A", "first"),
                SyncEntry("B.md", "reference/page.md", "B", "second"),
            )
            with self.assertRaises(MappingConfigurationError):
                _pipeline(repo, entries=entries).run(PipelineConfig(show_progress=False))
            self.assertFalse((repo / "website").exists())

    def test_write_failure_is_isolated_to_its_entry(self):
        class FlakySink:
            def __init__(self):
                self.pages = {}

            def read_existing(self, dest_path):
                return None

            def write_page(self, dest_path, text):
                if dest_path == "reference/roadmap.md":
                    raise PageWriteError(dest_path, "PermissionError:Permission denied")
                self.pages[dest_path] = text
                return Path(dest_path)

        class MemorySource:
            def read(self, relative_path):
                return SourceDocument(path=relative_path, content=f"# {relative_path}\n\nbody\n")

        sink = FlakySink()
        use_case = SyncSiteContentUseCase(pipeline=SyncPipeline(entries=SYNC_TABLE, source=MemorySource(), sink=sink))
        result = use_case.execute(SyncSiteContentCommand(show_progress=False))

        self.assertEqual(result.failed_entries, ("ROADMAP.md",))
        self.assertEqual(len(result.synced_pages), 3)
        self.assertEqual(result.exit_code, 1)
        self.assertIn("reference/privacy.md", sink.pages)

    def test_source_access_error_does_not_abort_siblings(self):
        class PartlyBrokenSource:
            def read(self, relative_path):
                if relative_path == "CHANGELOG.md":
                    raise SourceAccessError(relative_path, "PermissionError:Permission denied")
                return SourceDocument(path=relative_path, content="body\n")

        class MemorySink:
            def __init__(self):
                self.pages = {}

            def read_existing(self, dest_path):
                return self.pages.get(dest_path)

            def write_page(self, dest_path, text):
                self.pages[dest_path] = text
                return Path(dest_path)

        sink = MemorySink()
        summary = SyncPipeline(entries=SYNC_TABLE, source=PartlyBrokenSource(), sink=sink).run(
            PipelineConfig(show_progress=False)
        )
        self.assertEqual([o.source_path for o in summary.failed], ["CHANGELOG.md"])
        self.assertEqual(len(summary.synced), 3)
        self.assertNotIn("reference/changelog.md", sink.pages)

    def test_report_is_written_when_configured(self):
        with managed_temp_dir("sync_pipeline_report") as repo:
            _write(repo / "ROADMAP.md", "# Roadmap\n\nx\n")
            report_path = repo / "report.json"
            _pipeline(repo, report_path=report_path).run(PipelineConfig(show_progress=False))
            self.assertTrue(report_path.exists())


    def test_unreadable_source_directory_fails_only_its_entry(self):
        with managed_temp_dir("sync_pipeline_locked") as repo:
            _write(repo / "locked" / "A.md", "# A\n\na\n")
            _write(repo / "B.md", "# B\n\nb\n")
            entries = (
                SyncEntry("locked/A.md", "reference/a.md", "A", "first"),
                SyncEntry("B.md", "reference/b.md", "B", "second"),
            )
            real_exists = Path.exists

            def exists(path, *args, **kwargs):
                if path.parent.name == "locked":
                    raise PermissionError(13, "Permission denied", str(path))
                return real_exists(path, *args, **kwargs)

            with patch("pathlib.Path.exists", autospec=True, side_effect=exists):
                summary = _pipeline(repo, entries=entries).run(PipelineConfig(show_progress=False))

            self.assertEqual([o.source_path for o in summary.failed], ["locked/A.md"])
            self.assertIn("PermissionError", summary.failed[0].error)
            self.assertEqual([o.dest_path for o in summary.synced], ["reference/b.md"])
            docs = repo / "website" / "src" / "content" / "docs"
            self.assertTrue((docs / "reference" / "b.md").exists())
            self.assertFalse((docs / "reference" / "a.md").exists())

class SyncUseCaseTests(unittest.TestCase):
    def test_missing_sources_do_not_affect_exit_code(self):
        with managed_temp_dir("sync_use_case") as repo:
            _write(repo / "src-tauri" / "Cargo.toml", CARGO_TOML)
            result = SyncSiteContentUseCase(pipeline=_pipeline(repo)).execute(
                SyncSiteContentCommand(manifest_path="src-tauri/Cargo.toml", show_progress=False)
            )
            self.assertEqual(result.version, "1.2.3")
            self.assertEqual(result.synced_pages, ())
            self.assertEqual(len(result.missing_sources), 4)
            self.assertEqual(result.exit_code, 0)
