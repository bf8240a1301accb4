from dataclasses import dataclass
from datetime import datetime, timezone
from time import perf_counter
from typing import Sequence

from tqdm import tqdm

from src.config.logger_config import logger
from src.docsync.application.contracts import SyncOutcome, SyncReportRecord
from src.docsync.application.ports import DocumentSourcePort, PageSinkPort, ReportSinkPort
from src.docsync.domain.content_hash import compute_content_hash
from src.docsync.domain.entities import SyncEntry
from src.docsync.domain.errors import PageWriteError, SourceAccessError
from src.docsync.domain.mapping import MANUAL_SYNC_DOCUMENTS, validate_mapping
from src.docsync.domain.transform import render_page
from src.docsync.domain.version import extract_manifest_version


@dataclass(frozen=True)
class PipelineConfig:
    manifest_path: str | None = None
    show_progress: bool = True


@dataclass(frozen=True)
class PipelineSummary:
    version: str | None
    outcomes: tuple[SyncOutcome, ...]
    duration_ms: int
    generated_at: str

    @property
    def synced(self) -> tuple[SyncOutcome, ...]:
        return tuple(o for o in self.outcomes if o.status == "synced")

    @property
    def missing(self) -> tuple[SyncOutcome, ...]:
        return tuple(o for o in self.outcomes if o.status == "missing")

    @property
    def failed(self) -> tuple[SyncOutcome, ...]:
        return tuple(o for o in self.outcomes if o.status == "failed")


class SyncPipeline:
    def __init__(
        self,
        entries: Sequence[SyncEntry],
        source: DocumentSourcePort,
        sink: PageSinkPort,
        report_sink: ReportSinkPort | None = None,
    ) -> None:
        self.entries = tuple(entries)
        self.source = source
        self.sink = sink
        self.report_sink = report_sink

    def run(self, config: PipelineConfig) -> PipelineSummary:
        # Raises MappingConfigurationError before any destination is touched.
        validate_mapping(self.entries)

        started = perf_counter()
        logger.info("Syncing website content from source files: entries={}", len(self.entries))
        version = self._read_version(config.manifest_path)

        outcomes: list[SyncOutcome] = []
        try:
            for entry in tqdm(
                self.entries,
                total=len(self.entries),
                desc="Sync pages",
                unit="page",
                leave=False,
                disable=not config.show_progress,
            ):
                outcomes.append(self._sync_entry(entry))
        finally:
            summary = PipelineSummary(
                version=version,
                outcomes=tuple(outcomes),
                duration_ms=int((perf_counter() - started) * 1000),
                generated_at=datetime.now(timezone.utc).isoformat(),
            )
            self._log_summary(summary)

        if self.report_sink is not None:
            self.report_sink.write_report(
                SyncReportRecord(
                    version=summary.version,
                    total_entries=len(self.entries),
                    synced_count=len(summary.synced),
                    missing_count=len(summary.missing),
                    failed_count=len(summary.failed),
                    outcomes=summary.outcomes,
                    duration_ms=summary.duration_ms,
                    generated_at=summary.generated_at,
                )
            )
        return summary

    def _read_version(self, manifest_path: str | None) -> str | None:
        if not manifest_path:
            return None
        try:
            manifest = self.source.read(manifest_path)
        except SourceAccessError as exc:
            logger.warning("Manifest unreadable, version unknown: manifest_path={}, error={}", manifest_path, exc.reason)
            return None
        version = extract_manifest_version(manifest.content, manifest_path)
        if version is None:
            logger.info("Version not found: manifest_path={}", manifest_path)
        else:
            logger.info("Current version: {}", version)
        return version

    def _sync_entry(self, entry: SyncEntry) -> SyncOutcome:
        try:
            document = self.source.read(entry.source_path)
        except SourceAccessError as exc:
            logger.error(
                "Source read failed, entry skipped: source_path={}, dest_path={}, error={}",
                entry.source_path,
                entry.dest_path,
                exc.reason,
            )
            return SyncOutcome(entry.source_path, entry.dest_path, "failed", error=str(exc))

        if not document.exists:
            logger.warning(
                "Source file not found, entry skipped: source_path={}, dest_path={}",
                entry.source_path,
                entry.dest_path,
            )
            return SyncOutcome(entry.source_path, entry.dest_path, "missing")

        page = render_page(entry, document.content)
        try:
            previous = self.sink.read_existing(entry.dest_path)
            written = self.sink.write_page(entry.dest_path, page.text)
        except PageWriteError as exc:
            logger.error(
                "Page write failed, entry skipped: source_path={}, dest_path={}, error={}",
                entry.source_path,
                entry.dest_path,
                exc.reason,
            )
            return SyncOutcome(entry.source_path, entry.dest_path, "failed", error=str(exc))

        changed = previous is None or compute_content_hash(previous) != compute_content_hash(page.text)
        logger.success("Synced: source_path={} -> dest_path={}", entry.source_path, entry.dest_path)
        logger.debug("Page written: dest_path={}, written_path={}, changed={}", entry.dest_path, str(written), changed)
        return SyncOutcome(
            entry.source_path,
            entry.dest_path,
            "synced",
            written_path=str(written),
            changed=changed,
        )

    @staticmethod
    def _log_summary(summary: PipelineSummary) -> None:
        logger.info(
            "Content sync complete: version={}, synced={}, missing={}, failed={}, duration_ms={}",
            summary.version or "unknown",
            [o.dest_path for o in summary.synced],
            [o.source_path for o in summary.missing],
            [o.source_path for o in summary.failed],
            summary.duration_ms,
        )
        logger.info(
            "Not synced automatically, update by hand: documents={}",
            list(MANUAL_SYNC_DOCUMENTS),
        )
