from pathlib import Path
from typing import Sequence

from src.config.logger_config import add_file_sink, logger
from src.config.settings import DEFAULT_CONTENT_ROOT, DEFAULT_MANIFEST_PATH, SyncSettings
from src.docsync.application.use_cases.sync_site_content import (
    SyncSiteContentCommand,
    SyncSiteContentResult,
    SyncSiteContentUseCase,
)
from src.docsync.application.workflows.sync_pipeline import SyncPipeline
from src.docsync.domain.entities import SyncEntry
from src.docsync.domain.mapping import SYNC_TABLE
from src.docsync.infrastructure.sinks.markdown_page_sink import MarkdownPageSink
from src.docsync.infrastructure.sinks.report_sink import JsonReportSink
from src.docsync.infrastructure.sources.RepoDocumentSource import RepoDocumentSource


def run_sync(
    repo_root: str | Path | None = None,
    content_root: str = DEFAULT_CONTENT_ROOT,
    manifest_path: str | None = DEFAULT_MANIFEST_PATH,
    entries: Sequence[SyncEntry] = SYNC_TABLE,
    output_report_path: str | None = None,
    log_dir: str | None = None,
    show_progress: bool = True,
) -> SyncSiteContentResult:
    settings = SyncSettings.from_repo_root(repo_root, content_root=content_root, manifest_path=manifest_path)
    if log_dir is not None:
        add_file_sink(log_dir)

    logger.debug(
        "Sync adapter configured: repo_root={}, content_dir={}, manifest_path={}",
        str(settings.repo_root),
        str(settings.content_dir),
        settings.manifest_path,
    )
    pipeline = SyncPipeline(
        entries=entries,
        source=RepoDocumentSource(settings.repo_root),
        sink=MarkdownPageSink(settings.content_dir),
        report_sink=JsonReportSink(output_report_path) if output_report_path else None,
    )
    use_case = SyncSiteContentUseCase(pipeline=pipeline)
    return use_case.execute(
        SyncSiteContentCommand(
            manifest_path=settings.manifest_path,
            show_progress=show_progress,
        )
    )
