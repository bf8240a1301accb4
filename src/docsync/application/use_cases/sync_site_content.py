from dataclasses import dataclass

from src.config.logger_config import logger
from src.docsync.application.workflows.sync_pipeline import (
    PipelineConfig,
    PipelineSummary,
    SyncPipeline,
)

EXIT_OK = 0
EXIT_ENTRY_FAILED = 1
EXIT_CONFIGURATION_ERROR = 2


@dataclass(frozen=True)
class SyncSiteContentCommand:
    manifest_path: str | None = None
    show_progress: bool = True


@dataclass(frozen=True)
class SyncSiteContentResult:
    version: str | None
    synced_pages: tuple[str, ...]
    missing_sources: tuple[str, ...]
    failed_entries: tuple[str, ...]
    changed_pages: tuple[str, ...]

    @property
    def exit_code(self) -> int:
        return EXIT_ENTRY_FAILED if self.failed_entries else EXIT_OK


class SyncSiteContentUseCase:
    def __init__(self, pipeline: SyncPipeline) -> None:
        self.pipeline = pipeline

    def execute(self, command: SyncSiteContentCommand) -> SyncSiteContentResult:
        logger.debug(
            "Sync use case started: manifest_path={}, entries={}",
            command.manifest_path,
            len(self.pipeline.entries),
        )
        summary: PipelineSummary = self.pipeline.run(
            PipelineConfig(
                manifest_path=command.manifest_path,
                show_progress=command.show_progress,
            )
        )
        return SyncSiteContentResult(
            version=summary.version,
            synced_pages=tuple(o.dest_path for o in summary.synced),
            missing_sources=tuple(o.source_path for o in summary.missing),
            failed_entries=tuple(o.source_path for o in summary.failed),
            changed_pages=tuple(o.dest_path for o in summary.synced if o.changed),
        )
