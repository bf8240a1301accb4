from pathlib import Path
from typing import Protocol, runtime_checkable

from src.docsync.application.contracts import SyncReportRecord
from src.docsync.domain.entities import SourceDocument


@runtime_checkable
class DocumentSourcePort(Protocol):
    def read(self, relative_path: str) -> SourceDocument: ...
    """Read a repository-relative document; absence is not an error."""


@runtime_checkable
class PageSinkPort(Protocol):
    def read_existing(self, dest_path: str) -> str | None: ...
    """Return the current destination content, if any."""

    def write_page(self, dest_path: str, text: str) -> Path: ...
    """Replace the destination page in full and return the written path."""


@runtime_checkable
class ReportSinkPort(Protocol):
    def write_report(self, report: SyncReportRecord) -> None: ...
    """Persist aggregate run report."""
