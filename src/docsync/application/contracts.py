from dataclasses import dataclass
from typing import Any, Literal

SyncStatus = Literal["synced", "missing", "failed"]


@dataclass(frozen=True)
class SyncOutcome:
    source_path: str
    dest_path: str
    status: SyncStatus
    written_path: str | None = None
    changed: bool = False
    error: str | None = None

    def to_dict(self) -> dict[str, Any]:
        return {
            "source_path": self.source_path,
            "dest_path": self.dest_path,
            "status": self.status,
            "written_path": self.written_path,
            "changed": self.changed,
            "error": self.error,
        }


@dataclass(frozen=True)
class SyncReportRecord:
    version: str | None
    total_entries: int
    synced_count: int
    missing_count: int
    failed_count: int
    outcomes: tuple[SyncOutcome, ...]
    duration_ms: int
    generated_at: str

    def to_dict(self) -> dict[str, Any]:
        return {
            "version": self.version,
            "total_entries": self.total_entries,
            "synced_count": self.synced_count,
            "missing_count": self.missing_count,
            "failed_count": self.failed_count,
            "outcomes": [outcome.to_dict() for outcome in self.outcomes],
            "duration_ms": self.duration_ms,
            "generated_at": self.generated_at,
        }
