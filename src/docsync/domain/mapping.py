from pathlib import PurePosixPath
from typing import Sequence

from pathvalidate import ValidationError, validate_filepath

from src.docsync.domain.entities import SyncEntry
from src.docsync.domain.errors import MappingConfigurationError

# Documents that need restructuring across several pages are synced by hand.
MANUAL_SYNC_DOCUMENTS: tuple[str, ...] = ("README.md", "CLAUDE.md")

# Order is execution order and log order.
SYNC_TABLE: tuple[SyncEntry, ...] = (
    SyncEntry(
        source_path="CHANGELOG.md",
        dest_path="reference/changelog.md",
        title="Changelog",
        description="Release notes and version history for Ghost Agent OS.",
    ),
    SyncEntry(
        source_path="ROADMAP.md",
        dest_path="reference/roadmap.md",
        title="Roadmap",
        description="Development roadmap and upcoming features for Ghost Agent OS.",
    ),
    SyncEntry(
        source_path="CONTRIBUTING.md",
        dest_path="reference/contributing.md",
        title="Contributing",
        description="How to contribute to Ghost — guidelines, setup, and development workflow.",
    ),
    SyncEntry(
        source_path="SECURITY.md",
        dest_path="reference/privacy.md",
        title="Privacy & Security",
        description="Ghost's privacy-first architecture — how your data stays local and secure.",
    ),
)


def normalize_dest_path(dest_path: str) -> str:
    return PurePosixPath(dest_path.replace("\\", "/")).as_posix()


def validate_entry(entry: SyncEntry) -> None:
    if not entry.source_path or not entry.source_path.strip():
        raise MappingConfigurationError(f"Mapping entry has an empty source path: dest_path={entry.dest_path}")
    if not entry.title or not entry.title.strip():
        raise MappingConfigurationError(
            f"Mapping entry has an empty title: source_path={entry.source_path}, dest_path={entry.dest_path}"
        )
    if not entry.description or not entry.description.strip():
        raise MappingConfigurationError(
            f"Mapping entry has an empty description: source_path={entry.source_path}, dest_path={entry.dest_path}"
        )
    _validate_relative_path(entry.dest_path, role="destination", entry=entry)
    _validate_relative_path(entry.source_path, role="source", entry=entry)


def validate_mapping(entries: Sequence[SyncEntry]) -> None:
    """Reject the whole table before any file is touched.

    Every entry must carry a non-empty title and description and a relative
    destination inside the content root, and no two entries may share a
    destination page.
    """
    if not entries:
        raise MappingConfigurationError("Mapping table is empty")

    seen: dict[str, SyncEntry] = {}
    for entry in entries:
        validate_entry(entry)
        key = normalize_dest_path(entry.dest_path).lower()
        previous = seen.get(key)
        if previous is not None:
            raise MappingConfigurationError(
                "Duplicate destination path in mapping table: "
                f"dest_path={entry.dest_path}, sources=[{previous.source_path}, {entry.source_path}]"
            )
        seen[key] = entry


def _validate_relative_path(path: str, *, role: str, entry: SyncEntry) -> None:
    if not path or not path.strip():
        raise MappingConfigurationError(f"Mapping entry has an empty {role} path: source_path={entry.source_path}")
    posix = PurePosixPath(path.replace("\\", "/"))
    if posix.is_absolute() or ".." in posix.parts or (posix.parts and posix.parts[0].endswith(":")):
        raise MappingConfigurationError(
            f"Mapping {role} path must stay inside its root: path={path}, source_path={entry.source_path}"
        )
    try:
        validate_filepath(posix.as_posix(), platform="universal")
    except ValidationError as exc:
        raise MappingConfigurationError(
            f"Mapping {role} path is not a valid file path: path={path}, reason={exc}"
        ) from exc
