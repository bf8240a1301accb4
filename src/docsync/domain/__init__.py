"""Mapping table, page transform and manifest version rules."""

from src.docsync.domain.entities import DestinationPage, SourceDocument, SyncEntry
from src.docsync.domain.mapping import SYNC_TABLE, validate_mapping
from src.docsync.domain.transform import render_page, strip_leading_heading, wrap_frontmatter
from src.docsync.domain.version import extract_manifest_version

__all__ = [
    "DestinationPage",
    "extract_manifest_version",
    "render_page",
    "SourceDocument",
    "strip_leading_heading",
    "SYNC_TABLE",
    "SyncEntry",
    "validate_mapping",
    "wrap_frontmatter",
]
