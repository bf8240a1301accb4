"""Filesystem adapters for the sync pipeline."""

from src.docsync.infrastructure.sinks.markdown_page_sink import MarkdownPageSink
from src.docsync.infrastructure.sinks.report_sink import JsonReportSink
from src.docsync.infrastructure.sources.RepoDocumentSource import RepoDocumentSource

__all__ = ["JsonReportSink", "MarkdownPageSink", "RepoDocumentSource"]
