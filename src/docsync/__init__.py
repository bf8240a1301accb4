"""Documentation site content sync."""

from src.docsync.application.use_cases.sync_site_content import SyncSiteContentResult
from src.docsync.sync import run_sync

__all__ = ["run_sync", "SyncSiteContentResult"]
