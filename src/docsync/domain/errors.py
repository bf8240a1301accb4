class DocSyncError(Exception):
    """Base error for the documentation sync pipeline."""


class MappingConfigurationError(DocSyncError):
    """The static mapping table is invalid; the run must not write anything."""


class SourceAccessError(DocSyncError):
    def __init__(self, source_path: str, reason: str) -> None:
        super().__init__(f"Cannot read source {source_path}: {reason}")
        self.source_path = source_path
        self.reason = reason


class PageWriteError(DocSyncError):
    def __init__(self, dest_path: str, reason: str) -> None:
        super().__init__(f"Cannot write page {dest_path}: {reason}")
        self.dest_path = dest_path
        self.reason = reason
