from dataclasses import dataclass


@dataclass(frozen=True)
class SyncEntry:
    source_path: str
    dest_path: str
    title: str
    description: str


@dataclass(frozen=True)
class SourceDocument:
    path: str
    content: str | None

    @property
    def exists(self) -> bool:
        return self.content is not None


@dataclass(frozen=True)
class DestinationPage:
    dest_path: str
    title: str
    description: str
    body: str
    text: str
