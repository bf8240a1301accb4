# Repository layout shared by the sync and version-bump entry points.

from dataclasses import dataclass, field
from pathlib import Path

DEFAULT_CONTENT_ROOT = "website/src/content/docs"
DEFAULT_MANIFEST_PATH = "src-tauri/Cargo.toml"
DEFAULT_VERSION_FILES: tuple[str, ...] = (
    "package.json",
    "src-tauri/tauri.conf.json",
    "src-tauri/Cargo.toml",
)


@dataclass(frozen=True)
class SyncSettings:
    repo_root: Path
    content_root: str = DEFAULT_CONTENT_ROOT
    manifest_path: str | None = DEFAULT_MANIFEST_PATH
    version_files: tuple[str, ...] = field(default=DEFAULT_VERSION_FILES)

    @property
    def content_dir(self) -> Path:
        return self.repo_root / self.content_root

    @classmethod
    def from_repo_root(cls, repo_root: str | Path | None = None, **overrides) -> "SyncSettings":
        root = Path(repo_root) if repo_root is not None else Path.cwd()
        return cls(repo_root=root.resolve(), **overrides)
