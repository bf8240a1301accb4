from pathlib import Path

from src.config.logger_config import logger
from src.docsync.application.ports import DocumentSourcePort
from src.docsync.domain.entities import SourceDocument
from src.docsync.domain.errors import SourceAccessError


class RepoDocumentSource(DocumentSourcePort):
    def __init__(self, repo_root: str | Path) -> None:
        self.repo_root = Path(repo_root).resolve()

    def resolve(self, relative_path: str) -> Path:
        try:
            candidate = (self.repo_root / relative_path).resolve()
        except (OSError, RuntimeError) as exc:
            raise SourceAccessError(relative_path, f"{type(exc).__name__}:{exc}") from exc
        if not candidate.is_relative_to(self.repo_root):
            raise SourceAccessError(relative_path, f"path escapes repository root {self.repo_root}")
        return candidate

    def read(self, relative_path: str) -> SourceDocument:
        path = self.resolve(relative_path)
        try:
            if not path.exists():
                logger.debug("Source absent: source_path={}, resolved_path={}", relative_path, str(path))
                return SourceDocument(path=relative_path, content=None)
            if not path.is_file():
                raise SourceAccessError(relative_path, "not a regular file")
            content = path.read_text(encoding="utf-8")
        except UnicodeDecodeError as exc:
            raise SourceAccessError(relative_path, f"not valid utf-8 text ({exc.reason})") from exc
        except OSError as exc:
            raise SourceAccessError(relative_path, f"{type(exc).__name__}:{exc.strerror or exc}") from exc
        logger.debug("Source loaded: source_path={}, chars={}", relative_path, len(content))
        return SourceDocument(path=relative_path, content=content)
