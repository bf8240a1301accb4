from pathlib import Path

from src.config.logger_config import logger
from src.docsync.application.ports import PageSinkPort
from src.docsync.domain.errors import PageWriteError
from src.docsync.infrastructure.atomic_file import atomic_write_text


class MarkdownPageSink(PageSinkPort):
    # Pages are derived artifacts: every write replaces the whole file.
    def __init__(self, content_root: str | Path) -> None:
        self.content_root = Path(content_root).resolve()

    def resolve(self, dest_path: str) -> Path:
        try:
            candidate = (self.content_root / dest_path).resolve()
        except (OSError, RuntimeError) as exc:
            raise PageWriteError(dest_path, f"{type(exc).__name__}:{exc}") from exc
        if not candidate.is_relative_to(self.content_root):
            raise PageWriteError(dest_path, f"path escapes content root {self.content_root}")
        return candidate

    def read_existing(self, dest_path: str) -> str | None:
        path = self.resolve(dest_path)
        try:
            if not path.is_file():
                return None
            return path.read_text(encoding="utf-8")
        except UnicodeDecodeError as exc:
            logger.debug("Existing page unreadable, treating as changed: dest_path={}, error={}", dest_path, exc)
            return None
        except OSError as exc:
            raise PageWriteError(dest_path, f"{type(exc).__name__}:{exc.strerror or exc}") from exc

    def write_page(self, dest_path: str, text: str) -> Path:
        path = self.resolve(dest_path)
        try:
            atomic_write_text(path, text)
        except OSError as exc:
            raise PageWriteError(dest_path, f"{type(exc).__name__}:{exc.strerror or exc}") from exc
        return path
