import sys
from pathlib import Path

from src.config.logger_config import logger
from src.config.settings import SyncSettings
from src.docsync.application.use_cases.sync_site_content import (
    EXIT_CONFIGURATION_ERROR,
    EXIT_ENTRY_FAILED,
    EXIT_OK,
)
from src.docsync.application.use_cases.update_versions import update_versions


def main(argv: list[str] | None = None, repo_root: str | Path | None = None) -> int:
    args = sys.argv[1:] if argv is None else argv
    if len(args) != 1:
        logger.error("Usage: python -m src.docsync.update_versions <version>")
        return EXIT_CONFIGURATION_ERROR

    settings = SyncSettings.from_repo_root(repo_root)
    try:
        result = update_versions(args[0], settings.repo_root, settings.version_files)
    except ValueError as exc:
        logger.error("Version update rejected: {}", exc)
        return EXIT_CONFIGURATION_ERROR
    if result.failed:
        return EXIT_ENTRY_FAILED
    logger.info("All versions updated: version={}, updated={}", result.version, list(result.updated))
    return EXIT_OK


# python -m src.docsync.update_versions 1.2.3
if __name__ == "__main__":
    raise SystemExit(main())
