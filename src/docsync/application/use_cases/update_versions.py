import json
from dataclasses import dataclass
from pathlib import Path
from typing import Sequence

from src.config.logger_config import logger
from src.docsync.domain.version import is_semver, replace_manifest_version
from src.docsync.infrastructure.atomic_file import atomic_write_text


@dataclass(frozen=True)
class UpdateVersionsResult:
    version: str
    updated: tuple[str, ...]
    missing: tuple[str, ...]
    unchanged: tuple[str, ...]
    failed: tuple[str, ...] = ()


def update_versions(version: str, repo_root: str | Path, version_files: Sequence[str]) -> UpdateVersionsResult:
    """Stamp ``version`` into every version-bearing file of the repository.

    JSON files get their top-level ``version`` key replaced; TOML manifests get
    only the first declaration of their package section rewritten, leaving
    dependency versions untouched. Every file is parsed before any is written:
    if one cannot be parsed, nothing is rewritten.
    """
    if not is_semver(version):
        raise ValueError(f"Not a semantic version: {version!r}")

    root = Path(repo_root)
    planned: list[tuple[str, Path, str]] = []
    missing: list[str] = []
    unchanged: list[str] = []
    failed: list[str] = []
    logger.info("Updating versions: version={}, files={}", version, list(version_files))
    for relative_path in version_files:
        path = root / relative_path
        if not path.is_file():
            logger.warning("Version file not found, skipped: path={}", relative_path)
            missing.append(relative_path)
            continue
        try:
            original = path.read_text(encoding="utf-8")
            text, replaced = replace_manifest_version(original, version, relative_path)
        except (OSError, UnicodeDecodeError, json.JSONDecodeError) as exc:
            logger.error("Version file unreadable: path={}, error={}", relative_path, exc)
            failed.append(relative_path)
            continue
        if not replaced:
            logger.warning("No version declaration found, file left as is: path={}", relative_path)
            unchanged.append(relative_path)
            continue
        planned.append((relative_path, path, text))

    if failed:
        logger.error("Version update aborted, no file rewritten: failed={}", failed)
        return UpdateVersionsResult(
            version=version,
            updated=(),
            missing=tuple(missing),
            unchanged=tuple(unchanged) + tuple(p for p, _, _ in planned),
            failed=tuple(failed),
        )

    updated: list[str] = []
    for relative_path, path, text in planned:
        atomic_write_text(path, text)
        updated.append(relative_path)
        logger.success("Version updated: path={}, version={}", relative_path, version)

    return UpdateVersionsResult(
        version=version,
        updated=tuple(updated),
        missing=tuple(missing),
        unchanged=tuple(unchanged),
    )
