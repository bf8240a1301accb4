import json
import re

PRIMARY_SECTIONS: tuple[str, ...] = ("package", "project", "tool.poetry")

SECTION_HEADER_PATTERN = re.compile(r"^\s*\[\[?\s*([^\]]+?)\s*\]\]?\s*(?:#.*)?$")
VERSION_DECLARATION_PATTERN = re.compile(r'^(\s*version\s*=\s*")([^"]+)(".*)$')
SEMVER_PATTERN = re.compile(
    r"^v?(0|[1-9]\d*)\.(0|[1-9]\d*)\.(0|[1-9]\d*)"
    r"(?:-[0-9A-Za-z-]+(?:\.[0-9A-Za-z-]+)*)?"
    r"(?:\+[0-9A-Za-z-]+(?:\.[0-9A-Za-z-]+)*)?$"
)


def is_semver(version: str) -> bool:
    return bool(SEMVER_PATTERN.match(version or ""))


def _primary_version_line(lines: list[str]) -> int | None:
    # Lines before the first header count as primary; dependency tables never do.
    in_primary = True
    for index, line in enumerate(lines):
        header = SECTION_HEADER_PATTERN.match(line)
        if header:
            in_primary = header.group(1) in PRIMARY_SECTIONS
            continue
        if in_primary and VERSION_DECLARATION_PATTERN.match(line):
            return index
    return None


def extract_toml_version(text: str) -> str | None:
    lines = text.splitlines()
    index = _primary_version_line(lines)
    if index is None:
        return None
    return VERSION_DECLARATION_PATTERN.match(lines[index]).group(2)


def extract_json_version(text: str) -> str | None:
    try:
        payload = json.loads(text)
    except json.JSONDecodeError:
        return None
    if not isinstance(payload, dict):
        return None
    version = payload.get("version")
    if not isinstance(version, str) or not version.strip():
        return None
    return version


def extract_manifest_version(text: str | None, manifest_path: str = "") -> str | None:
    """Return the package version declared in a manifest, or ``None``.

    TOML-shaped manifests are searched only inside their primary package
    section, so ``version`` keys of dependency tables further down are never
    picked up. JSON manifests use the top-level ``version`` key.
    """
    if not text:
        return None
    if manifest_path.lower().endswith(".json"):
        return extract_json_version(text)
    return extract_toml_version(text)


def replace_toml_version(text: str, version: str) -> tuple[str, bool]:
    lines = text.splitlines(keepends=True)
    index = _primary_version_line(lines)
    if index is None:
        return text, False
    line = lines[index]
    ending = line[len(line.rstrip("\r\n")) :]
    match = VERSION_DECLARATION_PATTERN.match(line.rstrip("\r\n"))
    lines[index] = f"{match.group(1)}{version}{match.group(3)}{ending}"
    return "".join(lines), True


def replace_json_version(text: str, version: str) -> tuple[str, bool]:
    payload = json.loads(text)
    if not isinstance(payload, dict):
        return text, False
    payload["version"] = version
    return json.dumps(payload, ensure_ascii=False, indent=2) + "\n", True


def replace_manifest_version(text: str, version: str, manifest_path: str = "") -> tuple[str, bool]:
    if manifest_path.lower().endswith(".json"):
        return replace_json_version(text, version)
    return replace_toml_version(text, version)
