import json
import re

from src.docsync.domain.entities import DestinationPage, SyncEntry
from src.docsync.domain.mapping import validate_entry

# Single "#" followed by whitespace, on the very first line only. "## ..." never matches.
LEADING_H1_PATTERN = re.compile(r"\A#[ \t]+\S[^\n]*\n+")
FRONTMATTER_DELIMITER = "---"


def normalize_newlines(text: str) -> str:
    return text.replace("\r\n", "\n").replace("\r", "\n")


def strip_leading_heading(text: str) -> str:
    """Remove the document's top-level heading.

    The site generator renders its own heading from the page metadata, so a
    leading ``# Title`` line (and the blank lines after it) would show up twice.
    Only a heading on the first non-blank line is removed; headings further
    down the document are left alone.
    """
    trimmed = normalize_newlines(text).lstrip()
    return LEADING_H1_PATTERN.sub("", trimmed, count=1)


def transform_body(raw: str) -> str:
    return strip_leading_heading(raw).strip()


def quote_scalar(value: str) -> str:
    # A JSON string literal is a valid YAML double-quoted scalar.
    return json.dumps(value, ensure_ascii=False)


def wrap_frontmatter(title: str, description: str, body: str) -> str:
    lines = [
        FRONTMATTER_DELIMITER,
        f"title: {quote_scalar(title)}",
        f"description: {quote_scalar(description)}",
        FRONTMATTER_DELIMITER,
        "",
    ]
    if body:
        lines.append(body)
    return "\n".join(lines) + "\n"


def render_page(entry: SyncEntry, raw: str) -> DestinationPage:
    validate_entry(entry)
    body = transform_body(raw)
    return DestinationPage(
        dest_path=entry.dest_path,
        title=entry.title,
        description=entry.description,
        body=body,
        text=wrap_frontmatter(entry.title, entry.description, body),
    )
