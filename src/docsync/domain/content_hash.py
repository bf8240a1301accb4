import hashlib


def compute_content_hash(content: str | None) -> str:
    normalized = (content or "").replace("\r\n", "\n").replace("\r", "\n")
    return hashlib.sha1(normalized.encode("utf-8")).hexdigest()
