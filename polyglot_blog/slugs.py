from __future__ import annotations

import re

MAX_SLUG_LENGTH = 60
FALLBACK_SLUG = "post"

_DISALLOWED_RE = re.compile(r"[^\w\s-]", re.ASCII)
_WHITESPACE_RE = re.compile(r"\s+", re.ASCII)
_HYPHENS_RE = re.compile(r"-+")


def slugify(text: str) -> str:
    value = (text or "").lower()
    value = _DISALLOWED_RE.sub("", value)
    value = _WHITESPACE_RE.sub("-", value)
    value = _HYPHENS_RE.sub("-", value).strip("-")
    value = value[:MAX_SLUG_LENGTH].strip("-")
    return value or FALLBACK_SLUG
