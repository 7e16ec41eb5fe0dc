from __future__ import annotations

import re

# Named references seen in the legacy pages. Anything outside this table is
# left untouched by decode_entities.
_NAMED: dict[str, str] = {
    "amp": "&",
    "quot": '"',
    "apos": "'",
    "lt": "<",
    "gt": ">",
    "nbsp": " ",
    "mdash": "—",
    "ndash": "–",
    "hellip": "…",
    "lsquo": "‘",
    "rsquo": "’",
    "ldquo": "“",
    "rdquo": "”",
    "laquo": "«",
    "raquo": "»",
    "rarr": "→",
    "larr": "←",
    "agrave": "à",
    "acirc": "â",
    "ccedil": "ç",
    "eacute": "é",
    "egrave": "è",
    "ecirc": "ê",
    "euml": "ë",
    "icirc": "î",
    "iuml": "ï",
    "ocirc": "ô",
    "ucirc": "û",
    "ugrave": "ù",
    "Agrave": "À",
    "Eacute": "É",
    "Egrave": "È",
}

_REF_RE = re.compile(r"&(#[0-9]+|#[xX][0-9a-fA-F]+|[A-Za-z]+);")


def _replace(match: re.Match[str]) -> str:
    ref = match.group(1)
    if ref.startswith("#"):
        try:
            if ref[1:2] in ("x", "X"):
                return chr(int(ref[2:], 16))
            return chr(int(ref[1:]))
        except (ValueError, OverflowError):
            return match.group(0)
    return _NAMED.get(ref, match.group(0))


def decode_entities(text: str) -> str:
    """
    Replace the fixed named table and numeric character references in one pass.

    Unknown named references survive verbatim.
    """
    return _REF_RE.sub(_replace, text or "")


def escape_minimal(text: str) -> str:
    """Escape the four characters that break HTML text or double-quoted attributes."""
    return (
        str(text or "")
        .replace("&", "&amp;")
        .replace("<", "&lt;")
        .replace(">", "&gt;")
        .replace('"', "&quot;")
    )
