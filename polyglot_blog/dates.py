from __future__ import annotations

import re
from datetime import date, datetime, timezone
from typing import Any, Literal

from .entities import decode_entities

DateGrammar = Literal["en", "fr", "he"]

_EN_MONTHS = (
    "January",
    "February",
    "March",
    "April",
    "May",
    "June",
    "July",
    "August",
    "September",
    "October",
    "November",
    "December",
)
_FR_MONTHS = (
    "janvier",
    "février",
    "mars",
    "avril",
    "mai",
    "juin",
    "juillet",
    "août",
    "septembre",
    "octobre",
    "novembre",
    "décembre",
)
_HE_MONTHS = (
    "ינואר",
    "פברואר",
    "מרץ",
    "אפריל",
    "מאי",
    "יוני",
    "יולי",
    "אוגוסט",
    "ספטמבר",
    "אוקטובר",
    "נובמבר",
    "דצמבר",
)

MONTH_NAMES: dict[str, tuple[str, ...]] = {
    "en": _EN_MONTHS,
    "fr": _FR_MONTHS,
    "he": _HE_MONTHS,
}

# Hebrew month names are matched exactly; the Latin grammars fold case.
_CASE_FOLDED = {"en": True, "fr": True, "he": False}

_ISO_DATE_RE = re.compile(r"^\d{4}-\d{2}-\d{2}$", re.ASCII)
_DIGITS_RE = re.compile(r"^\d+$", re.ASCII)


def _month_lookup(grammar: str) -> dict[str, int]:
    folded = _CASE_FOLDED[grammar]
    return {
        (name.casefold() if folded else name): idx
        for idx, name in enumerate(MONTH_NAMES[grammar], start=1)
    }


_LOOKUPS: dict[str, dict[str, int]] = {g: _month_lookup(g) for g in MONTH_NAMES}


def _check_grammar(grammar: str) -> str:
    if grammar not in MONTH_NAMES:
        raise ValueError(f"Unsupported date grammar: {grammar!r}")
    return grammar


def looks_like_iso_date(text: str) -> bool:
    return bool(_ISO_DATE_RE.match(text or ""))


def parse_date(grammar: DateGrammar | str, text: str) -> str:
    """
    Parse a localized long-form date into an ISO ``YYYY-MM-DD`` string.

    English reads ``<Month> <Day>, <Year>``; French and Hebrew read
    ``<Day> <Month> <Year>``. An unknown month name falls back to January.
    Input that does not split into three tokens (or has a non-numeric day or
    year) is returned decoded but otherwise verbatim.
    """
    g = _check_grammar(grammar)
    decoded = decode_entities(text).strip()
    parts = decoded.replace(",", "", 1).split()
    if len(parts) != 3:
        return decoded

    if g == "en":
        month_token, day, year = parts
    else:
        day, month_token, year = parts

    if not (_DIGITS_RE.match(day) and _DIGITS_RE.match(year)):
        return decoded

    key = month_token.casefold() if _CASE_FOLDED[g] else month_token
    month = _LOOKUPS[g].get(key, 1)
    return f"{year}-{month:02d}-{day.zfill(2)}"


def coerce_date(value: Any) -> date:
    """
    Normalize a YAML-typed date, a datetime or an ISO string to ``date``.

    Aware datetimes are read in UTC so a post never moves to a neighbouring day.
    """
    if isinstance(value, datetime):
        if value.tzinfo is not None:
            value = value.astimezone(timezone.utc)
        return value.date()
    if isinstance(value, date):
        return value
    if isinstance(value, str):
        text = value.strip()
        if looks_like_iso_date(text):
            year, month, day = (int(part) for part in text.split("-"))
            return date(year, month, day)
        raise ValueError(f"Not an ISO calendar date: {value!r}")
    raise ValueError(f"Unsupported date value: {value!r}")


def format_date(value: Any, grammar: DateGrammar | str) -> str:
    g = _check_grammar(grammar)
    d = coerce_date(value)
    month = MONTH_NAMES[g][d.month - 1]
    if g == "en":
        return f"{month} {d.day}, {d.year}"
    return f"{d.day} {month} {d.year}"
