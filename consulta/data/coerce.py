"""
Text → typed value coercion for sheet cells.

Every coercer has a default and never raises: a bad cell degrades the
field, not the row.
"""
from __future__ import annotations

import datetime as dt
import re
import warnings
from typing import Optional

import pandas as pd


# ---------------------------------------------------------------------------
# Dates
# ---------------------------------------------------------------------------

# (pattern, order of the captured groups), tried in order
DATE_PATTERNS = [
    (re.compile(r"^(\d{1,2})/(\d{1,2})/(\d{4})$"), "dmy"),   # dd/mm/yyyy
    (re.compile(r"^(\d{4})-(\d{1,2})-(\d{1,2})$"), "ymd"),   # yyyy-mm-dd
    (re.compile(r"^(\d{1,2})-(\d{1,2})-(\d{4})$"), "dmy"),   # dd-mm-yyyy
]

RELATIVE_DATE_WORDS = frozenset({"now", "today", "tomorrow", "yesterday"})


def _positional_date(text: str) -> tuple[bool, Optional[dt.date]]:
    """(matched, date). A structural match on an impossible day yields (True, None)."""
    for pattern, order in DATE_PATTERNS:
        m = pattern.match(text)
        if not m:
            continue
        a, b, c = (int(g) for g in m.groups())
        year, month, day = (a, b, c) if order == "ymd" else (c, b, a)
        try:
            return True, dt.date(year, month, day)
        except ValueError:
            return True, None
    return False, None


def _generic_date(text: str) -> Optional[dt.date]:
    """Last-resort parse for anything else the sheet might hold (ISO timestamps, 'Dec 25 1990')."""
    # pandas resolves these to the current clock
    if text.lower() in RELATIVE_DATE_WORDS:
        return None
    try:
        with warnings.catch_warnings():
            warnings.simplefilter("ignore")
            ts = pd.to_datetime(text, errors="coerce", dayfirst=True)
    except (ValueError, TypeError, OverflowError):
        return None
    if pd.isna(ts):
        return None
    return ts.date()


def parse_date(text: Optional[str]) -> Optional[dt.date]:
    """Parse a sheet date.

    Tries dd/mm/yyyy, yyyy-mm-dd and dd-mm-yyyy positionally, then a generic
    parse. Returns None when nothing works; callers must treat None as
    "unknown", never as today.

    >>> parse_date("25/12/1990")
    datetime.date(1990, 12, 25)
    """
    if not text or not text.strip():
        return None
    cleaned = text.strip()

    matched, value = _positional_date(cleaned)
    if matched:
        return value
    return _generic_date(cleaned)


# ---------------------------------------------------------------------------
# Numbers
# ---------------------------------------------------------------------------

_NON_NUMERIC_RE = re.compile(r"[^\d.,-]")
_LEADING_FLOAT_RE = re.compile(r"^-?(?:\d+\.?\d*|\.\d+)")


def parse_number(text: Optional[str]) -> float:
    """Parse a pt-BR style amount ('R$ 1234,56' → 1234.56). 0.0 when unparseable.

    The first comma is read as the decimal separator, so '1,234' becomes
    1.234 rather than 1234. Only the leading numeric literal counts:
    '1.234,56' → '1.234.56' → 1.234.
    """
    if not text or not text.strip():
        return 0.0
    cleaned = _NON_NUMERIC_RE.sub("", text).replace(",", ".", 1)
    m = _LEADING_FLOAT_RE.match(cleaned)
    if not m:
        return 0.0
    return float(m.group(0))


def parse_int(text: Optional[str]) -> int:
    """Integer codes (agency code); fractional part truncated, 0 when unparseable."""
    return int(parse_number(text))


def digits_only(text: Optional[str]) -> str:
    """'123.456.789-00' → '12345678900'."""
    if not text:
        return ""
    return re.sub(r"\D", "", text)
