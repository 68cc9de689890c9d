from __future__ import annotations

import math
import re
from datetime import date
from typing import Union

from .errors import InvalidInputError

DateLike = Union[date, str]

_DATE_RE = re.compile(r"^\d{4}-\d{2}-\d{2}$")


def parse_ymd(s: str) -> date:
    """
    Parse a strict 'YYYY-MM-DD' civil date.

    The string is read as a calendar date only: no host timezone or clock is
    consulted, so the same string always maps to the same Julian Day Number.
    """
    if not isinstance(s, str) or not _DATE_RE.match(s):
        raise InvalidInputError(f"date must be 'YYYY-MM-DD', got {s!r}")
    y, m, d = map(int, s.split("-"))
    try:
        return date(y, m, d)
    except ValueError as e:
        raise InvalidInputError(f"invalid calendar date {s!r}: {e}") from e


def as_date(d: DateLike) -> date:
    if isinstance(d, date):
        return d
    return parse_ymd(d)


def to_jdn(d: date) -> int:
    """Convert Gregorian date to Julian Day Number (JDN)."""
    y, m, day = d.year, d.month, d.day
    a = (14 - m) // 12
    y2 = y + 4800 - a
    m2 = m + 12 * a - 3
    jdn = day + (153 * m2 + 2) // 5 + 365 * y2 + y2 // 4 - y2 // 100 + y2 // 400 - 32045
    return jdn


def julian_date(d: date, *, lon_deg: float = 0.0) -> float:
    """
    Julian Date of local mean noon on civil date d.

    JD starts at noon, so 12:00 UTC of d is exactly its JDN; local mean noon
    at longitude lon_deg (east positive) is lon_deg/360 of a day earlier.
    """
    return float(to_jdn(d)) - lon_deg / 360.0


# ============================================================
# Decimal hours
# ============================================================

def frac24(h: float) -> float:
    """Wrap hours to [0,24)."""
    y = ((h % 24.0) + 24.0) % 24.0
    # -1e-17 % 24 rounds up to 24.0
    if y >= 24.0:
        y = 0.0
    return y


def shift_hours(h: float, offset_hours: float) -> float:
    """Apply a fixed clock offset (e.g. +3 for UTC+3) and rewrap."""
    return frac24(h + offset_hours)


def format_hours(h: float) -> str:
    """Decimal hours -> 'HH:MM', rounded to the nearest minute."""
    if not math.isfinite(h):
        raise InvalidInputError(f"cannot format non-finite hours {h!r}")
    total = int(round(frac24(h) * 60.0)) % (24 * 60)
    return f"{total // 60:02d}:{total % 60:02d}"
