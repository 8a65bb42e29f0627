# Rev 0.1.0
"""
Calendar-date helpers for phase dates.

Phase dates are date-only values. The dialog works with local date strings
(`YYYY-MM-DD`, as produced by a date input) and plans store UTC calendar
dates in the same `YYYY-MM-DD` shape. A date picked at local midnight is
re-expressed as the same calendar day in UTC, so the conversion never
shifts a day whatever the user's offset is.
"""
from __future__ import annotations
import re
from datetime import date, datetime, timedelta, timezone
from typing import Optional, Union

DateLike = Union[str, date]

_ISO_DAY = re.compile(r"\d{4}-\d{2}-\d{2}")


def parse_date(value: Optional[str]) -> Optional[date]:
    """Strict `YYYY-MM-DD` parse; None on empty or malformed input."""
    if not value:
        return None
    s = value.strip()
    if not _ISO_DAY.fullmatch(s):
        return None
    try:
        return date.fromisoformat(s)
    except ValueError:
        return None


def local_to_utc(value: Optional[str]) -> Optional[str]:
    d = parse_date(value)
    if d is None:
        return None
    # local midnight of d, carried over as the UTC calendar day d
    return datetime(d.year, d.month, d.day, tzinfo=timezone.utc).date().isoformat()


def utc_to_local(value: Optional[str]) -> str:
    """
    Inverse of local_to_utc. Also accepts a full ISO timestamp (as an API may
    return for a date column) and keeps its UTC calendar day.
    """
    if not value:
        return ""
    s = value.strip()
    d = parse_date(s[:10]) if len(s) > 10 and s[10] in "T " else parse_date(s)
    if d is None:
        return ""
    if len(s) > 10:
        try:
            stamp = datetime.fromisoformat(s.replace("Z", "+00:00"))
        except ValueError:
            # older interpreters reject fractional seconds with Z; keep the parsed day
            return d.isoformat()
        if stamp.tzinfo is not None:
            d = stamp.astimezone(timezone.utc).date()
    return d.isoformat()


def today_utc() -> str:
    return datetime.now(timezone.utc).date().isoformat()


def add_days(value: DateLike, days: int) -> str:
    """Calendar arithmetic on the UTC day; no DST drift since no wall clock is involved."""
    d = value if isinstance(value, date) else parse_date(value)
    if d is None:
        raise ValueError(f"not a calendar date: {value!r}")
    return (d + timedelta(days=days)).isoformat()
