"""
Daily Lyrics - Date Helpers

Every date in the site travels as a ``YYYY/MM/DD`` string: in URLs, in the
``songs.date`` column and in the navigation links.  These helpers convert
between that form and :class:`datetime.date`.
"""

import re
from datetime import date, datetime, timedelta
from typing import Optional, Tuple
from zoneinfo import ZoneInfo

_SEGMENT_RE = re.compile(r"[0-9]{1,4}")


def join_segments(yyyy: str, mm: str, dd: str) -> str:
    """Build the canonical date string from raw URL segments."""
    return f"{yyyy}/{mm}/{dd}"


def format_date(value: date) -> str:
    """Format a date as ``YYYY/MM/DD`` (zero-padded)."""
    return f"{value.year:04d}/{value.month:02d}/{value.day:02d}"


def parse_date(text: str) -> Optional[date]:
    """
    Parse a ``YYYY/MM/DD`` string into a date.

    Segments do not need to be zero-padded (``2024/2/3`` is accepted) but
    must be plain digits.  Returns None when the string is malformed or
    names a day that does not exist (``2023/02/30``, ``2023/13/40``).
    """
    parts = text.split("/")
    if len(parts) != 3 or not all(_SEGMENT_RE.fullmatch(p) for p in parts):
        return None

    year, month, day = (int(p) for p in parts)
    try:
        return date(year, month, day)
    except ValueError:
        return None


def shift(value: date, days: int) -> date:
    return value + timedelta(days=days)


def adjacent_dates(text: str) -> Tuple[Optional[str], Optional[str]]:
    """
    Return the formatted previous and next day for a date string.

    Both are None if the string does not parse.  A neighbour that falls
    outside the representable range is also None.
    """
    current = parse_date(text)
    if current is None:
        return None, None

    try:
        prev_day = format_date(shift(current, -1))
    except OverflowError:
        prev_day = None
    try:
        next_day = format_date(shift(current, 1))
    except OverflowError:
        next_day = None
    return prev_day, next_day


def today(tz_name: str, now: Optional[datetime] = None) -> date:
    """
    Return the current calendar date in the named time zone.

    ``now`` may be any timezone-aware datetime; it is converted into
    ``tz_name`` before the date is taken.
    """
    zone = ZoneInfo(tz_name)
    if now is None:
        return datetime.now(zone).date()
    return now.astimezone(zone).date()
