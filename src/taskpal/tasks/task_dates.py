# src/taskpal/tasks/task_dates.py

"""
Date/time parsing and formatting for Deadline and Event tasks.

Input shapes (user-typed and stored):
- "YYYY-M-D"        -> date only
- "YYYY-M-D HHmm"   -> date + 24h time

Month and day may be one or two digits; time is always four digits.
"""

from __future__ import annotations

import re
from datetime import date, datetime, time
from typing import Final

from .task_errors import InvalidDateFormatError, TimeRequiredError

DEADLINE_DEFAULT_TIME: Final[time] = time(23, 59)

_HAS_TIME_RE = re.compile(r".*\s[0-9]{4}$")
_DATE_RE = re.compile(r"^([0-9]{4})-([0-9]{1,2})-([0-9]{1,2})$")
_DATETIME_RE = re.compile(r"^([0-9]{4})-([0-9]{1,2})-([0-9]{1,2}) ([0-9]{2})([0-9]{2})$")


def _match_date(text: str) -> date | None:
    m = _DATE_RE.match(text)
    if not m:
        return None
    try:
        return date(int(m.group(1)), int(m.group(2)), int(m.group(3)))
    except ValueError:
        return None


def _match_datetime(text: str) -> datetime | None:
    m = _DATETIME_RE.match(text)
    if not m:
        return None
    year, month, day, hour, minute = (int(g) for g in m.groups())
    try:
        return datetime(year, month, day, hour, minute)
    except ValueError:
        return None


def has_time_part(text: str) -> bool:
    """True if the trimmed input ends with whitespace followed by exactly four digits."""
    return bool(_HAS_TIME_RE.match(text.strip()))


def parse_deadline_input(text: str) -> datetime:
    """Parse a deadline; a date-only value resolves to 23:59 of that day."""
    trimmed = text.strip()
    if has_time_part(trimmed):
        dt = _match_datetime(trimmed)
        if dt is None:
            raise InvalidDateFormatError(trimmed)
        return dt

    d = _match_date(trimmed)
    if d is None:
        raise InvalidDateFormatError(trimmed)
    return datetime.combine(d, DEADLINE_DEFAULT_TIME)


def parse_event_input(text: str) -> datetime:
    """Parse an event boundary; the time of day is mandatory."""
    trimmed = text.strip()
    if has_time_part(trimmed):
        dt = _match_datetime(trimmed)
        if dt is None:
            raise InvalidDateFormatError(trimmed, expected="yyyy-mm-dd HHmm")
        return dt

    if _match_date(trimmed) is not None:
        raise TimeRequiredError(trimmed)
    raise InvalidDateFormatError(trimmed, expected="yyyy-mm-dd HHmm")


def parse_storage(text: str) -> datetime | None:
    """Parse the storage format ("yyyy-M-d HHmm"). Returns None if malformed."""
    return _match_datetime(text.strip())


def format_storage(dt: datetime) -> str:
    return f"{dt.year}-{dt.month}-{dt.day} {dt:%H%M}"


def format_display(dt: datetime) -> str:
    """Human format, e.g. "Dec 01 2025 11:59pm"."""
    hour12 = dt.hour % 12 or 12
    suffix = "am" if dt.hour < 12 else "pm"
    return f"{dt:%b %d %Y} {hour12}:{dt:%M}{suffix}"
