"""Calendar-day keys and month-grid helpers.

A date key is the canonical ``YYYY-MM-DD`` string for a calendar day. It is the
only value used for equality and lookup across the engine; no time-of-day or
zone survives the conversion.
"""

from __future__ import annotations

import calendar as _calendar
import re
from datetime import date, datetime, timedelta

GRID_DAYS = 42
MONTH_NAMES = list(_calendar.month_name)[1:]
DAY_NAMES = ["Sun", "Mon", "Tue", "Wed", "Thu", "Fri", "Sat"]

_KEY_RE = re.compile(r"^\d{4}-\d{2}-\d{2}$")


class InvalidDateKey(ValueError):
    """A value that does not name a calendar day."""


def parse_date_key(key: str) -> date:
    """Parse a ``YYYY-MM-DD`` key, failing fast on anything else."""
    if not isinstance(key, str) or not _KEY_RE.match(key):
        raise InvalidDateKey(f"Invalid date key: {key!r} (expected YYYY-MM-DD)")
    try:
        return date.fromisoformat(key)
    except ValueError as e:
        raise InvalidDateKey(f"Invalid date key: {key!r} ({e})") from e


def as_date(value: date | datetime | str) -> date:
    """Coerce a date, datetime or key to a plain ``date``."""
    if isinstance(value, datetime):
        return value.date()
    if isinstance(value, date):
        return value
    return parse_date_key(value)


def date_key(value: date | datetime | str) -> str:
    """Canonical key for the calendar day of *value*."""
    return as_date(value).isoformat()


def shift_days(value: date | datetime | str, days: int) -> date:
    """The day *days* calendar days after *value* (negative moves back)."""
    return as_date(value) + timedelta(days=days)


def adjacent_keys(value: date | datetime | str) -> tuple[str, str]:
    """Keys of the immediately previous and next calendar days."""
    return date_key(shift_days(value, -1)), date_key(shift_days(value, 1))


def days_in_grid(month_anchor: date | datetime | str) -> list[date]:
    """The 6x7 display grid for the month containing *month_anchor*.

    Starts on the Sunday on or before the 1st and always spans exactly 42
    days, so leading and trailing cells belong to the neighbouring months.
    """
    first = as_date(month_anchor).replace(day=1)
    # date.weekday(): Monday=0 .. Sunday=6
    start = first - timedelta(days=(first.weekday() + 1) % 7)
    return [start + timedelta(days=i) for i in range(GRID_DAYS)]


def shift_month(month_anchor: date | datetime | str, months: int) -> date:
    """Move the anchor by whole months, clamping the day to the month length."""
    d = as_date(month_anchor)
    index = d.year * 12 + (d.month - 1) + months
    year, month = divmod(index, 12)
    month += 1
    day = min(d.day, _calendar.monthrange(year, month)[1])
    return date(year, month, day)


def month_title(month_anchor: date | datetime | str) -> str:
    d = as_date(month_anchor)
    return f"{MONTH_NAMES[d.month - 1]} {d.year}"


def week_dates(today: date | datetime | str) -> list[str]:
    """Keys of the seven days ending with *today*, oldest first."""
    return [date_key(shift_days(today, -offset)) for offset in range(6, -1, -1)]
