"""World clock rows for a fixed set of cities."""

from __future__ import annotations

from datetime import datetime
from typing import Any, Sequence
from zoneinfo import ZoneInfo, ZoneInfoNotFoundError

from lifeboard.models import CityTime


DEFAULT_CITIES = [
    {"city": "New York", "timezone": "America/New_York"},
    {"city": "London", "timezone": "Europe/London"},
    {"city": "Tokyo", "timezone": "Asia/Tokyo"},
    {"city": "Sydney", "timezone": "Australia/Sydney"},
    {"city": "Dubai", "timezone": "Asia/Dubai"},
    {"city": "Los Angeles", "timezone": "America/Los_Angeles"},
]


def format_offset(minutes: int) -> str:
    """'GMT', 'GMT+9', 'GMT-4', 'GMT+5:30'."""
    if minutes == 0:
        return "GMT"
    sign = "+" if minutes > 0 else "-"
    hours, mins = divmod(abs(minutes), 60)
    if mins:
        return f"GMT{sign}{hours}:{mins:02d}"
    return f"GMT{sign}{hours}"


def city_time(now: datetime, city: str, tz_name: str) -> CityTime:
    try:
        tz = ZoneInfo(tz_name)
    except (ZoneInfoNotFoundError, ValueError) as e:
        raise ValueError(f"Unknown timezone for {city}: {tz_name!r}") from e
    local = now.astimezone(tz)
    offset = local.utcoffset()
    minutes = int(offset.total_seconds() // 60) if offset is not None else 0
    return CityTime(
        city=city,
        timezone=tz_name,
        time=local.strftime("%H:%M"),
        date=local.date().isoformat(),
        offset=format_offset(minutes),
        utc_offset_minutes=minutes,
    )


def world_clock(now: datetime, cities: Sequence[dict[str, Any]] | None = None) -> list[CityTime]:
    """Local time in each city at the aware instant *now*."""
    if now.tzinfo is None or now.utcoffset() is None:
        raise ValueError("world_clock needs a timezone-aware datetime")
    if cities is None:
        cities = DEFAULT_CITIES
    if not isinstance(cities, (list, tuple)):
        raise ValueError(f"world_clock must be a list of cities, got {cities!r}")
    rows = []
    for entry in cities or DEFAULT_CITIES:
        if not isinstance(entry, dict):
            raise ValueError(f"Invalid world_clock entry: {entry!r}")
        rows.append(city_time(now, str(entry.get("city", "")), str(entry.get("timezone", ""))))
    return rows
