"""Mood scale and averages.

Two windows exist and are kept apart on purpose: ``windowed_average`` takes
the most recently *added* entries, ``calendar_window_average`` takes the
entries whose date falls in the last N calendar days.
"""

from __future__ import annotations

from datetime import date, timedelta
from typing import Iterable, Sequence

from lifeboard.dates import as_date, date_key
from lifeboard.models import MoodEntry, round_half_up

MOOD_SCALE = {"terrible": 1, "bad": 2, "neutral": 3, "good": 4, "excellent": 5}
MAX_MOOD = 5


def mood_value(label: str) -> int:
    try:
        return MOOD_SCALE[label]
    except KeyError:
        raise ValueError(f"Unknown mood: {label!r}") from None


def average_mood(entries: Iterable[MoodEntry]) -> float | None:
    """Unrounded mean of the numeric scale, or None when there are no entries."""
    values = [mood_value(m.mood) for m in entries]
    if not values:
        return None
    return sum(values) / len(values)


def windowed_average(mood_entries: Sequence[MoodEntry], window_size: int = 7) -> float:
    """Mean of the last *window_size* entries by insertion order, one decimal."""
    if window_size <= 0:
        return 0.0
    avg = average_mood(list(mood_entries)[-window_size:])
    if avg is None:
        return 0.0
    return round_half_up(avg, 1)


def calendar_window_average(mood_entries: Iterable[MoodEntry], today: date, days: int = 7) -> float:
    """Mean of entries dated within the last *days* days up to today, one decimal."""
    end = as_date(today)
    start_key = date_key(end - timedelta(days=days))
    end_key = date_key(end)
    avg = average_mood(m for m in mood_entries if start_key <= m.date <= end_key)
    if avg is None:
        return 0.0
    return round_half_up(avg, 1)


def mood_for_date(mood_entries: Iterable[MoodEntry], day: date | str) -> MoodEntry | None:
    """The entry for *day*; with duplicates the last one supplied wins."""
    key = date_key(day)
    found = None
    for entry in mood_entries:
        if entry.date == key:
            found = entry
    return found
