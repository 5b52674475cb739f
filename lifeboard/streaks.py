"""Habit streak computation.

A streak is the current unbroken run of completed days ending today. It is
not the longest run in history: unchecking today drops the streak to
whatever run ends yesterday, and the next toggle recomputes it from scratch.
"""

from __future__ import annotations

from dataclasses import replace
from datetime import date, timedelta
from typing import Iterable

from lifeboard.dates import as_date, date_key, parse_date_key
from lifeboard.models import HabitEntry


def current_streak(completed_dates: Iterable[str], today: date) -> int:
    """Count consecutive completed days ending at *today*.

    Keys after today are ignored. A missing today means a streak of 0.
    """
    days = sorted({parse_date_key(k) for k in completed_dates}, reverse=True)
    expected = as_date(today)
    streak = 0
    for day in days:
        if day > expected:
            continue
        if day != expected:
            break
        streak += 1
        expected -= timedelta(days=1)
    return streak


def completed_on(habit: HabitEntry, day: date | str) -> bool:
    return date_key(day) in habit.completed_dates


def toggle_completion(habit: HabitEntry, day: date | str, today: date) -> HabitEntry:
    """Return *habit* with *day* checked or unchecked and its streak recomputed."""
    key = date_key(day)
    if key in habit.completed_dates:
        dates = [k for k in habit.completed_dates if k != key]
    else:
        dates = [*habit.completed_dates, key]
    dates = sorted(set(dates))
    return replace(
        habit,
        completed_dates=tuple(dates),
        streak=current_streak(dates, today),
    )


def daily_progress(habits: Iterable[HabitEntry], day: date | str) -> tuple[int, int]:
    """(habits completed on *day*, total habits)."""
    habits = list(habits)
    done = sum(1 for h in habits if completed_on(h, day))
    return done, len(habits)
