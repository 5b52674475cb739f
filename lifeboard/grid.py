"""Month grid construction for the calendar view."""

from __future__ import annotations

from collections import defaultdict
from datetime import date
from typing import Sequence

from lifeboard.dates import adjacent_keys, as_date, date_key, days_in_grid
from lifeboard.models import CalendarCell, CalendarEvent, HabitEntry, MoodEntry


def events_for_date(events: Sequence[CalendarEvent], day: date | str) -> list[CalendarEvent]:
    """Events on *day*, in input order."""
    key = date_key(day)
    return [e for e in events if e.date == key]


def build_month_grid(
    month_anchor: date | str,
    events: Sequence[CalendarEvent],
    moods: Sequence[MoodEntry],
    habits: Sequence[HabitEntry],
    today: date,
    hovered: date | str | None = None,
    selected: date | str | None = None,
) -> list[CalendarCell]:
    """Build the 42 annotated cells for the month containing *month_anchor*."""
    anchor = as_date(month_anchor)
    today_key = date_key(today)
    hovered_key = date_key(hovered) if hovered is not None else None
    selected_key = date_key(selected) if selected is not None else None
    adjacent = set(adjacent_keys(hovered_key)) if hovered_key else set()

    by_date: dict[str, list[CalendarEvent]] = defaultdict(list)
    for event in events:
        by_date[event.date].append(event)

    # later entries overwrite earlier ones for the same day
    mood_by_date = {m.date: m for m in moods}

    habit_dates = [(h, set(h.completed_dates)) for h in habits]

    cells = []
    for day in days_in_grid(anchor):
        key = date_key(day)
        day_events = tuple(by_date.get(key, ()))
        cells.append(CalendarCell(
            date=key,
            day=day.day,
            in_current_month=(day.year, day.month) == (anchor.year, anchor.month),
            is_today=key == today_key,
            is_selected=key == selected_key,
            is_hovered=key == hovered_key,
            is_adjacent_to_hovered=key in adjacent,
            events=day_events,
            mood=mood_by_date.get(key),
            habits=tuple(h for h, dates in habit_dates if key in dates),
            has_high_priority=any(e.is_high_priority for e in day_events),
        ))
    return cells
