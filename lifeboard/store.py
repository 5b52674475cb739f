"""Record store: JSON persistence, validation and CRUD for Lifeboard.

The three collections (events, moods, habits) are persisted independently
under ``<root>/data/`` and re-saved by the caller after every mutation. CRUD
helpers work on an in-memory list and return ``(record, errors)`` so the
caller decides whether to save.
"""

from __future__ import annotations

import logging
from datetime import date, timedelta
from pathlib import Path
from typing import Any
from uuid import uuid4

from lifeboard.dates import InvalidDateKey, date_key, parse_date_key
from lifeboard.fileio import read_json_list, write_json_atomic
from lifeboard.models import (
    CATEGORIES,
    DEFAULT_COLOR,
    ENERGY_MAX,
    ENERGY_MIN,
    MOODS,
    PRIORITIES,
    CalendarEvent,
    HabitEntry,
    MoodEntry,
)
from lifeboard.streaks import toggle_completion
from lifeboard.workspace import events_path, habits_path, moods_path

logger = logging.getLogger(__name__)


def new_id() -> str:
    return uuid4().hex[:12]


# ── Validation ────────────────────────────────────────────────


def _date_errors(value: Any, field_name: str = "date") -> list[str]:
    if value in (None, ""):
        return [f"Missing required field: {field_name}"]
    try:
        parse_date_key(value)
    except InvalidDateKey as e:
        return [str(e)]
    return []


def validate_event(data: dict[str, Any]) -> list[str]:
    """Validate an event payload and return list of errors (empty if valid)."""
    errors = []
    if not str(data.get("title", "")).strip():
        errors.append("Missing required field: title")
    errors.extend(_date_errors(data.get("date")))
    if "priority" in data and data["priority"] not in PRIORITIES:
        errors.append(f"Invalid priority: {data['priority']}")
    if "category" in data and data["category"] not in CATEGORIES:
        errors.append(f"Invalid category: {data['category']}")
    return errors


def validate_mood(data: dict[str, Any]) -> list[str]:
    errors = _date_errors(data.get("date"))
    if data.get("mood") not in MOODS:
        errors.append(f"Invalid mood: {data.get('mood')}")
    energy = data.get("energy", 5)
    if isinstance(energy, bool) or not isinstance(energy, int) or not ENERGY_MIN <= energy <= ENERGY_MAX:
        errors.append(f"energy must be integer {ENERGY_MIN}-{ENERGY_MAX}")
    return errors


def validate_habit(data: dict[str, Any]) -> list[str]:
    errors = []
    if not str(data.get("name", "")).strip():
        errors.append("Missing required field: name")
    for key in data.get("completedDates") or []:
        errors.extend(_date_errors(key, "completedDates"))
    return errors


# ── Persistence ───────────────────────────────────────────────


def sample_events(today: date) -> list[CalendarEvent]:
    """Starter events shown before anything has been saved."""
    return [
        CalendarEvent(
            id="1",
            title="Team Meeting",
            description="Weekly team sync",
            date=date_key(today),
            time="09:00",
            color="#3B82F6",
            priority="high",
            category="work",
        ),
        CalendarEvent(
            id="2",
            title="Gym Session",
            description="Cardio and strength training",
            date=date_key(today + timedelta(days=1)),
            time="18:00",
            color="#10B981",
            priority="medium",
            category="health",
        ),
    ]


def sample_habits() -> list[HabitEntry]:
    return [
        HabitEntry(id="1", name="Drink Water", color="#3B82F6"),
        HabitEntry(id="2", name="Exercise", color="#10B981"),
        HabitEntry(id="3", name="Read", color="#8B5CF6"),
    ]


def load_events(today: date, root: Path | None = None) -> list[CalendarEvent]:
    """Load events.json; a missing file yields the sample events."""
    path = events_path(root)
    if not path.exists():
        logger.debug("No %s yet, using sample events", path)
        return sample_events(today)
    return [CalendarEvent.from_dict(d) for d in read_json_list(path)]


def save_events(events: list[CalendarEvent], root: Path | None = None) -> None:
    write_json_atomic(events_path(root), [e.to_dict() for e in events])
    logger.debug("Saved %d events", len(events))


def load_moods(root: Path | None = None) -> list[MoodEntry]:
    return [MoodEntry.from_dict(d) for d in read_json_list(moods_path(root))]


def save_moods(moods: list[MoodEntry], root: Path | None = None) -> None:
    write_json_atomic(moods_path(root), [m.to_dict() for m in moods])
    logger.debug("Saved %d mood entries", len(moods))


def load_habits(root: Path | None = None) -> list[HabitEntry]:
    """Load habits.json; a missing file yields the sample habits."""
    path = habits_path(root)
    if not path.exists():
        logger.debug("No %s yet, using sample habits", path)
        return sample_habits()
    return [HabitEntry.from_dict(d) for d in read_json_list(path)]


def save_habits(habits: list[HabitEntry], root: Path | None = None) -> None:
    write_json_atomic(habits_path(root), [h.to_dict() for h in habits])
    logger.debug("Saved %d habits", len(habits))


# ── Events ────────────────────────────────────────────────────


def find_event(events: list[CalendarEvent], event_id: str) -> CalendarEvent | None:
    for e in events:
        if e.id == event_id:
            return e
    return None


def create_event(events: list[CalendarEvent], data: dict[str, Any]) -> tuple[CalendarEvent | None, list[str]]:
    """Validate and append a new event with a fresh id. Returns (event, errors)."""
    errors = validate_event(data)
    if errors:
        return None, errors
    event = CalendarEvent.from_dict({**data, "id": new_id()})
    events.append(event)
    logger.info("Created event %s on %s", event.id, event.date)
    return event, []


def update_event(
    events: list[CalendarEvent],
    event_id: str,
    updates: dict[str, Any],
) -> tuple[CalendarEvent | None, list[str]]:
    """Update an event by ID, keeping its id. Returns (updated_event, errors)."""
    event = find_event(events, event_id)
    if event is None:
        return None, [f"Event not found: {event_id}"]

    data = event.to_dict()
    data.update(updates)
    data["id"] = event_id

    errors = validate_event(data)
    if errors:
        return None, errors

    updated = CalendarEvent.from_dict(data)
    for i, e in enumerate(events):
        if e.id == event_id:
            events[i] = updated
            break
    logger.info("Updated event %s", event_id)
    return updated, []


def delete_event(events: list[CalendarEvent], event_id: str) -> bool:
    for i, e in enumerate(events):
        if e.id == event_id:
            events.pop(i)
            logger.info("Deleted event %s", event_id)
            return True
    return False


# ── Moods ─────────────────────────────────────────────────────


def log_mood(moods: list[MoodEntry], data: dict[str, Any]) -> tuple[MoodEntry | None, list[str]]:
    """Record the mood for a day, replacing any earlier entry for that day.

    The new entry goes to the end, so it counts as the most recent one for
    insertion-order averages.
    """
    data = {"energy": 5, "notes": "", **data}
    errors = validate_mood(data)
    if errors:
        return None, errors
    entry = MoodEntry.from_dict(data)
    moods[:] = [m for m in moods if m.date != entry.date]
    moods.append(entry)
    logger.info("Logged mood %s for %s", entry.mood, entry.date)
    return entry, []


# ── Habits ────────────────────────────────────────────────────


def find_habit(habits: list[HabitEntry], habit_id: str) -> HabitEntry | None:
    for h in habits:
        if h.id == habit_id:
            return h
    return None


def create_habit(habits: list[HabitEntry], data: dict[str, Any]) -> tuple[HabitEntry | None, list[str]]:
    """Add a new habit with no completions yet."""
    errors = validate_habit(data)
    if errors:
        return None, errors
    habit = HabitEntry(
        id=new_id(),
        name=str(data["name"]).strip(),
        color=str(data.get("color") or DEFAULT_COLOR),
    )
    habits.append(habit)
    logger.info("Created habit %s (%s)", habit.id, habit.name)
    return habit, []


def toggle_habit(
    habits: list[HabitEntry],
    habit_id: str,
    day: date | str,
    today: date,
) -> HabitEntry | None:
    """Flip completion of *day* for a habit and recompute its streak."""
    for i, h in enumerate(habits):
        if h.id == habit_id:
            updated = toggle_completion(h, day, today)
            habits[i] = updated
            logger.info("Toggled habit %s on %s (streak %d)", habit_id, date_key(day), updated.streak)
            return updated
    return None


def delete_habit(habits: list[HabitEntry], habit_id: str) -> bool:
    for i, h in enumerate(habits):
        if h.id == habit_id:
            habits.pop(i)
            logger.info("Deleted habit %s", habit_id)
            return True
    return False
