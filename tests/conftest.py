"""Shared test fixtures for Lifeboard tests."""

from __future__ import annotations

import json
import os
from datetime import date
from pathlib import Path

import pytest
import yaml

from lifeboard.models import CalendarEvent, HabitEntry, MoodEntry


TODAY = date(2024, 6, 12)  # a Wednesday


def make_event(date_key: str, priority: str = "medium", category: str = "personal", **kw) -> CalendarEvent:
    return CalendarEvent(
        id=kw.pop("id", f"ev-{date_key}-{priority}"),
        title=kw.pop("title", "Event"),
        date=date_key,
        priority=priority,
        category=category,
        **kw,
    )


def make_mood(date_key: str, mood: str = "good", energy: int = 5) -> MoodEntry:
    return MoodEntry(date=date_key, mood=mood, energy=energy)


def make_habit(*dates: str, id: str = "h1", name: str = "Habit") -> HabitEntry:
    return HabitEntry(id=id, name=name, completed_dates=tuple(dates))


@pytest.fixture
def today() -> date:
    return TODAY


@pytest.fixture
def workspace(tmp_path: Path) -> Path:
    """Create a temporary workspace with a profile and all three collections."""
    root = tmp_path / "workspace"
    (root / "data").mkdir(parents=True)

    profile = {
        "timezone": "UTC",
        "world_clock": [
            {"city": "Tokyo", "timezone": "Asia/Tokyo"},
            {"city": "London", "timezone": "Europe/London"},
        ],
    }
    (root / "profile.yaml").write_text(
        yaml.dump(profile, default_flow_style=False), encoding="utf-8"
    )

    events = [
        {
            "id": "e1",
            "title": "Standup",
            "description": "Daily sync",
            "date": "2024-06-12",
            "time": "09:00",
            "color": "#3B82F6",
            "priority": "high",
            "category": "work",
        },
        {
            "id": "e2",
            "title": "Run",
            "description": "",
            "date": "2024-06-10",
            "time": "",
            "color": "#10B981",
            "priority": "low",
            "category": "health",
        },
    ]
    (root / "data" / "events.json").write_text(json.dumps(events, indent=2), encoding="utf-8")

    moods = [
        {"date": "2024-06-10", "mood": "neutral", "energy": 4, "notes": ""},
        {"date": "2024-06-11", "mood": "excellent", "energy": 9, "notes": "great"},
    ]
    (root / "data" / "moods.json").write_text(json.dumps(moods, indent=2), encoding="utf-8")

    habits = [
        {
            "id": "water",
            "name": "Drink Water",
            "color": "#3B82F6",
            "streak": 3,
            "completedDates": ["2024-06-10", "2024-06-11", "2024-06-12"],
        },
        {
            "id": "read",
            "name": "Read",
            "color": "#8B5CF6",
            "streak": 0,
            "completedDates": ["2024-06-09"],
        },
    ]
    (root / "data" / "habits.json").write_text(json.dumps(habits, indent=2), encoding="utf-8")

    os.environ["LIFEBOARD_ROOT"] = str(root)
    yield root
    if "LIFEBOARD_ROOT" in os.environ:
        del os.environ["LIFEBOARD_ROOT"]
