"""Tests for lifeboard/models.py: construction checks and serialization."""

import dataclasses

import pytest

from lifeboard.dates import InvalidDateKey
from lifeboard.models import CalendarEvent, HabitEntry, MoodEntry, ScoreBreakdown, StreakSummary


def test_event_from_dict_defaults():
    e = CalendarEvent.from_dict({"id": "1", "title": "Lunch", "date": "2024-06-01"})
    assert e.priority == "medium"
    assert e.category == "personal"
    assert e.time == ""
    assert e.to_dict()["date"] == "2024-06-01"


def test_event_rejects_bad_values():
    with pytest.raises(InvalidDateKey):
        CalendarEvent(id="1", date="2024-06-31")
    with pytest.raises(ValueError, match="priority"):
        CalendarEvent(id="1", date="2024-06-01", priority="urgent")
    with pytest.raises(ValueError, match="category"):
        CalendarEvent(id="1", date="2024-06-01", category="chores")


def test_event_is_frozen():
    e = CalendarEvent(id="1", date="2024-06-01")
    with pytest.raises(dataclasses.FrozenInstanceError):
        e.title = "changed"


def test_mood_energy_range():
    assert MoodEntry(date="2024-06-01", mood="good", energy=10).energy == 10
    with pytest.raises(ValueError, match="energy"):
        MoodEntry(date="2024-06-01", mood="good", energy=11)
    with pytest.raises(ValueError, match="energy"):
        MoodEntry(date="2024-06-01", mood="good", energy=0)


def test_mood_unknown_label():
    with pytest.raises(ValueError, match="mood"):
        MoodEntry(date="2024-06-01", mood="ecstatic")


def test_habit_camel_case_round_trip():
    data = {
        "id": "h1",
        "name": "Read",
        "color": "#8B5CF6",
        "streak": 2,
        "completedDates": ["2024-06-01", "2024-06-02"],
    }
    h = HabitEntry.from_dict(data)
    assert h.completed_dates == ("2024-06-01", "2024-06-02")
    assert h.to_dict() == data


def test_habit_rejects_bad_completion_date():
    with pytest.raises(InvalidDateKey):
        HabitEntry.from_dict({"id": "h1", "name": "Read", "completedDates": ["yesterday"]})


def test_mood_from_dict_null_energy_uses_default():
    m = MoodEntry.from_dict({"date": "2024-06-01", "mood": "good", "energy": None})
    assert m.energy == 5
    with pytest.raises(ValueError, match="energy"):
        MoodEntry.from_dict({"date": "2024-06-01", "mood": "good", "energy": 0})


def test_report_rounding_goes_half_up():
    d = ScoreBreakdown(events=0.125, mood=2.675, habits=0.005, total=3).to_dict()
    assert d == {"events": 0.13, "mood": 2.68, "habits": 0.01, "total": 3}
    s = StreakSummary(total_habits=8, success_rate=0.0625)
    assert s.to_dict()["successRate"] == 0.063
    assert StreakSummary(success_rate=0.125).success_percent == 13
