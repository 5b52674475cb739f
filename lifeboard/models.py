"""Typed dataclasses for the Lifeboard data model.

Input records (events, moods, habits) use from_dict/to_dict for JSON
serialization; camelCase in JSON is mapped to snake_case in Python.
Unknown keys are ignored; missing keys use defaults. Every record is
frozen: engine functions build new values instead of mutating inputs.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from decimal import ROUND_HALF_UP, Decimal
from typing import Any

from lifeboard.dates import parse_date_key


PRIORITIES = ("low", "medium", "high")
CATEGORIES = ("work", "personal", "health", "social", "learning")
MOODS = ("terrible", "bad", "neutral", "good", "excellent")
ENERGY_MIN = 1
ENERGY_MAX = 10
DEFAULT_COLOR = "#3B82F6"


def round_half_up(value: float, ndigits: int = 0) -> float:
    """Round with halves going up, as the dashboard displays them."""
    quantum = Decimal(1).scaleb(-ndigits)
    return float(Decimal(str(value)).quantize(quantum, rounding=ROUND_HALF_UP))


# ── Input records ─────────────────────────────────────────────


@dataclass(frozen=True)
class CalendarEvent:
    id: str = ""
    title: str = ""
    description: str = ""
    date: str = ""
    time: str = ""  # HH:MM, empty when the event has no time
    color: str = DEFAULT_COLOR
    priority: str = "medium"
    category: str = "personal"

    def __post_init__(self) -> None:
        parse_date_key(self.date)
        if self.priority not in PRIORITIES:
            raise ValueError(f"Invalid priority: {self.priority!r}")
        if self.category not in CATEGORIES:
            raise ValueError(f"Invalid category: {self.category!r}")

    @property
    def is_high_priority(self) -> bool:
        return self.priority == "high"

    @classmethod
    def from_dict(cls, d: dict[str, Any]) -> CalendarEvent:
        return cls(
            id=str(d.get("id", "")),
            title=str(d.get("title", "")),
            description=str(d.get("description", "")),
            date=str(d.get("date", "")),
            time=str(d.get("time") or ""),
            color=str(d.get("color") or DEFAULT_COLOR),
            priority=str(d.get("priority", "medium")),
            category=str(d.get("category", "personal")),
        )

    def to_dict(self) -> dict[str, Any]:
        return {
            "id": self.id,
            "title": self.title,
            "description": self.description,
            "date": self.date,
            "time": self.time,
            "color": self.color,
            "priority": self.priority,
            "category": self.category,
        }


@dataclass(frozen=True)
class MoodEntry:
    date: str = ""
    mood: str = "neutral"
    energy: int = 5
    notes: str = ""

    def __post_init__(self) -> None:
        parse_date_key(self.date)
        if self.mood not in MOODS:
            raise ValueError(f"Invalid mood: {self.mood!r}")
        if isinstance(self.energy, bool) or not isinstance(self.energy, int):
            raise ValueError(f"energy must be an integer, got {self.energy!r}")
        if not ENERGY_MIN <= self.energy <= ENERGY_MAX:
            raise ValueError(f"energy must be {ENERGY_MIN}-{ENERGY_MAX}, got {self.energy}")

    @classmethod
    def from_dict(cls, d: dict[str, Any]) -> MoodEntry:
        return cls(
            date=str(d.get("date", "")),
            mood=str(d.get("mood", "neutral")),
            energy=int(5 if d.get("energy") is None else d["energy"]),
            notes=str(d.get("notes", "")),
        )

    def to_dict(self) -> dict[str, Any]:
        return {
            "date": self.date,
            "mood": self.mood,
            "energy": self.energy,
            "notes": self.notes,
        }


@dataclass(frozen=True)
class HabitEntry:
    id: str = ""
    name: str = ""
    color: str = DEFAULT_COLOR
    streak: int = 0
    completed_dates: tuple[str, ...] = ()

    def __post_init__(self) -> None:
        for key in self.completed_dates:
            parse_date_key(key)

    @classmethod
    def from_dict(cls, d: dict[str, Any]) -> HabitEntry:
        dates = d.get("completedDates", d.get("completed_dates")) or []
        return cls(
            id=str(d.get("id", "")),
            name=str(d.get("name", "")),
            color=str(d.get("color") or DEFAULT_COLOR),
            streak=int(d.get("streak", 0) or 0),
            completed_dates=tuple(str(k) for k in dates),
        )

    def to_dict(self) -> dict[str, Any]:
        return {
            "id": self.id,
            "name": self.name,
            "color": self.color,
            "streak": self.streak,
            "completedDates": list(self.completed_dates),
        }


# ── Calendar ──────────────────────────────────────────────────


@dataclass(frozen=True)
class CalendarCell:
    date: str
    day: int
    in_current_month: bool
    is_today: bool = False
    is_selected: bool = False
    is_hovered: bool = False
    is_adjacent_to_hovered: bool = False
    events: tuple[CalendarEvent, ...] = ()
    mood: MoodEntry | None = None
    habits: tuple[HabitEntry, ...] = ()
    has_high_priority: bool = False

    def to_dict(self) -> dict[str, Any]:
        return {
            "date": self.date,
            "day": self.day,
            "inCurrentMonth": self.in_current_month,
            "isToday": self.is_today,
            "isSelected": self.is_selected,
            "isHovered": self.is_hovered,
            "isAdjacentToHovered": self.is_adjacent_to_hovered,
            "events": [e.to_dict() for e in self.events],
            "mood": self.mood.to_dict() if self.mood else None,
            "habits": [h.id for h in self.habits],
            "hasHighPriority": self.has_high_priority,
        }


# ── Insights ──────────────────────────────────────────────────


@dataclass(frozen=True)
class CategoryShare:
    category: str
    count: int
    percentage: int

    def to_dict(self) -> dict[str, Any]:
        return {"category": self.category, "count": self.count, "percentage": self.percentage}


@dataclass(frozen=True)
class StreakSummary:
    longest_streak: int = 0
    active_habits: int = 0
    total_habits: int = 0
    success_rate: float = 0.0

    @property
    def success_percent(self) -> int:
        return int(round_half_up(self.success_rate * 100))

    def to_dict(self) -> dict[str, Any]:
        return {
            "longestStreak": self.longest_streak,
            "activeHabits": self.active_habits,
            "totalHabits": self.total_habits,
            "successRate": round_half_up(self.success_rate, 3),
            "successPercent": self.success_percent,
        }


@dataclass(frozen=True)
class ScoreBreakdown:
    events: float = 0.0
    mood: float = 0.0
    habits: float = 0.0
    total: int = 0

    def to_dict(self) -> dict[str, Any]:
        return {
            "events": round_half_up(self.events, 2),
            "mood": round_half_up(self.mood, 2),
            "habits": round_half_up(self.habits, 2),
            "total": self.total,
        }


@dataclass(frozen=True)
class ProductivityReport:
    score: ScoreBreakdown
    band: str
    achievement: bool
    categories: tuple[CategoryShare, ...] = ()
    streaks: StreakSummary = field(default_factory=StreakSummary)
    deadlines: tuple[CalendarEvent, ...] = ()

    def to_dict(self) -> dict[str, Any]:
        return {
            "score": self.score.to_dict(),
            "band": self.band,
            "achievement": self.achievement,
            "categories": [c.to_dict() for c in self.categories],
            "streaks": self.streaks.to_dict(),
            "deadlines": [e.to_dict() for e in self.deadlines],
        }


# ── Content ───────────────────────────────────────────────────


@dataclass(frozen=True)
class Quote:
    text: str
    author: str
    category: str = ""

    def to_dict(self) -> dict[str, Any]:
        return {"text": self.text, "author": self.author, "category": self.category}


@dataclass(frozen=True)
class CityTime:
    city: str
    timezone: str
    time: str
    date: str
    offset: str
    utc_offset_minutes: int

    def to_dict(self) -> dict[str, Any]:
        return {
            "city": self.city,
            "timezone": self.timezone,
            "time": self.time,
            "date": self.date,
            "offset": self.offset,
            "utcOffsetMinutes": self.utc_offset_minutes,
        }
