"""Productivity score and insight breakdowns.

The score is a 0-100 composite of three capped components over a seven-day
lookback from today:

    events  0-40   10 points per event dated on/after the cutoff
    mood    0-30   average mood (default neutral) scaled to 30
    habits  0-30   mean 7-day completion fraction across habits, scaled to 30
"""

from __future__ import annotations

from collections import Counter
from datetime import date, timedelta
from typing import Sequence

from lifeboard.dates import as_date, date_key
from lifeboard.models import (
    CalendarEvent,
    CategoryShare,
    HabitEntry,
    MoodEntry,
    ProductivityReport,
    ScoreBreakdown,
    StreakSummary,
    round_half_up,
)
from lifeboard.mood import MAX_MOOD, average_mood
from lifeboard.streaks import current_streak

LOOKBACK_DAYS = 7
EVENT_POINTS = 10
EVENT_CAP = 40
MOOD_WEIGHT = 30
HABIT_WEIGHT = 30
NEUTRAL_MOOD = 3.0
DEADLINE_HORIZON_DAYS = 7
DEADLINE_LIMIT = 3
ACHIEVEMENT_SCORE = 80

SCORE_BANDS = [
    (80, "excellent"),
    (60, "good"),
    (40, "fair"),
]


def _cutoff_key(today: date) -> str:
    return date_key(as_date(today) - timedelta(days=LOOKBACK_DAYS))


# ── Components ────────────────────────────────────────────────


def event_component(events: Sequence[CalendarEvent], today: date) -> float:
    cutoff = _cutoff_key(today)
    recent = sum(1 for e in events if e.date >= cutoff)
    return float(min(recent * EVENT_POINTS, EVENT_CAP))


def mood_component(moods: Sequence[MoodEntry], today: date) -> float:
    cutoff = _cutoff_key(today)
    avg = average_mood(m for m in moods if m.date >= cutoff)
    if avg is None:
        avg = NEUTRAL_MOOD
    return avg / MAX_MOOD * MOOD_WEIGHT


def habit_component(habits: Sequence[HabitEntry], today: date) -> float:
    """Mean recent completion fraction across habits, scaled to 30.

    Completion dates are de-duplicated and each habit's fraction is capped
    at 1.0, so a single habit can never push the component past its weight.
    """
    if not habits:
        return 0.0
    cutoff = _cutoff_key(today)
    total = 0.0
    for habit in habits:
        recent = {k for k in habit.completed_dates if k >= cutoff}
        total += min(len(recent) / LOOKBACK_DAYS, 1.0)
    return total / len(habits) * HABIT_WEIGHT


def score_breakdown(
    events: Sequence[CalendarEvent],
    moods: Sequence[MoodEntry],
    habits: Sequence[HabitEntry],
    today: date,
) -> ScoreBreakdown:
    ev = event_component(events, today)
    md = mood_component(moods, today)
    hb = habit_component(habits, today)
    total = int(round_half_up(ev + md + hb))
    return ScoreBreakdown(events=ev, mood=md, habits=hb, total=max(0, min(total, 100)))


def productivity_score(
    events: Sequence[CalendarEvent],
    moods: Sequence[MoodEntry],
    habits: Sequence[HabitEntry],
    today: date,
) -> int:
    """Composite 0-100 score for the week ending *today*."""
    return score_breakdown(events, moods, habits, today).total


def score_band(score: int) -> str:
    for threshold, band in SCORE_BANDS:
        if score >= threshold:
            return band
    return "low"


def has_achievement(score: int) -> bool:
    return score >= ACHIEVEMENT_SCORE


# ── Breakdowns ────────────────────────────────────────────────


def category_breakdown(events: Sequence[CalendarEvent]) -> list[CategoryShare]:
    """Share of each category in first-seen order. No events gives []."""
    if not events:
        return []
    counts = Counter(e.category for e in events)
    total = len(events)
    return [
        CategoryShare(
            category=category,
            count=count,
            percentage=int(round_half_up(count / total * 100)),
        )
        for category, count in counts.items()
    ]


def streak_summary(habits: Sequence[HabitEntry], today: date) -> StreakSummary:
    """Longest current streak and how many habits have one going.

    Streaks are recomputed from completion dates rather than trusting the
    cached ``HabitEntry.streak``.
    """
    if not habits:
        return StreakSummary()
    streaks = [current_streak(h.completed_dates, today) for h in habits]
    active = sum(1 for s in streaks if s > 0)
    return StreakSummary(
        longest_streak=max(streaks),
        active_habits=active,
        total_habits=len(habits),
        success_rate=active / len(habits),
    )


def upcoming_deadlines(
    events: Sequence[CalendarEvent],
    today: date,
    limit: int = DEADLINE_LIMIT,
) -> list[CalendarEvent]:
    """High-priority events dated today through a week from today, soonest first."""
    start = date_key(today)
    end = date_key(as_date(today) + timedelta(days=DEADLINE_HORIZON_DAYS))
    due = [e for e in events if e.is_high_priority and start <= e.date <= end]
    due.sort(key=lambda e: e.date)
    return due[:limit]


def build_report(
    events: Sequence[CalendarEvent],
    moods: Sequence[MoodEntry],
    habits: Sequence[HabitEntry],
    today: date,
) -> ProductivityReport:
    """Everything the insights panel shows, computed in one pass."""
    breakdown = score_breakdown(events, moods, habits, today)
    return ProductivityReport(
        score=breakdown,
        band=score_band(breakdown.total),
        achievement=has_achievement(breakdown.total),
        categories=tuple(category_breakdown(events)),
        streaks=streak_summary(habits, today),
        deadlines=tuple(upcoming_deadlines(events, today)),
    )
