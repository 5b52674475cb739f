"""Lifeboard core library: life analytics engine and record store.

Public API re-exports for convenient imports:
    from lifeboard import build_month_grid, current_streak, productivity_score, ...
"""

__version__ = "0.1.0"

# Date utilities
from lifeboard.dates import (
    InvalidDateKey,
    adjacent_keys,
    date_key,
    days_in_grid,
    month_title,
    parse_date_key,
    shift_days,
    shift_month,
    week_dates,
)

# Models
from lifeboard.models import (
    CalendarCell,
    CalendarEvent,
    CategoryShare,
    CityTime,
    HabitEntry,
    MoodEntry,
    ProductivityReport,
    Quote,
    ScoreBreakdown,
    StreakSummary,
)

# Streaks
from lifeboard.streaks import (
    completed_on,
    current_streak,
    daily_progress,
    toggle_completion,
)

# Mood
from lifeboard.mood import (
    MOOD_SCALE,
    calendar_window_average,
    mood_for_date,
    mood_value,
    windowed_average,
)

# Productivity
from lifeboard.productivity import (
    build_report,
    category_breakdown,
    productivity_score,
    score_band,
    score_breakdown,
    streak_summary,
    upcoming_deadlines,
)

# Quote of the day
from lifeboard.quotes import (
    QUOTES,
    content_for_date,
    content_shuffle,
    date_checksum,
    quote_number,
)

# Calendar grid
from lifeboard.grid import build_month_grid, events_for_date

# World clock
from lifeboard.worldclock import DEFAULT_CITIES, world_clock

# Workspace
from lifeboard.workspace import (
    get_user_timezone,
    now_local,
    today_date,
    workspace_root,
)
