"""Command-line front end for Lifeboard.

Reads the three collections from the workspace, runs the analytics engine and
prints JSON. Mutating subcommands save the touched collection back.
"""

from __future__ import annotations

import argparse
import json
import logging
import sys
from datetime import date
from pathlib import Path
from typing import Any

from lifeboard import store
from lifeboard.dates import DAY_NAMES, InvalidDateKey, month_title, parse_date_key, week_dates
from lifeboard.grid import build_month_grid, events_for_date
from lifeboard.logging_config import configure_logging
from lifeboard.models import CATEGORIES, MOODS, PRIORITIES
from lifeboard.mood import calendar_window_average, mood_for_date, windowed_average
from lifeboard.productivity import build_report
from lifeboard.quotes import content_for_date, content_shuffle, quote_number
from lifeboard.streaks import current_streak, daily_progress
from lifeboard.workspace import load_profile, now_local, today_date, workspace_root
from lifeboard.worldclock import world_clock

logger = logging.getLogger(__name__)


def _emit(data: Any) -> None:
    print(json.dumps(data, indent=2, ensure_ascii=False))


def _fail(errors: list[str]) -> int:
    for err in errors:
        print(f"error: {err}", file=sys.stderr)
    return 2


def _date_arg(value: str) -> date:
    try:
        return parse_date_key(value)
    except InvalidDateKey as e:
        raise argparse.ArgumentTypeError(str(e))


# ── Read-only commands ────────────────────────────────────────


def cmd_grid(args: argparse.Namespace, root: Path, today: date) -> int:
    anchor = args.month or today
    cells = build_month_grid(
        anchor,
        store.load_events(today, root),
        store.load_moods(root),
        store.load_habits(root),
        today,
        hovered=args.hovered,
        selected=args.selected,
    )
    _emit({
        "title": month_title(anchor),
        "weekdays": DAY_NAMES,
        "cells": [c.to_dict() for c in cells],
    })
    return 0


def cmd_insights(args: argparse.Namespace, root: Path, today: date) -> int:
    report = build_report(
        store.load_events(today, root),
        store.load_moods(root),
        store.load_habits(root),
        today,
    )
    _emit(report.to_dict())
    return 0


def cmd_quote(args: argparse.Namespace, root: Path, today: date) -> int:
    day = args.date or today
    quote = content_shuffle(day) if args.shuffle else content_for_date(day)
    payload = {"date": day.isoformat(), "quote": quote.to_dict(), "shuffled": args.shuffle}
    if not args.shuffle:
        payload["number"] = quote_number(day)
    _emit(payload)
    return 0


def cmd_streaks(args: argparse.Namespace, root: Path, today: date) -> int:
    habits = store.load_habits(root)
    done, total = daily_progress(habits, today)
    _emit({
        "today": today.isoformat(),
        "week": week_dates(today),
        "progress": {"done": done, "total": total},
        "habits": [
            {
                "id": h.id,
                "name": h.name,
                "streak": current_streak(h.completed_dates, today),
                "week": [k in h.completed_dates for k in week_dates(today)],
            }
            for h in habits
        ],
    })
    return 0


def cmd_mood_average(args: argparse.Namespace, root: Path, today: date) -> int:
    moods = store.load_moods(root)
    today_mood = mood_for_date(moods, today)
    _emit({
        "recentEntries": windowed_average(moods, args.window),
        "calendarWindow": calendar_window_average(moods, today, args.window),
        "today": today_mood.to_dict() if today_mood else None,
    })
    return 0


def cmd_clock(args: argparse.Namespace, root: Path, today: date) -> int:
    cities = load_profile(root).get("world_clock") or None
    try:
        rows = world_clock(now_local(root), cities)
    except ValueError as e:
        return _fail([str(e)])
    _emit([r.to_dict() for r in rows])
    return 0


def cmd_events(args: argparse.Namespace, root: Path, today: date) -> int:
    events = store.load_events(today, root)
    _emit([e.to_dict() for e in events_for_date(events, args.date or today)])
    return 0


# ── Mutating commands ─────────────────────────────────────────


def cmd_add_event(args: argparse.Namespace, root: Path, today: date) -> int:
    events = store.load_events(today, root)
    data = {
        "title": args.title,
        "description": args.description,
        "date": args.date,
        "time": args.time,
        "priority": args.priority,
        "category": args.category,
    }
    if args.color:
        data["color"] = args.color
    event, errors = store.create_event(events, data)
    if errors:
        return _fail(errors)
    store.save_events(events, root)
    _emit(event.to_dict())
    return 0


def cmd_edit_event(args: argparse.Namespace, root: Path, today: date) -> int:
    events = store.load_events(today, root)
    updates = {
        k: v for k, v in {
            "title": args.title,
            "description": args.description,
            "date": args.date,
            "time": args.time,
            "priority": args.priority,
            "category": args.category,
            "color": args.color,
        }.items()
        if v is not None
    }
    event, errors = store.update_event(events, args.id, updates)
    if errors:
        return _fail(errors)
    store.save_events(events, root)
    _emit(event.to_dict())
    return 0


def cmd_delete_event(args: argparse.Namespace, root: Path, today: date) -> int:
    events = store.load_events(today, root)
    if not store.delete_event(events, args.id):
        return _fail([f"Event not found: {args.id}"])
    store.save_events(events, root)
    _emit({"deleted": args.id})
    return 0


def cmd_log_mood(args: argparse.Namespace, root: Path, today: date) -> int:
    moods = store.load_moods(root)
    entry, errors = store.log_mood(moods, {
        "date": args.date or today.isoformat(),
        "mood": args.mood,
        "energy": args.energy,
        "notes": args.notes,
    })
    if errors:
        return _fail(errors)
    store.save_moods(moods, root)
    _emit(entry.to_dict())
    return 0


def cmd_add_habit(args: argparse.Namespace, root: Path, today: date) -> int:
    habits = store.load_habits(root)
    habit, errors = store.create_habit(habits, {"name": args.name, "color": args.color})
    if errors:
        return _fail(errors)
    store.save_habits(habits, root)
    _emit(habit.to_dict())
    return 0


def cmd_toggle_habit(args: argparse.Namespace, root: Path, today: date) -> int:
    habits = store.load_habits(root)
    habit = store.toggle_habit(habits, args.id, args.date or today, today)
    if habit is None:
        return _fail([f"Habit not found: {args.id}"])
    store.save_habits(habits, root)
    _emit(habit.to_dict())
    return 0


def cmd_delete_habit(args: argparse.Namespace, root: Path, today: date) -> int:
    habits = store.load_habits(root)
    if not store.delete_habit(habits, args.id):
        return _fail([f"Habit not found: {args.id}"])
    store.save_habits(habits, root)
    _emit({"deleted": args.id})
    return 0


# ── Parser ────────────────────────────────────────────────────


def build_parser() -> argparse.ArgumentParser:
    common = argparse.ArgumentParser(add_help=False)
    common.add_argument("--root", default=None, help="Workspace directory (default: env LIFEBOARD_ROOT or ~/lifeboard)")
    common.add_argument("--today", type=_date_arg, default=None, help="Override today's date, YYYY-MM-DD")

    ap = argparse.ArgumentParser(prog="lifeboard", description="Calendar, mood and habit analytics.")
    sub = ap.add_subparsers(dest="command", required=True)

    p = sub.add_parser("grid", parents=[common], help="Month grid with per-day annotations")
    p.add_argument("--month", type=_date_arg, default=None, help="Any date in the month to show")
    p.add_argument("--hovered", type=_date_arg, default=None)
    p.add_argument("--selected", type=_date_arg, default=None)
    p.set_defaults(func=cmd_grid)

    p = sub.add_parser("insights", parents=[common], help="Productivity score and breakdowns")
    p.set_defaults(func=cmd_insights)

    p = sub.add_parser("quote", parents=[common], help="Quote of the day")
    p.add_argument("--date", type=_date_arg, default=None)
    p.add_argument("--shuffle", action="store_true", help="Pick a random quote instead of the stable one")
    p.set_defaults(func=cmd_quote)

    p = sub.add_parser("streaks", parents=[common], help="Current habit streaks and this week's checks")
    p.set_defaults(func=cmd_streaks)

    p = sub.add_parser("mood-average", parents=[common], help="Recent mood averages")
    p.add_argument("--window", type=int, default=7)
    p.set_defaults(func=cmd_mood_average)

    p = sub.add_parser("clock", parents=[common], help="World clock")
    p.set_defaults(func=cmd_clock)

    p = sub.add_parser("events", parents=[common], help="Events on a day")
    p.add_argument("--date", type=_date_arg, default=None)
    p.set_defaults(func=cmd_events)

    p = sub.add_parser("add-event", parents=[common], help="Create an event")
    p.add_argument("title")
    p.add_argument("date")
    p.add_argument("--time", default="")
    p.add_argument("--description", default="")
    p.add_argument("--priority", choices=PRIORITIES, default="medium")
    p.add_argument("--category", choices=CATEGORIES, default="personal")
    p.add_argument("--color", default=None)
    p.set_defaults(func=cmd_add_event)

    p = sub.add_parser("edit-event", parents=[common], help="Update fields of an event")
    p.add_argument("id")
    p.add_argument("--title", default=None)
    p.add_argument("--date", default=None)
    p.add_argument("--time", default=None)
    p.add_argument("--description", default=None)
    p.add_argument("--priority", choices=PRIORITIES, default=None)
    p.add_argument("--category", choices=CATEGORIES, default=None)
    p.add_argument("--color", default=None)
    p.set_defaults(func=cmd_edit_event)

    p = sub.add_parser("delete-event", parents=[common], help="Delete an event")
    p.add_argument("id")
    p.set_defaults(func=cmd_delete_event)

    p = sub.add_parser("log-mood", parents=[common], help="Record the mood for a day")
    p.add_argument("mood", choices=MOODS)
    p.add_argument("--energy", type=int, default=5)
    p.add_argument("--notes", default="")
    p.add_argument("--date", default=None)
    p.set_defaults(func=cmd_log_mood)

    p = sub.add_parser("add-habit", parents=[common], help="Create a habit")
    p.add_argument("name")
    p.add_argument("--color", default=None)
    p.set_defaults(func=cmd_add_habit)

    p = sub.add_parser("toggle-habit", parents=[common], help="Check or uncheck a habit for a day")
    p.add_argument("id")
    p.add_argument("--date", type=_date_arg, default=None)
    p.set_defaults(func=cmd_toggle_habit)

    p = sub.add_parser("delete-habit", parents=[common], help="Delete a habit")
    p.add_argument("id")
    p.set_defaults(func=cmd_delete_habit)

    return ap


def main(argv: list[str] | None = None) -> int:
    configure_logging()
    args = build_parser().parse_args(argv)
    root = Path(args.root).expanduser().resolve() if args.root else workspace_root()
    today = args.today or today_date(root)
    logger.debug("Running %s in %s for %s", args.command, root, today)
    return args.func(args, root, today)


if __name__ == "__main__":
    raise SystemExit(main())
