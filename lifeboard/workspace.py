"""Workspace root, profile, timezone and path helpers for Lifeboard."""

from __future__ import annotations

import logging
import os
from datetime import date, datetime
from pathlib import Path
from typing import Any
from zoneinfo import ZoneInfo, ZoneInfoNotFoundError

from lifeboard.fileio import read_yaml

logger = logging.getLogger(__name__)


def workspace_root() -> Path:
    """Directory holding profile.yaml and the data/ collections."""
    return Path(
        os.environ.get("LIFEBOARD_ROOT", str(Path.home() / "lifeboard"))
    ).expanduser().resolve()


def load_profile(root: Path | None = None) -> dict[str, Any]:
    """Read profile.yaml; an absent profile is an empty mapping."""
    return read_yaml(profile_path(root))


def get_user_timezone(root: Path | None = None) -> ZoneInfo:
    """Get the profile's timezone, defaulting to UTC."""
    name = load_profile(root).get("timezone")
    if not name:
        return ZoneInfo("UTC")
    try:
        return ZoneInfo(str(name))
    except (ZoneInfoNotFoundError, ValueError):
        logger.warning("Unknown timezone %r in profile, using UTC", name)
        return ZoneInfo("UTC")


def now_local(root: Path | None = None) -> datetime:
    """Current aware datetime in the profile's timezone."""
    return datetime.now(get_user_timezone(root))


def today_date(root: Path | None = None) -> date:
    """Today's calendar day in the profile's timezone."""
    return now_local(root).date()


# ── Path helpers ──────────────────────────────────────────────

def profile_path(root: Path | None = None) -> Path:
    if root is None:
        root = workspace_root()
    return root / "profile.yaml"


def data_dir(root: Path | None = None) -> Path:
    if root is None:
        root = workspace_root()
    return root / "data"


def events_path(root: Path | None = None) -> Path:
    return data_dir(root) / "events.json"


def moods_path(root: Path | None = None) -> Path:
    return data_dir(root) / "moods.json"


def habits_path(root: Path | None = None) -> Path:
    return data_dir(root) / "habits.json"
