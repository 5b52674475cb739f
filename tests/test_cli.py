"""Tests for lifeboard/cli.py: subcommands against a temporary workspace."""

import json

import pytest

from lifeboard.cli import main


def run(capsys, *argv):
    code = main(list(argv))
    out = capsys.readouterr()
    return code, (json.loads(out.out) if out.out.strip() else None), out.err


def test_grid(workspace, capsys):
    code, data, _ = run(capsys, "grid", "--root", str(workspace), "--today", "2024-06-12", "--hovered", "2024-06-12")
    assert code == 0
    assert data["title"] == "June 2024"
    assert data["weekdays"][0] == "Sun"
    assert len(data["cells"]) == 42
    today = next(c for c in data["cells"] if c["date"] == "2024-06-12")
    assert today["isToday"] and today["isHovered"] and today["hasHighPriority"]
    assert today["habits"] == ["water"]


def test_insights(workspace, capsys):
    code, data, _ = run(capsys, "insights", "--root", str(workspace), "--today", "2024-06-12")
    assert code == 0
    # 2 events -> 20, moods (3 + 5) / 2 -> 24, habits (3/7 + 1/7) / 2 -> 8.57
    assert data["score"]["total"] == 53
    assert data["band"] == "fair"
    assert data["achievement"] is False
    assert data["streaks"]["longestStreak"] == 3
    assert [d["id"] for d in data["deadlines"]] == ["e1"]


def test_quote(workspace, capsys):
    code, data, _ = run(capsys, "quote", "--root", str(workspace), "--date", "2024-06-01")
    assert code == 0
    assert data["number"] == 22
    assert data["quote"]["author"] == "Mahatma Gandhi"


def test_quote_shuffle(workspace, capsys):
    code, data, _ = run(capsys, "quote", "--root", str(workspace), "--today", "2024-06-01", "--shuffle")
    assert code == 0
    assert data["shuffled"] is True
    assert "number" not in data


def test_streaks(workspace, capsys):
    code, data, _ = run(capsys, "streaks", "--root", str(workspace), "--today", "2024-06-12")
    assert code == 0
    assert data["progress"] == {"done": 1, "total": 2}
    assert data["habits"][0]["streak"] == 3
    assert data["habits"][0]["week"][-3:] == [True, True, True]


def test_mood_average(workspace, capsys):
    code, data, _ = run(capsys, "mood-average", "--root", str(workspace), "--today", "2024-06-12")
    assert code == 0
    assert data["recentEntries"] == 4.0
    assert data["today"] is None


def test_clock_uses_profile_cities(workspace, capsys):
    code, data, _ = run(capsys, "clock", "--root", str(workspace))
    assert code == 0
    assert [r["city"] for r in data] == ["Tokyo", "London"]


@pytest.mark.parametrize("clock_yaml", ["world_clock:\n  - Tokyo\n", "world_clock: Tokyo\n"])
def test_clock_rejects_malformed_profile(workspace, capsys, clock_yaml):
    (workspace / "profile.yaml").write_text("timezone: UTC\n" + clock_yaml, encoding="utf-8")
    code, data, err = run(capsys, "clock", "--root", str(workspace))
    assert code == 2
    assert data is None
    assert "world_clock" in err


def test_event_lifecycle(workspace, capsys):
    root = str(workspace)
    code, created, _ = run(capsys, "add-event", "Review", "2024-06-14", "--priority", "high", "--category", "work", "--root", root)
    assert code == 0
    code, edited, _ = run(capsys, "edit-event", created["id"], "--time", "15:00", "--root", root)
    assert code == 0
    assert edited["time"] == "15:00"
    code, listed, _ = run(capsys, "events", "--date", "2024-06-14", "--root", root)
    assert [e["id"] for e in listed] == [created["id"]]
    code, _, _ = run(capsys, "delete-event", created["id"], "--root", root)
    assert code == 0
    code, _, err = run(capsys, "delete-event", created["id"], "--root", root)
    assert code == 2
    assert "not found" in err


def test_add_event_invalid_date(workspace, capsys):
    code, data, err = run(capsys, "add-event", "Review", "2024-02-30", "--root", str(workspace))
    assert code == 2
    assert data is None
    assert "Invalid date key" in err


def test_log_mood(workspace, capsys):
    root = str(workspace)
    code, entry, _ = run(capsys, "log-mood", "good", "--energy", "7", "--today", "2024-06-12", "--root", root)
    assert code == 0
    assert entry == {"date": "2024-06-12", "mood": "good", "energy": 7, "notes": ""}
    code, _, err = run(capsys, "log-mood", "good", "--energy", "11", "--root", root)
    assert code == 2
    assert "energy" in err


def test_habit_lifecycle(workspace, capsys):
    root = str(workspace)
    code, habit, _ = run(capsys, "add-habit", "Meditate", "--root", root)
    assert code == 0
    code, toggled, _ = run(capsys, "toggle-habit", habit["id"], "--today", "2024-06-12", "--root", root)
    assert toggled["completedDates"] == ["2024-06-12"]
    assert toggled["streak"] == 1
    code, untoggled, _ = run(capsys, "toggle-habit", habit["id"], "--today", "2024-06-12", "--root", root)
    assert untoggled["streak"] == 0
    code, _, _ = run(capsys, "delete-habit", habit["id"], "--root", root)
    assert code == 0
    code, _, _ = run(capsys, "toggle-habit", habit["id"], "--root", root)
    assert code == 2


def test_bad_today_argument(workspace, capsys):
    with pytest.raises(SystemExit) as exc:
        main(["insights", "--today", "2024-13-01"])
    assert exc.value.code == 2
