from __future__ import annotations

from datetime import datetime
from zoneinfo import ZoneInfo

from workfetch.clock import FixedClock
from workfetch.config import settings_for
from workfetch.models import WorkSession
from workfetch.schedule import ScheduleState
from workfetch.service import compute_workday_for
from workfetch.storage import SessionStore


def _dt(d: int, h: int, minute: int = 0) -> datetime:
    return datetime(2026, 2, d, h, minute, tzinfo=ZoneInfo("Europe/Oslo"))


def test_first_run_creates_both_files(tmp_path) -> None:
    settings = settings_for(tmp_path)
    clock = FixedClock(fixed_now=_dt(4, 10, 0), fixed_boot=_dt(4, 8, 4))

    view = compute_workday_for(settings, clock)

    assert settings.config_path.read_text(encoding="utf-8") == "work_minutes = 480\nbreak_minutes = 45\n"
    assert SessionStore(settings.session_path).load().value == WorkSession(start_time=_dt(4, 8, 4))
    assert view.schedule.rounded_start == _dt(4, 8, 0)
    assert view.schedule.end_of_day == _dt(4, 16, 45)
    assert view.schedule.state == ScheduleState.IN_PROGRESS
    assert view.start.label == "System Start"


def test_reboot_later_same_day_keeps_morning_start(tmp_path) -> None:
    settings = settings_for(tmp_path)
    settings.config_path.write_text("work_minutes = 420\nbreak_minutes = 30\n", encoding="utf-8")
    compute_workday_for(settings, FixedClock(fixed_now=_dt(4, 9, 0), fixed_boot=_dt(4, 7, 40)))

    view = compute_workday_for(settings, FixedClock(fixed_now=_dt(4, 15, 0), fixed_boot=_dt(4, 13, 0)))

    assert view.start.start_time == _dt(4, 7, 40)
    assert view.start.label == "Restored Start"
    assert view.schedule.rounded_start == _dt(4, 7, 45)
    assert view.schedule.end_of_day == _dt(4, 15, 15)
    assert view.schedule.remaining_minutes == 15


def test_next_day_starts_fresh(tmp_path) -> None:
    settings = settings_for(tmp_path)
    compute_workday_for(settings, FixedClock(fixed_now=_dt(4, 9, 0), fixed_boot=_dt(4, 7, 40)))

    view = compute_workday_for(settings, FixedClock(fixed_now=_dt(5, 9, 0), fixed_boot=_dt(5, 8, 10)))

    assert view.start.start_time == _dt(5, 8, 10)
    assert view.schedule.rounded_start == _dt(5, 8, 15)


def test_huge_work_minutes_fall_back_to_defaults(tmp_path) -> None:
    settings = settings_for(tmp_path)
    settings.config_path.write_text("work_minutes = 4294967295\nbreak_minutes = 45\n", encoding="utf-8")

    view = compute_workday_for(settings, FixedClock(fixed_now=_dt(4, 10, 0), fixed_boot=_dt(4, 9, 0)))

    assert view.config.work_minutes == 480
    assert view.schedule.end_of_day == _dt(4, 17, 45)
    assert settings.config_path.read_text(encoding="utf-8") == "work_minutes = 480\nbreak_minutes = 45\n"
