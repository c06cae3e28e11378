from __future__ import annotations

from dataclasses import dataclass

from workfetch.clock import Clock
from workfetch.config import Settings
from workfetch.models import UserConfig
from workfetch.resolver import ResolvedStart, resolve_start_time
from workfetch.schedule import Schedule, compute_schedule
from workfetch.storage import ConfigStore, SessionStore


@dataclass(frozen=True)
class WorkdayView:
    config: UserConfig
    start: ResolvedStart
    schedule: Schedule


def compute_workday(
    config_store: ConfigStore,
    session_store: SessionStore,
    clock: Clock,
) -> WorkdayView:
    config = config_store.load_or_create()
    start = resolve_start_time(session_store, clock)
    schedule = compute_schedule(
        start.start_time,
        work_minutes=config.work_minutes,
        break_minutes=config.break_minutes,
        now=clock.now(),
    )
    return WorkdayView(config=config, start=start, schedule=schedule)


def compute_workday_for(settings: Settings, clock: Clock) -> WorkdayView:
    return compute_workday(
        ConfigStore(settings.config_path),
        SessionStore(settings.session_path),
        clock,
    )
