from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime, timedelta
from enum import Enum

from workfetch.time_utils import round_to_nearest_15, whole_minutes


class ScheduleState(str, Enum):
    NOT_STARTED = "not_started"
    IN_PROGRESS = "in_progress"
    COMPLETED = "completed"


@dataclass(frozen=True)
class Schedule:
    rounded_start: datetime
    total_required: timedelta
    end_of_day: datetime
    remaining: timedelta
    state: ScheduleState

    @property
    def remaining_minutes(self) -> int:
        return whole_minutes(self.remaining)

    @property
    def goal_reached(self) -> bool:
        return self.state == ScheduleState.COMPLETED


def schedule_state(rounded_start: datetime, remaining: timedelta, now: datetime) -> ScheduleState:
    if whole_minutes(remaining) <= 0:
        return ScheduleState.COMPLETED
    if now < rounded_start:
        return ScheduleState.NOT_STARTED
    return ScheduleState.IN_PROGRESS


def compute_schedule(start: datetime, work_minutes: int, break_minutes: int, now: datetime) -> Schedule:
    rounded_start = round_to_nearest_15(start)
    total_required = timedelta(minutes=work_minutes + break_minutes)
    end_of_day = rounded_start + total_required
    remaining = end_of_day - now
    return Schedule(
        rounded_start=rounded_start,
        total_required=total_required,
        end_of_day=end_of_day,
        remaining=remaining,
        state=schedule_state(rounded_start, remaining, now),
    )
