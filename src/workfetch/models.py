from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime

DEFAULT_WORK_MINUTES = 480
DEFAULT_BREAK_MINUTES = 45
# Upper bound for either duration, keeps end-of-day arithmetic inside the datetime range.
MAX_CONFIG_MINUTES = 1_000_000

SESSION_FILE_NAME = "last_session.json"
CONFIG_FILE_NAME = "config.toml"


@dataclass(frozen=True)
class WorkSession:
    start_time: datetime


@dataclass(frozen=True)
class UserConfig:
    work_minutes: int = DEFAULT_WORK_MINUTES
    break_minutes: int = DEFAULT_BREAK_MINUTES


DEFAULT_CONFIG = UserConfig()
