from __future__ import annotations

from datetime import datetime, timedelta

QUARTER_HOUR = 15
# Remainders below this round down, the rest round up.
ROUND_UP_FROM = 8


def now_local() -> datetime:
    return datetime.now().astimezone()


def from_timestamp_local(timestamp: float) -> datetime:
    return datetime.fromtimestamp(timestamp).astimezone()


def same_local_day(value: datetime, reference: datetime) -> bool:
    if value.tzinfo is not None and reference.tzinfo is not None:
        value = value.astimezone(reference.tzinfo)
    return value.date() == reference.date()


def round_to_nearest_15(dt: datetime) -> datetime:
    remainder = dt.minute % QUARTER_HOUR
    if remainder < ROUND_UP_FROM:
        rounded = dt - timedelta(minutes=remainder)
    else:
        rounded = dt + timedelta(minutes=QUARTER_HOUR - remainder)
    return rounded.replace(second=0, microsecond=0)


def whole_minutes(delta: timedelta) -> int:
    """Minutes in ``delta``, truncated toward zero."""
    return int(delta / timedelta(minutes=1))
