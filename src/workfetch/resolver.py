from __future__ import annotations

import logging
from dataclasses import dataclass
from datetime import datetime

from workfetch.clock import Clock
from workfetch.models import WorkSession
from workfetch.storage import SessionStore
from workfetch.time_utils import same_local_day

logger = logging.getLogger(__name__)

RESTORED_LABEL = "Restored Start"
SYSTEM_LABEL = "System Start"


@dataclass(frozen=True)
class ResolvedStart:
    start_time: datetime
    boot_time: datetime
    is_restored: bool

    @property
    def label(self) -> str:
        return source_label(self.is_restored)


def classify_start(start_time: datetime, boot_time: datetime) -> bool:
    """True when today's start predates a reboot that happened later the same day."""
    return same_local_day(start_time, boot_time) and start_time < boot_time


def source_label(is_restored: bool) -> str:
    return RESTORED_LABEL if is_restored else SYSTEM_LABEL


def _cached_start(store: SessionStore, now: datetime) -> datetime | None:
    cached = store.load()
    if not cached.ok:
        logger.debug("no usable session: %s", cached.error)
        return None
    try:
        return cached.value.start_time.astimezone(now.tzinfo)
    except (OverflowError, ValueError) as exc:
        logger.debug("cached start out of range: %s", exc)
        return None


def resolve_start_time(store: SessionStore, clock: Clock) -> ResolvedStart:
    now = clock.now()
    boot = clock.boot_time().astimezone(now.tzinfo)

    stored = _cached_start(store, now)
    if stored is not None:
        if same_local_day(stored, now):
            logger.debug("using cached start %s", stored.isoformat())
            return ResolvedStart(start_time=stored, boot_time=boot, is_restored=classify_start(stored, boot))
        logger.debug("cached start %s is stale", stored.isoformat())

    if not store.save(WorkSession(start_time=boot)):
        logger.debug("session not persisted, start will be recomputed next run")
    return ResolvedStart(start_time=boot, boot_time=boot, is_restored=classify_start(boot, boot))
