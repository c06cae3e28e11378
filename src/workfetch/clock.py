from __future__ import annotations

import logging
from dataclasses import dataclass
from datetime import datetime
from typing import Protocol

import psutil

from workfetch.errors import BootTimeError
from workfetch.time_utils import from_timestamp_local, now_local

logger = logging.getLogger(__name__)


class Clock(Protocol):
    def now(self) -> datetime:
        ...

    def boot_time(self) -> datetime:
        ...


class SystemClock:
    """Wall clock plus the OS boot instant, both in the local zone."""

    def now(self) -> datetime:
        return now_local()

    def boot_time(self) -> datetime:
        try:
            # Truncated to whole seconds.
            seconds = int(psutil.boot_time())
        except (OSError, RuntimeError, ValueError, psutil.Error) as exc:
            raise BootTimeError(f"Cannot read boot time: {exc}") from exc
        try:
            boot = from_timestamp_local(seconds)
        except (OverflowError, OSError, ValueError) as exc:
            raise BootTimeError(f"Invalid boot timestamp: {seconds}") from exc
        logger.debug("boot time %s", boot.isoformat())
        return boot


@dataclass(frozen=True)
class FixedClock:
    fixed_now: datetime
    fixed_boot: datetime

    def now(self) -> datetime:
        return self.fixed_now

    def boot_time(self) -> datetime:
        return self.fixed_boot
