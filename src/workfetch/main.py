from __future__ import annotations

import logging

from workfetch.clock import SystemClock
from workfetch.config import load_settings
from workfetch.errors import BootTimeError
from workfetch.logging_setup import setup_logging
from workfetch.presenter import print_report
from workfetch.service import compute_workday_for

logger = logging.getLogger(__name__)


def run() -> None:
    setup_logging()
    settings = load_settings()
    try:
        view = compute_workday_for(settings, SystemClock())
    except BootTimeError as exc:
        logger.error("aborting: %s", exc)
        raise SystemExit(f"workfetch: {exc}") from exc
    print_report(view)
