from __future__ import annotations

import pytest

from workfetch import clock as clock_module
from workfetch.clock import SystemClock
from workfetch.errors import BootTimeError


def test_system_boot_time_is_local_and_whole_seconds(monkeypatch) -> None:
    monkeypatch.setattr(clock_module.psutil, "boot_time", lambda: 1_770_000_000.75)
    boot = SystemClock().boot_time()
    assert boot.tzinfo is not None
    assert boot.timestamp() == 1_770_000_000
    assert boot.microsecond == 0


def test_unreadable_boot_time_is_fatal(monkeypatch) -> None:
    def broken() -> float:
        raise OSError("no /proc")

    monkeypatch.setattr(clock_module.psutil, "boot_time", broken)
    with pytest.raises(BootTimeError):
        SystemClock().boot_time()


def test_unrepresentable_boot_time_is_fatal(monkeypatch) -> None:
    monkeypatch.setattr(clock_module.psutil, "boot_time", lambda: 1e20)
    with pytest.raises(BootTimeError):
        SystemClock().boot_time()


def test_system_now_is_aware() -> None:
    assert SystemClock().now().tzinfo is not None
