from __future__ import annotations

import json
import logging
import tomllib
from dataclasses import dataclass
from datetime import datetime
from pathlib import Path
from typing import Any, Generic, TypeVar

from workfetch.models import DEFAULT_CONFIG, MAX_CONFIG_MINUTES, UserConfig, WorkSession

logger = logging.getLogger(__name__)

T = TypeVar("T")


@dataclass(frozen=True)
class LoadResult(Generic[T]):
    value: T | None = None
    error: str | None = None

    @property
    def ok(self) -> bool:
        return self.error is None and self.value is not None

    @classmethod
    def success(cls, value: T) -> LoadResult[T]:
        return cls(value=value)

    @classmethod
    def failure(cls, error: str) -> LoadResult[T]:
        return cls(error=error)


def session_to_json(session: WorkSession) -> str:
    return json.dumps({"start_time": session.start_time.isoformat()})


def session_from_json(text: str) -> LoadResult[WorkSession]:
    try:
        raw = json.loads(text)
    except json.JSONDecodeError as exc:
        return LoadResult.failure(f"invalid JSON: {exc}")
    if not isinstance(raw, dict) or not isinstance(raw.get("start_time"), str):
        return LoadResult.failure("start_time missing or not a string")
    try:
        start_time = datetime.fromisoformat(raw["start_time"])
    except ValueError as exc:
        return LoadResult.failure(f"invalid start_time: {exc}")
    if start_time.tzinfo is None:
        return LoadResult.failure("start_time has no UTC offset")
    return LoadResult.success(WorkSession(start_time=start_time))


def config_to_toml(config: UserConfig) -> str:
    return f"work_minutes = {config.work_minutes}\nbreak_minutes = {config.break_minutes}\n"


def _is_int(value: Any) -> bool:
    return isinstance(value, int) and not isinstance(value, bool)


def config_from_toml(text: str) -> LoadResult[UserConfig]:
    try:
        raw = tomllib.loads(text)
    except tomllib.TOMLDecodeError as exc:
        return LoadResult.failure(f"invalid TOML: {exc}")

    work = raw.get("work_minutes")
    brk = raw.get("break_minutes")
    if not _is_int(work) or not 0 < work <= MAX_CONFIG_MINUTES:
        return LoadResult.failure(f"work_minutes must be an integer in 1..{MAX_CONFIG_MINUTES}")
    if not _is_int(brk) or not 0 <= brk <= MAX_CONFIG_MINUTES:
        return LoadResult.failure(f"break_minutes must be an integer in 0..{MAX_CONFIG_MINUTES}")
    return LoadResult.success(UserConfig(work_minutes=work, break_minutes=brk))


def _read_text(path: Path) -> LoadResult[str]:
    try:
        return LoadResult.success(path.read_text(encoding="utf-8"))
    except (OSError, UnicodeDecodeError) as exc:
        return LoadResult.failure(f"cannot read {path}: {exc}")


def _write_text(path: Path, text: str) -> bool:
    try:
        path.write_text(text, encoding="utf-8")
    except OSError as exc:
        logger.debug("cannot write %s: %s", path, exc)
        return False
    return True


class SessionStore:
    """Single-slot store for the last known workday start."""

    def __init__(self, path: Path) -> None:
        self.path = path

    def load(self) -> LoadResult[WorkSession]:
        text = _read_text(self.path)
        if not text.ok:
            return LoadResult.failure(text.error or "unreadable")
        return session_from_json(text.value or "")

    def save(self, session: WorkSession) -> bool:
        return _write_text(self.path, session_to_json(session))


class ConfigStore:
    """Single-slot store for the user's work and break durations."""

    def __init__(self, path: Path) -> None:
        self.path = path

    def load(self) -> LoadResult[UserConfig]:
        text = _read_text(self.path)
        if not text.ok:
            return LoadResult.failure(text.error or "unreadable")
        return config_from_toml(text.value or "")

    def save(self, config: UserConfig) -> bool:
        return _write_text(self.path, config_to_toml(config))

    def load_or_create(self) -> UserConfig:
        result = self.load()
        if result.ok:
            return result.value
        logger.info("using default config: %s", result.error)
        self.save(DEFAULT_CONFIG)
        return DEFAULT_CONFIG
