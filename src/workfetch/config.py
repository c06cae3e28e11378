from __future__ import annotations

import logging
from dataclasses import dataclass
from pathlib import Path

from platformdirs import user_config_path

from workfetch.models import CONFIG_FILE_NAME, SESSION_FILE_NAME

logger = logging.getLogger(__name__)

APP_NAME = "workfetch"
APP_AUTHOR = "internal"


@dataclass(frozen=True)
class Settings:
    config_dir: Path
    session_path: Path
    config_path: Path


def resolve_config_dir() -> Path | None:
    try:
        path = user_config_path(APP_NAME, APP_AUTHOR)
        path.mkdir(parents=True, exist_ok=True)
    except OSError as exc:
        logger.info("config dir unavailable, using working directory: %s", exc)
        return None
    return path


def settings_for(config_dir: Path) -> Settings:
    return Settings(
        config_dir=config_dir,
        session_path=config_dir / SESSION_FILE_NAME,
        config_path=config_dir / CONFIG_FILE_NAME,
    )


def load_settings() -> Settings:
    config_dir = resolve_config_dir()
    return settings_for(config_dir if config_dir is not None else Path("."))
