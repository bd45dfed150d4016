# src/todo_scheduler/config.py

"""Centralized settings loaded from environment variables (+ optional .env).

Design goals:
- One Settings object for the whole app, computed once at import.
- The database location is resolved here and then held by the store.
"""

from __future__ import annotations

import os
from dataclasses import dataclass
from pathlib import Path

from dotenv import load_dotenv

from .tasks.task_db import resolve_location

ENV_PREFIX = "TODO"

DEFAULT_DB_FILE = Path("scheduler.db")
DEFAULT_LOG_DIR = Path(".local/todo")


def _k(suffix: str) -> str:
    """Build env var name with the project prefix."""
    return f"{ENV_PREFIX}_{suffix}"


load_dotenv(override=False)


def _env(name: str, default: str = "") -> str:
    v = os.getenv(name)
    return default if v is None else v


def _env_path(name: str, default: Path) -> Path:
    raw = os.getenv(name)
    if raw is None or raw.strip() == "":
        return default
    return Path(raw).expanduser()


@dataclass(frozen=True, slots=True)
class Settings:
    # ---- App / logging ----
    app_name: str
    log_level: str
    log_dir: Path

    # ---- Storage ----
    db_file: Path

    @staticmethod
    def from_env() -> "Settings":
        app_name = _env(_k("APP_NAME"), "todo-scheduler").strip() or "todo-scheduler"
        log_level = _env(_k("LOG_LEVEL"), "INFO")
        log_dir = _env_path(_k("LOG_DIR"), DEFAULT_LOG_DIR)

        # TODO_DBFILE wins when set to anything non-blank.
        db_file = resolve_location(os.getenv(_k("DBFILE")), DEFAULT_DB_FILE)

        return Settings(
            app_name=app_name,
            log_level=log_level,
            log_dir=log_dir,
            db_file=db_file,
        )


SETTINGS = Settings.from_env()


def get_settings() -> Settings:
    return SETTINGS
