# tests/conftest.py

from __future__ import annotations

import logging
from collections.abc import Iterator
from pathlib import Path
from types import SimpleNamespace

import pytest

from todo_scheduler.tasks.task_store import TaskStore


@pytest.fixture()
def db_path(tmp_path: Path) -> Path:
    return tmp_path / "scheduler.db"


@pytest.fixture()
def store(db_path: Path) -> TaskStore:
    """TaskStore on a fresh tmp database with the schema installed."""
    s = TaskStore(db_path)
    s.ensure_schema()
    return s


@pytest.fixture()
def settings(tmp_path: Path) -> SimpleNamespace:
    """
    Minimal settings object compatible with bootstrap/main.

    A SimpleNamespace rather than the real config keeps tests isolated from
    the process environment.
    """
    return SimpleNamespace(
        app_name="todo-test",
        log_level="DEBUG",
        log_dir=tmp_path / "logs",
        db_file=tmp_path / "data" / "scheduler.db",
    )


@pytest.fixture()
def restore_root_logging() -> Iterator[None]:
    """setup_logging() replaces root handlers; put the originals back afterwards."""
    root = logging.getLogger()
    handlers = list(root.handlers)
    level = root.level
    yield
    for h in list(root.handlers):
        if h not in handlers:
            root.removeHandler(h)
            h.close()
    for h in handlers:
        if h not in root.handlers:
            root.addHandler(h)
    root.setLevel(level)
    logging.captureWarnings(False)
