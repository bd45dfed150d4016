# src/todo_scheduler/tasks/task_db.py

from __future__ import annotations

import sqlite3
from collections.abc import Iterator
from contextlib import contextmanager
from pathlib import Path

from .task_errors import StoreConnectionError


def resolve_location(override: str | Path | None, default: str | Path) -> Path:
    """Pick the database location: a non-blank override beats the default."""
    if override is not None and str(override).strip() != "":
        return Path(str(override).strip()).expanduser()
    return Path(default)


class TaskDB:
    """
    Connection provider for the scheduler database.

    Holds the resolved file location and hands out one short-lived
    connection per operation. There is no shared connection state: each
    `connect()` block opens its own handle and closes it on exit.
    """

    def __init__(self, path: str | Path) -> None:
        self._path = Path(path)

    @property
    def path(self) -> Path:
        return self._path

    def exists(self) -> bool:
        return self._path.is_file()

    def _open(self) -> sqlite3.Connection:
        try:
            conn = sqlite3.connect(str(self._path))
        except sqlite3.Error as exc:
            raise StoreConnectionError(exc) from exc
        conn.row_factory = sqlite3.Row
        return conn

    @contextmanager
    def connect(self) -> Iterator[sqlite3.Connection]:
        conn = self._open()
        try:
            yield conn
        finally:
            conn.close()
