# src/todo_scheduler/tasks/task_store.py

from __future__ import annotations

import calendar
import logging
import re
import sqlite3
from pathlib import Path
from typing import Any

from .task_db import TaskDB
from .task_errors import (
    DeleteError,
    InsertError,
    QueryError,
    ScanError,
    SchemaError,
    SearchError,
    TaskNotFoundError,
    UpdateError,
)
from .task_models import Task

logger = logging.getLogger(__name__)

SEARCH_LIMIT = 20

# DD.MM.YYYY; calendar validity is checked by _date_key afterwards.
_DATE_QUERY_RE = re.compile(r"([0-2][0-9]|3[0-1])\.(0[1-9]|1[0-2])\.([0-9]{4})")

# ASCII-only: int() would also take "1_0" or non-ASCII digits.
_ID_RE = re.compile(r"[+-]?[0-9]+", re.ASCII)

_SCHEMA_SQL = """
CREATE TABLE scheduler (
    id INTEGER PRIMARY KEY AUTOINCREMENT,
    date TEXT NOT NULL,
    title TEXT NOT NULL,
    comment TEXT,
    repeat TEXT
);
CREATE INDEX idx_date ON scheduler(date);
"""

_SELECT_COLUMNS = "SELECT id, date, title, comment, repeat FROM scheduler"


def _task_id(value: int | str) -> int | str:
    # HTTP callers hand ids over as strings.
    if isinstance(value, str):
        s = value.strip()
        return int(s) if _ID_RE.fullmatch(s) else s
    return value


def _date_key(day: int, month: int, year: int) -> str:
    """Validate a calendar date and render it as YYYYMMDD. Year 0 is allowed."""
    last = calendar.mdays[month] + (1 if month == 2 and calendar.isleap(year) else 0)
    if not 1 <= day <= last:
        raise ValueError(f"day out of range: {day:02d}.{month:02d}.{year:04d}")
    return f"{year:04d}{month:02d}{day:02d}"


def _escape_like(text: str) -> str:
    return text.replace("\\", "\\\\").replace("%", "\\%").replace("_", "\\_")


def _opt_text(value: Any) -> str:
    if value is None:
        return ""
    if not isinstance(value, str):
        raise TypeError(f"expected text, got {type(value).__name__}")
    return value


class TaskStore:
    """
    SQLite store for the `scheduler` table.

    Each method opens its own connection through TaskDB and closes it before
    returning, so the store holds no connection state between calls and
    concurrent callers rely on SQLite's own locking.

    Driver failures surface as TaskStoreError subclasses; a missing row on
    get/update surfaces as TaskNotFoundError. Nothing is retried.
    """

    def __init__(self, db_path: str | Path = "scheduler.db") -> None:
        self._db_path = Path(db_path)
        self._db_path.parent.mkdir(parents=True, exist_ok=True)
        self._db = TaskDB(self._db_path)

    @property
    def db_path(self) -> Path:
        return self._db_path

    # ---- low-level helpers ----

    @staticmethod
    def _row_to_task(row: sqlite3.Row) -> Task:
        try:
            task_id = row["id"]
            date = row["date"]
            title = row["title"]
            if not isinstance(task_id, int):
                raise TypeError(f"id: expected integer, got {type(task_id).__name__}")
            if not isinstance(date, str) or not isinstance(title, str):
                raise TypeError("date and title must be text")
            return Task(
                id=task_id,
                date=date,
                title=title,
                comment=_opt_text(row["comment"]),
                repeat=_opt_text(row["repeat"]),
            )
        except (IndexError, KeyError, TypeError) as exc:
            raise ScanError(exc) from exc

    # ---- public API ----

    def ensure_schema(self) -> None:
        """
        Install the scheduler table and its date index.

        An existing database file is taken as already installed and left
        untouched; its table shape is not verified.
        """
        if self._db.exists():
            logger.debug("TaskStore schema present db=%s", self._db_path)
            return

        with self._db.connect() as conn:
            try:
                conn.executescript(_SCHEMA_SQL)
            except sqlite3.Error as exc:
                raise SchemaError(exc) from exc

        logger.info("TaskStore schema installed db=%s", self._db_path)

    def count_tasks(self) -> int:
        with self._db.connect() as conn:
            try:
                (n,) = conn.execute("SELECT COUNT(*) FROM scheduler").fetchone()
            except sqlite3.Error as exc:
                raise QueryError(exc) from exc
            return int(n)

    def insert_task(self, date: str, title: str, comment: str = "", repeat: str = "") -> int:
        """Insert a task and return its new id. Inputs are stored as given."""
        with self._db.connect() as conn:
            try:
                cur = conn.execute(
                    """
                    INSERT INTO scheduler (date, title, comment, repeat)
                    VALUES (:date, :title, :comment, :repeat)
                    """,
                    {"date": date, "title": title, "comment": comment, "repeat": repeat},
                )
                conn.commit()
            except sqlite3.Error as exc:
                raise InsertError(exc) from exc

            rowid = cur.lastrowid
            if rowid is None:
                raise InsertError(message="can't get last insert id")

        task_id = int(rowid)
        logger.debug("Task inserted id=%s date=%s", task_id, date)
        return task_id

    def search_tasks(self, query: str) -> list[Task]:
        """
        Search tasks, at most SEARCH_LIMIT of them, ordered by date.

        A query shaped like DD.MM.YYYY selects the tasks on that exact date.
        Anything else is matched as a literal substring of title or comment.
        """
        m = _DATE_QUERY_RE.fullmatch(query)
        if m:
            try:
                date_key = _date_key(int(m.group(1)), int(m.group(2)), int(m.group(3)))
            except ValueError as exc:
                raise SearchError(exc, message="error while parsing date") from exc

            sql = f"{_SELECT_COLUMNS} WHERE date = :date ORDER BY date ASC LIMIT :limit"
            params: dict[str, Any] = {
                "date": date_key,
                "limit": SEARCH_LIMIT,
            }
        else:
            sql = (
                f"{_SELECT_COLUMNS} "
                "WHERE title LIKE :search ESCAPE '\\' OR comment LIKE :search ESCAPE '\\' "
                "ORDER BY date ASC LIMIT :limit"
            )
            params = {"search": f"%{_escape_like(query)}%", "limit": SEARCH_LIMIT}

        with self._db.connect() as conn:
            try:
                rows = conn.execute(sql, params).fetchall()
            except sqlite3.Error as exc:
                raise SearchError(exc) from exc

        tasks = [self._row_to_task(r) for r in rows]
        logger.debug("Task search query=%r found=%s", query, len(tasks))
        return tasks

    def get_task(self, task_id: int | str) -> Task:
        with self._db.connect() as conn:
            try:
                row = conn.execute(
                    f"{_SELECT_COLUMNS} WHERE id = :id",
                    {"id": _task_id(task_id)},
                ).fetchone()
            except sqlite3.Error as exc:
                raise QueryError(exc) from exc

        if row is None:
            raise TaskNotFoundError(task_id)
        return self._row_to_task(row)

    def update_task(self, task: Task) -> None:
        """
        Overwrite date/title/comment/repeat of an existing task.

        Existence is decided by the affected row count of the UPDATE itself,
        so there is no window between check and write.
        """
        with self._db.connect() as conn:
            try:
                cur = conn.execute(
                    """
                    UPDATE scheduler
                    SET date = :date, title = :title, comment = :comment, repeat = :repeat
                    WHERE id = :id
                    """,
                    {
                        "id": _task_id(task.id),
                        "date": task.date,
                        "title": task.title,
                        "comment": task.comment,
                        "repeat": task.repeat,
                    },
                )
                conn.commit()
            except sqlite3.Error as exc:
                raise UpdateError(exc) from exc

            if cur.rowcount == 0:
                raise TaskNotFoundError(task.id)

        logger.debug("Task updated id=%s date=%s", task.id, task.date)

    def update_task_date(self, task_id: int | str, date: str) -> None:
        """Move a task to another date. A missing id is a silent no-op."""
        with self._db.connect() as conn:
            try:
                cur = conn.execute(
                    "UPDATE scheduler SET date = :date WHERE id = :id",
                    {"id": _task_id(task_id), "date": date},
                )
                conn.commit()
            except sqlite3.Error as exc:
                raise UpdateError(exc) from exc

        logger.debug("Task date updated id=%s date=%s rows=%s", task_id, date, cur.rowcount)

    def delete_task(self, task_id: int | str) -> None:
        """Delete a task. Deleting a missing id succeeds."""
        with self._db.connect() as conn:
            try:
                cur = conn.execute(
                    "DELETE FROM scheduler WHERE id = :id",
                    {"id": _task_id(task_id)},
                )
                conn.commit()
            except sqlite3.Error as exc:
                raise DeleteError(exc) from exc

        logger.debug("Task deleted id=%s rows=%s", task_id, cur.rowcount)
