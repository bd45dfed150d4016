# tests/test_task_db.py

from __future__ import annotations

import sqlite3
from pathlib import Path

import pytest

from todo_scheduler.tasks.task_db import TaskDB, resolve_location


def test_resolve_location_prefers_non_blank_override() -> None:
    assert resolve_location("/data/todo.db", "scheduler.db") == Path("/data/todo.db")
    assert resolve_location("  /data/todo.db ", "scheduler.db") == Path("/data/todo.db")


@pytest.mark.parametrize("override", [None, "", "   "])
def test_resolve_location_falls_back_to_default(override: str | None) -> None:
    assert resolve_location(override, "scheduler.db") == Path("scheduler.db")


def test_exists_is_true_only_for_regular_files(tmp_path: Path) -> None:
    assert not TaskDB(tmp_path).exists()
    assert not TaskDB(tmp_path / "missing.db").exists()

    f = tmp_path / "x.db"
    f.touch()
    db = TaskDB(f)
    assert db.exists()
    assert db.path == f


def test_connect_yields_row_connection_and_closes_it(tmp_path: Path) -> None:
    db = TaskDB(tmp_path / "x.db")

    with db.connect() as conn:
        row = conn.execute("SELECT 1 AS one").fetchone()
        assert row["one"] == 1

    with pytest.raises(sqlite3.ProgrammingError):
        conn.execute("SELECT 1")


def test_connect_closes_on_error(tmp_path: Path) -> None:
    db = TaskDB(tmp_path / "x.db")

    with pytest.raises(RuntimeError):
        with db.connect() as conn:
            raise RuntimeError("boom")

    with pytest.raises(sqlite3.ProgrammingError):
        conn.execute("SELECT 1")
