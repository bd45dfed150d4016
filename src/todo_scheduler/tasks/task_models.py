# src/todo_scheduler/tasks/task_models.py

from __future__ import annotations

from dataclasses import dataclass


@dataclass(slots=True)
class Task:
    id: int

    date: str  # YYYYMMDD
    title: str

    comment: str = ""
    repeat: str = ""  # opaque recurrence descriptor, never interpreted here
