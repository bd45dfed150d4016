# src/todo_scheduler/tasks/task_errors.py

"""
Errors raised by the task store.

Every driver failure is wrapped in a TaskStoreError subclass whose message
starts with a stable prefix ("can't insert task: ...") and whose cause is
chained. TaskNotFoundError is the one signal that is NOT wrapped: it lives
outside the TaskStoreError hierarchy so callers can match it on its own.
"""

from __future__ import annotations


class TaskStoreError(RuntimeError):
    """Base class for task store failures."""

    prefix = "task store failure"

    def __init__(self, cause: BaseException | None = None, *, message: str | None = None) -> None:
        self.cause = cause
        head = message or self.prefix
        super().__init__(head if cause is None else f"{head}: {cause}")


class StoreConnectionError(TaskStoreError):
    """Raised when the database file cannot be opened."""

    prefix = "can't open database"


class SchemaError(TaskStoreError):
    """Raised when the scheduler table cannot be installed."""

    prefix = "can't create table"


class InsertError(TaskStoreError):
    """Raised when a task cannot be inserted."""

    prefix = "can't insert task"


class SearchError(TaskStoreError):
    """Raised when a search cannot be executed."""

    prefix = "can't get tasks"


class ScanError(TaskStoreError):
    """Raised when a row cannot be decoded into a Task."""

    prefix = "can't scan task"


class QueryError(TaskStoreError):
    """Raised when a single-task lookup fails for a reason other than not-found."""

    prefix = "can't get task"


class UpdateError(TaskStoreError):
    """Raised when an update statement fails."""

    prefix = "can't update task"


class DeleteError(TaskStoreError):
    """Raised when a delete statement fails."""

    prefix = "can't delete task"


class TaskNotFoundError(LookupError):
    """Raised when no task row matches the requested id."""

    def __init__(self, task_id: int | str) -> None:
        self.task_id = task_id
        super().__init__(f"task not found: id={task_id}")
