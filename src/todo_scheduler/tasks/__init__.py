"""
Task persistence.

Components:
- task_models.py: the Task record
- task_errors.py: error taxonomy (wrapped driver failures + not-found signal)
- task_db.py: database location resolution + scoped SQLite connections
- task_store.py: the scheduler table and its operations
"""

from .task_errors import (
    DeleteError,
    InsertError,
    QueryError,
    ScanError,
    SchemaError,
    SearchError,
    StoreConnectionError,
    TaskNotFoundError,
    TaskStoreError,
    UpdateError,
)
from .task_models import Task
from .task_store import SEARCH_LIMIT, TaskStore

__all__ = [
    "SEARCH_LIMIT",
    "DeleteError",
    "InsertError",
    "QueryError",
    "ScanError",
    "SchemaError",
    "SearchError",
    "StoreConnectionError",
    "Task",
    "TaskNotFoundError",
    "TaskStore",
    "TaskStoreError",
    "UpdateError",
]
