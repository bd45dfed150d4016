# src/todo_scheduler/cli/bootstrap.py

"""
CLI bootstrap helpers.

This module is the "composition root": it loads settings once and wires a
ready-to-use TaskStore with its schema installed.
"""

from __future__ import annotations

import logging

from ..config import Settings, get_settings
from ..tasks.task_store import TaskStore

logger = logging.getLogger(__name__)


def create_task_store(*, settings: Settings | None = None) -> TaskStore:
    """
    Build a TaskStore for settings.db_file and install the schema.

    Keeping settings injectable makes this easy to test; if settings is None,
    falls back to get_settings().
    """
    if settings is None:
        settings = get_settings()

    store = TaskStore(settings.db_file)
    store.ensure_schema()
    logger.info("TaskStore ready db=%s", store.db_path)
    return store
