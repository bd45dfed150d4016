# src/todo_scheduler/cli/main.py

"""
CLI entrypoint (`todo-scheduler-init`).

Initializes logging, then creates the scheduler database if it is missing
and reports how many tasks it holds. Storage errors propagate and end the
process with a traceback.
"""

from __future__ import annotations

import logging

from ..cli.bootstrap import create_task_store
from ..config import get_settings
from ..logging_setup import setup_logging

logger = logging.getLogger(__name__)


def main() -> None:
    settings = get_settings()

    level_name = str(settings.log_level).upper()
    console_level = getattr(logging, level_name, logging.INFO)
    if not isinstance(console_level, int):
        console_level = logging.INFO

    setup_logging(log_dir=settings.log_dir, console_level=console_level)

    logger.info("Starting %s...", settings.app_name)

    store = create_task_store(settings=settings)
    total = store.count_tasks()

    logger.info("Database %s holds %s task(s).", store.db_path, total)


if __name__ == "__main__":
    main()
