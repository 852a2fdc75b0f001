# src/task_tracker/cli/bootstrap.py

"""
CLI bootstrap helpers.

This module is the "composition root":
- loads settings once,
- ensures local (gitignored) directories exist,
- builds the single TaskStore owned by AppState, optionally seeded with examples.
"""

from __future__ import annotations

import logging

from ..config import get_settings
from ..core.state import AppState
from ..tasks.task_models import Priority, Status, Task
from ..tasks.task_store import TaskStore

logger = logging.getLogger(__name__)

# Demo content, added in this order.
EXAMPLE_TASKS: tuple[tuple[str, str, str, Priority, Status], ...] = (
    ("finja2", "service", "25-12-2025", Priority.MEDIUM, Status.IN_PROGRESS),
    ("xavi", "humor", "23-06-1998", Priority.LOW, Status.DONE),
    ("finja", "service", "25-12-2025", Priority.HIGH, Status.OPEN),
    ("dennis files", "it", "28-02-2028", Priority.HIGH, Status.OPEN),
)


def example_tasks() -> list[Task]:
    return [Task(*fields) for fields in EXAMPLE_TASKS]


def _ensure_local_dirs(settings) -> None:
    settings.data_dir.mkdir(parents=True, exist_ok=True)
    settings.export_path.parent.mkdir(parents=True, exist_ok=True)


def create_initial_state(*, settings=None) -> AppState:
    """
    Create AppState from the provided settings.

    Keeping settings injectable makes the app easier to test and avoids hidden global config reads.
    If settings is None, falls back to get_settings().
    """
    if settings is None:
        settings = get_settings()

    _ensure_local_dirs(settings)

    store = TaskStore(example_tasks() if settings.seed_examples else None)
    logger.info("TaskStore ready seeded=%s total=%d", settings.seed_examples, len(store))
    return AppState(settings=settings, store=store)
