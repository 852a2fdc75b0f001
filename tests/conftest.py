# tests/conftest.py

from __future__ import annotations

from pathlib import Path
from types import SimpleNamespace

import pytest

from task_tracker.cli.bootstrap import example_tasks
from task_tracker.core.state import AppState
from task_tracker.tasks.task_models import Priority, Status, Task
from task_tracker.tasks.task_store import TaskStore


@pytest.fixture()
def settings(tmp_path: Path) -> SimpleNamespace:
    """
    Minimal settings object compatible with AppState and the command handlers.

    We intentionally use a SimpleNamespace rather than importing real config,
    to keep unit tests isolated from the environment and any .env file.
    """
    data_dir = tmp_path / "data"
    return SimpleNamespace(
        app_name="task-tracker-test",
        log_level="WARNING",
        log_to_file=False,
        seed_examples=False,
        data_dir=data_dir,
        export_path=data_dir / "tasks.json",
    )


@pytest.fixture()
def store() -> TaskStore:
    return TaskStore(example_tasks())


@pytest.fixture()
def state(settings: SimpleNamespace, store: TaskStore) -> AppState:
    return AppState(settings=settings, store=store)


@pytest.fixture()
def alpha() -> Task:
    return Task("alpha", "work", "01-01-2025", Priority.LOW, Status.OPEN)


@pytest.fixture()
def beta() -> Task:
    return Task("beta", "home", "02-02-2025", Priority.HIGH, Status.DONE)
