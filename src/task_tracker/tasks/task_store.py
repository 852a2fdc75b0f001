# src/task_tracker/tasks/task_store.py

from __future__ import annotations

import logging
from collections.abc import Callable, Iterable
from dataclasses import replace

from .task_models import Priority, Status, Task

logger = logging.getLogger(__name__)


class TaskStore:
    """
    In-memory ordered task collection.

    Semantics:
    - insertion order is kept; only sort_by_* reorders
    - title lookup is exact (case folding is the caller's job) and first-match
    - duplicate titles are allowed; find/set_* only reach the first one,
      remove() drops all of them
    - every Task handed out is a copy, so callers cannot alias stored tasks
    - absent titles are a normal outcome (None / no-op), never an exception
    """

    def __init__(self, tasks: Iterable[Task] | None = None) -> None:
        self._tasks: list[Task] = []
        for task in tasks or ():
            self.add(task)

    def __len__(self) -> int:
        return len(self._tasks)

    # ---- low-level helpers ----

    def _select(self, predicate: Callable[[Task], bool]) -> list[Task]:
        return [replace(t) for t in self._tasks if predicate(t)]

    def _first(self, title: str) -> Task | None:
        idx = self.find_index(title)
        return None if idx is None else self._tasks[idx]

    # ---- mutation ----

    def add(self, task: Task) -> None:
        self._tasks.append(replace(task))
        logger.debug("Task added title=%r total=%d", task.title, len(self._tasks))

    def remove(self, title: str) -> int:
        """Delete every task titled `title`. Returns how many were removed."""
        before = len(self._tasks)
        self._tasks = [t for t in self._tasks if t.title != title]
        removed = before - len(self._tasks)
        logger.debug("Task remove title=%r removed=%d", title, removed)
        return removed

    def set_status(self, title: str, status: Status) -> Status | None:
        """Change the first matching task's status; returns the old status or None."""
        task = self._first(title)
        if task is None:
            return None
        old = task.status
        task.status = status
        logger.debug("Task status title=%r %s -> %s", title, old.value, status.value)
        return old

    def set_priority(self, title: str, priority: Priority) -> Priority | None:
        """Change the first matching task's priority; returns the old priority or None."""
        task = self._first(title)
        if task is None:
            return None
        old = task.priority
        task.priority = priority
        logger.debug("Task priority title=%r %s -> %s", title, old.name, priority.name)
        return old

    def sort_by_title(self) -> None:
        self._tasks.sort(key=lambda t: t.title)

    def sort_by_priority(self) -> None:
        # list.sort is stable: equal priorities keep their relative order.
        self._tasks.sort(key=lambda t: int(t.priority))

    # ---- queries ----

    def find_index(self, title: str) -> int | None:
        for i, task in enumerate(self._tasks):
            if task.title == title:
                return i
        return None

    def find(self, title: str) -> Task | None:
        task = self._first(title)
        return None if task is None else replace(task)

    def get(self, index: int) -> Task:
        return replace(self._tasks[index])

    def list_tasks(self) -> list[Task]:
        return self._select(lambda t: True)

    def filter_by_category(self, category: str) -> list[Task]:
        return self._select(lambda t: t.category == category)

    def filter_by_priority(self, priority: Priority) -> list[Task]:
        return self._select(lambda t: t.priority == priority)

    def filter_by_status(self, status: Status) -> list[Task]:
        return self._select(lambda t: t.status == status)

    def categories(self) -> list[str]:
        """Distinct categories in first-seen order."""
        return list(dict.fromkeys(t.category for t in self._tasks))
