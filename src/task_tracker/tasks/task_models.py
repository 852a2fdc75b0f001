# src/task_tracker/tasks/task_models.py

from __future__ import annotations

from dataclasses import dataclass
from enum import IntEnum, StrEnum


class Priority(IntEnum):
    """Task urgency. Ordered: LOW < MEDIUM < HIGH."""

    LOW = 0
    MEDIUM = 1
    HIGH = 2


class Status(StrEnum):
    """
    Workflow state of a task.

    Values are the canonical display strings; there is no ordering between them.
    """

    OPEN = "Open"
    IN_PROGRESS = "InProgress"
    DONE = "Done"


@dataclass(slots=True)
class Task:
    title: str
    category: str
    due_date: str
    priority: Priority
    status: Status


def normalize_title(text: str) -> str:
    """Titles are lookup keys: trimmed and lowercased before a Task is built."""
    return text.strip().lower()


def normalize_category(text: str) -> str:
    return text.strip().lower()
