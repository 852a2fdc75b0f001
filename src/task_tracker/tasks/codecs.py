# src/task_tracker/tasks/codecs.py

from __future__ import annotations

from .errors import InvalidEnumValue
from .results import Result
from .task_models import Priority, Status

_PRIORITY_BY_TEXT: dict[str, Priority] = {
    "low": Priority.LOW,
    "medium": Priority.MEDIUM,
    "high": Priority.HIGH,
}

# "in progress" is accepted as a second spelling of InProgress.
_STATUS_BY_TEXT: dict[str, Status] = {
    "open": Status.OPEN,
    "inprogress": Status.IN_PROGRESS,
    "in progress": Status.IN_PROGRESS,
    "done": Status.DONE,
}

_PRIORITY_DISPLAY: dict[Priority, str] = {
    Priority.LOW: "Low",
    Priority.MEDIUM: "Medium",
    Priority.HIGH: "High",
}

_STATUS_DISPLAY: dict[Status, str] = {
    Status.OPEN: "Open",
    Status.IN_PROGRESS: "InProgress",
    Status.DONE: "Done",
}

# Allowed-value lists shown by the shell when input is rejected.
PRIORITY_CHOICES: tuple[str, ...] = ("Low", "Medium", "High")
STATUS_CHOICES: tuple[str, ...] = ("Open", "InProgress", "In Progress", "Done")


def parse_priority(text: str) -> Result[Priority]:
    prio = _PRIORITY_BY_TEXT.get(text.strip().lower())
    if prio is None:
        return Result.failure(InvalidEnumValue("priority", text))
    return Result.success(prio)


def parse_status(text: str) -> Result[Status]:
    status = _STATUS_BY_TEXT.get(text.strip().lower())
    if status is None:
        return Result.failure(InvalidEnumValue("status", text))
    return Result.success(status)


def format_priority(prio: Priority) -> str:
    try:
        return _PRIORITY_DISPLAY[prio]
    except KeyError:
        raise AssertionError(f"unreachable priority value: {prio!r}") from None


def format_status(status: Status) -> str:
    try:
        return _STATUS_DISPLAY[status]
    except KeyError:
        raise AssertionError(f"unreachable status value: {status!r}") from None
