# src/task_tracker/tasks/errors.py

from __future__ import annotations

from enum import StrEnum


class TaskTrackerError(Exception):
    """Base class for failures reported by the task core."""


class InvalidEnumValue(TaskTrackerError, ValueError):
    """Text does not name any Priority / Status."""

    def __init__(self, kind: str, text: str) -> None:
        self.kind = kind
        self.text = text
        super().__init__(f"Invalid {kind}: {text!r}")


class DateErrorKind(StrEnum):
    MALFORMED = "malformed"
    OUT_OF_RANGE = "out_of_range"


class InvalidDate(TaskTrackerError, ValueError):
    """
    Due date failed validation.

    `reason` tells a malformed string apart from a well-formed one naming a day
    that does not exist, so the shell can word its re-prompt.
    """

    def __init__(self, text: str, reason: DateErrorKind, detail: str) -> None:
        self.text = text
        self.reason = reason
        self.detail = detail
        super().__init__(f"Invalid date {text!r} ({reason.value}): {detail}")


class SnapshotExportError(TaskTrackerError, OSError):
    """Writing the JSON snapshot failed; the previous file is left in place."""
