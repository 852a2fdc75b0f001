# src/task_tracker/tasks/results.py

from __future__ import annotations

from dataclasses import dataclass
from typing import Generic, TypeVar

from .errors import TaskTrackerError

T = TypeVar("T")


@dataclass(frozen=True, slots=True)
class Result(Generic[T]):
    """
    Outcome of a parse/validation: either a value or a typed failure.

    Parsers return this instead of raising so the shell can branch on `ok`
    and re-prompt; `unwrap()` is there for callers that want an exception.
    """

    value: T | None = None
    error: TaskTrackerError | None = None

    @property
    def ok(self) -> bool:
        return self.error is None

    def unwrap(self) -> T:
        if self.error is not None:
            raise self.error
        return self.value  # type: ignore[return-value]

    @classmethod
    def success(cls, value: T) -> Result[T]:
        return cls(value=value)

    @classmethod
    def failure(cls, error: TaskTrackerError) -> Result[T]:
        return cls(error=error)
