# src/task_tracker/tasks/due_dates.py

"""
Due date validation.

Accepted shape is DD-MM-YYYY (exactly 10 characters). Each of the two
separators may independently be '-', '/' or '.', so "01/01.2025" passes.
Checks run in order: length, separators, digits, field ranges, days in month.
"""

from __future__ import annotations

from .errors import DateErrorKind, InvalidDate
from .results import Result

DATE_FORMAT_HINT = "DD-MM-YYYY"
DATE_LENGTH = 10
SEPARATORS = frozenset("-/.")

_THIRTY_DAY_MONTHS = frozenset({4, 6, 9, 11})


def is_leap_year(year: int) -> bool:
    return year % 4 == 0 and (year % 100 != 0 or year % 400 == 0)


def days_in_month(month: int, year: int) -> int:
    if month == 2:
        return 29 if is_leap_year(year) else 28
    if month in _THIRTY_DAY_MONTHS:
        return 30
    return 31


def _digits(part: str) -> int | None:
    # int() alone would accept signs, underscores and whitespace.
    if not (part.isascii() and part.isdigit()):
        return None
    return int(part)


def validate_due_date(text: str) -> Result[str]:
    """Return `text` unchanged if it is a real calendar date, else a typed failure."""

    def malformed(detail: str) -> Result[str]:
        return Result.failure(InvalidDate(text, DateErrorKind.MALFORMED, detail))

    def out_of_range(detail: str) -> Result[str]:
        return Result.failure(InvalidDate(text, DateErrorKind.OUT_OF_RANGE, detail))

    if len(text) != DATE_LENGTH:
        return malformed(f"expected {DATE_LENGTH} characters ({DATE_FORMAT_HINT}), got {len(text)}")

    if text[2] not in SEPARATORS or text[5] not in SEPARATORS:
        return malformed("separators must be one of '-', '/', '.'")

    day = _digits(text[0:2])
    month = _digits(text[3:5])
    year = _digits(text[6:10])
    if day is None or month is None or year is None:
        return malformed("day, month and year must be numbers")

    if not 1 <= day <= 31:
        return out_of_range(f"day {day} not in 1..31")
    if not 1 <= month <= 12:
        return out_of_range(f"month {month} not in 1..12")
    if year < 1:
        return out_of_range("year must be 1 or later")

    max_day = days_in_month(month, year)
    if day > max_day:
        return out_of_range(f"month {month:02d}/{year} has only {max_day} days")

    return Result.success(text)
