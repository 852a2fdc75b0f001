# tests/test_codecs.py

from __future__ import annotations

import pytest

from task_tracker.tasks.codecs import format_priority, format_status, parse_priority, parse_status
from task_tracker.tasks.errors import InvalidEnumValue
from task_tracker.tasks.task_models import Priority, Status


@pytest.mark.parametrize("prio", list(Priority))
def test_priority_round_trip(prio: Priority) -> None:
    assert parse_priority(format_priority(prio)).unwrap() is prio


@pytest.mark.parametrize("status", list(Status))
def test_status_round_trip(status: Status) -> None:
    assert parse_status(format_status(status)).unwrap() is status


def test_canonical_display_forms() -> None:
    assert [format_priority(p) for p in Priority] == ["Low", "Medium", "High"]
    assert [format_status(s) for s in Status] == ["Open", "InProgress", "Done"]


def test_parse_is_case_insensitive() -> None:
    assert parse_priority("HIGH").unwrap() is Priority.HIGH
    assert parse_priority(" medium ").unwrap() is Priority.MEDIUM
    assert parse_status("dOnE").unwrap() is Status.DONE


def test_in_progress_has_two_spellings() -> None:
    assert parse_status("InProgress").unwrap() is Status.IN_PROGRESS
    assert parse_status("in progress").unwrap() is Status.IN_PROGRESS


@pytest.mark.parametrize("text", ["", "urgent", "lowest", "in-progress"])
def test_unknown_text_is_a_typed_failure(text: str) -> None:
    res = parse_priority(text) if text != "in-progress" else parse_status(text)
    assert not res.ok
    assert isinstance(res.error, InvalidEnumValue)
    assert res.error.text == text
    with pytest.raises(ValueError):
        res.unwrap()


def test_failure_names_the_vocabulary() -> None:
    assert parse_priority("x").error.kind == "priority"  # type: ignore[union-attr]
    assert parse_status("x").error.kind == "status"  # type: ignore[union-attr]


def test_format_out_of_range_is_a_fault() -> None:
    with pytest.raises(AssertionError):
        format_priority(7)  # type: ignore[arg-type]
    with pytest.raises(AssertionError):
        format_status("Blocked")  # type: ignore[arg-type]
