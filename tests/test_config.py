# tests/test_config.py

from __future__ import annotations

from pathlib import Path

import pytest

from task_tracker.config import Settings

_VARS = ("APP_NAME", "LOG_LEVEL", "LOG_TO_FILE", "SEED_EXAMPLES", "DATA_DIR", "EXPORT_PATH")


@pytest.fixture(autouse=True)
def clean_env(monkeypatch: pytest.MonkeyPatch) -> None:
    for name in _VARS:
        monkeypatch.delenv(f"TASK_TRACKER_{name}", raising=False)


def test_defaults() -> None:
    s = Settings.from_env()
    assert s.app_name == "task-tracker"
    assert s.log_level == "WARNING"
    assert s.log_to_file is True
    assert s.seed_examples is True
    assert s.data_dir == Path(".local/task_tracker")
    assert s.export_path == Path(".local/task_tracker/tasks.json")


def test_overrides(monkeypatch: pytest.MonkeyPatch, tmp_path: Path) -> None:
    monkeypatch.setenv("TASK_TRACKER_LOG_LEVEL", "debug")
    monkeypatch.setenv("TASK_TRACKER_SEED_EXAMPLES", "no")
    monkeypatch.setenv("TASK_TRACKER_LOG_TO_FILE", "0")
    monkeypatch.setenv("TASK_TRACKER_DATA_DIR", str(tmp_path))

    s = Settings.from_env()
    assert s.log_level == "DEBUG"
    assert s.seed_examples is False
    assert s.log_to_file is False
    assert s.data_dir == tmp_path
    assert s.export_path == tmp_path / "tasks.json"


def test_export_path_independent_of_data_dir(monkeypatch: pytest.MonkeyPatch, tmp_path: Path) -> None:
    monkeypatch.setenv("TASK_TRACKER_EXPORT_PATH", str(tmp_path / "out" / "snap.json"))
    assert Settings.from_env().export_path == tmp_path / "out" / "snap.json"
