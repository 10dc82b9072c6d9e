# tests/test_config.py

from __future__ import annotations

from pathlib import Path

import pytest

from task_tracker.config import Settings


@pytest.fixture(autouse=True)
def _clean_env(monkeypatch: pytest.MonkeyPatch) -> None:
    for name in (
        "TASK_TRACKER_APP_NAME",
        "TASK_TRACKER_LOG_LEVEL",
        "TASK_TRACKER_LOG_DIR",
        "TASK_TRACKER_LOG_TO_FILE",
        "TASK_TRACKER_DATA_DIR",
        "TASK_TRACKER_TASKS_FILE",
    ):
        monkeypatch.delenv(name, raising=False)


def test_defaults() -> None:
    s = Settings.from_env()
    assert s.data_dir == Path(".local/task_tracker")
    assert s.tasks_file == "tasks.json"
    assert s.tasks_path == Path(".local/task_tracker/tasks.json")
    assert s.log_dir == s.data_dir
    assert s.log_level == "WARNING"
    assert s.log_to_file is True


def test_env_overrides(monkeypatch: pytest.MonkeyPatch, tmp_path: Path) -> None:
    monkeypatch.setenv("TASK_TRACKER_DATA_DIR", str(tmp_path))
    monkeypatch.setenv("TASK_TRACKER_TASKS_FILE", "work.json")
    monkeypatch.setenv("TASK_TRACKER_LOG_LEVEL", "debug")
    monkeypatch.setenv("TASK_TRACKER_LOG_TO_FILE", "off")

    s = Settings.from_env()
    assert s.tasks_path == tmp_path / "work.json"
    assert s.log_dir == tmp_path
    assert s.log_level == "DEBUG"
    assert s.log_to_file is False
