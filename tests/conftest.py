# tests/conftest.py

from __future__ import annotations

from pathlib import Path
from types import SimpleNamespace

import pytest

from task_tracker.store.json_store import EMPTY_OBJECT, JSONFileStore
from task_tracker.tasks.task_models import Tasks, tasks_from_document, tasks_to_document
from task_tracker.tasks.task_repository import JSONFileTaskRepository

from .fakes import CountingStore, StubClock


@pytest.fixture()
def settings(tmp_path: Path) -> SimpleNamespace:
    """
    Minimal settings object compatible with the CLI.

    We intentionally use a SimpleNamespace rather than reading the real
    environment, to keep unit tests isolated and deterministic.
    """
    data_dir = tmp_path / "data"
    return SimpleNamespace(
        app_name="task-cli-test",
        log_level="WARNING",
        log_dir=tmp_path / "logs",
        log_to_file=False,
        data_dir=data_dir,
        tasks_file="tasks.json",
        tasks_path=data_dir / "tasks.json",
    )


@pytest.fixture()
def task_store(tmp_path: Path) -> JSONFileStore[Tasks]:
    """Real JSON store for task collections, initialized as {} under tmp_path."""
    store: JSONFileStore[Tasks] = JSONFileStore(
        tmp_path / "data",
        "tasks.json",
        EMPTY_OBJECT,
        encode=tasks_to_document,
        decode=tasks_from_document,
    )
    store.init_file()
    return store


@pytest.fixture()
def clock() -> StubClock:
    return StubClock()


@pytest.fixture()
def counting_store(task_store: JSONFileStore[Tasks]) -> CountingStore[Tasks]:
    return CountingStore(task_store)


@pytest.fixture()
def repo(counting_store: CountingStore[Tasks], clock: StubClock) -> JSONFileTaskRepository:
    """
    Repository wired with a call-counting wrapper and a pinned clock.

    NOTE: the underlying store is the real JSONFileStore; its file behaviour
    is part of what we want to test.
    """
    return JSONFileTaskRepository(counting_store, clock=clock)
