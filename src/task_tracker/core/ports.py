# src/task_tracker/core/ports.py

from __future__ import annotations

"""
Ports (interfaces) used by the task repository and the CLI.

The repository depends on Protocols instead of concrete implementations.
This keeps the storage backend swappable and makes testing easier
(tests wrap the real store to count loads/saves, or pin the clock).
"""

from collections.abc import Iterable
from datetime import datetime
from pathlib import Path
from typing import Protocol, TypeVar

from ..tasks.task_models import Task, Tasks, TaskStatus

DocT = TypeVar("DocT")


class DocumentStore(Protocol[DocT]):
    """Whole-document persistence: one JSON file holds one document."""

    @property
    def filepath(self) -> Path: ...

    def init_file(self) -> Path: ...

    def load(self, filepath: str | Path | None = None) -> DocT: ...

    def save(self, document: DocT, filepath: str | Path | None = None) -> None: ...


class Clock(Protocol):
    def __call__(self) -> datetime: ...


class IDGenerator(Protocol):
    def init(self, existing_ids: Iterable[int]) -> int: ...

    def next_id(self) -> int: ...


class TaskRepo(Protocol):
    """What the CLI (or any other front end) needs from a task repository."""

    def create_task(self, description: str) -> Task: ...

    def update_task(
            self,
            task_id: int,
            *,
            description: str | None = None,
            status: TaskStatus | str | None = None,
    ) -> Task: ...

    def delete_task(self, task_id: int) -> Task: ...

    def read_all_tasks(self) -> Tasks: ...

    def read_many_tasks(self, status: TaskStatus | str) -> Tasks: ...
