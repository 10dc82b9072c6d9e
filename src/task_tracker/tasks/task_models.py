# src/task_tracker/tasks/task_models.py

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass
from datetime import datetime, timezone
from enum import StrEnum
from typing import Any

from .errors import DescriptionError, InvalidStatusError

MAX_DESCRIPTION_LENGTH = 300


class TaskStatus(StrEnum):
    """Task lifecycle status (closed set, stored as its string value)."""

    TODO = "todo"
    IN_PROGRESS = "in-progress"
    DONE = "done"

    @classmethod
    def values(cls) -> tuple[str, ...]:
        return tuple(s.value for s in cls)

    @classmethod
    def parse(cls, raw: object) -> TaskStatus:
        """Coerce a user/JSON supplied value into a TaskStatus or raise InvalidStatusError."""
        if isinstance(raw, cls):
            return raw
        if isinstance(raw, str):
            try:
                return cls(raw)
            except ValueError:
                pass
        raise InvalidStatusError(raw, cls.values())


def utc_now() -> datetime:
    return datetime.now(timezone.utc)


@dataclass(slots=True)
class Task:
    id: int
    description: str
    status: TaskStatus
    created_at: datetime
    updated_at: datetime

    def to_dict(self) -> dict[str, Any]:
        return {
            "id": self.id,
            "description": self.description,
            "status": str(self.status),
            "created_at": self.created_at.isoformat(),
            "updated_at": self.updated_at.isoformat(),
        }

    @classmethod
    def from_dict(cls, raw: Mapping[str, Any]) -> Task:
        """
        Build a Task from its JSON form.

        Raises TypeError/ValueError on malformed fields and InvalidStatusError on an
        unknown status. Naive timestamps are treated as UTC.
        """
        if not isinstance(raw, Mapping):
            raise TypeError(f"task must be a JSON object, got {type(raw).__name__}")

        task_id = raw["id"]
        if isinstance(task_id, bool) or not isinstance(task_id, int) or task_id < 0:
            raise ValueError(f"task id must be a non-negative integer, got {task_id!r}")

        description = raw["description"]
        if not isinstance(description, str):
            raise TypeError(f"task {task_id}: description must be a string")

        created_at = _parse_ts(raw["created_at"])
        updated_at = _parse_ts(raw["updated_at"])
        if updated_at < created_at:
            raise ValueError(f"task {task_id}: updated_at is earlier than created_at")

        return cls(
            id=task_id,
            description=description,
            status=TaskStatus.parse(raw["status"]),
            created_at=created_at,
            updated_at=updated_at,
        )


Tasks = dict[int, Task]


def _parse_ts(raw: object) -> datetime:
    if not isinstance(raw, str):
        raise TypeError(f"timestamp must be a string, got {type(raw).__name__}")
    ts = datetime.fromisoformat(raw)
    if ts.tzinfo is None:
        ts = ts.replace(tzinfo=timezone.utc)
    return ts


# ---- validation ----


def validate_description(description: str) -> None:
    if not description:
        raise DescriptionError("description cannot be empty")
    if len(description) > MAX_DESCRIPTION_LENGTH:
        raise DescriptionError(
            f"description exceeds {MAX_DESCRIPTION_LENGTH} characters (got {len(description)})"
        )


def validate_task(task: Task) -> None:
    """
    Check a candidate task before it may be persisted.

    Pure: looks only at the task's own fields.
    """
    validate_description(task.description)
    if task.status not in TaskStatus.values():
        raise InvalidStatusError(task.status, TaskStatus.values())


# ---- JSON document codec (used as JSONFileStore encode/decode hooks) ----


def tasks_to_document(tasks: Mapping[int, Task]) -> dict[str, dict[str, Any]]:
    return {str(task_id): task.to_dict() for task_id, task in sorted(tasks.items())}


def tasks_from_document(data: Any) -> Tasks:
    """
    Turn a loaded JSON value into a task collection.

    The document must be an object keyed by decimal ids; every task is validated
    so nothing invalid reaches the repository.
    """
    if not isinstance(data, dict):
        raise TypeError(f"task collection must be a JSON object, got {type(data).__name__}")

    tasks: Tasks = {}
    for key, raw in data.items():
        task_id = int(key)
        task = Task.from_dict(raw)
        if task.id != task_id:
            raise ValueError(f"task id {task.id} does not match its key {key!r}")
        validate_task(task)
        tasks[task_id] = task
    return tasks
