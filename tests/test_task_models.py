# tests/test_task_models.py

from __future__ import annotations

from dataclasses import replace

import pytest

from task_tracker.tasks.errors import DescriptionError, InvalidStatusError
from task_tracker.tasks.task_models import (
    MAX_DESCRIPTION_LENGTH,
    Task,
    TaskStatus,
    tasks_from_document,
    tasks_to_document,
    validate_task,
)

from .fakes import FIXED_TIME


def _task(task_id: int = 1, description: str = "buy milk", status=TaskStatus.TODO) -> Task:
    return Task(
        id=task_id,
        description=description,
        status=status,
        created_at=FIXED_TIME,
        updated_at=FIXED_TIME,
    )


def test_description_boundary() -> None:
    validate_task(_task(description="x" * MAX_DESCRIPTION_LENGTH))

    with pytest.raises(DescriptionError) as exc:
        validate_task(_task(description="x" * (MAX_DESCRIPTION_LENGTH + 1)))
    assert "exceeds 300 characters" in str(exc.value)

    with pytest.raises(DescriptionError) as exc:
        validate_task(_task(description=""))
    assert "cannot be empty" in str(exc.value)


def test_description_length_counts_characters_not_bytes() -> None:
    # 300 characters, 600 bytes in UTF-8
    validate_task(_task(description="é" * MAX_DESCRIPTION_LENGTH))


def test_status_outside_closed_set_is_rejected() -> None:
    with pytest.raises(InvalidStatusError) as exc:
        validate_task(_task(status="blocked"))
    assert exc.value.status == "blocked"
    assert "todo, in-progress, done" in str(exc.value)


@pytest.mark.parametrize("status", list(TaskStatus))
def test_every_status_is_valid(status: TaskStatus) -> None:
    validate_task(_task(status=status))


def test_status_parse() -> None:
    assert TaskStatus.parse("in-progress") is TaskStatus.IN_PROGRESS
    assert TaskStatus.parse(TaskStatus.DONE) is TaskStatus.DONE
    with pytest.raises(InvalidStatusError):
        TaskStatus.parse("in_progress")
    with pytest.raises(InvalidStatusError):
        TaskStatus.parse(None)


def test_document_shape() -> None:
    doc = tasks_to_document({2: _task(2, "walk dog", TaskStatus.DONE), 1: _task(1)})

    assert list(doc) == ["1", "2"]
    assert doc["2"] == {
        "id": 2,
        "description": "walk dog",
        "status": "done",
        "created_at": "2006-01-02T15:04:05+00:00",
        "updated_at": "2006-01-02T15:04:05+00:00",
    }


def test_document_accepts_z_suffix_and_naive_timestamps() -> None:
    tasks = tasks_from_document(
        {
            "1": {
                "id": 1,
                "description": "buy milk",
                "status": "todo",
                "created_at": "2006-01-02T15:04:05Z",
                "updated_at": "2006-01-02T15:04:05",
            }
        }
    )

    assert tasks == {1: _task(1)}


@pytest.mark.parametrize(
    ("doc", "error"),
    [
        ([], TypeError),
        ({"x": _task().to_dict()}, ValueError),
        ({"2": _task(1).to_dict()}, ValueError),
        ({"1": {**_task().to_dict(), "status": "blocked"}}, InvalidStatusError),
        ({"1": {**_task().to_dict(), "description": ""}}, DescriptionError),
        ({"1": {**_task().to_dict(), "id": "1"}}, ValueError),
        ({"1": {"id": 1}}, KeyError),
        ({"1": "not a task"}, TypeError),
        (
            {"1": {**_task().to_dict(), "updated_at": "2006-01-01T00:00:00+00:00"}},
            ValueError,
        ),
    ],
)
def test_document_rejects_invalid_data(doc: object, error: type[Exception]) -> None:
    with pytest.raises(error):
        tasks_from_document(doc)


def test_replace_keeps_created_at() -> None:
    task = _task()
    updated = replace(task, status=TaskStatus.DONE)
    assert updated.created_at == task.created_at
    assert task.status is TaskStatus.TODO
