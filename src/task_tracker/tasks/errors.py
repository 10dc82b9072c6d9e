# src/task_tracker/tasks/errors.py

from __future__ import annotations

from ..errors import TaskTrackerError


class DescriptionError(TaskTrackerError):
    """Description is empty or longer than the allowed maximum."""

    def __init__(self, message: str) -> None:
        super().__init__(message)
        self.message = message

    def __str__(self) -> str:
        return f"invalid task description: {self.message}"


class InvalidStatusError(TaskTrackerError):
    def __init__(self, status: object, allowed: tuple[str, ...]) -> None:
        super().__init__(status)
        self.status = status
        self.allowed = allowed

    def __str__(self) -> str:
        return f"status must be one of: {', '.join(self.allowed)} (got {self.status!r})"


class TaskNotFoundError(TaskTrackerError):
    def __init__(self, task_id: int) -> None:
        super().__init__(task_id)
        self.task_id = task_id

    def __str__(self) -> str:
        return f"task with ID {self.task_id} not found"
