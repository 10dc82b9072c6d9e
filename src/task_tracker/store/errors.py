# src/task_tracker/store/errors.py

from __future__ import annotations

from ..errors import TaskTrackerError

_HEAD = "Error: "
_TAIL = "please provide more details"


class StoreError(TaskTrackerError):
    """
    Failure inside the JSON file store (or a repository call that used it).

    - operation: what was being done ("opening file in read-only mode", ...)
    - message: human-readable detail, usually str() of the underlying error
    - cause: the original exception (same object as __cause__ when raised with `from`)
    """

    def __init__(
        self,
        operation: str,
        message: str,
        *,
        cause: BaseException | None = None,
    ) -> None:
        super().__init__(operation, message)
        self.operation = operation
        self.message = message
        self.cause = cause

    def __str__(self) -> str:
        if not self.operation and not self.message:
            return _HEAD + "both operation and message are empty, " + _TAIL
        if not self.operation:
            return _HEAD + "operation is empty, " + _TAIL
        if not self.message:
            return _HEAD + "message is empty, " + _TAIL
        return f"Error while {self.operation}: {self.message}"
