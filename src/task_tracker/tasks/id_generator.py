# src/task_tracker/tasks/id_generator.py

from __future__ import annotations

from collections.abc import Iterable


class TaskIDGenerator:
    """
    Watermark id generator.

    init() seeds the watermark with the highest id already on disk (0 if none);
    next_id() bumps and returns it. Ids freed by deletion are never handed out again
    for the lifetime of the generator.
    """

    def __init__(self) -> None:
        self._current = 0

    @property
    def current(self) -> int:
        return self._current

    def init(self, existing_ids: Iterable[int]) -> int:
        self._current = max(existing_ids, default=0)
        return self._current

    def next_id(self) -> int:
        self._current += 1
        return self._current
