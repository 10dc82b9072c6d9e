# src/task_tracker/tasks/task_repository.py

from __future__ import annotations

import logging
from dataclasses import replace
from pathlib import Path

from ..core.ports import Clock, DocumentStore, IDGenerator
from ..store.errors import StoreError
from ..store.json_store import EMPTY_OBJECT, JSONFileStore
from .errors import TaskNotFoundError
from .id_generator import TaskIDGenerator
from .task_models import (
    Task,
    Tasks,
    TaskStatus,
    tasks_from_document,
    tasks_to_document,
    utc_now,
    validate_description,
    validate_task,
)

logger = logging.getLogger(__name__)


class JSONFileTaskRepository:
    """
    Task CRUD on top of a whole-document JSON store.

    Every call is a self-contained cycle:
      load the full collection -> mutate in memory -> validate -> save the full collection

    No collection is cached between calls. The only long-lived state is the id
    generator, which is seeded from the first collection that loads successfully.

    Concurrency:
    - none; two processes writing the same file race and the last save wins
    """

    def __init__(
        self,
        store: DocumentStore[Tasks],
        *,
        clock: Clock | None = None,
        id_generator: IDGenerator | None = None,
    ) -> None:
        self._store = store
        self._clock: Clock = clock or utc_now
        self._ids = id_generator or TaskIDGenerator()
        self._ids_seeded = False

    @classmethod
    def open(
        cls,
        dest_dir: str | Path,
        filename: str = "tasks.json",
        *,
        clock: Clock | None = None,
    ) -> JSONFileTaskRepository:
        """Create (if needed) `<dest_dir>/<filename>` as an empty task collection and wrap it."""
        store: JSONFileStore[Tasks] = JSONFileStore(
            dest_dir,
            filename,
            EMPTY_OBJECT,
            encode=tasks_to_document,
            decode=tasks_from_document,
        )
        store.init_file()
        return cls(store, clock=clock)

    # ---- low-level helpers ----

    def _load_tasks(self, operation: str) -> Tasks:
        try:
            tasks = self._store.load(self._store.filepath)
        except StoreError as e:
            raise StoreError(operation, str(e), cause=e) from e

        if not self._ids_seeded:
            watermark = self._ids.init(tasks)
            self._ids_seeded = True
            logger.debug("ID generator seeded watermark=%s", watermark)
        return tasks

    def _save_tasks(self, tasks: Tasks, operation: str) -> None:
        try:
            self._store.save(tasks, self._store.filepath)
        except StoreError as e:
            raise StoreError(operation, str(e), cause=e) from e

    def _next_free_id(self, tasks: Tasks) -> int:
        task_id = self._ids.next_id()
        # Someone else may have written the file since we seeded.
        while task_id in tasks:
            logger.debug("Skipping id already present on disk id=%s", task_id)
            task_id = self._ids.next_id()
        return task_id

    @staticmethod
    def _find(tasks: Tasks, task_id: int) -> Task:
        task = tasks.get(task_id)
        if task is None:
            raise TaskNotFoundError(task_id)
        return task

    # ---- public API ----

    def create_task(self, description: str) -> Task:
        op = "creating task"
        tasks = self._load_tasks(op)

        validate_description(description)

        now = self._clock()
        task = Task(
            id=self._next_free_id(tasks),
            description=description,
            status=TaskStatus.TODO,
            created_at=now,
            updated_at=now,
        )
        validate_task(task)

        tasks[task.id] = task
        self._save_tasks(tasks, op)
        logger.info("Task created id=%s", task.id)
        return task

    def update_task(
        self,
        task_id: int,
        *,
        description: str | None = None,
        status: TaskStatus | str | None = None,
    ) -> Task:
        """
        Change description and/or status of an existing task.

        With neither field given this is a read: the task is returned as stored
        and nothing is written.
        """
        op = "updating task"
        tasks = self._load_tasks(op)
        task = self._find(tasks, task_id)

        if description is None and status is None:
            return task

        new_status = task.status if status is None else TaskStatus.parse(status)
        if description is not None:
            validate_description(description)

        updated = replace(
            task,
            description=task.description if description is None else description,
            status=new_status,
            updated_at=max(self._clock(), task.created_at),
        )
        validate_task(updated)

        tasks[task_id] = updated
        self._save_tasks(tasks, op)
        logger.info("Task updated id=%s status=%s", task_id, updated.status)
        return updated

    def delete_task(self, task_id: int) -> Task:
        """Remove a task and return it as it was right before deletion."""
        op = "deleting task"
        tasks = self._load_tasks(op)
        task = self._find(tasks, task_id)

        del tasks[task_id]
        self._save_tasks(tasks, op)
        logger.info("Task deleted id=%s", task_id)
        return task

    def read_all_tasks(self) -> Tasks:
        return self._load_tasks("reading all tasks")

    def read_many_tasks(self, status: TaskStatus | str) -> Tasks:
        wanted = TaskStatus.parse(status)
        tasks = self._load_tasks("reading tasks")
        return {task_id: task for task_id, task in tasks.items() if task.status == wanted}
