# src/task_tracker/cli/commands.py

from __future__ import annotations

import logging
from collections.abc import Callable

from ..core.ports import TaskRepo
from ..tasks.task_models import Task, Tasks, TaskStatus

CommandHandler = Callable[[TaskRepo, list[str]], str]

logger = logging.getLogger(__name__)


class CommandUsageError(Exception):
    """Bad command name or arguments (not a task tracker failure)."""


class CommandRegistry:
    """Simple command registry used by the CLI entry point (add, list, ...)."""

    def __init__(self) -> None:
        self._handlers: dict[str, CommandHandler] = {}
        self._help: dict[str, str] = {}

    def register(
        self,
        name: str,
        handler: CommandHandler,
        help_text: str,
        aliases: list[str] | None = None,
    ) -> None:
        aliases = aliases or []
        key = name.lower()
        self._handlers[key] = handler
        self._help[key] = help_text
        for alias in aliases:
            self._handlers[alias.lower()] = handler

    def handle(self, repo: TaskRepo, argv: list[str]) -> str:
        """
        Handle an argument vector like ["add", "buy milk"].
        Returns the text to print; raises CommandUsageError for bad input.
        """
        if not argv:
            raise CommandUsageError("No command given. Use 'help' to list available commands.")

        name = argv[0].lower()
        args = argv[1:]

        handler = self._handlers.get(name)
        if not handler:
            raise CommandUsageError(f"Unknown command: {name}. Use 'help' to list available commands.")

        logger.debug("Dispatching command=%s args=%d", name, len(args))
        return handler(repo, args)

    def build_help(self) -> str:
        lines = ["Available commands:"]
        for name, help_text in self._help.items():
            lines.append(f"  {name} - {help_text}")
        return "\n".join(lines)


registry = CommandRegistry()


# ---- formatting ----


def format_task(task: Task) -> str:
    return f"{task.id:>3}  [{task.status}]  {task.description}"


def format_tasks(tasks: Tasks) -> str:
    if not tasks:
        return "No tasks found."
    return "\n".join(format_task(tasks[task_id]) for task_id in sorted(tasks))


def _parse_id(args: list[str]) -> int:
    if not args:
        raise CommandUsageError("Missing task id.")
    try:
        task_id = int(args[0])
    except ValueError:
        raise CommandUsageError(f"Task id must be an integer, got {args[0]!r}.") from None
    if task_id <= 0:
        raise CommandUsageError(f"Task id must be positive, got {task_id}.")
    return task_id


# ---- handlers ----


def cmd_help(repo: TaskRepo, args: list[str]) -> str:
    return registry.build_help()


def cmd_add(repo: TaskRepo, args: list[str]) -> str:
    task = repo.create_task(" ".join(args))
    return f"Task added successfully (ID: {task.id})"


def cmd_update(repo: TaskRepo, args: list[str]) -> str:
    """update <id> <description>"""
    task_id = _parse_id(args)
    task = repo.update_task(task_id, description=" ".join(args[1:]))
    return f"Task {task.id} updated: {task.description}"


def cmd_delete(repo: TaskRepo, args: list[str]) -> str:
    task = repo.delete_task(_parse_id(args))
    return f"Task {task.id} deleted: {task.description}"


def _mark(status: TaskStatus) -> CommandHandler:
    def handler(repo: TaskRepo, args: list[str]) -> str:
        task = repo.update_task(_parse_id(args), status=status)
        return f"Task {task.id} marked as {task.status}"

    return handler


def cmd_list(repo: TaskRepo, args: list[str]) -> str:
    """
    list          -> every task
    list <status> -> only tasks with that status (todo, in-progress, done)
    """
    if not args:
        return format_tasks(repo.read_all_tasks())
    if len(args) > 1:
        raise CommandUsageError("Usage: list [todo|in-progress|done]")
    return format_tasks(repo.read_many_tasks(args[0].lower()))


registry.register("help", cmd_help, "show this help", aliases=["-h", "--help"])
registry.register("add", cmd_add, "add <description> - create a new task")
registry.register("update", cmd_update, "update <id> <description> - change a task's description")
registry.register("delete", cmd_delete, "delete <id> - remove a task", aliases=["rm"])
registry.register(
    "mark-in-progress", _mark(TaskStatus.IN_PROGRESS), "mark-in-progress <id> - set status to in-progress"
)
registry.register("mark-done", _mark(TaskStatus.DONE), "mark-done <id> - set status to done")
registry.register("mark-todo", _mark(TaskStatus.TODO), "mark-todo <id> - set status back to todo")
registry.register("list", cmd_list, "list [todo|in-progress|done] - list tasks", aliases=["ls"])
