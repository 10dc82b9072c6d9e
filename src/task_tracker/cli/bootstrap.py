# src/task_tracker/cli/bootstrap.py

"""
CLI bootstrap helpers.

This module is the "composition root":
- loads settings once,
- initializes the JSON task file under the configured data directory,
- wires the concrete store into the task repository.
"""

from __future__ import annotations

import logging

from ..config import Settings, get_settings
from ..tasks.task_repository import JSONFileTaskRepository

logger = logging.getLogger(__name__)


def create_repository(*, settings: Settings | None = None) -> JSONFileTaskRepository:
    """
    Build a repository from the provided settings.

    Keeping settings injectable makes the CLI easier to test and avoids hidden global config reads.
    If settings is None, falls back to get_settings().
    """
    if settings is None:
        settings = get_settings()

    repo = JSONFileTaskRepository.open(settings.data_dir, settings.tasks_file)
    logger.debug("Repository ready path=%s", settings.tasks_path)
    return repo
