# src/task_tracker/errors.py

from __future__ import annotations


class TaskTrackerError(Exception):
    """Base class for every error the task tracker reports to its callers."""
