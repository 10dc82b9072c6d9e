# src/task_tracker/config.py

"""Settings for the command-line front end, read from environment variables (+ optional .env).

Design goals:
- One Settings object for the whole CLI (normal "settings layer").
- The core (store, repository) never reads the environment; it gets paths from here.
"""

from __future__ import annotations

import os
from dataclasses import dataclass
from functools import lru_cache
from pathlib import Path

from dotenv import load_dotenv

ENV_PREFIX = "TASK_TRACKER"


def _k(suffix: str) -> str:
    """Build env var name with the project prefix."""
    return f"{ENV_PREFIX}_{suffix}"


def _env(name: str, default: str = "") -> str:
    v = os.getenv(name)
    return default if v is None else v


def _env_bool(name: str, default: bool) -> bool:
    raw = os.getenv(name)
    if raw is None:
        return default
    return raw.strip().lower() in {"1", "true", "yes", "y", "on"}


def _env_path(name: str, default: Path) -> Path:
    raw = os.getenv(name)
    if raw is None or raw.strip() == "":
        return default
    return Path(raw).expanduser()


@dataclass(frozen=True, slots=True)
class Settings:
    # ---- App / logging ----
    app_name: str
    log_level: str
    log_dir: Path
    log_to_file: bool

    # ---- Local data paths (ignored by git) ----
    data_dir: Path
    tasks_file: str

    @property
    def tasks_path(self) -> Path:
        return self.data_dir / self.tasks_file

    @staticmethod
    def from_env() -> "Settings":
        data_dir = _env_path(_k("DATA_DIR"), Path(".local/task_tracker"))
        return Settings(
            app_name=_env(_k("APP_NAME"), "task-cli"),
            log_level=_env(_k("LOG_LEVEL"), "WARNING").strip().upper() or "WARNING",
            log_dir=_env_path(_k("LOG_DIR"), data_dir),
            log_to_file=_env_bool(_k("LOG_TO_FILE"), True),
            data_dir=data_dir,
            tasks_file=_env(_k("TASKS_FILE"), "tasks.json").strip() or "tasks.json",
        )


@lru_cache(maxsize=1)
def get_settings() -> Settings:
    # Real environment wins over .env.
    load_dotenv(override=False)
    return Settings.from_env()
