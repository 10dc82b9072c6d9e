# src/task_tracker/cli/main.py

"""
CLI entrypoint.

Initializes logging, builds the repository, then runs exactly one command:
  task-cli add "buy milk"
  task-cli mark-done 1
  task-cli list done
"""

from __future__ import annotations

import logging
import sys

from ..config import Settings, get_settings
from ..errors import TaskTrackerError
from ..logging_setup import setup_logging
from .bootstrap import create_repository
from .commands import CommandUsageError, registry

logger = logging.getLogger(__name__)

EXIT_OK = 0
EXIT_FAILURE = 1
EXIT_USAGE = 2


def main(argv: list[str] | None = None, *, settings: Settings | None = None) -> int:
    if argv is None:
        argv = sys.argv[1:]
    if settings is None:
        settings = get_settings()

    console_level = getattr(logging, settings.log_level, logging.WARNING)
    setup_logging(
        log_dir=settings.log_dir,
        console_level=console_level,
        log_to_file=settings.log_to_file,
    )
    logger.debug("Starting %s argv=%s", settings.app_name, argv)

    try:
        repo = create_repository(settings=settings)
        output = registry.handle(repo, argv)
    except CommandUsageError as e:
        print(e, file=sys.stderr)
        return EXIT_USAGE
    except TaskTrackerError as e:
        logger.debug("Command failed", exc_info=True)
        print(e, file=sys.stderr)
        return EXIT_FAILURE

    print(output)
    return EXIT_OK


if __name__ == "__main__":
    sys.exit(main())
