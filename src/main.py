"""Main entry point for the task CLI.

Loads the task file, runs a single command, and exits.
"""
import logging
import os
import sys
from typing import Optional, Sequence

from cli import CLI, print_usage
from errors import TrackerError
from logging_setup import setup_logging
from settings import get_settings
from storage import Storage
from theme import Theme
from tracker import TaskTracker

logger = logging.getLogger(__name__)


def main(argv: Optional[Sequence[str]] = None) -> None:
    args = list(sys.argv[1:] if argv is None else argv)
    if not args:
        print_usage()
        return
    settings = get_settings()
    setup_logging(console_level=settings.log_level, log_file=settings.log_file)
    storage = Storage(settings.tasks_file)
    try:
        storage.open()
        tasks = storage.load()
    except TrackerError as exc:
        logger.debug("Could not load %s", storage.path, exc_info=True)
        print(exc)
        return
    tracker = TaskTracker(tasks)
    theme = Theme.from_env(os.environ, sys.stdout.isatty())
    CLI(tracker, storage, theme).run(args)

if __name__ == "__main__":
    main()
