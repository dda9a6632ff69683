"""Command-line dispatcher for the task tracker.

One invocation runs one command. Arguments are checked in a fixed order:
presence first, then id parsing, then the tracker's own guards. Errors are
printed and the invocation ends without saving.
"""
from __future__ import annotations
import logging
import re
from typing import Callable, Dict, List, Optional, Sequence

from errors import IdParseError, TrackerError, UsageError
from models import Task, format_timestamp
from storage import Storage
from theme import PLAIN, Theme
from tracker import FILTERS, TaskTracker

logger = logging.getLogger(__name__)

FILTER_ALIASES = {
    't': 'todo',
    'ip': 'in-progress',
    'd': 'done',
}
FILTER_ALIASES.update({f: f for f in FILTERS})

MISSING_ID = "Please add an ID number"
MISSING_DESCRIPTION = "Please add a description to the task."
FILTER_HINT = "Add a valid option (all | todo | in-progress | done)"
ID_RE = re.compile(r"[+-]?[0-9]+")

USAGE_LINES = (
    "Please add a valid argument:",
    "  1. add <description>           Add a new task",
    "  2. update <id> <description>   Replace a task's description",
    "  3. delete <id>                 Delete a task",
    "  4. mark-in-progress <id>       Mark a task as in progress",
    "  5. mark-done <id>              Mark a task as done",
    "  6. list [all|todo|in-progress|done]",
    "                                 List tasks, optionally by status (aliases: t/ip/d)",
)


def print_usage() -> None:
    print("\n".join(USAGE_LINES))


def parse_id(raw: str) -> int:
    if not ID_RE.fullmatch(raw):
        raise IdParseError(raw)
    return int(raw)


def _join_description(parts: Sequence[str]) -> str:
    description = ' '.join(parts).strip()
    if not description:
        raise UsageError(MISSING_DESCRIPTION)
    return description


class CLI:
    def __init__(self, tracker: TaskTracker, storage: Storage, theme: Optional[Theme] = None):
        self.tracker = tracker
        self.storage = storage
        self.theme = theme or PLAIN
        self._commands: Dict[str, Callable[[List[str]], None]] = {
            'add': self._cmd_add,
            'update': self._cmd_update,
            'delete': self._cmd_delete,
            'mark-in-progress': self._cmd_mark_in_progress,
            'mark-done': self._cmd_mark_done,
            'list': self._cmd_list,
            'help': lambda _args: print_usage(),
        }

    def run(self, argv: Sequence[str]) -> None:
        """Dispatch one command. ``argv`` excludes the program name."""
        if not argv:
            print_usage()
            return
        cmd, args = argv[0], list(argv[1:])
        handler = self._commands.get(cmd)
        if handler is None:
            logger.debug("Unknown command %r", cmd)
            print_usage()
            return
        try:
            handler(args)
        except TrackerError as exc:
            logger.debug("Command %s rejected: %s", cmd, exc)
            print(exc)

    def _save(self) -> None:
        self.storage.save(self.tracker)

    # ---- individual command helpers ----
    def _cmd_add(self, args: List[str]) -> None:
        description = _join_description(args)
        task = self.tracker.add(description)
        self._save()
        print(f"Task added successfully (ID: {task.id})")

    def _cmd_update(self, args: List[str]) -> None:
        if not args:
            raise UsageError(MISSING_ID)
        if len(args) < 2:
            raise UsageError(MISSING_DESCRIPTION)
        description = _join_description(args[1:])
        task_id = parse_id(args[0])
        self.tracker.update(task_id, description)
        self._save()

    def _require_id(self, args: List[str]) -> int:
        if not args:
            raise UsageError(MISSING_ID)
        return parse_id(args[0])

    def _cmd_delete(self, args: List[str]) -> None:
        self.tracker.delete(self._require_id(args))
        self._save()

    def _cmd_mark_in_progress(self, args: List[str]) -> None:
        self.tracker.mark_in_progress(self._require_id(args))
        self._save()

    def _cmd_mark_done(self, args: List[str]) -> None:
        self.tracker.mark_done(self._require_id(args))
        self._save()

    def _cmd_list(self, args: List[str]) -> None:
        if len(args) > 1:
            raise UsageError("Too many arguments")
        option = args[0].lower() if args else 'all'
        status_filter = FILTER_ALIASES.get(option)
        if status_filter is None:
            print(FILTER_HINT)
            return
        for task in self.tracker.iter_tasks(status_filter):
            print(self.format_task(task))

    # -------------------- rendering --------------------
    def format_task(self, task: Task) -> str:
        t = self.theme
        if not t.enabled:
            return str(task)
        status_col = t.fg(task.status)
        prefix = t.color(f"{task.id}.", t.fg('primary'), t.bold)
        stamps = (f"(created {format_timestamp(task.created_at)}, "
                  f"updated {format_timestamp(task.updated_at)})")
        return (f"{prefix} {t.color(task.description, status_col)} "
                f"{t.color('[' + task.status + ']', status_col)} {t.color(stamps, t.dim)}")
