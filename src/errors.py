"""Exception types raised by the task tracker.

Every error the user can trigger derives from TrackerError so the CLI has a
single type to catch and print. Anything else is a bug and propagates.
"""
from __future__ import annotations
from pathlib import Path
from typing import Union


class TrackerError(Exception):
    """Base class for user-facing task tracker errors."""


class UsageError(TrackerError):
    """Missing or surplus command-line arguments."""


class IdParseError(TrackerError):
    def __init__(self, raw: str):
        super().__init__(f'Invalid ID "{raw}": must be an integer')
        self.raw = raw


class StorageIOError(TrackerError):
    """The task file could not be opened, created, read or written."""

    def __init__(self, path: Union[str, Path], reason: object):
        super().__init__(f"Error accessing task file {path}: {reason}")
        self.path = Path(path)


class FormatError(TrackerError):
    """The task file holds something other than a valid task list."""

    def __init__(self, path: Union[str, Path], reason: object):
        super().__init__(f"Task file {path} is corrupt: {reason}")
        self.path = Path(path)


class EmptyCollectionError(TrackerError):
    def __init__(self) -> None:
        super().__init__("task list is empty")


class NotFoundError(TrackerError):
    def __init__(self, task_id: int):
        super().__init__(f"task with ID {task_id} not found")
        self.task_id = task_id
