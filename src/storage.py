"""Persistence for the task list: one JSON file, rewritten whole on save.

There is no locking and no atomic rename. Two invocations racing on the same
file end with whichever saved last.
"""
from __future__ import annotations
import json
import logging
from pathlib import Path
from typing import Iterable, List, Union

from errors import FormatError, StorageIOError
from models import Task

logger = logging.getLogger(__name__)

DEFAULT_TASKS_FILE = 'task.json'


class Storage:
    def __init__(self, path: Union[str, Path] = DEFAULT_TASKS_FILE):
        self.path = Path(path)

    def open(self) -> None:
        """Make sure the task file exists and can be read and written.

        A missing file is created empty; any other failure raises
        StorageIOError.
        """
        try:
            with open(self.path, 'r+', encoding='utf-8'):
                pass
        except FileNotFoundError:
            try:
                self.path.parent.mkdir(parents=True, exist_ok=True)
                self.path.touch()
            except OSError as exc:
                raise StorageIOError(self.path, exc) from exc
            logger.debug("Created empty task file %s", self.path)
        except OSError as exc:
            raise StorageIOError(self.path, exc) from exc

    def load(self) -> List[Task]:
        """Decode the whole file into a list of tasks.

        An empty file (or a bare JSON null) is an empty list. Anything that is
        not a JSON array of task records raises FormatError.
        """
        try:
            text = self.path.read_text(encoding='utf-8')
        except UnicodeDecodeError as exc:
            raise FormatError(self.path, exc) from exc
        except OSError as exc:
            raise StorageIOError(self.path, exc) from exc
        if not text.strip():
            logger.debug("Task file %s is empty", self.path)
            return []
        try:
            data = json.loads(text)
        except (json.JSONDecodeError, RecursionError) as exc:
            raise FormatError(self.path, exc) from exc
        if data is None:
            return []
        if not isinstance(data, list):
            raise FormatError(self.path, f"expected a list of tasks, got {type(data).__name__}")
        tasks: List[Task] = []
        seen = set()
        for raw in data:
            try:
                task = Task.from_record(raw)
            except ValueError as exc:
                raise FormatError(self.path, exc) from exc
            if task.id in seen:
                raise FormatError(self.path, f"duplicate task id {task.id}")
            seen.add(task.id)
            tasks.append(task)
        logger.debug("Loaded %d task(s) from %s", len(tasks), self.path)
        return tasks

    def save(self, tasks: Iterable[Task]) -> None:
        """Overwrite the file with the full task list (pretty-printed)."""
        records = [task.to_record() for task in tasks]
        try:
            self.path.parent.mkdir(parents=True, exist_ok=True)
            with open(self.path, 'w', encoding='utf-8') as f:
                json.dump(records, f, indent=4)
                f.write('\n')
        except OSError as exc:
            raise StorageIOError(self.path, exc) from exc
        logger.debug("Saved %d task(s) to %s", len(records), self.path)
