"""Tracker logic: holds the task list, ID allocation, and task mutation.

Mutating operations check, in order, that the list is non-empty and that the
id exists, then change the task in memory. Saving is the caller's job so a
rejected command never touches the file.
"""
from __future__ import annotations
import logging
from datetime import datetime
from typing import Callable, Iterable, Iterator, List, Optional

from errors import EmptyCollectionError, NotFoundError
from models import STATUSES, Task

logger = logging.getLogger(__name__)

FILTERS = ("all",) + STATUSES

Clock = Callable[[], datetime]


class TaskTracker:
    def __init__(self, tasks: Optional[Iterable[Task]] = None, clock: Clock = datetime.now):
        self.tasks: List[Task] = list(tasks) if tasks else []
        self._clock = clock

    def _now(self) -> datetime:
        # stored timestamps have whole-second precision
        return self._clock().replace(microsecond=0)

    # -------------------- id management --------------------
    def _next_id(self) -> int:
        if not self.tasks:
            return 1
        return max(t.id for t in self.tasks) + 1

    # -------------------- queries --------------------
    def find(self, task_id: int) -> Task:
        """Return the task with this id, guarding empty list then missing id."""
        if not self.tasks:
            raise EmptyCollectionError()
        for task in self.tasks:
            if task.id == task_id:
                return task
        raise NotFoundError(task_id)

    def iter_tasks(self, status_filter: str = "all") -> Iterator[Task]:
        """Yield tasks whose status matches ``status_filter``, in list order.

        "all" yields every task. Each call starts a fresh scan.
        """
        if status_filter not in FILTERS:
            raise ValueError(f"unknown status filter: {status_filter}")
        for task in self.tasks:
            if status_filter == "all" or task.status == status_filter:
                yield task

    def __iter__(self) -> Iterator[Task]:
        return iter(self.tasks)

    # -------------------- task operations --------------------
    def add(self, description: str) -> Task:
        now = self._now()
        task = Task(id=self._next_id(), description=description, status="todo",
                    created_at=now, updated_at=now)
        self.tasks.append(task)
        logger.debug("Added task %d", task.id)
        return task

    def update(self, task_id: int, description: str) -> Task:
        task = self.find(task_id)
        task.description = description
        task.updated_at = self._now()
        logger.debug("Updated description of task %d", task_id)
        return task

    def delete(self, task_id: int) -> Task:
        task = self.find(task_id)
        # match on id, list positions drift once anything is deleted
        self.tasks = [t for t in self.tasks if t.id != task_id]
        logger.debug("Deleted task %d", task_id)
        return task

    def mark_in_progress(self, task_id: int) -> Task:
        return self._set_status(task_id, "in-progress")

    def mark_done(self, task_id: int) -> Task:
        return self._set_status(task_id, "done")

    def _set_status(self, task_id: int, new_status: str) -> Task:
        # plain overwrite: re-marking still refreshes updated_at, and done can go back
        task = self.find(task_id)
        task.status = new_status
        task.updated_at = self._now()
        logger.debug("Task %d marked %s", task_id, new_status)
        return task

