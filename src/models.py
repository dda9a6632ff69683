"""Data model for the task tracker.

A task's status is one of "todo", "in-progress", "done". On disk each task is
a JSON object with camelCase keys and timestamps in the "YYYY/DD/MM hh:mm:ss"
layout (day before month), kept for compatibility with existing task files.
"""
from __future__ import annotations
from dataclasses import dataclass
from datetime import datetime
from typing import Any, Dict, Mapping, Tuple

STATUSES: Tuple[str, ...] = ("todo", "in-progress", "done")
TIMESTAMP_FORMAT = "%Y/%d/%m %H:%M:%S"

TaskRecord = Dict[str, Any]


def format_timestamp(value: datetime) -> str:
    return value.strftime(TIMESTAMP_FORMAT)


def parse_timestamp(text: str) -> datetime:
    """Parse a stored timestamp; raises ValueError on any other layout."""
    return datetime.strptime(text, TIMESTAMP_FORMAT)


@dataclass
class Task:
    """A single tracked task.

    Fields:
        id: Positive integer, unique within the task file.
        description: Free-form text, replaceable by ``update``.
        status: One of STATUSES; new tasks start as "todo".
        created_at: When the task was added. Never changes.
        updated_at: Refreshed on every description or status change.
    """
    id: int
    description: str
    status: str
    created_at: datetime
    updated_at: datetime

    def to_record(self) -> TaskRecord:
        return {
            'id': self.id,
            'description': self.description,
            'status': self.status,
            'createdAt': format_timestamp(self.created_at),
            'updatedAt': format_timestamp(self.updated_at),
        }

    @classmethod
    def from_record(cls, raw: Mapping[str, Any]) -> "Task":
        """Build a Task from a decoded JSON object.

        Raises ValueError describing the first problem found; the storage
        layer turns that into a FormatError naming the file.
        """
        if not isinstance(raw, Mapping):
            raise ValueError(f"expected an object, got {type(raw).__name__}")
        missing = [k for k in ('id', 'description', 'status', 'createdAt', 'updatedAt') if k not in raw]
        if missing:
            raise ValueError(f"record is missing {', '.join(missing)}")
        tid = raw['id']
        # bool is an int subclass; reject it explicitly
        if not isinstance(tid, int) or isinstance(tid, bool) or tid < 1:
            raise ValueError(f"invalid id {tid!r}")
        description = raw['description']
        if not isinstance(description, str):
            raise ValueError(f"task {tid}: description must be a string")
        status = raw['status']
        if status not in STATUSES:
            raise ValueError(f"task {tid}: unknown status {status!r}")
        try:
            created_at = parse_timestamp(str(raw['createdAt']))
            updated_at = parse_timestamp(str(raw['updatedAt']))
        except ValueError as exc:
            raise ValueError(f"task {tid}: {exc}") from exc
        return cls(id=tid, description=description, status=status,
                   created_at=created_at, updated_at=updated_at)

    def __str__(self) -> str:
        return (f"{self.id}. {self.description} [{self.status}] "
                f"(created {format_timestamp(self.created_at)}, "
                f"updated {format_timestamp(self.updated_at)})")
