# tests/conftest.py

from __future__ import annotations

import logging
from pathlib import Path

import pytest

from cli import CLI
from storage import Storage
from theme import PLAIN
from tracker import TaskTracker

from .fakes import StepClock


@pytest.fixture(autouse=True)
def _restore_root_logging():
    """Drop handlers installed by setup_logging() so they don't leak between tests."""
    root = logging.getLogger()
    handlers, level = list(root.handlers), root.level
    yield
    for h in list(root.handlers):
        if h not in handlers:
            root.removeHandler(h)
            h.close()
    root.setLevel(level)


@pytest.fixture()
def clock() -> StepClock:
    return StepClock()


@pytest.fixture()
def task_file(tmp_path: Path) -> Path:
    return tmp_path / "task.json"


@pytest.fixture()
def storage(task_file: Path) -> Storage:
    store = Storage(task_file)
    store.open()
    return store


@pytest.fixture()
def tracker(clock: StepClock) -> TaskTracker:
    return TaskTracker(clock=clock)


@pytest.fixture()
def cli(tracker: TaskTracker, storage: Storage) -> CLI:
    """CLI wired to a fresh tmp task file, a stepping clock and no colour."""
    return CLI(tracker, storage, PLAIN)
