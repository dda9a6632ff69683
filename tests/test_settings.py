# tests/test_settings.py

from __future__ import annotations

import logging
from pathlib import Path

from settings import Settings, get_settings


def test_defaults_when_environment_is_empty() -> None:
    s = Settings.from_env({})
    assert s.tasks_file == Path("task.json")
    assert s.log_level == logging.WARNING
    assert s.log_file is None


def test_values_read_from_mapping() -> None:
    s = Settings.from_env(
        {
            "TASK_CLI_FILE": "tasks/work.json",
            "TASK_CLI_LOG_LEVEL": "debug",
            "TASK_CLI_LOG_FILE": "logs/task.log",
        }
    )
    assert s.tasks_file == Path("tasks/work.json")
    assert s.log_level == logging.DEBUG
    assert s.log_file == Path("logs/task.log")


def test_unknown_log_level_falls_back_to_warning() -> None:
    assert Settings.from_env({"TASK_CLI_LOG_LEVEL": "chatty"}).log_level == logging.WARNING


def test_get_settings_reads_dotenv_without_overriding_environment(tmp_path: Path, monkeypatch) -> None:
    (tmp_path / ".env").write_text("TASK_CLI_FILE=from-dotenv.json\nTASK_CLI_LOG_LEVEL=INFO\n")
    monkeypatch.chdir(tmp_path)
    # setenv then delenv so monkeypatch restores both keys to "unset" afterwards
    monkeypatch.setenv("TASK_CLI_FILE", "")
    monkeypatch.delenv("TASK_CLI_FILE")
    monkeypatch.setenv("TASK_CLI_LOG_LEVEL", "ERROR")

    s = get_settings()
    assert s.tasks_file == Path("from-dotenv.json")
    assert s.log_level == logging.ERROR
