# tests/test_main.py

from __future__ import annotations

import json
from pathlib import Path

import pytest

import main


@pytest.fixture()
def workdir(tmp_path: Path, monkeypatch) -> Path:
    monkeypatch.chdir(tmp_path)
    for key in ("TASK_CLI_FILE", "TASK_CLI_LOG_FILE", "TASK_CLI_LOG_LEVEL", "FORCE_COLOR"):
        monkeypatch.delenv(key, raising=False)
    return tmp_path


def test_no_arguments_prints_usage_without_touching_disk(workdir: Path, capsys) -> None:
    main.main([])
    assert capsys.readouterr().out.startswith("Please add a valid argument:")
    assert not (workdir / "task.json").exists()


def test_commands_persist_across_invocations(workdir: Path, capsys) -> None:
    main.main(["add", "buy milk"])
    main.main(["add", "walk dog"])
    main.main(["mark-in-progress", "2"])
    capsys.readouterr()

    main.main(["list", "in-progress"])
    lines = capsys.readouterr().out.splitlines()
    assert len(lines) == 1
    assert lines[0].startswith("2. walk dog [in-progress]")

    data = json.loads((workdir / "task.json").read_text())
    assert [(r["id"], r["status"]) for r in data] == [(1, "todo"), (2, "in-progress")]


def test_unknown_command_still_creates_task_file(workdir: Path, capsys) -> None:
    main.main(["frobnicate"])
    assert "Please add a valid argument:" in capsys.readouterr().out
    assert (workdir / "task.json").exists()


def test_corrupt_file_is_reported_and_left_alone(workdir: Path, capsys) -> None:
    (workdir / "task.json").write_text("{not json")
    main.main(["add", "x"])
    assert "is corrupt" in capsys.readouterr().out
    assert (workdir / "task.json").read_text() == "{not json"


def test_task_file_location_comes_from_environment(workdir: Path, monkeypatch, capsys) -> None:
    monkeypatch.setenv("TASK_CLI_FILE", "data/mine.json")
    main.main(["add", "x"])
    assert (workdir / "data" / "mine.json").exists()
    assert not (workdir / "task.json").exists()
