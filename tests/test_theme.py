# tests/test_theme.py

from __future__ import annotations

from theme import HEX_DONE_DEFAULT, PLAIN, Theme


def test_plain_theme_leaves_text_alone() -> None:
    assert PLAIN.color("hello", PLAIN.fg("todo"), PLAIN.bold) == "hello"


def test_colour_follows_tty_unless_forced_or_disabled() -> None:
    assert Theme.from_env({}, isatty=True).enabled
    assert not Theme.from_env({}, isatty=False).enabled
    assert Theme.from_env({"FORCE_COLOR": "1"}, isatty=False).enabled
    assert not Theme.from_env({"FORCE_COLOR": "1", "NO_COLOR": ""}, isatty=True).enabled


def test_truecolor_and_256_colour_sequences() -> None:
    env = {"TASK_CLI_TODO": "ff0000"}
    assert Theme.from_env(dict(env, COLORTERM="truecolor"), isatty=True).fg("todo") == "\033[38;2;255;0;0m"
    assert Theme.from_env(env, isatty=True).fg("todo") == "\033[38;5;196m"


def test_invalid_palette_override_is_ignored() -> None:
    theme = Theme.from_env({"TASK_CLI_DONE": "green"}, isatty=True)
    assert theme.palette["done"] == HEX_DONE_DEFAULT


def test_color_wraps_with_reset() -> None:
    theme = Theme(enabled=True)
    assert theme.color("x", theme.bold) == "\033[1mx\033[0m"
