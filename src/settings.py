"""Runtime configuration.

Values come from the environment, after loading a .env file found from the
current directory upwards. Real environment variables win over .env entries.
"""
from __future__ import annotations
import logging
import os
from dataclasses import dataclass
from pathlib import Path
from typing import Mapping, Optional

from dotenv import find_dotenv, load_dotenv

from storage import DEFAULT_TASKS_FILE

ENV_PREFIX = "TASK_CLI"
DEFAULT_LOG_LEVEL = logging.WARNING


def _env_key(suffix: str) -> str:
    return f"{ENV_PREFIX}_{suffix}"


def _log_level(raw: Optional[str]) -> int:
    if not raw:
        return DEFAULT_LOG_LEVEL
    level = logging.getLevelName(raw.strip().upper())
    return level if isinstance(level, int) else DEFAULT_LOG_LEVEL


@dataclass(frozen=True)
class Settings:
    tasks_file: Path
    log_level: int = DEFAULT_LOG_LEVEL
    log_file: Optional[Path] = None

    @classmethod
    def from_env(cls, env: Mapping[str, str]) -> "Settings":
        log_file = (env.get(_env_key("LOG_FILE")) or '').strip()
        return cls(
            tasks_file=Path((env.get(_env_key("FILE")) or '').strip() or DEFAULT_TASKS_FILE),
            log_level=_log_level(env.get(_env_key("LOG_LEVEL"))),
            log_file=Path(log_file) if log_file else None,
        )


def get_settings() -> Settings:
    load_dotenv(find_dotenv(usecwd=True), override=False)
    return Settings.from_env(os.environ)
