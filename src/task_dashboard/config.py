# src/task_dashboard/config.py

"""Centralized settings loaded from environment variables (+ optional .env).

Design goals:
- One Settings object for the whole app.
- Every path derives from a single project root unless overridden.
- Invalid numeric values fall back to defaults instead of crashing the CLI.
"""

from __future__ import annotations

import os
from dataclasses import dataclass
from pathlib import Path

from dotenv import load_dotenv

ENV_PREFIX = "TASKDASH"

DEFAULT_PORT = 4242
DEFAULT_DEBOUNCE_MS = 300

load_dotenv(override=False)


def _k(suffix: str) -> str:
    """Build env var name with the project prefix."""
    return f"{ENV_PREFIX}_{suffix}"


def _env(name: str, default: str = "") -> str:
    v = os.getenv(name)
    return default if v is None else v


def _env_int(name: str, default: int) -> int:
    raw = os.getenv(name)
    if raw is None or raw.strip() == "":
        return default
    try:
        return int(raw)
    except ValueError:
        return default


def _env_path(name: str, default: Path) -> Path:
    raw = os.getenv(name)
    if raw is None or raw.strip() == "":
        return default
    return Path(raw).expanduser()


@dataclass(frozen=True, slots=True)
class Settings:
    # ---- App / logging ----
    app_name: str
    log_level: str
    log_dir: Path

    # ---- Inputs / outputs ----
    root_dir: Path
    tasks_file: Path
    notes_dir: Path
    out_dir: Path

    # ---- Live-refresh server ----
    host: str
    port: int
    debounce_ms: int

    @staticmethod
    def from_env() -> "Settings":
        app_name = _env(_k("APP_NAME"), "task-dashboard")
        log_level = _env(_k("LOG_LEVEL"), "INFO")
        log_dir = _env_path(_k("LOG_DIR"), Path(".local/task_dashboard"))

        root_dir = _env_path(_k("ROOT"), Path("."))
        tasks_file = _env_path(_k("TASKS_FILE"), root_dir / "tasks.md")
        notes_dir = _env_path(_k("NOTES_DIR"), root_dir / "notes")
        out_dir = _env_path(_k("OUT_DIR"), root_dir / "_site")

        host = _env(_k("HOST"), "127.0.0.1").strip() or "127.0.0.1"
        port = _env_int(_k("PORT"), DEFAULT_PORT)
        debounce_ms = _env_int(_k("DEBOUNCE_MS"), DEFAULT_DEBOUNCE_MS)

        return Settings(
            app_name=app_name,
            log_level=log_level,
            log_dir=log_dir,
            root_dir=root_dir,
            tasks_file=tasks_file,
            notes_dir=notes_dir,
            out_dir=out_dir,
            host=host,
            port=port,
            debounce_ms=debounce_ms,
        )


SETTINGS = Settings.from_env()


def get_settings() -> Settings:
    return SETTINGS
