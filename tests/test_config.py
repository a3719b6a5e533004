# tests/test_config.py

from __future__ import annotations

from pathlib import Path

import pytest

from task_dashboard.config import DEFAULT_DEBOUNCE_MS, DEFAULT_PORT, Settings

_VARS = [
    "APP_NAME",
    "LOG_LEVEL",
    "LOG_DIR",
    "ROOT",
    "TASKS_FILE",
    "NOTES_DIR",
    "OUT_DIR",
    "HOST",
    "PORT",
    "DEBOUNCE_MS",
]


@pytest.fixture(autouse=True)
def clean_env(monkeypatch: pytest.MonkeyPatch) -> None:
    for name in _VARS:
        monkeypatch.delenv(f"TASKDASH_{name}", raising=False)


def test_defaults() -> None:
    s = Settings.from_env()
    assert s.tasks_file == Path("tasks.md")
    assert s.notes_dir == Path("notes")
    assert s.out_dir == Path("_site")
    assert s.host == "127.0.0.1"
    assert s.port == DEFAULT_PORT == 4242
    assert s.debounce_ms == DEFAULT_DEBOUNCE_MS == 300
    assert s.log_level == "INFO"


def test_paths_follow_root(monkeypatch: pytest.MonkeyPatch, tmp_path: Path) -> None:
    monkeypatch.setenv("TASKDASH_ROOT", str(tmp_path))
    monkeypatch.setenv("TASKDASH_NOTES_DIR", str(tmp_path / "journal"))
    s = Settings.from_env()
    assert s.tasks_file == tmp_path / "tasks.md"
    assert s.notes_dir == tmp_path / "journal"
    assert s.out_dir == tmp_path / "_site"


def test_numbers_fall_back_on_garbage(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("TASKDASH_PORT", "not-a-port")
    monkeypatch.setenv("TASKDASH_DEBOUNCE_MS", "")
    assert Settings.from_env().port == DEFAULT_PORT
    assert Settings.from_env().debounce_ms == DEFAULT_DEBOUNCE_MS

    monkeypatch.setenv("TASKDASH_PORT", "8080")
    assert Settings.from_env().port == 8080


def test_settings_are_frozen() -> None:
    s = Settings.from_env()
    with pytest.raises(AttributeError):
        s.port = 1  # type: ignore[misc]
