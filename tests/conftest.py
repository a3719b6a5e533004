# tests/conftest.py

from __future__ import annotations

from pathlib import Path
from types import SimpleNamespace

import pytest

from task_dashboard.core.state import AppState


@pytest.fixture()
def settings(tmp_path: Path) -> SimpleNamespace:
    """
    Minimal settings object compatible with AppState and the build core.

    We intentionally use a SimpleNamespace rather than importing real config,
    to keep unit tests isolated from the developer's environment / .env.
    """
    return SimpleNamespace(
        app_name="task-dashboard",
        log_level="INFO",
        log_dir=tmp_path / "logs",
        root_dir=tmp_path,
        tasks_file=tmp_path / "tasks.md",
        notes_dir=tmp_path / "notes",
        out_dir=tmp_path / "_site",
        host="127.0.0.1",
        # 0 = let the OS pick a free port
        port=0,
        debounce_ms=20,
    )


@pytest.fixture()
def state(settings: SimpleNamespace) -> AppState:
    return AppState(settings=settings, serve_mode=False)


@pytest.fixture()
def serve_state(settings: SimpleNamespace) -> AppState:
    return AppState(settings=settings, serve_mode=True)


@pytest.fixture()
def sample_inputs(settings: SimpleNamespace) -> SimpleNamespace:
    """A realistic tasks.md + two notes on disk."""
    settings.tasks_file.write_text(
        "# My tasks\n"
        "\n"
        "## In Progress\n"
        "- [ ] Redesign landing page #design #urgent (due: 2026-03-01)\n"
        "\n"
        "## Up Next\n"
        "- [ ] Write onboarding docs #docs\n"
        "- [ ] Plan Q3 roadmap\n"
        "\n"
        "## Done\n"
        "- [x] Set up repo\n",
        encoding="utf-8",
    )
    settings.notes_dir.mkdir()
    (settings.notes_dir / "ideas.md").write_text(
        "# Ideas\n\n- dark mode\n- **keyboard** shortcuts\n", encoding="utf-8"
    )
    (settings.notes_dir / "links.md").write_text(
        "Useful: [docs](https://example.com/docs)\n", encoding="utf-8"
    )
    return settings
