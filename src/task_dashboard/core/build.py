# src/task_dashboard/core/build.py

from __future__ import annotations

"""
Build orchestrator.

One build = parse tasks.md, load notes/, render both pages, write them into
the output directory, bump the build counter. Every build is a full
regeneration; write errors are not caught here.
"""

import logging
from dataclasses import dataclass
from pathlib import Path

from ..notes.loader import load_notes
from ..render.pages import render_dashboard, render_notepad
from ..tasks.parser import parse_tasks_file
from .state import BuildCounter

logger = logging.getLogger(__name__)

DASHBOARD_FILENAME = "dashboard.html"
NOTEPAD_FILENAME = "notepad.html"


@dataclass(slots=True, frozen=True)
class BuildResult:
    version: int
    dashboard_path: Path
    notepad_path: Path
    task_count: int
    note_count: int


def build_site(settings, *, serve_mode: bool = False, counter: BuildCounter | None = None) -> BuildResult:
    """
    Regenerate dashboard.html and notepad.html from settings.tasks_file and
    settings.notes_dir into settings.out_dir.

    `counter` is the shared build counter read by the /version route; when
    omitted a private one is used (one-shot builds).
    """
    if counter is None:
        counter = BuildCounter()

    logger.info("📋 Reading %s...", Path(settings.tasks_file).name)
    tasks = parse_tasks_file(settings.tasks_file)
    logger.info("   Found %d tasks", tasks.total)

    logger.info("📝 Reading notes...")
    notes = load_notes(settings.notes_dir)
    logger.info("   Found %d note(s)", len(notes))

    out_dir = Path(settings.out_dir)
    out_dir.mkdir(parents=True, exist_ok=True)

    dashboard_path = out_dir / DASHBOARD_FILENAME
    dashboard_path.write_text(render_dashboard(tasks, serve_mode=serve_mode), encoding="utf-8")
    logger.info("✅ Dashboard → %s", dashboard_path)

    notepad_path = out_dir / NOTEPAD_FILENAME
    notepad_path.write_text(render_notepad(notes, serve_mode=serve_mode), encoding="utf-8")
    logger.info("✅ Notepad   → %s", notepad_path)

    version = counter.increment()
    logger.debug("Build %d complete", version)

    return BuildResult(
        version=version,
        dashboard_path=dashboard_path,
        notepad_path=notepad_path,
        task_count=tasks.total,
        note_count=len(notes),
    )
