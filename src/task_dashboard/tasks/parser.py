# src/task_dashboard/tasks/parser.py

from __future__ import annotations

"""
tasks.md parser.

The task list is line-oriented:

    ## In Progress
    - [ ] Sketch the landing page #design (due: 2026-03-01)
    ## Done
    - [x] Set up repo

Section headings switch the current section, checkbox lines become Task
records, and every other line is ignored.
"""

import logging
import re
from pathlib import Path

from ..core.models import Section, Task, TaskSet

logger = logging.getLogger(__name__)

SECTION_HEADINGS: tuple[tuple[re.Pattern[str], Section], ...] = (
    (re.compile(r"^##\s+in\s*progress", re.I), Section.IN_PROGRESS),
    (re.compile(r"^##\s+up\s*next", re.I), Section.UP_NEXT),
    (re.compile(r"^##\s+done", re.I), Section.DONE),
)

CHECKBOX_RE = re.compile(r"^- \[([ x])\]\s+(.+)$")
TAG_RE = re.compile(r"#(\w+)")
DUE_RE = re.compile(r"\(due:\s*([^)]+)\)")


def _match_section(line: str) -> Section | None:
    for pattern, section in SECTION_HEADINGS:
        if pattern.match(line):
            return section
    return None


def parse_task_line(line: str) -> Task | None:
    """
    Parse a single (already trimmed) checkbox line.

    Returns None when the line is not a checkbox line.
    """
    m = CHECKBOX_RE.match(line)
    if not m:
        return None

    completed = m.group(1) == "x"
    text = m.group(2)

    tags: list[str] = []

    def _take_tag(tm: re.Match[str]) -> str:
        tags.append(tm.group(1))
        return ""

    text = TAG_RE.sub(_take_tag, text)

    due_dates: list[str] = []

    def _take_due(dm: re.Match[str]) -> str:
        due_dates.append(dm.group(1).strip())
        return ""

    text = DUE_RE.sub(_take_due, text)

    return Task(
        text=text.strip(),
        completed=completed,
        tags=tags,
        # Several due tokens: all are stripped, the last one wins.
        due_date=due_dates[-1] if due_dates else None,
    )


def parse_tasks(content: str) -> TaskSet:
    tasks = TaskSet()
    current = Section.IN_PROGRESS

    for raw_line in content.split("\n"):
        line = raw_line.strip()

        section = _match_section(line)
        if section is not None:
            current = section
            continue

        task = parse_task_line(line)
        if task is not None:
            tasks.section(current).append(task)

    return tasks


def parse_tasks_file(path: str | Path) -> TaskSet:
    """Parse a task file; a missing file is an empty task list, undecodable bytes become U+FFFD."""
    path = Path(path)
    if not path.exists():
        logger.debug("Task file %s not found; using an empty task list", path)
        return TaskSet()
    return parse_tasks(path.read_text(encoding="utf-8", errors="replace"))
