# src/task_dashboard/render/pages.py

"""
Full HTML documents for the dashboard (tasks) and the notepad (notes).

Task content is plain text typed by the user and is always escaped before it
goes into the page. Note content is already HTML (see render.markdown) and is
inserted as-is.
"""

from __future__ import annotations

import math
from collections.abc import Sequence

from ..core.models import Note, Section, Task, TaskSet
from .styles import AUTO_REFRESH_SCRIPT, SHARED_CSS

SECTION_TITLES: dict[Section, str] = {
    Section.IN_PROGRESS: "🔨 In Progress",
    Section.UP_NEXT: "📌 Up Next",
    Section.DONE: "✅ Done",
}

CLI_COMMAND = "task-dashboard"


def escape_text(value: str) -> str:
    return value.replace("&", "&amp;").replace("<", "&lt;").replace(">", "&gt;").replace('"', "&quot;")


def escape_tag(value: str) -> str:
    return escape_text(value)


def escape_due_date(value: str) -> str:
    return value.replace("<", "&lt;").replace(">", "&gt;")


def progress_percent(completed: int, total: int) -> int:
    """Completed share as a whole percent, rounding halves up; 0 for no tasks."""
    if total <= 0:
        return 0
    return math.floor(completed / total * 100 + 0.5)


def render_task(task: Task) -> str:
    tags_html = "".join(f'<span class="tag">#{escape_tag(t)}</span>' for t in task.tags)
    due_html = (
        f'<span class="due-date">📅 {escape_due_date(task.due_date)}</span>' if task.due_date else ""
    )
    check_class = "checked" if task.completed else ""
    text_class = "completed" if task.completed else ""

    return f"""
      <div class="card">
        <div class="task-row">
          <span class="checkbox {check_class}"></span>
          <span class="task-text {text_class}">{escape_text(task.text)}</span>
          {tags_html}
          {due_html}
        </div>
      </div>"""


def render_section(title: str, tasks: Sequence[Task]) -> str:
    if not tasks:
        return ""
    return f"<h2>{title}</h2>\n" + "\n".join(render_task(t) for t in tasks)


def _head(title: str) -> str:
    return f"""<!DOCTYPE html>
<html lang="en">
<head>
  <meta charset="UTF-8">
  <meta name="viewport" content="width=device-width, initial-scale=1.0">
  <title>{title}</title>
  <style>{SHARED_CSS}</style>
</head>"""


def render_dashboard(tasks: TaskSet, *, serve_mode: bool = False) -> str:
    total = tasks.total
    in_progress = len(tasks.in_progress)
    completed = len(tasks.done)
    percent = progress_percent(completed, total)

    sections = "\n  ".join(render_section(SECTION_TITLES[s], items) for s, items in tasks.sections())

    if serve_mode:
        subtitle_status = "saves auto-refresh this page"
        footer_status = "Watching for changes — saves auto-refresh"
    else:
        subtitle_status = "edit that file and re-run to update"
        footer_status = f"Edit your tasks and run <code>{CLI_COMMAND}</code> to update"

    empty_state = (
        '<div class="empty-state">No tasks yet. Add some to tasks.md and re-run!</div>' if total == 0 else ""
    )
    refresh = AUTO_REFRESH_SCRIPT if serve_mode else ""

    return f"""{_head("Task Dashboard")}
<body>
  <h1>📋 Task Dashboard</h1>
  <p class="subtitle">Your tasks from <code>tasks.md</code> — {subtitle_status}.</p>
  <a class="nav-link" href="notepad.html">📝 Open Notepad →</a>

  <div class="stats">
    <div class="stat-card">
      <div class="stat-number">{total}</div>
      <div class="stat-label">Total Tasks</div>
    </div>
    <div class="stat-card">
      <div class="stat-number" style="color: var(--color-accent)">{in_progress}</div>
      <div class="stat-label">In Progress</div>
    </div>
    <div class="stat-card">
      <div class="stat-number" style="color: var(--color-success)">{completed}</div>
      <div class="stat-label">Completed</div>
    </div>
    <div class="stat-card">
      <div class="stat-number" style="color: var(--color-warning)">{percent}%</div>
      <div class="stat-label">Progress</div>
    </div>
  </div>

  {sections}

  {empty_state}

  <div class="footer">
    Generated from tasks.md · {footer_status}
  </div>
  {refresh}
</body>
</html>"""


def render_notepad(notes: Sequence[Note], *, serve_mode: bool = False) -> str:
    if notes:
        notes_html = "\n".join(f'<div class="note-card">{n.html}</div>' for n in notes)
    else:
        notes_html = (
            '<div class="empty-state">No notes yet. Add .md files to the notes/ folder and re-run!</div>'
        )

    count = len(notes)
    plural = "" if count == 1 else "s"

    if serve_mode:
        subtitle_status = "Saves auto-refresh this page."
        footer_status = "Watching for changes — saves auto-refresh"
    else:
        subtitle_status = ""
        footer_status = f"Add or edit .md files and run <code>{CLI_COMMAND}</code> to update"

    refresh = AUTO_REFRESH_SCRIPT if serve_mode else ""

    return f"""{_head("Notepad")}
<body>
  <h1>📝 Notepad</h1>
  <p class="subtitle">Your notes from the <code>notes/</code> folder — {count} note{plural} found. {subtitle_status}</p>
  <a class="nav-link" href="dashboard.html">📋 Open Task Dashboard →</a>

  {notes_html}

  <div class="footer">
    Generated from notes/ · {footer_status}
  </div>
  {refresh}
</body>
</html>"""
