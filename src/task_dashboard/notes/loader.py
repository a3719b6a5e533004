# src/task_dashboard/notes/loader.py

from __future__ import annotations

import logging
import re
from pathlib import Path

from ..core.models import Note
from ..render.markdown import markdown_to_html

logger = logging.getLogger(__name__)

TITLE_RE = re.compile(r"^#\s+(.+)$", re.M)
NOTE_SUFFIX = ".md"


def note_title(raw: str, filename: str) -> str:
    """First level-1 heading anywhere in the note, else the file stem."""
    m = TITLE_RE.search(raw)
    if m:
        return m.group(1)
    return Path(filename).stem


def load_note(path: Path) -> Note:
    # Stray non-UTF-8 bytes become U+FFFD instead of failing the build.
    raw = path.read_text(encoding="utf-8", errors="replace")
    return Note(filename=path.name, title=note_title(raw, path.name), html=markdown_to_html(raw))


def load_notes(notes_dir: str | Path) -> list[Note]:
    """
    Load every *.md file directly inside notes_dir (non-recursive).

    Sorted by filename so repeated builds produce identical pages.
    """
    notes_dir = Path(notes_dir)
    if not notes_dir.is_dir():
        logger.debug("Notes directory %s not found; no notes", notes_dir)
        return []

    paths = sorted(
        (p for p in notes_dir.iterdir() if p.is_file() and p.name.endswith(NOTE_SUFFIX)),
        key=lambda p: p.name,
    )
    return [load_note(p) for p in paths]
