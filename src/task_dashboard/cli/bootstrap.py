# src/task_dashboard/cli/bootstrap.py

"""
CLI bootstrap helpers.

This module is the "composition root":
- loads settings once,
- creates the shared build counter,
- wires the server and the watcher for live-refresh mode.
"""

from __future__ import annotations

import logging

from ..config import get_settings
from ..core.state import AppState
from ..server.watcher import ChangeWatcher

logger = logging.getLogger(__name__)


def create_initial_state(*, settings=None, serve_mode: bool = False) -> AppState:
    """
    Create AppState from the provided settings.

    If settings is None, falls back to get_settings().
    """
    if settings is None:
        settings = get_settings()
    return AppState(settings=settings, serve_mode=serve_mode)


def create_watcher(state: AppState) -> ChangeWatcher:
    settings = state.settings
    debounce_ms = int(getattr(settings, "debounce_ms", 300))
    return ChangeWatcher(
        settings.tasks_file,
        settings.notes_dir,
        debounce_seconds=max(0, debounce_ms) / 1000.0,
    )
