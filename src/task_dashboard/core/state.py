# src/task_dashboard/core/state.py

from __future__ import annotations

import threading
from dataclasses import dataclass, field

from ..config import Settings


class BuildCounter:
    """
    Number of completed builds in this process.

    Written by the rebuild (watcher timer thread), read by the HTTP server
    threads serving /version.
    """

    def __init__(self, start: int = 0) -> None:
        self._value = int(start)
        self._lock = threading.Lock()

    @property
    def value(self) -> int:
        with self._lock:
            return self._value

    def increment(self) -> int:
        with self._lock:
            self._value += 1
            return self._value


@dataclass
class AppState:
    # Settings may be the real Settings or a SimpleNamespace in tests.
    settings: Settings

    serve_mode: bool
    counter: BuildCounter = field(default_factory=BuildCounter)
