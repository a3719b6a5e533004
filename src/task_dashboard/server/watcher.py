# src/task_dashboard/server/watcher.py

from __future__ import annotations

"""
Input watcher for live-refresh mode.

Editors often emit several events per save (write, truncate, rename of a swap
file, ...). Events are therefore collected by a Debouncer and delivered to
subscribers as one batch once the input has been quiet for `debounce_seconds`.
"""

import logging
import threading
from collections.abc import Callable
from pathlib import Path

from watchdog.events import FileSystemEvent, FileSystemEventHandler
from watchdog.observers import Observer

from ..core.ports import ChangeCallback

logger = logging.getLogger(__name__)

DEFAULT_DEBOUNCE_SECONDS = 0.3


class Debouncer:
    """
    Coalesce triggers that arrive within `delay` seconds into one callback.

    Every trigger restarts the timer; the callback runs on the timer thread
    with every path collected since the previous delivery. Deliveries never
    overlap: a batch that becomes due while the callback is still running
    waits for it to return.
    """

    def __init__(self, delay: float, callback: ChangeCallback) -> None:
        self.delay = max(0.0, float(delay))
        self._callback = callback
        self._lock = threading.Lock()
        self._run_lock = threading.Lock()
        self._timer: threading.Timer | None = None
        self._pending: set[Path] = set()

    def trigger(self, path: Path) -> None:
        with self._lock:
            self._pending.add(path)
            if self._timer is not None:
                self._timer.cancel()
            self._timer = threading.Timer(self.delay, self._fire)
            self._timer.daemon = True
            self._timer.start()

    def cancel(self) -> None:
        with self._lock:
            if self._timer is not None:
                self._timer.cancel()
            self._timer = None
            self._pending = set()

    def _fire(self) -> None:
        with self._run_lock:
            with self._lock:
                paths = self._pending
                self._pending = set()
                if self._timer is threading.current_thread():
                    self._timer = None
            if paths:
                self._callback(paths)


class _InputEventHandler(FileSystemEventHandler):
    def __init__(self, is_relevant: Callable[[Path], bool], notify: Callable[[Path], None]) -> None:
        self._is_relevant = is_relevant
        self._notify = notify

    def handle(self, raw_path: str | bytes, is_directory: bool) -> None:
        if is_directory or not raw_path:
            return
        if isinstance(raw_path, bytes):
            raw_path = raw_path.decode("utf-8", errors="replace")
        path = Path(raw_path)
        if self._is_relevant(path):
            self._notify(path)

    def on_modified(self, event: FileSystemEvent) -> None:
        self.handle(event.src_path, event.is_directory)

    def on_created(self, event: FileSystemEvent) -> None:
        self.handle(event.src_path, event.is_directory)

    def on_deleted(self, event: FileSystemEvent) -> None:
        self.handle(event.src_path, event.is_directory)

    def on_moved(self, event: FileSystemEvent) -> None:
        self.handle(event.src_path, event.is_directory)
        self.handle(event.dest_path, event.is_directory)


class ChangeWatcher:
    """
    Watch the task file and the notes directory.

    - the task file's directory is watched non-recursively and filtered down
      to the task file, so a tasks.md created after start is still noticed
    - the notes directory is watched recursively, but only if it exists at start
    """

    def __init__(
        self,
        tasks_file: str | Path,
        notes_dir: str | Path,
        *,
        debounce_seconds: float = DEFAULT_DEBOUNCE_SECONDS,
    ) -> None:
        self.tasks_file = Path(tasks_file).resolve()
        self.notes_dir = Path(notes_dir).resolve()
        self._subscribers: list[ChangeCallback] = []
        self._lock = threading.Lock()
        self._debouncer = Debouncer(debounce_seconds, self._deliver)
        self.event_handler = _InputEventHandler(self.is_relevant, self._debouncer.trigger)
        self._observer: Observer | None = None

    @property
    def debounce_seconds(self) -> float:
        return self._debouncer.delay

    def subscribe(self, callback: ChangeCallback) -> Callable[[], None]:
        with self._lock:
            self._subscribers.append(callback)

        def unsubscribe() -> None:
            with self._lock:
                if callback in self._subscribers:
                    self._subscribers.remove(callback)

        return unsubscribe

    def is_relevant(self, path: Path) -> bool:
        resolved = path.resolve()
        if resolved == self.tasks_file:
            return True
        return self.notes_dir in resolved.parents

    def watched_paths(self) -> list[tuple[Path, bool]]:
        """(directory, recursive) pairs that start() will schedule."""
        out: list[tuple[Path, bool]] = []
        if self.tasks_file.parent.is_dir():
            out.append((self.tasks_file.parent, False))
        if self.notes_dir.is_dir():
            out.append((self.notes_dir, True))
        return out

    def start(self) -> None:
        if self._observer is not None:
            return
        observer = Observer()
        for directory, recursive in self.watched_paths():
            observer.schedule(self.event_handler, str(directory), recursive=recursive)
            logger.debug("Watching %s (recursive=%s)", directory, recursive)
        observer.start()
        self._observer = observer

    def stop(self) -> None:
        self._debouncer.cancel()
        observer, self._observer = self._observer, None
        if observer is None:
            return
        observer.stop()
        observer.join(timeout=5.0)

    def _deliver(self, paths: set[Path]) -> None:
        with self._lock:
            subscribers = list(self._subscribers)
        for callback in subscribers:
            try:
                callback(paths)
            except Exception:
                logger.exception("Change subscriber %r failed", callback)
