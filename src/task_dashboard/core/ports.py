# src/task_dashboard/core/ports.py

from __future__ import annotations

"""
Ports (interfaces) used between the build core and the live-refresh glue.

The server only needs something that reports the current build version,
and the CLI only needs something it can subscribe rebuilds to. Keeping these
as Protocols lets tests drive the CLI and server with fakes.
"""

from collections.abc import Callable
from pathlib import Path
from typing import Protocol

ChangeCallback = Callable[[set[Path]], None]


class VersionSource(Protocol):
    """Read side of the build counter, polled by the /version route."""

    @property
    def value(self) -> int: ...


class ChangeSource(Protocol):
    """
    Something that reports input changes.

    Callbacks receive the set of paths that changed since the last delivery;
    debouncing (if any) is the source's own policy.
    """

    def subscribe(self, callback: ChangeCallback) -> Callable[[], None]: ...
    def start(self) -> None: ...
    def stop(self) -> None: ...
