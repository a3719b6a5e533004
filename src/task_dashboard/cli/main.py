# src/task_dashboard/cli/main.py

"""
CLI entrypoint.

    task-dashboard           build dashboard.html + notepad.html once and exit
    task-dashboard --serve   build, serve the output locally and rebuild on changes
"""

from __future__ import annotations

import argparse
import logging
import signal
import threading
from collections.abc import Sequence
from pathlib import Path

from ..cli.bootstrap import create_initial_state, create_watcher
from ..config import get_settings
from ..core.build import DASHBOARD_FILENAME, NOTEPAD_FILENAME, BuildResult, build_site
from ..core.ports import ChangeSource
from ..core.state import AppState
from ..logging_setup import setup_logging
from ..server.http_server import start_server

logger = logging.getLogger(__name__)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="task-dashboard",
        description="Build an HTML task dashboard and notepad from tasks.md and notes/.",
    )
    parser.add_argument(
        "--serve",
        action="store_true",
        help="serve the pages locally, watch for changes and auto-refresh",
    )
    return parser


def run_once(state: AppState) -> BuildResult:
    result = build_site(state.settings, serve_mode=state.serve_mode, counter=state.counter)
    logger.info("\n🚀 Done! Run with --serve to start a live-updating local server.")
    logger.info("   Or open %s in your browser.", result.dashboard_path)
    return result


def run_serve(
    state: AppState,
    *,
    watcher: ChangeSource | None = None,
    stop_event: threading.Event | None = None,
) -> int:
    """
    Build, start the HTTP server and the watcher, then block until stop_event
    is set (signal handler) or a rebuild fails.

    Returns the process exit code.
    """
    settings = state.settings
    build_site(settings, serve_mode=state.serve_mode, counter=state.counter)

    if stop_event is None:
        stop_event = threading.Event()
    if watcher is None:
        watcher = create_watcher(state)

    failures: list[BaseException] = []

    def rebuild(paths: set[Path]) -> None:
        names = ", ".join(sorted(p.name for p in paths))
        logger.info("\n🔄 Change detected (%s) — rebuilding...", names)
        try:
            build_site(settings, serve_mode=state.serve_mode, counter=state.counter)
        except OSError as exc:
            logger.exception("Rebuild failed; stopping.")
            failures.append(exc)
            stop_event.set()
            return
        logger.info("   Done! Browser will refresh automatically.\n")

    try:
        httpd, _thread = start_server(
            Path(settings.out_dir),
            state.counter,
            host=settings.host,
            port=int(settings.port),
        )
    except OSError:
        logger.exception("Could not start server on %s:%s", settings.host, settings.port)
        return 1

    unsubscribe = None
    try:
        unsubscribe = watcher.subscribe(rebuild)
        watcher.start()

        logger.info("\n🌐 Server running at %s", httpd.url)
        logger.info("   📋 Dashboard → %s/%s", httpd.url, DASHBOARD_FILENAME)
        logger.info("   📝 Notepad   → %s/%s", httpd.url, NOTEPAD_FILENAME)
        logger.info("\n👀 Watching for changes... (press Ctrl+C to stop)\n")

        stop_event.wait()
    finally:
        if unsubscribe is not None:
            unsubscribe()
        watcher.stop()
        httpd.shutdown()
        httpd.server_close()

    return 1 if failures else 0


def _install_signal_handlers(stop_event: threading.Event) -> None:
    def _handle_signal(signum, _frame) -> None:
        logger.info("Signal %s received, shutting down...", signum)
        stop_event.set()

    signal.signal(signal.SIGINT, _handle_signal)
    # SIGTERM is missing on some platforms.
    if hasattr(signal, "SIGTERM"):
        signal.signal(signal.SIGTERM, _handle_signal)


def main(argv: Sequence[str] | None = None) -> None:
    args = build_parser().parse_args(argv)
    settings = get_settings()

    level_name = str(getattr(settings, "log_level", "INFO")).upper()
    console_level = getattr(logging, level_name, logging.INFO)
    setup_logging(log_dir=settings.log_dir, console_level=console_level)

    logger.debug("Starting %s...", getattr(settings, "app_name", "task-dashboard"))

    state = create_initial_state(settings=settings, serve_mode=args.serve)

    if not state.serve_mode:
        run_once(state)
        return

    stop_event = threading.Event()
    _install_signal_handlers(stop_event)
    code = run_serve(state, stop_event=stop_event)
    logger.info("Bye.")
    if code:
        raise SystemExit(code)


if __name__ == "__main__":
    main()
