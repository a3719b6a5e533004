# tests/test_logging_setup.py

from __future__ import annotations

import logging

from task_dashboard.logging_setup import _ConsoleNoiseFilter, setup_logging


def _record(name: str, level: int) -> logging.LogRecord:
    return logging.LogRecord(name, level, __file__, 1, "msg", None, None)


def test_console_filter() -> None:
    f = _ConsoleNoiseFilter()
    assert f.filter(_record("task_dashboard.core.build", logging.INFO))
    assert not f.filter(_record("task_dashboard.server.http_server.access", logging.DEBUG))
    assert f.filter(_record("task_dashboard.server.http_server.access", logging.WARNING))
    assert not f.filter(_record("watchdog.observers.inotify_buffer", logging.WARNING))
    assert f.filter(_record("watchdog.observers.inotify_buffer", logging.ERROR))
    assert not f.filter(_record("py.warnings", logging.WARNING))
    assert f.filter(_record("py.warnings", logging.ERROR))


def test_setup_logging_writes_log_file(tmp_path) -> None:
    root = logging.getLogger()
    saved_handlers, saved_level = list(root.handlers), root.level
    try:
        setup_logging(log_dir=tmp_path / "logs", console_level=logging.WARNING)
        logging.getLogger("task_dashboard.test").debug("hello file")
        for h in root.handlers:
            h.flush()
        assert len(root.handlers) == 2
        assert "hello file" in (tmp_path / "logs" / "task_dashboard.log").read_text(encoding="utf-8")
    finally:
        for h in list(root.handlers):
            root.removeHandler(h)
            h.close()
        for h in saved_handlers:
            root.addHandler(h)
        root.setLevel(saved_level)
        logging.captureWarnings(False)
