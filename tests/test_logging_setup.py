# tests/test_logging_setup.py

from __future__ import annotations

import logging
from pathlib import Path

from todo_keeper.logging_setup import _ConsoleNoiseFilter, setup_logging


def _record(name: str, level: int) -> logging.LogRecord:
    return logging.LogRecord(name, level, __file__, 1, "msg", None, None)


def test_console_filter() -> None:
    f = _ConsoleNoiseFilter()
    assert f.filter(_record("todo_keeper.cli.main", logging.INFO))
    assert not f.filter(_record("todo_keeper.tasks.task_store", logging.INFO))
    assert f.filter(_record("todo_keeper.tasks.task_store", logging.WARNING))
    assert not f.filter(_record("py.warnings", logging.WARNING))
    assert not f.filter(_record("sqlite_helper", logging.WARNING))
    assert f.filter(_record("sqlite_helper", logging.ERROR))


def test_setup_logging_writes_file(tmp_path: Path) -> None:
    root = logging.getLogger()
    saved = list(root.handlers)
    try:
        setup_logging(log_dir=tmp_path / "logs")
        logging.getLogger("todo_keeper.test").debug("hello file")
        for h in root.handlers:
            h.flush()
        assert "hello file" in (tmp_path / "logs" / "todo.log").read_text("utf-8")
    finally:
        for h in list(root.handlers):
            root.removeHandler(h)
            h.close()
        for h in saved:
            root.addHandler(h)
