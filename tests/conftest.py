# tests/conftest.py

from __future__ import annotations

from pathlib import Path
from types import SimpleNamespace

import pytest

from todo_keeper.cli.bootstrap import create_initial_state, load_tasks
from todo_keeper.core.state import AppState
from todo_keeper.tasks.task_storage import TaskStorage
from todo_keeper.tasks.task_store import TaskStore

from .fakes import RecordingStorage


@pytest.fixture()
def settings(tmp_path: Path) -> SimpleNamespace:
    """
    Minimal settings object compatible with AppState and bootstrap.

    We intentionally use a SimpleNamespace rather than importing real config,
    to keep unit tests isolated from the environment and any local .env.
    """
    return SimpleNamespace(
        app_name="todo-test",
        log_level="DEBUG",
        data_dir=tmp_path,
        storage_path=tmp_path / "storage.sqlite3",
        storage_key="todo_tasks",
        storage_backend="sqlite",
        confirm_clear=True,
    )


@pytest.fixture()
def storage() -> RecordingStorage:
    return RecordingStorage()


@pytest.fixture()
def store(storage: RecordingStorage) -> TaskStore:
    """Loaded TaskStore over an empty in-memory storage."""
    s = TaskStore(TaskStorage(storage))
    s.load()
    return s


@pytest.fixture()
def state(settings: SimpleNamespace) -> AppState:
    """
    AppState wired by the real bootstrap.

    NOTE: We keep the real SQLite LocalStorage here because
    persistence across restarts is part of what we want to test.
    """
    st = create_initial_state(settings=settings)
    load_tasks(st)
    return st
