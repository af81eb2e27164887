# src/todo_keeper/cli/bootstrap.py

"""
CLI bootstrap helpers.

This module is the "composition root":
- loads settings once,
- ensures local (gitignored) directories exist,
- wires the key-value storage, task store and view into AppState.
"""

from __future__ import annotations

import logging

from ..config import get_settings
from ..core.ports import KeyValueStorage
from ..core.state import AppState
from ..storage.local_storage import LocalStorage, MemoryStorage
from ..tasks.task_storage import TaskStorage
from ..tasks.task_store import TaskStore
from ..ui.view import TodoView

logger = logging.getLogger(__name__)


def _ensure_local_dirs(settings) -> None:
    settings.data_dir.mkdir(parents=True, exist_ok=True)
    settings.storage_path.parent.mkdir(parents=True, exist_ok=True)


def create_storage(settings) -> KeyValueStorage:
    backend = str(getattr(settings, "storage_backend", "sqlite"))
    if backend == "memory":
        logger.info("Using in-memory storage; tasks will not survive a restart.")
        return MemoryStorage()
    return LocalStorage(settings.storage_path)


def create_initial_state(*, settings=None) -> AppState:
    """
    Create AppState from the provided settings.

    Keeping settings injectable makes the app easier to test and avoids hidden global config reads.
    If settings is None, falls back to get_settings().

    The task list is not loaded here; call load_tasks() once wiring is done.
    """
    if settings is None:
        settings = get_settings()

    _ensure_local_dirs(settings)

    storage = create_storage(settings)
    task_store = TaskStore(TaskStorage(storage, key=settings.storage_key))

    return AppState(
        settings=settings,
        storage=storage,
        task_store=task_store,
        view=TodoView(task_store),
    )


def load_tasks(state: AppState) -> int:
    """Initial read of the persisted list; opens the store's load-gate. Returns the task count."""
    tasks = state.task_store.load()
    logger.info("Loaded %d tasks from %s", len(tasks), getattr(state.settings, "storage_path", "?"))
    return len(tasks)
