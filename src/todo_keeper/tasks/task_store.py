# src/todo_keeper/tasks/task_store.py

from __future__ import annotations

import logging
import threading
from dataclasses import replace

from ..core.ports import ConfirmPrompt
from .task_models import Task
from .task_storage import TaskStorage

logger = logging.getLogger(__name__)

CLEAR_ALL_PROMPT = "Delete all tasks?"


class TaskStore:
    """
    Owner of the ordered task list.

    Every mutation is applied in memory first and then persisted as a full
    re-serialization through TaskStorage.

    Load-gate:
    - nothing is written until load() has run once
    - load() replaces whatever was in memory with the persisted list

    Thread-safety:
    - mutations are serialized with a re-entrant lock
    """

    def __init__(self, storage: TaskStorage) -> None:
        self._storage = storage
        self._tasks: list[Task] = []
        self._next_id = 1
        self._loaded = False
        self._revision = 0
        self._lock = threading.RLock()

    # ---- low-level helpers ----

    def _index_of(self, task_id: int) -> int | None:
        for i, task in enumerate(self._tasks):
            if task.id == task_id:
                return i
        return None

    def _allocate_id(self) -> int:
        task_id = self._next_id
        self._next_id += 1
        return task_id

    def _persist(self) -> None:
        self._revision += 1
        if not self._loaded:
            logger.debug("Skipping save before initial load (%d tasks in memory)", len(self._tasks))
            return
        self._storage.save(self._tasks)

    # ---- read API ----

    @property
    def revision(self) -> int:
        """Bumped on every change to the list; lets a UI decide when to re-render."""
        return self._revision

    @property
    def is_loaded(self) -> bool:
        return self._loaded

    @property
    def tasks(self) -> list[Task]:
        """Snapshot copy; mutate only through the store."""
        with self._lock:
            return [replace(t) for t in self._tasks]

    def get(self, task_id: int) -> Task | None:
        with self._lock:
            idx = self._index_of(task_id)
            return replace(self._tasks[idx]) if idx is not None else None

    @property
    def total(self) -> int:
        with self._lock:
            return len(self._tasks)

    @property
    def completed_count(self) -> int:
        with self._lock:
            return sum(1 for t in self._tasks if t.completed)

    # ---- lifecycle ----

    def load(self) -> list[Task]:
        """Read the persisted list once and open the load-gate."""
        with self._lock:
            if self._loaded:
                return self.tasks

            if self._tasks:
                logger.info("Dropping %d tasks created before initial load", len(self._tasks))
            self._tasks = self._storage.load()
            self._next_id = max((t.id for t in self._tasks), default=0) + 1
            self._loaded = True
            self._revision += 1
            logger.info("TaskStore loaded total=%d next_id=%d", len(self._tasks), self._next_id)
            return self.tasks

    # ---- mutations ----

    def add(self, raw_text: str) -> Task | None:
        text = (raw_text or "").strip()
        if not text:
            return None

        with self._lock:
            task = Task(id=self._allocate_id(), text=text, completed=False)
            self._tasks.append(task)
            logger.debug("Task added id=%s", task.id)
            self._persist()
            return replace(task)

    def toggle(self, task_id: int) -> Task | None:
        with self._lock:
            idx = self._index_of(task_id)
            if idx is None:
                return None
            task = self._tasks[idx]
            task.completed = not task.completed
            logger.debug("Task toggled id=%s completed=%s", task.id, task.completed)
            self._persist()
            return replace(task)

    def delete(self, task_id: int) -> bool:
        with self._lock:
            idx = self._index_of(task_id)
            if idx is None:
                return False
            del self._tasks[idx]
            logger.debug("Task deleted id=%s", task_id)
            self._persist()
            return True

    def edit(self, task_id: int, raw_text: str) -> Task | None:
        """
        Replace a task's text.

        Blank text abandons the edit: the prior text is kept and nothing is saved.
        Returns the (possibly unchanged) task, or None for an unknown id.
        """
        text = (raw_text or "").strip()
        with self._lock:
            idx = self._index_of(task_id)
            if idx is None:
                return None
            task = self._tasks[idx]
            if text and text != task.text:
                task.text = text
                logger.debug("Task edited id=%s", task.id)
                self._persist()
            return replace(task)

    def clear_all(self, confirm: ConfirmPrompt) -> bool:
        """Empty the list and drop the persisted entry, if the user confirms."""
        if not confirm(CLEAR_ALL_PROMPT):
            logger.debug("Clear all declined")
            return False

        with self._lock:
            removed = len(self._tasks)
            self._tasks = []
            self._revision += 1
            if self._loaded:
                self._storage.clear()
            logger.info("Cleared all tasks removed=%d", removed)
            return True
