# src/todo_keeper/tasks/task_storage.py

from __future__ import annotations

import json
import logging
from collections.abc import Iterable

from ..core.ports import KeyValueStorage
from .task_models import Task

logger = logging.getLogger(__name__)

DEFAULT_STORAGE_KEY = "todo_tasks"


class TaskStorage:
    """
    The only place where the task list touches the key-value store.

    Persisted value: a JSON array of {"id", "text", "completed"} records under one key.
    Reads never raise: anything that is not a well-formed task array loads as [].
    """

    def __init__(self, storage: KeyValueStorage, key: str = DEFAULT_STORAGE_KEY) -> None:
        self._storage = storage
        self._key = key

    @property
    def key(self) -> str:
        return self._key

    @staticmethod
    def decode(raw: str | None) -> list[Task] | None:
        """
        Parse a persisted value. Returns None if it is not an acceptable task list.

        The whole value is rejected when any record is malformed or two records share an id.
        """
        if raw is None:
            return None
        try:
            data = json.loads(raw)
        except (TypeError, ValueError, RecursionError):
            # RecursionError: pathologically nested arrays/objects.
            return None
        if not isinstance(data, list):
            return None

        tasks: list[Task] = []
        seen: set[int] = set()
        for item in data:
            task = Task.from_dict(item)
            if task is None or task.id in seen:
                return None
            seen.add(task.id)
            tasks.append(task)
        return tasks

    @staticmethod
    def encode(tasks: Iterable[Task]) -> str:
        return json.dumps([t.to_dict() for t in tasks], ensure_ascii=False)

    def load(self) -> list[Task]:
        try:
            raw = self._storage.get_item(self._key)
        except Exception:
            logger.exception("Failed to read saved tasks key=%s", self._key)
            return []

        if raw is None:
            logger.info("No saved tasks key=%s", self._key)
            return []

        tasks = self.decode(raw)
        if tasks is None:
            logger.warning("Discarding malformed saved tasks key=%s (%d chars)", self._key, len(raw))
            return []

        logger.info("Loaded %d tasks key=%s", len(tasks), self._key)
        return tasks

    def save(self, tasks: Iterable[Task]) -> None:
        payload = self.encode(tasks)
        try:
            self._storage.set_item(self._key, payload)
        except Exception:
            logger.exception("Failed to save tasks key=%s", self._key)

    def clear(self) -> None:
        try:
            self._storage.remove_item(self._key)
        except Exception:
            logger.exception("Failed to remove saved tasks key=%s", self._key)
