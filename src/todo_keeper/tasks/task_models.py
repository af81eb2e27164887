# src/todo_keeper/tasks/task_models.py

from __future__ import annotations

from dataclasses import dataclass
from typing import Any


@dataclass(slots=True)
class Task:
    id: int
    text: str
    completed: bool = False

    def to_dict(self) -> dict[str, Any]:
        return {"id": self.id, "text": self.text, "completed": self.completed}

    @classmethod
    def from_dict(cls, raw: Any) -> Task | None:
        """
        Build a Task from a decoded JSON record.

        Returns None unless the record is Task-shaped:
        - id is an int (bool is rejected)
        - text is a non-empty string with no surrounding whitespace
        - completed is a bool
        """
        if not isinstance(raw, dict):
            return None

        task_id = raw.get("id")
        text = raw.get("text")
        completed = raw.get("completed")

        if not isinstance(task_id, int) or isinstance(task_id, bool):
            return None
        if not isinstance(text, str) or not text or text != text.strip():
            return None
        if not isinstance(completed, bool):
            return None

        return cls(id=task_id, text=text, completed=completed)
