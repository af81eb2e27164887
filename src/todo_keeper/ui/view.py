# src/todo_keeper/ui/view.py

"""
Presentation state for the task list.

TodoView holds what the console shows but does not own:
- the new-task draft (submitted on Enter, not per keystroke),
- the inline edit field {editing_id, edit_draft},
- rendering of the list, the counters and the input placeholder.

All task data is read from, and every change requested through, the TaskStore.
"""

from __future__ import annotations

import logging

from ..tasks.task_models import Task
from ..tasks.task_store import TaskStore

logger = logging.getLogger(__name__)

# Roughly how many pixels one terminal cell stands for.
PIXELS_PER_COLUMN = 8

# (max width in px, placeholder); the last entry is the wide-screen default.
PLACEHOLDER_BREAKPOINTS: tuple[tuple[int | None, str], ...] = (
    (280, "New task..."),
    (320, "Add a task..."),
    (375, "Type a task..."),
    (480, "New task (Enter)..."),
    (None, "Type a new task and press Enter..."),
)

EMPTY_HINT = "No tasks yet."
CLEAR_HINT = "/clear - delete all"


def placeholder_for_width(columns: int) -> str:
    width_px = max(0, int(columns)) * PIXELS_PER_COLUMN
    for limit, text in PLACEHOLDER_BREAKPOINTS:
        if limit is None or width_px <= limit:
            return text
    return PLACEHOLDER_BREAKPOINTS[-1][1]


class TodoView:
    def __init__(self, store: TaskStore) -> None:
        self.store = store
        self.draft = ""
        self.editing_id: int | None = None
        self.edit_draft = ""

    # ---- new task input ----

    def set_draft(self, text: str) -> None:
        self.draft = text

    def submit_draft(self) -> Task | None:
        """Enter in the input: add the draft; it is cleared only when a task was created."""
        task = self.store.add(self.draft)
        if task is not None:
            self.draft = ""
        return task

    # ---- inline editing ----

    @property
    def is_editing(self) -> bool:
        return self.editing_id is not None

    def begin_edit(self, task_id: int) -> bool:
        task = self.store.get(task_id)
        if task is None:
            return False
        self.editing_id = task.id
        self.edit_draft = task.text
        return True

    def set_edit_draft(self, text: str) -> None:
        self.edit_draft = text

    def commit_edit(self) -> bool:
        """
        Enter in the edit field.

        Blank text is ignored and the item stays in edit mode.
        Returns True when edit mode was left.
        """
        if self.editing_id is None:
            return False
        if not self.edit_draft.strip():
            return False
        self.store.edit(self.editing_id, self.edit_draft)
        self._end_edit()
        return True

    def blur_edit(self) -> None:
        """Focus left the edit field: commit non-blank text, otherwise revert."""
        if self.editing_id is None:
            return
        if self.edit_draft.strip():
            self.store.edit(self.editing_id, self.edit_draft)
        else:
            task = self.store.get(self.editing_id)
            self.edit_draft = task.text if task is not None else ""
        self._end_edit()

    def _end_edit(self) -> None:
        self.editing_id = None
        self.edit_draft = ""

    # ---- rendering ----

    def stats(self) -> tuple[int, int]:
        tasks = self.store.tasks
        return len(tasks), sum(1 for t in tasks if t.completed)

    def placeholder(self, columns: int) -> str:
        return placeholder_for_width(columns)

    def task_at(self, position: int) -> Task | None:
        """1-based position as displayed."""
        tasks = self.store.tasks
        if 1 <= position <= len(tasks):
            return tasks[position - 1]
        return None

    def render(self, columns: int = 80) -> list[str]:
        tasks = self.store.tasks
        if not tasks:
            return [EMPTY_HINT]

        width = max(20, int(columns))
        lines: list[str] = []
        for pos, task in enumerate(tasks, start=1):
            mark = "[x]" if task.completed else "[ ]"
            if task.id == self.editing_id:
                body = f"✎ {self.edit_draft}"
            else:
                body = task.text
            line = f"{mark} {pos}. {body}"
            if len(line) > width:
                line = line[: width - 1] + "…"
            lines.append(line)

        total, completed = self.stats()
        lines.append("")
        lines.append(f"📊 Total: {total}  ✅ Completed: {completed}  ({CLEAR_HINT})")
        return lines
