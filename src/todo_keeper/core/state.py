# src/todo_keeper/core/state.py

from __future__ import annotations

from dataclasses import dataclass
from typing import Any

from ..tasks.task_store import TaskStore
from ..ui.view import TodoView
from .ports import ConfirmPrompt, KeyValueStorage


def _always_confirm(message: str) -> bool:
    return True


def _never_confirm(message: str) -> bool:
    return False


@dataclass
class AppState:
    # Store Settings on the state for easy access in other modules later.
    settings: Any

    storage: KeyValueStorage
    task_store: TaskStore
    view: TodoView

    # Replaced by the connector with its own prompt (console: "[y/N]").
    # Without one, destructive actions are refused.
    confirm: ConfirmPrompt = _never_confirm

    def confirm_clear(self) -> ConfirmPrompt:
        """Prompt used by /clear; skipped entirely when confirmation is disabled in settings."""
        if getattr(self.settings, "confirm_clear", True):
            return self.confirm
        return _always_confirm
