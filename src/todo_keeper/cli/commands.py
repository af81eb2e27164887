# src/todo_keeper/cli/commands.py

from __future__ import annotations

import inspect
import logging
from collections.abc import Callable
from typing import cast

from ..core.state import AppState
from ..tasks.task_models import Task

CommandEmitter = Callable[[str], None]
CommandHandler2 = Callable[[AppState, list[str]], str]
CommandHandler3 = Callable[[AppState, list[str], CommandEmitter | None], str]
CommandHandler = CommandHandler2 | CommandHandler3

logger = logging.getLogger(__name__)


class CommandRegistry:
    """Simple slash-command registry used by the console connector (/help, /done, ...)."""

    def __init__(self) -> None:
        self._handlers: dict[str, CommandHandler] = {}
        self._help: dict[str, str] = {}
        self._maxsplit: dict[str, int] = {}

    def register(
        self,
        name: str,
        handler: CommandHandler,
        help_text: str,
        aliases: list[str] | None = None,
        maxsplit: int = -1,
    ) -> None:
        """maxsplit >= 0 keeps the rest of the line (inner spacing included) as the last arg."""
        aliases = aliases or []
        key = name.lower()
        self._handlers[key] = handler
        self._help[key] = help_text
        self._maxsplit[key] = maxsplit
        for alias in aliases:
            self._handlers[alias.lower()] = handler
            self._maxsplit[alias.lower()] = maxsplit

    def handle(
        self,
        state: AppState,
        line: str,
        emit: CommandEmitter | None = None,
    ) -> str | None:
        """
        Handle a string like "/command args".
        Returns a reply string or None if not a command.
        """
        if not line.startswith("/"):
            return None

        parts = line[1:].split(maxsplit=1)
        if not parts:
            return "Empty command. Use /help to list available commands."

        name = parts[0].lower()
        rest = parts[1] if len(parts) > 1 else ""

        handler = self._handlers.get(name)
        if not handler:
            return f"Unknown command: /{name}. Use /help to list available commands."

        args = rest.split(maxsplit=self._maxsplit.get(name, -1))

        try:
            nparams = len(inspect.signature(handler).parameters)
        except (TypeError, ValueError):
            nparams = 3

        if nparams >= 3:
            h3 = cast(CommandHandler3, handler)
            return h3(state, args, emit)

        h2 = cast(CommandHandler2, handler)
        return h2(state, args)

    def build_help(self) -> str:
        lines = ["Available commands:"]
        for name, help_text in self._help.items():
            lines.append(f"  /{name} - {help_text}")
        lines.append("  Any other line is added as a new task.")
        return "\n".join(lines)


registry = CommandRegistry()


def _task_from_args(state: AppState, args: list[str]) -> Task | None:
    if not args:
        return None
    try:
        position = int(args[0])
    except ValueError:
        return None
    return state.view.task_at(position)


def cmd_help(state: AppState, args: list[str], emit: CommandEmitter | None = None) -> str:
    return registry.build_help()


def cmd_list(state: AppState, args: list[str]) -> str:
    return "\n".join(state.view.render())


def cmd_done(state: AppState, args: list[str]) -> str:
    """
    /done N  -> toggle completion of task N
    """
    task = _task_from_args(state, args)
    if task is None:
        return "Usage: /done N (N is the task number shown in the list)."
    state.task_store.toggle(task.id)
    return ""


def cmd_rm(state: AppState, args: list[str]) -> str:
    """
    /rm N  -> delete task N
    """
    task = _task_from_args(state, args)
    if task is None:
        return "Usage: /rm N (N is the task number shown in the list)."
    state.task_store.delete(task.id)
    return ""


def cmd_edit(state: AppState, args: list[str], emit: CommandEmitter | None = None) -> str:
    """
    /edit N          -> start editing task N (next line is the new text)
    /edit N new text -> replace the text right away
    """
    task = _task_from_args(state, args)
    if task is None:
        return "Usage: /edit N [new text]."

    view = state.view
    view.begin_edit(task.id)

    new_text = args[1] if len(args) > 1 else ""
    if new_text.strip():
        view.set_edit_draft(new_text)
        view.commit_edit()
        return ""

    if emit:
        emit(f"Editing #{args[0]}: {task.text}")
    return "Type the new text and press Enter (empty line keeps the old text)."


def cmd_clear(state: AppState, args: list[str]) -> str:
    if state.task_store.total == 0:
        return "Nothing to clear."
    if state.task_store.clear_all(state.confirm_clear()):
        return "All tasks deleted."
    return "Kept all tasks."


registry.register("help", cmd_help, help_text="Show available commands.", aliases=["h", "?"])
registry.register("list", cmd_list, help_text="Show the task list.", aliases=["ls"])
registry.register(
    "done", cmd_done, help_text="Mark/unmark a task as done: /done N.", aliases=["toggle", "x"]
)
registry.register("rm", cmd_rm, help_text="Delete a task: /rm N.", aliases=["del", "delete"])
registry.register(
    "edit", cmd_edit, help_text="Edit a task: /edit N [new text].", aliases=["e"], maxsplit=1
)
registry.register("clear", cmd_clear, help_text="Delete all tasks (asks first).")
