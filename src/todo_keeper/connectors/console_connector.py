# src/todo_keeper/connectors/console_connector.py

from __future__ import annotations

import logging
import shutil
from collections.abc import Callable

from ..cli.commands import registry as command_registry
from ..core.state import AppState

logger = logging.getLogger(__name__)

ReadLine = Callable[[str], str]
Write = Callable[[str], None]

YES_ANSWERS = {"y", "yes"}


def _terminal_columns() -> int:
    return shutil.get_terminal_size(fallback=(80, 24)).columns


def make_console_confirm(read_line: ReadLine, write: Write) -> Callable[[str], bool]:
    """Yes/no prompt on the console. Anything but y/yes (including EOF) is a no."""

    def confirm(message: str) -> bool:
        try:
            answer = read_line(f"{message} [y/N] ")
        except (EOFError, KeyboardInterrupt):
            write("")
            return False
        return answer.strip().lower() in YES_ANSWERS

    return confirm


def _render(state: AppState, write: Write, columns: int) -> None:
    for line in state.view.render(columns):
        write(line)


def _read_edit_line(state: AppState, read_line: ReadLine, write: Write) -> None:
    """
    The line after /edit N is the inline edit field.

    - non-blank line -> Enter: commit
    - blank line / EOF -> focus lost: blank draft reverts to the old text
    """
    view = state.view
    while view.is_editing:
        try:
            line = read_line("✎ ")
        except (EOFError, KeyboardInterrupt):
            write("")
            view.set_edit_draft("")
            view.blur_edit()
            return

        view.set_edit_draft(line)
        if not view.commit_edit():
            view.blur_edit()


def run_console_loop(
    state: AppState,
    read_line: ReadLine = input,
    write: Write = print,
    columns: Callable[[], int] = _terminal_columns,
) -> None:
    logger.info("Console connector started (tasks=%d).", state.task_store.total)
    write("[TODO] Type a task and press Enter. Use /help for commands. Use /exit to quit.\n")

    state.confirm = make_console_confirm(read_line, write)
    view = state.view

    # Width is re-read on every prompt, so a resized terminal picks a new placeholder.
    _render(state, write, columns())
    last_revision = state.task_store.revision

    def emit(text: str) -> None:
        write(text)

    while True:
        cols = columns()
        try:
            user_input = read_line(f"> {view.placeholder(cols)} ")
        except EOFError:
            logger.info("Console EOF received, exiting.")
            break
        except KeyboardInterrupt:
            logger.info("Console KeyboardInterrupt, exiting.")
            write("")
            break

        stripped = user_input.strip()
        if not stripped:
            continue

        if stripped.lower() in ("/exit", "/quit"):
            logger.info("Console exit command received.")
            break

        try:
            cmd_response = command_registry.handle(state, stripped, emit=emit)
            if cmd_response is None:
                view.set_draft(user_input)
                view.submit_draft()
            if view.is_editing:
                if cmd_response:
                    write(cmd_response)
                    cmd_response = ""
                _read_edit_line(state, read_line, write)
        except Exception:
            logger.exception("Command handler crashed.")
            cmd_response = "Internal error while handling the command."

        if cmd_response:
            write(cmd_response)

        if state.task_store.revision != last_revision:
            last_revision = state.task_store.revision
            _render(state, write, columns())

    logger.info("Console connector finished.")
