# src/todo_keeper/core/ports.py

from __future__ import annotations

"""
Ports (interfaces) used by the core.

The task store depends on Protocols instead of concrete implementations.
This keeps the storage backend and the confirmation UI swappable and makes
testing easier.
"""

from typing import Protocol


class KeyValueStorage(Protocol):
    """
    Synchronous string key-value slot store (localStorage-like).

    get_item returns None when the key is absent.
    """

    def get_item(self, key: str) -> str | None: ...
    def set_item(self, key: str, value: str) -> None: ...
    def remove_item(self, key: str) -> None: ...


class ConfirmPrompt(Protocol):
    """Ask the user a yes/no question; True means accepted."""

    def __call__(self, message: str) -> bool: ...
