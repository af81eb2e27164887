# config.example.py

"""
Documentation-only module (safe to commit).

The real configuration is loaded from environment variables (optionally via a local .env file).
This file exists to make the repo self-documenting even without opening .env.example.
"""

ENV_VARS = {
    # App / logging
    "TODO_APP_NAME": "App display name (default: todo).",
    "TODO_LOG_LEVEL": "Console logging level (default: INFO). The log file always gets DEBUG.",
    # Paths (gitignored)
    "TODO_DATA_DIR": "Local data directory for storage and todo.log (default: .local/todo).",
    "TODO_STORAGE_PATH": "Key-value SQLite path (default: <data_dir>/storage.sqlite3).",
    # Persistence
    "TODO_STORAGE_KEY": "Key holding the task list (default: todo_tasks).",
    "TODO_STORAGE_BACKEND": "sqlite (default) or memory (nothing survives a restart).",
    # UI
    "TODO_CONFIRM_CLEAR": "Ask before /clear deletes all tasks (true/false, default: true).",
}
