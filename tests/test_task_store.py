# tests/test_task_store.py

from __future__ import annotations

import json
import threading

from todo_keeper.tasks.task_storage import TaskStorage
from todo_keeper.tasks.task_store import CLEAR_ALL_PROMPT, TaskStore

from .fakes import RecordingStorage, ScriptedConfirm


def _saved(storage: RecordingStorage) -> list[dict]:
    return json.loads(storage.items["todo_tasks"])


def test_add_trims_and_assigns_unique_ids(store: TaskStore, storage: RecordingStorage) -> None:
    texts = ["Buy milk", "  walk dog ", "", "   ", "call mom"]
    for t in texts:
        store.add(t)

    tasks = store.tasks
    assert [t.text for t in tasks] == ["Buy milk", "walk dog", "call mom"]
    assert len({t.id for t in tasks}) == 3
    assert all(t.completed is False for t in tasks)
    assert _saved(storage) == [t.to_dict() for t in tasks]


def test_add_blank_is_noop(store: TaskStore, storage: RecordingStorage) -> None:
    assert store.add("") is None
    assert store.add("   ") is None
    assert store.tasks == []
    assert storage.writes == []


def test_buy_milk_scenario(store: TaskStore) -> None:
    store.add("Buy milk")
    [task] = store.tasks
    assert task.text == "Buy milk"
    assert task.completed is False
    assert store.total == 1
    assert store.completed_count == 0


def test_toggle_twice_restores_value(store: TaskStore) -> None:
    a = store.add("A")
    b = store.add("B")
    assert a is not None and b is not None

    store.toggle(a.id)
    assert store.total == 2
    assert store.completed_count == 1

    store.toggle(a.id)
    assert store.get(a.id).completed is False
    assert store.completed_count == 0


def test_unknown_ids_are_noops(store: TaskStore, storage: RecordingStorage) -> None:
    store.add("A")
    writes = len(storage.writes)

    assert store.toggle(999) is None
    assert store.delete(999) is False
    assert store.edit(999, "x") is None
    assert len(storage.writes) == writes


def test_delete_twice(store: TaskStore) -> None:
    a = store.add("A")
    store.add("B")
    assert store.delete(a.id) is True
    before = store.tasks
    assert store.delete(a.id) is False
    assert store.tasks == before


def test_edit_rules(store: TaskStore, storage: RecordingStorage) -> None:
    a = store.add("old")
    writes = len(storage.writes)

    assert store.edit(a.id, "").text == "old"
    assert store.edit(a.id, "   ").text == "old"
    assert store.edit(a.id, " old ").text == "old"
    assert len(storage.writes) == writes

    assert store.edit(a.id, "  new  ").text == "new"
    assert _saved(storage)[0]["text"] == "new"


def test_clear_all_needs_confirmation(store: TaskStore, storage: RecordingStorage) -> None:
    store.add("A")
    store.add("B")

    declined = ScriptedConfirm(False)
    assert store.clear_all(declined) is False
    assert store.total == 2
    assert declined.asked == [CLEAR_ALL_PROMPT]

    assert store.clear_all(ScriptedConfirm(True)) is True
    assert store.tasks == []
    assert "todo_tasks" not in storage.items
    assert storage.removes == ["todo_tasks"]

    reloaded = TaskStore(TaskStorage(storage))
    assert reloaded.load() == []


def test_ids_keep_growing_after_reload(storage: RecordingStorage) -> None:
    first = TaskStore(TaskStorage(storage))
    first.load()
    a = first.add("A")
    b = first.add("B")
    first.delete(b.id)

    second = TaskStore(TaskStorage(storage))
    second.load()
    c = second.add("C")
    assert c.id > a.id
    assert len({t.id for t in second.tasks}) == 2


def test_no_writes_before_load() -> None:
    storage = RecordingStorage({"todo_tasks": json.dumps([{"id": 7, "text": "saved", "completed": True}])})
    store = TaskStore(TaskStorage(storage))

    store.add("early")
    assert storage.writes == []
    assert store.is_loaded is False

    loaded = store.load()
    assert [t.text for t in loaded] == ["saved"]
    assert json.loads(storage.items["todo_tasks"])[0]["text"] == "saved"

    new = store.add("later")
    assert new.id == 8
    assert len(storage.writes) == 1


def test_load_is_only_done_once(storage: RecordingStorage) -> None:
    store = TaskStore(TaskStorage(storage))
    store.load()
    store.add("A")
    storage.items["todo_tasks"] = "[]"
    assert [t.text for t in store.load()] == ["A"]


def test_snapshot_is_detached(store: TaskStore) -> None:
    a = store.add("A")
    snapshot = store.tasks
    snapshot[0].text = "hacked"
    snapshot.clear()
    assert store.get(a.id).text == "A"


def test_write_failure_keeps_memory_state(store: TaskStore, storage: RecordingStorage) -> None:
    storage.fail_writes = True
    task = store.add("A")
    assert task is not None
    assert [t.text for t in store.tasks] == ["A"]


def test_revision_tracks_changes(store: TaskStore) -> None:
    rev = store.revision
    store.add("")
    assert store.revision == rev
    a = store.add("A")
    assert store.revision == rev + 1
    store.edit(a.id, "A")
    assert store.revision == rev + 1
    store.toggle(a.id)
    assert store.revision == rev + 2


def test_concurrent_adds_keep_ids_unique(store: TaskStore, storage: RecordingStorage) -> None:
    def worker(n: int) -> None:
        for i in range(200):
            store.add(f"task {n}-{i}")

    threads = [threading.Thread(target=worker, args=(n,)) for n in range(8)]
    for t in threads:
        t.start()
    for t in threads:
        t.join()

    tasks = store.tasks
    assert len(tasks) == 1600
    assert len({t.id for t in tasks}) == 1600
    assert TaskStorage.decode(storage.items["todo_tasks"]) == tasks
