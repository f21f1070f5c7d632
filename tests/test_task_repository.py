# tests/test_task_repository.py

from __future__ import annotations

import itertools
import json

import pytest

from mytodo.storage.task_storage import STORAGE_KEY, TaskStorage
from mytodo.tasks.task_models import TaskValidationError, new_task_id
from mytodo.tasks.task_repository import TaskRepository

from .conftest import seed
from .fakes import FailingKeyValueStore, FakeKeyValueStore, FlakyKeyValueStore


def _ids(repo: TaskRepository) -> list[str]:
    return [t.id for t in repo.tasks]


def _stored(kv: FakeKeyValueStore) -> list[dict]:
    return json.loads(kv.data[STORAGE_KEY])


def test_add_inserts_at_front_with_fresh_id(repo: TaskRepository, kv: FakeKeyValueStore) -> None:
    first = repo.add("Buy milk", category="Home")
    second = repo.add("  Walk dog  ", due_date="2024-04-01", category="Home")

    assert len(repo) == 2
    assert repo.tasks[0] == second
    assert second.text == "Walk dog"
    assert second.due_date == "2024-04-01"
    assert second.completed is False
    assert second.note == ""
    assert first.id != second.id
    assert [t["text"] for t in _stored(kv)] == ["Walk dog", "Buy milk"]
    assert kv.write_count(STORAGE_KEY) == 2


@pytest.mark.parametrize("text", ["", "   ", "\t\n"])
def test_add_rejects_blank_text(repo: TaskRepository, kv: FakeKeyValueStore, text: str) -> None:
    repo.add("Existing", category="Home")
    with pytest.raises(TaskValidationError):
        repo.add(text, category="Home")
    assert len(repo) == 1
    assert kv.write_count(STORAGE_KEY) == 1


def test_add_regenerates_colliding_id(kv: FakeKeyValueStore) -> None:
    seed(kv, {"id": "dup", "text": "Old"})
    ids = iter(["dup", "dup", "fresh"])
    repo = TaskRepository(TaskStorage(kv), id_factory=lambda: next(ids))

    task = repo.add("New", category="Home")

    assert task.id == "fresh"
    assert _ids(repo) == ["fresh", "dup"]


def test_add_empty_due_date_means_none(repo: TaskRepository) -> None:
    task = repo.add("Walk dog", "", "Home")
    assert task.due_date is None


def test_generated_ids_are_unique() -> None:
    ids = {new_task_id() for _ in range(500)}
    assert len(ids) == 500


def test_toggle_twice_restores_flag_and_touches_only_target(kv: FakeKeyValueStore) -> None:
    seed(kv, {"id": "a", "text": "A"}, {"id": "b", "text": "B", "completed": True})
    repo = TaskRepository(TaskStorage(kv))

    assert repo.toggle_complete("a") is True
    assert repo.get("a").completed is True
    assert repo.get("b").completed is True

    repo.toggle_complete("a")
    assert repo.get("a").completed is False
    assert repo.get("b").completed is True
    assert kv.write_count(STORAGE_KEY) == 2


def test_unknown_ids_are_silent_noops(kv: FakeKeyValueStore) -> None:
    seed(kv, {"id": "a", "text": "A"})
    repo = TaskRepository(TaskStorage(kv))
    before = repo.tasks

    assert repo.toggle_complete("zzz") is False
    assert repo.set_note("zzz", "hi") is False
    assert repo.delete("zzz") is False
    assert repo.reorder("zzz", "a") is False
    assert repo.reorder("a", "zzz") is False

    assert repo.tasks == before
    assert kv.write_count(STORAGE_KEY) == 0


def test_set_note_trims_and_empty_clears(repo: TaskRepository) -> None:
    task = repo.add("Call mum", category="Personal")

    repo.set_note(task.id, "  after 6pm  ")
    assert repo.get(task.id).note == "after 6pm"

    repo.set_note(task.id, "   ")
    assert repo.get(task.id).note == ""


def test_delete_removes_only_target(repo: TaskRepository, kv: FakeKeyValueStore) -> None:
    a = repo.add("A", category="Home")
    b = repo.add("B", category="Home")

    assert repo.delete(a.id) is True
    assert _ids(repo) == [b.id]
    assert [t["id"] for t in _stored(kv)] == [b.id]


def test_clear_all_empties_list_and_store(repo: TaskRepository, kv: FakeKeyValueStore) -> None:
    repo.add("A", category="Home")
    repo.add("B", category="Work")

    repo.clear_all()

    assert repo.tasks == ()
    assert _stored(kv) == []
    assert TaskRepository(TaskStorage(kv)).tasks == ()


def test_clear_all_on_empty_list_still_persists(repo: TaskRepository, kv: FakeKeyValueStore) -> None:
    repo.clear_all()
    assert kv.write_count(STORAGE_KEY) == 1
    assert _stored(kv) == []


@pytest.mark.parametrize(
    ("source", "dest", "expected"),
    [
        # moving up: lands immediately before dest
        ("d", "b", ["a", "d", "b", "c"]),
        # moving down: also lands immediately before dest
        ("a", "c", ["b", "a", "c", "d"]),
        ("a", "b", ["a", "b", "c", "d"]),
        ("d", "a", ["d", "a", "b", "c"]),
    ],
)
def test_reorder_inserts_before_destination(
    kv: FakeKeyValueStore, source: str, dest: str, expected: list[str]
) -> None:
    seed(kv, *({"id": i, "text": i.upper()} for i in "abcd"))
    repo = TaskRepository(TaskStorage(kv))

    assert repo.reorder(source, dest) is True

    assert _ids(repo) == expected
    assert [t["id"] for t in _stored(kv)] == expected
    assert kv.write_count(STORAGE_KEY) == 1


def test_reorder_keeps_every_task_once(kv: FakeKeyValueStore) -> None:
    seed(kv, *({"id": i, "text": i} for i in "abcde"))
    repo = TaskRepository(TaskStorage(kv))

    for src, dest in itertools.permutations("abcde", 2):
        repo.reorder(src, dest)
        assert sorted(_ids(repo)) == list("abcde")


def test_scenario_reorder_same_id_then_add(kv: FakeKeyValueStore) -> None:
    seed(kv, {"id": "a", "text": "Buy milk", "category": "Home", "completed": False})
    repo = TaskRepository(TaskStorage(kv))

    assert repo.reorder("a", "a") is False
    assert [t.text for t in repo.tasks] == ["Buy milk"]
    assert kv.write_count(STORAGE_KEY) == 0

    repo.add("Walk dog", "", "Home")
    assert [t.text for t in repo.tasks] == ["Walk dog", "Buy milk"]


def test_persist_then_reload_reproduces_list(repo: TaskRepository, kv: FakeKeyValueStore) -> None:
    a = repo.add("A", due_date="2024-01-02", category="Work")
    repo.add("B", category="Home", note="with note")
    c = repo.add("C", category="Home")
    repo.toggle_complete(a.id)
    repo.reorder(a.id, c.id)

    reloaded = TaskRepository(TaskStorage(kv))

    assert reloaded.tasks == repo.tasks


def test_write_failure_propagates() -> None:
    repo = TaskRepository(TaskStorage(FailingKeyValueStore()))
    with pytest.raises(OSError):
        repo.add("A", category="Home")
    assert len(repo) == 0


@pytest.mark.parametrize(
    "mutate",
    [
        lambda repo, ids: repo.add("C", category="Home"),
        lambda repo, ids: repo.toggle_complete(ids[0]),
        lambda repo, ids: repo.set_note(ids[0], "changed"),
        lambda repo, ids: repo.delete(ids[1]),
        lambda repo, ids: repo.reorder(ids[1], ids[0]),
        lambda repo, ids: repo.clear_all(),
    ],
    ids=["add", "toggle", "note", "delete", "reorder", "clear"],
)
def test_failed_write_leaves_memory_matching_store(mutate) -> None:
    kv = FlakyKeyValueStore()
    repo = TaskRepository(TaskStorage(kv))
    repo.add("A", category="Home")
    repo.add("B", category="Home")
    before = repo.tasks

    kv.fail_next()
    with pytest.raises(OSError):
        mutate(repo, _ids(repo))

    assert repo.tasks == before
    assert [r["id"] for r in _stored(kv)] == _ids(repo)
    assert [r["completed"] for r in _stored(kv)] == [False, False]
    assert [r["note"] for r in _stored(kv)] == ["", ""]

    # The store recovered; the next mutation goes through normally.
    repo.toggle_complete(_ids(repo)[0])
    assert _stored(kv)[0]["completed"] is True
