# tests/test_task_api.py

from __future__ import annotations

from tasktrail.core.actions import CompleteAction, RemoveAction
from tasktrail.core.history import UndoStatus
from tasktrail.tasks import task_api
from tasktrail.tasks.task_models import CompleteStatus, TaskSnapshot


def test_add_then_undo_restores_store_and_next_id(state) -> None:
    task_api.add_task(state, "keep")
    before = task_api.list_tasks(state)
    next_id = state.task_store.next_id

    task_api.add_task(state, "drop")
    outcome = task_api.undo_last(state)

    assert outcome.applied
    assert task_api.list_tasks(state) == before
    # the counter is not rolled back
    assert state.task_store.next_id == next_id + 1


def test_complete_records_only_real_changes(state) -> None:
    tid = task_api.add_task(state, "a")
    assert len(state.history) == 1

    assert task_api.complete_task(state, tid).status is CompleteStatus.TOGGLED
    assert state.history.peek() == CompleteAction(tid, False)
    assert len(state.history) == 2

    assert task_api.complete_task(state, tid).status is CompleteStatus.ALREADY_COMPLETED
    assert task_api.complete_task(state, 99).status is CompleteStatus.NOT_FOUND
    assert len(state.history) == 2

    task_api.undo_last(state)
    assert state.task_store.get(tid).completed is False


def test_remove_then_undo_restores_task(state) -> None:
    tid = task_api.add_task(state, "pay bills")
    task_api.complete_task(state, tid)

    result = task_api.remove_task(state, tid)
    assert result.removed == TaskSnapshot(tid, "pay bills", True)
    assert state.history.peek() == RemoveAction(tid, "pay bills", True)

    assert not task_api.remove_task(state, tid).found
    assert len(state.history) == 3

    task_api.undo_last(state)
    assert state.task_store.get(tid) == TaskSnapshot(tid, "pay bills", True)


def test_walkthrough_scenario(state) -> None:
    assert task_api.add_task(state, "buy milk") == 1
    assert task_api.add_task(state, "pay bills") == 2

    assert task_api.complete_task(state, 1).toggled
    assert state.task_store.get(1).completed is True

    assert task_api.remove_task(state, 2).removed == TaskSnapshot(2, "pay bills", False)

    task_api.undo_last(state)
    assert task_api.list_tasks(state)[-1] == TaskSnapshot(2, "pay bills", False)

    task_api.undo_last(state)
    assert task_api.list_tasks(state) == [
        TaskSnapshot(1, "buy milk", False),
        TaskSnapshot(2, "pay bills", False),
    ]


def test_undo_of_remove_never_collides_with_new_ids(state) -> None:
    task_api.add_task(state, "one")
    task_api.add_task(state, "two")
    task_api.remove_task(state, 2)
    new_id = task_api.add_task(state, "new")
    assert new_id == 3

    # undo "add new", then undo "remove 2"
    task_api.undo_last(state)
    outcome = task_api.undo_last(state)
    assert outcome.status is UndoStatus.APPLIED
    assert state.task_store.get(2) == TaskSnapshot(2, "two", False)
    assert state.task_store.next_id > 2
    assert state.task_store.next_id > new_id
    assert task_api.add_task(state, "later") == 4


def test_undo_with_empty_history(state) -> None:
    outcome = task_api.undo_last(state)
    assert outcome.status is UndoStatus.NOTHING_TO_UNDO
    assert task_api.list_tasks(state) == []
