from __future__ import annotations

from datetime import date, datetime, timezone

import pytest

from taskboard.app.domain.task import Task, TaskPriority, TaskStatus
from taskboard.app.models import TaskRow
from taskboard.app.services.task_service import TaskService
from taskboard.app.task_repo_utils import row_to_task, task_to_columns


def _task(title: str = "t", **fields) -> Task:
    fields.setdefault("status", TaskStatus.TODO)
    fields.setdefault("created_at", datetime(2026, 5, 1, 9, 30, tzinfo=timezone.utc))
    return Task(title=title, **fields)


def test_insert_assigns_id_and_round_trips(sql_repo) -> None:
    stored = sql_repo.insert(
        _task(
            "report",
            description="q3",
            priority=TaskPriority.MEDIUM,
            due_date=date(2026, 6, 1),
        )
    )
    assert stored.id is not None

    fetched = sql_repo.get(stored.id)
    assert fetched == stored
    assert fetched.status is TaskStatus.TODO
    assert fetched.priority is TaskPriority.MEDIUM
    assert fetched.created_at == datetime(2026, 5, 1, 9, 30, tzinfo=timezone.utc)
    assert fetched.created_at.tzinfo is not None


def test_get_missing_returns_none(sql_repo) -> None:
    assert sql_repo.get(1) is None


def test_update_keeps_created_at_even_if_task_carries_another(sql_repo) -> None:
    stored = sql_repo.insert(_task())
    tampered = _task(
        "renamed",
        id=stored.id,
        status=TaskStatus.DONE,
        created_at=datetime(1999, 1, 1, tzinfo=timezone.utc),
    )

    updated = sql_repo.update(tampered)

    assert updated.title == "renamed"
    assert updated.status is TaskStatus.DONE
    assert updated.created_at == stored.created_at


def test_update_missing_row_raises(sql_repo) -> None:
    with pytest.raises(LookupError):
        sql_repo.update(_task(id=404))


def test_delete_and_list_order(sql_repo) -> None:
    first = sql_repo.insert(_task("a"))
    second = sql_repo.insert(_task("b"))
    third = sql_repo.insert(_task("c"))

    assert sql_repo.delete(second.id) is True
    assert sql_repo.delete(second.id) is False
    assert [t.id for t in sql_repo.list_all()] == [first.id, third.id]


def test_deleted_ids_are_not_reused(sql_repo) -> None:
    sql_repo.insert(_task("a"))
    last = sql_repo.insert(_task("b"))
    sql_repo.delete(last.id)

    again = sql_repo.insert(_task("c"))
    assert again.id > last.id


def test_service_over_sql_store(sql_repo) -> None:
    from taskboard.app.schemas import TaskInput

    service = TaskService(sql_repo)
    created = service.create_task(TaskInput(title="x", status=TaskStatus.TODO, priority=TaskPriority.HIGH))
    service.create_task(TaskInput(title="y", status=TaskStatus.DONE))

    assert [t.id for t in service.list_tasks(priority=TaskPriority.HIGH)] == [created.id]
    updated = service.update_task(created.id, TaskInput(title="x2", status=TaskStatus.DONE))
    assert updated.created_at == created.created_at
    assert len(service.list_tasks(status=TaskStatus.DONE)) == 2


def test_row_mapping_is_explicit() -> None:
    task = _task("map me", id=3, priority=TaskPriority.LOW, due_date=date(2026, 2, 2))
    columns = task_to_columns(task)

    assert "id" not in columns
    assert columns["status"] == "TODO"
    assert columns["priority"] == "LOW"

    row = TaskRow(id=3, **columns)
    assert row_to_task(row) == task


def test_naive_timestamps_are_read_as_utc() -> None:
    row = TaskRow(id=1, title="t", status="DONE", created_at=datetime(2026, 1, 1, 12, 0))
    assert row_to_task(row).created_at == datetime(2026, 1, 1, 12, 0, tzinfo=timezone.utc)
