"""Explicit mapping between the Task record and its SQL row."""

from __future__ import annotations

from datetime import datetime, timezone
from typing import Any, Dict, Optional

from taskboard.app.domain.task import Task, TaskPriority, TaskStatus
from taskboard.app.models import TaskRow


def _as_utc(value: datetime) -> datetime:
    # SQLite drops tzinfo on the way back; stored values are always UTC.
    if value.tzinfo is None:
        return value.replace(tzinfo=timezone.utc)
    return value.astimezone(timezone.utc)


def _enum_value(value: Any) -> Optional[str]:
    if value is None:
        return None
    return getattr(value, "value", str(value))


def task_to_columns(task: Task) -> Dict[str, Any]:
    """Column values for ``task``, excluding the store-assigned id."""

    return {
        "title": task.title,
        "description": task.description,
        "status": _enum_value(task.status),
        "priority": _enum_value(task.priority),
        "due_date": task.due_date,
        "created_at": task.created_at,
    }


def row_to_task(row: TaskRow) -> Task:
    return Task(
        id=row.id,
        title=row.title,
        description=row.description,
        status=TaskStatus(row.status),
        priority=TaskPriority(row.priority) if row.priority else None,
        due_date=row.due_date,
        created_at=_as_utc(row.created_at),
    )


def apply_task_to_row(row: TaskRow, task: Task) -> TaskRow:
    """Copy mutable fields onto ``row``; id and created_at stay as stored."""

    columns = task_to_columns(task)
    columns.pop("created_at")
    for key, value in columns.items():
        setattr(row, key, value)
    return row
