"""Business rules for tasks: creation defaults, list filters and update semantics."""

from __future__ import annotations

import logging
from datetime import date, datetime, timezone
from typing import Callable, List, Optional

from taskboard.app.core.errors import TaskNotFoundError
from taskboard.app.domain.task import Task, TaskPriority, TaskStatus
from taskboard.app.schemas import TaskInput
from taskboard.ports.task_repository import ITaskRepository

logger = logging.getLogger(__name__)


def _utcnow() -> datetime:
    return datetime.now(timezone.utc)


def matches_filters(
    task: Task,
    status: Optional[TaskStatus] = None,
    priority: Optional[TaskPriority] = None,
    due_before: Optional[date] = None,
) -> bool:
    """True when ``task`` satisfies every supplied filter.

    A task without priority never matches a priority filter, and a task
    without due date never matches ``due_before``.
    """

    if status is not None and task.status != status:
        return False
    if priority is not None and task.priority != priority:
        return False
    if due_before is not None and (task.due_date is None or not task.due_date < due_before):
        return False
    return True


class TaskService:
    def __init__(self, repo: ITaskRepository, clock: Callable[[], datetime] = _utcnow):
        self.repo = repo
        self.clock = clock

    def create_task(self, payload: TaskInput) -> Task:
        task = Task(
            title=payload.title,
            description=payload.description,
            status=payload.status,
            priority=payload.priority,
            due_date=payload.due_date,
            created_at=self.clock(),
        )
        stored = self.repo.insert(task)
        logger.info("created", extra={"task_id": stored.id, "op": "create"})
        return stored

    def list_tasks(
        self,
        status: Optional[TaskStatus] = None,
        priority: Optional[TaskPriority] = None,
        due_before: Optional[date] = None,
    ) -> List[Task]:
        tasks = self.repo.list_all()
        if status is None and priority is None and due_before is None:
            return tasks
        return [t for t in tasks if matches_filters(t, status, priority, due_before)]

    def get_task(self, task_id: int) -> Task:
        task = self.repo.get(task_id)
        if task is None:
            raise TaskNotFoundError(task_id)
        return task

    def update_task(self, task_id: int, payload: TaskInput) -> Task:
        existing = self.get_task(task_id)
        updated = Task(
            id=existing.id,
            created_at=existing.created_at,
            title=payload.title,
            description=payload.description,
            status=payload.status,
            priority=payload.priority,
            due_date=payload.due_date,
        )
        stored = self.repo.update(updated)
        logger.info(
            "updated status=%s",
            stored.status.value,
            extra={"task_id": task_id, "op": "update"},
        )
        return stored

    def delete_task(self, task_id: int) -> None:
        self.get_task(task_id)
        self.repo.delete(task_id)
        logger.info("deleted", extra={"task_id": task_id, "op": "delete"})
