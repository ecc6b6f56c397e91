"""In-process task repository for tests and throwaway runs."""

from __future__ import annotations

import itertools
from dataclasses import replace
from typing import Dict, Optional

from taskboard.app.domain.task import Task
from taskboard.ports.task_repository import ITaskRepository


class InMemoryTaskRepository(ITaskRepository):
    """Task repository held in a dict; ids come from a counter and are never reused."""

    def __init__(self) -> None:
        self._tasks: Dict[int, Task] = {}
        self._ids = itertools.count(1)

    def insert(self, task: Task) -> Task:
        stored = task.with_id(next(self._ids))
        self._tasks[stored.id] = stored
        return replace(stored)

    def get(self, task_id: int) -> Optional[Task]:
        task = self._tasks.get(task_id)
        return replace(task) if task else None

    def update(self, task: Task) -> Task:
        current = self._tasks.get(task.id)
        if current is None:
            raise LookupError(f"no task with id={task.id}")
        stored = replace(task, created_at=current.created_at)
        self._tasks[task.id] = stored
        return replace(stored)

    def delete(self, task_id: int) -> bool:
        return self._tasks.pop(task_id, None) is not None

    def list_all(self) -> list[Task]:
        return [replace(t) for t in sorted(self._tasks.values(), key=lambda t: t.id)]
