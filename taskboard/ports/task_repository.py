"""Port interface for task persistence (repository boundary)."""

from __future__ import annotations

from typing import Optional, Protocol, runtime_checkable

from taskboard.app.domain.task import Task


@runtime_checkable
class ITaskRepository(Protocol):
    """Keyed collection of Task records."""

    def insert(self, task: Task) -> Task:
        """Persist a new task, assign its id and return the stored task."""

    def get(self, task_id: int) -> Optional[Task]:
        """Return a task by id or None when missing."""

    def update(self, task: Task) -> Task:
        """Overwrite the mutable fields of an existing task and return it."""

    def delete(self, task_id: int) -> bool:
        """Remove a task; return False when there was nothing to remove."""

    def list_all(self) -> list[Task]:
        """Return every task in ascending id order."""
