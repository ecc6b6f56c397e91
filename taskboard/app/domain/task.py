"""Task record and its closed enumerations."""

from __future__ import annotations

from dataclasses import dataclass, replace
from datetime import date, datetime
from enum import Enum
from typing import Optional


class TaskStatus(str, Enum):
    TODO = "TODO"
    IN_PROGRESS = "IN_PROGRESS"
    DONE = "DONE"


class TaskPriority(str, Enum):
    LOW = "LOW"
    MEDIUM = "MEDIUM"
    HIGH = "HIGH"


@dataclass
class Task:
    """A stored task.

    ``id`` is None until the store assigns one on insertion. ``id`` and
    ``created_at`` never change after that.
    """

    title: str
    status: TaskStatus
    created_at: datetime
    description: Optional[str] = None
    priority: Optional[TaskPriority] = None
    due_date: Optional[date] = None
    id: Optional[int] = None

    def with_id(self, task_id: int) -> Task:
        return replace(self, id=task_id)
