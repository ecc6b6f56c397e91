from typing import List, Optional

from sqlalchemy.orm import Session

from taskboard.app.domain.task import Task
from taskboard.app.models import TaskRow
from taskboard.app.task_repo_utils import apply_task_to_row, row_to_task, task_to_columns
from taskboard.ports.task_repository import ITaskRepository


class SQLAlchemyTaskRepository(ITaskRepository):
    def __init__(self, session: Session):
        self.session = session

    def _row(self, task_id: int) -> Optional[TaskRow]:
        return self.session.query(TaskRow).filter(TaskRow.id == task_id).first()

    def insert(self, task: Task) -> Task:
        row = TaskRow(**task_to_columns(task))
        self.session.add(row)
        self.session.commit()
        self.session.refresh(row)
        return row_to_task(row)

    def get(self, task_id: int) -> Optional[Task]:
        row = self._row(task_id)
        return row_to_task(row) if row else None

    def update(self, task: Task) -> Task:
        row = self._row(task.id)
        if row is None:
            raise LookupError(f"no task row with id={task.id}")
        apply_task_to_row(row, task)
        self.session.commit()
        self.session.refresh(row)
        return row_to_task(row)

    def delete(self, task_id: int) -> bool:
        row = self._row(task_id)
        if row is None:
            return False
        self.session.delete(row)
        self.session.commit()
        return True

    def list_all(self) -> List[Task]:
        rows = self.session.query(TaskRow).order_by(TaskRow.id.asc()).all()
        return [row_to_task(row) for row in rows]
