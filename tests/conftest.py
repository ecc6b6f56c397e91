from __future__ import annotations

import os

# Keep the test run off the on-disk SQLite default.
os.environ.setdefault("TASK_REPO_BACKEND", "memory")

from datetime import date
from pathlib import Path

import pytest
from fastapi.testclient import TestClient
from sqlalchemy.orm import sessionmaker

from taskboard.adapters.task_repository_memory import InMemoryTaskRepository
from taskboard.adapters.task_repository_sql import SQLAlchemyTaskRepository
from taskboard.app.db import init_schema, make_engine
from taskboard.app.deps import get_task_repository
from taskboard.app.domain.task import TaskPriority, TaskStatus
from taskboard.app.schemas import TaskInput
from taskboard.app.services.task_service import TaskService


@pytest.fixture()
def repo() -> InMemoryTaskRepository:
    return InMemoryTaskRepository()


@pytest.fixture()
def service(repo: InMemoryTaskRepository) -> TaskService:
    return TaskService(repo)


@pytest.fixture()
def sql_session(tmp_path: Path):
    engine = make_engine(f"sqlite:///{tmp_path / 'tasks.db'}")
    init_schema(engine)
    session = sessionmaker(autocommit=False, autoflush=False, bind=engine)()
    try:
        yield session
    finally:
        session.close()
        engine.dispose()


@pytest.fixture()
def sql_repo(sql_session) -> SQLAlchemyTaskRepository:
    return SQLAlchemyTaskRepository(sql_session)


@pytest.fixture()
def client(repo: InMemoryTaskRepository):
    from taskboard.app.main import app

    app.dependency_overrides[get_task_repository] = lambda: repo
    try:
        yield TestClient(app)
    finally:
        app.dependency_overrides.clear()


def _make_input(
    title: str = "Buy milk",
    status: TaskStatus = TaskStatus.TODO,
    description: str | None = None,
    priority: TaskPriority | None = None,
    due_date: date | None = None,
) -> TaskInput:
    return TaskInput(
        title=title,
        status=status,
        description=description,
        priority=priority,
        due_date=due_date,
    )


@pytest.fixture()
def make_input():
    return _make_input

