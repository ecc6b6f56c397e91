"""Dependency providers wiring the task repository and service into routes."""

from __future__ import annotations

import logging
from functools import lru_cache
from typing import Iterator

from fastapi import Depends

from taskboard.adapters.task_repository_memory import InMemoryTaskRepository
from taskboard.adapters.task_repository_sql import SQLAlchemyTaskRepository
from taskboard.app.config import get_settings
from taskboard.app.db import SessionLocal
from taskboard.app.services.task_service import TaskService
from taskboard.ports.task_repository import ITaskRepository

logger = logging.getLogger(__name__)


def repo_backend() -> str:
    return (get_settings().task_repo_backend or "sql").lower()


@lru_cache()
def _memory_repository() -> InMemoryTaskRepository:
    logger.info("TaskRepository backend=memory")
    return InMemoryTaskRepository()


def get_task_repository() -> Iterator[ITaskRepository]:
    """Yield the repository for one request; SQL sessions are closed afterwards."""
    if repo_backend() == "memory":
        yield _memory_repository()
        return

    session = SessionLocal()
    try:
        yield SQLAlchemyTaskRepository(session)
    finally:
        session.close()


def get_task_service(repo: ITaskRepository = Depends(get_task_repository)) -> TaskService:
    return TaskService(repo)
