"""Task API and HTML routers."""

from datetime import date
from typing import Any, List, Optional

from fastapi import APIRouter, Body, Depends, Path, Query, Request
from fastapi.responses import HTMLResponse, Response

from taskboard.app.deps import get_task_service
from taskboard.app.domain.task import Task, TaskPriority, TaskStatus
from taskboard.app.schemas import ErrorResponse, TaskOut, parse_task_input
from taskboard.app.services.task_service import TaskService
from taskboard.app.web.templates import get_templates

pages_router = APIRouter()
api_router = APIRouter(prefix="/api", tags=["tasks"])
templates = get_templates()

# Largest id a 64-bit INTEGER column can hold
MAX_TASK_ID = 2**63 - 1

_ERROR_RESPONSES = {
    400: {"model": ErrorResponse, "description": "Invalid payload or filter"},
    404: {"model": ErrorResponse, "description": "Task not found"},
}


def _to_out(task: Task) -> TaskOut:
    return TaskOut(
        id=task.id,
        title=task.title,
        description=task.description,
        status=task.status,
        priority=task.priority,
        due_date=task.due_date,
        created_at=task.created_at,
    )


@pages_router.get("/", response_class=HTMLResponse)
async def tasks_page(request: Request):
    """Render the task board page; the script talks to the JSON API."""

    return templates.TemplateResponse(request, "tasks.html", {})


@api_router.post(
    "/tasks",
    response_model=TaskOut,
    status_code=201,
    responses={400: _ERROR_RESPONSES[400]},
)
def create_task(payload: Any = Body(...), service: TaskService = Depends(get_task_service)):
    """Create a task; id and createdAt are assigned here."""

    return _to_out(service.create_task(parse_task_input(payload)))


@api_router.get("/tasks", response_model=List[TaskOut], responses={400: _ERROR_RESPONSES[400]})
def list_tasks(
    status: Optional[TaskStatus] = Query(default=None),
    priority: Optional[TaskPriority] = Query(default=None),
    due_before: Optional[date] = Query(default=None, alias="dueBefore"),
    service: TaskService = Depends(get_task_service),
):
    """List tasks, narrowed by any combination of status, priority and dueBefore."""

    tasks = service.list_tasks(status=status, priority=priority, due_before=due_before)
    return [_to_out(t) for t in tasks]


@api_router.get("/tasks/{task_id}", response_model=TaskOut, responses=_ERROR_RESPONSES)
def get_task(
    task_id: int = Path(..., ge=1, le=MAX_TASK_ID),
    service: TaskService = Depends(get_task_service),
):
    return _to_out(service.get_task(task_id))


@api_router.put("/tasks/{task_id}", response_model=TaskOut, responses=_ERROR_RESPONSES)
def update_task(
    task_id: int = Path(..., ge=1, le=MAX_TASK_ID),
    payload: Any = Body(...),
    service: TaskService = Depends(get_task_service),
):
    """Replace every mutable field of a task; id and createdAt are kept."""

    return _to_out(service.update_task(task_id, parse_task_input(payload)))


@api_router.delete(
    "/tasks/{task_id}",
    status_code=204,
    response_class=Response,
    responses={404: _ERROR_RESPONSES[404]},
)
def delete_task(
    task_id: int = Path(..., ge=1, le=MAX_TASK_ID),
    service: TaskService = Depends(get_task_service),
):
    service.delete_task(task_id)
    return Response(status_code=204)


__all__ = ["api_router", "pages_router"]
