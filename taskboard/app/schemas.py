from datetime import date, datetime
from typing import Any, Iterable, Mapping, Optional

from pydantic import BaseModel, ConfigDict, Field, ValidationError, field_validator
from pydantic_core import PydanticCustomError

from taskboard.app.core.errors import TaskValidationError
from taskboard.app.domain.task import TaskPriority, TaskStatus

_REQUIRED_LABELS = {
    "title": "Title is required",
    "status": "Status is required",
}


class TaskInput(BaseModel):
    """Create/update payload. ``id`` and ``createdAt`` are server-owned and ignored."""

    model_config = ConfigDict(populate_by_name=True, extra="ignore")

    title: str
    description: Optional[str] = None
    status: TaskStatus
    priority: Optional[TaskPriority] = None
    due_date: Optional[date] = Field(default=None, alias="dueDate")

    @field_validator("title", mode="before")
    @classmethod
    def title_not_blank(cls, v: Any) -> Any:
        if v is None or (isinstance(v, str) and not v.strip()):
            raise PydanticCustomError("required", _REQUIRED_LABELS["title"])
        return v

    @field_validator("status", mode="before")
    @classmethod
    def status_present(cls, v: Any) -> Any:
        if v is None:
            raise PydanticCustomError("required", _REQUIRED_LABELS["status"])
        return v


class TaskOut(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    id: int
    title: str
    description: Optional[str] = None
    status: TaskStatus
    priority: Optional[TaskPriority] = None
    due_date: Optional[date] = Field(default=None, alias="dueDate")
    created_at: datetime = Field(alias="createdAt")


class ErrorResponse(BaseModel):
    message: str
    timestamp: datetime
    status: int


def _field_name(loc: Iterable[Any]) -> str:
    parts = [str(p) for p in loc if p not in ("body", "query", "path")]
    return parts[-1] if parts else "body"


def describe_validation_errors(errors: Iterable[Mapping[str, Any]]) -> str:
    """Render pydantic error dicts as ``field: message, field: message``."""

    messages = []
    for err in errors:
        field = _field_name(err.get("loc") or ())
        if err.get("type") == "json_invalid":
            messages.append("body: Malformed JSON request")
        elif err.get("type") == "missing":
            label = _REQUIRED_LABELS.get(field, f"{field.capitalize()} is required")
            messages.append(f"{field}: {label}")
        else:
            messages.append(f"{field}: {err.get('msg')}")
    return ", ".join(messages)


def parse_task_input(payload: Mapping[str, Any]) -> TaskInput:
    """Validate a raw mapping into a ``TaskInput`` or raise ``TaskValidationError``."""

    if not isinstance(payload, Mapping):
        raise TaskValidationError("body: Request body must be a JSON object")
    try:
        return TaskInput.model_validate(dict(payload))
    except ValidationError as exc:
        raise TaskValidationError(describe_validation_errors(exc.errors())) from exc
