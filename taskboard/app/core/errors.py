from enum import Enum
from typing import Any


class ErrorKind(str, Enum):
    VALIDATION = "validation"
    NOT_FOUND = "not_found"
    UNEXPECTED = "unexpected"


# The single place where error kinds become HTTP status codes.
HTTP_STATUS_BY_KIND = {
    ErrorKind.VALIDATION: 400,
    ErrorKind.NOT_FOUND: 404,
    ErrorKind.UNEXPECTED: 500,
}

UNEXPECTED_MESSAGE = "An internal error occurred"


class TaskError(Exception):
    """Base class for errors the task service surfaces to callers.

    Subclasses set ``kind``; anything that is not a TaskError is unexpected.
    """

    kind: ErrorKind

    def __init__(self, message: str):
        super().__init__(message)
        self.message = message


class TaskValidationError(TaskError):
    """Raised when a task payload or filter fails field or enum checks."""

    kind = ErrorKind.VALIDATION


class TaskNotFoundError(TaskError):
    kind = ErrorKind.NOT_FOUND

    def __init__(self, task_id: Any):
        super().__init__(f"Task not found with id: {task_id}")
        self.task_id = task_id


def http_status_for(kind: ErrorKind) -> int:
    return HTTP_STATUS_BY_KIND[kind]
