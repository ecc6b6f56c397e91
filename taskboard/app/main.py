import logging
from datetime import datetime, timezone
from pathlib import Path

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from fastapi.staticfiles import StaticFiles

from taskboard.app.config import get_settings
from taskboard.app.core.errors import (
    UNEXPECTED_MESSAGE,
    ErrorKind,
    TaskError,
    http_status_for,
)
from taskboard.app.core.logging_config import configure_logging
from taskboard.app.db import init_schema
from taskboard.app.deps import repo_backend
from taskboard.app.routers import tasks as tasks_router
from taskboard.app.schemas import ErrorResponse, describe_validation_errors

BASE_DIR = Path(__file__).resolve().parent
STATIC_DIR = BASE_DIR / "static"

settings = get_settings()
configure_logging(settings.log_level)
logger = logging.getLogger(__name__)

app = FastAPI(title=settings.app_title, version="1.0.0", docs_url="/docs", redoc_url=None)

app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.cors_allow_origins or ["*"],
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)
app.mount("/static", StaticFiles(directory=str(STATIC_DIR)), name="static")


def error_response(kind: ErrorKind, message: str) -> JSONResponse:
    status = http_status_for(kind)
    body = ErrorResponse(message=message, timestamp=datetime.now(timezone.utc), status=status)
    return JSONResponse(status_code=status, content=body.model_dump(mode="json"))


@app.exception_handler(TaskError)
async def handle_task_error(_request: Request, exc: TaskError) -> JSONResponse:
    return error_response(exc.kind, exc.message)


@app.exception_handler(RequestValidationError)
async def handle_request_validation(_request: Request, exc: RequestValidationError) -> JSONResponse:
    return error_response(ErrorKind.VALIDATION, describe_validation_errors(exc.errors()))


@app.exception_handler(Exception)
async def handle_unexpected(request: Request, exc: Exception) -> JSONResponse:
    logger.exception("unhandled error on %s %s", request.method, request.url.path)
    return error_response(ErrorKind.UNEXPECTED, UNEXPECTED_MESSAGE)


@app.on_event("startup")
def on_startup() -> None:
    # Initialize database schema on boot (safe no-op if tables already exist)
    if repo_backend() == "sql":
        init_schema()


app.include_router(tasks_router.pages_router)
app.include_router(tasks_router.api_router)


@app.get("/healthz")
async def healthz() -> dict:
    return {"status": "ok"}


if __name__ == "__main__":
    import uvicorn

    uvicorn.run("taskboard.app.main:app", host="0.0.0.0", port=8000)
