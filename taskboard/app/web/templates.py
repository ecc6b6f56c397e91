from __future__ import annotations

from functools import lru_cache
from pathlib import Path

from fastapi.templating import Jinja2Templates

from taskboard.app.config import get_settings

TEMPLATES_DIR = Path(__file__).resolve().parents[1] / "templates"


@lru_cache()
def get_templates() -> Jinja2Templates:
    templates = Jinja2Templates(directory=str(TEMPLATES_DIR))
    settings = get_settings()
    templates.env.globals["app_title"] = settings.app_title
    templates.env.globals["api_base"] = "/api/tasks"
    templates.env.globals["status_labels"] = STATUS_LABELS
    templates.env.globals["priority_labels"] = PRIORITY_LABELS
    return templates


STATUS_LABELS = {"TODO": "To Do", "IN_PROGRESS": "In Progress", "DONE": "Done"}
PRIORITY_LABELS = {"LOW": "Low", "MEDIUM": "Medium", "HIGH": "High"}
