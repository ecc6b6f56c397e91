from functools import lru_cache
from typing import List

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Environment-driven settings; each field reads the env var of the same name."""

    model_config = SettingsConfigDict(
        env_file=".env", case_sensitive=False, extra="ignore", populate_by_name=True
    )

    app_title: str = "Task Board"

    # Any SQLAlchemy URL; SQLite file in the working directory by default
    database_url: str = "sqlite:///./taskboard.db"

    # "sql" (default) or "memory"
    task_repo_backend: str = "sql"

    # JSON list in the environment, e.g. CORS_ALLOW_ORIGINS='["http://localhost:3000"]'
    cors_allow_origins: List[str] = Field(default_factory=lambda: ["*"])

    log_level: str = Field("INFO", validation_alias="APP_LOG_LEVEL")


@lru_cache()
def get_settings() -> Settings:
    return Settings()
