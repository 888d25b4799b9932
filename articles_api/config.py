from pathlib import Path

from pydantic_settings import BaseSettings
from functools import lru_cache

_PROJECT_DIR = Path(__file__).resolve().parents[1]
_ENV_FILES = (
    _PROJECT_DIR / ".env",
    ".env",
)


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    app_title: str = "Articles API"
    app_version: str = "0.1.0"
    app_env: str = "development"
    database_url: str = "sqlite:///./articles.db"
    database_echo: bool = False
    cors_origins: list[str] = ["http://localhost:3000"]

    # Routing: existing clients call <prefix>/list, <prefix>/detail/{id}, ...
    api_prefix: str = "/api/article"

    # Paging
    default_page_size: int = 10
    max_page_size: int = 100

    # Logging — per-category log levels (DEBUG, INFO, WARNING, ERROR, CRITICAL)
    log_level: str = "INFO"                  # Root / app-wide
    log_level_sql: str = "WARNING"           # sqlalchemy.engine — SQL queries
    log_level_uvicorn: str = "INFO"          # uvicorn.access / uvicorn.error
    log_level_articles: str = "INFO"         # Article services

    model_config = {
        "env_file": _ENV_FILES,
        "env_file_encoding": "utf-8",
    }


@lru_cache
def get_settings() -> Settings:
    """Cached settings instance — reads .env once."""
    return Settings()
