"""FastAPI application factory."""

import logging
from contextlib import asynccontextmanager
from collections.abc import AsyncIterator

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from articles_api.config import get_settings
from articles_api.infrastructure.database import Database
from articles_api.infrastructure.logging.log_config import setup_logging
from articles_api.presentation.api.exception_handlers import register_exception_handlers
from articles_api.presentation.api.router import build_router

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncIterator[None]:
    """Application lifespan: open the database, create tables, dispose on shutdown."""
    settings = get_settings()
    setup_logging()

    database = Database.from_settings(settings)
    await database.create_all()
    app.state.database = database
    logger.info("Database ready at %s", database.engine.url.render_as_string(hide_password=True))

    try:
        yield
    finally:
        await database.dispose()


def create_app() -> FastAPI:
    """Factory function that builds and configures the FastAPI application."""
    settings = get_settings()

    app = FastAPI(
        title=settings.app_title,
        version=settings.app_version,
        lifespan=lifespan,
    )

    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_origins,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    register_exception_handlers(app)
    app.include_router(build_router())

    return app


app = create_app()


if __name__ == "__main__":
    import uvicorn

    uvicorn.run(
        "articles_api.main:app",
        host="0.0.0.0",
        port=8000,
        reload=True,
    )
