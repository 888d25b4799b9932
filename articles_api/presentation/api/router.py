"""Top-level API router: mounts the health probe and the article routes."""

from fastapi import APIRouter

from articles_api.config import get_settings
from articles_api.presentation.api.endpoints.articles import router as articles_router
from articles_api.presentation.api.endpoints.health import router as health_router


def build_router() -> APIRouter:
    settings = get_settings()
    router = APIRouter()
    router.include_router(health_router, prefix="/api")
    router.include_router(articles_router, prefix=settings.api_prefix)
    return router
