"""Health check endpoint: reports version and whether the article store answers."""

from fastapi import APIRouter, Request

from articles_api.config import get_settings

router = APIRouter(tags=["Health"])


@router.get("/health")
async def health_check(request: Request) -> dict:
    settings = get_settings()
    database = getattr(request.app.state, "database", None)
    store_ok = database is not None and await database.ping()
    return {
        "status": "healthy" if store_ok else "degraded",
        "database": "up" if store_ok else "down",
        "version": settings.app_version,
        "environment": settings.app_env,
    }
