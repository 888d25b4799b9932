"""FastAPI dependency injection — wires infrastructure to application layer."""

from collections.abc import AsyncGenerator

from fastapi import Depends
from sqlalchemy.ext.asyncio import AsyncSession

from articles_api.application.query import Pager
from articles_api.application.services import ArticleService
from articles_api.config import get_settings
from articles_api.infrastructure.database.session import get_db_session
from articles_api.infrastructure.database.repositories import SQLAlchemyArticleRepository


def get_pager() -> Pager:
    settings = get_settings()
    return Pager(
        default_limit=settings.default_page_size,
        max_limit=settings.max_page_size,
    )


async def get_article_service(
    session: AsyncSession = Depends(get_db_session),
    pager: Pager = Depends(get_pager),
) -> AsyncGenerator[ArticleService, None]:
    """Provides an ArticleService instance with its repository wired up."""
    repository = SQLAlchemyArticleRepository(session)
    yield ArticleService(repository, pager=pager)
