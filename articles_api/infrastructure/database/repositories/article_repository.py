"""Concrete repository implementation backed by SQLAlchemy."""

import functools
from collections.abc import Sequence
from datetime import datetime, timezone
from enum import Enum
from typing import Any

from sqlalchemy import Select, func, select, text, update
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncSession

from articles_api.application.interfaces import ArticleRepository
from articles_api.application.query import Ordering, OrderingMode, Predicate
from articles_api.domain.entities import LIKE_WEIGHT, VIEW_WEIGHT, Article, ArticleStatus
from articles_api.domain.exceptions import DataStoreError
from articles_api.infrastructure.database.models import ArticleModel


def _store_errors(method):
    """Re-raise driver/ORM failures as ``DataStoreError``."""

    @functools.wraps(method)
    async def wrapper(*args, **kwargs):
        try:
            return await method(*args, **kwargs)
        except SQLAlchemyError as exc:
            raise DataStoreError(f"article store call '{method.__name__}' failed") from exc

    return wrapper


def _column_value(value: Any) -> Any:
    return value.value if isinstance(value, Enum) else value


def _as_utc(value: datetime) -> datetime:
    # SQLite drops the offset on read; stored values are always UTC.
    return value.replace(tzinfo=timezone.utc) if value.tzinfo is None else value


class SQLAlchemyArticleRepository(ArticleRepository):
    """Implements the ArticleRepository port using SQLAlchemy async sessions."""

    def __init__(self, session: AsyncSession):
        self._session = session

    def _to_entity(self, model: ArticleModel) -> Article:
        """Map ORM model → domain entity."""
        return Article(
            id=model.id,
            title=model.title,
            content=model.content,
            summary=model.summary,
            author=model.author,
            cover=model.cover,
            category=model.category,
            tag=model.tag,
            status=ArticleStatus(model.status),
            view_count=model.view_count,
            like_count=model.like_count,
            comment_count=model.comment_count,
            created_at=_as_utc(model.created_at),
            updated_at=_as_utc(model.updated_at),
        )

    def _to_model(self, entity: Article) -> ArticleModel:
        """Map domain entity → ORM model (for creation)."""
        return ArticleModel(
            title=entity.title,
            content=entity.content,
            summary=entity.summary,
            author=entity.author,
            cover=entity.cover,
            category=entity.category,
            tag=entity.tag,
            status=entity.status.value,
            view_count=entity.view_count,
            like_count=entity.like_count,
            comment_count=entity.comment_count,
            created_at=entity.created_at,
            updated_at=entity.updated_at,
        )

    @staticmethod
    def _where(stmt: Select, predicate: Predicate) -> Select:
        if not predicate.clauses:
            return stmt
        return stmt.where(text(predicate.sql).bindparams(**predicate.params))

    @staticmethod
    def _order_by(ordering: Ordering) -> tuple:
        # Primary key last so equal sort keys still page deterministically.
        if ordering.mode is OrderingMode.RANKING:
            score = ArticleModel.view_count * VIEW_WEIGHT + ArticleModel.like_count * LIKE_WEIGHT
            return score.desc(), ArticleModel.created_at.desc(), ArticleModel.id.desc()

        column = getattr(ArticleModel, ordering.field)
        direction = column.desc() if ordering.descending else column.asc()
        if ordering.field == "id":
            return (direction,)
        return direction, ArticleModel.id.desc()

    @_store_errors
    async def find(
        self,
        predicate: Predicate,
        ordering: Ordering,
        limit: int,
        offset: int = 0,
    ) -> list[Article]:
        stmt = (
            self._where(select(ArticleModel), predicate)
            .order_by(*self._order_by(ordering))
            .limit(limit)
            .offset(offset)
        )
        result = await self._session.execute(stmt)
        return [self._to_entity(row) for row in result.scalars().all()]

    @_store_errors
    async def count(self, predicate: Predicate) -> int:
        stmt = self._where(select(func.count()).select_from(ArticleModel), predicate)
        result = await self._session.execute(stmt)
        return result.scalar_one()

    @_store_errors
    async def get_by_id(
        self,
        article_id: int,
        statuses: Sequence[ArticleStatus] | None = None,
    ) -> Article | None:
        stmt = select(ArticleModel).where(ArticleModel.id == article_id)
        if statuses is not None:
            stmt = stmt.where(ArticleModel.status.in_([s.value for s in statuses]))
        result = await self._session.execute(stmt)
        model = result.scalar_one_or_none()
        return self._to_entity(model) if model else None

    @_store_errors
    async def exists(self, article_id: int) -> bool:
        stmt = select(ArticleModel.id).where(ArticleModel.id == article_id)
        result = await self._session.execute(stmt)
        return result.scalar_one_or_none() is not None

    @_store_errors
    async def create(self, article: Article) -> Article:
        model = self._to_model(article)
        self._session.add(model)
        await self._session.flush()
        return self._to_entity(model)

    @_store_errors
    async def apply_changes(self, article_id: int, assignments: dict[str, Any]) -> None:
        values = {
            getattr(ArticleModel, name): _column_value(value)
            for name, value in assignments.items()
        }
        stmt = (
            update(ArticleModel)
            .where(ArticleModel.id == article_id)
            .values(values)
            .execution_options(synchronize_session=False)
        )
        await self._session.execute(stmt)

    @_store_errors
    async def increment_view_count(self, article_id: int) -> int | None:
        stmt = (
            update(ArticleModel)
            .where(ArticleModel.id == article_id)
            .values({ArticleModel.view_count: ArticleModel.view_count + 1})
            .returning(ArticleModel.view_count)
            .execution_options(synchronize_session=False)
        )
        result = await self._session.execute(stmt)
        return result.scalar_one_or_none()
