"""Application service (use case) for Article operations."""

import logging
from datetime import datetime, timezone

from articles_api.application.interfaces import ArticleRepository
from articles_api.application.query import (
    MUTABLE_FIELDS,
    NEWEST_FIRST,
    RANKED,
    ArticleFilter,
    Page,
    Pager,
    Predicate,
    build_predicate,
    compose_mutation,
    resolve_sort,
)
from articles_api.application.schemas import ArticleCreate, ArticleUpdate
from articles_api.domain.entities import ACTIVE_STATUSES, MAX_ARTICLE_ID, Article, ArticleStatus
from articles_api.domain.exceptions import (
    EntityNotFoundError,
    InvalidParameterError,
    MissingRequiredFieldError,
)

logger = logging.getLogger(__name__)

_REQUIRED_ON_CREATE = ("title", "content", "author", "category")


def _parse_status(value: str | ArticleStatus | None) -> ArticleStatus:
    if value is None or value == "":
        return ArticleStatus.PUBLISHED
    try:
        status = ArticleStatus(value)
    except ValueError:
        raise InvalidParameterError("status", value) from None
    if status not in ACTIVE_STATUSES:
        raise InvalidParameterError("status", value)
    return status


def _known_id(article_id: int) -> int:
    """Ids outside the primary-key range can never exist in the store."""
    if not 1 <= article_id <= MAX_ARTICLE_ID:
        raise EntityNotFoundError("Article", article_id)
    return article_id


class ArticleService:
    """Orchestrates article business logic. Depends on the repository port (DI)."""

    def __init__(self, repository: ArticleRepository, pager: Pager | None = None):
        self._repository = repository
        self._pager = pager or Pager()

    # ── Listings ─────────────────────────────────────────────────────

    async def list_articles(
        self,
        category: str | None = None,
        page: int | str | None = None,
        limit: int | str | None = None,
        sort_by: str | None = None,
        sort_order: str | None = None,
        status: str | ArticleStatus | None = None,
    ) -> Page[Article]:
        """Paged, filtered, sorted list. Deleted articles are never listed."""
        predicate = build_predicate(ArticleFilter(status=_parse_status(status), category=category))
        ordering = resolve_sort(sort_by, sort_order)
        window = self._pager.normalize(page, limit)

        articles = await self._repository.find(
            predicate, ordering, limit=window.limit, offset=window.offset
        )
        total = await self._repository.count(predicate)
        return Page(items=articles, total=total, page=window.page, limit=window.limit)

    async def recommend_articles(
        self,
        category: str | None = None,
        limit: int | str | None = None,
    ) -> list[Article]:
        """Published articles by popularity score, newest first on ties."""
        window = self._pager.normalize(1, limit)
        return await self._repository.find(self._published(category), RANKED, limit=window.limit)

    async def latest_articles(
        self,
        category: str | None = None,
        limit: int | str | None = None,
    ) -> list[Article]:
        """Published articles, newest first."""
        window = self._pager.normalize(1, limit)
        return await self._repository.find(
            self._published(category), NEWEST_FIRST, limit=window.limit
        )

    @staticmethod
    def _published(category: str | None) -> Predicate:
        return build_predicate(ArticleFilter(status=ArticleStatus.PUBLISHED, category=category))

    # ── Lifecycle ────────────────────────────────────────────────────

    async def get_article_detail(self, article_id: int) -> Article:
        """Fetch a published or draft article and record one view.

        The returned ``view_count`` is the value the store holds after the
        increment.
        """
        _known_id(article_id)
        article = await self._repository.get_by_id(article_id, statuses=ACTIVE_STATUSES)
        if article is None:
            raise EntityNotFoundError("Article", article_id)

        view_count = await self._repository.increment_view_count(article_id)
        if view_count is None:
            raise EntityNotFoundError("Article", article_id)
        article.view_count = view_count
        return article

    async def create_article(self, data: ArticleCreate) -> Article:
        missing = [name for name in _REQUIRED_ON_CREATE if not getattr(data, name)]
        if missing:
            raise MissingRequiredFieldError(missing)
        status = data.status or ArticleStatus.DRAFT
        if status not in ACTIVE_STATUSES:
            raise InvalidParameterError("status", status.value)

        now = datetime.now(timezone.utc)
        article = Article(
            title=data.title,
            content=data.content,
            author=data.author,
            category=data.category,
            summary=data.summary or "",
            cover=data.cover or "",
            tag=data.tag or "",
            status=status,
            created_at=now,
            updated_at=now,
        )
        created = await self._repository.create(article)
        logger.info("Created article %s (%s)", created.id, created.status.value)
        return created

    async def update_article(self, article_id: int, data: ArticleUpdate) -> None:
        if not await self._repository.exists(_known_id(article_id)):
            raise EntityNotFoundError("Article", article_id)

        assignments = compose_mutation(
            data.model_dump(include=set(MUTABLE_FIELDS), exclude_unset=True)
        )
        await self._repository.apply_changes(article_id, assignments)
        logger.info(
            "Updated article %s: %s",
            article_id,
            ", ".join(name for name in assignments if name != "updated_at"),
        )

    async def delete_article(self, article_id: int) -> None:
        """Soft delete. Deleting an already-deleted article succeeds again."""
        if not await self._repository.exists(_known_id(article_id)):
            raise EntityNotFoundError("Article", article_id)

        await self._repository.apply_changes(
            article_id,
            {"status": ArticleStatus.DELETED, "updated_at": datetime.now(timezone.utc)},
        )
        logger.info("Soft-deleted article %s", article_id)
