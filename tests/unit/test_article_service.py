"""Unit tests for the ArticleService."""

from dataclasses import replace
from datetime import datetime, timedelta, timezone
from typing import Any

import pytest

from articles_api.application.interfaces import ArticleRepository
from articles_api.application.query import Ordering, OrderingMode, Pager, Predicate
from articles_api.application.schemas import ArticleCreate, ArticleUpdate
from articles_api.application.services import ArticleService
from articles_api.domain.entities import Article, ArticleStatus
from articles_api.domain.exceptions import (
    EmptyUpdateError,
    EntityNotFoundError,
    InvalidParameterError,
    MissingRequiredFieldError,
)

BASE_TIME = datetime(2026, 1, 1, tzinfo=timezone.utc)


class FakeArticleRepository(ArticleRepository):
    """In-memory fake repository for unit testing.

    Hands out copies so callers cannot mutate stored rows behind its back.
    """

    def __init__(self):
        self._articles: dict[int, Article] = {}
        self._next_id = 1
        self.count_params: list[dict[str, Any]] = []

    def _matching(self, predicate: Predicate) -> list[Article]:
        return [
            a for a in self._articles.values()
            if all(getattr(a, name) == value for name, value in predicate.params.items())
        ]

    async def find(self, predicate, ordering: Ordering, limit, offset=0):
        rows = self._matching(predicate)
        if ordering.mode is OrderingMode.RANKING:
            rows.sort(key=lambda a: (a.score, a.created_at, a.id), reverse=True)
        else:
            rows.sort(key=lambda a: (getattr(a, ordering.field), a.id), reverse=ordering.descending)
        return [replace(a) for a in rows[offset : offset + limit]]

    async def count(self, predicate):
        self.count_params.append(dict(predicate.params))
        return len(self._matching(predicate))

    async def get_by_id(self, article_id, statuses=None):
        article = self._articles.get(article_id)
        if article is None or (statuses is not None and article.status not in statuses):
            return None
        return replace(article)

    async def exists(self, article_id):
        return article_id in self._articles

    async def create(self, article):
        article = replace(article, id=self._next_id)
        self._next_id += 1
        self._articles[article.id] = article
        return replace(article)

    async def apply_changes(self, article_id, assignments):
        stored = self._articles[article_id]
        self._articles[article_id] = replace(stored, **assignments)

    async def increment_view_count(self, article_id):
        article = self._articles.get(article_id)
        if article is None:
            return None
        article.view_count += 1
        return article.view_count

    def stored(self, article_id: int) -> Article:
        return self._articles[article_id]

    def seed(self, **fields) -> Article:
        defaults = dict(title="Seeded", content="Body", author="A", category="news")
        defaults.update(fields)
        article = Article(id=self._next_id, **defaults)
        self._next_id += 1
        self._articles[article.id] = article
        return article


@pytest.fixture
def repository() -> FakeArticleRepository:
    return FakeArticleRepository()


@pytest.fixture
def service(repository: FakeArticleRepository) -> ArticleService:
    return ArticleService(repository, pager=Pager(default_limit=10, max_limit=100))


def _published(repository: FakeArticleRepository, n: int, **fields) -> list[Article]:
    return [
        repository.seed(
            title=f"Article {i}",
            status=ArticleStatus.PUBLISHED,
            created_at=BASE_TIME + timedelta(minutes=i),
            **fields,
        )
        for i in range(n)
    ]


# ── Create ───────────────────────────────────────────────────────────


@pytest.mark.asyncio
async def test_create_article_defaults_to_draft(service: ArticleService):
    article = await service.create_article(
        ArticleCreate(title="T", content="C", author="A", category="cat")
    )
    assert article.id is not None
    assert article.status is ArticleStatus.DRAFT
    assert article.summary == ""
    assert article.view_count == 0
    assert article.created_at == article.updated_at


@pytest.mark.asyncio
async def test_create_article_missing_fields(service: ArticleService, repository):
    with pytest.raises(MissingRequiredFieldError) as exc_info:
        await service.create_article(ArticleCreate(title="Only a title"))
    assert exc_info.value.fields == ["content", "author", "category"]
    assert await repository.exists(1) is False


@pytest.mark.asyncio
async def test_create_article_rejects_empty_strings(service: ArticleService):
    with pytest.raises(MissingRequiredFieldError):
        await service.create_article(ArticleCreate(title="", content="C", author="A", category="c"))


@pytest.mark.asyncio
async def test_create_article_treats_null_optionals_as_empty(service: ArticleService):
    article = await service.create_article(
        ArticleCreate(
            title="T", content="C", author="A", category="c",
            summary=None, cover=None, tag=None, status=None,
        )
    )
    assert (article.summary, article.cover, article.tag) == ("", "", "")
    assert article.status is ArticleStatus.DRAFT


@pytest.mark.asyncio
async def test_create_article_cannot_start_deleted(service: ArticleService):
    with pytest.raises(InvalidParameterError):
        await service.create_article(
            ArticleCreate(title="T", content="C", author="A", category="c", status="deleted")
        )


# ── Detail ───────────────────────────────────────────────────────────


@pytest.mark.asyncio
async def test_detail_of_new_article_counts_first_view(service: ArticleService):
    created = await service.create_article(
        ArticleCreate(title="T", content="C", author="A", category="cat")
    )
    article = await service.get_article_detail(created.id)
    assert article.status is ArticleStatus.DRAFT
    assert article.view_count == 1


@pytest.mark.asyncio
async def test_sequential_detail_reads_add_one_view_each(service: ArticleService, repository):
    seeded = repository.seed(status=ArticleStatus.PUBLISHED, view_count=5)
    await service.get_article_detail(seeded.id)
    second = await service.get_article_detail(seeded.id)
    assert second.view_count == 7
    assert repository.stored(seeded.id).view_count == 7


@pytest.mark.asyncio
async def test_detail_reports_stored_count_not_stale_snapshot(service: ArticleService, repository):
    seeded = repository.seed(status=ArticleStatus.PUBLISHED)

    original_increment = repository.increment_view_count

    async def concurrent_increment(article_id):
        # Another reader bumped the counter between our read and our write.
        repository.stored(article_id).view_count += 1
        return await original_increment(article_id)

    repository.increment_view_count = concurrent_increment
    article = await service.get_article_detail(seeded.id)
    assert article.view_count == 2


@pytest.mark.asyncio
async def test_detail_hides_deleted_articles(service: ArticleService, repository):
    seeded = repository.seed(status=ArticleStatus.DELETED)
    with pytest.raises(EntityNotFoundError):
        await service.get_article_detail(seeded.id)
    assert repository.stored(seeded.id).view_count == 0


@pytest.mark.asyncio
async def test_detail_not_found(service: ArticleService):
    with pytest.raises(EntityNotFoundError):
        await service.get_article_detail(999)


@pytest.mark.asyncio
async def test_ids_outside_key_range_are_not_found(service: ArticleService, repository):
    repository.seed(status=ArticleStatus.PUBLISHED)
    huge = 2**64
    with pytest.raises(EntityNotFoundError):
        await service.get_article_detail(huge)
    with pytest.raises(EntityNotFoundError):
        await service.update_article(huge, ArticleUpdate(title="x"))
    with pytest.raises(EntityNotFoundError):
        await service.delete_article(huge)


# ── Update ───────────────────────────────────────────────────────────


@pytest.mark.asyncio
async def test_update_article_changes_only_given_fields(service: ArticleService, repository):
    seeded = repository.seed(title="Old", summary="keep me", updated_at=BASE_TIME)
    await service.update_article(seeded.id, ArticleUpdate(title="New", status="published"))

    stored = repository.stored(seeded.id)
    assert stored.title == "New"
    assert stored.summary == "keep me"
    assert stored.status is ArticleStatus.PUBLISHED
    assert stored.updated_at > BASE_TIME


@pytest.mark.asyncio
async def test_update_article_accepts_empty_string(service: ArticleService, repository):
    seeded = repository.seed(summary="something")
    await service.update_article(seeded.id, ArticleUpdate(summary=""))
    assert repository.stored(seeded.id).summary == ""


@pytest.mark.asyncio
async def test_empty_update_leaves_article_untouched(service: ArticleService, repository):
    seeded = repository.seed(updated_at=BASE_TIME)
    before = replace(repository.stored(seeded.id))
    with pytest.raises(EmptyUpdateError):
        await service.update_article(seeded.id, ArticleUpdate())
    assert repository.stored(seeded.id) == before


@pytest.mark.asyncio
async def test_update_article_not_found(service: ArticleService):
    with pytest.raises(EntityNotFoundError):
        await service.update_article(42, ArticleUpdate(title="x"))


# ── Delete ───────────────────────────────────────────────────────────


@pytest.mark.asyncio
async def test_delete_article_is_soft(service: ArticleService, repository):
    seeded = repository.seed(status=ArticleStatus.PUBLISHED, updated_at=BASE_TIME)
    await service.delete_article(seeded.id)

    stored = repository.stored(seeded.id)
    assert stored.status is ArticleStatus.DELETED
    assert stored.updated_at > BASE_TIME

    assert (await service.list_articles()).total == 0
    assert await service.recommend_articles() == []
    assert await service.latest_articles() == []


@pytest.mark.asyncio
async def test_delete_twice_succeeds(service: ArticleService, repository):
    seeded = repository.seed()
    await service.delete_article(seeded.id)
    await service.delete_article(seeded.id)
    assert repository.stored(seeded.id).status is ArticleStatus.DELETED


@pytest.mark.asyncio
async def test_delete_article_not_found(service: ArticleService):
    with pytest.raises(EntityNotFoundError):
        await service.delete_article(999)


# ── Listings ─────────────────────────────────────────────────────────


@pytest.mark.asyncio
async def test_list_articles_pages(service: ArticleService, repository):
    _published(repository, 25)
    first = await service.list_articles(page=1, limit=10)
    last = await service.list_articles(page=3, limit=10)

    assert first.total == 25
    assert first.total_pages == 3
    assert len(first.items) == 10
    assert first.items[0].title == "Article 24"
    assert len(last.items) == 5
    assert last.page == 3


@pytest.mark.asyncio
async def test_list_articles_empty(service: ArticleService):
    page = await service.list_articles()
    assert page.items == []
    assert page.total == 0
    assert page.total_pages == 0


@pytest.mark.asyncio
async def test_list_articles_count_uses_filter_values_only(service: ArticleService, repository):
    _published(repository, 3, category="news")
    await service.list_articles(category="news", page=2, limit=1)
    assert repository.count_params == [{"status": "published", "category": "news"}]


@pytest.mark.asyncio
async def test_list_articles_comprehensive_matches_everything(service: ArticleService, repository):
    _published(repository, 2, category="news")
    _published(repository, 3, category="tech")
    everything = await service.list_articles(category="comprehensive")
    unfiltered = await service.list_articles()
    tech = await service.list_articles(category="tech")

    assert everything.total == unfiltered.total == 5
    assert [a.id for a in everything.items] == [a.id for a in unfiltered.items]
    assert tech.total == 3


@pytest.mark.asyncio
async def test_list_articles_by_status(service: ArticleService, repository):
    _published(repository, 2)
    repository.seed(status=ArticleStatus.DRAFT)
    drafts = await service.list_articles(status="draft")
    assert drafts.total == 1


@pytest.mark.asyncio
async def test_list_articles_rejects_deleted_status(service: ArticleService):
    with pytest.raises(InvalidParameterError):
        await service.list_articles(status="deleted")


@pytest.mark.asyncio
async def test_list_articles_sorting(service: ArticleService, repository):
    for views in (3, 9, 1):
        repository.seed(status=ArticleStatus.PUBLISHED, view_count=views)
    page = await service.list_articles(sort_by="viewCount", sort_order="ASC")
    assert [a.view_count for a in page.items] == [1, 3, 9]


@pytest.mark.asyncio
async def test_list_articles_rejects_unknown_sort_key(service: ArticleService):
    with pytest.raises(InvalidParameterError):
        await service.list_articles(sort_by="content; --")


@pytest.mark.asyncio
async def test_recommend_orders_by_score_then_newest(service: ArticleService, repository):
    low = repository.seed(status=ArticleStatus.PUBLISHED, view_count=1, like_count=0,
                          created_at=BASE_TIME + timedelta(days=5))
    high = repository.seed(status=ArticleStatus.PUBLISHED, view_count=10, like_count=10,
                           created_at=BASE_TIME)
    tie_old = repository.seed(status=ArticleStatus.PUBLISHED, view_count=2, like_count=2,
                              created_at=BASE_TIME + timedelta(days=1))
    tie_new = repository.seed(status=ArticleStatus.PUBLISHED, view_count=2, like_count=2,
                              created_at=BASE_TIME + timedelta(days=2))
    repository.seed(status=ArticleStatus.DRAFT, view_count=1000)

    ranked = await service.recommend_articles()
    assert [a.id for a in ranked] == [high.id, tie_new.id, tie_old.id, low.id]


@pytest.mark.asyncio
async def test_recommend_respects_limit(service: ArticleService, repository):
    _published(repository, 5)
    assert len(await service.recommend_articles(limit=2)) == 2


@pytest.mark.asyncio
async def test_latest_orders_newest_first(service: ArticleService, repository):
    articles = _published(repository, 3, category="tech")
    _published(repository, 2, category="news")
    latest = await service.latest_articles(category="tech")
    assert [a.id for a in latest] == [a.id for a in reversed(articles)]
