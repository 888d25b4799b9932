"""Domain entities — pure Python business objects, no framework dependencies."""

from dataclasses import dataclass, field
from datetime import datetime, timezone
from enum import Enum


class ArticleStatus(str, Enum):
    """Lifecycle state of an article: draft → published → deleted."""

    DRAFT = "draft"
    PUBLISHED = "published"
    DELETED = "deleted"


# Statuses visible on normal read paths; drafts are readable for preview.
ACTIVE_STATUSES: tuple[ArticleStatus, ...] = (
    ArticleStatus.PUBLISHED,
    ArticleStatus.DRAFT,
)

# Popularity weights used by the recommendation ranking.
VIEW_WEIGHT = 0.7
LIKE_WEIGHT = 0.3

# Largest id the store can hold (signed 64-bit primary key).
MAX_ARTICLE_ID = 2**63 - 1


def ranking_score(view_count: int, like_count: int) -> float:
    """Popularity score used to order recommended articles."""
    return view_count * VIEW_WEIGHT + like_count * LIKE_WEIGHT


def _utcnow() -> datetime:
    return datetime.now(timezone.utc)


@dataclass
class Article:
    """Core domain entity representing a published (or draft) article."""

    title: str
    content: str
    author: str
    category: str
    summary: str = ""
    cover: str = ""
    tag: str = ""
    status: ArticleStatus = ArticleStatus.DRAFT
    view_count: int = 0
    like_count: int = 0
    comment_count: int = 0
    id: int | None = None
    created_at: datetime = field(default_factory=_utcnow)
    updated_at: datetime = field(default_factory=_utcnow)

    @property
    def score(self) -> float:
        return ranking_score(self.view_count, self.like_count)
