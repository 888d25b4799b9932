from .article import (
    ACTIVE_STATUSES,
    LIKE_WEIGHT,
    MAX_ARTICLE_ID,
    VIEW_WEIGHT,
    Article,
    ArticleStatus,
    ranking_score,
)

__all__ = [
    "ACTIVE_STATUSES",
    "LIKE_WEIGHT",
    "MAX_ARTICLE_ID",
    "VIEW_WEIGHT",
    "Article",
    "ArticleStatus",
    "ranking_score",
]
