from .article import (
    ArticleCreate,
    ArticleCreatedResponse,
    ArticleFeedItem,
    ArticleListItem,
    ArticlePageResponse,
    ArticleResponse,
    ArticleUpdate,
)
from .envelope import ApiResponse, failure, success

__all__ = [
    "ArticleCreate",
    "ArticleCreatedResponse",
    "ArticleFeedItem",
    "ArticleListItem",
    "ArticlePageResponse",
    "ArticleResponse",
    "ArticleUpdate",
    "ApiResponse",
    "failure",
    "success",
]
