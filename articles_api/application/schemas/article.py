"""Pydantic DTOs (Data Transfer Objects) for the Article feature.

Wire names are camelCase (``articleId``, ``viewCount``, ``createTime``) to
match what existing front-end clients read and send.
"""

from datetime import datetime

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel

from articles_api.domain.entities import ArticleStatus

_WIRE_CONFIG = ConfigDict(
    alias_generator=to_camel,
    populate_by_name=True,
    from_attributes=True,
)


class ArticleCreate(BaseModel):
    """Schema for creating a new article.

    Mandatory fields are checked by the service so that a missing field is
    reported in-band rather than as a request validation error. Optional
    fields sent as ``null`` are stored as empty strings.
    """

    title: str | None = Field(None, max_length=255, examples=["Getting Started"])
    content: str | None = Field(None, examples=["This is the article body."])
    summary: str | None = None
    author: str | None = Field(None, max_length=100)
    cover: str | None = None
    category: str | None = Field(None, max_length=64, examples=["frontend"])
    tag: str | None = None
    status: ArticleStatus | None = ArticleStatus.DRAFT


class ArticleUpdate(BaseModel):
    """Schema for updating an existing article — all fields optional."""

    title: str | None = Field(None, max_length=255)
    content: str | None = None
    summary: str | None = None
    cover: str | None = None
    category: str | None = Field(None, max_length=64)
    tag: str | None = None
    status: ArticleStatus | None = None


class ArticleFeedItem(BaseModel):
    """Article card returned by the recommend and latest feeds."""

    model_config = _WIRE_CONFIG

    id: int = Field(alias="articleId")
    title: str
    summary: str
    author: str
    cover: str
    category: str
    tag: str
    view_count: int
    like_count: int
    comment_count: int
    created_at: datetime = Field(alias="createTime")


class ArticleListItem(ArticleFeedItem):
    """Article row returned by the paged list: everything except the body."""

    status: ArticleStatus
    updated_at: datetime = Field(alias="updateTime")


class ArticleResponse(ArticleListItem):
    """Full article returned by the detail read."""

    content: str


class ArticlePageResponse(BaseModel):
    """One page of the article list."""

    model_config = _WIRE_CONFIG

    items: list[ArticleListItem] = Field(alias="list")
    total: int
    page: int
    limit: int
    total_pages: int


class ArticleCreatedResponse(BaseModel):
    model_config = _WIRE_CONFIG

    id: int = Field(alias="articleId")
