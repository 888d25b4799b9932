"""Article endpoints. Paths are kept identical to the routes existing clients call."""

from fastapi import APIRouter, Depends, Query

from articles_api.application.schemas import (
    ApiResponse,
    ArticleCreate,
    ArticleCreatedResponse,
    ArticleFeedItem,
    ArticlePageResponse,
    ArticleResponse,
    ArticleListItem,
    ArticleUpdate,
    success,
)
from articles_api.application.services import ArticleService
from articles_api.infrastructure.dependencies import get_article_service

router = APIRouter(tags=["Articles"])

FETCHED = "Fetched successfully"


@router.get(
    "/list",
    response_model=ApiResponse[ArticlePageResponse],
    response_model_exclude_unset=True,
)
async def list_articles(
    category: str = "",
    page: int = 1,
    limit: int | None = None,
    sort_by: str = Query("createTime", alias="sortBy"),
    sort_order: str = Query("DESC", alias="sortOrder"),
    status: str = "published",
    service: ArticleService = Depends(get_article_service),
) -> ApiResponse:
    """Paged article list filtered by status and category."""
    result = await service.list_articles(
        category=category,
        page=page,
        limit=limit,
        sort_by=sort_by,
        sort_order=sort_order,
        status=status,
    )
    data = ArticlePageResponse(
        items=[ArticleListItem.model_validate(a, from_attributes=True) for a in result.items],
        total=result.total,
        page=result.page,
        limit=result.limit,
        total_pages=result.total_pages,
    )
    return success(FETCHED, data)


@router.get(
    "/recommend",
    response_model=ApiResponse[list[ArticleFeedItem]],
    response_model_exclude_unset=True,
)
async def recommend_articles(
    category: str = "",
    limit: int | None = None,
    service: ArticleService = Depends(get_article_service),
) -> ApiResponse:
    """Published articles ranked by popularity."""
    articles = await service.recommend_articles(category=category, limit=limit)
    return success(FETCHED, [ArticleFeedItem.model_validate(a, from_attributes=True) for a in articles])


@router.get(
    "/latest",
    response_model=ApiResponse[list[ArticleFeedItem]],
    response_model_exclude_unset=True,
)
async def latest_articles(
    category: str = "",
    limit: int | None = None,
    service: ArticleService = Depends(get_article_service),
) -> ApiResponse:
    """Most recently created published articles."""
    articles = await service.latest_articles(category=category, limit=limit)
    return success(FETCHED, [ArticleFeedItem.model_validate(a, from_attributes=True) for a in articles])


@router.get(
    "/detail/{article_id}",
    response_model=ApiResponse[ArticleResponse],
    response_model_exclude_unset=True,
)
async def get_article_detail(
    article_id: int,
    service: ArticleService = Depends(get_article_service),
) -> ApiResponse:
    """Single article; counts one view."""
    article = await service.get_article_detail(article_id)
    return success(FETCHED, ArticleResponse.model_validate(article, from_attributes=True))


@router.post(
    "/create",
    response_model=ApiResponse[ArticleCreatedResponse],
    response_model_exclude_unset=True,
)
async def create_article(
    data: ArticleCreate,
    service: ArticleService = Depends(get_article_service),
) -> ApiResponse:
    article = await service.create_article(data)
    return success("Created successfully", ArticleCreatedResponse(id=article.id))


@router.put(
    "/update/{article_id}",
    response_model=ApiResponse[None],
    response_model_exclude_unset=True,
)
async def update_article(
    article_id: int,
    data: ArticleUpdate,
    service: ArticleService = Depends(get_article_service),
) -> ApiResponse:
    await service.update_article(article_id, data)
    return success("Updated successfully")


@router.delete(
    "/delete/{article_id}",
    response_model=ApiResponse[None],
    response_model_exclude_unset=True,
)
async def delete_article(
    article_id: int,
    service: ArticleService = Depends(get_article_service),
) -> ApiResponse:
    """Soft delete; the row stays with status ``deleted``."""
    await service.delete_article(article_id)
    return success("Deleted successfully")
