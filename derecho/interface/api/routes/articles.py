"""Article routes."""

import logfire
from uuid import UUID

from dishka.integrations.fastapi import DishkaRoute, FromDishka
from fastapi import APIRouter, Cookie, HTTPException, status

from derecho.application.usecase.article import (
    GetArticleRequest,
    GetArticleResponse,
    GetArticleUseCase,
    ListArticlesRequest,
    ListArticlesResponse,
    ListArticlesUseCase,
)
from derecho.domain.service import JWTService

router = APIRouter(prefix="/articles", tags=["articles"], route_class=DishkaRoute)


@router.get("", response_model=ListArticlesResponse)
async def list_articles(
    list_articles_use_case: FromDishka[ListArticlesUseCase],
    jwt_service: FromDishka[JWTService],
    limit: int = 30,
    offset: int = 0,
    auth_token: str | None = Cookie(default=None),
) -> ListArticlesResponse:
    """List published articles, newest first.

    Args:
        list_articles_use_case: List articles use case from DI
        jwt_service: JWT service for token verification (injected)
        limit: Maximum number of articles to return (1-100)
        offset: Number of articles to skip
        auth_token: Access token from cookie (optional)

    Returns:
        List of articles with authors and like data
    """
    # Invalid tokens are treated as anonymous
    user_id = jwt_service.get_user_id_from_token(auth_token)

    # Validate pagination
    if limit < 1 or limit > 100:
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail="Limit must be between 1 and 100",
        )
    if offset < 0:
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail="Offset must be non-negative",
        )

    return await list_articles_use_case.execute(
        ListArticlesRequest(limit=limit, offset=offset, user_id=user_id)
    )


@router.get("/{article_id}", response_model=GetArticleResponse)
async def get_article(
    article_id: UUID,
    get_article_use_case: FromDishka[GetArticleUseCase],
    jwt_service: FromDishka[JWTService],
    auth_token: str | None = Cookie(default=None),
) -> GetArticleResponse:
    """Get a published article by ID.

    Args:
        article_id: Article UUID
        get_article_use_case: Get article use case from DI
        jwt_service: JWT service for token verification (injected)
        auth_token: Access token from cookie (optional)

    Returns:
        Article details with authors and like data

    Raises:
        HTTPException: If the article is missing or not published
    """
    user_id = jwt_service.get_user_id_from_token(auth_token)

    article = await get_article_use_case.execute(
        GetArticleRequest(article_id=str(article_id), user_id=user_id)
    )
    if not article:
        logfire.warn("Article not found", article_id=str(article_id))
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail="Article not found",
        )

    return article
