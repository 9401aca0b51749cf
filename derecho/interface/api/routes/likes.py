"""Like routes."""

from dishka.integrations.fastapi import DishkaRoute, FromDishka
from fastapi import APIRouter, Cookie, HTTPException, status

from derecho.application.usecase.like import GetLikeStatusUseCase, ToggleLikeUseCase
from derecho.application.usecase.like.get_like_status import (
    GetLikeStatusRequest,
    GetLikeStatusResponse,
)
from derecho.application.usecase.like.toggle_like import (
    ToggleLikeRequest,
    ToggleLikeResponse,
)
from derecho.domain.error import NotFoundError
from derecho.domain.service import JWTService

router = APIRouter(prefix="/articles", tags=["likes"], route_class=DishkaRoute)


@router.post("/{article_id}/like", response_model=ToggleLikeResponse)
async def toggle_like(
    article_id: str,
    toggle_like_use_case: FromDishka[ToggleLikeUseCase],
    jwt_service: FromDishka[JWTService],
    auth_token: str | None = Cookie(default=None),
) -> ToggleLikeResponse:
    """Like an article, or remove the like if already given.

    Requires authentication.

    Raises:
        HTTPException: If not authenticated or article not found
    """
    user_id = jwt_service.get_user_id_from_token(auth_token)
    if not user_id:
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail="Authentication required to like articles",
        )

    try:
        request = ToggleLikeRequest(article_id=article_id, user_id=user_id)
        return await toggle_like_use_case.execute(request)
    except NotFoundError as e:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail=str(e),
        )
    except ValueError as e:
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail=str(e),
        )


@router.get("/{article_id}/likes", response_model=GetLikeStatusResponse)
async def get_like_status(
    article_id: str,
    get_like_status_use_case: FromDishka[GetLikeStatusUseCase],
    jwt_service: FromDishka[JWTService],
    auth_token: str | None = Cookie(default=None),
) -> GetLikeStatusResponse:
    """Get an article's like count, and whether the caller liked it.

    Authentication is optional.
    """
    user_id = jwt_service.get_user_id_from_token(auth_token)
    try:
        request = GetLikeStatusRequest(article_id=article_id, user_id=user_id)
        return await get_like_status_use_case.execute(request)
    except ValueError as e:
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail=str(e),
        )
