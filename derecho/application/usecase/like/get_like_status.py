"""Get like status use case."""

from uuid import UUID

from pydantic import BaseModel

from derecho.domain.service import LikeService
from derecho.domain.value import ArticleId, UserId


class GetLikeStatusRequest(BaseModel):
    """Get like status request."""

    article_id: str  # UUID string
    user_id: str | None = None  # Set when the caller is authenticated


class GetLikeStatusResponse(BaseModel):
    """Get like status response."""

    article_id: str
    likes_count: int
    liked: bool


class GetLikeStatusUseCase:
    """Use case for showing an article's likes to any visitor."""

    def __init__(self, like_service: LikeService) -> None:
        self.like_service = like_service

    async def execute(self, request: GetLikeStatusRequest) -> GetLikeStatusResponse:
        article_id = ArticleId(UUID(request.article_id))

        liked = False
        if request.user_id:
            liked = await self.like_service.has_liked(
                article_id, UserId(UUID(request.user_id))
            )

        return GetLikeStatusResponse(
            article_id=request.article_id,
            likes_count=await self.like_service.count_likes(article_id),
            liked=liked,
        )
