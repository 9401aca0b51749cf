"""Toggle like use case."""

from uuid import UUID

from pydantic import BaseModel

from derecho.domain.service import LikeService
from derecho.domain.value import ArticleId, UserId


class ToggleLikeRequest(BaseModel):
    """Toggle like request."""

    article_id: str  # UUID string
    user_id: str  # User ID from authenticated user


class ToggleLikeResponse(BaseModel):
    """Toggle like response."""

    article_id: str
    liked: bool
    likes_count: int


class ToggleLikeUseCase:
    """Use case for liking or unliking an article."""

    def __init__(self, like_service: LikeService) -> None:
        """Initialize toggle like use case.

        Args:
            like_service: Like domain service
        """
        self.like_service = like_service

    async def execute(self, request: ToggleLikeRequest) -> ToggleLikeResponse:
        """Execute toggle like flow.

        Raises:
            NotFoundError: If article not found
            ValueError: If an ID is not a UUID
        """
        article_id = ArticleId(UUID(request.article_id))
        user_id = UserId(UUID(request.user_id))

        liked = await self.like_service.toggle_like(article_id, user_id)
        likes_count = await self.like_service.count_likes(article_id)

        return ToggleLikeResponse(
            article_id=request.article_id,
            liked=liked,
            likes_count=likes_count,
        )
