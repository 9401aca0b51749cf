"""Create comment use case."""

from datetime import datetime
from uuid import UUID

from pydantic import BaseModel

from derecho.domain.error import NotFoundError
from derecho.domain.repository import ArticleRepository
from derecho.domain.service import CommentService
from derecho.domain.value import ArticleId, CommentId, UserId


class CreateCommentRequest(BaseModel):
    """Create comment request."""

    article_id: str  # UUID string
    content: str
    author_id: str  # User ID from authenticated user
    parent_id: str | None = None  # Parent comment ID for replies


class CreateCommentResponse(BaseModel):
    """Create comment response."""

    comment_id: str
    article_id: str
    content: str
    parent_id: str | None
    created_at: datetime


class CreateCommentUseCase:
    """Use case for commenting on an article or replying to a comment."""

    def __init__(
        self,
        comment_service: CommentService,
        article_repository: ArticleRepository,
    ) -> None:
        """Initialize create comment use case.

        Args:
            comment_service: Comment domain service
            article_repository: Article repository (existence and counter)
        """
        self.comment_service = comment_service
        self.article_repository = article_repository

    async def execute(self, request: CreateCommentRequest) -> CreateCommentResponse:
        """Execute create comment flow.

        Steps:
        1. Verify article exists and is published
        2. Create comment via comment service (validates parent if replying)
        3. Update article's comment count

        Args:
            request: Create comment request

        Returns:
            Create comment response with comment details

        Raises:
            NotFoundError: If article not found or not published
            ValidationError: If content is blank
            ValueError: If parent comment invalid
        """
        article_id = ArticleId(UUID(request.article_id))

        article = await self.article_repository.find_by_id(article_id)
        if not article or not article.published:
            raise NotFoundError("Article", request.article_id)

        parent_id = CommentId(UUID(request.parent_id)) if request.parent_id else None
        comment = await self.comment_service.create_comment(
            article_id=article_id,
            author_id=UserId(UUID(request.author_id)),
            content=request.content,
            parent_id=parent_id,
        )

        await self.article_repository.increment_comments(article_id)

        return CreateCommentResponse(
            comment_id=str(comment.id),
            article_id=str(comment.article_id),
            content=comment.content,
            parent_id=str(comment.parent_id) if comment.parent_id else None,
            created_at=comment.created_at,
        )
