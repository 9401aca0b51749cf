"""Get article use case."""

from datetime import datetime
from typing import Optional
from uuid import UUID

from pydantic import BaseModel

from derecho.domain.repository import ArticleRepository, LikeRepository
from derecho.domain.value import ArticleId, UserId

from .list_articles import ArticleAuthorResponse


class GetArticleRequest(BaseModel):
    """Get article request."""

    article_id: str  # UUID string
    user_id: str | None = None  # Current user ID (if authenticated)


class GetArticleResponse(BaseModel):
    """Get article response."""

    article_id: str
    title: str
    slug: str | None
    content: str | None
    excerpt: str | None
    category: str | None
    featured: bool
    authors: list[ArticleAuthorResponse]
    likes_count: int
    comments_count: int
    created_at: datetime
    has_liked: bool


class GetArticleUseCase:
    """Use case for reading a published article."""

    def __init__(
        self, article_repository: ArticleRepository, like_repository: LikeRepository
    ) -> None:
        """Initialize get article use case.

        Args:
            article_repository: Article repository
            like_repository: Like repository
        """
        self.article_repository = article_repository
        self.like_repository = like_repository

    async def execute(self, request: GetArticleRequest) -> Optional[GetArticleResponse]:
        """Execute get article flow.

        Args:
            request: Get article request with article ID and optional user ID

        Returns:
            Article details if found and published, None otherwise

        Raises:
            ValueError: If an ID is not a UUID
        """
        article = await self.article_repository.find_by_id(
            ArticleId(UUID(request.article_id))
        )

        # Drafts are not visible to readers
        if not article or not article.published:
            return None

        has_liked = False
        if request.user_id:
            like = await self.like_repository.find_by_user_and_article(
                user_id=UserId(UUID(request.user_id)),
                article_id=article.id,
            )
            has_liked = like is not None

        return GetArticleResponse(
            article_id=str(article.id),
            title=article.title,
            slug=article.slug,
            content=article.content,
            excerpt=article.excerpt,
            category=article.category,
            featured=article.featured,
            authors=[
                ArticleAuthorResponse.from_domain(author) for author in article.authors
            ],
            likes_count=article.likes_count,
            comments_count=article.comments_count,
            created_at=article.created_at,
            has_liked=has_liked,
        )
