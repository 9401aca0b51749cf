"""List articles use case."""

import logfire
from datetime import datetime
from uuid import UUID

from pydantic import BaseModel, Field

from derecho.domain.model import ArticleAuthor
from derecho.domain.repository import ArticleRepository, LikeRepository
from derecho.domain.value import UserId


class ArticleAuthorResponse(BaseModel):
    """Article author in response."""

    author_id: str
    display_name: str
    bio: str | None
    avatar_url: str | None
    is_primary_author: bool

    @classmethod
    def from_domain(cls, author: ArticleAuthor) -> "ArticleAuthorResponse":
        return cls(
            author_id=str(author.id),
            display_name=author.display_name or "Autor",
            bio=author.bio,
            avatar_url=author.avatar_url,
            is_primary_author=author.is_primary_author,
        )


class ArticleListItem(BaseModel):
    """Article list item in response."""

    article_id: str
    title: str
    slug: str | None
    excerpt: str | None
    category: str | None
    featured: bool
    authors: list[ArticleAuthorResponse]
    likes_count: int
    comments_count: int
    created_at: datetime
    has_liked: bool


class ListArticlesRequest(BaseModel):
    """List articles request."""

    limit: int = Field(default=30, ge=1, le=100)
    offset: int = Field(default=0, ge=0)
    user_id: str | None = None  # Current user ID (if authenticated)


class ListArticlesResponse(BaseModel):
    """List articles response."""

    articles: list[ArticleListItem]
    total: int
    limit: int
    offset: int


class ListArticlesUseCase:
    """Use case for listing published articles, newest first."""

    def __init__(
        self, article_repository: ArticleRepository, like_repository: LikeRepository
    ) -> None:
        """Initialize list articles use case.

        Args:
            article_repository: Article repository
            like_repository: Like repository
        """
        self.article_repository = article_repository
        self.like_repository = like_repository

    async def execute(self, request: ListArticlesRequest) -> ListArticlesResponse:
        """Execute list articles flow.

        Args:
            request: List articles request with pagination

        Returns:
            Published articles, newest first
        """
        with logfire.span(
            "list_articles.execute", limit=request.limit, offset=request.offset
        ):
            total = await self.article_repository.count_published()
            articles = await self.article_repository.find_published(
                limit=request.limit, offset=request.offset
            )

            # Batch query for the caller's likes to avoid N+1
            liked_ids: set[str] = set()
            if request.user_id and articles:
                likes = await self.like_repository.find_by_user_and_articles(
                    user_id=UserId(UUID(request.user_id)),
                    article_ids=[article.id for article in articles],
                )
                liked_ids = {str(like.article_id) for like in likes}

            items = [
                ArticleListItem(
                    article_id=str(article.id),
                    title=article.title,
                    slug=article.slug,
                    excerpt=article.excerpt,
                    category=article.category,
                    featured=article.featured,
                    authors=[
                        ArticleAuthorResponse.from_domain(author)
                        for author in article.authors
                    ],
                    likes_count=article.likes_count,
                    comments_count=article.comments_count,
                    created_at=article.created_at,
                    has_liked=str(article.id) in liked_ids,
                )
                for article in articles
            ]

            logfire.info("Articles listed", count=len(items), total=total)

            return ListArticlesResponse(
                articles=items,
                total=total,
                limit=request.limit,
                offset=request.offset,
            )
