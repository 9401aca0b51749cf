"""Article like domain service."""

from datetime import datetime
from uuid import uuid4

import logfire
from sqlalchemy.exc import IntegrityError

from derecho.domain.error import NotFoundError
from derecho.domain.model.like import ArticleLike
from derecho.domain.repository import ArticleRepository, LikeRepository
from derecho.domain.value import ArticleId, LikeId, UserId

from .base import Service


class LikeService(Service):
    """Domain service for article likes."""

    def __init__(
        self,
        like_repository: LikeRepository,
        article_repository: ArticleRepository,
    ) -> None:
        """Initialize like service.

        Args:
            like_repository: Like repository
            article_repository: Article repository (for the likes counter)
        """
        self.like_repository = like_repository
        self.article_repository = article_repository

    async def toggle_like(self, article_id: ArticleId, user_id: UserId) -> bool:
        """Like the article, or remove the like if it already exists.

        The article's likes counter is adjusted in the same transaction.

        Args:
            article_id: Article ID
            user_id: User ID

        Returns:
            True if the article is now liked, False if the like was removed

        Raises:
            NotFoundError: If the article does not exist or is not published
        """
        with logfire.span(
            "like_service.toggle_like", article_id=str(article_id), user_id=str(user_id)
        ):
            article = await self.article_repository.find_by_id(article_id)
            if not article or not article.published:
                logfire.warn(
                    "Like on missing or unpublished article",
                    article_id=str(article_id),
                )
                raise NotFoundError("Article", str(article_id))

            removed = await self.like_repository.delete_by_user_and_article(
                user_id=user_id, article_id=article_id
            )
            if removed:
                await self.article_repository.decrement_likes(article_id)
                logfire.info(
                    "Article unliked", article_id=str(article_id), user_id=str(user_id)
                )
                return False

            like = ArticleLike(
                id=LikeId(uuid4()),
                article_id=article_id,
                user_id=user_id,
                created_at=datetime.now(),
            )
            try:
                await self.like_repository.save(like)
            except IntegrityError:
                # A concurrent request liked it first; the like stands
                logfire.warn(
                    "Duplicate like attempt",
                    article_id=str(article_id),
                    user_id=str(user_id),
                )
                return True

            await self.article_repository.increment_likes(article_id)
            logfire.info("Article liked", article_id=str(article_id), user_id=str(user_id))
            return True

    async def has_liked(self, article_id: ArticleId, user_id: UserId) -> bool:
        """Check whether a user has liked an article."""
        like = await self.like_repository.find_by_user_and_article(
            user_id=user_id, article_id=article_id
        )
        return like is not None

    async def count_likes(self, article_id: ArticleId) -> int:
        """Count likes on an article."""
        return await self.like_repository.count_by_article(article_id)
