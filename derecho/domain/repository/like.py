"""Article like repository interface."""

from abc import ABC, abstractmethod
from typing import List, Optional

from derecho.domain.model.like import ArticleLike
from derecho.domain.value import ArticleId, UserId


class LikeRepository(ABC):
    """Repository for ArticleLike entity."""

    @abstractmethod
    async def find_by_user_and_article(
        self, user_id: UserId, article_id: ArticleId
    ) -> Optional[ArticleLike]:
        """Find a user's like on an article.

        Args:
            user_id: The user's ID
            article_id: The article's ID

        Returns:
            The like if found, None otherwise
        """
        pass

    @abstractmethod
    async def find_by_user_and_articles(
        self, user_id: UserId, article_ids: List[ArticleId]
    ) -> List[ArticleLike]:
        """Find a user's likes on several articles in one query.

        Args:
            user_id: The user's ID
            article_ids: Article IDs to check

        Returns:
            Likes the user gave to any of the articles
        """
        pass

    @abstractmethod
    async def save(self, like: ArticleLike) -> ArticleLike:
        """Save a like (create).

        Raises:
            IntegrityError: If the user already liked the article
        """
        pass

    @abstractmethod
    async def delete_by_user_and_article(
        self, user_id: UserId, article_id: ArticleId
    ) -> bool:
        """Delete a user's like on an article.

        Returns:
            True if a like was deleted, False if none existed
        """
        pass

    @abstractmethod
    async def count_by_article(self, article_id: ArticleId) -> int:
        """Count likes on an article."""
        pass
