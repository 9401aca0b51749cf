"""In-memory like repository for testing."""

from typing import List, Optional

from sqlalchemy.exc import IntegrityError

from derecho.domain.model.like import ArticleLike
from derecho.domain.repository.like import LikeRepository
from derecho.domain.value import ArticleId, UserId


class InMemoryLikeRepository(LikeRepository):
    """In-memory implementation of LikeRepository for testing."""

    def __init__(self) -> None:
        self._likes: list[ArticleLike] = []

    async def find_by_user_and_article(
        self, user_id: UserId, article_id: ArticleId
    ) -> Optional[ArticleLike]:
        """Find a user's like on an article."""
        for like in self._likes:
            if like.user_id == user_id and like.article_id == article_id:
                return like
        return None

    async def find_by_user_and_articles(
        self, user_id: UserId, article_ids: List[ArticleId]
    ) -> List[ArticleLike]:
        """Find a user's likes on several articles."""
        wanted = set(article_ids)
        return [
            like
            for like in self._likes
            if like.user_id == user_id and like.article_id in wanted
        ]

    async def save(self, like: ArticleLike) -> ArticleLike:
        """Save a like.

        Raises:
            IntegrityError: If like already exists (duplicate)
        """
        existing = await self.find_by_user_and_article(like.user_id, like.article_id)
        if existing:
            raise IntegrityError("Duplicate like", None, Exception())

        self._likes.append(like)
        return like

    async def delete_by_user_and_article(
        self, user_id: UserId, article_id: ArticleId
    ) -> bool:
        """Delete a user's like on an article."""
        for i, like in enumerate(self._likes):
            if like.user_id == user_id and like.article_id == article_id:
                self._likes.pop(i)
                return True
        return False

    async def count_by_article(self, article_id: ArticleId) -> int:
        """Count likes on an article."""
        return sum(1 for like in self._likes if like.article_id == article_id)
