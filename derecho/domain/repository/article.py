"""Article repository interface."""

from abc import ABC, abstractmethod
from typing import List, Optional

from derecho.domain.model.article import Article
from derecho.domain.value import ArticleId


class ArticleRepository(ABC):
    """Repository for Article entity.

    Articles are authored elsewhere; this service only reads them and keeps
    their denormalised counters in step.
    """

    @abstractmethod
    async def find_by_id(self, article_id: ArticleId) -> Optional[Article]:
        """Find an article by ID."""
        pass

    @abstractmethod
    async def find_published(self, limit: int = 30, offset: int = 0) -> List[Article]:
        """Find published articles, newest first.

        Args:
            limit: Maximum number of articles to return
            offset: Number of articles to skip

        Returns:
            Published articles with their authors
        """
        pass

    @abstractmethod
    async def count_published(self) -> int:
        """Count published articles."""
        pass

    @abstractmethod
    async def save(self, article: Article) -> Article:
        """Save an article (create or update)."""
        pass

    @abstractmethod
    async def increment_likes(self, article_id: ArticleId) -> None:
        """Atomically increment the likes counter."""
        pass

    @abstractmethod
    async def decrement_likes(self, article_id: ArticleId) -> None:
        """Atomically decrement the likes counter (minimum 0)."""
        pass

    @abstractmethod
    async def increment_comments(self, article_id: ArticleId) -> None:
        """Atomically increment the comments counter."""
        pass
