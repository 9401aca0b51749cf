"""In-memory article repository for testing."""

from typing import List, Optional

from derecho.domain.model.article import Article
from derecho.domain.repository.article import ArticleRepository
from derecho.domain.value import ArticleId


class InMemoryArticleRepository(ArticleRepository):
    """In-memory implementation of ArticleRepository for testing."""

    def __init__(self) -> None:
        self._articles: dict[ArticleId, Article] = {}

    async def find_by_id(self, article_id: ArticleId) -> Optional[Article]:
        """Find an article by ID."""
        return self._articles.get(article_id)

    async def find_published(self, limit: int = 30, offset: int = 0) -> List[Article]:
        """Find published articles, newest first."""
        published = [a for a in self._articles.values() if a.published]
        published.sort(key=lambda a: a.created_at, reverse=True)
        return published[offset : offset + limit]

    async def count_published(self) -> int:
        """Count published articles."""
        return sum(1 for a in self._articles.values() if a.published)

    async def save(self, article: Article) -> Article:
        """Save or update an article."""
        self._articles[article.id] = article
        return article

    async def increment_likes(self, article_id: ArticleId) -> None:
        """Increment likes by 1."""
        article = self._articles.get(article_id)
        if article:
            self._articles[article_id] = article.model_copy(
                update={"likes_count": article.likes_count + 1}
            )

    async def decrement_likes(self, article_id: ArticleId) -> None:
        """Decrement likes by 1 (minimum 0)."""
        article = self._articles.get(article_id)
        if article and article.likes_count > 0:
            self._articles[article_id] = article.model_copy(
                update={"likes_count": article.likes_count - 1}
            )

    async def increment_comments(self, article_id: ArticleId) -> None:
        """Increment comments by 1."""
        article = self._articles.get(article_id)
        if article:
            self._articles[article_id] = article.model_copy(
                update={"comments_count": article.comments_count + 1}
            )
