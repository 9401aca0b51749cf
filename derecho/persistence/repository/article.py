"""PostgreSQL implementation of Article repository."""

from typing import Dict, List, Optional, Sequence

import logfire
from sqlalchemy import desc, func, select
from sqlalchemy.ext.asyncio import AsyncSession

from derecho.domain.model import Article, ArticleAuthor
from derecho.domain.repository import ArticleRepository
from derecho.domain.value import ArticleId
from derecho.persistence.mappers import (
    article_to_dict,
    row_to_article,
    row_to_article_author,
)
from derecho.persistence.tables import (
    article_authors_table,
    articles_table,
    profiles_table,
)


class PostgresArticleRepository(ArticleRepository):
    """PostgreSQL implementation of ArticleRepository."""

    def __init__(self, session: AsyncSession) -> None:
        """Initialize repository with database session.

        Args:
            session: SQLAlchemy async session
        """
        self.session = session

    async def _load_authors(
        self, article_ids: Sequence[ArticleId]
    ) -> Dict[ArticleId, List[ArticleAuthor]]:
        """Load the authors of several articles, primary author first."""
        if not article_ids:
            return {}

        stmt = (
            select(
                article_authors_table.c.article_id,
                article_authors_table.c.profile_id,
                article_authors_table.c.is_primary_author,
                profiles_table.c.display_name,
                profiles_table.c.bio,
                profiles_table.c.avatar_url,
            )
            .select_from(
                article_authors_table.join(
                    profiles_table,
                    article_authors_table.c.profile_id == profiles_table.c.id,
                )
            )
            .where(article_authors_table.c.article_id.in_(article_ids))
            .order_by(desc(article_authors_table.c.is_primary_author))
        )
        result = await self.session.execute(stmt)

        authors: Dict[ArticleId, List[ArticleAuthor]] = {}
        for row in result.fetchall():
            data = row._asdict()
            authors.setdefault(ArticleId(data["article_id"]), []).append(
                row_to_article_author(data)
            )
        return authors

    async def find_by_id(self, article_id: ArticleId) -> Optional[Article]:
        """Find an article by ID."""
        stmt = select(articles_table).where(articles_table.c.id == article_id)
        result = await self.session.execute(stmt)
        row = result.fetchone()
        if not row:
            return None

        authors = await self._load_authors([article_id])
        return row_to_article(row._asdict(), authors.get(article_id))

    async def find_published(self, limit: int = 30, offset: int = 0) -> List[Article]:
        """Find published articles, newest first."""
        with logfire.span(
            "article_repository.find_published", limit=limit, offset=offset
        ):
            stmt = (
                select(articles_table)
                .where(articles_table.c.published.is_(True))
                .order_by(desc(articles_table.c.created_at))
                .limit(limit)
                .offset(offset)
            )
            result = await self.session.execute(stmt)
            rows = [row._asdict() for row in result.fetchall()]

            # One query for all authors avoids N+1
            authors = await self._load_authors([row["id"] for row in rows])
            return [row_to_article(row, authors.get(row["id"])) for row in rows]

    async def count_published(self) -> int:
        """Count published articles."""
        stmt = (
            select(func.count())
            .select_from(articles_table)
            .where(articles_table.c.published.is_(True))
        )
        result = await self.session.execute(stmt)
        return result.scalar() or 0

    async def save(self, article: Article) -> Article:
        """Save an article (create or update)."""
        existing = await self.find_by_id(article.id)
        article_dict = article_to_dict(article)

        if existing:
            stmt = (
                articles_table.update()
                .where(articles_table.c.id == article.id)
                .values(**article_dict)
            )
        else:
            stmt = articles_table.insert().values(**article_dict)
        await self.session.execute(stmt)
        await self.session.flush()
        return article

    async def increment_likes(self, article_id: ArticleId) -> None:
        """Atomically increment likes by 1."""
        stmt = (
            articles_table.update()
            .where(articles_table.c.id == article_id)
            .values(likes_count=articles_table.c.likes_count + 1)
        )
        await self.session.execute(stmt)
        await self.session.flush()

    async def decrement_likes(self, article_id: ArticleId) -> None:
        """Atomically decrement likes by 1 (minimum 0)."""
        stmt = (
            articles_table.update()
            .where(articles_table.c.id == article_id)
            .where(articles_table.c.likes_count > 0)  # Don't go below 0
            .values(likes_count=articles_table.c.likes_count - 1)
        )
        await self.session.execute(stmt)
        await self.session.flush()

    async def increment_comments(self, article_id: ArticleId) -> None:
        """Atomically increment comments by 1."""
        stmt = (
            articles_table.update()
            .where(articles_table.c.id == article_id)
            .values(comments_count=articles_table.c.comments_count + 1)
        )
        await self.session.execute(stmt)
        await self.session.flush()
