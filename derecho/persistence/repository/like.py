"""PostgreSQL implementation of Like repository."""

from typing import List, Optional

from sqlalchemy import func, select
from sqlalchemy.ext.asyncio import AsyncSession

from derecho.domain.model import ArticleLike
from derecho.domain.repository import LikeRepository
from derecho.domain.value import ArticleId, UserId
from derecho.persistence.mappers import like_to_dict, row_to_like
from derecho.persistence.tables import article_likes_table


class PostgresLikeRepository(LikeRepository):
    """PostgreSQL implementation of LikeRepository."""

    def __init__(self, session: AsyncSession) -> None:
        """Initialize repository with database session.

        Args:
            session: SQLAlchemy async session
        """
        self.session = session

    async def find_by_user_and_article(
        self, user_id: UserId, article_id: ArticleId
    ) -> Optional[ArticleLike]:
        """Find a user's like on an article."""
        stmt = (
            select(article_likes_table)
            .where(article_likes_table.c.user_id == user_id)
            .where(article_likes_table.c.article_id == article_id)
        )
        result = await self.session.execute(stmt)
        row = result.fetchone()
        return row_to_like(row._asdict()) if row else None

    async def find_by_user_and_articles(
        self, user_id: UserId, article_ids: List[ArticleId]
    ) -> List[ArticleLike]:
        """Find a user's likes on several articles in one query."""
        if not article_ids:
            return []

        stmt = (
            select(article_likes_table)
            .where(article_likes_table.c.user_id == user_id)
            .where(article_likes_table.c.article_id.in_(article_ids))
        )
        result = await self.session.execute(stmt)
        return [row_to_like(row._asdict()) for row in result.fetchall()]

    async def save(self, like: ArticleLike) -> ArticleLike:
        """Insert a like.

        Raises:
            IntegrityError: If the user already liked the article
        """
        stmt = article_likes_table.insert().values(**like_to_dict(like))
        await self.session.execute(stmt)
        await self.session.flush()
        return like

    async def delete_by_user_and_article(
        self, user_id: UserId, article_id: ArticleId
    ) -> bool:
        """Delete a user's like on an article."""
        stmt = (
            article_likes_table.delete()
            .where(article_likes_table.c.user_id == user_id)
            .where(article_likes_table.c.article_id == article_id)
        )
        result = await self.session.execute(stmt)
        await self.session.flush()
        return result.rowcount > 0

    async def count_by_article(self, article_id: ArticleId) -> int:
        """Count likes on an article."""
        stmt = (
            select(func.count())
            .select_from(article_likes_table)
            .where(article_likes_table.c.article_id == article_id)
        )
        result = await self.session.execute(stmt)
        return result.scalar() or 0
