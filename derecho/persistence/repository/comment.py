"""PostgreSQL implementation of Comment repository."""

from typing import List, Optional

from sqlalchemy import func, select
from sqlalchemy.ext.asyncio import AsyncSession

from derecho.domain.model import Comment
from derecho.domain.repository import CommentRepository
from derecho.domain.value import ArticleId, CommentId
from derecho.persistence.mappers import comment_to_dict, row_to_comment
from derecho.persistence.tables import comments_table, profiles_table


class PostgresCommentRepository(CommentRepository):
    """PostgreSQL implementation of CommentRepository."""

    def __init__(self, session: AsyncSession) -> None:
        """Initialize repository with database session.

        Args:
            session: SQLAlchemy async session
        """
        self.session = session

    def _select_with_author(self):
        """Comments joined with their author's display name."""
        return select(comments_table, profiles_table.c.display_name).select_from(
            comments_table.outerjoin(
                profiles_table, comments_table.c.author_id == profiles_table.c.id
            )
        )

    async def find_by_id(self, comment_id: CommentId) -> Optional[Comment]:
        """Find a comment by ID."""
        stmt = self._select_with_author().where(comments_table.c.id == comment_id)
        result = await self.session.execute(stmt)
        row = result.fetchone()
        return row_to_comment(row._asdict()) if row else None

    async def find_by_article(self, article_id: ArticleId) -> List[Comment]:
        """Find all comments for an article, oldest first."""
        stmt = (
            self._select_with_author()
            .where(comments_table.c.article_id == article_id)
            .order_by(comments_table.c.created_at.asc(), comments_table.c.id)
        )
        result = await self.session.execute(stmt)
        return [row_to_comment(row._asdict()) for row in result.fetchall()]

    async def save(self, comment: Comment) -> Comment:
        """Save a comment (create or update)."""
        existing = await self.find_by_id(comment.id)
        comment_dict = comment_to_dict(comment)

        if existing:
            stmt = (
                comments_table.update()
                .where(comments_table.c.id == comment.id)
                .values(**comment_dict)
            )
        else:
            stmt = comments_table.insert().values(**comment_dict)
        await self.session.execute(stmt)
        await self.session.flush()

        # Fetch back to pick up the author's display name
        return await self.find_by_id(comment.id) or comment

    async def count_by_article(self, article_id: ArticleId) -> int:
        """Count comments for an article."""
        stmt = (
            select(func.count())
            .select_from(comments_table)
            .where(comments_table.c.article_id == article_id)
        )
        result = await self.session.execute(stmt)
        return result.scalar() or 0
