"""In-memory comment repository for testing."""

from typing import Optional

from derecho.domain.model.comment import Comment
from derecho.domain.repository.comment import CommentRepository
from derecho.domain.value import ArticleId, CommentId


class InMemoryCommentRepository(CommentRepository):
    """In-memory implementation of CommentRepository for testing."""

    def __init__(self) -> None:
        self._comments: dict[CommentId, Comment] = {}

    async def find_by_id(self, comment_id: CommentId) -> Optional[Comment]:
        """Find a comment by ID."""
        return self._comments.get(comment_id)

    async def find_by_article(self, article_id: ArticleId) -> list[Comment]:
        """Find all comments for an article, oldest first."""
        comments = [c for c in self._comments.values() if c.article_id == article_id]
        # Stable sort keeps insertion order for equal timestamps
        comments.sort(key=lambda c: c.created_at)
        return comments

    async def save(self, comment: Comment) -> Comment:
        """Save or update a comment."""
        self._comments[comment.id] = comment
        return comment

    async def delete(self, comment_id: CommentId) -> None:
        """Delete a comment (used by tests to create orphans)."""
        self._comments.pop(comment_id, None)

    async def count_by_article(self, article_id: ArticleId) -> int:
        """Count comments for an article."""
        return sum(1 for c in self._comments.values() if c.article_id == article_id)
