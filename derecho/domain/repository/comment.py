"""Comment repository interface."""

from abc import ABC, abstractmethod
from typing import List, Optional

from derecho.domain.model.comment import Comment
from derecho.domain.value import ArticleId, CommentId


class CommentRepository(ABC):
    """Repository for Comment entity.

    Defines the contract for comment persistence operations.
    Implementations live in the infrastructure layer.
    """

    @abstractmethod
    async def find_by_id(self, comment_id: CommentId) -> Optional[Comment]:
        """Find a comment by ID.

        Args:
            comment_id: The comment's unique identifier

        Returns:
            The comment if found, None otherwise
        """
        pass

    @abstractmethod
    async def find_by_article(self, article_id: ArticleId) -> List[Comment]:
        """Find all comments for an article, oldest first.

        The flat list is ordered by ``created_at`` ascending, which is the
        order the comment tree builder expects.

        Args:
            article_id: The article ID

        Returns:
            List of comments ordered by creation time
        """
        pass

    @abstractmethod
    async def save(self, comment: Comment) -> Comment:
        """Save a comment (create or update).

        Args:
            comment: The comment to save

        Returns:
            The saved comment (with author display name populated)
        """
        pass

    @abstractmethod
    async def count_by_article(self, article_id: ArticleId) -> int:
        """Count comments for an article.

        Args:
            article_id: The article ID

        Returns:
            Number of comments
        """
        pass
