"""PostgreSQL repository implementations."""

from .article import PostgresArticleRepository
from .comment import PostgresCommentRepository
from .like import PostgresLikeRepository

__all__ = [
    "PostgresArticleRepository",
    "PostgresCommentRepository",
    "PostgresLikeRepository",
]
