"""In-memory repository implementations."""

from .article import InMemoryArticleRepository
from .comment import InMemoryCommentRepository
from .like import InMemoryLikeRepository
from .rate_limit import InMemoryRateLimitStore

__all__ = [
    "InMemoryArticleRepository",
    "InMemoryCommentRepository",
    "InMemoryLikeRepository",
    "InMemoryRateLimitStore",
]
