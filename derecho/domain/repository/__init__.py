"""Repository interfaces for Derecho en Perspectiva domain.

Repository interfaces are defined in the domain layer (dependency inversion).
Implementations live in the infrastructure layer.
"""

from derecho.domain.repository.article import ArticleRepository
from derecho.domain.repository.comment import CommentRepository
from derecho.domain.repository.like import LikeRepository
from derecho.domain.repository.rate_limit import RateLimitStore

__all__ = [
    "ArticleRepository",
    "CommentRepository",
    "LikeRepository",
    "RateLimitStore",
]
