"""Domain models for Derecho en Perspectiva."""

from derecho.domain.model.article import Article, ArticleAuthor
from derecho.domain.model.comment import Comment
from derecho.domain.model.common import DomainModel
from derecho.domain.model.like import ArticleLike
from derecho.domain.model.rate_limit import RateLimitEntry, RateLimitStatus

__all__ = [
    "Article",
    "ArticleAuthor",
    "ArticleLike",
    "Comment",
    "DomainModel",
    "RateLimitEntry",
    "RateLimitStatus",
]
