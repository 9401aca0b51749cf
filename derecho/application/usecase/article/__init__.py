"""Article use cases."""

from .get_article import GetArticleRequest, GetArticleResponse, GetArticleUseCase
from .list_articles import (
    ArticleAuthorResponse,
    ArticleListItem,
    ListArticlesRequest,
    ListArticlesResponse,
    ListArticlesUseCase,
)

__all__ = [
    "ArticleAuthorResponse",
    "ArticleListItem",
    "GetArticleRequest",
    "GetArticleResponse",
    "GetArticleUseCase",
    "ListArticlesRequest",
    "ListArticlesResponse",
    "ListArticlesUseCase",
]
