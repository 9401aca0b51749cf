"""Mappers for converting between database rows and domain models.

Rows are validated here, once, into immutable pydantic models; nothing
loosely typed travels past this module.
"""

from typing import Any, Dict, List, Optional
from uuid import UUID

from derecho.domain.model import Article, ArticleAuthor, ArticleLike, Comment
from derecho.domain.value import ArticleId, CommentId, LikeId, UserId


def _uuid(value: Any) -> UUID:
    """Accept UUIDs as returned by asyncpg or as strings."""
    return UUID(value) if isinstance(value, str) else value


def row_to_comment(row: Dict[str, Any]) -> Comment:
    """Convert database row to Comment domain model.

    Args:
        row: Comment row, optionally joined with the author's display name

    Returns:
        Comment domain model
    """
    parent_id = row.get("parent_id")
    return Comment(
        id=CommentId(_uuid(row["id"])),
        article_id=ArticleId(_uuid(row["article_id"])),
        author_id=UserId(_uuid(row["author_id"])),
        content=row["content"],
        parent_id=CommentId(_uuid(parent_id)) if parent_id else None,
        created_at=row["created_at"],
        author_display_name=row.get("display_name"),
    )


def comment_to_dict(comment: Comment) -> Dict[str, Any]:
    """Convert Comment domain model to database dict.

    The display name lives on the profile, not the comment row.
    """
    return comment.model_dump(exclude={"author_display_name"})


def row_to_article(
    row: Dict[str, Any], authors: Optional[List[ArticleAuthor]] = None
) -> Article:
    """Convert database row to Article domain model.

    Args:
        row: Article row
        authors: Authors loaded from ``article_authors``, primary first

    Returns:
        Article domain model
    """
    return Article(
        id=ArticleId(_uuid(row["id"])),
        title=row["title"],
        slug=row.get("slug"),
        content=row.get("content"),
        excerpt=row.get("excerpt"),
        category=row.get("category"),
        featured=bool(row.get("featured")),
        published=bool(row.get("published")),
        likes_count=row.get("likes_count") or 0,
        comments_count=row.get("comments_count") or 0,
        authors=authors or [],
        published_at=row.get("published_at"),
        created_at=row["created_at"],
    )


def row_to_article_author(row: Dict[str, Any]) -> ArticleAuthor:
    """Convert an ``article_authors`` row joined with its profile."""
    return ArticleAuthor(
        id=UserId(_uuid(row["profile_id"])),
        display_name=row.get("display_name"),
        bio=row.get("bio"),
        avatar_url=row.get("avatar_url"),
        is_primary_author=bool(row.get("is_primary_author")),
    )


def article_to_dict(article: Article) -> Dict[str, Any]:
    """Convert Article domain model to database dict.

    Authors live in ``article_authors``, not on the article row.
    """
    return article.model_dump(exclude={"authors"})


def row_to_like(row: Dict[str, Any]) -> ArticleLike:
    """Convert database row to ArticleLike domain model."""
    return ArticleLike(
        id=LikeId(_uuid(row["id"])),
        article_id=ArticleId(_uuid(row["article_id"])),
        user_id=UserId(_uuid(row["user_id"])),
        created_at=row["created_at"],
    )


def like_to_dict(like: ArticleLike) -> Dict[str, Any]:
    """Convert ArticleLike domain model to database dict."""
    return like.model_dump()
