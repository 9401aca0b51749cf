"""Unit tests for row to domain model mappers."""

from datetime import datetime
from uuid import uuid4

from derecho.persistence.mappers import (
    article_to_dict,
    row_to_article,
    row_to_article_author,
    row_to_comment,
)


def comment_row(**overrides):
    row = {
        "id": uuid4(),
        "article_id": uuid4(),
        "author_id": uuid4(),
        "parent_id": None,
        "content": "Comentario",
        "created_at": datetime(2024, 3, 1, 12, 0, 0),
        "display_name": "Ana",
    }
    row.update(overrides)
    return row


class TestRowToComment:
    def test_long_stored_comment_is_read(self):
        """Stored rows are not held to the creation length limit."""
        comment = row_to_comment(comment_row(content="a" * 10001))

        assert len(comment.content) == 10001

    def test_string_ids_and_parent(self):
        parent_id = uuid4()

        comment = row_to_comment(
            comment_row(id=str(uuid4()), parent_id=str(parent_id))
        )

        assert comment.parent_id == parent_id
        assert comment.author_display_name == "Ana"


class TestRowToArticle:
    def test_article_with_authors(self):
        profile_id = uuid4()
        author = row_to_article_author(
            {
                "profile_id": profile_id,
                "display_name": "María",
                "bio": None,
                "avatar_url": None,
                "is_primary_author": True,
            }
        )

        article = row_to_article(
            {
                "id": uuid4(),
                "title": "Tutela",
                "published": True,
                "featured": None,
                "likes_count": None,
                "created_at": datetime(2024, 3, 1),
            },
            [author],
        )

        assert article.published
        assert not article.featured
        assert article.likes_count == 0
        assert article.authors[0].id == profile_id
        assert "authors" not in article_to_dict(article)
