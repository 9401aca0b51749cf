"""Test configuration and fixtures."""

from datetime import datetime, timedelta
from uuid import uuid4

import logfire
import pytest

from derecho.domain.model import Comment
from derecho.domain.value import ArticleId, CommentId, UserId

# Keep telemetry local during tests
logfire.configure(send_to_logfire=False, console=False)

BASE_TIME = datetime(2024, 3, 1, 12, 0, 0)


def make_comment(
    parent: Comment | None = None,
    article_id: ArticleId | None = None,
    minutes: int = 0,
    content: str = "Comentario de prueba",
    parent_id: CommentId | None = None,
) -> Comment:
    """Helper function to build comments for tests.

    Args:
        parent: Comment being replied to (sets parent_id and article_id)
        article_id: Article the comment belongs to (random if not given)
        minutes: Offset from BASE_TIME for created_at
        content: Comment text
        parent_id: Explicit parent ID, e.g. one that does not exist

    Returns:
        Comment entity
    """
    if parent is not None:
        parent_id = parent.id
        article_id = parent.article_id

    return Comment(
        id=CommentId(uuid4()),
        article_id=article_id or ArticleId(uuid4()),
        author_id=UserId(uuid4()),
        content=content,
        parent_id=parent_id,
        created_at=BASE_TIME + timedelta(minutes=minutes),
    )


class FakeClock:
    """Manually advanced clock returning epoch milliseconds."""

    def __init__(self, now_ms: int = 1_700_000_000_000) -> None:
        self.now_ms = now_ms

    def __call__(self) -> int:
        return self.now_ms

    def advance(self, ms: int) -> None:
        self.now_ms += ms


@pytest.fixture
def clock() -> FakeClock:
    """Fake clock for rate limiter tests."""
    return FakeClock()
