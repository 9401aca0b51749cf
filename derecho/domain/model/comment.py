"""Comment entity.

Comments are threaded discussions on articles with unlimited depth. Only
the direct parent is stored; threads are rebuilt on every read by the
comment tree builder.
"""

from datetime import datetime
from typing import Optional

from pydantic import Field

from derecho.domain.model.common import DomainModel
from derecho.domain.value import ArticleId, CommentId, UserId


class Comment(DomainModel):
    """Comment entity.

    Represents a comment on an article or a reply to another comment.

    - parent_id: Direct parent comment (None for top-level)
    - author_display_name: Joined from the author's profile, may be missing

    Stored content is taken as is; length rules apply when a comment is
    created (see CommentService.create_comment).
    """

    id: CommentId
    article_id: ArticleId
    author_id: UserId
    content: str
    parent_id: Optional[CommentId] = None
    created_at: datetime = Field(default_factory=datetime.now)
    author_display_name: Optional[str] = None

    @property
    def is_reply(self) -> bool:
        """Whether this comment answers another comment."""
        return self.parent_id is not None
