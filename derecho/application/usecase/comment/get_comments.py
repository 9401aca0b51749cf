"""Get comments use case."""

from datetime import datetime
from uuid import UUID

from pydantic import BaseModel

from derecho.domain.service import (
    CommentNode,
    CommentService,
    count_comment_nodes,
    walk_comment_tree,
)
from derecho.domain.value import ArticleId, OrphanPolicy


class CommentNodeResponse(BaseModel):
    """One comment of a thread, for API response.

    Threads are sent flat, in thread order: every comment is followed by its
    replies before its next sibling. ``depth`` is 0 for top-level comments
    (and promoted orphans) and grows by one per reply level.
    """

    comment_id: str
    article_id: str
    author_id: str
    author_display_name: str
    content: str
    parent_id: str | None
    depth: int
    reply_count: int
    created_at: datetime

    @classmethod
    def from_domain(cls, node: CommentNode, depth: int = 0) -> "CommentNodeResponse":
        """Convert domain CommentNode to response model.

        Args:
            node: Domain comment node
            depth: Nesting level of the node in its thread

        Returns:
            API response model for this comment only
        """
        comment = node.comment
        return cls(
            comment_id=str(comment.id),
            article_id=str(comment.article_id),
            author_id=str(comment.author_id),
            author_display_name=comment.author_display_name or "Usuario",
            content=comment.content,
            parent_id=str(comment.parent_id) if comment.parent_id else None,
            depth=depth,
            reply_count=len(node.children),
            created_at=comment.created_at,
        )


class GetCommentsRequest(BaseModel):
    """Get comments request."""

    article_id: str  # UUID string


class GetCommentsResponse(BaseModel):
    """Get comments response."""

    article_id: str
    comments: list[CommentNodeResponse]
    total: int


class GetCommentsUseCase:
    """Use case for getting the threaded comments of an article."""

    def __init__(
        self,
        comment_service: CommentService,
        orphan_policy: OrphanPolicy = OrphanPolicy.DROP,
    ) -> None:
        """Initialize get comments use case.

        Args:
            comment_service: Comment domain service
            orphan_policy: What to do with replies whose parent is missing
        """
        self.comment_service = comment_service
        self.orphan_policy = orphan_policy

    async def execute(self, request: GetCommentsRequest) -> GetCommentsResponse:
        """Execute get comments flow.

        Steps:
        1. Build the thread via the comment service
        2. Count every comment in it, replies at any depth included
        3. Flatten the threads into response models, in thread order

        Args:
            request: Get comments request with article ID

        Returns:
            Comments in thread order with their depth, and the total count

        Raises:
            ValueError: If the article ID is not a UUID
        """
        article_id = ArticleId(UUID(request.article_id))

        roots = await self.comment_service.get_comment_thread(
            article_id, orphan_policy=self.orphan_policy
        )

        return GetCommentsResponse(
            article_id=request.article_id,
            comments=[
                CommentNodeResponse.from_domain(node, depth)
                for node, depth in walk_comment_tree(roots)
            ],
            total=count_comment_nodes(roots),
        )
