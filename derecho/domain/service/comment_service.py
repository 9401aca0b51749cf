"""Comment domain service."""

from dataclasses import dataclass, field
from datetime import datetime
from typing import Iterable, Iterator
from uuid import uuid4

import logfire

from derecho.domain.error import ValidationError
from derecho.domain.model.comment import Comment
from derecho.domain.repository import CommentRepository
from derecho.domain.value import ArticleId, CommentId, OrphanPolicy, UserId

from .base import Service

MAX_COMMENT_LENGTH = 10000


@dataclass
class CommentNode:
    """Node in a comment thread.

    Wraps a comment with its replies, oldest first. Nodes are rebuilt on
    every read and never persisted.
    """

    comment: Comment
    children: list["CommentNode"] = field(default_factory=list)


def build_comment_tree(
    comments: Iterable[Comment],
    orphan_policy: OrphanPolicy = OrphanPolicy.DROP,
) -> list[CommentNode]:
    """Build threads from a flat list of comments.

    Algorithm (two passes, O(n)):
    1. Create a node for every comment, indexed by comment ID
    2. Walk the input again: top-level comments become roots, replies are
       appended to their parent's children

    Input order is preserved among roots and among siblings, so a list
    ordered by ``created_at`` yields chronological threads.

    A reply whose parent is not in the input (e.g. the parent was deleted)
    is an orphan. With ``OrphanPolicy.DROP`` it is left out of the result;
    with ``OrphanPolicy.PROMOTE`` it becomes a root. Either way a warning
    is logged and no exception is raised.

    Args:
        comments: Comments ordered by creation time
        orphan_policy: What to do with orphaned replies

    Returns:
        Root nodes with replies populated recursively
    """
    comments = list(comments)
    nodes: dict[CommentId, CommentNode] = {
        comment.id: CommentNode(comment=comment) for comment in comments
    }

    roots: list[CommentNode] = []
    orphans: list[CommentId] = []
    for comment in comments:
        node = nodes[comment.id]
        if comment.parent_id is None:
            roots.append(node)
            continue

        parent = nodes.get(comment.parent_id)
        if parent is not None:
            parent.children.append(node)
        else:
            orphans.append(comment.id)
            if orphan_policy == OrphanPolicy.PROMOTE:
                roots.append(node)

    if orphans:
        logfire.warn(
            "Orphaned replies in comment thread",
            orphan_ids=[str(orphan_id) for orphan_id in orphans],
            orphan_policy=orphan_policy.value,
        )

    return roots


def count_comment_nodes(nodes: Iterable[CommentNode]) -> int:
    """Count every node in a forest, replies included.

    Uses an explicit stack, so reply chains of any depth are counted.
    """
    stack = list(nodes)
    count = 0
    while stack:
        node = stack.pop()
        count += 1
        stack.extend(node.children)
    return count


def walk_comment_tree(
    nodes: Iterable[CommentNode],
) -> Iterator[tuple[CommentNode, int]]:
    """Yield every node of a forest in thread order with its depth.

    Thread order is depth-first: each comment is followed by its replies
    (oldest first) before its next sibling. Roots have depth 0.
    """
    stack = [(node, 0) for node in reversed(list(nodes))]
    while stack:
        node, depth = stack.pop()
        yield node, depth
        stack.extend((child, depth + 1) for child in reversed(node.children))


class CommentService(Service):
    """Domain service for comment operations."""

    def __init__(self, comment_repository: CommentRepository) -> None:
        """Initialize comment service.

        Args:
            comment_repository: Comment repository
        """
        self.comment_repository = comment_repository

    async def create_comment(
        self,
        article_id: ArticleId,
        author_id: UserId,
        content: str,
        parent_id: CommentId | None = None,
    ) -> Comment:
        """Create a comment on an article or reply to another comment.

        Args:
            article_id: Article ID
            author_id: Author user ID
            content: Comment text (surrounding whitespace is stripped)
            parent_id: Parent comment ID for replies (None for top-level)

        Returns:
            Created comment

        Raises:
            ValidationError: If the content is blank or too long
            ValueError: If parent comment invalid
        """
        with logfire.span(
            "comment_service.create_comment",
            article_id=str(article_id),
            author_id=str(author_id),
            parent_id=str(parent_id) if parent_id else None,
        ):
            content = content.strip()
            if not content:
                raise ValidationError("Comment content cannot be empty")
            if len(content) > MAX_COMMENT_LENGTH:
                raise ValidationError(
                    f"Comment content cannot exceed {MAX_COMMENT_LENGTH} characters"
                )

            if parent_id:
                parent = await self.comment_repository.find_by_id(parent_id)
                if not parent:
                    logfire.error(
                        "Parent comment not found",
                        parent_id=str(parent_id),
                        article_id=str(article_id),
                    )
                    raise ValueError("Parent comment not found")
                if parent.article_id != article_id:
                    logfire.error(
                        "Parent comment does not belong to article",
                        parent_id=str(parent_id),
                        parent_article_id=str(parent.article_id),
                        target_article_id=str(article_id),
                    )
                    raise ValueError("Parent comment does not belong to this article")

            comment = Comment(
                id=CommentId(uuid4()),
                article_id=article_id,
                author_id=author_id,
                content=content,
                parent_id=parent_id,
                created_at=datetime.now(),
            )

            saved = await self.comment_repository.save(comment)
            logfire.info(
                "Comment created",
                comment_id=str(saved.id),
                article_id=str(article_id),
                is_reply=saved.is_reply,
            )
            return saved

    async def get_comment_by_id(self, comment_id: CommentId) -> Comment | None:
        """Get a comment by ID.

        Args:
            comment_id: Comment ID

        Returns:
            Comment if found, None otherwise
        """
        with logfire.span(
            "comment_service.get_comment_by_id", comment_id=str(comment_id)
        ):
            comment = await self.comment_repository.find_by_id(comment_id)
            if comment:
                logfire.info("Comment found", comment_id=str(comment_id))
            else:
                logfire.warn("Comment not found", comment_id=str(comment_id))
            return comment

    async def get_comments_for_article(self, article_id: ArticleId) -> list[Comment]:
        """Get all comments for an article, oldest first.

        Args:
            article_id: Article ID

        Returns:
            Flat list of comments ordered by creation time
        """
        with logfire.span(
            "comment_service.get_comments_for_article", article_id=str(article_id)
        ):
            comments = await self.comment_repository.find_by_article(article_id)
            logfire.info(
                "Comments retrieved for article",
                article_id=str(article_id),
                count=len(comments),
            )
            return comments

    async def get_comment_thread(
        self,
        article_id: ArticleId,
        orphan_policy: OrphanPolicy = OrphanPolicy.DROP,
    ) -> list[CommentNode]:
        """Get the threaded comments of an article.

        Args:
            article_id: Article ID
            orphan_policy: What to do with replies whose parent is missing

        Returns:
            Root comment nodes with replies nested under their parents
        """
        with logfire.span(
            "comment_service.get_comment_thread",
            article_id=str(article_id),
            orphan_policy=orphan_policy.value,
        ):
            comments = await self.get_comments_for_article(article_id)
            roots = build_comment_tree(comments, orphan_policy=orphan_policy)
            logfire.info(
                "Built comment thread",
                article_id=str(article_id),
                root_count=len(roots),
            )
            return roots
