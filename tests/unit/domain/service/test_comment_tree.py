"""Unit tests for the comment tree builder."""

from uuid import uuid4

import logfire

from derecho.domain.service import (
    build_comment_tree,
    count_comment_nodes,
    walk_comment_tree,
)
from derecho.domain.value import ArticleId, CommentId, OrphanPolicy
from tests.conftest import make_comment


def reply_chain(length):
    """A single thread where every comment answers the previous one."""
    chain = [make_comment(minutes=0)]
    for minutes in range(1, length):
        chain.append(make_comment(parent=chain[-1], minutes=minutes))
    return chain


def ids(nodes):
    return [node.comment.id for node in nodes]


class TestBuildCommentTree:
    """Tests for build_comment_tree()."""

    def test_empty_input_gives_empty_forest(self):
        assert build_comment_tree([]) == []

    def test_roots_only(self):
        """Top-level comments become roots in input order."""
        a = make_comment(minutes=0)
        b = make_comment(article_id=a.article_id, minutes=1)

        tree = build_comment_tree([a, b])

        assert ids(tree) == [a.id, b.id]
        assert all(node.children == [] for node in tree)

    def test_reply_attached_to_parent_and_root_order_kept(self):
        """[A, B, C(parent=A)] builds A{C}, B{}."""
        a = make_comment(minutes=0)
        b = make_comment(article_id=a.article_id, minutes=1)
        c = make_comment(parent=a, minutes=2)

        tree = build_comment_tree([a, b, c])

        assert ids(tree) == [a.id, b.id]
        assert ids(tree[0].children) == [c.id]
        assert tree[1].children == []

    def test_multi_level_nesting(self):
        """[A, B(parent=A), C(parent=B)] builds a single three-level chain."""
        a = make_comment(minutes=0)
        b = make_comment(parent=a, minutes=1)
        c = make_comment(parent=b, minutes=2)

        tree = build_comment_tree([a, b, c])

        assert ids(tree) == [a.id]
        assert ids(tree[0].children) == [b.id]
        assert ids(tree[0].children[0].children) == [c.id]
        assert tree[0].children[0].children[0].children == []

    def test_siblings_keep_input_order(self):
        a = make_comment(minutes=0)
        first = make_comment(parent=a, minutes=1)
        second = make_comment(parent=a, minutes=2)
        third = make_comment(parent=a, minutes=3)

        tree = build_comment_tree([a, first, second, third])

        assert ids(tree[0].children) == [first.id, second.id, third.id]

    def test_reply_listed_before_parent_is_still_attached(self):
        """Both passes see every record, so input position does not matter."""
        a = make_comment(minutes=0)
        reply = make_comment(parent=a, minutes=1)

        tree = build_comment_tree([reply, a])

        assert ids(tree) == [a.id]
        assert ids(tree[0].children) == [reply.id]

    def test_orphan_dropped_by_default(self):
        """A reply to a missing parent is left out without raising."""
        orphan = make_comment(parent_id=CommentId(uuid4()))

        assert build_comment_tree([orphan]) == []

    def test_orphan_subtree_dropped(self):
        """Replies under a dropped orphan are not reachable either."""
        orphan = make_comment(parent_id=CommentId(uuid4()))
        reply = make_comment(parent=orphan, minutes=1)
        root = make_comment(article_id=orphan.article_id, minutes=2)

        tree = build_comment_tree([orphan, reply, root])

        assert ids(tree) == [root.id]
        assert count_comment_nodes(tree) == 1

    def test_orphan_promoted_to_root(self):
        a = make_comment(minutes=0)
        orphan = make_comment(
            article_id=a.article_id, parent_id=CommentId(uuid4()), minutes=1
        )
        reply = make_comment(parent=orphan, minutes=2)

        tree = build_comment_tree([a, orphan, reply], orphan_policy=OrphanPolicy.PROMOTE)

        assert ids(tree) == [a.id, orphan.id]
        assert ids(tree[1].children) == [reply.id]
        assert count_comment_nodes(tree) == 3

    def test_orphans_logged_once_per_build(self, monkeypatch):
        warnings = []
        monkeypatch.setattr(
            logfire, "warn", lambda msg, **attrs: warnings.append((msg, attrs))
        )
        first = make_comment(parent_id=CommentId(uuid4()))
        second = make_comment(
            article_id=first.article_id, parent_id=CommentId(uuid4()), minutes=1
        )

        build_comment_tree([first, second])

        assert len(warnings) == 1
        _, attrs = warnings[0]
        assert attrs["orphan_ids"] == [str(first.id), str(second.id)]
        assert attrs["orphan_policy"] == "drop"

    def test_no_warning_without_orphans(self, monkeypatch):
        warnings = []
        monkeypatch.setattr(
            logfire, "warn", lambda msg, **attrs: warnings.append((msg, attrs))
        )
        a = make_comment()

        build_comment_tree([a, make_comment(parent=a, minutes=1)])

        assert warnings == []

    def test_input_records_are_not_mutated(self):
        a = make_comment(minutes=0)
        b = make_comment(parent=a, minutes=1)
        before = [a.model_dump(), b.model_dump()]

        tree = build_comment_tree([a, b])

        assert [a.model_dump(), b.model_dump()] == before
        assert tree[0].comment is a


class TestCountCommentNodes:
    """Tests for count_comment_nodes()."""

    def test_count_equals_input_length_without_orphans(self):
        article_id = ArticleId(uuid4())
        a = make_comment(article_id=article_id, minutes=0)
        b = make_comment(parent=a, minutes=1)
        c = make_comment(parent=b, minutes=2)
        d = make_comment(article_id=article_id, minutes=3)
        e = make_comment(parent=d, minutes=4)
        f = make_comment(parent=a, minutes=5)
        comments = [a, b, c, d, e, f]

        tree = build_comment_tree(comments)

        assert count_comment_nodes(tree) == len(comments)

    def test_count_is_less_than_input_with_dropped_orphans(self):
        a = make_comment()
        orphan = make_comment(article_id=a.article_id, parent_id=CommentId(uuid4()))

        tree = build_comment_tree([a, orphan])

        assert count_comment_nodes(tree) == 1

    def test_count_empty_forest(self):
        assert count_comment_nodes([]) == 0

    def test_count_deep_reply_chain(self):
        chain = reply_chain(3000)

        tree = build_comment_tree(chain)

        assert len(tree) == 1
        assert count_comment_nodes(tree) == 3000


class TestWalkCommentTree:
    """Tests for walk_comment_tree()."""

    def test_thread_order_and_depth(self):
        article_id = ArticleId(uuid4())
        a = make_comment(article_id=article_id, minutes=0)
        b = make_comment(parent=a, minutes=1)
        c = make_comment(parent=b, minutes=2)
        d = make_comment(article_id=article_id, minutes=3)
        e = make_comment(parent=a, minutes=4)

        walked = list(walk_comment_tree(build_comment_tree([a, b, c, d, e])))

        assert [(node.comment.id, depth) for node, depth in walked] == [
            (a.id, 0),
            (b.id, 1),
            (c.id, 2),
            (e.id, 1),
            (d.id, 0),
        ]

    def test_deep_reply_chain(self):
        chain = reply_chain(3000)

        walked = list(walk_comment_tree(build_comment_tree(chain)))

        assert [node.comment.id for node, _ in walked] == [c.id for c in chain]
        assert walked[-1][1] == 2999

    def test_empty_forest(self):
        assert list(walk_comment_tree([])) == []
