"""SQLAlchemy table definitions for Derecho en Perspectiva.

The schema is owned by the hosted backend (including row-level security
and the counter functions); these definitions mirror the columns this
service reads and writes.
"""

from sqlalchemy import (
    Boolean,
    CheckConstraint,
    Column,
    ForeignKey,
    Index,
    Integer,
    MetaData,
    String,
    Table,
    Text,
    UniqueConstraint,
)
from sqlalchemy.dialects.postgresql import TIMESTAMP, UUID

# Metadata object for all tables
metadata = MetaData()

# ============================================================================
# PROFILES TABLE (one row per auth account)
# ============================================================================
profiles_table = Table(
    "profiles",
    metadata,
    Column("id", UUID, primary_key=True),  # Same as the auth account ID
    Column("display_name", String(255), nullable=True),
    Column("bio", Text, nullable=True),
    Column("avatar_url", String(500), nullable=True),
    Column("email", String(255), nullable=True),
    Column(
        "created_at", TIMESTAMP(timezone=True), nullable=False, server_default="NOW()"
    ),
    Column(
        "updated_at", TIMESTAMP(timezone=True), nullable=False, server_default="NOW()"
    ),
)

# ============================================================================
# ARTICLES TABLE
# ============================================================================
articles_table = Table(
    "articles",
    metadata,
    Column("id", UUID, primary_key=True, server_default="gen_random_uuid()"),
    Column("title", String(300), nullable=False),
    Column("slug", String(300), nullable=True),
    Column("content", Text, nullable=True),
    Column("excerpt", Text, nullable=True),
    Column("category", String(100), nullable=True),
    Column("featured", Boolean, nullable=False, server_default="false"),
    Column("published", Boolean, nullable=False, server_default="false"),
    Column("likes_count", Integer, nullable=False, server_default="0"),
    Column("comments_count", Integer, nullable=False, server_default="0"),
    Column("published_at", TIMESTAMP(timezone=True), nullable=True),
    Column(
        "created_at", TIMESTAMP(timezone=True), nullable=False, server_default="NOW()"
    ),
    CheckConstraint("likes_count >= 0", name="likes_count_non_negative"),
)

Index(
    "idx_articles_published_created_at",
    articles_table.c.published,
    articles_table.c.created_at.desc(),
)

# ============================================================================
# ARTICLE_AUTHORS TABLE (many-to-many: articles <-> profiles)
# ============================================================================
article_authors_table = Table(
    "article_authors",
    metadata,
    Column(
        "article_id",
        UUID,
        ForeignKey("articles.id", ondelete="CASCADE"),
        primary_key=True,
    ),
    Column(
        "profile_id",
        UUID,
        ForeignKey("profiles.id", ondelete="CASCADE"),
        primary_key=True,
    ),
    Column("is_primary_author", Boolean, nullable=False, server_default="false"),
)

Index("idx_article_authors_article_id", article_authors_table.c.article_id)

# ============================================================================
# COMMENTS TABLE
# ============================================================================
comments_table = Table(
    "comments",
    metadata,
    Column("id", UUID, primary_key=True, server_default="gen_random_uuid()"),
    Column(
        "article_id",
        UUID,
        ForeignKey("articles.id", ondelete="CASCADE"),
        nullable=False,
    ),
    Column(
        "author_id",
        UUID,
        ForeignKey("profiles.id", name="comments_author_id_fkey", ondelete="CASCADE"),
        nullable=False,
    ),
    # Not a foreign key: replies may outlive a deleted parent (orphans)
    Column("parent_id", UUID, nullable=True),
    Column("content", Text, nullable=False),
    Column(
        "created_at", TIMESTAMP(timezone=True), nullable=False, server_default="NOW()"
    ),
)

Index("idx_comments_article_id", comments_table.c.article_id)
Index("idx_comments_parent_id", comments_table.c.parent_id)
Index("idx_comments_created_at", comments_table.c.created_at)

# ============================================================================
# ARTICLE_LIKES TABLE
# ============================================================================
article_likes_table = Table(
    "article_likes",
    metadata,
    Column("id", UUID, primary_key=True, server_default="gen_random_uuid()"),
    Column(
        "article_id",
        UUID,
        ForeignKey("articles.id", ondelete="CASCADE"),
        nullable=False,
    ),
    Column(
        "user_id", UUID, ForeignKey("profiles.id", ondelete="CASCADE"), nullable=False
    ),
    Column(
        "created_at", TIMESTAMP(timezone=True), nullable=False, server_default="NOW()"
    ),
    UniqueConstraint("article_id", "user_id", name="uq_article_like"),
)

Index("idx_article_likes_article_id", article_likes_table.c.article_id)
