"""Article entity."""

from datetime import datetime
from typing import Optional

from pydantic import Field

from derecho.domain.model.common import DomainModel
from derecho.domain.value import ArticleId, UserId


class ArticleAuthor(DomainModel):
    """Author credited on an article, joined from the author's profile."""

    id: UserId
    display_name: Optional[str] = None
    bio: Optional[str] = None
    avatar_url: Optional[str] = None
    is_primary_author: bool = False


class Article(DomainModel):
    """Legal article.

    Only published articles are shown to readers or accept comments and
    likes. Counters are denormalised on the row and maintained alongside
    likes and comments.

    - authors: Primary author first, then co-authors
    """

    id: ArticleId
    title: str = Field(min_length=1, max_length=300)
    slug: Optional[str] = None
    content: Optional[str] = None
    excerpt: Optional[str] = None
    category: Optional[str] = None
    featured: bool = False
    published: bool = False
    likes_count: int = Field(default=0, ge=0)
    comments_count: int = Field(default=0, ge=0)
    authors: list[ArticleAuthor] = Field(default_factory=list)
    published_at: Optional[datetime] = None
    created_at: datetime = Field(default_factory=datetime.now)
