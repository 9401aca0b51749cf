"""Article like entity."""

from datetime import datetime

from pydantic import Field

from derecho.domain.model.common import DomainModel
from derecho.domain.value import ArticleId, LikeId, UserId


class ArticleLike(DomainModel):
    """A user's like on an article (at most one per user and article)."""

    id: LikeId
    article_id: ArticleId
    user_id: UserId
    created_at: datetime = Field(default_factory=datetime.now)
