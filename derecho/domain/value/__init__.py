"""Domain value objects for Derecho en Perspectiva."""

from derecho.domain.value.identifiers import ArticleId, CommentId, LikeId, UserId
from derecho.domain.value.types import Email, OrphanPolicy, VerificationType

__all__ = [
    # Identifiers
    "UserId",
    "ArticleId",
    "CommentId",
    "LikeId",
    # Types
    "Email",
    "OrphanPolicy",
    "VerificationType",
]
