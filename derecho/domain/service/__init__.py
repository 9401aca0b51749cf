"""Domain services."""

from .base import Service
from .comment_service import (
    CommentNode,
    CommentService,
    build_comment_tree,
    count_comment_nodes,
    walk_comment_tree,
)
from .email_service import EmailService, EmailValidationResult
from .jwt_service import JWTService
from .like_service import LikeService
from .rate_limit_service import RateLimiter, email_resend_key
from .verification_service import AuthClient, VerificationService

__all__ = [
    "AuthClient",
    "CommentNode",
    "CommentService",
    "EmailService",
    "EmailValidationResult",
    "JWTService",
    "LikeService",
    "RateLimiter",
    "Service",
    "VerificationService",
    "build_comment_tree",
    "count_comment_nodes",
    "email_resend_key",
    "walk_comment_tree",
]
