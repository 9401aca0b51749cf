"""Domain layer DI providers."""

from dishka import Scope, provide

from derecho.config import AuthSettings
from derecho.domain.repository import (
    ArticleRepository,
    CommentRepository,
    LikeRepository,
)
from derecho.domain.service import (
    AuthClient,
    CommentService,
    EmailService,
    JWTService,
    LikeService,
    VerificationService,
)
from derecho.util.di.base import ProviderBase


class ProdDomainProvider(ProviderBase):
    """Production domain services provider - concrete, no mocks needed.

    Domain services are REQUEST-scoped to align with repository/session lifecycle.
    Each HTTP request gets fresh service instances with their own transaction.
    """

    scope = Scope.REQUEST

    @provide
    def get_jwt_service(self, auth_settings: AuthSettings) -> JWTService:
        """Provide JWT token domain service."""
        return JWTService(auth_settings=auth_settings)

    @provide
    def get_comment_service(
        self, comment_repository: CommentRepository
    ) -> CommentService:
        """Provide comment domain service."""
        return CommentService(comment_repository=comment_repository)

    @provide
    def get_like_service(
        self,
        like_repository: LikeRepository,
        article_repository: ArticleRepository,
    ) -> LikeService:
        """Provide like domain service."""
        return LikeService(
            like_repository=like_repository, article_repository=article_repository
        )

    @provide
    def get_email_service(self) -> EmailService:
        """Provide email validation domain service."""
        return EmailService()

    @provide
    def get_verification_service(
        self, auth_client: AuthClient, auth_settings: AuthSettings
    ) -> VerificationService:
        """Provide email verification domain service."""
        return VerificationService(
            auth_client=auth_client,
            email_redirect_url=auth_settings.email_redirect_url,
        )
