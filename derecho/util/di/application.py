"""Application layer DI providers."""

from dishka import Scope, provide

from derecho.application.usecase.article import GetArticleUseCase, ListArticlesUseCase
from derecho.application.usecase.auth import (
    GetResendStatusUseCase,
    ResendVerificationUseCase,
    ValidateEmailUseCase,
    VerifyEmailUseCase,
)
from derecho.application.usecase.comment import (
    CreateCommentUseCase,
    GetCommentsUseCase,
)
from derecho.application.usecase.like import GetLikeStatusUseCase, ToggleLikeUseCase
from derecho.config import Settings
from derecho.domain.repository import ArticleRepository, LikeRepository
from derecho.domain.service import (
    CommentService,
    EmailService,
    LikeService,
    RateLimiter,
    VerificationService,
)
from derecho.domain.value import OrphanPolicy
from derecho.util.di.base import ProviderBase


class ProdApplicationProvider(ProviderBase):
    """Production application use cases provider - concrete, no mocks needed."""

    # Article use cases
    @provide(scope=Scope.REQUEST)
    def get_list_articles_use_case(
        self,
        article_repository: ArticleRepository,
        like_repository: LikeRepository,
    ) -> ListArticlesUseCase:
        """Provide list articles use case."""
        return ListArticlesUseCase(
            article_repository=article_repository,
            like_repository=like_repository,
        )

    @provide(scope=Scope.REQUEST)
    def get_get_article_use_case(
        self,
        article_repository: ArticleRepository,
        like_repository: LikeRepository,
    ) -> GetArticleUseCase:
        """Provide get article use case."""
        return GetArticleUseCase(
            article_repository=article_repository,
            like_repository=like_repository,
        )

    # Comment use cases
    @provide(scope=Scope.REQUEST)
    def get_get_comments_use_case(
        self, comment_service: CommentService, settings: Settings
    ) -> GetCommentsUseCase:
        """Provide get comments use case."""
        return GetCommentsUseCase(
            comment_service=comment_service,
            orphan_policy=OrphanPolicy(settings.comments.orphan_policy),
        )

    @provide(scope=Scope.REQUEST)
    def get_create_comment_use_case(
        self,
        comment_service: CommentService,
        article_repository: ArticleRepository,
    ) -> CreateCommentUseCase:
        """Provide create comment use case."""
        return CreateCommentUseCase(
            comment_service=comment_service,
            article_repository=article_repository,
        )

    # Like use cases
    @provide(scope=Scope.REQUEST)
    def get_toggle_like_use_case(self, like_service: LikeService) -> ToggleLikeUseCase:
        """Provide toggle like use case."""
        return ToggleLikeUseCase(like_service=like_service)

    @provide(scope=Scope.REQUEST)
    def get_get_like_status_use_case(
        self, like_service: LikeService
    ) -> GetLikeStatusUseCase:
        """Provide get like status use case."""
        return GetLikeStatusUseCase(like_service=like_service)

    # Auth use cases
    @provide(scope=Scope.REQUEST)
    def get_validate_email_use_case(
        self, email_service: EmailService
    ) -> ValidateEmailUseCase:
        """Provide validate email use case."""
        return ValidateEmailUseCase(email_service=email_service)

    @provide(scope=Scope.REQUEST)
    def get_resend_verification_use_case(
        self,
        email_service: EmailService,
        rate_limiter: RateLimiter,
        verification_service: VerificationService,
    ) -> ResendVerificationUseCase:
        """Provide resend verification use case."""
        return ResendVerificationUseCase(
            email_service=email_service,
            rate_limiter=rate_limiter,
            verification_service=verification_service,
        )

    @provide(scope=Scope.REQUEST)
    def get_get_resend_status_use_case(
        self, rate_limiter: RateLimiter
    ) -> GetResendStatusUseCase:
        """Provide get resend status use case."""
        return GetResendStatusUseCase(rate_limiter=rate_limiter)

    @provide(scope=Scope.REQUEST)
    def get_verify_email_use_case(
        self, verification_service: VerificationService
    ) -> VerifyEmailUseCase:
        """Provide verify email use case."""
        return VerifyEmailUseCase(verification_service=verification_service)
