"""Email verification domain service."""

import logfire

from derecho.domain.value import Email, VerificationType

from .base import Service


class AuthClient:
    """Interface to the hosted auth service's email flows."""

    async def resend_verification(self, email: Email, redirect_to: str) -> None:
        """Ask the auth service to send the sign-up confirmation email again.

        Args:
            email: Address the account was registered with
            redirect_to: URL the confirmation link should land on

        Raises:
            ProviderError: If the auth service rejects the request
        """
        raise NotImplementedError

    async def verify_otp(
        self,
        token_hash: str,
        verification_type: VerificationType,
        email: Email | None = None,
    ) -> None:
        """Confirm a one-time token from a verification link.

        Args:
            token_hash: Token hash from the link
            verification_type: Kind of token
            email: Address the token was sent to, if known

        Raises:
            ProviderError: If the token is invalid or expired
        """
        raise NotImplementedError


class VerificationService(Service):
    """Domain service for email verification.

    Only triggers the auth service; delivering mail is its job.
    """

    def __init__(self, auth_client: AuthClient, email_redirect_url: str) -> None:
        """Initialize verification service.

        Args:
            auth_client: Hosted auth service client
            email_redirect_url: Landing page for verification links
        """
        self.auth_client = auth_client
        self.email_redirect_url = email_redirect_url

    async def resend_signup_email(self, email: Email) -> None:
        """Resend the sign-up confirmation email.

        Args:
            email: Normalised address

        Raises:
            ProviderError: If the auth service fails
        """
        with logfire.span(
            "verification_service.resend_signup_email", email_domain=email.domain
        ):
            await self.auth_client.resend_verification(
                email, redirect_to=self.email_redirect_url
            )
            logfire.info("Verification email resent", email_domain=email.domain)

    async def verify_token(
        self,
        token_hash: str,
        verification_type: VerificationType,
        email: Email | None = None,
    ) -> None:
        """Verify a token from an email link.

        Raises:
            ProviderError: If the token is invalid or expired
        """
        with logfire.span(
            "verification_service.verify_token",
            verification_type=verification_type.value,
        ):
            await self.auth_client.verify_otp(token_hash, verification_type, email)
            logfire.info(
                "Verification token accepted",
                verification_type=verification_type.value,
            )
