"""Resend verification email use case."""

from enum import Enum

import logfire
from pydantic import BaseModel

from derecho.adapter.error import ProviderError
from derecho.application.usecase.base import BaseUseCase
from derecho.domain.service import (
    EmailService,
    RateLimiter,
    VerificationService,
    email_resend_key,
)
from derecho.domain.value import Email

MSG_SENT = "Correo de verificación reenviado. Revisa tu bandeja de entrada."
MSG_SEND_FAILED = "Error al reenviar el correo. Por favor intenta nuevamente."


class ResendOutcome(str, Enum):
    """How a resend request ended."""

    SENT = "sent"
    INVALID_EMAIL = "invalid_email"
    RATE_LIMITED = "rate_limited"
    PROVIDER_ERROR = "provider_error"


class ResendVerificationRequest(BaseModel):
    """Resend verification request."""

    email: str


class ResendVerificationResponse(BaseModel):
    """Resend verification response.

    ``remaining_attempts`` and ``reset_time`` are only set once the email
    passed validation and an attempt was counted (or refused).
    """

    outcome: ResendOutcome
    sent: bool
    message: str | None = None
    error: str | None = None
    corrected_email: str | None = None
    remaining_attempts: int | None = None
    reset_time: int | None = None


class ResendVerificationUseCase(BaseUseCase):
    """Use case for resending the sign-up confirmation email."""

    def __init__(
        self,
        email_service: EmailService,
        rate_limiter: RateLimiter,
        verification_service: VerificationService,
    ) -> None:
        """Initialize resend verification use case.

        Args:
            email_service: Email validation domain service
            rate_limiter: Process-wide resend rate limiter
            verification_service: Email verification domain service
        """
        self.email_service = email_service
        self.rate_limiter = rate_limiter
        self.verification_service = verification_service

    async def execute(
        self, request: ResendVerificationRequest
    ) -> ResendVerificationResponse:
        """Execute resend flow.

        Steps:
        1. Validate the address (an invalid one does not spend an attempt)
        2. Consume one attempt for the address
        3. If refused, return the limiter's message without contacting the
           auth service
        4. Ask the auth service to resend; a failure keeps the attempt spent

        Args:
            request: Resend request with the raw email

        Returns:
            Outcome with the user-facing message and remaining attempts
        """
        validation = self.email_service.validate_email(request.email)
        if not validation.is_valid:
            return ResendVerificationResponse(
                outcome=ResendOutcome.INVALID_EMAIL,
                sent=False,
                error=validation.error,
                corrected_email=validation.corrected_email,
            )

        email = Email(validation.corrected_email)
        status = self.rate_limiter.consume(email_resend_key(email.root))
        if not status.is_allowed:
            return ResendVerificationResponse(
                outcome=ResendOutcome.RATE_LIMITED,
                sent=False,
                error=status.message,
                remaining_attempts=status.remaining_attempts,
                reset_time=status.reset_time,
            )

        try:
            await self.verification_service.resend_signup_email(email)
        except ProviderError as e:
            logfire.error(
                "Verification resend failed",
                email_domain=email.domain,
                error=str(e),
            )
            return ResendVerificationResponse(
                outcome=ResendOutcome.PROVIDER_ERROR,
                sent=False,
                error=MSG_SEND_FAILED,
                remaining_attempts=status.remaining_attempts,
                reset_time=status.reset_time,
            )

        return ResendVerificationResponse(
            outcome=ResendOutcome.SENT,
            sent=True,
            message=MSG_SENT,
            remaining_attempts=status.remaining_attempts,
            reset_time=status.reset_time,
        )
