"""Verify email use case."""

from pydantic import BaseModel

from derecho.adapter.error import ProviderError
from derecho.domain.service import VerificationService
from derecho.domain.value import Email, VerificationType

MSG_MISSING_TOKEN = "No se proporcionó un token de verificación."
MSG_INVALID_LINK = "El enlace de verificación no es válido o ha expirado."

RECOVERY_REDIRECT = "/auth/update-password"
DEFAULT_REDIRECT = "/articulos"


class VerifyEmailRequest(BaseModel):
    """Verify email request.

    Parameters come from the verification link in the email.
    """

    token_hash: str | None = None
    type: VerificationType = VerificationType.SIGNUP
    email: str | None = None


class VerifyEmailResponse(BaseModel):
    """Verify email response."""

    verified: bool
    redirect_to: str | None = None
    error: str | None = None


class VerifyEmailUseCase:
    """Use case for confirming a token from an email link."""

    def __init__(self, verification_service: VerificationService) -> None:
        self.verification_service = verification_service

    async def execute(self, request: VerifyEmailRequest) -> VerifyEmailResponse:
        """Execute verification flow.

        Steps:
        1. Reject a request without a token
        2. Verify the token with the auth service
        3. Send password recovery to the update-password page, anything
           else to the article list

        Args:
            request: Token hash, token type and optional email

        Returns:
            Verification result with the frontend path to redirect to
        """
        if not request.token_hash:
            return VerifyEmailResponse(verified=False, error=MSG_MISSING_TOKEN)

        email = Email(request.email) if request.email else None
        try:
            await self.verification_service.verify_token(
                request.token_hash, request.type, email
            )
        except ProviderError:
            return VerifyEmailResponse(verified=False, error=MSG_INVALID_LINK)

        if request.type == VerificationType.RECOVERY:
            return VerifyEmailResponse(verified=True, redirect_to=RECOVERY_REDIRECT)
        return VerifyEmailResponse(verified=True, redirect_to=DEFAULT_REDIRECT)
