"""Validate email use case."""

from pydantic import BaseModel

from derecho.domain.service import EmailService


class ValidateEmailRequest(BaseModel):
    """Validate email request."""

    email: str


class ValidateEmailResponse(BaseModel):
    """Validate email response."""

    is_valid: bool
    error: str | None = None
    corrected_email: str | None = None
    is_suspicious: bool = False


class ValidateEmailUseCase:
    """Use case for checking an address before sign-up or resend."""

    def __init__(self, email_service: EmailService) -> None:
        self.email_service = email_service

    async def execute(self, request: ValidateEmailRequest) -> ValidateEmailResponse:
        result = self.email_service.validate_email(request.email)
        return ValidateEmailResponse(
            is_valid=result.is_valid,
            error=result.error,
            corrected_email=result.corrected_email,
            is_suspicious=self.email_service.is_suspicious_email(request.email),
        )
