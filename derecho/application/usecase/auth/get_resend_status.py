"""Get resend status use case."""

from pydantic import BaseModel

from derecho.domain.service import RateLimiter, email_resend_key
from derecho.domain.value import Email


class GetResendStatusRequest(BaseModel):
    """Get resend status request."""

    email: str


class GetResendStatusResponse(BaseModel):
    """Get resend status response."""

    is_allowed: bool
    remaining_attempts: int
    reset_time: int | None = None
    message: str | None = None


class GetResendStatusUseCase:
    """Use case for showing remaining resend attempts without spending one.

    Used on page load to pre-populate the resend form.
    """

    def __init__(self, rate_limiter: RateLimiter) -> None:
        self.rate_limiter = rate_limiter

    async def execute(self, request: GetResendStatusRequest) -> GetResendStatusResponse:
        """Peek at the limiter for the address.

        Raises:
            ValueError: If the address is malformed
        """
        email = Email(request.email)
        status = self.rate_limiter.peek(email_resend_key(email.root))
        return GetResendStatusResponse(
            is_allowed=status.is_allowed,
            remaining_attempts=status.remaining_attempts,
            reset_time=status.reset_time,
            message=status.message,
        )
