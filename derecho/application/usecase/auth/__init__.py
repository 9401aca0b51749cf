"""Authentication use cases."""

from .get_resend_status import GetResendStatusUseCase
from .resend_verification import ResendOutcome, ResendVerificationUseCase
from .validate_email import ValidateEmailUseCase
from .verify_email import VerifyEmailUseCase

__all__ = [
    "GetResendStatusUseCase",
    "ResendOutcome",
    "ResendVerificationUseCase",
    "ValidateEmailUseCase",
    "VerifyEmailUseCase",
]
