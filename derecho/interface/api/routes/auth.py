"""Email verification routes.

Sign-up and sign-in happen client-side against the hosted auth service;
these routes cover what the site adds around them: address checks,
throttled resends of the confirmation email and link verification.
"""

from dishka.integrations.fastapi import DishkaRoute, FromDishka
from fastapi import APIRouter, HTTPException, status
from fastapi.responses import JSONResponse

from derecho.application.usecase.auth import (
    GetResendStatusUseCase,
    ResendOutcome,
    ResendVerificationUseCase,
    ValidateEmailUseCase,
    VerifyEmailUseCase,
)
from derecho.application.usecase.auth.get_resend_status import (
    GetResendStatusRequest,
    GetResendStatusResponse,
)
from derecho.application.usecase.auth.resend_verification import (
    ResendVerificationRequest,
    ResendVerificationResponse,
)
from derecho.application.usecase.auth.validate_email import (
    ValidateEmailRequest,
    ValidateEmailResponse,
)
from derecho.application.usecase.auth.verify_email import (
    VerifyEmailRequest,
    VerifyEmailResponse,
)

router = APIRouter(prefix="/auth", tags=["auth"], route_class=DishkaRoute)

RESEND_STATUS_CODES = {
    ResendOutcome.SENT: status.HTTP_200_OK,
    ResendOutcome.INVALID_EMAIL: status.HTTP_400_BAD_REQUEST,
    ResendOutcome.RATE_LIMITED: status.HTTP_429_TOO_MANY_REQUESTS,
    ResendOutcome.PROVIDER_ERROR: status.HTTP_502_BAD_GATEWAY,
}


@router.post("/email/validate", response_model=ValidateEmailResponse)
async def validate_email(
    request: ValidateEmailRequest,
    validate_email_use_case: FromDishka[ValidateEmailUseCase],
) -> ValidateEmailResponse:
    """Check an address for format, common domain typos and placeholders."""
    return await validate_email_use_case.execute(request)


@router.get("/verification/status", response_model=GetResendStatusResponse)
async def get_resend_status(
    email: str,
    get_resend_status_use_case: FromDishka[GetResendStatusUseCase],
) -> GetResendStatusResponse:
    """Report remaining resend attempts for an address without using one.

    Raises:
        HTTPException: If the address is malformed
    """
    try:
        return await get_resend_status_use_case.execute(
            GetResendStatusRequest(email=email)
        )
    except ValueError as e:
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail=str(e),
        )


@router.post(
    "/verification/resend",
    response_model=ResendVerificationResponse,
    responses={
        400: {"model": ResendVerificationResponse},
        429: {"model": ResendVerificationResponse},
        502: {"model": ResendVerificationResponse},
    },
)
async def resend_verification(
    request: ResendVerificationRequest,
    resend_verification_use_case: FromDishka[ResendVerificationUseCase],
) -> JSONResponse:
    """Resend the sign-up confirmation email, at most 3 times per 15 minutes.

    The body has the same shape for every outcome so the form can show
    ``error`` (or ``corrected_email``) and the remaining attempts.
    """
    result = await resend_verification_use_case.execute(request)
    return JSONResponse(
        status_code=RESEND_STATUS_CODES[result.outcome],
        content=result.model_dump(mode="json"),
    )


@router.post("/verify", response_model=VerifyEmailResponse)
async def verify_email(
    request: VerifyEmailRequest,
    verify_email_use_case: FromDishka[VerifyEmailUseCase],
) -> JSONResponse:
    """Verify the token from an email link.

    Returns 400 with the user-facing error when the token is missing,
    invalid or expired.
    """
    result = await verify_email_use_case.execute(request)
    return JSONResponse(
        status_code=status.HTTP_200_OK if result.verified else status.HTTP_400_BAD_REQUEST,
        content=result.model_dump(mode="json"),
    )
