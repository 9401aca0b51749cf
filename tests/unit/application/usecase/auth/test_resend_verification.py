"""Unit tests for ResendVerificationUseCase."""

import pytest

from derecho.application.usecase.auth import ResendOutcome, ResendVerificationUseCase
from derecho.application.usecase.auth.resend_verification import (
    MSG_SEND_FAILED,
    ResendVerificationRequest,
)
from derecho.domain.service import (
    AuthClient,
    EmailService,
    RateLimiter,
    VerificationService,
    email_resend_key,
)
from derecho.persistence.repository.inmemory import InMemoryRateLimitStore
from tests.harness import create_env_fixture

unit_env = create_env_fixture()


@pytest.fixture
def limiter(clock) -> RateLimiter:
    return RateLimiter(store=InMemoryRateLimitStore(), clock=clock)


async def make_use_case(unit_env, limiter: RateLimiter) -> ResendVerificationUseCase:
    return ResendVerificationUseCase(
        email_service=await unit_env.get(EmailService),
        rate_limiter=limiter,
        verification_service=await unit_env.get(VerificationService),
    )


class TestResendVerificationUseCase:
    @pytest.mark.asyncio
    async def test_resend_sends_and_counts_attempt(self, unit_env, limiter):
        use_case = await make_use_case(unit_env, limiter)
        auth_client = await unit_env.get(AuthClient)

        response = await use_case.execute(
            ResendVerificationRequest(email="  Ana@Ejemplo.com ")
        )

        assert response.outcome == ResendOutcome.SENT
        assert response.sent
        assert response.remaining_attempts == 2
        assert [email for email, _ in auth_client.resent] == ["ana@ejemplo.com"]
        assert auth_client.resent[0][1].endswith("/auth/verify")

    @pytest.mark.asyncio
    async def test_invalid_email_spends_no_attempt(self, unit_env, limiter):
        use_case = await make_use_case(unit_env, limiter)
        auth_client = await unit_env.get(AuthClient)

        response = await use_case.execute(ResendVerificationRequest(email="ana@gmial.com"))

        assert response.outcome == ResendOutcome.INVALID_EMAIL
        assert response.corrected_email == "ana@gmail.com"
        assert auth_client.resent == []
        assert limiter.peek(email_resend_key("ana@gmial.com")).remaining_attempts == 3

    @pytest.mark.asyncio
    async def test_exhausted_resend_never_calls_auth_service(self, unit_env, limiter):
        use_case = await make_use_case(unit_env, limiter)
        auth_client = await unit_env.get(AuthClient)
        request = ResendVerificationRequest(email="ana@ejemplo.com")

        for _ in range(3):
            assert (await use_case.execute(request)).sent
        response = await use_case.execute(request)

        assert response.outcome == ResendOutcome.RATE_LIMITED
        assert not response.sent
        assert response.remaining_attempts == 0
        assert "Has excedido el límite de reintentos" in response.error
        assert len(auth_client.resent) == 3

    @pytest.mark.asyncio
    async def test_provider_failure_keeps_attempt_spent(self, unit_env, limiter):
        use_case = await make_use_case(unit_env, limiter)
        auth_client = await unit_env.get(AuthClient)
        auth_client.failing_emails.add("ana@ejemplo.com")

        response = await use_case.execute(
            ResendVerificationRequest(email="ana@ejemplo.com")
        )

        assert response.outcome == ResendOutcome.PROVIDER_ERROR
        assert response.error == MSG_SEND_FAILED
        assert limiter.peek(email_resend_key("ana@ejemplo.com")).remaining_attempts == 2

    @pytest.mark.asyncio
    async def test_addresses_limited_independently(self, unit_env, limiter):
        use_case = await make_use_case(unit_env, limiter)

        for _ in range(4):
            await use_case.execute(ResendVerificationRequest(email="ana@ejemplo.com"))
        response = await use_case.execute(
            ResendVerificationRequest(email="luis@ejemplo.com")
        )

        assert response.sent
