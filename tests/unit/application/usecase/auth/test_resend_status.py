"""Unit tests for GetResendStatusUseCase and ValidateEmailUseCase."""

import pytest

from derecho.application.usecase.auth import (
    GetResendStatusUseCase,
    ValidateEmailUseCase,
)
from derecho.application.usecase.auth.get_resend_status import GetResendStatusRequest
from derecho.application.usecase.auth.validate_email import ValidateEmailRequest
from derecho.domain.service import RateLimiter, email_resend_key
from tests.harness import create_env_fixture

unit_env = create_env_fixture()


class TestGetResendStatusUseCase:
    @pytest.mark.asyncio
    async def test_fresh_address_has_all_attempts(self, unit_env):
        use_case = await unit_env.get(GetResendStatusUseCase)

        response = await use_case.execute(GetResendStatusRequest(email="ana@ejemplo.com"))

        assert response.is_allowed
        assert response.remaining_attempts == 3
        assert response.reset_time is None

    @pytest.mark.asyncio
    async def test_status_reflects_consumed_attempts_without_spending(self, unit_env):
        use_case = await unit_env.get(GetResendStatusUseCase)
        limiter = await unit_env.get(RateLimiter)
        limiter.consume(email_resend_key("ana@ejemplo.com"))
        request = GetResendStatusRequest(email="ANA@ejemplo.com")

        first = await use_case.execute(request)
        second = await use_case.execute(request)

        assert first.remaining_attempts == 2
        assert second == first

    @pytest.mark.asyncio
    async def test_malformed_address_raises(self, unit_env):
        use_case = await unit_env.get(GetResendStatusUseCase)

        with pytest.raises(ValueError):
            await use_case.execute(GetResendStatusRequest(email="sin-arroba"))


class TestValidateEmailUseCase:
    @pytest.mark.asyncio
    async def test_flags_disposable_address(self, unit_env):
        use_case = await unit_env.get(ValidateEmailUseCase)

        response = await use_case.execute(ValidateEmailRequest(email="x@mailinator.com"))

        assert response.is_valid
        assert response.is_suspicious
