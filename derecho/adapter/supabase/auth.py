"""Hosted auth service (Supabase GoTrue) client.

Only the email flows this API triggers are implemented: resending the
sign-up confirmation and verifying one-time tokens from email links.
Delivering the email is the auth service's job.
"""

import httpx
import logfire

from derecho.adapter.error import ProviderError
from derecho.domain.service.verification_service import AuthClient
from derecho.domain.value import Email, VerificationType


class SupabaseAuthError(ProviderError):
    """Hosted auth service error."""

    def __init__(self, message: str, status_code: int | None = None) -> None:
        self.status_code = status_code
        super().__init__(message)


class SupabaseAuthClient(AuthClient):
    """Base class for hosted auth clients.

    Provides type distinction for dependency injection.
    """

    pass


class RealSupabaseAuthClient(SupabaseAuthClient):
    """GoTrue REST client authenticated with the project's anon key."""

    def __init__(self, base_url: str, anon_key: str, timeout: float = 30.0) -> None:
        """Initialize auth client.

        Args:
            base_url: Project URL (e.g. https://<ref>.supabase.co)
            anon_key: Public anon key
            timeout: Request timeout in seconds
        """
        self.auth_url = f"{base_url.rstrip('/')}/auth/v1"
        self.anon_key = anon_key
        self.timeout = timeout

    def _headers(self) -> dict[str, str]:
        return {
            "apikey": self.anon_key,
            "Authorization": f"Bearer {self.anon_key}",
            "Content-Type": "application/json",
        }

    async def _post(self, path: str, payload: dict, params: dict | None = None) -> None:
        """POST to the auth API, raising on any non-2xx answer.

        Raises:
            SupabaseAuthError: If the request fails
        """
        url = f"{self.auth_url}{path}"
        try:
            async with httpx.AsyncClient() as client:
                response = await client.post(
                    url,
                    json=payload,
                    params=params,
                    headers=self._headers(),
                    timeout=self.timeout,
                )
        except httpx.HTTPError as e:
            logfire.error("Auth service HTTP error", path=path, error=str(e))
            raise SupabaseAuthError(f"HTTP error calling auth service: {e}")

        if response.is_success:
            return

        logfire.error(
            "Auth service request failed",
            path=path,
            status_code=response.status_code,
            error=response.text,
        )
        raise SupabaseAuthError(
            f"Auth service request failed: {response.status_code}",
            status_code=response.status_code,
        )

    async def resend_verification(self, email: Email, redirect_to: str) -> None:
        """Resend the sign-up confirmation email.

        Raises:
            SupabaseAuthError: If the auth service rejects the request
        """
        await self._post(
            "/resend",
            {"type": VerificationType.SIGNUP.value, "email": email.root},
            params={"redirect_to": redirect_to},
        )
        logfire.info("Auth service accepted resend", email_domain=email.domain)

    async def verify_otp(
        self,
        token_hash: str,
        verification_type: VerificationType,
        email: Email | None = None,
    ) -> None:
        """Verify a one-time token hash.

        Raises:
            SupabaseAuthError: If the token is invalid or expired
        """
        payload: dict[str, str] = {
            "type": verification_type.value,
            "token_hash": token_hash,
        }
        if email is not None:
            payload["email"] = email.root
        await self._post("/verify", payload)


class MockSupabaseAuthClient(SupabaseAuthClient):
    """Mock auth client for testing.

    Records calls instead of contacting the auth service. Tokens listed in
    ``invalid_tokens`` and emails in ``failing_emails`` fail like the real
    service would.
    """

    def __init__(self) -> None:
        """Initialize mock client without real configuration."""
        self.resent: list[tuple[str, str]] = []
        self.verified: list[tuple[str, VerificationType]] = []
        self.invalid_tokens: set[str] = set()
        self.failing_emails: set[str] = set()

    async def resend_verification(self, email: Email, redirect_to: str) -> None:
        """Record the resend request."""
        if email.root in self.failing_emails:
            raise SupabaseAuthError("Mock resend failure", status_code=500)
        self.resent.append((email.root, redirect_to))

    async def verify_otp(
        self,
        token_hash: str,
        verification_type: VerificationType,
        email: Email | None = None,
    ) -> None:
        """Accept any token not marked invalid."""
        if token_hash in self.invalid_tokens:
            raise SupabaseAuthError("Token has expired or is invalid", status_code=403)
        self.verified.append((token_hash, verification_type))
