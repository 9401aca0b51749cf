"""JWT token utilities.

Access tokens are issued by the hosted auth service; this module only
needs to verify them. ``create_token`` mints tokens with the same claims
for local development and tests.
"""

from datetime import datetime, timedelta, timezone

import jwt
from pydantic import BaseModel

from derecho.config import AuthSettings


class TokenPayload(BaseModel):
    """Access token claims used by the API."""

    sub: str
    email: str | None = None
    role: str = "authenticated"
    exp: datetime

    @property
    def user_id(self) -> str:
        """Account ID (the token subject)."""
        return self.sub


class JWTError(Exception):
    """JWT-related error."""

    pass


def create_token(
    user_id: str,
    email: str | None,
    settings: AuthSettings,
    expires_in: timedelta = timedelta(hours=1),
) -> str:
    """Create an access token shaped like the auth service's.

    Args:
        user_id: Account ID
        email: Account email
        settings: Authentication settings
        expires_in: Token lifetime

    Returns:
        Encoded JWT token
    """
    payload = {
        "sub": user_id,
        "email": email,
        "role": "authenticated",
        "aud": settings.jwt_audience,
        "exp": datetime.now(timezone.utc) + expires_in,
    }

    return jwt.encode(payload, settings.jwt_secret, algorithm=settings.jwt_algorithm)


def verify_token(token: str, settings: AuthSettings) -> TokenPayload:
    """Verify and decode an access token.

    Args:
        token: JWT token to verify
        settings: Authentication settings

    Returns:
        Token payload if valid

    Raises:
        JWTError: If token is invalid or expired
    """
    try:
        payload = jwt.decode(
            token,
            settings.jwt_secret,
            algorithms=[settings.jwt_algorithm],
            audience=settings.jwt_audience,
        )
        return TokenPayload(**payload)
    except jwt.ExpiredSignatureError:
        raise JWTError("Token has expired")
    except jwt.InvalidTokenError:
        raise JWTError("Invalid token")
