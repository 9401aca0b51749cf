"""Unit tests for JWTService."""

from datetime import timedelta
from uuid import uuid4

import pytest

from derecho.config import AuthSettings
from derecho.domain.service import JWTService
from derecho.util.jwt import JWTError, create_token

TEST_SECRET = "test-secret-with-enough-bytes-for-hs256"


@pytest.fixture
def auth_settings() -> AuthSettings:
    return AuthSettings(jwt_secret=TEST_SECRET)


class TestJWTService:
    def test_verify_valid_token(self, auth_settings):
        user_id = str(uuid4())
        token = create_token(user_id, "ana@ejemplo.com", auth_settings)

        payload = JWTService(auth_settings).verify_token(token)

        assert payload.user_id == user_id
        assert payload.email == "ana@ejemplo.com"

    def test_expired_token_raises(self, auth_settings):
        token = create_token(
            str(uuid4()), None, auth_settings, expires_in=timedelta(seconds=-10)
        )

        with pytest.raises(JWTError, match="expired"):
            JWTService(auth_settings).verify_token(token)

    def test_wrong_audience_raises(self, auth_settings):
        other = AuthSettings(jwt_secret=TEST_SECRET, jwt_audience="anon")
        token = create_token(str(uuid4()), None, other)

        with pytest.raises(JWTError):
            JWTService(auth_settings).verify_token(token)

    def test_get_user_id_never_raises(self, auth_settings):
        service = JWTService(auth_settings)
        forged = create_token(str(uuid4()), None, AuthSettings(jwt_secret="another-secret-with-enough-bytes-for-hs256"))

        assert service.get_user_id_from_token(None) is None
        assert service.get_user_id_from_token("not-a-jwt") is None
        assert service.get_user_id_from_token(forged) is None
