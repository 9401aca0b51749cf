"""Hosted auth service infrastructure providers."""

from dishka import Scope, provide

from derecho.adapter.supabase.auth import RealSupabaseAuthClient
from derecho.config import Settings
from derecho.domain.service import AuthClient
from derecho.util.di.base import ProviderBase
from derecho.util.error import ConfigurationError
from derecho.util.observability import instrument_httpx

PLACEHOLDER_KEY = "CHANGE_ME_IN_PRODUCTION"


class SupabaseProvider(ProviderBase):
    """Hosted auth component base."""

    __mock_component__ = "supabase"


class ProdSupabaseProvider(SupabaseProvider):
    """Production hosted auth provider."""

    __is_mock__ = False

    @provide(scope=Scope.APP)
    def get_auth_client(self, settings: Settings) -> AuthClient:
        """Provide hosted auth client.

        Raises:
            ConfigurationError: If the anon key was left unset in production
        """
        if (
            settings.environment == "production"
            and settings.supabase.anon_key == PLACEHOLDER_KEY
        ):
            raise ConfigurationError("SUPABASE__ANON_KEY must be set in production")

        instrument_httpx()
        return RealSupabaseAuthClient(
            base_url=settings.supabase.url,
            anon_key=settings.supabase.anon_key,
            timeout=settings.supabase.timeout,
        )
