"""Mock hosted auth providers for testing."""

from dishka import Scope, provide

from derecho.adapter.supabase.auth import MockSupabaseAuthClient
from derecho.domain.service import AuthClient
from derecho.util.di.infrastructure.supabase import SupabaseProvider


class MockSupabaseProvider(SupabaseProvider):
    """Mock hosted auth provider recording calls instead of sending email."""

    __is_mock__ = True

    @provide(scope=Scope.APP)
    def get_auth_client(self) -> AuthClient:
        """Provide mock auth client."""
        return MockSupabaseAuthClient()
