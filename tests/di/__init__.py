"""Mock providers for testing."""

from .persistence import MockPersistenceProvider
from .supabase import MockSupabaseProvider
from .container import build_test_container

__all__ = [
    "MockPersistenceProvider",
    "MockSupabaseProvider",
    "build_test_container",
]
