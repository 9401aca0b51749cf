"""Infrastructure providers."""

# Import bases
from .persistence import PersistenceProvider
from .supabase import SupabaseProvider

# Import implementations (needed for __subclasses__())
from .persistence import ProdPersistenceProvider  # noqa: F401
from .supabase import ProdSupabaseProvider  # noqa: F401

__all__ = [
    "PersistenceProvider",
    "ProdPersistenceProvider",
    "ProdSupabaseProvider",
    "SupabaseProvider",
]
