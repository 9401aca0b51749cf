"""Hosted auth service adapter."""

from .auth import (
    MockSupabaseAuthClient,
    RealSupabaseAuthClient,
    SupabaseAuthClient,
    SupabaseAuthError,
)

__all__ = [
    "SupabaseAuthClient",
    "RealSupabaseAuthClient",
    "MockSupabaseAuthClient",
    "SupabaseAuthError",
]
