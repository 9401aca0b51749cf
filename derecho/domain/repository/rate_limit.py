"""Rate limit store interface."""

from abc import ABC, abstractmethod
from typing import Optional

from derecho.domain.model.rate_limit import RateLimitEntry


class RateLimitStore(ABC):
    """Key-value store backing the rate limiter.

    The store is owned by the composition root and injected into the
    limiter. Its scope decides the scope of the limit: a process-local
    store limits per process, so N instances allow N times the attempts.
    """

    @abstractmethod
    def get(self, key: str) -> Optional[RateLimitEntry]:
        """Return the stored entry for ``key`` (possibly expired)."""
        pass

    @abstractmethod
    def set(self, key: str, entry: RateLimitEntry) -> None:
        """Store ``entry`` under ``key``, replacing any previous one."""
        pass

    @abstractmethod
    def delete(self, key: str) -> None:
        """Remove ``key`` if present."""
        pass

    @abstractmethod
    def purge_expired(self, now_ms: int) -> int:
        """Remove every entry whose window has closed at ``now_ms``.

        Returns:
            Number of entries removed
        """
        pass
