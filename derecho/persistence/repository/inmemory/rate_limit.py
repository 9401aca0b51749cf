"""In-memory rate limit store.

This is the production store as well as the test one: limits are
process-local and reset when the process restarts.
"""

import threading
from typing import Optional

from derecho.domain.model.rate_limit import RateLimitEntry
from derecho.domain.repository.rate_limit import RateLimitStore


class InMemoryRateLimitStore(RateLimitStore):
    """Dictionary-backed RateLimitStore, safe to share between threads."""

    def __init__(self) -> None:
        self._entries: dict[str, RateLimitEntry] = {}
        self._lock = threading.Lock()

    def get(self, key: str) -> Optional[RateLimitEntry]:
        """Return the stored entry for ``key``."""
        with self._lock:
            return self._entries.get(key)

    def set(self, key: str, entry: RateLimitEntry) -> None:
        """Store ``entry`` under ``key``."""
        with self._lock:
            self._entries[key] = entry

    def delete(self, key: str) -> None:
        """Remove ``key`` if present."""
        with self._lock:
            self._entries.pop(key, None)

    def purge_expired(self, now_ms: int) -> int:
        """Remove entries whose window has closed.

        Expiry is checked and the entry removed under one lock hold, so an
        entry refreshed concurrently is never dropped.
        """
        with self._lock:
            expired = [
                key for key, entry in self._entries.items() if entry.is_expired(now_ms)
            ]
            for key in expired:
                del self._entries[key]
            return len(expired)

    def __len__(self) -> int:
        with self._lock:
            return len(self._entries)
