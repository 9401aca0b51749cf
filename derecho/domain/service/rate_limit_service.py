"""Rate limiting domain service.

Fixed-window attempt counter keyed by an arbitrary string. Used to throttle
verification email resends per address, but the limits can be overridden
per call for other throttled actions.

The limiter is only as wide as its store: with the in-memory store every
process enforces the limit on its own.
"""

import math
import threading
import time
from typing import Callable

import logfire

from derecho.domain.model.rate_limit import RateLimitEntry, RateLimitStatus
from derecho.domain.repository import RateLimitStore

from .base import Service

DEFAULT_MAX_ATTEMPTS = 3
DEFAULT_WINDOW_MS = 15 * 60 * 1000

EMAIL_RESEND_KEY_PREFIX = "email-resend-"

Clock = Callable[[], int]


def system_clock() -> int:
    """Current wall-clock time in epoch milliseconds."""
    return int(time.time() * 1000)


def email_resend_key(email: str) -> str:
    """Rate limit key for verification email resends to ``email``."""
    return f"{EMAIL_RESEND_KEY_PREFIX}{email}"


def exhausted_message(reset_time: int, now_ms: int) -> str:
    """User-facing message for a key that has used up its attempts."""
    minutes_remaining = math.ceil((reset_time - now_ms) / (60 * 1000))
    plural = "s" if minutes_remaining != 1 else ""
    return (
        "Has excedido el límite de reintentos. "
        f"Por favor espera {minutes_remaining} minuto{plural} "
        "antes de intentar nuevamente."
    )


class RateLimiter(Service):
    """Keyed fixed-window rate limiter.

    Per key, the state is derived from the stored entry and the current time:

    - Absent: no entry, or the entry's window has closed
    - Active-Allowed: window open and ``count < max_attempts``
    - Active-Exhausted: window open and ``count >= max_attempts``

    Each call reads the clock exactly once. Expired entries are ignored on
    every read, so purging them is only about memory.
    """

    def __init__(
        self,
        store: RateLimitStore,
        clock: Clock | None = None,
        max_attempts: int = DEFAULT_MAX_ATTEMPTS,
        window_ms: int = DEFAULT_WINDOW_MS,
    ) -> None:
        """Initialize rate limiter.

        Args:
            store: Backing key-value store
            clock: Returns "now" in epoch milliseconds (defaults to wall clock)
            max_attempts: Default attempts allowed per window
            window_ms: Default window length in milliseconds
        """
        self.store = store
        self.clock = clock or system_clock
        self.max_attempts = max_attempts
        self.window_ms = window_ms
        # consume() is a read-modify-write on the store
        self._lock = threading.Lock()

    def consume(
        self,
        key: str,
        max_attempts: int | None = None,
        window_ms: int | None = None,
    ) -> RateLimitStatus:
        """Record one attempt for ``key`` if the limit allows it.

        Args:
            key: Rate limit key (e.g. ``email_resend_key(email)``)
            max_attempts: Override of the default attempts per window
            window_ms: Override of the default window length

        Returns:
            Status after the attempt; ``is_allowed`` is False when the key
            had no attempts left (nothing is recorded in that case)
        """
        max_attempts = self.max_attempts if max_attempts is None else max_attempts
        window_ms = self.window_ms if window_ms is None else window_ms

        with self._lock:
            now = self.clock()
            entry = self.store.get(key)

            if entry is None or entry.is_expired(now):
                reset_time = now + window_ms
                self.store.set(key, RateLimitEntry(count=1, reset_time=reset_time))
                return RateLimitStatus(
                    is_allowed=True,
                    remaining_attempts=max_attempts - 1,
                    reset_time=reset_time,
                )

            if entry.count >= max_attempts:
                logfire.warn(
                    "Rate limit exceeded",
                    key=key,
                    count=entry.count,
                    max_attempts=max_attempts,
                    reset_time=entry.reset_time,
                )
                return self._exhausted(entry, now)

            entry = entry.model_copy(update={"count": entry.count + 1})
            self.store.set(key, entry)
            return RateLimitStatus(
                is_allowed=True,
                remaining_attempts=max_attempts - entry.count,
                reset_time=entry.reset_time,
            )

    def peek(
        self,
        key: str,
        max_attempts: int | None = None,
        window_ms: int | None = None,
    ) -> RateLimitStatus:
        """Report the status of ``key`` without recording an attempt.

        Args:
            key: Rate limit key
            max_attempts: Override of the default attempts per window
            window_ms: Accepted for symmetry with ``consume``; a peek never
                opens a window so the length is not used

        Returns:
            Current status; ``reset_time`` is None when no window is open
        """
        max_attempts = self.max_attempts if max_attempts is None else max_attempts

        now = self.clock()
        entry = self.store.get(key)

        if entry is None or entry.is_expired(now):
            return RateLimitStatus(
                is_allowed=True,
                remaining_attempts=max_attempts,
                reset_time=None,
            )

        if entry.count >= max_attempts:
            return self._exhausted(entry, now)

        return RateLimitStatus(
            is_allowed=True,
            remaining_attempts=max_attempts - entry.count,
            reset_time=entry.reset_time,
        )

    def reset(self, key: str) -> None:
        """Forget every attempt recorded for ``key``."""
        with self._lock:
            self.store.delete(key)
        logfire.info("Rate limit reset", key=key)

    def purge_expired(self) -> int:
        """Drop entries whose window has closed.

        Returns:
            Number of entries removed
        """
        removed = self.store.purge_expired(self.clock())
        if removed:
            logfire.debug("Purged expired rate limit entries", removed=removed)
        return removed

    @staticmethod
    def _exhausted(entry: RateLimitEntry, now: int) -> RateLimitStatus:
        return RateLimitStatus(
            is_allowed=False,
            remaining_attempts=0,
            reset_time=entry.reset_time,
            message=exhausted_message(entry.reset_time, now),
        )
