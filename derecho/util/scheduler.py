"""Background sweep of expired rate limit entries.

Expired entries are already ignored on every read, so the sweep only keeps
the in-memory store from growing with addresses that never come back.
"""

import logfire
from apscheduler.schedulers.background import BackgroundScheduler
from apscheduler.triggers.interval import IntervalTrigger

from derecho.domain.service import RateLimiter

SWEEP_JOB_ID = "rate_limit_sweep"


class RateLimitSweeper:
    """Runs ``RateLimiter.purge_expired`` on a fixed interval."""

    def __init__(self, rate_limiter: RateLimiter, interval_seconds: int = 300) -> None:
        """Initialize sweeper.

        Args:
            rate_limiter: Limiter whose store is swept
            interval_seconds: Seconds between sweeps
        """
        self.rate_limiter = rate_limiter
        self.interval_seconds = interval_seconds
        self._scheduler = BackgroundScheduler()

    def sweep(self) -> int:
        """Run one sweep now.

        Returns:
            Number of entries removed
        """
        return self.rate_limiter.purge_expired()

    def start(self) -> None:
        """Schedule the sweep and start the background thread."""
        if self._scheduler.running:
            return
        self._scheduler.add_job(
            self.sweep,
            IntervalTrigger(seconds=self.interval_seconds),
            id=SWEEP_JOB_ID,
            replace_existing=True,
        )
        self._scheduler.start()
        logfire.info(
            "Rate limit sweeper started", interval_seconds=self.interval_seconds
        )

    def shutdown(self) -> None:
        """Stop the background thread without waiting for a running sweep."""
        if self._scheduler.running:
            self._scheduler.shutdown(wait=False)
            logfire.info("Rate limit sweeper stopped")

    @property
    def is_running(self) -> bool:
        return self._scheduler.running
