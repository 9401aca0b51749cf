"""Unit tests for RateLimitSweeper."""

from derecho.domain.service import RateLimiter
from derecho.persistence.repository.inmemory import InMemoryRateLimitStore
from derecho.util.scheduler import SWEEP_JOB_ID, RateLimitSweeper


class TestRateLimitSweeper:
    def test_sweep_purges_expired_entries(self, clock):
        store = InMemoryRateLimitStore()
        limiter = RateLimiter(store=store, clock=clock)
        limiter.consume("old", window_ms=100)
        limiter.consume("fresh", window_ms=10_000)
        clock.advance(1000)

        removed = RateLimitSweeper(limiter).sweep()

        assert removed == 1
        assert len(store) == 1

    def test_start_and_shutdown(self, clock):
        limiter = RateLimiter(store=InMemoryRateLimitStore(), clock=clock)
        sweeper = RateLimitSweeper(limiter, interval_seconds=60)

        sweeper.start()
        try:
            assert sweeper.is_running
            job = sweeper._scheduler.get_job(SWEEP_JOB_ID)
            assert job is not None
            assert job.trigger.interval.total_seconds() == 60
        finally:
            sweeper.shutdown()

        assert not sweeper.is_running

    def test_shutdown_when_not_started(self):
        sweeper = RateLimitSweeper(RateLimiter(store=InMemoryRateLimitStore()))

        sweeper.shutdown()

        assert not sweeper.is_running
