"""Rate limiting DI providers."""

from dishka import Scope, provide

from derecho.config import Settings
from derecho.domain.repository import RateLimitStore
from derecho.domain.service import RateLimiter
from derecho.persistence.repository.inmemory import InMemoryRateLimitStore
from derecho.util.di.base import ProviderBase
from derecho.util.scheduler import RateLimitSweeper


class ProdRateLimitProvider(ProviderBase):
    """Rate limiter provider - concrete, no mocks needed.

    Everything here is APP-scoped: attempts must be counted across requests
    for the lifetime of the process, so the container owns one store, one
    limiter and one sweeper.
    """

    scope = Scope.APP

    @provide
    def get_rate_limit_store(self) -> RateLimitStore:
        """Provide the process-local attempt store."""
        return InMemoryRateLimitStore()

    @provide
    def get_rate_limiter(self, store: RateLimitStore, settings: Settings) -> RateLimiter:
        """Provide the resend rate limiter."""
        return RateLimiter(
            store=store,
            max_attempts=settings.rate_limit.max_attempts,
            window_ms=settings.rate_limit.window_ms,
        )

    @provide
    def get_rate_limit_sweeper(
        self, rate_limiter: RateLimiter, settings: Settings
    ) -> RateLimitSweeper:
        """Provide the background sweeper (started by the app lifespan)."""
        return RateLimitSweeper(
            rate_limiter=rate_limiter,
            interval_seconds=settings.rate_limit.sweep_interval_seconds,
        )
