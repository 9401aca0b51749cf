"""Rate limiting records."""

from typing import Optional

from pydantic import Field

from derecho.domain.model.common import DomainModel
from derecho.domain.value.common import ValueObject


class RateLimitEntry(DomainModel):
    """Attempts consumed for one key within its current window.

    The entry is meaningful only while ``now < reset_time``; after that it
    is stale and treated as absent.
    """

    count: int = Field(ge=0)
    reset_time: int  # Epoch milliseconds at which the window closes

    def is_expired(self, now_ms: int) -> bool:
        """Whether the window has closed at ``now_ms``."""
        return now_ms >= self.reset_time


class RateLimitStatus(ValueObject):
    """Outcome of a rate limit check.

    A denied check is a normal result, not an error: callers branch on
    ``is_allowed`` and show ``message`` to the user.
    """

    is_allowed: bool
    remaining_attempts: int
    reset_time: Optional[int] = None
    message: Optional[str] = None
