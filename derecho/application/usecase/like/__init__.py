"""Like use cases."""

from .get_like_status import GetLikeStatusUseCase
from .toggle_like import ToggleLikeUseCase

__all__ = ["GetLikeStatusUseCase", "ToggleLikeUseCase"]
