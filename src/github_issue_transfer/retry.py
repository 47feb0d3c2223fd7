"""
Bounded retry with exponential back-off for GitHub API calls.
"""

from __future__ import annotations

import logging
import time
from typing import TYPE_CHECKING, Final, TypeVar

from .exceptions import ApiError

if TYPE_CHECKING:
    from collections.abc import Callable

logger: logging.Logger = logging.getLogger(__name__)

T = TypeVar("T")

DEFAULT_MAX_ATTEMPTS: Final[int] = 3
DEFAULT_BASE_DELAY_SECONDS: Final[float] = 2.0
DEFAULT_MAX_DELAY_SECONDS: Final[float] = 30.0


class RetryPolicy:
    """Retries calls that fail with a transient ApiError.

    Non-transient errors propagate on the first failure. Transient ones are
    retried until ``max_attempts`` calls have been made, sleeping
    ``base_delay * 2 ** (attempt - 1)`` seconds (capped at ``max_delay``)
    between attempts.
    """

    def __init__(
        self,
        max_attempts: int = DEFAULT_MAX_ATTEMPTS,
        base_delay: float = DEFAULT_BASE_DELAY_SECONDS,
        max_delay: float = DEFAULT_MAX_DELAY_SECONDS,
        sleep: Callable[[float], None] = time.sleep,
    ) -> None:
        if max_attempts < 1:
            msg = f"max_attempts must be at least 1, got {max_attempts}"
            raise ValueError(msg)
        self.max_attempts: int = max_attempts
        self.base_delay: float = base_delay
        self.max_delay: float = max_delay
        self._sleep: Callable[[float], None] = sleep

    def backoff(self, attempt: int) -> float:
        """Delay before retrying after the given (1-based) failed attempt."""
        return min(self.base_delay * 2 ** (attempt - 1), self.max_delay)

    def call(self, func: Callable[[], T], description: str) -> T:
        """Call ``func``, retrying transient ApiErrors."""
        attempt = 1
        while True:
            try:
                return func()
            except ApiError as e:
                if not e.transient or attempt >= self.max_attempts:
                    raise
                delay = self.backoff(attempt)
                logger.warning(
                    f"Transient failure while {description} (attempt {attempt}/{self.max_attempts}, "
                    f"status {e.status}); retrying in {delay:g}s"
                )
                self._sleep(delay)
                attempt += 1
