"""
Fixed pacing of mutating calls against the destination repository.
"""

from __future__ import annotations

import time
from typing import TYPE_CHECKING, Final

if TYPE_CHECKING:
    from collections.abc import Callable


GOVERNED_DELAY_SECONDS: Final[float] = 1.0


class RateGovernor:
    """Sleeps a fixed interval after every issue, state or comment write.

    The interval does not adapt to the quota reported by GitHub.
    """

    def __init__(
        self,
        interval: float = GOVERNED_DELAY_SECONDS,
        sleep: Callable[[float], None] = time.sleep,
    ) -> None:
        self.interval: float = interval
        self._sleep: Callable[[float], None] = sleep
        self.waits: int = 0

    def wait(self) -> None:
        self.waits += 1
        self._sleep(self.interval)
