"""
englishnorm/translation/pacing.py
==================================
Pacing Controller — EnglishNorm

Fixed-interval throttle between sequential backend calls. The pipeline
calls pace() after every chunk except the last, so N chunks produce
N - 1 pauses. There is no adaptive back-off here; transient API errors
are retried in openai_retry.py.
"""

import time
from typing import Callable

from englishnorm.config import DEFAULT_PACING_MS


class PacingController:
    """Sleeps a fixed interval each time pace() is called."""

    def __init__(
        self,
        interval_seconds: float = DEFAULT_PACING_MS / 1000.0,
        sleep: Callable[[float], None] = time.sleep,
    ) -> None:
        if interval_seconds < 0:
            raise ValueError(
                f"interval_seconds must be >= 0, got {interval_seconds}"
            )
        self.interval_seconds = interval_seconds
        self._sleep = sleep

    def pace(self) -> None:
        if self.interval_seconds > 0:
            self._sleep(self.interval_seconds)
