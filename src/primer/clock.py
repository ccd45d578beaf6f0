"""
Time sources for console timers and date values.

SystemClock reads the real clocks. FixedClock returns a pinned date and a
monotonic counter that advances by a fixed step on every reading, which
makes transcripts reproducible.
"""

import time
from datetime import datetime, timezone
from typing import Optional


class SystemClock:
    """Real wall clock and high resolution timer."""

    def monotonic_ms(self) -> float:
        return time.perf_counter() * 1000.0

    def now(self) -> datetime:
        return datetime.now(timezone.utc)


class FixedClock:
    """
    Deterministic clock.

    Args:
        now: Date returned by now() (UTC noon, 2024-01-01 by default)
        step_ms: Amount the monotonic counter advances per reading
    """

    def __init__(self, now: Optional[datetime] = None, step_ms: float = 0.0) -> None:
        self._now = now or datetime(2024, 1, 1, 12, 0, 0, tzinfo=timezone.utc)
        self._ms = 0.0
        self.step_ms = step_ms

    def monotonic_ms(self) -> float:
        value = self._ms
        self._ms += self.step_ms
        return value

    def now(self) -> datetime:
        return self._now
