from __future__ import annotations

import time
from typing import Callable

Clock = Callable[[], int]

MS_PER_HOUR = 60 * 60 * 1000


def now_ms() -> int:
    return int(time.time() * 1000)


class FixedClock:
    """Clock pinned to a settable instant, for tests and replays."""

    def __init__(self, now: int) -> None:
        self.now = int(now)

    def __call__(self) -> int:
        return self.now

    def advance(self, ms: int) -> None:
        self.now += int(ms)
