from __future__ import annotations

import time
from typing import Callable, Optional


# PUBLIC_INTERFACE
class TimeIdGenerator:
    """
    Produce task ids from the wall clock in milliseconds, as decimal strings.

    Ids strictly increase: when the clock has not moved past the previous id
    (two creations within one millisecond, or a clock step backwards) the next id
    is the previous one plus one.
    """

    def __init__(self, clock: Callable[[], float] = time.time) -> None:
        self._clock = clock
        self._last: Optional[int] = None

    def __call__(self) -> str:
        candidate = int(self._clock() * 1000)
        if self._last is not None and candidate <= self._last:
            candidate = self._last + 1
        self._last = candidate
        return str(candidate)
