"""
Rolling window buffer shared by window-based indicators.

Classes:
    RollingWindow: Fixed-capacity buffer of the last ``period`` samples.
"""

import math
from collections import deque
from typing import Deque, List, Sequence

from ..base import BaseIndicator


def window_mean(window: Sequence[float]) -> float:
    """
    Correctly rounded mean of a non-empty window of finite samples.

    Falls back to summing pre-scaled samples when the plain sum would
    overflow, so the mean of finite samples is always finite.
    """
    n = len(window)
    try:
        return math.fsum(window) / n
    except OverflowError:
        return math.fsum(x / n for x in window)


class RollingWindow(BaseIndicator):
    """
    Abstract fixed-capacity window over the most recent samples.

    The buffer is a ``deque(maxlen=period)``, so appending beyond capacity
    evicts the oldest sample and memory stays O(period).

    Partial-window policy: until ``period`` samples have been applied, the
    aggregate is computed over the samples seen so far (plus the incoming
    one). The indicator is WARM once the window is full.

    Subclasses implement ``_evaluate`` over ``_projected(sample)`` and extend
    ``_commit`` when they keep extra structures.
    """

    def __init__(self, period: int, input_field: str = 'close'):
        super().__init__(period, input_field)
        self._buffer: Deque[float] = deque(maxlen=period)

    @property
    def is_full(self) -> bool:
        return len(self._buffer) == self.period

    @property
    def values(self) -> List[float]:
        """Stored samples, oldest first."""
        return list(self._buffer)

    def _projected(self, sample: float) -> List[float]:
        """Window contents as they would be after appending ``sample``."""
        window = list(self._buffer)
        if self.is_full:
            window = window[1:]
        window.append(sample)
        return window

    def _commit(self, sample: float) -> None:
        self._buffer.append(sample)

    def reset(self) -> None:
        super().reset()
        self._buffer.clear()
