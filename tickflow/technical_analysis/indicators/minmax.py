"""
Min/Max technical indicators.

This module implements indicators that track rolling minimum and maximum values.

Classes:
    RollingMax: Highest sample over the last ``period`` samples.
    RollingMin: Lowest sample over the last ``period`` samples.
"""

from collections import deque
from typing import Callable, Deque, Tuple

from .window import RollingWindow


class _RollingExtremum(RollingWindow):
    """
    O(1) amortized rolling extremum.

    Keeps a monotonic deque of ``(value, index)`` candidates: the front is the
    current extremum and every later entry is the best of what remains once
    the entries before it leave the window. Only the front can be evicted by
    the next sample.
    """

    _pick: Callable[[float, float], float]

    def __init__(self, period: int, input_field: str = 'close'):
        super().__init__(period, input_field)
        self._candidates: Deque[Tuple[float, int]] = deque()

    def _evaluate(self, sample: float) -> float:
        # Index of the sample the next append would evict.
        expiring = self._data_count - self.period
        for value, index in self._candidates:
            if index > expiring:
                return self._pick(value, sample)
        return sample

    def _commit(self, sample: float) -> None:
        expiring = self._data_count - self.period
        if self._candidates and self._candidates[0][1] <= expiring:
            self._candidates.popleft()

        # Drop candidates the new sample dominates
        while self._candidates and self._pick(self._candidates[-1][0], sample) == sample:
            self._candidates.pop()
        self._candidates.append((sample, self._data_count))

        super()._commit(sample)

    def reset(self) -> None:
        super().reset()
        self._candidates.clear()


class RollingMax(_RollingExtremum):
    """
    Rolling maximum over the last ``period`` samples.

    Before the window fills, the maximum is taken over the samples seen so
    far. A period-3 RollingMax over [5, 1, 3, 9, 2] yields 5, 5, 5, 9, 9.
    """

    _pick = staticmethod(max)


class RollingMin(_RollingExtremum):
    """Rolling minimum over the last ``period`` samples."""

    _pick = staticmethod(min)
