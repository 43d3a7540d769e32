"""
Exponential smoothing primitives.

Classes:
    ExponentialSmoother: Shared seed-then-recurse exponential smoother
    WildersSmoothing: Wilder's smoothing (α = 1/N)
"""

import math

from ..base import BaseIndicator, IndicatorState
from ..exceptions import NumericDomainError
from ..validation import validate_alpha, validate_period


class ExponentialSmoother(BaseIndicator):
    """
    Exponential smoother with an arithmetic-mean seed.

    While COLD the output is the plain mean of the samples seen so far,
    kept as a running mean rather than a running sum so that large samples
    cannot overflow it. The ``period``-th sample completes the seed mean and
    makes the smoother WARM; from then on

        smoothed = α * sample + (1-α) * previous_smoothed

    Seeding with a mean avoids biasing the average toward the very first
    observation. A step that leaves the float range raises
    NumericDomainError and leaves the smoothed value untouched.
    """

    def __init__(self, period: int, alpha: float, input_field: str = 'close'):
        """
        Args:
            period (int): Number of samples averaged into the seed.
            alpha (float): Smoothing factor in (0, 1].
            input_field (str): Data point field consumed by ``update``.
        """
        super().__init__(period, input_field)
        self._alpha = validate_alpha(alpha, self._name)
        self._smoothed = 0.0

    @property
    def alpha(self) -> float:
        """The smoothing factor applied once WARM."""
        return self._alpha

    def _evaluate(self, sample: float) -> float:
        if self._state is IndicatorState.COLD:
            smoothed = self._smoothed + (sample - self._smoothed) / (self._data_count + 1)
        else:
            smoothed = self._alpha * sample + (1.0 - self._alpha) * self._smoothed

        if math.isinf(smoothed):
            raise NumericDomainError(smoothed, "smoothed value overflowed", self._name, 'smoothed')
        return smoothed

    def _commit(self, sample: float) -> None:
        self._smoothed = self._evaluate(sample)

    def reset(self) -> None:
        super().reset()
        self._smoothed = 0.0


class WildersSmoothing(ExponentialSmoother):
    """
    Wilder's exponential smoothing.

    Uses α = 1/N, the factor J. Welles Wilder Jr. used for RSI, ATR and ADX.
    Equivalent to ``(previous * (N-1) + sample) / N`` once seeded.

    Example:
        >>> ws = WildersSmoothing(period=14)
        >>> for tr in true_ranges:
        ...     atr = ws.apply(tr)
    """

    def __init__(self, period: int, input_field: str = 'close'):
        validate_period(period, "period", "WildersSmoothing")
        super().__init__(period, 1.0 / period, input_field)
