"""
Volatility technical indicators.

This module implements indicators that measure market volatility.

Classes:
    RollingStdDev: Rolling population standard deviation.
"""

import math

from ..exceptions import NumericDomainError
from .window import RollingWindow, window_mean


class RollingStdDev(RollingWindow):
    """
    Rolling population standard deviation over the last ``period`` samples.

    Mathematical Formula:
        mean = sum(x) / N
        variance = sum((x - mean)^2) / N
        std_dev = sqrt(variance)

    Computed with two passes over the window (O(period) per call) rather than
    from running sums, which lose precision on large prices. A window holding
    a single sample has a standard deviation of 0. A spread too wide for the
    float range raises NumericDomainError.
    """

    def _evaluate(self, sample: float) -> float:
        window = self._projected(sample)
        mean = window_mean(window)
        deviations = [x - mean for x in window]
        std_dev = math.sqrt(window_mean([d * d for d in deviations]))
        if math.isinf(std_dev):
            raise NumericDomainError(std_dev, "window spread overflowed", self._name, 'std_dev')
        return std_dev
