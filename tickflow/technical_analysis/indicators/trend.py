"""
Trend-following technical indicators.

This module implements moving average indicators that follow price trends.

Classes:
    SMA: Simple Moving Average, re-summed exactly over the window
    EMA: Exponential Moving Average with SMA seeding during warm-up
"""

from typing import Optional

from ..validation import validate_alpha, validate_period
from .smoothing import ExponentialSmoother
from .window import RollingWindow, window_mean


class SMA(RollingWindow):
    """
    Simple Moving Average (SMA) indicator.

    Calculates the arithmetic mean of the last ``period`` samples.

    Mathematical Formula:
        SMA = (P1 + P2 + ... + Pn) / n

    The window is re-summed with ``math.fsum`` on every call (O(period)), so
    the output is always the correctly rounded mean of the current window.
    A spike that has left the window leaves no residue behind, and finite
    samples whose sum exceeds the float range still give a finite mean.

    Before the window fills, the mean is taken over the samples seen so far,
    so a period-3 SMA over [1, 2, 3, 4] yields 1, 1.5, 2, 3.

    Example:
        >>> sma = SMA(period=20)
        >>> for price in prices:
        ...     sma.apply(price)
        ...     if sma.is_ready:
        ...         print(f"SMA(20): {sma.value:.2f}")
    """

    def __init__(self, period: int, input_field: str = 'close'):
        """
        Initialize Simple Moving Average indicator.

        Args:
            period (int): Number of samples averaged. Must be >= 1.
            input_field (str): OHLCV field consumed by ``update``.
                Defaults to 'close'.

        Raises:
            InvalidParameterError: If period is not a positive integer.
        """
        super().__init__(period, input_field)

    def _evaluate(self, sample: float) -> float:
        return window_mean(self._projected(sample))


class EMA(ExponentialSmoother):
    """
    Exponential Moving Average (EMA) indicator.

    Gives more weight to recent prices. The first ``period`` samples seed
    the average with their arithmetic mean; afterwards

        EMA_today = α * Price_today + (1-α) * EMA_yesterday

    where α = 2 / (period + 1) unless a custom alpha is supplied.

    Example:
        >>> ema = EMA(period=12)
        >>> for price in prices:
        ...     fast = ema.apply(price)

        >>> ema_custom = EMA(period=12, alpha=0.1)
    """

    def __init__(self, period: int, input_field: str = 'close', alpha: Optional[float] = None):
        """
        Initialize Exponential Moving Average indicator.

        Args:
            period (int): Seed length and default smoothing horizon. Must be >= 1.
            input_field (str): OHLCV field consumed by ``update``.
            alpha (Optional[float]): Custom smoothing factor in (0, 1].
                If None, uses α = 2/(period+1).

        Raises:
            InvalidParameterError: If period is not positive or alpha is out of range.
        """
        validate_period(period, "period", "EMA")
        if alpha is None:
            alpha = 2.0 / (period + 1)
        else:
            alpha = validate_alpha(alpha, "EMA")

        super().__init__(period, alpha, input_field)
