"""
Momentum technical indicators.

This module implements indicators that measure the speed and strength of price movements.

Classes:
    RSI: Relative Strength Index with configurable smoothing strategies
"""

import math
from typing import Optional, Literal, Tuple

from ..base import BaseIndicator
from ..exceptions import InvalidParameterError, NumericDomainError
from .smoothing import ExponentialSmoother, WildersSmoothing
from .trend import EMA

SMOOTHING_METHODS = ('wilders', 'ema')


def create_smoother(method: str, period: int, input_field: str = 'close') -> ExponentialSmoother:
    """
    Build an exponential smoother by method name.

    Args:
        method (str): 'wilders' (α = 1/period) or 'ema' (α = 2/(period+1)).
        period (int): Seed length and smoothing horizon.
        input_field (str): Field name passed through to the smoother.

    Raises:
        InvalidParameterError: If method is not one of SMOOTHING_METHODS.
    """
    if method == 'wilders':
        return WildersSmoothing(period, input_field)
    if method == 'ema':
        return EMA(period, input_field)
    raise InvalidParameterError("smoothing_strategy", method, "either 'wilders' or 'ema'")


class RSI(BaseIndicator):
    """
    Relative Strength Index (RSI) momentum indicator.

    Measures the speed and change of price movements to identify
    overbought/oversold conditions.

    Mathematical Formula:
        RSI = 100 - (100 / (1 + RS))
        where RS = Average Gain / Average Loss

        Gains = max(0, current_price - previous_price)
        Losses = max(0, previous_price - current_price)

    Gains and losses feed two owned smoothers; only the previous price is
    retained besides them.

    Edge cases:
        - First sample: no price change exists yet, output is NaN.
        - Average loss of 0: output is 100 (no losses means maximal strength).
        - Average gain and loss both 0 before warm-up completes: NaN, since no
          movement has been observed.
        - A price change or gain/loss ratio that is no longer finite raises
          NumericDomainError and leaves the state untouched.

    Smoothing Methods:
        - 'wilders': Original Wilder's smoothing (α = 1/N)
        - 'ema': Standard EMA smoothing (α = 2/(N+1))

    Example:
        >>> rsi = RSI(period=14, smoothing_strategy='wilders')
        >>> for price in prices:
        ...     value = rsi.apply(price)
        ...     if rsi.is_ready and value > 70:
        ...         print(f"Overbought: RSI = {value:.1f}")
    """

    def __init__(
        self,
        period: int = 14,
        input_field: str = 'close',
        smoothing_strategy: Literal['wilders', 'ema'] = 'wilders',
        seed_period: int = 0
    ):
        """
        Initialize Relative Strength Index indicator.

        Args:
            period (int): Smoothing period for average gain/loss. Standard is 14.
            input_field (str): OHLCV field consumed by ``update``.
            smoothing_strategy (str): 'wilders' or 'ema'.
            seed_period (int): Extra samples to wait, beyond the period + 1
                needed to seed the smoothers, before reporting WARM.

        Raises:
            InvalidParameterError: If period is not positive, seed_period is
                negative or smoothing_strategy is unknown.
        """
        super().__init__(period, input_field)

        if isinstance(seed_period, bool) or not isinstance(seed_period, int) or seed_period < 0:
            raise InvalidParameterError("seed_period", seed_period, "non-negative integer (>= 0)", self._name)
        if smoothing_strategy not in SMOOTHING_METHODS:
            raise InvalidParameterError(
                "smoothing_strategy",
                smoothing_strategy,
                "either 'wilders' or 'ema'",
                self._name
            )

        self.smoothing_strategy = smoothing_strategy
        self.seed_period = seed_period

        self._gain_smoother = create_smoother(smoothing_strategy, period, 'gain')
        self._loss_smoother = create_smoother(smoothing_strategy, period, 'loss')
        self._children = [self._gain_smoother, self._loss_smoother]

        # One extra sample for the first price change
        self._ready_threshold = period + 1 + seed_period

        self._previous_price: Optional[float] = None

    def _split(self, sample: float) -> Tuple[float, float]:
        """Gain and loss of the move from the previous price to ``sample``."""
        price_change = sample - self._previous_price
        if math.isinf(price_change):
            raise NumericDomainError(price_change, "price change overflowed", self._name, 'price_change')
        return max(0.0, price_change), max(0.0, -price_change)

    def _evaluate(self, sample: float) -> float:
        if self._previous_price is None:
            return math.nan

        gain, loss = self._split(sample)
        avg_gain = self._gain_smoother.evaluate(gain)
        avg_loss = self._loss_smoother.evaluate(loss)

        if avg_loss == 0.0:
            if avg_gain == 0.0 and not self._warm_after_next():
                return math.nan
            return 100.0

        rsi = 100.0 - (100.0 / (1.0 + avg_gain / avg_loss))
        if math.isnan(rsi):
            raise NumericDomainError(
                rsi, f"average gain {avg_gain} / average loss {avg_loss} is undefined", self._name, 'rsi'
            )
        return rsi

    def _commit(self, sample: float) -> None:
        if self._previous_price is not None:
            gain, loss = self._split(sample)
            self._gain_smoother.apply(gain)
            self._loss_smoother.apply(loss)
        self._previous_price = sample

    @property
    def average_gain(self) -> float:
        """Current smoothed average gain, NaN before the first price change."""
        return self._gain_smoother.value

    @property
    def average_loss(self) -> float:
        """Current smoothed average loss, NaN before the first price change."""
        return self._loss_smoother.value

    @property
    def relative_strength(self) -> float:
        """
        Get the current Relative Strength (RS) ratio.

        Returns:
            float: average_gain / average_loss; inf when there are only gains,
                NaN before the first price change or without any movement.
        """
        avg_gain = self.average_gain
        avg_loss = self.average_loss

        if math.isnan(avg_gain) or math.isnan(avg_loss):
            return math.nan

        if avg_loss == 0:
            return math.nan if avg_gain == 0 else math.inf

        return avg_gain / avg_loss

    def reset(self) -> None:
        """Reset the indicator, including both smoothers."""
        super().reset()
        self._previous_price = None
