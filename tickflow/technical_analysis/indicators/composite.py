"""
Composite technical indicators.

This module implements composite indicators that are built from other indicators.
Composites own their constituents exclusively and combine their outputs
arithmetically; evaluate on a composite only evaluates its children and
apply only applies them.
"""

import math
from abc import abstractmethod
from typing import Dict, Any, Optional, Tuple

from ..base import BaseIndicator, Result
from ..exceptions import InvalidDataError, InvalidParameterError
from ..validation import validate_k_factor, validate_period
from .minmax import RollingMax, RollingMin
from .trend import SMA, EMA
from .volatility import RollingStdDev


class BarIndicator(BaseIndicator):
    """
    Base for indicators that read a bar's high and low besides the sample.

    ``high`` and ``low`` are optional on every call and default to the sample
    itself, so these indicators also run on a plain stream of closes. A bar
    must satisfy ``low <= sample <= high``.
    """

    @abstractmethod
    def _evaluate_bar(self, sample: float, high: float, low: float) -> Result:
        """Pure projection for one bar."""

    @abstractmethod
    def _commit_bar(self, sample: float, high: float, low: float) -> None:
        """Fold one bar into the owned indicators."""

    def evaluate(self, sample: float, high: Optional[float] = None, low: Optional[float] = None) -> Result:
        if high is None and low is None:
            return super().evaluate(sample)
        return self._evaluate_bar(*self._validate_bar(sample, high, low))

    def apply(self, sample: float, high: Optional[float] = None, low: Optional[float] = None) -> Result:
        if high is None and low is None:
            return super().apply(sample)
        bar = self._validate_bar(sample, high, low)
        result = self._evaluate_bar(*bar)
        self._commit_bar(*bar)
        self._advance(result)
        return result

    # Close-only bars: the base evaluate/apply reach these
    def _evaluate(self, sample: float) -> Result:
        return self._evaluate_bar(sample, sample, sample)

    def _commit(self, sample: float) -> None:
        self._commit_bar(sample, sample, sample)

    def _apply_data_point(self, data_point: Dict[str, Any]) -> Result:
        return self.apply(data_point[self.input_field], data_point.get('high'), data_point.get('low'))

    def _validate_bar(self, sample: float, high: Optional[float], low: Optional[float]) -> Tuple[float, float, float]:
        sample = self._validate_sample(sample)
        high = sample if high is None else self._validate_sample(high, 'high')
        low = sample if low is None else self._validate_sample(low, 'low')
        if high < low:
            raise InvalidDataError('high', high, f"below low {low}", self._name)
        if not low <= sample <= high:
            raise InvalidDataError(self.input_field, sample, f"outside bar range [{low}, {high}]", self._name)
        return sample, high, low


class MACD(BaseIndicator):
    """
    Moving Average Convergence Divergence (MACD) line.

    Mathematical Formula:
        MACD Line = EMA(fast_period) - EMA(slow_period)

    Only the line is produced. A signal line and histogram are built by the
    caller by chaining another EMA over the MACD outputs:

        >>> macd = MACD(fast_period=12, slow_period=26)
        >>> signal = EMA(9)
        >>> for price in prices:
        ...     line = macd.apply(price)
        ...     histogram = line - signal.apply(line)

    Attributes:
        fast_ema (EMA): The fast EMA indicator.
        slow_ema (EMA): The slow EMA indicator.
    """

    def __init__(self, fast_period: int = 12, slow_period: int = 26, input_field: str = 'close'):
        """
        Initialize MACD indicator.

        Args:
            fast_period (int): The period for the fast EMA.
            slow_period (int): The period for the slow EMA.
            input_field (str): OHLCV field consumed by ``update``.

        Raises:
            InvalidParameterError: If a period is not positive or
                fast_period is not less than slow_period.
        """
        validate_period(fast_period, "fast_period", "MACD")
        validate_period(slow_period, "slow_period", "MACD")
        if fast_period >= slow_period:
            raise InvalidParameterError(
                "fast_period", fast_period, f"value less than slow_period ({slow_period})", "MACD"
            )

        # Warm once the slow EMA has its seed
        super().__init__(period=slow_period, input_field=input_field)

        self.fast_period = fast_period
        self.slow_period = slow_period

        self.fast_ema = EMA(fast_period, input_field)
        self.slow_ema = EMA(slow_period, input_field)
        self._children = [self.fast_ema, self.slow_ema]

    def _evaluate(self, sample: float) -> float:
        return self.fast_ema.evaluate(sample) - self.slow_ema.evaluate(sample)

    def _commit(self, sample: float) -> None:
        self.fast_ema.apply(sample)
        self.slow_ema.apply(sample)

    def __repr__(self) -> str:
        ready_status = "ready" if self.is_ready else f"warming up ({self._data_count}/{self._ready_threshold})"
        return f"MACD(fast_period={self.fast_period}, slow_period={self.slow_period}, {ready_status})"


class Stochastic(BarIndicator):
    """
    Stochastic Oscillator.

    A momentum indicator locating the current sample within the highest high
    and lowest low of the last ``period`` bars.

    Mathematical Formula:
        Raw %K = 100 * (Sample - Lowest Low) / (Highest High - Lowest Low)
        %K = EMA(Raw %K, smooth_period)   [if smooth_period > 1]

    When the range is empty (Highest High == Lowest Low) Raw %K is
    ``Stochastic.INDETERMINATE`` (50). Before ``period`` bars have arrived the
    range covers the bars seen so far.

    Attributes:
        high_max (RollingMax): Rolling highest high.
        low_min (RollingMin): Rolling lowest low.
        smoother (Optional[EMA]): Smoother over Raw %K, if enabled.
    """

    INDETERMINATE = 50.0

    def __init__(self, period: int = 14, smooth_period: int = 1, input_field: str = 'close'):
        """
        Initialize Stochastic Oscillator.

        Args:
            period (int): Lookback period for the high/low range.
            smooth_period (int): EMA period applied to Raw %K; 1 disables smoothing.
            input_field (str): OHLCV field consumed by ``update``.
        """
        super().__init__(period=period, input_field=input_field)
        validate_period(smooth_period, "smooth_period", self._name)

        self.smooth_period = smooth_period

        self.high_max = RollingMax(period, 'high')
        self.low_min = RollingMin(period, 'low')
        self.smoother: Optional[EMA] = None
        if smooth_period > 1:
            self.smoother = EMA(smooth_period, 'raw_k')

        self._children = [self.high_max, self.low_min]
        if self.smoother is not None:
            self._children.append(self.smoother)

        self._ready_threshold = period + smooth_period - 1

    def _raw_k(self, sample: float, highest: float, lowest: float) -> float:
        if highest == lowest:
            return self.INDETERMINATE
        return 100.0 * (sample - lowest) / (highest - lowest)

    def _evaluate_bar(self, sample: float, high: float, low: float) -> float:
        raw_k = self._raw_k(sample, self.high_max.evaluate(high), self.low_min.evaluate(low))
        if self.smoother is None:
            return raw_k
        return self.smoother.evaluate(raw_k)

    def _commit_bar(self, sample: float, high: float, low: float) -> None:
        raw_k = self._raw_k(sample, self.high_max.apply(high), self.low_min.apply(low))
        if self.smoother is not None:
            self.smoother.apply(raw_k)


class BollingerBands(BarIndicator):
    """
    Bollinger Bands (BBands) indicator.

    Bands are built on the typical price of each bar.

    Mathematical Formula:
        Typical Price = (High + Low + Close) / 3
        Middle Band = SMA(Typical Price, period)
        Upper Band = Middle Band + (K * StdDev(Typical Price, period))
        Lower Band = Middle Band - (K * StdDev(Typical Price, period))
        Bandwidth = (Upper Band - Lower Band) / Middle Band

    StdDev is the population standard deviation. Before the window fills,
    the bands cover the bars seen so far.

    Attributes:
        middle_band (SMA): The middle band (SMA) indicator.
        std_dev (RollingStdDev): The rolling standard deviation calculator.
    """

    def __init__(self, period: int = 20, k: float = 2.0, input_field: str = 'close'):
        """
        Initialize Bollinger Bands indicator.

        Args:
            period (int): The lookback period for SMA and StdDev.
            k (float): The number of standard deviations for the bands.
            input_field (str): OHLCV field consumed by ``update``.
        """
        super().__init__(period, input_field)
        self._k = validate_k_factor(k, self._name)

        self.middle_band = SMA(period, 'typical_price')
        self.std_dev = RollingStdDev(period, 'typical_price')
        self._children = [self.middle_band, self.std_dev]

    @property
    def k(self) -> float:
        return self._k

    def _empty_value(self) -> Dict[str, float]:
        return {'upper': math.nan, 'middle': math.nan, 'lower': math.nan, 'bandwidth': math.nan}

    @staticmethod
    def _typical_price(sample: float, high: float, low: float) -> float:
        return (high + low + sample) / 3.0

    def _bands(self, middle: float, deviation: float) -> Dict[str, float]:
        upper = middle + self._k * deviation
        lower = middle - self._k * deviation
        bandwidth = (upper - lower) / middle if middle != 0 else 0.0
        return {'upper': upper, 'middle': middle, 'lower': lower, 'bandwidth': bandwidth}

    def _evaluate_bar(self, sample: float, high: float, low: float) -> Dict[str, float]:
        typical = self._typical_price(sample, high, low)
        return self._bands(self.middle_band.evaluate(typical), self.std_dev.evaluate(typical))

    def _commit_bar(self, sample: float, high: float, low: float) -> None:
        typical = self._typical_price(sample, high, low)
        self.middle_band.apply(typical)
        self.std_dev.apply(typical)
