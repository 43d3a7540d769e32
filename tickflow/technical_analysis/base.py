"""Base class for streaming technical indicators."""

from abc import ABC, abstractmethod
from collections import deque
from enum import Enum
from typing import Dict, Any, List, Optional, Union, Tuple
import math
import logging

from .exceptions import MissingInputError
from .validation import validate_period, validate_sample

logger = logging.getLogger(__name__)

Result = Union[float, Dict[str, float]]


class IndicatorState(Enum):
    """Warm-up lifecycle of an indicator."""

    COLD = "cold"
    WARM = "warm"


class BaseIndicator(ABC):
    """
    Abstract base for streaming technical indicators.

    Every indicator consumes one sample at a time in one of two modes:

    - ``evaluate(sample)`` reports what the output would be if ``sample`` were
      committed, leaving all state untouched.
    - ``apply(sample)`` commits ``sample`` and returns exactly the value
      ``evaluate(sample)`` would have returned on the same prior state.

    Subclasses supply the two halves of that contract: ``_evaluate`` (pure)
    and ``_commit`` (mutating). The base class owns sample validation, the
    fill counter and the one-way COLD -> WARM transition.

    Outputs are best-effort during warm-up: a value is always returned and
    ``is_ready`` / ``warm()`` tell the caller whether it is fully meaningful.
    """

    # Class attribute to be overridden by subclasses
    required_inputs: Tuple[str, ...] = ()

    def __init__(self, period: int, input_field: str = 'close'):
        """
        Initialize indicator with period and input field.

        Args:
            period (int): Window size or smoothing horizon. Must be > 0.
            input_field (str): Data point field consumed by ``update``.

        Raises:
            InvalidParameterError: If period is not a positive integer.
        """
        self._name = self.__class__.__name__
        validate_period(period, "period", self._name)

        self.period = period
        self.input_field = input_field
        self.required_inputs = (input_field,)

        self._output_history: deque = deque(maxlen=1000)

        # State management
        self._ready_threshold = period
        self._data_count = 0
        self._state = IndicatorState.COLD
        self._value: Result = self._empty_value()

        # Composite pattern support
        self._children: List['BaseIndicator'] = []

        self._last_update_time: Optional[Any] = None

        logger.debug(f"Initialized {self._name} with period={period}, input_field={input_field}")

    @abstractmethod
    def _evaluate(self, sample: float) -> Result:
        """
        Compute the output for ``sample`` on top of the current state.

        Must not mutate any state, including that of child indicators.
        """

    @abstractmethod
    def _commit(self, sample: float) -> None:
        """Fold ``sample`` into the internal state."""

    def evaluate(self, sample: float) -> Result:
        """
        Project the output for a new sample without consuming it.

        Args:
            sample (float): Candidate observation.

        Returns:
            Result: The value ``apply(sample)`` would return right now.

        Raises:
            InvalidDataError: If sample is None or not numeric.
            NumericDomainError: If sample is NaN or infinite.
        """
        return self._evaluate(self._validate_sample(sample))

    def apply(self, sample: float) -> Result:
        """
        Consume a new sample and advance the indicator state.

        Args:
            sample (float): New observation.

        Returns:
            Result: The new indicator value.

        Raises:
            InvalidDataError: If sample is None or not numeric.
            NumericDomainError: If sample is NaN or infinite.
        """
        sample = self._validate_sample(sample)
        result = self._evaluate(sample)
        self._commit(sample)
        self._advance(result)
        return result

    def update(self, data_point: Dict[str, Any]) -> Result:
        """
        Apply the configured input field of an OHLCV data point.

        Args:
            data_point (Dict[str, Any]): Market data containing every field in
                ``required_inputs``. An optional 'timestamp' is recorded.

        Returns:
            Result: The new indicator value.

        Raises:
            MissingInputError: If required input fields are missing.
            InvalidDataError: If input data contains invalid values.
        """
        self._validate_input_data(data_point)
        result = self._apply_data_point(data_point)

        if 'timestamp' in data_point:
            self._last_update_time = data_point['timestamp']

        return result

    def _apply_data_point(self, data_point: Dict[str, Any]) -> Result:
        return self.apply(data_point[self.input_field])

    @property
    def value(self) -> Result:
        """
        Get the value produced by the most recent ``apply``.

        Returns:
            Result: Last applied output, or NaN before any sample is applied.
        """
        return self._value

    @property
    def state(self) -> IndicatorState:
        """Current warm-up state."""
        return self._state

    @property
    def is_ready(self) -> bool:
        """
        Check if the indicator has received enough samples to be meaningful.

        Returns:
            bool: True once WARM, False during warm-up.
        """
        return self._state is IndicatorState.WARM

    def warm(self) -> bool:
        """Same as ``is_ready``."""
        return self.is_ready

    @property
    def fill_count(self) -> int:
        """Applied samples counted towards warm-up; saturates at the threshold."""
        return min(self._data_count, self._ready_threshold)

    @property
    def warmup_period(self) -> int:
        """Number of applied samples needed before the indicator is WARM."""
        return self._ready_threshold

    @property
    def last_update_time(self) -> Optional[Any]:
        return self._last_update_time

    @property
    def children(self) -> List['BaseIndicator']:
        """
        Get the owned constituent indicators.

        Returns:
            List[BaseIndicator]: Copy of the child list. Empty for leaf indicators.
        """
        return self._children.copy()

    def get_history(self, n: int = 10) -> List[Result]:
        """
        Retrieve the last n applied values, oldest first.

        Args:
            n (int): Number of recent values to return. Defaults to 10.
        """
        if n <= 0:
            return []

        history_length = len(self._output_history)
        start_idx = max(0, history_length - n)

        return list(self._output_history)[start_idx:]

    def reset(self) -> None:
        """
        Reset the indicator to its post-construction COLD state.

        Subclasses clear their own accumulators and call ``super().reset()``.
        """
        self._output_history.clear()
        self._data_count = 0
        self._state = IndicatorState.COLD
        self._value = self._empty_value()
        self._last_update_time = None

        for child in self._children:
            child.reset()

        logger.debug(f"Reset {self._name} indicator state")

    def _empty_value(self) -> Result:
        return math.nan

    def _warm_after_next(self) -> bool:
        """True if applying one more sample leaves the indicator WARM."""
        return self._data_count + 1 >= self._ready_threshold

    def _advance(self, result: Result) -> None:
        self._data_count += 1
        self._value = result
        self._output_history.append(result)

        if self._state is IndicatorState.COLD and self._data_count >= self._ready_threshold:
            self._state = IndicatorState.WARM
            logger.debug(f"{self._name} warmed up after {self._data_count} samples")

    def _validate_sample(self, value: Any, field_name: str = 'sample') -> float:
        return validate_sample(value, field_name, self._name)

    def _validate_input_data(self, data_point: Dict[str, Any]) -> None:
        """
        Validate that the data point carries every required field.

        Value checks happen in ``apply``.

        Raises:
            MissingInputError: If required input fields are missing.
        """
        missing_fields = [field for field in self.required_inputs if field not in data_point]
        if missing_fields:
            raise MissingInputError(missing_fields, list(self.required_inputs), self._name)

    def __repr__(self) -> str:
        """String representation of the indicator."""
        ready_status = "ready" if self.is_ready else f"warming up ({self._data_count}/{self._ready_threshold})"
        return f"{self._name}(period={self.period}, {ready_status})"

    def __str__(self) -> str:
        """Human-readable string representation."""
        return self.__repr__()
