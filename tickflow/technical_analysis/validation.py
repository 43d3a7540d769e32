"""Parameter and sample validation shared by all indicators."""

import math
from numbers import Real
from typing import Any, Optional

from .exceptions import InvalidParameterError, InvalidDataError, NumericDomainError


def validate_period(period: Any, name: str = "period", indicator_name: Optional[str] = None) -> int:
    """
    Validate a period parameter.

    Args:
        period (Any): The period value to validate
        name (str): Parameter name for error messages
        indicator_name (Optional[str]): Owning indicator, used as message prefix

    Returns:
        int: Validated period value

    Raises:
        InvalidParameterError: If period is not a positive integer
    """
    if isinstance(period, bool) or not isinstance(period, int):
        raise InvalidParameterError(name, period, "positive integer", indicator_name)

    if period <= 0:
        raise InvalidParameterError(name, period, "positive integer (> 0)", indicator_name)

    return period


def validate_alpha(alpha: Any, indicator_name: Optional[str] = None) -> float:
    """
    Validate a custom smoothing factor.

    Raises:
        InvalidParameterError: If alpha is not a number in (0, 1]
    """
    if isinstance(alpha, bool) or not isinstance(alpha, Real):
        raise InvalidParameterError("alpha", alpha, "numeric value between 0 and 1", indicator_name)

    if not 0 < alpha <= 1:
        raise InvalidParameterError("alpha", alpha, "value between 0 and 1 (exclusive of 0)", indicator_name)

    return float(alpha)


def validate_k_factor(k: Any, indicator_name: Optional[str] = None) -> float:
    """
    Validate the band width multiplier for Bollinger Bands.

    Raises:
        InvalidParameterError: If k is not a positive number
    """
    if isinstance(k, bool) or not isinstance(k, Real):
        raise InvalidParameterError("k", k, "positive numeric value", indicator_name)

    if not k > 0:
        raise InvalidParameterError("k", k, "positive value (> 0)", indicator_name)

    return float(k)


def validate_sample(value: Any, field_name: str = 'sample', indicator_name: Optional[str] = None) -> float:
    """
    Coerce an incoming sample to float, rejecting anything non-finite.

    Raises:
        InvalidDataError: If the value is None or not a real number
        NumericDomainError: If the value is NaN or infinite
    """
    if value is None:
        raise InvalidDataError(field_name, value, "value is None", indicator_name)
    if isinstance(value, bool) or not isinstance(value, Real):
        raise InvalidDataError(field_name, value, "value is not numeric", indicator_name)

    value = float(value)
    if math.isnan(value):
        raise NumericDomainError(value, "value is NaN", indicator_name, field_name)
    if math.isinf(value):
        raise NumericDomainError(value, "value is infinite", indicator_name, field_name)

    return value
