"""Shared fixtures for technical analysis tests."""

import math
from typing import Dict, List

import numpy as np
import pytest


def create_price_series(num_bars: int, seed: int = 42) -> List[float]:
    """Synthetic random-walk closes around 100."""
    rng = np.random.default_rng(seed)
    returns = rng.normal(0, 0.02, num_bars)
    closes = 100 * np.exp(np.cumsum(returns))
    return [float(x) for x in closes]


def assert_same_result(actual, expected):
    """Exact comparison that treats NaN as equal to NaN and walks dict outputs."""
    if isinstance(expected, dict):
        assert isinstance(actual, dict)
        assert actual.keys() == expected.keys()
        for key in expected:
            assert_same_result(actual[key], expected[key])
    elif math.isnan(expected):
        assert math.isnan(actual)
    else:
        assert actual == expected


@pytest.fixture
def prices() -> List[float]:
    return create_price_series(300)


@pytest.fixture
def bars(prices) -> List[Dict[str, float]]:
    """OHLC data points wrapped around the price fixture."""
    rng = np.random.default_rng(7)
    upper = rng.uniform(0.0, 0.02, len(prices))
    lower = rng.uniform(0.0, 0.02, len(prices))
    return [
        {
            'open': close,
            'high': close * (1 + up),
            'low': close * (1 - down),
            'close': close,
            'volume': 1000.0,
        }
        for close, up, down in zip(prices, upper, lower)
    ]
