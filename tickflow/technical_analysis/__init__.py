"""
tickflow Technical Analysis Library

A streaming technical indicator library: every indicator consumes one
numeric sample at a time and keeps only bounded state.

This library provides:
- A dual-mode contract on every indicator: ``evaluate`` projects the next
  output without touching state, ``apply`` commits the sample
- Explicit COLD -> WARM warm-up tracking (``is_ready`` / ``warm()``)
- Rolling window indicators (SMA, rolling max/min/stddev)
- Exponential smoothers (EMA, Wilder's smoothing) seeded with a plain mean
- Composites that delegate to owned primitives (RSI, MACD, Stochastic,
  Bollinger Bands)
- Factory and configuration helpers for building indicators by name

Example Usage:
    import tickflow.technical_analysis as ta

    # Factory pattern
    sma = ta.create('sma', period=20)
    macd = ta.create('macd', fast_period=12, slow_period=26)

    # Direct class access
    rsi = ta.RSI(period=14)
    projected = rsi.evaluate(101.5)   # state untouched
    committed = rsi.apply(101.5)      # same value, state advanced

    # Utility functions
    indicators = ta.list_indicators()
    info = ta.describe('rsi')
"""

__version__ = "1.0.0"

# Public API exports
from .base import BaseIndicator, IndicatorState
from .exceptions import (
    IndicatorError,
    InvalidParameterError,
    MissingInputError,
    InvalidDataError,
    NumericDomainError,
    IndicatorNotFoundError,
    ConfigurationError,
)
from .indicators import (
    RollingWindow, SMA, RollingMax, RollingMin, RollingStdDev,
    ExponentialSmoother, EMA, WildersSmoothing, create_smoother,
    RSI,
    BarIndicator, MACD, Stochastic, BollingerBands,
)
from .factory import (
    create,
    create_from_config,
    list_indicators,
    describe,
    validate_period,
    validate_alpha,
    validate_k_factor,
)

__all__ = [
    # Core classes
    "BaseIndicator",
    "IndicatorState",

    # Factory functions
    "create",
    "create_from_config",
    "list_indicators",
    "describe",

    # Rolling window indicators
    "RollingWindow",
    "SMA",
    "RollingMax",
    "RollingMin",
    "RollingStdDev",

    # Exponential smoothers
    "ExponentialSmoother",
    "EMA",
    "WildersSmoothing",
    "create_smoother",

    # Momentum indicators
    "RSI",

    # Composite indicators
    "BarIndicator",
    "MACD",
    "Stochastic",
    "BollingerBands",

    # Validation utilities
    "validate_period",
    "validate_alpha",
    "validate_k_factor",

    # Exceptions
    "IndicatorError",
    "InvalidParameterError",
    "MissingInputError",
    "InvalidDataError",
    "NumericDomainError",
    "IndicatorNotFoundError",
    "ConfigurationError",

    # Metadata
    "__version__",
]
