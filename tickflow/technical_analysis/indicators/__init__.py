"""
Technical Analysis Indicators Module

Concrete streaming indicators built on BaseIndicator.
"""

from .window import RollingWindow
from .smoothing import ExponentialSmoother, WildersSmoothing
from .trend import SMA, EMA
from .minmax import RollingMax, RollingMin
from .volatility import RollingStdDev
from .momentum import RSI, create_smoother, SMOOTHING_METHODS
from .composite import BarIndicator, MACD, Stochastic, BollingerBands

__all__ = [
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
    "SMOOTHING_METHODS",

    # Momentum indicators
    "RSI",

    # Composite indicators
    "BarIndicator",
    "MACD",
    "Stochastic",
    "BollingerBands",
]
