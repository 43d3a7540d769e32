"""Factory for creating technical indicators."""

import inspect
import logging
from typing import Dict, Any, Type, List, Optional, Mapping

from .base import BaseIndicator
from .exceptions import ConfigurationError, InvalidParameterError, IndicatorNotFoundError
from .indicators.trend import SMA, EMA
from .indicators.smoothing import WildersSmoothing
from .indicators.minmax import RollingMax, RollingMin
from .indicators.volatility import RollingStdDev
from .indicators.momentum import RSI
from .indicators.composite import MACD, BollingerBands, Stochastic

# Re-exported for callers that validate parameters before construction
from .validation import validate_period, validate_alpha, validate_k_factor  # noqa: F401

logger = logging.getLogger(__name__)


class IndicatorRegistry:
    """Registry for managing indicators with aliases."""

    def __init__(self):
        """Initialize registry with built-in indicators."""
        self._registry: Dict[str, Type[BaseIndicator]] = {}
        self._canonical: Dict[Type[BaseIndicator], str] = {}
        self._register_builtin_indicators()

    def _register_builtin_indicators(self) -> None:
        """Register built-in indicators."""
        # Trend indicators
        self.register('sma', SMA, aliases=['simple_ma', 'simple_moving_average'])
        self.register('ema', EMA, aliases=['exp_ma', 'exponential_moving_average'])
        self.register('wilders', WildersSmoothing, aliases=['wilders_smoothing', 'rma', 'smma'])

        # Window extrema and volatility
        self.register('rolling_max', RollingMax, aliases=['max', 'maximum_period'])
        self.register('rolling_min', RollingMin, aliases=['min', 'minimum_period'])
        self.register('rolling_stddev', RollingStdDev, aliases=['stddev', 'std'])

        # Momentum indicators
        self.register('rsi', RSI, aliases=['relative_strength_index'])

        # Composite indicators
        self.register('macd', MACD, aliases=['moving_average_convergence_divergence'])
        self.register('bollinger_bands', BollingerBands, aliases=['bbands', 'bb'])
        self.register('stochastic', Stochastic, aliases=['stoch'])

    def register(self, name: str, indicator_class: Type[BaseIndicator], aliases: Optional[List[str]] = None) -> None:
        """Register indicator with aliases."""
        name_lower = name.lower()
        self._registry[name_lower] = indicator_class
        self._canonical[indicator_class] = name_lower

        if aliases:
            for alias in aliases:
                self._registry[alias.lower()] = indicator_class

    def get(self, name: str) -> Type[BaseIndicator]:
        """Get indicator class by name."""
        name_lower = name.lower()
        if name_lower not in self._registry:
            raise IndicatorNotFoundError(name, self.list_indicators())

        return self._registry[name_lower]

    def list_indicators(self) -> List[str]:
        """List canonical indicator names, without aliases."""
        return sorted(self._canonical.values())

    def get_aliases(self, name: str) -> List[str]:
        """
        Get all aliases for an indicator.

        Args:
            name (str): Indicator name

        Returns:
            List[str]: List of all names (including aliases) for the indicator
        """
        try:
            target_class = self.get(name)
            return [key for key, cls in self._registry.items() if cls == target_class]
        except IndicatorNotFoundError:
            return []


# Global registry instance
_REGISTRY = IndicatorRegistry()


def create(name: str, **kwargs) -> BaseIndicator:
    """
    Factory function to create technical indicators by name.

    Args:
        name (str): Name of the indicator to create (case-insensitive).
            Available indicators can be listed using list_indicators().
        **kwargs: Parameters passed to the indicator constructor, e.g.
            period, input_field, fast_period, slow_period, smooth_period, k.

    Returns:
        BaseIndicator: Configured indicator instance ready for use

    Raises:
        IndicatorNotFoundError: If the indicator name is not recognized
        InvalidParameterError: If parameters are invalid or missing

    Examples:
        >>> import tickflow.technical_analysis as ta
        >>> sma = ta.create('sma', period=20)
        >>> rsi = ta.create('rsi', period=14, smoothing_strategy='ema')
        >>> macd = ta.create('MACD', fast_period=12, slow_period=26)
        >>> stoch = ta.create('stoch', period=14, smooth_period=3)
    """
    indicator_class = _REGISTRY.get(name)
    try:
        indicator = indicator_class(**kwargs)
    except TypeError as e:
        # Convert constructor signature errors to our custom exception
        sig = inspect.signature(indicator_class.__init__)
        params = list(sig.parameters.keys())[1:]  # Skip 'self'

        raise InvalidParameterError(
            parameter_name="constructor",
            value=str(kwargs),
            expected=f"valid parameters for {name}: {params}",
            indicator_name=name
        ) from e

    logger.debug(f"Created {indicator!r} from '{name}' with {kwargs}")
    return indicator


def create_from_config(section: Mapping[str, Any]) -> Dict[str, BaseIndicator]:
    """
    Build a named set of indicators from a configuration mapping.

    Each entry maps a caller-chosen name to a mapping holding the factory
    ``kind`` plus constructor parameters:

        indicators:
          fast_trend: {kind: ema, period: 12}
          momentum:   {kind: rsi, period: 14}

    Args:
        section (Mapping[str, Any]): The ``indicators`` section of a config.

    Returns:
        Dict[str, BaseIndicator]: Indicators keyed by entry name, in config order.

    Raises:
        ConfigurationError: If the section or an entry is malformed.
        IndicatorNotFoundError: If an entry names an unknown kind.
        InvalidParameterError: If an entry carries invalid parameters.
    """
    if not isinstance(section, Mapping):
        raise ConfigurationError(f"indicator section must be a mapping, got {type(section).__name__}")

    indicators: Dict[str, BaseIndicator] = {}
    for entry_name, entry in section.items():
        if not isinstance(entry, Mapping):
            raise ConfigurationError(f"entry must be a mapping, got {type(entry).__name__}", entry_name)

        params = dict(entry)
        kind = params.pop('kind', None)
        if not kind:
            raise ConfigurationError("entry has no 'kind'", entry_name)

        indicators[entry_name] = create(kind, **params)

    logger.info(f"Built {len(indicators)} indicator(s) from configuration: {', '.join(indicators)}")
    return indicators


def list_indicators() -> List[str]:
    """
    Get a list of all available indicator names.

    Returns:
        List[str]: Alphabetically sorted list of canonical indicator names

    Example:
        >>> import tickflow.technical_analysis as ta
        >>> 'macd' in ta.list_indicators()
        True
    """
    return _REGISTRY.list_indicators()


def describe(name: str) -> Dict[str, Any]:
    """
    Get detailed information about an indicator including parameters and documentation.

    Args:
        name (str): Name of the indicator to describe (case-insensitive)

    Returns:
        Dict[str, Any]: Dictionary containing:
            - name: Canonical class name
            - aliases: List of alternative names
            - parameters: Parameter information from constructor signature
            - docstring: Class documentation

    Raises:
        IndicatorNotFoundError: If the indicator name is not recognized
    """
    indicator_class = _REGISTRY.get(name)

    # Extract parameter information from constructor signature
    sig = inspect.signature(indicator_class.__init__)
    parameters = {}

    for param_name, param in sig.parameters.items():
        if param_name == 'self':
            continue

        param_info = {
            'type': param.annotation if param.annotation != inspect.Parameter.empty else 'Any',
            'default': param.default if param.default != inspect.Parameter.empty else None,
            'required': param.default == inspect.Parameter.empty
        }
        parameters[param_name] = param_info

    return {
        'name': indicator_class.__name__,
        'aliases': _REGISTRY.get_aliases(name),
        'parameters': parameters,
        'docstring': indicator_class.__doc__,
    }
