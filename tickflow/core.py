import yaml
import logging
import logging.config
from typing import Any, Dict

from .technical_analysis import BaseIndicator, create_from_config

logger = logging.getLogger(__name__)


class ConfigLoader:
    """Loads and manages tickflow configuration from a YAML file."""
    def __init__(self, config_path: str):
        """Initialize with path to config file."""
        self.config_path = config_path
        self.config = self._load_config()

    def _load_config(self) -> Dict[str, Any]:
        """Load YAML configuration file; an empty file yields an empty config."""
        try:
            with open(self.config_path, 'r') as f:
                return yaml.safe_load(f) or {}
        except FileNotFoundError:
            logger.error(f"Configuration file not found at '{self.config_path}'")
            raise
        except yaml.YAMLError as e:
            logger.error(f"Malformed YAML in configuration file: {e}")
            raise

    def get(self, key: str, default: Any = None) -> Any:
        """Get configuration value by key with optional default."""
        return self.config.get(key, default)

    def __getitem__(self, key: str) -> Any:
        """Dictionary-style access to config."""
        return self.config[key]

    def get_all(self) -> Dict[str, Any]:
        """Return entire configuration dictionary."""
        return self.config

    def build_indicators(self, key: str = 'indicators') -> Dict[str, BaseIndicator]:
        """Create the indicator set declared under ``key``."""
        return create_from_config(self.get(key, {}))


def setup_logging(config: Dict[str, Any]) -> None:
    """Configure application logging with fallback to basic config."""
    try:
        logging.config.dictConfig(config)
        logging.info("Logging configured successfully from config file.")
    except (ValueError, TypeError, AttributeError, KeyError) as e:
        # Fallback to a basic configuration if the one in the file is malformed
        logging.basicConfig(level=logging.INFO,
                            format="%(asctime)s - %(levelname)s - %(message)s")
        logging.warning(f"Could not configure logging from dict: {e}. Using basic config.")
