"""
Configuration utility for the renderer.
"""

import copy
import logging
import os
import json
from typing import Dict, Any, Optional
import threading

logger = logging.getLogger(__name__)

DEFAULT_CONFIG: Dict[str, Any] = {
    "viewport": {
        "width": 640,
        "height": 480,
        "anchor_x": 0,
        "anchor_y": 0
    },
    "cascade": {
        "strict_id_matching": False
    },
    "rendering": {
        "background": "#ffffff"
    },
    "logging": {
        "console_level": "INFO",
        "file_level": "DEBUG",
        "log_to_file": False
    }
}


def get_default_config_path() -> str:
    """
    Get the default configuration file path.

    Returns:
        str: Path to ~/.wink_render/config.json
    """
    return os.path.join(os.path.expanduser("~"), ".wink_render", "config.json")


class Config:
    """Configuration manager for the renderer."""

    def __init__(self, config_path: Optional[str] = None):
        """
        Initialize the configuration manager.

        Args:
            config_path: Path to the config file
        """
        self.config_path = config_path or get_default_config_path()
        self.config: Dict[str, Any] = {}
        self._lock = threading.Lock()

        self.load()

        logger.debug(f"Configuration initialized (config_path: {self.config_path})")

    def load(self) -> None:
        """Load configuration from file, falling back to defaults."""
        self._set_defaults()

        if not os.path.exists(self.config_path):
            logger.debug(f"Configuration file not found at {self.config_path}, using defaults")
            return

        try:
            with open(self.config_path, 'r') as f:
                loaded = json.load(f)
        except (OSError, ValueError) as e:
            logger.error(f"Error loading configuration: {e}")
            return

        if not isinstance(loaded, dict):
            logger.error(f"Configuration in {self.config_path} is not a JSON object, using defaults")
            return

        with self._lock:
            _merge(self.config, loaded)
        logger.debug(f"Configuration loaded from {self.config_path}")

    def save(self) -> None:
        """Save configuration to file."""
        with self._lock:
            config_copy = copy.deepcopy(self.config)

        config_dir = os.path.dirname(self.config_path)
        if config_dir:
            os.makedirs(config_dir, exist_ok=True)

        with open(self.config_path, 'w') as f:
            json.dump(config_copy, f, indent=4)

        logger.debug(f"Configuration saved to {self.config_path}")

    def get(self, key: str, default: Any = None) -> Any:
        """
        Get a configuration value.

        Args:
            key: Configuration key (can be nested using dots, e.g. 'viewport.width')
            default: Default value if key doesn't exist

        Returns:
            Any: Configuration value or default
        """
        with self._lock:
            parts = key.split('.')
            config = self.config

            for part in parts[:-1]:
                if part not in config or not isinstance(config[part], dict):
                    return default
                config = config[part]

            return config.get(parts[-1], default)

    def set(self, key: str, value: Any) -> None:
        """
        Set a configuration value.

        Args:
            key: Configuration key (can be nested using dots, e.g. 'viewport.width')
            value: Configuration value
        """
        with self._lock:
            parts = key.split('.')
            config = self.config

            for part in parts[:-1]:
                if not isinstance(config.get(part), dict):
                    config[part] = {}
                config = config[part]

            config[parts[-1]] = value

    def remove(self, key: str) -> bool:
        """
        Remove a configuration value.

        Args:
            key: Configuration key

        Returns:
            bool: True if key was removed
        """
        with self._lock:
            parts = key.split('.')
            config = self.config

            for part in parts[:-1]:
                if part not in config or not isinstance(config[part], dict):
                    return False
                config = config[part]

            if parts[-1] in config:
                del config[parts[-1]]
                return True
            return False

    def get_all(self) -> Dict[str, Any]:
        """
        Get all configuration values.

        Returns:
            Dict[str, Any]: Copy of all configuration values
        """
        with self._lock:
            return copy.deepcopy(self.config)

    def _set_defaults(self) -> None:
        """Set default configuration values."""
        with self._lock:
            self.config = copy.deepcopy(DEFAULT_CONFIG)


def _merge(target: Dict[str, Any], source: Dict[str, Any]) -> None:
    """Recursively merge ``source`` into ``target``."""
    for key, value in source.items():
        if isinstance(value, dict) and isinstance(target.get(key), dict):
            _merge(target[key], value)
        else:
            target[key] = value
