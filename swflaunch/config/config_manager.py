"""Process-wide launcher configuration with thread-safe access."""

from __future__ import annotations

import logging
import threading

from swflaunch.config.launcher_config import DEFAULT_CONFIG
from swflaunch.config.launcher_config import LauncherConfig

logger = logging.getLogger(__name__)


class ConfigManager:
    """Thread-safe holder for the current launcher configuration."""

    def __init__(self, default_config: LauncherConfig) -> None:
        self._lock = threading.RLock()
        self._default_config = default_config
        self._current_config = default_config

    def get_config(self) -> LauncherConfig:
        with self._lock:
            return self._current_config

    def set_config(self, config: LauncherConfig) -> None:
        """Validate and install ``config``; the previous one stays on failure."""
        with self._lock:
            config.validate()
            self._current_config = config
            logger.debug("Launcher config set: %s", config)

    def reset_config(self) -> None:
        with self._lock:
            self._current_config = self._default_config


_config_manager = ConfigManager(DEFAULT_CONFIG)


def get_config() -> LauncherConfig:
    """Get the current configuration in a thread-safe manner."""
    return _config_manager.get_config()


def set_config(config: LauncherConfig) -> None:
    """Set the current configuration in a thread-safe manner.

    Args:
        config: The new configuration to set

    Raises:
        ConfigurationError: If ``config`` does not validate.
    """
    _config_manager.set_config(config)


def reset_config() -> None:
    """Reset configuration to defaults."""
    _config_manager.reset_config()
