"""Configuration management for swflaunch."""

from swflaunch.config.config_manager import get_config
from swflaunch.config.config_manager import reset_config
from swflaunch.config.config_manager import set_config
from swflaunch.config.launcher_config import DEFAULT_CONFIG
from swflaunch.config.launcher_config import LauncherConfig

__all__ = [
    "DEFAULT_CONFIG",
    "LauncherConfig",
    "get_config",
    "reset_config",
    "set_config",
]
