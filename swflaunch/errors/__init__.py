"""Error types for the swflaunch runtime launcher."""

from swflaunch.errors.launcher_errors import ConfigurationError
from swflaunch.errors.launcher_errors import LauncherError

__all__ = [
    "ConfigurationError",
    "LauncherError",
]
